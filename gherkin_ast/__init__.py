from .builder.ast_builder import AstBuilder
from .builder.ast_node import AstNode
from .builder.core.classes import *
from .builder.core.tokens import Item, Location, RuleType, Token, TokenType
from .driver import BuildResult, Event, build_document, replay
from .exceptions import AstBuilderError, CompositeParserError, ErrorCode, GherkinError, InconsistentCellCountError, InternalBuilderError
