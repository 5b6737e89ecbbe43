from typing import List, Optional

from gherkin_ast.config import COMMENT_TOKEN_TYPE
from gherkin_ast.exceptions import AstBuilderError

from .ast_node import AstNode
from .core.classes import Comment, GherkinDocument
from .core.tokens import RuleType, Token
from .transformer import GherkinTransformer


class AstBuilder:
    """
    Assembles a GherkinDocument from the event stream of the grammar parser.

    The parser calls `start_rule` / `build` / `end_rule` in the order of a
    depth-first walk of its parse tree. The builder mirrors that walk with a
    stack of open AstNodes whose bottom is a `RuleType.NONE` root; closing a
    rule transforms its node and files the result on the parent. Comments
    are not part of the grammar tree and are kept aside until the document
    itself is assembled.

    One builder serves one source unit at a time; call `reset` before
    reusing it.
    """

    def __init__(self, uri: str = ""):
        self.uri = uri
        self.reset()

    def reset(self):
        self._comments: List[Comment] = []
        self._stack: List[AstNode] = [AstNode(RuleType.NONE)]
        self._transformer = GherkinTransformer(self.uri, self._comments)

    @property
    def current_node(self) -> AstNode:
        return self._stack[-1]

    @property
    def stack_depth(self) -> int:
        return len(self._stack)

    @property
    def comments(self) -> List[Comment]:
        return list(self._comments)

    def build(self, token: Token):
        if token.token_type == COMMENT_TOKEN_TYPE:
            self._comments.append(Comment(location=token.location, text=token.text))
        else:
            self.current_node.add(token.token_type.rule_type, token)

    def start_rule(self, rule_type: RuleType):
        self._stack.append(AstNode(rule_type))

    def end_rule(self, rule_type: RuleType):
        """
        Closes the innermost rule. If the transformer reports an error, its
        partial result is still filed on the parent before the error is
        re-raised, so the caller may keep driving the builder.
        """
        node = self._stack.pop()
        try:
            transformed = self.transform_node(node)
        except AstBuilderError as e:
            self.current_node.add(node.rule_type, e.partial_result)
            raise
        self.current_node.add(node.rule_type, transformed)

    def transform_node(self, node: AstNode):
        return self._transformer.transform_node(node)

    def get_gherkin_document(self) -> Optional[GherkinDocument]:
        document = self.current_node.get_single(RuleType.GHERKIN_DOCUMENT)
        return document if isinstance(document, GherkinDocument) else None

    # Names used by parsers that speak in leaves and rules
    accept_leaf = build
    open_rule = start_rule
    close_rule = end_rule
    get_result = get_gherkin_document
    get_document = get_gherkin_document
