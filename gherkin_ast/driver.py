"""
Replays a recorded grammar event stream into an AstBuilder.

This is the consumer side of the builder: it plays the part of the grammar
parser for one source unit, keeps building past table errors (collecting
them, as the parser does) and checks the stream nests correctly.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .builder.ast_builder import AstBuilder
from .builder.core.classes import GherkinDocument
from .builder.core.tokens import RuleType, Token
from .exceptions import AstBuilderError, CompositeParserError, ErrorCode, InternalBuilderError

logger = logging.getLogger(__name__)


class Event(BaseModel):
    """A single parser callback: a rule opening, a rule closing or a leaf token."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["start", "end", "token"]
    rule_type: Optional[RuleType] = None
    token: Optional[Token] = None

    @model_validator(mode="after")
    def check_payload_matches_kind(self) -> "Event":
        if self.kind == "token" and self.token is None:
            raise ValueError("a 'token' event needs a token")
        if self.kind != "token" and self.rule_type is None:
            raise ValueError(f"a '{self.kind}' event needs a rule_type")
        return self

    @classmethod
    def start(cls, rule_type: RuleType) -> "Event":
        return cls(kind="start", rule_type=rule_type)

    @classmethod
    def end(cls, rule_type: RuleType) -> "Event":
        return cls(kind="end", rule_type=rule_type)

    @classmethod
    def leaf(cls, token: Token) -> "Event":
        return cls(kind="token", token=token)


@dataclass
class BuildResult:
    document: Optional[GherkinDocument]
    errors: List[AstBuilderError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _unbalanced(details: str) -> InternalBuilderError:
    return InternalBuilderError(ErrorCode.UNBALANCED_EVENT_STREAM.value.format(details=details))


def replay(
    events: Iterable[Event],
    uri: str = "",
    builder: Optional[AstBuilder] = None,
    stop_on_error: bool = False,
) -> BuildResult:
    """
    Drives `builder` (a fresh one for `uri` if omitted) with `events`.

    Table errors raised while closing rules are collected and building
    continues, unless `stop_on_error` is set. A stream whose rules do not
    nest raises InternalBuilderError.
    """
    if builder is None:
        builder = AstBuilder(uri)
    builder.reset()

    logger.debug("Building document for '%s'", builder.uri or "<unknown>")

    open_rules: List[RuleType] = []
    errors: List[AstBuilderError] = []

    for event in events:
        if event.kind == "token":
            builder.build(event.token)
        elif event.kind == "start":
            open_rules.append(event.rule_type)
            builder.start_rule(event.rule_type)
        else:
            if not open_rules:
                raise _unbalanced(f"'{event.rule_type.value}' closed while no rule is open")
            if open_rules[-1] != event.rule_type:
                raise _unbalanced(f"'{event.rule_type.value}' closed while '{open_rules[-1].value}' is open")
            open_rules.pop()
            try:
                builder.end_rule(event.rule_type)
            except AstBuilderError as e:
                logger.debug("Error closing '%s': %s", event.rule_type.value, e)
                errors.append(e)
                if stop_on_error:
                    return BuildResult(document=builder.get_gherkin_document(), errors=errors)

    if open_rules:
        raise _unbalanced(f"'{open_rules[-1].value}' was never closed")

    return BuildResult(document=builder.get_gherkin_document(), errors=errors)


def build_document(events: Iterable[Event], uri: str = "") -> Optional[GherkinDocument]:
    """High-level entry point: replay the events, raising if any rule failed."""
    result = replay(events, uri=uri)
    if result.errors:
        raise CompositeParserError(result.errors)
    return result.document
