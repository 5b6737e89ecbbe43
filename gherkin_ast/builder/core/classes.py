"""
Defines the typed document model produced by the AST builder.

Each element is an immutable pydantic model carrying the `Location` of the
token that introduced it. Field names are snake_case in Python and dump as
camelCase (`model_dump(by_alias=True)`) to match the message schema consumed
downstream.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .tokens import Location

__all__ = [
    "GherkinModel",
    "ASTNode",
    "Comment",
    "Tag",
    "TableCell",
    "TableRow",
    "DataTable",
    "DocString",
    "Step",
    "Examples",
    "Scenario",
    "Background",
    "BackgroundChild",
    "ScenarioChild",
    "RuleChild",
    "Rule",
    "FeatureRuleChild",
    "FeatureChild",
    "Feature",
    "GherkinDocument",
]


class GherkinModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ASTNode(GherkinModel):
    """A base class for all located document elements."""

    location: Location


# --- Leaves ---


class Comment(ASTNode):
    text: str


class Tag(ASTNode):
    name: str


class TableCell(ASTNode):
    value: str


class TableRow(ASTNode):
    cells: List[TableCell] = []


# --- Step arguments ---


class DataTable(ASTNode):
    rows: List[TableRow]


class DocString(ASTNode):
    content_type: str = ""
    content: str = ""
    delimiter: str = ""


class Step(ASTNode):
    keyword: str
    text: str
    doc_string: Optional[DocString] = None
    data_table: Optional[DataTable] = None

    @property
    def argument(self) -> Optional[Union[DataTable, DocString]]:
        return self.data_table or self.doc_string


# --- Scenarios ---


class Examples(ASTNode):
    tags: List[Tag] = []
    keyword: str
    name: str
    description: str = ""
    table_header: Optional[TableRow] = None
    table_body: List[TableRow] = []


class Scenario(ASTNode):
    tags: List[Tag] = []
    keyword: str
    name: str
    description: str = ""
    steps: List[Step] = []
    examples: List[Examples] = []


class Background(ASTNode):
    keyword: str
    name: str
    description: str = ""
    steps: List[Step] = []


# --- Tagged children ---


class BackgroundChild(GherkinModel):
    kind: Literal["background"] = "background"
    background: Background

    @property
    def value(self) -> Background:
        return self.background


class ScenarioChild(GherkinModel):
    kind: Literal["scenario"] = "scenario"
    scenario: Scenario

    @property
    def value(self) -> Scenario:
        return self.scenario


RuleChild = Annotated[Union[BackgroundChild, ScenarioChild], Field(discriminator="kind")]


class Rule(ASTNode):
    keyword: str
    name: str
    description: str = ""
    children: List[RuleChild] = []


class FeatureRuleChild(GherkinModel):
    kind: Literal["rule"] = "rule"
    rule: Rule

    @property
    def value(self) -> Rule:
        return self.rule


FeatureChild = Annotated[Union[BackgroundChild, ScenarioChild, FeatureRuleChild], Field(discriminator="kind")]


# --- Top-level Structures ---


class Feature(ASTNode):
    tags: List[Tag] = []
    language: str = ""
    keyword: str
    name: str
    description: str = ""
    children: List[FeatureChild] = []


class GherkinDocument(GherkinModel):
    """The root of the document tree for a single feature file."""

    uri: str = ""
    feature: Optional[Feature] = None
    comments: List[Comment] = []
