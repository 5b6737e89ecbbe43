"""
Leaf data consumed by the builder: token and rule categories, source
locations and the tokens the external parser hands over.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


# Positions travel downstream as uint32
MAX_POSITION = 2**32 - 1


class Location(BaseModel):
    """A 1-based line/column position in the source text."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0, le=MAX_POSITION)
    column: int = Field(ge=0, le=MAX_POSITION)


class TokenType(Enum):
    EOF = "EOF"
    EMPTY = "Empty"
    COMMENT = "Comment"
    TAG_LINE = "TagLine"
    FEATURE_LINE = "FeatureLine"
    RULE_LINE = "RuleLine"
    BACKGROUND_LINE = "BackgroundLine"
    SCENARIO_LINE = "ScenarioLine"
    EXAMPLES_LINE = "ExamplesLine"
    STEP_LINE = "StepLine"
    DOC_STRING_SEPARATOR = "DocStringSeparator"
    TABLE_ROW = "TableRow"
    LANGUAGE = "Language"
    OTHER = "Other"

    @property
    def rule_type(self) -> "RuleType":
        """The rule category leaves of this type are filed under."""
        return RuleType("_" + self.value)


class RuleType(Enum):
    NONE = "None"

    # Leaf categories, one per token type
    LEAF_EOF = "_EOF"
    LEAF_EMPTY = "_Empty"
    LEAF_COMMENT = "_Comment"
    LEAF_TAG_LINE = "_TagLine"
    LEAF_FEATURE_LINE = "_FeatureLine"
    LEAF_RULE_LINE = "_RuleLine"
    LEAF_BACKGROUND_LINE = "_BackgroundLine"
    LEAF_SCENARIO_LINE = "_ScenarioLine"
    LEAF_EXAMPLES_LINE = "_ExamplesLine"
    LEAF_STEP_LINE = "_StepLine"
    LEAF_DOC_STRING_SEPARATOR = "_DocStringSeparator"
    LEAF_TABLE_ROW = "_TableRow"
    LEAF_LANGUAGE = "_Language"
    LEAF_OTHER = "_Other"

    # Grammar productions
    GHERKIN_DOCUMENT = "GherkinDocument"
    FEATURE = "Feature"
    FEATURE_HEADER = "FeatureHeader"
    RULE = "Rule"
    RULE_HEADER = "RuleHeader"
    BACKGROUND = "Background"
    SCENARIO_DEFINITION = "ScenarioDefinition"
    SCENARIO = "Scenario"
    EXAMPLES_DEFINITION = "ExamplesDefinition"
    EXAMPLES = "Examples"
    EXAMPLES_TABLE = "ExamplesTable"
    STEP = "Step"
    STEP_ARG = "StepArg"
    DATA_TABLE = "DataTable"
    DOC_STRING = "DocString"
    TAGS = "Tags"
    DESCRIPTION_HELPER = "DescriptionHelper"
    DESCRIPTION = "Description"


@dataclass(frozen=True)
class Item:
    """A cell of a table row or a tag of a tag line."""

    column: int
    text: str


@dataclass(frozen=True)
class Token:
    token_type: TokenType
    location: Location
    keyword: str = ""
    text: str = ""
    items: Tuple[Item, ...] = ()
    # Only set on the feature line
    gherkin_dialect: Optional[str] = None
