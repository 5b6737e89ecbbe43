"""
Static configuration data for the Gherkin AST builder.
This includes the rule categories the transformer knows how to assemble and
the token category kept out of the document tree.
"""

from gherkin_ast.builder.core.tokens import RuleType, TokenType

# Comments are collected per document instead of being filed in the tree.
COMMENT_TOKEN_TYPE = TokenType.COMMENT

# Maps each rule category to the transformer method that assembles it.
# Rule categories not listed here (FeatureHeader, RuleHeader, Scenario,
# Examples, Tags, ...) stay generic nodes and are unwrapped by their parent.
RULE_TRANSFORMERS = {
    RuleType.STEP: "step",
    RuleType.DOC_STRING: "doc_string",
    RuleType.DATA_TABLE: "data_table",
    RuleType.BACKGROUND: "background",
    RuleType.SCENARIO_DEFINITION: "scenario_definition",
    RuleType.EXAMPLES_DEFINITION: "examples_definition",
    RuleType.EXAMPLES_TABLE: "examples_table",
    RuleType.DESCRIPTION: "description",
    RuleType.FEATURE: "feature",
    RuleType.RULE: "rule",
    RuleType.GHERKIN_DOCUMENT: "gherkin_document",
}
