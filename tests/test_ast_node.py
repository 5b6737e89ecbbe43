from gherkin_ast.builder.ast_node import AstNode
from gherkin_ast.builder.core.tokens import RuleType, TokenType

from factory_helpers import *


def test_items_keep_arrival_order_per_category():
    node = AstNode(RuleType.SCENARIO)
    first, second = get_step_line("a", line=2), get_step_line("b", line=3)
    node.add(RuleType.STEP, first)
    node.add(RuleType.DESCRIPTION, "desc")
    node.add(RuleType.STEP, second)

    assert node.get_items(RuleType.STEP) == [first, second]
    assert node.get_single(RuleType.STEP) is first
    assert node.get_single(RuleType.DESCRIPTION) == "desc"


def test_missing_category_yields_defaults():
    node = AstNode(RuleType.BACKGROUND)

    assert node.get_single(RuleType.DESCRIPTION) is None
    assert node.get_single(RuleType.DESCRIPTION, "") == ""
    assert node.get_items(RuleType.STEP) == []
    assert node.get_token(TokenType.BACKGROUND_LINE) is None
    assert node.get_tokens(TokenType.OTHER) == []


def test_get_items_returns_a_copy():
    node = AstNode(RuleType.SCENARIO)
    node.add(RuleType.STEP, "x")
    node.get_items(RuleType.STEP).append("y")
    assert node.get_items(RuleType.STEP) == ["x"]


def test_tokens_are_filed_under_their_leaf_category():
    token = get_scenario_line("S")
    node = AstNode(RuleType.SCENARIO)
    node.add(token.token_type.rule_type, token)

    assert TokenType.SCENARIO_LINE.rule_type == RuleType.LEAF_SCENARIO_LINE
    assert node.get_token(TokenType.SCENARIO_LINE) is token


def test_token_accessors_ignore_non_token_children():
    node = AstNode(RuleType.DESCRIPTION)
    node.add(RuleType.LEAF_OTHER, AstNode(RuleType.TAGS))
    node.add(RuleType.LEAF_OTHER, get_other("line"))

    assert node.get_token(TokenType.OTHER) is None
    assert [t.text for t in node.get_tokens(TokenType.OTHER)] == ["line"]


def test_every_token_type_maps_to_a_rule_type():
    for token_type in TokenType:
        assert token_type.rule_type.value == "_" + token_type.value
