"""
Whole-document builds: the event streams a grammar parser would emit for
small feature files, replayed through the driver.
"""

from gherkin_ast.builder.core.classes import *
from gherkin_ast.builder.core.tokens import RuleType
from gherkin_ast.driver import build_document, replay

from factory_helpers import *


def minimal_feature_events():
    # Feature: F
    #   Scenario: S
    #     Given a
    return rule(
        RuleType.GHERKIN_DOCUMENT,
        rule(
            RuleType.FEATURE,
            rule(RuleType.FEATURE_HEADER, get_feature_line("F", line=1)),
            rule(
                RuleType.SCENARIO_DEFINITION,
                rule(
                    RuleType.SCENARIO,
                    get_scenario_line("S", line=3),
                    rule(RuleType.STEP, get_step_line("a", line=4)),
                ),
            ),
        ),
    )


def test_minimal_feature():
    document = build_document(minimal_feature_events(), uri="features/minimal.feature")

    assert document.uri == "features/minimal.feature"
    feature = document.feature
    assert feature.name == "F"
    assert len(feature.children) == 1

    scenario = feature.children[0].scenario
    assert scenario.name == "S"
    assert len(scenario.steps) == 1
    assert scenario.steps[0].text == "a"


def test_examples_table_with_two_rows():
    events = rule(
        RuleType.GHERKIN_DOCUMENT,
        rule(
            RuleType.FEATURE,
            rule(RuleType.FEATURE_HEADER, get_feature_line("F")),
            rule(
                RuleType.SCENARIO_DEFINITION,
                rule(
                    RuleType.SCENARIO,
                    get_scenario_line("O", line=2, keyword="Scenario Outline"),
                    rule(
                        RuleType.EXAMPLES_DEFINITION,
                        rule(
                            RuleType.EXAMPLES,
                            get_examples_line(line=3),
                            rule(RuleType.EXAMPLES_TABLE, get_table_row(["a", "b"], line=4), get_table_row(["1", "2"], line=5)),
                        ),
                    ),
                ),
            ),
        ),
    )

    examples = build_document(events).feature.children[0].scenario.examples[0]

    assert len(examples.table_header.cells) == 2
    assert len(examples.table_body) == 1
    assert len(examples.table_body[0].cells) == 2


def test_full_document_with_rules_and_comments():
    # language: en
    # @tag
    # Feature: Accounts
    #   Background: ...
    #   Rule: Overdraft
    #     Scenario: refuse
    events = rule(
        RuleType.GHERKIN_DOCUMENT,
        get_comment("# top", line=1),
        rule(
            RuleType.FEATURE,
            rule(
                RuleType.FEATURE_HEADER,
                get_token(TokenType.LANGUAGE, line=2, text="en"),
                rule(RuleType.TAGS, get_tag_line(["@tag"], line=3)),
                get_feature_line("Accounts", line=4),
            ),
            rule(
                RuleType.BACKGROUND,
                get_background_line(line=5),
                rule(
                    RuleType.STEP,
                    get_step_line("an account", line=6),
                    rule(RuleType.DATA_TABLE, get_table_row(["id", "balance"], line=7), get_table_row(["1", "0"], line=8)),
                ),
            ),
            rule(
                RuleType.RULE,
                rule(RuleType.RULE_HEADER, get_rule_line("Overdraft", line=10)),
                rule(
                    RuleType.SCENARIO_DEFINITION,
                    rule(
                        RuleType.SCENARIO,
                        get_scenario_line("refuse", line=11),
                        get_comment("# inside", line=12),
                        rule(RuleType.STEP, get_step_line("I withdraw", line=13, keyword="When ")),
                    ),
                ),
            ),
        ),
    )

    result = replay(events, uri="accounts.feature")
    assert result.ok

    document = result.document
    feature = document.feature
    assert [t.name for t in feature.tags] == ["@tag"]
    assert [c.kind for c in feature.children] == ["background", "rule"]

    background = feature.children[0].background
    assert background.steps[0].data_table.rows[1].cells[1].value == "0"

    overdraft = feature.children[1].rule
    assert overdraft.children[0].scenario.steps[0].keyword == "When "
    assert [c.text for c in document.comments] == ["# top", "# inside"]


def test_comment_only_document():
    events = rule(RuleType.GHERKIN_DOCUMENT, get_comment("# nothing here"))
    document = build_document(events)
    assert document.feature is None
    assert len(document.comments) == 1


def test_document_round_trips_through_json():
    document = build_document(minimal_feature_events(), uri="m.feature")
    assert GherkinDocument.model_validate_json(document.model_dump_json(by_alias=True)) == document
