from typing import Any, List

from gherkin_ast.config import RULE_TRANSFORMERS
from gherkin_ast.exceptions import InconsistentCellCountError

from . import helpers
from .ast_node import AstNode
from .core.classes import *
from .core.tokens import RuleType, TokenType


class GherkinTransformer:
    """
    Turns a closed AstNode into its typed document element.
    The way this works is straightforward: each rule category listed in
    RULE_TRANSFORMERS has a method of the same name, called with the node
    once its rule closes. Nested rules always close first, so every child a
    method looks at has already been transformed. Categories without a
    method are returned untouched for their parent to unwrap.

    A rule whose defining token is missing yields None rather than an error;
    the grammar allows empty and comment-only documents.
    """

    def __init__(self, uri: str, comments: List[Comment]):
        self.uri = uri
        self.comments = comments

    def transform_node(self, node: AstNode) -> Any:
        method_name = RULE_TRANSFORMERS.get(node.rule_type)
        if method_name is None:
            return node
        return getattr(self, method_name)(node)

    # --- Steps and step arguments ---
    def step(self, node: AstNode):
        step_line = node.get_token(TokenType.STEP_LINE)
        if step_line is None:
            return None

        # A data table wins over a doc string; the grammar never attaches both.
        data_table = node.get_single(RuleType.DATA_TABLE)
        doc_string = None
        if not isinstance(data_table, DataTable):
            data_table = None
            doc_string = node.get_single(RuleType.DOC_STRING)
            if not isinstance(doc_string, DocString):
                doc_string = None

        return Step(
            location=step_line.location,
            keyword=step_line.keyword,
            text=step_line.text,
            data_table=data_table,
            doc_string=doc_string,
        )

    def doc_string(self, node: AstNode):
        separator = node.get_token(TokenType.DOC_STRING_SEPARATOR)
        if separator is None:
            return None
        content = "\n".join(token.text for token in node.get_tokens(TokenType.OTHER))
        return DocString(location=separator.location, content_type=separator.text, content=content, delimiter=separator.keyword)

    def data_table(self, node: AstNode):
        try:
            rows = helpers.table_rows(node.get_tokens(TokenType.TABLE_ROW))
        except InconsistentCellCountError as e:
            e.partial_result = self._make_data_table(e.partial_result)
            raise
        return self._make_data_table(rows)

    def _make_data_table(self, rows: List[TableRow]):
        if not rows:
            return None
        return DataTable(location=rows[0].location, rows=rows)

    # --- Background and scenarios ---
    def background(self, node: AstNode):
        background_line = node.get_token(TokenType.BACKGROUND_LINE)
        if background_line is None:
            return None
        return Background(
            location=background_line.location,
            keyword=background_line.keyword,
            name=background_line.text,
            description=helpers.description(node),
            steps=helpers.steps(node),
        )

    def scenario_definition(self, node: AstNode):
        # Tags hang off the definition, the rest off the wrapped Scenario.
        scenario_node = node.get_single(RuleType.SCENARIO)
        if not isinstance(scenario_node, AstNode):
            return None
        scenario_line = scenario_node.get_token(TokenType.SCENARIO_LINE)
        if scenario_line is None:
            return None

        return Scenario(
            tags=helpers.tags(node),
            location=scenario_line.location,
            keyword=scenario_line.keyword,
            name=scenario_line.text,
            description=helpers.description(scenario_node),
            steps=helpers.steps(scenario_node),
            examples=helpers.examples(scenario_node),
        )

    def examples_definition(self, node: AstNode):
        examples_node = node.get_single(RuleType.EXAMPLES)
        if not isinstance(examples_node, AstNode):
            return None
        examples_line = examples_node.get_token(TokenType.EXAMPLES_LINE)
        if examples_line is None:
            return None

        table_header = None
        table_body = []
        rows = examples_node.get_single(RuleType.EXAMPLES_TABLE)
        if isinstance(rows, list) and rows:
            table_header = rows[0]
            table_body = rows[1:]

        return Examples(
            tags=helpers.tags(node),
            location=examples_line.location,
            keyword=examples_line.keyword,
            name=examples_line.text,
            description=helpers.description(examples_node),
            table_header=table_header,
            table_body=table_body,
        )

    def examples_table(self, node: AstNode):
        # Split into header and body one level up, in examples_definition.
        return helpers.table_rows(node.get_tokens(TokenType.TABLE_ROW))

    def description(self, node: AstNode):
        return helpers.description_text(node.get_tokens(TokenType.OTHER))

    # --- Top-level Structures ---
    def feature(self, node: AstNode):
        header = node.get_single(RuleType.FEATURE_HEADER)
        if not isinstance(header, AstNode):
            return None
        feature_line = header.get_token(TokenType.FEATURE_LINE)
        if feature_line is None:
            return None

        children = []
        background = node.get_single(RuleType.BACKGROUND)
        if isinstance(background, Background):
            children.append(BackgroundChild(background=background))
        children.extend(ScenarioChild(scenario=scenario) for scenario in helpers.scenarios(node))
        children.extend(FeatureRuleChild(rule=rule) for rule in helpers.rules(node))

        return Feature(
            tags=helpers.tags(header),
            location=feature_line.location,
            language=feature_line.gherkin_dialect or "",
            keyword=feature_line.keyword,
            name=feature_line.text,
            description=helpers.description(header),
            children=children,
        )

    def rule(self, node: AstNode):
        header = node.get_single(RuleType.RULE_HEADER)
        if not isinstance(header, AstNode):
            return None
        rule_line = header.get_token(TokenType.RULE_LINE)
        if rule_line is None:
            return None

        children = []
        background = node.get_single(RuleType.BACKGROUND)
        if isinstance(background, Background):
            children.append(BackgroundChild(background=background))
        children.extend(ScenarioChild(scenario=scenario) for scenario in helpers.scenarios(node))

        return Rule(
            location=rule_line.location,
            keyword=rule_line.keyword,
            name=rule_line.text,
            description=helpers.description(header),
            children=children,
        )

    def gherkin_document(self, node: AstNode):
        feature = node.get_single(RuleType.FEATURE)
        return GherkinDocument(
            uri=self.uri,
            feature=feature if isinstance(feature, Feature) else None,
            comments=list(self.comments),
        )
