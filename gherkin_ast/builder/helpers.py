from typing import List, Sequence

from gherkin_ast.exceptions import InconsistentCellCountError

from .ast_node import AstNode
from .core.classes import Examples, Rule, Scenario, Step, TableCell, TableRow, Tag
from .core.tokens import Location, RuleType, Token, TokenType


def table_rows(tokens: Sequence[Token]) -> List[TableRow]:
    """
    Builds one TableRow per table-row token and checks the table is
    rectangular. On a mismatch the rows built so far travel with the error
    as its `partial_result`.
    """
    rows = [TableRow(location=token.location, cells=table_cells(token)) for token in tokens]
    ensure_cell_count(rows)
    return rows


def ensure_cell_count(rows: List[TableRow]):
    if len(rows) <= 1:
        return
    cell_count = len(rows[0].cells)
    for row in rows:
        if len(row.cells) != cell_count:
            raise InconsistentCellCountError(location=row.location, partial_result=rows)


def table_cells(token: Token) -> List[TableCell]:
    # Cells sit on the row's line, at the column of their own item.
    return [TableCell(location=Location(line=token.location.line, column=item.column), value=item.text) for item in token.items]


def tags(node: AstNode) -> List[Tag]:
    """Flattens the tag lines of the node's Tags child, if it has one."""
    tags_node = node.get_single(RuleType.TAGS)
    if not isinstance(tags_node, AstNode):
        return []

    result = []
    for token in tags_node.get_tokens(TokenType.TAG_LINE):
        for item in token.items:
            result.append(Tag(location=Location(line=token.location.line, column=item.column), name=item.text))
    return result


def steps(node: AstNode) -> List[Step]:
    return [step for step in node.get_items(RuleType.STEP) if isinstance(step, Step)]


def examples(node: AstNode) -> List[Examples]:
    return [ex for ex in node.get_items(RuleType.EXAMPLES_DEFINITION) if isinstance(ex, Examples)]


def scenarios(node: AstNode) -> List[Scenario]:
    return [sc for sc in node.get_items(RuleType.SCENARIO_DEFINITION) if isinstance(sc, Scenario)]


def rules(node: AstNode) -> List[Rule]:
    return [rule for rule in node.get_items(RuleType.RULE) if isinstance(rule, Rule)]


def description(node: AstNode) -> str:
    value = node.get_single(RuleType.DESCRIPTION)
    return value if isinstance(value, str) else ""


def description_text(tokens: Sequence[Token]) -> str:
    """Joins description lines, dropping trailing blank lines only."""
    end = len(tokens)
    while end > 0 and tokens[end - 1].text.strip() == "":
        end -= 1
    return "\n".join(token.text for token in tokens[:end])
