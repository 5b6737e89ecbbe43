from typing import Any, Dict, List, Optional

from .core.tokens import RuleType, Token, TokenType


class AstNode:
    """
    A rule instance that is still open. Children are grouped by rule category
    in arrival order; each one is either a raw Token or a value already
    produced by the transformer for a nested rule.
    """

    def __init__(self, rule_type: RuleType):
        self.rule_type = rule_type
        self._sub_items: Dict[RuleType, List[Any]] = {}

    def add(self, rule_type: RuleType, obj: Any):
        self._sub_items.setdefault(rule_type, []).append(obj)

    def get_single(self, rule_type: RuleType, default: Any = None) -> Any:
        items = self._sub_items.get(rule_type)
        return items[0] if items else default

    def get_items(self, rule_type: RuleType) -> List[Any]:
        return list(self._sub_items.get(rule_type, []))

    # The same category can hold a token in one grammar position and a
    # sub-tree in another, so a non-token child reads as absent.
    def get_token(self, token_type: TokenType) -> Optional[Token]:
        token = self.get_single(token_type.rule_type)
        return token if isinstance(token, Token) else None

    def get_tokens(self, token_type: TokenType) -> List[Token]:
        return [item for item in self.get_items(token_type.rule_type) if isinstance(item, Token)]

    def __repr__(self):
        return f"AstNode({self.rule_type.value}, {list(self._sub_items)})"
