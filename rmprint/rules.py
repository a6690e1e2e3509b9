# rmprint/rules.py
# Debug-print rule table and call matching
#
# A rule is a (qualifier, name) pair. Bare-name rules have no qualifier.
# Qualifiers are compared against the dotted text exactly as written in the
# source - there is no import resolution, so `import pprint as pp` followed
# by `pp.pprint(x)` does NOT match the `pprint.pprint` rule.

from typing import Iterable, NamedTuple, Optional

import libcst as cst


# Default rule texts, in "name" or "qualifier.name" form
DEFAULT_DEBUG_CALLS = (
    'print',
    'logging.debug',
    'pprint.pprint',
    'pprint.pp',
    # Value-producing, only ever removed as a bare statement
    'pprint.pformat',
)


class MatchRule(NamedTuple):
    """One recognized debug-print signature."""
    qualifier: Optional[str]
    name: str

    @classmethod
    def parse(cls, text: str) -> 'MatchRule':
        """
        Build a rule from its source form.

        Args:
            text: "name" for a bare rule or "qualifier.name" (qualifier may be dotted)

        Returns:
            MatchRule

        Raises:
            ValueError: if any dotted part is not a valid identifier
        """
        if not isinstance(text, str):
            raise ValueError(f"Rule must be a string, got {type(text).__name__}")

        parts = text.strip().split('.')
        if not all(part.isidentifier() for part in parts):
            raise ValueError(f"Invalid debug call rule: {text!r}")

        if len(parts) == 1:
            return cls(None, parts[0])
        return cls('.'.join(parts[:-1]), parts[-1])

    def render(self) -> str:
        if self.qualifier is None:
            return self.name
        return f"{self.qualifier}.{self.name}"

    @property
    def comment_marker(self) -> str:
        """Substring that identifies this call inside commented-out code."""
        return self.render() + '('


class RuleSet:
    """
    Active rule table

    Holds the call rules and the literal comment markers derived from them.
    Lookups are exact and case-sensitive.
    """

    def __init__(self, rules: Iterable[MatchRule], comment_markers: Optional[Iterable[str]] = None):
        """
        Initialize rule set

        Args:
            rules: MatchRule entries
            comment_markers: Substrings that condemn a comment line
                             (default: rendered from rules as "name(")
        """
        self.rules = tuple(dict.fromkeys(rules))
        self._index = frozenset(self.rules)

        if comment_markers is None:
            comment_markers = [rule.comment_marker for rule in self.rules]
        self.comment_markers = tuple(dict.fromkeys(comment_markers))

    @classmethod
    def from_texts(cls, texts: Iterable[str], comment_markers: Optional[Iterable[str]] = None) -> 'RuleSet':
        return cls([MatchRule.parse(text) for text in texts], comment_markers)

    def matches(self, qualifier: Optional[str], name: str) -> bool:
        return MatchRule(qualifier, name) in self._index

    def matches_comment(self, text: str) -> bool:
        """Check if comment text contains any comment marker."""
        return any(marker in text for marker in self.comment_markers)

    def __repr__(self):
        return f"RuleSet({', '.join(rule.render() for rule in self.rules)})"


DEFAULT_RULES = RuleSet.from_texts(DEFAULT_DEBUG_CALLS)


def dotted_name(node: cst.BaseExpression) -> Optional[str]:
    """
    Literal dotted text of a Name/Attribute chain

    Returns None for anything else (calls, subscripts, literals...).
    """
    if isinstance(node, cst.Name):
        return node.value
    if isinstance(node, cst.Attribute):
        base = dotted_name(node.value)
        if base is None:
            return None
        return f"{base}.{node.attr.value}"
    return None


def is_debug_call(expr: cst.BaseExpression, rules: Optional[RuleSet] = None) -> bool:
    """
    Check if an expression is a call to a known debug-print function.

    Args:
        expr: Any expression node
        rules: Rule table (default: DEFAULT_RULES)

    Returns:
        True if expr is a Call whose callee matches a rule
    """
    if not isinstance(expr, cst.Call):
        return False
    if rules is None:
        rules = DEFAULT_RULES

    func = expr.func
    if isinstance(func, cst.Name):
        return rules.matches(None, func.value)

    if isinstance(func, cst.Attribute):
        qualifier = dotted_name(func.value)
        if qualifier is None:
            return False
        return rules.matches(qualifier, func.attr.value)

    return False
