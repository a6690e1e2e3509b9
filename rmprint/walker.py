# rmprint/walker.py
# Syntax tree walker that removes debug-print statements and comments
#
# One pass over the tree with a libcst transformer:
# - Every statement container (module, indented block, one-line suite)
#   gets its statement list rebuilt without debug-print expression statements
# - Every comment side sequence and same-line comment is scrubbed
#
# Comments never travel with removed code: leading comments and the trailing
# comment of a removed line move to the next surviving statement, or to the
# container's footer when nothing follows.

import logging
from typing import List, NamedTuple, Optional, Sequence, Tuple

import libcst as cst
from libcst.metadata import MetadataWrapper, PositionProvider

from .comments import scrub_empty_lines, scrub_trailing
from .rules import DEFAULT_RULES, RuleSet, is_debug_call

logger = logging.getLogger(__name__)

# Node fields that hold EmptyLine side sequences
COMMENT_FIELDS = ('header', 'leading_lines', 'lines_after_decorators', 'footer', 'empty_lines')


class WalkResult(NamedTuple):
    module: cst.Module
    changed: bool
    removed_statements: int
    removed_comments: int


class DebugPrintRemover(cst.CSTTransformer):
    """
    Transformer that filters statement containers and scrubs comments

    Must be run through a MetadataWrapper (see remove_debug_prints) so that
    removals can be logged with their line numbers.
    """

    METADATA_DEPENDENCIES = (PositionProvider,)

    def __init__(self, rules: Optional[RuleSet] = None, scrub_comments: bool = True):
        """
        Initialize remover

        Args:
            rules: Rule table (default: DEFAULT_RULES)
            scrub_comments: Also remove commented-out debug prints
        """
        super().__init__()
        self.rules = rules if rules is not None else DEFAULT_RULES
        self.scrub_comments = scrub_comments
        self.removed_statements = 0
        self.removed_comments = 0

    @property
    def changed(self) -> bool:
        return self.removed_statements > 0 or self.removed_comments > 0

    # =========================================================================
    # Statement containers
    # =========================================================================

    def leave_Module(self, original_node, updated_node):
        body, orphans = self._filter_statements(original_node.body, updated_node.body)
        footer = updated_node.footer
        if orphans:
            footer = [*orphans, *footer]
        return updated_node.with_changes(body=body, footer=footer)

    def leave_IndentedBlock(self, original_node, updated_node):
        body, orphans = self._filter_statements(original_node.body, updated_node.body)

        if not body:
            # A block cannot be empty; keep its comments above the `pass`
            body = [cst.SimpleStatementLine(body=[cst.Pass()], leading_lines=orphans)]
            orphans = []

        footer = updated_node.footer
        if orphans:
            footer = [*orphans, *footer]
        return updated_node.with_changes(body=body, footer=footer)

    def leave_SimpleStatementSuite(self, original_node, updated_node):
        small = self._filter_small_statements(updated_node.body)
        removed = len(updated_node.body) - len(small)
        if not removed:
            return updated_node

        self._record_removal(original_node, removed)
        if not small:
            small = [cst.Pass()]
        return updated_node.with_changes(body=small)

    def _is_debug_statement(self, stmt: cst.BaseSmallStatement) -> bool:
        return isinstance(stmt, cst.Expr) and is_debug_call(stmt.value, self.rules)

    def _filter_small_statements(self, body: Sequence[cst.BaseSmallStatement]) -> List[cst.BaseSmallStatement]:
        """Drop debug calls from `a; b; c` style statement lists."""
        kept = [stmt for stmt in body if not self._is_debug_statement(stmt)]
        if kept and len(kept) < len(body):
            # The survivor that now ends the line must not keep a dangling `;`
            kept[-1] = kept[-1].with_changes(semicolon=cst.MaybeSentinel.DEFAULT)
        return kept

    def _filter_statements(self, original_body: Sequence[cst.BaseStatement],
                           body: Sequence[cst.BaseStatement]) -> Tuple[List[cst.BaseStatement], List[cst.EmptyLine]]:
        """
        Rebuild a statement list without debug-print lines

        Args:
            original_body: Statements before transformation (for positions)
            body: Statements after their children were transformed

        Returns:
            (kept statements in original order,
             comment lines of removed statements with no following statement)
        """
        kept = []
        carried = []

        for original, stmt in zip(original_body, body):
            if isinstance(stmt, cst.SimpleStatementLine):
                small = self._filter_small_statements(stmt.body)
                removed = len(stmt.body) - len(small)
                if removed:
                    self._record_removal(original, removed)

                if not small:
                    carried.extend(stmt.leading_lines)
                    comment = stmt.trailing_whitespace.comment
                    if comment is not None:
                        carried.append(cst.EmptyLine(comment=comment))
                    continue

                if removed:
                    stmt = stmt.with_changes(body=small)

            if carried:
                stmt = stmt.with_changes(leading_lines=[*carried, *stmt.leading_lines])
                carried = []
            kept.append(stmt)

        return kept, carried

    def _record_removal(self, node: cst.CSTNode, count: int):
        self.removed_statements += count
        position = self.get_metadata(PositionProvider, node, None)
        if position is not None:
            logger.debug("Removed %d debug call(s) at line %d", count, position.start.line)

    # =========================================================================
    # Comments
    # =========================================================================

    def on_leave(self, original_node, updated_node):
        result = super().on_leave(original_node, updated_node)
        if self.scrub_comments and isinstance(result, cst.CSTNode):
            result = self._scrub_comment_fields(result)
        return result

    def leave_TrailingWhitespace(self, original_node, updated_node):
        if not self.scrub_comments:
            return updated_node
        scrubbed, removed = scrub_trailing(updated_node, self.rules)
        self.removed_comments += removed
        return scrubbed

    def _scrub_comment_fields(self, node: cst.CSTNode) -> cst.CSTNode:
        changes = {}
        for field in COMMENT_FIELDS:
            lines = getattr(node, field, None)
            if not isinstance(lines, (list, tuple)) or not lines:
                continue
            if not all(isinstance(line, cst.EmptyLine) for line in lines):
                continue

            scrubbed, removed = scrub_empty_lines(lines, self.rules)
            if removed:
                self.removed_comments += removed
                changes[field] = scrubbed

        if changes:
            return node.with_changes(**changes)
        return node


def remove_debug_prints(module: cst.Module, rules: Optional[RuleSet] = None,
                        scrub_comments: bool = True) -> WalkResult:
    """
    Remove debug-print statements (and commented-out ones) from a module.

    The input module is not modified; libcst nodes are immutable and the
    transformer returns a new tree.

    Args:
        module: Parsed libcst module
        rules: Rule table (default: DEFAULT_RULES)
        scrub_comments: Also scrub comments

    Returns:
        WalkResult with the new module and what was removed
    """
    remover = DebugPrintRemover(rules, scrub_comments)
    new_module = MetadataWrapper(module).visit(remover)

    if remover.changed:
        logger.debug("Walk removed %d statement(s), %d comment line(s)",
                     remover.removed_statements, remover.removed_comments)

    return WalkResult(new_module, remover.changed, remover.removed_statements, remover.removed_comments)
