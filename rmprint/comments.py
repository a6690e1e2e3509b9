# rmprint/comments.py
# Removal of commented-out debug prints
#
# libcst keeps own-line comments in side sequences of EmptyLine nodes
# (module header/footer, statement leading_lines, block footers...), not in
# statement lists. A comment group is a run of consecutive comment lines in
# one such sequence; blank lines separate groups.
#
# Matching is a plain substring test against the rule set's comment markers.
# Commented-out code is never re-parsed, so prose that mentions `print(` is
# dropped too.

from typing import Iterable, List, Optional, Sequence, Tuple, Union

import libcst as cst

from .rules import DEFAULT_RULES, RuleSet


class CommentGroup:
    """Contiguous run of own-line comments (EmptyLine nodes with a comment)."""

    def __init__(self, lines: Iterable[cst.EmptyLine]):
        self.lines = tuple(lines)

    @classmethod
    def from_texts(cls, texts: Iterable[str]) -> 'CommentGroup':
        return cls(cst.EmptyLine(comment=cst.Comment(text)) for text in texts)

    @property
    def texts(self) -> List[str]:
        return [line.comment.value for line in self.lines]

    def __len__(self):
        return len(self.lines)

    def __repr__(self):
        return f"CommentGroup({self.texts!r})"


def scrub_group(group: CommentGroup, rules: Optional[RuleSet] = None) -> Optional[CommentGroup]:
    """
    Drop the lines of one group that contain a debug-print marker.

    Returns:
        New CommentGroup with the surviving lines, or None if nothing survived
    """
    if rules is None:
        rules = DEFAULT_RULES

    kept = [line for line in group.lines if not rules.matches_comment(line.comment.value)]
    if not kept:
        return None
    return CommentGroup(kept)


def filter_comments(groups: Sequence[CommentGroup], rules: Optional[RuleSet] = None) -> List[CommentGroup]:
    """
    Scrub a list of comment groups.

    The input is not modified. Groups left without lines are omitted, and
    the order of groups and lines is preserved.

    Args:
        groups: Comment groups in source order
        rules: Rule table providing the comment markers

    Returns:
        New list of filtered groups
    """
    filtered = []
    for group in groups:
        scrubbed = scrub_group(group, rules)
        if scrubbed is not None:
            filtered.append(scrubbed)
    return filtered


def split_groups(lines: Sequence[cst.EmptyLine]) -> List[Union[CommentGroup, cst.EmptyLine]]:
    """
    Split an EmptyLine sequence into comment groups and blank separators.

    Returns:
        List whose items are either a CommentGroup or a single blank EmptyLine
    """
    segments = []
    pending = []

    for line in lines:
        if line.comment is not None:
            pending.append(line)
            continue
        if pending:
            segments.append(CommentGroup(pending))
            pending = []
        segments.append(line)

    if pending:
        segments.append(CommentGroup(pending))
    return segments


def scrub_empty_lines(lines: Sequence[cst.EmptyLine],
                      rules: Optional[RuleSet] = None) -> Tuple[Tuple[cst.EmptyLine, ...], int]:
    """
    Scrub an EmptyLine side sequence in place of its groups.

    Blank lines are kept where they are; a group that loses all of its
    lines leaves nothing behind.

    Returns:
        (new lines, number of comment lines removed)
    """
    result = []
    removed = 0

    for segment in split_groups(lines):
        if not isinstance(segment, CommentGroup):
            result.append(segment)
            continue

        scrubbed = scrub_group(segment, rules)
        survivors = scrubbed.lines if scrubbed is not None else ()
        removed += len(segment) - len(survivors)
        result.extend(survivors)

    return tuple(result), removed


def scrub_trailing(whitespace: cst.TrailingWhitespace,
                   rules: Optional[RuleSet] = None) -> Tuple[cst.TrailingWhitespace, int]:
    """
    Scrub a same-line comment (a group of exactly one line).

    Returns:
        (new trailing whitespace, 1 if the comment was removed else 0)
    """
    if rules is None:
        rules = DEFAULT_RULES

    comment = whitespace.comment
    if comment is None or not rules.matches_comment(comment.value):
        return whitespace, 0

    # Drop the spaces that separated code from the comment as well
    return whitespace.with_changes(whitespace=cst.SimpleWhitespace(''), comment=None), 1
