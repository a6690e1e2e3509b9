# rmprint/serializer.py
# Rendering of the transformed tree back to source text
#
# libcst prints untouched code byte-for-byte. Removing statements and
# comments can leave stacks of blank lines behind, so after printing, runs
# of blank lines longer than the limit are collapsed. Lines that sit inside
# multi-line string literals are data and are never collapsed.

import io
import token
import tokenize
from typing import Set

import libcst as cst

from .errors import RenderError

DEFAULT_MAX_BLANK_LINES = 1

# f-strings (3.12+) and t-strings (3.14+) are tokenized in pieces
_STRING_START = {getattr(token, name) for name in ('FSTRING_START', 'TSTRING_START') if hasattr(token, name)}
_STRING_END = {getattr(token, name) for name in ('FSTRING_END', 'TSTRING_END') if hasattr(token, name)}


def string_interior_lines(text: str) -> Set[int]:
    """
    Line numbers (1-based) that begin inside a string literal.

    Raises:
        tokenize.TokenError, SyntaxError: if text cannot be tokenized
    """
    protected = set()
    open_rows = []

    for tok in tokenize.generate_tokens(io.StringIO(text, newline='').readline):
        if tok.type == token.STRING:
            protected.update(range(tok.start[0] + 1, tok.end[0] + 1))
        elif tok.type in _STRING_START:
            open_rows.append(tok.start[0])
        elif tok.type in _STRING_END and open_rows:
            start_row = open_rows.pop()
            protected.update(range(start_row + 1, tok.end[0] + 1))

    return protected


def collapse_blank_lines(text: str, max_blank_lines: int = DEFAULT_MAX_BLANK_LINES) -> str:
    """
    Collapse runs of blank lines to at most max_blank_lines.

    Args:
        text: Valid Python source
        max_blank_lines: Longest run of blank lines to keep (0 removes them all)

    Returns:
        Normalized source text
    """
    protected = string_interior_lines(text)
    output = []
    run = 0

    # Same line splitting as the tokenizer, so row numbers agree
    for lineno, line in enumerate(io.StringIO(text, newline=''), start=1):
        if lineno not in protected and not line.strip():
            run += 1
            if run > max_blank_lines:
                continue
        else:
            run = 0
        output.append(line)

    return ''.join(output)


def render(module: cst.Module, max_blank_lines: int = DEFAULT_MAX_BLANK_LINES, path=None) -> str:
    """
    Print a module and normalize blank lines.

    The result is re-parsed before it is returned, so callers never receive
    text that is not valid Python.

    Args:
        module: Transformed libcst module
        max_blank_lines: Blank-line run limit
        path: Used in error messages only

    Returns:
        Rendered source text

    Raises:
        RenderError: if printing, normalizing, or re-parsing fails
    """
    try:
        code = module.code
    except Exception as exc:
        raise RenderError(f"failed to print syntax tree: {exc}", path) from exc

    try:
        code = collapse_blank_lines(code, max_blank_lines)
    except (tokenize.TokenError, SyntaxError) as exc:
        raise RenderError(f"failed to tokenize rendered source: {exc}", path) from exc

    try:
        cst.parse_module(code)
    except cst.ParserSyntaxError as exc:
        raise RenderError(f"rendered source does not parse: {exc}", path) from exc

    return code
