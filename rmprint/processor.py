# rmprint/processor.py
# File-level orchestration: parse, walk, render, replace
#
# The original file is only ever replaced by a complete, re-parsed result:
# new content goes to a temp file next to it and is moved over the original
# with os.replace. Files without matches are never opened for writing.

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import NamedTuple, Optional, Tuple, Union

import libcst as cst

from .config import Settings
from .errors import FileIOError, ParseError, RenderError
from .serializer import render
from .walker import WalkResult, remove_debug_prints

logger = logging.getLogger(__name__)


class FileResult(NamedTuple):
    path: Path
    changed: bool
    removed_statements: int
    removed_comments: int


def parse_source(source: Union[str, bytes], path=None) -> cst.Module:
    """
    Parse Python source with comments and formatting retained.

    Raises:
        ParseError: if the source is not valid Python
    """
    try:
        return cst.parse_module(source)
    except cst.ParserSyntaxError as exc:
        raise ParseError(f"failed to parse: {exc}", path) from exc
    except (UnicodeDecodeError, LookupError) as exc:
        # Undecodable bytes or an unknown coding cookie
        raise ParseError(f"failed to decode source: {exc}", path) from exc


def process_source(source: Union[str, bytes], settings: Optional[Settings] = None,
                   path=None) -> Tuple[Optional[str], WalkResult]:
    """
    Remove debug prints from in-memory source.

    Args:
        source: Python source text (or raw bytes, encoding is detected)
        settings: Run settings (default: Settings())
        path: Used in error messages only

    Returns:
        (rendered text or None when nothing changed, WalkResult)
    """
    if settings is None:
        settings = Settings()

    module = parse_source(source, path)
    result = remove_debug_prints(module, settings.rules, settings.scrub_comments)
    if not result.changed:
        return None, result

    text = render(result.module, settings.max_blank_lines, path)
    return text, result


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise FileIOError(f"failed to read file: {exc}", path) from exc


def replace_file(path: Path, data: bytes):
    """
    Atomically replace a file's content, keeping its permission bits.

    Raises:
        FileIOError: if the temp file cannot be written or moved into place
    """
    try:
        fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix='.tmp')
    except OSError as exc:
        raise FileIOError(f"failed to create temp file: {exc}", path) from exc

    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        shutil.copymode(path, temp_name)
        os.replace(temp_name, path)
    except OSError as exc:
        try:
            os.remove(temp_name)
        except FileNotFoundError:
            pass
        raise FileIOError(f"failed to write file: {exc}", path) from exc


def process_file(path, settings: Optional[Settings] = None, dry_run: bool = False) -> FileResult:
    """
    Remove debug prints from a Python file in place.

    The file is rewritten if and only if something was removed. On any
    error the original file is left exactly as it was.

    Args:
        path: Path to a Python source file
        settings: Run settings (default: Settings())
        dry_run: Compute the result but never write

    Returns:
        FileResult describing what was (or would be) removed

    Raises:
        ParseError, RenderError, FileIOError
    """
    path = Path(path)
    source = _read_bytes(path)

    text, result = process_source(source, settings, path)
    file_result = FileResult(path, result.changed, result.removed_statements, result.removed_comments)

    if text is None:
        logger.debug("No debug prints in %s", path)
        return file_result

    if dry_run:
        logger.info("Would clean %s (%d statements, %d comments)",
                    path, result.removed_statements, result.removed_comments)
        return file_result

    # Write back in the encoding the source was declared/detected with
    try:
        data = text.encode(result.module.encoding)
    except UnicodeEncodeError as exc:
        raise RenderError(f"failed to encode output as {result.module.encoding}: {exc}", path) from exc

    replace_file(path, data)

    logger.info("Cleaned %s (%d statements, %d comments)",
                path, result.removed_statements, result.removed_comments)
    return file_result
