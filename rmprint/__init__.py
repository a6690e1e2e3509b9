# rmprint/__init__.py
# Debug print removal for Python source

__version__ = '0.1.0'

from .rules import MatchRule, RuleSet, DEFAULT_RULES, is_debug_call
from .comments import CommentGroup, filter_comments, scrub_group
from .walker import DebugPrintRemover, WalkResult, remove_debug_prints
from .serializer import render, collapse_blank_lines
from .config import Settings, load_settings
from .processor import FileResult, process_file, process_source
from .errors import RmprintError, ParseError, RenderError, FileIOError, ConfigError

__all__ = [
    '__version__',
    'MatchRule',
    'RuleSet',
    'DEFAULT_RULES',
    'is_debug_call',
    'CommentGroup',
    'filter_comments',
    'scrub_group',
    'DebugPrintRemover',
    'WalkResult',
    'remove_debug_prints',
    'render',
    'collapse_blank_lines',
    'Settings',
    'load_settings',
    'FileResult',
    'process_file',
    'process_source',
    'RmprintError',
    'ParseError',
    'RenderError',
    'FileIOError',
    'ConfigError',
]
