# rmprint/config.py
# Settings loading
#
# Configuration is a plain Python module of upper-case constants (see
# config.example.py). Any name left out falls back to its default.

import importlib.util
from pathlib import Path

from .errors import ConfigError
from .rules import DEFAULT_DEBUG_CALLS, RuleSet
from .serializer import DEFAULT_MAX_BLANK_LINES

DEFAULT_SKIP_DIRS = (
    '.git', '.hg', '.svn', '.venv', 'venv', '__pycache__', 'node_modules',
    '.tox', '.nox', '.mypy_cache', '.pytest_cache', 'build', 'dist', '.eggs',
)


class Settings:
    """Resolved configuration for one run."""

    def __init__(self, rules=None, scrub_comments=True, max_blank_lines=DEFAULT_MAX_BLANK_LINES,
                 skip_dirs=DEFAULT_SKIP_DIRS):
        if isinstance(max_blank_lines, bool) or not isinstance(max_blank_lines, int) or max_blank_lines < 0:
            raise ConfigError(f"MAX_BLANK_LINES must be a non-negative integer, got {max_blank_lines!r}")

        self.rules = rules if rules is not None else RuleSet.from_texts(DEFAULT_DEBUG_CALLS)
        self.scrub_comments = bool(scrub_comments)
        self.max_blank_lines = max_blank_lines
        self.skip_dirs = frozenset(skip_dirs)

    @classmethod
    def from_module(cls, config, path=None):
        """
        Build settings from a loaded configuration module

        Args:
            config: Object with optional DEBUG_CALLS, COMMENT_MARKERS,
                    SCRUB_COMMENTS, MAX_BLANK_LINES, SKIP_DIRS attributes
            path: Source of the configuration (for error messages)
        """
        debug_calls = getattr(config, 'DEBUG_CALLS', DEFAULT_DEBUG_CALLS)
        comment_markers = getattr(config, 'COMMENT_MARKERS', None)

        if isinstance(debug_calls, str):
            raise ConfigError("DEBUG_CALLS must be a list of strings, not a string", path)
        if isinstance(comment_markers, str):
            raise ConfigError("COMMENT_MARKERS must be a list of strings, not a string", path)

        try:
            rules = RuleSet.from_texts(debug_calls, comment_markers)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"invalid DEBUG_CALLS: {exc}", path) from exc

        try:
            return cls(
                rules=rules,
                scrub_comments=getattr(config, 'SCRUB_COMMENTS', True),
                max_blank_lines=getattr(config, 'MAX_BLANK_LINES', DEFAULT_MAX_BLANK_LINES),
                skip_dirs=getattr(config, 'SKIP_DIRS', DEFAULT_SKIP_DIRS),
            )
        except ConfigError as exc:
            if path is None:
                raise
            raise ConfigError(str(exc), path) from exc

    def __repr__(self):
        return (f"Settings(rules={self.rules!r}, scrub_comments={self.scrub_comments}, "
                f"max_blank_lines={self.max_blank_lines})")


def load_config_module(path):
    """
    Import a configuration file as a module without touching sys.path.

    Raises:
        ConfigError: if the file is missing or fails to execute
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigError("configuration file not found", path)

    spec = importlib.util.spec_from_file_location('rmprint_config', path)
    if spec is None or spec.loader is None:
        raise ConfigError("not a loadable Python file", path)

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise ConfigError(f"failed to load configuration: {exc}", path) from exc
    return module


def load_settings(path=None):
    """
    Load settings from a configuration file, or defaults when path is None.

    Args:
        path: Optional path to a config.py-style module

    Returns:
        Settings
    """
    if path is None:
        return Settings()
    return Settings.from_module(load_config_module(path), path)
