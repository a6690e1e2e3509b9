# rmprint/errors.py
# Exception hierarchy
#
# Every error carries the path it happened on. The underlying cause is
# chained with `raise ... from exc`, so no information is lost.


class RmprintError(Exception):
    """Base class for all rmprint failures."""

    def __init__(self, message, path=None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class ParseError(RmprintError):
    """Input is not valid Python source. The file is left untouched."""


class RenderError(RmprintError):
    """Transformed tree could not be printed or did not re-parse."""


class FileIOError(RmprintError):
    """Reading, temp-file creation, or replacing the original failed."""


class ConfigError(RmprintError):
    """Configuration file could not be loaded or holds invalid values."""
