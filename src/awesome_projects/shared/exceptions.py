"""Custom exceptions for awesome-projects."""


class ProjectListError(Exception):
    """Base exception for awesome-projects operations."""


class InputNotFoundError(ProjectListError):
    """Input file does not exist."""


class InputUnreadableError(ProjectListError):
    """Input file exists but cannot be read or decoded."""


class OutputWriteError(ProjectListError):
    """Output file or its parent directories cannot be written."""


class RecordFormatError(ProjectListError):
    """Parsed-records file does not follow the record format."""
