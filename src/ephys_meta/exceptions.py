"""Exception hierarchy for ephys-meta.

Validation never raises; it reports Issues. Exceptions are reserved for the
I/O edge of the package (reading documents and settings from disk).

Example:
    >>> from ephys_meta.exceptions import DocumentIOError
    >>> try:
    ...     read_document(Path("missing.yml"))
    ... except DocumentIOError as e:
    ...     print(e)
"""

__all__ = ["EphysMetaError", "DocumentIOError", "ConfigError"]


class EphysMetaError(Exception):
    """Base class for all ephys-meta errors."""


class DocumentIOError(EphysMetaError):
    """Document file could not be read, parsed or written."""


class ConfigError(EphysMetaError):
    """Settings file could not be read or parsed."""
