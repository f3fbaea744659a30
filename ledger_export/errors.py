"""Exceptions raised by the export engine."""


class ExportError(Exception):
    """Base class for anything the engine reports to its caller"""


class ConfigurationError(ExportError):
    """The process-wide export configuration is unusable"""


class UnsupportedDestination(ConfigurationError):
    """No batch format exists for the requested destination"""


class BatchFullError(ExportError):
    """A batch cannot number another row in its fixed-width field"""


class InputError(ExportError):
    """A transaction source file could not be read"""
