"""
Custom Exceptions Module.

Only the boundary layer (input normalization, processor dispatch and the
output handlers) raises these. Decoders and model accessors report
missing or malformed data as None instead.

Exception Hierarchy:
    DocumentParserError (base)
    ├── InputError
    │   ├── JsonParseError
    │   ├── InvalidInputTypeError
    │   └── MalformedDocumentError
    ├── ProcessorError
    │   └── UnknownProcessorError
    └── OutputError
        ├── JsonExportError
        └── ExcelExportError
"""


class DocumentParserError(Exception):
    """
    Base exception for all parser errors.

    Attributes:
        message: Human-readable error message.
        details: Optional dictionary with additional error details.
    """

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# INPUT ERRORS
# =============================================================================

class InputError(DocumentParserError):
    """Base exception for input handling errors."""
    pass


class JsonParseError(InputError):
    """Raised when input text is not valid JSON."""

    def __init__(self, reason: str):
        message = f"Failed to parse JSON input: {reason}"
        details = {"reason": reason}
        super().__init__(message, details)


class InvalidInputTypeError(InputError, TypeError):
    """
    Raised when input is neither JSON text nor a mapping.

    Example:
        >>> raise InvalidInputTypeError(int)
    """

    def __init__(self, input_type: type):
        message = (
            "Input must be a JSON string or a mapping, "
            f"was {input_type.__name__}"
        )
        details = {"input_type": input_type.__name__}
        super().__init__(message, details)


class MalformedDocumentError(InputError):
    """Raised when document.entities does not have the expected shape."""

    def __init__(self, reason: str, index: int = None):
        message = f"Malformed document: {reason}"
        details = {"reason": reason}
        if index is not None:
            details["index"] = index
        super().__init__(message, details)


# =============================================================================
# PROCESSOR ERRORS
# =============================================================================

class ProcessorError(DocumentParserError):
    """Base exception for processor selection errors."""
    pass


class UnknownProcessorError(ProcessorError, ValueError):
    """Raised when the requested processor type is not registered."""

    def __init__(self, processor_type, supported_types: list):
        message = f"Unknown processor type: {processor_type}"
        details = {"processor_type": str(processor_type), "supported_types": supported_types}
        super().__init__(message, details)


# =============================================================================
# OUTPUT ERRORS
# =============================================================================

class OutputError(DocumentParserError):
    """Base exception for output handling errors."""
    pass


class JsonExportError(OutputError):
    """Raised when writing a JSON summary fails."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Failed to export JSON file: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


class ExcelExportError(OutputError):
    """Raised when Excel export fails."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Failed to export Excel file: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


__all__ = [
    'DocumentParserError',
    'InputError',
    'JsonParseError',
    'InvalidInputTypeError',
    'MalformedDocumentError',
    'ProcessorError',
    'UnknownProcessorError',
    'OutputError',
    'JsonExportError',
    'ExcelExportError',
]
