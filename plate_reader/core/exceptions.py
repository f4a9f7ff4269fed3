"""
Exception classes for the plate reader.
No-plate and no-text outcomes are results, not errors; these cover I/O and engine failures.
"""
from typing import Optional, Any


class PlateReaderError(Exception):
    """Base exception for all plate reader errors"""
    def __init__(self, message: str, *args: Any):
        super().__init__(message, *args)
        self.message = message


class ImageDecodeError(PlateReaderError):
    """Raised when an input image cannot be read or decoded"""
    def __init__(self, source: str, original_error: Optional[Exception] = None):
        message = f"Could not decode image from {source}"
        if original_error:
            message += f": {str(original_error)}"
        super().__init__(message)
        self.source = source
        self.original_error = original_error


class ImageCodecError(PlateReaderError):
    """Raised when encoding or writing an image fails"""
    def __init__(self, operation: str, original_error: Optional[Exception] = None):
        message = f"Image codec operation '{operation}' failed"
        if original_error:
            message += f": {str(original_error)}"
        super().__init__(message)
        self.operation = operation
        self.original_error = original_error


class OcrEngineError(PlateReaderError):
    """Raised by an OCR adapter when its engine fails"""
    def __init__(self, engine: str, original_error: Optional[Exception] = None):
        message = f"OCR engine {engine} failed"
        if original_error:
            message += f": {str(original_error)}"
        super().__init__(message)
        self.engine = engine
        self.original_error = original_error
