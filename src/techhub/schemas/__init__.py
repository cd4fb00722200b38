from .errors import ErrorResponse, FieldError
from .framework import FrameworkRequest, FrameworkResponse

__all__ = ["ErrorResponse", "FieldError", "FrameworkRequest", "FrameworkResponse"]
