"""Error kinds and the exception raised for them."""

from enum import Enum, auto


class ErrorType(Enum):
    """Kinds of failure the renderer can report."""

    FILE_NOT_FOUND = auto()
    INVALID_FORMAT = auto()
    OUT_OF_BOUNDS = auto()
    DIVIDED_BY_ZERO = auto()
    INVALID_ARGUMENT = auto()
    INVALID_OPERATION = auto()
    MEMORY_ALLOCATION_FAILED = auto()
    UNAUTHORIZED_ACCESS = auto()
    NETWORK_ERROR = auto()
    TIMEOUT = auto()
    NOT_IMPLEMENTED = auto()
    INVALID_STATE = auto()
    INVALID_INDEX = auto()
    INVALID_TYPE = auto()
    INVALID_VALUE = auto()
    INVALID_KEY = auto()
    INVALID_SIZE = auto()
    INVALID_RANGE = auto()
    INVALID_POINTER = auto()
    INVALID_HANDLE = auto()
    INVALID_OPERATION_CODE = auto()
    INVALID_PARAMETER = auto()
    DL_ERROR_NOT_FOUND = auto()
    DL_ERROR_INVALID_FUNCTION = auto()
    DL_ERROR_INVALID_LIBRARY = auto()
    DL_ERROR_INVALID_HANDLE = auto()
    UNKNOWN_ERROR = auto()


_MESSAGES = {
    ErrorType.FILE_NOT_FOUND: "File not found",
    ErrorType.INVALID_FORMAT: "Invalid format",
    ErrorType.OUT_OF_BOUNDS: "Out of bounds",
    ErrorType.DIVIDED_BY_ZERO: "Divided by zero",
    ErrorType.INVALID_ARGUMENT: "Invalid argument",
    ErrorType.INVALID_OPERATION: "Invalid operation",
    ErrorType.MEMORY_ALLOCATION_FAILED: "Memory allocation failed",
    ErrorType.UNAUTHORIZED_ACCESS: "Unauthorized access",
    ErrorType.NETWORK_ERROR: "Network error",
    ErrorType.TIMEOUT: "Timeout",
    ErrorType.NOT_IMPLEMENTED: "Not implemented",
    ErrorType.INVALID_STATE: "Invalid state",
    ErrorType.INVALID_INDEX: "Invalid index",
    ErrorType.INVALID_TYPE: "Invalid type",
    ErrorType.INVALID_VALUE: "Invalid value",
    ErrorType.INVALID_KEY: "Invalid key",
    ErrorType.INVALID_SIZE: "Invalid size",
    ErrorType.INVALID_RANGE: "Invalid range",
    ErrorType.INVALID_POINTER: "Invalid pointer",
    ErrorType.INVALID_HANDLE: "Invalid handle",
    ErrorType.INVALID_OPERATION_CODE: "Invalid operation code",
    ErrorType.INVALID_PARAMETER: "Invalid parameter",
    ErrorType.DL_ERROR_NOT_FOUND: "Dynamic library not found",
    ErrorType.DL_ERROR_INVALID_FUNCTION: "Invalid function",
    ErrorType.DL_ERROR_INVALID_LIBRARY: "Invalid library",
    ErrorType.DL_ERROR_INVALID_HANDLE: "Invalid handle",
}


def error_message(error_type):
    """Return the human-readable message for an error kind."""
    return _MESSAGES.get(error_type, "Unknown error")


class RaytracerError(Exception):
    """Exception carrying an :class:`ErrorType`."""

    def __init__(self, error_type=ErrorType.UNKNOWN_ERROR):
        self.error_type = error_type
        super().__init__(error_message(error_type))