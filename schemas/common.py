from typing import Optional, Any
from enum import Enum

# ------------------------------- Statuses ------------------------------- #

class ApiStatus(str, Enum):
    """Standard API response statuses"""
    SUCCESS = "success"
    ERROR = "error"
    VALIDATION_ERROR = "validation_error"

# ------------------------------- Response Helpers ------------------------------- #

def success_response(
    message: str = "Operation completed successfully",
    data: Any = None,
) -> dict:
    """Helper function to create a standardized success response"""
    return {
        "status": ApiStatus.SUCCESS.value,
        "message": message,
        "data": data,
    }

def error_response(
    message: str = "An error occurred",
    status: ApiStatus = ApiStatus.ERROR,
    error_code: Optional[str] = None,
    data: Any = None,
) -> dict:
    """Helper function to create a standardized error response"""
    return {
        "status": status.value,
        "message": message,
        "data": data,
        "error_code": error_code,
    }
