"""Error Codes and Exceptions

E1xxx: input, E3xxx: resource, E5xxx: system
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Error codes"""

    # === E1xxx: Input ===
    VALIDATION_ERROR = "E1001"
    MALFORMED_BODY = "E1002"

    # === E3xxx: Resource ===
    TODO_NOT_FOUND = "E3001"

    # === E5xxx: System ===
    INTERNAL_ERROR = "E5003"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.VALIDATION_ERROR: "Request validation failed.",
    ErrorCode.MALFORMED_BODY: "Request body could not be decoded.",
    ErrorCode.TODO_NOT_FOUND: "Todo not found.",
    ErrorCode.INTERNAL_ERROR: "Internal server error.",
}


class ErrorDetail(BaseModel):
    """API error response detail"""
    code: str
    message: str
    details: Optional[dict[str, Any]] = None

    @classmethod
    def for_code(
        cls,
        code: ErrorCode,
        details: Optional[dict[str, Any]] = None,
    ) -> "ErrorDetail":
        """Detail with the default message for the code"""
        return cls(code=code.value, message=ERROR_MESSAGES[code], details=details)


class TodoBackendError(Exception):
    """Base exception"""

    def __init__(
        self,
        code: ErrorCode,
        message: Optional[str] = None,
    ):
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, "Unknown error")
        super().__init__(self.message)


class TodoNotFoundError(TodoBackendError):
    """Raised when an update targets an id that is not in the store"""

    def __init__(self, todo_id: str):
        super().__init__(
            ErrorCode.TODO_NOT_FOUND,
            message=f"Todo '{todo_id}' not found.",
        )
        self.todo_id = todo_id

