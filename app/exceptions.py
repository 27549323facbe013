from typing import Any, Mapping, Optional


class ServiceValidationError(Exception):
    """Raised when input data is invalid or a precondition for a service call is not met.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers (400)
    """

    http_status = 400
    default_code = "SERVICE_VALIDATION_ERROR"

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class InvalidDateError(ServiceValidationError):
    """Raised when a date input cannot be read as a valid calendar day."""

    default_code = "INVALID_DATE"

    def __init__(self, value: Any, reason: Optional[str] = None):
        message = f"Invalid date: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, details={"value": str(value)})
        self.value = value


class NotFoundError(Exception):
    """Raised when a requested resource was not found.

    Attributes are similar to ServiceValidationError. http_status is 404.
    """

    http_status = 404
    default_code = "NOT_FOUND"

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class FoodNotFoundError(NotFoundError):
    """Raised when a meal batch references a food id that does not exist."""

    default_code = "FOOD_NOT_FOUND"

    def __init__(self, food_id: int):
        super().__init__(f"Food {food_id} not found", details={"food_id": food_id})
        self.food_id = food_id


class CategoryNotFoundError(NotFoundError):
    """Raised when a write names a category that does not exist."""

    default_code = "CATEGORY_NOT_FOUND"

    def __init__(self, name: str):
        super().__init__(f"Category '{name}' not found", details={"category": name})
        self.name = name


class ConflictError(Exception):
    """Raised when a resource conflict occurs (e.g., duplicate entry).

    Attributes are similar to ServiceValidationError. http_status is 409.
    """

    http_status = 409
    default_code = "CONFLICT"

    def __init__(self, message: str = "Conflict", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class StoreError(Exception):
    """Raised when the backing database fails (connection loss, constraint violation).

    The original driver exception is kept on ``__cause__``. http_status is 503.
    """

    http_status = 503
    default_code = "STORE_ERROR"

    def __init__(self, message: str = "Store operation failed", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message
