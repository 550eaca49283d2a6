from typing import Any, Dict, Optional
from fastapi import status

class BaseAppException(Exception):
    """
    Parent class for every custom error in the system.
    Carries a stable error code and the HTTP status it maps to, so the
    console and the API report failures the same way.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

# =========================================================
# STUDENT RECORD ERRORS
# =========================================================

class ValidationError(BaseAppException):
    """400: a field failed validation. Raised before any storage access."""
    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"field": field}
        )

class DuplicateEmailError(BaseAppException):
    """400: the email is already used by another student."""
    def __init__(self, email: str):
        super().__init__(
            message="Email already exists in database",
            code="DUPLICATE_EMAIL",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"email": email}
        )

class NotFoundError(BaseAppException):
    """404: no student with the given id"""
    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(
            message="Student not found",
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"id": student_id}
        )

class StoreError(BaseAppException):
    """
    500: any other database failure (connection refused, bad credentials,
    constraint other than email uniqueness...).
    """
    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="STORE_ERROR",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
