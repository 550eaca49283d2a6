from typing import Any
from pydantic import BaseModel, ConfigDict, model_validator

from app.services.student.validators import validate_student


class StudentBase(BaseModel):
    name: str
    email: str
    age: int
    gender: str


class StudentWrite(StudentBase):
    """
    The four writable fields. Construction runs the field validator, so an
    instance always holds a valid record (age as int, gender upper-cased).
    Invalid input raises app.core.exceptions.ValidationError.
    """

    @model_validator(mode="before")
    @classmethod
    def check_fields(cls, data: Any) -> Any:
        return validate_student(data)


class StudentCreate(StudentWrite):
    pass


class StudentUpdate(StudentWrite):
    pass


class StudentRead(StudentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class StudentMessage(BaseModel):
    """Body returned by the write endpoints."""
    success: bool = True
    message: str
    id: int
