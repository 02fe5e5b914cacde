"""Student Schemas - registration, self-service update, and profile response.

Invariants:
    - StudentRegister requires uid, email, name (missing -> 400 VALIDATION_ERROR)
    - StudentUpdate has no email field: email is immutable after registration
    - StudentUpdate.name may be omitted but never null or blank
    - Unknown fields are ignored, never persisted

Design Decisions:
    - Personal fields are opaque strings (may be ciphertext), only length-bounded
"""

from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.base import CamelModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class StudentProfileFields(CamelModel):
    """Optional profile fields shared by registration and update."""
    ic_number: str | None = Field(None, max_length=4000)
    phone_number: str | None = Field(None, max_length=4000)
    address: str | None = Field(None, max_length=4000)
    emergency_contact: str | None = Field(None, max_length=4000)
    date_of_birth: str | None = Field(None, max_length=32)
    program: str | None = Field(None, max_length=200)
    enrollment_year: int | None = Field(None, ge=1900, le=2200)


class StudentRegister(StudentProfileFields):
    """POST /register body. uid is the identity subject id."""
    uid: str = Field(min_length=1, max_length=128)
    email: str = Field(min_length=3, max_length=320, pattern=EMAIL_PATTERN)
    name: str = Field(min_length=1, max_length=200)

    @field_validator("uid", "name")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class StudentUpdate(StudentProfileFields):
    """PUT /students/{id} body. Only fields present in the request are applied."""
    name: str | None = Field(None, min_length=1, max_length=200)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v: str | None) -> str:
        # Only runs when name is sent; the column is NOT NULL
        if v is None:
            raise ValueError("name cannot be null")
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class StudentResponse(StudentProfileFields):
    id: str
    email: str
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RegisterResponse(CamelModel):
    message: str
    student_id: str
