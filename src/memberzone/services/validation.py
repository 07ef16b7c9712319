"""Form schemas for signup and login payloads."""

from typing import Type, TypeVar

from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator

M = TypeVar("M", bound=BaseModel)

PASSWORD_MIN_LENGTH = 5
# bcrypt only accepts this many bytes of password
PASSWORD_MAX_BYTES = 72


class FormValidationError(Exception):
    """Raised when a submitted form fails validation.

    The message is the first error reported by the schema.
    """


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class SignupForm(BaseModel):
    """Fields submitted on the signup page."""

    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=PASSWORD_MIN_LENGTH)

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        return _strip(value)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return value.lower()

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"Password cannot be longer than {PASSWORD_MAX_BYTES} bytes")
        return value


class LoginForm(BaseModel):
    """Credentials submitted on the login page.

    No minimum password length here; that is only enforced at signup.
    """

    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, value):
        return _strip(value)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return value.lower()


def first_error_message(exc: ValidationError) -> str:
    """Format the first error of a ValidationError as ``field: message``.

    The message part is pydantic's own text, unchanged; it does not name the
    field, so the field path is prefixed.
    """
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"])
    return f"{field}: {error['msg']}" if field else error["msg"]


def parse_form(model: Type[M], **data) -> M:
    """Validate form data against a schema.

    Raises:
        FormValidationError: with the first validation message
    """
    try:
        return model(**data)
    except ValidationError as e:
        raise FormValidationError(first_error_message(e)) from e
