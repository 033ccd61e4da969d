"""Field checks shared by request schemas."""

from typing import Annotated

from pydantic import AfterValidator, AnyHttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72
MAX_URL_LENGTH = 2048

_http_url = TypeAdapter(AnyHttpUrl)


def check_password(value: str) -> str:
    """Reject passwords bcrypt can't hash faithfully."""
    if "\x00" in value:
        raise ValueError("Password must not contain NUL characters")
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


def check_http_url(value: str) -> str:
    """Validate an http(s) URL but keep the string exactly as sent."""
    if len(value) > MAX_URL_LENGTH:
        raise ValueError(f"URL must be at most {MAX_URL_LENGTH} characters")
    try:
        _http_url.validate_python(value)
    except PydanticValidationError as e:
        raise ValueError("Must be a valid http(s) URL") from e
    return value


HttpUrlStr = Annotated[str, AfterValidator(check_http_url)]
