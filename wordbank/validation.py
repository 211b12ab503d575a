"""Request field checks shared by the routes and the store."""

from wordbank.errors import ValidationError


def require_text(name: str, value: str | None) -> str:
    """Return `value` unchanged, or raise if it is missing or blank.

    Missing (absent / null) and empty are reported differently so clients
    can tell a forgotten field from an empty input box. "0" is a valid word.
    """
    if value is None:
        raise ValidationError(f"{name} is required")
    if not value.strip():
        raise ValidationError(f"{name} must not be empty")
    return value
