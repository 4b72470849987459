"""Argument validation shared by the API clients."""


class ArgumentError(ValueError):
    """Raised when a caller passes a missing or blank argument."""


def argument_not_null(value, name: str) -> None:
    """Raise ArgumentError if value is None.

    Args:
        value: The argument to check
        name: The parameter name, used in the error message
    """
    if value is None:
        raise ArgumentError(f"'{name}' cannot be None")


def argument_not_null_or_empty_string(value: str, name: str) -> None:
    """Raise ArgumentError if value is None, empty or only whitespace.

    Args:
        value: The string argument to check
        name: The parameter name, used in the error message
    """
    argument_not_null(value, name)
    if not isinstance(value, str):
        raise ArgumentError(f"'{name}' must be a string, got {type(value).__name__}")
    if not value.strip():
        raise ArgumentError(f"'{name}' cannot be an empty string")
