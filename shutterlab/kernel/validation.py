from typing import Any


class SettingOutOfRangeError(ValueError):
    """
    Raised when a control index falls outside its fixed domain.
    """

    def __init__(self, field: str, value: int, upper: int):
        self.field = field
        self.value = value
        self.upper = upper
        super().__init__(f"{field} must be in [0, {upper}], got {value}")


def validate_index(name: str, value: Any, upper: int) -> int:
    """
    Ensures a control index is an int within [0, upper].
    Lookups into the domain tables are undefined outside that range.
    """
    # bool is an int subclass, a checkbox value is never a valid index
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int for {name}, got {type(value)}")
    if value < 0 or value > upper:
        raise SettingOutOfRangeError(name, value, upper)
    return value


def validate_int(val: Any, default: int = 0) -> int:
    """Ensures a value is an int, providing a default if None."""
    if val is None:
        return default
    try:
        return int(val)
    except (TypeError, ValueError):
        return default
