import pytest
from shutterlab.kernel.validation import (
    SettingOutOfRangeError,
    validate_index,
    validate_int,
)


def test_validate_index_accepts_bounds():
    assert validate_index("iso_index", 0, 7) == 0
    assert validate_index("iso_index", 7, 7) == 7


@pytest.mark.parametrize("value", [-1, 8, 100])
def test_validate_index_out_of_range(value):
    with pytest.raises(SettingOutOfRangeError) as exc_info:
        validate_index("iso_index", value, 7)
    assert exc_info.value.field == "iso_index"
    assert exc_info.value.value == value
    assert exc_info.value.upper == 7
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.parametrize("value", [1.0, "3", None, True])
def test_validate_index_rejects_non_int(value):
    with pytest.raises(TypeError):
        validate_index("iso_index", value, 7)


def test_validate_int():
    assert validate_int("4") == 4
    assert validate_int(None, 2) == 2
    assert validate_int("abc", 3) == 3
