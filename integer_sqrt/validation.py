from typing import (
    Any,
    Union,
)

from eth_utils import (
    ValidationError,
)

from integer_sqrt.abc import (
    IntegerTypeAPI,
)


def validate_is_integer(value: Union[int, bool], title: str="Value") -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(
            "{title} must be an integer.  Got: {0}".format(type(value), title=title)
        )


def validate_gt(value: int, minimum: int, title: str="Value") -> None:
    validate_is_integer(value, title=title)
    if value <= minimum:
        raise ValidationError(
            "{title} {0} is not greater than {1}".format(value, minimum, title=title)
        )


def validate_multiple_of(value: int, multiple_of: int, title: str="Value") -> None:
    validate_is_integer(value, title=title)
    if not value % multiple_of == 0:
        raise ValidationError(
            "{title} {0} is not a multiple of {1}".format(value, multiple_of, title=title)
        )


def validate_is_integer_type(int_type: Any, title: str="Integer type") -> None:
    if not isinstance(int_type, IntegerTypeAPI):
        raise ValidationError(
            "{title} must be an IntegerTypeAPI instance.  Got: {0!r}".format(
                int_type,
                title=title,
            )
        )


def validate_integer_type_value(value: int,
                                int_type: IntegerTypeAPI,
                                title: str="Value") -> None:
    validate_is_integer(value, title=title)
    if value < int_type.min_value:
        raise ValidationError(
            "{title} is below the minimum {0} value of {1}.  Got: {2}".format(
                int_type.name,
                int_type.min_value,
                value,
                title=title,
            )
        )
    if value > int_type.max_value:
        raise ValidationError(
            "{title} exceeds the maximum {0} value of {1}.  Got: {2}".format(
                int_type.name,
                int_type.max_value,
                value,
                title=title,
            )
        )
