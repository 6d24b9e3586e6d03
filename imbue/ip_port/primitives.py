from enum import StrEnum
from enum import auto
from typing import Any
from typing import Final
from typing import Self

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema
from pydantic_core import core_schema


class InvalidIpPortReason(StrEnum):
    """Why a value was rejected as an IP port."""

    @staticmethod
    def _generate_next_value_(
        name: str,
        start: int,
        count: int,
        last_values: list[str],
    ) -> str:
        return name.upper()

    INVALID_TYPE = auto()
    INVALID_FORMAT = auto()
    NON_INTEGER = auto()
    OUT_OF_RANGE = auto()


class DataPath(str):
    """Where a value lives inside an enclosing data structure, for error messages.

    Cannot be empty or whitespace-only.
    """

    def __new__(cls, value: str) -> Self:
        if not value or not value.strip():
            raise ValueError(f"{cls.__name__} cannot be empty")
        return super().__new__(cls, value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(min_length=1),
            serialization=core_schema.to_string_ser_schema(),
        )


# Path used when the value being validated is not part of a larger structure
DEFAULT_DATA_PATH: Final[DataPath] = DataPath("object")
