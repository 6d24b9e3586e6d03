import re
from collections.abc import Callable
from decimal import Decimal
from numbers import Integral
from numbers import Real
from typing import Any
from typing import Final
from typing import NoReturn
from typing import TypeGuard

from loguru import logger
from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema
from pydantic_core import core_schema

from imbue.ip_port.data_types import DEFAULT_IP_PORT_RANGE
from imbue.ip_port.data_types import IpPortRange
from imbue.ip_port.errors import IpPortValidationError
from imbue.ip_port.primitives import DEFAULT_DATA_PATH
from imbue.ip_port.primitives import DataPath
from imbue.ip_port.primitives import InvalidIpPortReason
from imbue.ip_port.pure import pure

# An optional minus sign followed by ASCII digits. Strings that match but differ
# from the decimal rendering of their value ("080", "-0") are rejected as well.
_INTEGER_STRING_PATTERN: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+")


class IntIpPort(int):
    """An IP port number held as an int.

    Calling the class does not validate: it marks a value as already trusted.
    Use make_ip_port() or must_be_ip_port() to build one from untrusted input.
    """

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        return core_schema.no_info_after_validator_function(
            must_be_ip_port,
            core_schema.int_schema(strict=True),
        )


class StrIpPort(str):
    """An IP port number held as a string of decimal digits.

    Calling the class does not validate: it marks a value as already trusted.
    Use make_ip_port() or must_be_ip_port() to build one from untrusted input.
    """

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        return core_schema.no_info_after_validator_function(
            must_be_ip_port,
            core_schema.str_schema(strict=True),
            serialization=core_schema.to_string_ser_schema(),
        )


IpPort = IntIpPort | StrIpPort

OnIpPortError = Callable[[IpPortValidationError], IpPort]


@pure
def _describe_range(ip_port_range: IpPortRange) -> str:
    return f"between {ip_port_range.min_inc} and {ip_port_range.max_inc} inclusive"


@pure
def _is_whole_number(value: Real | Decimal) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    if isinstance(value, float):
        # False for NaN and infinities
        return value.is_integer()
    return value == int(value)


@pure
def _validate_ip_port_number(
    path: DataPath,
    input_value: Integral | Real | Decimal,
    ip_port_range: IpPortRange,
) -> IntIpPort | IpPortValidationError:
    if input_value not in ip_port_range:
        return IpPortValidationError(
            path=path,
            reason=InvalidIpPortReason.OUT_OF_RANGE,
            input_value=input_value,
            detail=f"must be {_describe_range(ip_port_range)}, got {input_value}",
        )
    if isinstance(input_value, IntIpPort):
        return input_value
    return IntIpPort(int(input_value))


@pure
def _validate_ip_port_string(
    path: DataPath,
    input_value: str,
    ip_port_range: IpPortRange,
) -> StrIpPort | IpPortValidationError:
    format_error = IpPortValidationError(
        path=path,
        reason=InvalidIpPortReason.INVALID_FORMAT,
        input_value=input_value,
        detail=f"must be the decimal representation of an integer, got {input_value!r}",
    )
    if _INTEGER_STRING_PATTERN.fullmatch(input_value) is None:
        return format_error
    try:
        value = int(input_value)
    except ValueError:
        # too many digits for int() to convert
        return format_error
    if str(value) != input_value:
        return format_error

    if value not in ip_port_range:
        return IpPortValidationError(
            path=path,
            reason=InvalidIpPortReason.OUT_OF_RANGE,
            input_value=input_value,
            detail=f"must be {_describe_range(ip_port_range)}, got {input_value!r}",
        )
    if isinstance(input_value, StrIpPort):
        return input_value
    return StrIpPort(input_value)


@pure
def validate_ip_port_data(
    path: DataPath,
    input_value: Any,
    ip_port_range: IpPortRange = DEFAULT_IP_PORT_RANGE,
) -> IpPort | IpPortValidationError:
    """Check whether input_value can be used as an IP port.

    Returns the accepted value as an IpPort, keeping the caller's
    representation (an int comes back as IntIpPort, a str as StrIpPort with
    the same text). Whole numbers of other numeric types, such as 80.0 or
    Decimal("80"), come back as IntIpPort. Otherwise returns, never raises,
    an IpPortValidationError that records path, the reason and the rejected
    value.
    """
    # bool is an int subclass but never a port number
    if isinstance(input_value, bool):
        return IpPortValidationError(
            path=path,
            reason=InvalidIpPortReason.INVALID_TYPE,
            input_value=input_value,
            detail=f"expected an int or a str, got {type(input_value).__name__}",
        )
    if isinstance(input_value, Integral):
        return _validate_ip_port_number(path, input_value, ip_port_range)
    if isinstance(input_value, (Real, Decimal)):
        if _is_whole_number(input_value):
            return _validate_ip_port_number(path, input_value, ip_port_range)
        return IpPortValidationError(
            path=path,
            reason=InvalidIpPortReason.NON_INTEGER,
            input_value=input_value,
            detail=f"must be an integer, got {type(input_value).__name__} {input_value!r}",
        )
    if isinstance(input_value, str):
        return _validate_ip_port_string(path, input_value, ip_port_range)
    return IpPortValidationError(
        path=path,
        reason=InvalidIpPortReason.INVALID_TYPE,
        input_value=input_value,
        detail=f"expected an int or a str, got {type(input_value).__name__}",
    )


def is_ip_port(
    input_value: Any,
    ip_port_range: IpPortRange = DEFAULT_IP_PORT_RANGE,
) -> TypeGuard[int | str]:
    """Return True if input_value can be used as an IP port. Never raises."""
    result = validate_ip_port_data(DEFAULT_DATA_PATH, input_value, ip_port_range)
    return not isinstance(result, IpPortValidationError)


def raise_ip_port_error(error: IpPortValidationError) -> NoReturn:
    """Default error handler for must_be_ip_port(): raise the error."""
    raise error


def must_be_ip_port(
    input_value: Any,
    *,
    on_error: OnIpPortError = raise_ip_port_error,
    path: DataPath = DEFAULT_DATA_PATH,
    ip_port_range: IpPortRange = DEFAULT_IP_PORT_RANGE,
) -> IpPort:
    """Return input_value as an IpPort, or hand the validation error to on_error.

    The default on_error raises IpPortValidationError. Supply a different
    handler to raise an application-specific error or to return a fallback
    port instead.
    """
    result = validate_ip_port_data(path, input_value, ip_port_range)
    if isinstance(result, IpPortValidationError):
        logger.trace("Rejected IP port at {}: {} ({!r})", result.path, result.reason, result.input_value)
        return on_error(result)
    return result


def make_ip_port(
    input_value: Any,
    *,
    on_error: OnIpPortError = raise_ip_port_error,
    path: DataPath = DEFAULT_DATA_PATH,
    ip_port_range: IpPortRange = DEFAULT_IP_PORT_RANGE,
) -> IpPort:
    """Smart constructor: build an IpPort from untrusted input.

    Behaves exactly like must_be_ip_port().
    """
    return must_be_ip_port(input_value, on_error=on_error, path=path, ip_port_range=ip_port_range)
