from typing import Any

from click import ClickException

from imbue.ip_port.primitives import DataPath
from imbue.ip_port.primitives import InvalidIpPortReason


class BaseIpPortError(Exception):
    """Base exception for all ip_port errors."""


class IpPortValidationError(BaseIpPortError, ValueError):
    """Raised (or returned) when a value cannot be used as an IP port.

    The validator returns instances of this error rather than raising them, so
    callers can decide whether a bad value is fatal. It is a ValueError so that
    pydantic reports it as an ordinary field error.
    """

    def __init__(
        self,
        path: DataPath,
        reason: InvalidIpPortReason,
        input_value: Any,
        detail: str,
    ) -> None:
        self.path = path
        self.reason = reason
        self.input_value = input_value
        self.detail = detail
        super().__init__(f"{path}: {detail}")

    def __reduce__(self) -> tuple[type["IpPortValidationError"], tuple[DataPath, InvalidIpPortReason, Any, str]]:
        return (type(self), (self.path, self.reason, self.input_value, self.detail))


class IpPortConfigError(BaseIpPortError, ValueError):
    """Raised when the configured port range is invalid."""


class IpPortCliError(ClickException, BaseIpPortError):
    """Base exception for user-facing ip-port CLI errors.

    Subclasses and instances can set user_help_text to add a hint to the
    message the CLI prints.
    """

    user_help_text: str | None = None

    def __init__(self, message: str, user_help_text: str | None = None) -> None:
        super().__init__(message)
        if user_help_text is not None:
            self.user_help_text = user_help_text

    def format_message(self) -> str:
        if self.user_help_text:
            return str(self) + "  [" + self.user_help_text + "]"
        return str(self)
