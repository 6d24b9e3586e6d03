from collections.abc import Mapping
from typing import Final

from pydantic import ValidationError

from imbue.ip_port.data_types import IpPortRange
from imbue.ip_port.errors import IpPortConfigError

IP_PORT_MIN_INC_ENV_VAR: Final[str] = "IP_PORT_MIN_INC"
IP_PORT_MAX_INC_ENV_VAR: Final[str] = "IP_PORT_MAX_INC"

_ENV_VAR_BY_FIELD: Final[dict[str, str]] = {
    "min_inc": IP_PORT_MIN_INC_ENV_VAR,
    "max_inc": IP_PORT_MAX_INC_ENV_VAR,
}


def load_ip_port_range_from_env(environ: Mapping[str, str]) -> IpPortRange:
    """Build the accepted port range from environment variables.

    Reads:
        IP_PORT_MIN_INC=<lowest acceptable port>
        IP_PORT_MAX_INC=<highest acceptable port>

    Unset or empty variables keep the default bound. Pass os.environ (or any
    mapping, in tests).

    Raises:
        IpPortConfigError: a value is not an integer, or the bounds do not form
            a valid range inside 0-65535.
    """
    raw: dict[str, str] = {}
    for field_name, env_var in _ENV_VAR_BY_FIELD.items():
        env_value = environ.get(env_var, "").strip()
        if env_value:
            raw[field_name] = env_value

    # Strings are converted to ints by pydantic, which also checks the bounds
    try:
        return IpPortRange.model_validate(raw)
    except ValidationError as e:
        raise IpPortConfigError(
            f"Invalid port range from {IP_PORT_MIN_INC_ENV_VAR}/{IP_PORT_MAX_INC_ENV_VAR}: {e}"
        ) from e
