from typing import Final
from typing import Self

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

from imbue.ip_port.constants import MAX_IP_PORT
from imbue.ip_port.constants import MIN_IP_PORT


class IpPortRange(BaseModel):
    """Inclusive bounds that a port number must fall within.

    Override the defaults to create a refined port type, e.g. non-privileged
    ports only (1024-65535). The range can only narrow the port space.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    min_inc: int = Field(
        default=MIN_IP_PORT,
        ge=MIN_IP_PORT,
        le=MAX_IP_PORT,
        description="The lowest acceptable port number",
    )
    max_inc: int = Field(
        default=MAX_IP_PORT,
        ge=MIN_IP_PORT,
        le=MAX_IP_PORT,
        description="The highest acceptable port number",
    )

    @model_validator(mode="after")
    def _check_bounds_are_ordered(self) -> Self:
        if self.min_inc > self.max_inc:
            raise ValueError(f"min_inc ({self.min_inc}) must not be greater than max_inc ({self.max_inc})")
        return self

    def __contains__(self, value: int) -> bool:
        return self.min_inc <= value <= self.max_inc


DEFAULT_IP_PORT_RANGE: Final[IpPortRange] = IpPortRange()
