from typing import Final

# Bounds of the unsigned 16-bit TCP/UDP port space
MIN_IP_PORT: Final[int] = 0
MAX_IP_PORT: Final[int] = 65535
