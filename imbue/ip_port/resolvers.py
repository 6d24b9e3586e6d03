from imbue.ip_port.ip_port import IpPort
from imbue.ip_port.pure import pure


@pure
def resolve_ip_port_to_number(port: IpPort) -> int:
    """Return the port as an int, parsing it if it is held as a string.

    The port is not re-validated; only pass values that came from
    make_ip_port(), must_be_ip_port() or validate_ip_port_data().
    """
    if isinstance(port, str):
        return int(port)
    return port


@pure
def resolve_ip_port_to_string(port: IpPort) -> str:
    """Return the port as a decimal string, formatting it if it is held as an int.

    The port is not re-validated; only pass values that came from
    make_ip_port(), must_be_ip_port() or validate_ip_port_data().
    """
    if isinstance(port, str):
        return port
    return str(port)
