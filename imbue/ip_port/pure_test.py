from imbue.ip_port.ip_port import validate_ip_port_data
from imbue.ip_port.pure import pure
from imbue.ip_port.resolvers import resolve_ip_port_to_string


def test_pure_returns_the_decorated_function() -> None:
    def lowest_port() -> int:
        return 0

    assert pure(lowest_port) is lowest_port


def test_pure_library_functions_keep_their_names() -> None:
    assert validate_ip_port_data.__name__ == "validate_ip_port_data"
    assert resolve_ip_port_to_string.__name__ == "resolve_ip_port_to_string"
