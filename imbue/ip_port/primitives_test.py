"""Tests for primitives."""

import pytest
from pydantic import BaseModel

from imbue.ip_port.primitives import DEFAULT_DATA_PATH
from imbue.ip_port.primitives import DataPath
from imbue.ip_port.primitives import InvalidIpPortReason

# =============================================================================
# Tests for DataPath
# =============================================================================


def test_data_path_valid() -> None:
    """DataPath should accept non-empty strings unchanged."""
    result = DataPath("config.server.port")
    assert result == "config.server.port"


def test_data_path_raises_on_empty() -> None:
    """DataPath should raise ValueError on empty string."""
    with pytest.raises(ValueError, match="cannot be empty"):
        DataPath("")


def test_data_path_raises_on_whitespace() -> None:
    """DataPath should raise ValueError on whitespace-only string."""
    with pytest.raises(ValueError, match="cannot be empty"):
        DataPath("   ")


def test_default_data_path_is_object() -> None:
    assert DEFAULT_DATA_PATH == "object"
    assert isinstance(DEFAULT_DATA_PATH, DataPath)


def test_data_path_pydantic_schema() -> None:
    """DataPath should work in pydantic models via model_validate."""

    class TestModel(BaseModel):
        path: DataPath

    model = TestModel.model_validate({"path": "listeners[0].port"})
    assert model.path == "listeners[0].port"
    assert isinstance(model.path, DataPath)
    assert model.model_dump() == {"path": "listeners[0].port"}


# =============================================================================
# Tests for InvalidIpPortReason
# =============================================================================


def test_invalid_ip_port_reason_values_are_upper_case_names() -> None:
    assert InvalidIpPortReason.INVALID_TYPE == "INVALID_TYPE"
    assert InvalidIpPortReason.INVALID_FORMAT == "INVALID_FORMAT"
    assert InvalidIpPortReason.NON_INTEGER == "NON_INTEGER"
    assert InvalidIpPortReason.OUT_OF_RANGE == "OUT_OF_RANGE"
