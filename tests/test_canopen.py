import pytest

from lizard.canopen import (
    CONTROL_WORD_U16,
    CobFunction,
    check_node_id,
    demarshal_i32,
    demarshal_unsigned,
    make_mapping_entry,
    marshal_i32,
    marshal_index,
    marshal_unsigned,
    rpdo_com_param_index,
    rpdo_func,
    rpdo_mappings_index,
    unwrap_cob_id,
    wrap_cob_id,
)
from lizard.errors import LizardError


def test_wrap_heartbeat():
    assert wrap_cob_id(CobFunction.HEARTBEAT, 5) == 0x705


@pytest.mark.parametrize("function", list(CobFunction))
@pytest.mark.parametrize("node_id", [1, 42, 127])
def test_cob_id_round_trip(function, node_id):
    assert unwrap_cob_id(wrap_cob_id(function, node_id)) == (int(function), node_id)


def test_mapping_entry_fields():
    entry = make_mapping_entry(CONTROL_WORD_U16, 3, 16)
    assert entry >> 16 == CONTROL_WORD_U16
    assert (entry >> 8) & 0xFF == 3
    assert entry & 0xFF == 16


def test_rpdo_indices():
    assert rpdo_com_param_index(1) == 0x1400
    assert rpdo_mappings_index(1) == 0x1600
    assert rpdo_com_param_index(4) - rpdo_com_param_index(1) == 3


def test_rpdo_func():
    assert [rpdo_func(n) for n in range(1, 5)] == [
        CobFunction.RPDO1,
        CobFunction.RPDO2,
        CobFunction.RPDO3,
        CobFunction.RPDO4,
    ]


@pytest.mark.parametrize("rpdo", [0, 5])
def test_rpdo_out_of_range(rpdo):
    with pytest.raises(ValueError):
        rpdo_func(rpdo)
    with pytest.raises(ValueError):
        rpdo_com_param_index(rpdo)


@pytest.mark.parametrize("size", [1, 2, 4])
@pytest.mark.parametrize("value", [0, 1, 0x7F, 0xFF])
def test_unsigned_round_trip(size, value):
    encoded = marshal_unsigned(value, size)
    assert len(encoded) == size
    assert demarshal_unsigned(encoded, size) == value


def test_unsigned_is_little_endian():
    encoded = marshal_unsigned(0x1234, 2)
    assert encoded[0] == 0x34
    assert encoded[1] == 0x12


def test_demarshal_unsigned_too_short():
    with pytest.raises(ValueError):
        demarshal_unsigned(b"\x01", 2)


def test_i32_minus_one():
    assert demarshal_i32(b"\xff\xff\xff\xff") == -1


@pytest.mark.parametrize("value", [0, 1, -1, 2**31 - 1, -(2**31), -123456])
def test_i32_round_trip(value):
    assert demarshal_i32(marshal_i32(value)) == value


def test_marshal_index_control_word():
    assert marshal_index(CONTROL_WORD_U16, 0) == b"\x40\x60\x00"


@pytest.mark.parametrize("node_id", [1, 64, 127])
def test_check_node_id_valid(node_id):
    assert check_node_id(node_id) == node_id


@pytest.mark.parametrize("node_id", [0, 128, -5])
def test_check_node_id_invalid(node_id):
    with pytest.raises(LizardError, match="Must be in range 1-127"):
        check_node_id(node_id)