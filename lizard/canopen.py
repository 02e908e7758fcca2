"""CANopen identifiers, object indices and little-endian marshalling."""

from __future__ import annotations

from enum import Enum, IntEnum, auto

from .errors import LizardError


class CobFunction(IntEnum):
    SYNC_EMCY = 0x1
    TPDO1 = 0x3
    RPDO1 = 0x4
    TPDO2 = 0x5
    RPDO2 = 0x6
    TPDO3 = 0x7
    RPDO3 = 0x8
    TPDO4 = 0x9
    RPDO4 = 0xA
    SDO_SERVER2CLIENT = 0xB
    SDO_CLIENT2SERVER = 0xC
    HEARTBEAT = 0xE


class NmtStateChange(IntEnum):
    OPERATIONAL = 0x1
    PREOPERATIONAL = 0x80
    RESET_NODE = 0x81
    RESET_COM = 0x82


class OpModeCode(IntEnum):
    NONE = 0
    PROFILE_POSITION = 1
    VELOCITY = 2
    PROFILE_VELOCITY = 3
    TORQUE_PROFILE = 4
    HOMING = 6
    INTERPOLATED_POSITION = 7


class HeartbeatStateCode(IntEnum):
    BOOTING = 0x00
    PREOPERATIONAL = 0x7F
    OPERATIONAL = 0x05
    STOPPED = 0x04


class InitState(Enum):
    WAITING_FOR_PREOPERATIONAL = auto()
    WAITING_FOR_SDO_WRITES = auto()
    WAITING_FOR_OPERATIONAL = auto()
    INIT_DONE = auto()


class ServerCommandSpecifier(IntEnum):
    EXPEDITED_READ_DATA = 2
    EXPEDITED_WRITE_SUCCESS = 3
    WRITE_FAILURE = 4


class SdoWriteFailureReason(IntEnum):
    NON_EXISTANT_OBJECT = 0x06020000
    SIZE_MISMATCH = 0x06070010


CONTROL_WORD_U16 = 0x6040
STATUS_WORD_U16 = 0x6041
OP_MODE_U8 = 0x6060
OP_MODE_DISP_U16 = 0x6061

SDO_WRITE_U8_HEADER = (0x1 << 5) | (3 << 2) | (1 << 1) | 1
SDO_WRITE_U16_HEADER = (0x1 << 5) | (2 << 2) | (1 << 1) | 1
SDO_WRITE_U32_HEADER = (0x1 << 5) | (1 << 1) | 1
SDO_READ_HEADER = 0x2 << 5

_RPDO_FUNCTIONS = (CobFunction.RPDO1, CobFunction.RPDO2, CobFunction.RPDO3, CobFunction.RPDO4)


def wrap_cob_id(function, node_id) -> int:
    """Combine a 4-bit function code and a node id into an 11-bit COB-ID."""
    return (int(function) << 7) | (node_id & 0xFF)


def unwrap_cob_id(cob_id) -> tuple[int, int]:
    """Split a COB-ID into its (function code, node id)."""
    return (cob_id >> 7) & 0xF, cob_id & 0x7F


def make_mapping_entry(index, sub, size) -> int:
    """Build a 32-bit PDO mapping entry from object index, subindex and bit size."""
    return ((index << 16) | (sub << 8) | size) & 0xFFFFFFFF


def _check_rpdo(rpdo: int) -> None:
    if not 1 <= rpdo <= 4:
        raise ValueError(f"RPDO number must be in range 1-4, got {rpdo}")


def rpdo_com_param_index(rpdo) -> int:
    """Object index of the communication parameters of RPDO 1-4."""
    _check_rpdo(rpdo)
    return 0x1400 + rpdo - 1


def rpdo_mappings_index(rpdo) -> int:
    """Object index of the mapping parameters of RPDO 1-4."""
    _check_rpdo(rpdo)
    return 0x1600 + rpdo - 1


def rpdo_func(rpdo) -> CobFunction:
    """COB function code of RPDO 1-4."""
    _check_rpdo(rpdo)
    return _RPDO_FUNCTIONS[rpdo - 1]


def demarshal_unsigned(data, size) -> int:
    """Read an unsigned little-endian integer of ``size`` bytes."""
    if len(data) < size:
        raise ValueError(f"need {size} bytes, got {len(data)}")
    return int.from_bytes(bytes(data[:size]), "little")


def marshal_unsigned(value, size) -> bytes:
    """Encode the low ``size`` bytes of ``value`` little-endian."""
    return (value & ((1 << (8 * size)) - 1)).to_bytes(size, "little")


def demarshal_i32(data) -> int:
    """Read a signed 32-bit little-endian integer."""
    if len(data) < 4:
        raise ValueError(f"need 4 bytes, got {len(data)}")
    return int.from_bytes(bytes(data[:4]), "little", signed=True)


def marshal_i32(value) -> bytes:
    """Encode a signed 32-bit integer little-endian (two's complement)."""
    return marshal_unsigned(value, 4)


def marshal_index(index, sub) -> bytes:
    """Encode an object index and subindex as the three SDO address bytes."""
    return bytes((index & 0xFF, (index >> 8) & 0xFF, sub & 0xFF))


def check_node_id(node_id) -> int:
    """Validate a CANopen node id (1-127) and return it."""
    if node_id < 1 or node_id > 127:
        raise LizardError(f"Invalid CanOpen node id: {node_id}. Must be in range 1-127")
    return int(node_id)