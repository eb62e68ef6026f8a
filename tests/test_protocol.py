import pytest

from vz89te.protocol import (
    AddressError,
    Command,
    CrcError,
    OutputType,
    Request,
    SensorError,
    build_request,
    co2_from_level,
    compute_crc,
    validate_address,
    voc_from_level,
)


def test_crc_of_empty_is_ff():
    assert compute_crc([]) == 0xFF


def test_crc_of_single_byte_is_complement():
    assert compute_crc([0x0C]) == 0xFF - 0x0C


def test_crc_is_order_independent():
    data = [0x12, 0xFE, 0x80, 0x33, 0x07, 0xA1]
    assert compute_crc(data) == compute_crc(reversed(data))


def test_crc_folds_carry():
    # 0xFF + 0x01 = 0x100 -> low 0x00 + carry 0x01 equals a single 0x01
    assert compute_crc([0xFF, 0x01]) == compute_crc([0x01])


def test_crc_stays_in_byte_range():
    assert 0 <= compute_crc([0xFF] * 6) <= 0xFF


def test_build_status_request_layout():
    req = build_request(Command.GET_STATUS)
    assert isinstance(req, Request)
    assert req.command is Command.GET_STATUS
    assert req.size == 6
    assert req.response_size == 7
    assert req.payload[:5] == bytes([0x0C, 0, 0, 0, 0])
    assert req.payload[5] == compute_crc(req.payload[:5])


@pytest.mark.parametrize("command", [Command.GET_STATUS, Command.GET_REVISION, Command.GET_R0])
def test_build_request_first_byte_is_command(command):
    req = build_request(command)
    assert req.payload[0] == command
    assert req.payload[5] == compute_crc([int(command)])


def test_build_request_accepts_int():
    assert build_request(0x10).command is Command.GET_R0


def test_build_request_rejects_unknown_command():
    with pytest.raises(ValueError):
        build_request(0x42)


def test_voc_range_endpoints():
    assert voc_from_level(13) == 0.0
    assert voc_from_level(13 + 229) == pytest.approx(1000.0)


def test_co2_range_endpoints():
    assert co2_from_level(13) == 400.0
    assert co2_from_level(13 + 229) == pytest.approx(2000.0)


def test_conversions_are_increasing():
    assert voc_from_level(100) < voc_from_level(101)
    assert co2_from_level(100) < co2_from_level(101)


@pytest.mark.parametrize("address", [0x70, 0x73, 0x77])
def test_validate_address_accepts_range(address):
    assert validate_address(address) == address


@pytest.mark.parametrize("address", [0x6F, 0x78, 0x00, 0xFF, -1])
def test_validate_address_rejects_out_of_range(address):
    with pytest.raises(AddressError):
        validate_address(address)


def test_validate_address_rejects_non_int():
    with pytest.raises(AddressError):
        validate_address("0x70")


def test_error_hierarchy():
    with pytest.raises(SensorError) as excinfo:
        validate_address(0x80)
    assert type(excinfo.value) is AddressError
    assert issubclass(CrcError, SensorError)


def test_output_type_values():
    assert OutputType(0) is OutputType.I2C
    assert OutputType(1) is OutputType.PWM