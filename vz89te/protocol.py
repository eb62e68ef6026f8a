"""Wire format, constants and conversions for the MiCS-VZ-89TE air quality sensor."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

I2C_ADDR_DEFAULT = 0x70
I2C_ADDR_MIN = 0x70
I2C_ADDR_MAX = 0x77

RESPONSE_SIZE = 7
REQUEST_SIZE = RESPONSE_SIZE - 1

INCOMING_OFFSET = 13.0
VOC_OFFSET = 0.0
CO2_OFFSET = 400
CONSTANT_VOC = 1000.0
CONSTANT_CO2 = 1600.0
DIVISOR = 229.0

# Byte positions in a status response.
VOC_LEVEL = 0
CO2_LEVEL = 1
RAW_MSB = 2
RAW_MID = 3
RAW_LSB = 4
ERROR = 5
CRC = 6

# Byte positions in a revision response.
YEAR = 0
MONTH = 1
DAY = 2
CHAR = 3

# Byte positions in an R0 response.
R0_LSB = 0
R0_MSB = 1


class OutputType(IntEnum):
    """How the sensor delivers its measurements."""

    I2C = 0
    PWM = 1


class Command(IntEnum):
    """Commands understood by the sensor."""

    SET_PPM_CO2 = 0x08
    RESERVED_09 = 0x09
    RESERVED_0A = 0x0A
    RESERVED_0B = 0x0B
    GET_STATUS = 0x0C
    GET_REVISION = 0x0D
    RESERVED_0E = 0x0E
    RESERVED_0F = 0x0F
    GET_R0 = 0x10


class SensorError(Exception):
    """Base class for all sensor errors."""


class AddressError(SensorError, ValueError):
    """The I2C address is outside the range the sensor accepts."""


class OutputTypeError(SensorError, ValueError):
    """The output type is not one the sensor supports."""


class CallbackError(SensorError, TypeError):
    """No usable transport was supplied."""


class CrcError(SensorError):
    """A received frame failed its checksum."""


@dataclass(frozen=True)
class Request:
    """A command frame to write to the sensor and the size of the expected reply."""

    command: Command
    payload: bytes
    response_size: int = RESPONSE_SIZE

    @property
    def size(self) -> int:
        return len(self.payload)


def compute_crc(data: Iterable[int]) -> int:
    """Return the sensor's checksum: one's complement of the byte sum with end-around carry."""
    total = sum(data) & 0xFFFF
    crc = ((total & 0xFF) + (total >> 8)) & 0xFF
    return 0xFF - crc


def build_request(command: Command | int) -> Request:
    """Build the request frame for ``command`` with its checksum in the last byte."""
    cmd = Command(command)
    body = bytes([cmd]) + bytes(REQUEST_SIZE - 2)
    return Request(command=cmd, payload=body + bytes([compute_crc(body)]))


def voc_from_level(level: int) -> float:
    """Convert the raw VOC level byte to ppb (0 .. 1000)."""
    return (level - INCOMING_OFFSET) * (CONSTANT_VOC / DIVISOR) + VOC_OFFSET


def co2_from_level(level: int) -> float:
    """Convert the raw CO2 level byte to ppm (400 .. 2000)."""
    return (level - INCOMING_OFFSET) * (CONSTANT_CO2 / DIVISOR) + CO2_OFFSET


def validate_address(address: int) -> int:
    """Return ``address`` if the sensor accepts it, otherwise raise AddressError."""
    if isinstance(address, bool) or not isinstance(address, int):
        raise AddressError(f"I2C address must be an integer, got {address!r}")
    if not I2C_ADDR_MIN <= address <= I2C_ADDR_MAX:
        raise AddressError(
            f"I2C address 0x{address:02X} outside 0x{I2C_ADDR_MIN:02X}..0x{I2C_ADDR_MAX:02X}"
        )
    return address