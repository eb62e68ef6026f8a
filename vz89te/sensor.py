"""High-level driver for the MiCS-VZ-89TE air quality sensor."""

from __future__ import annotations

from collections.abc import Callable

from vz89te.protocol import (
    CHAR,
    CO2_LEVEL,
    CRC,
    DAY,
    ERROR,
    I2C_ADDR_DEFAULT,
    MONTH,
    R0_LSB,
    R0_MSB,
    RAW_LSB,
    RAW_MID,
    RAW_MSB,
    RESPONSE_SIZE,
    VOC_LEVEL,
    YEAR,
    CallbackError,
    Command,
    CrcError,
    OutputType,
    OutputTypeError,
    Request,
    SensorError,
    build_request,
    co2_from_level,
    compute_crc,
    validate_address,
    voc_from_level,
)

Transport = Callable[[int, Request], bytes]


class VZ89TE:
    """A MiCS-VZ-89TE sensor reached through a caller-supplied transport.

    The transport is called as ``transport(address, request)``; it must write
    ``request.payload`` to the device and return ``request.response_size`` bytes.
    """

    def __init__(
        self,
        transport: Transport,
        output: OutputType | int = OutputType.I2C,
        address: int = I2C_ADDR_DEFAULT,
    ) -> None:
        self.transport = transport
        self.output = output
        if self._output is OutputType.PWM:
            self._address = I2C_ADDR_DEFAULT
        else:
            self.address = address
        self._co2 = 0.0
        self._voc = 0.0
        self._status = 0
        self._buffer = bytes(RESPONSE_SIZE)

    @property
    def transport(self) -> Transport:
        return self._transport

    @transport.setter
    def transport(self, transport: Transport) -> None:
        if transport is None or not callable(transport):
            raise CallbackError("transport must be a callable")
        self._transport = transport

    @property
    def output(self) -> OutputType:
        return self._output

    @output.setter
    def output(self, output: OutputType | int) -> None:
        try:
            self._output = OutputType(output)
        except ValueError:
            raise OutputTypeError(f"unsupported output type {output!r}") from None

    @property
    def address(self) -> int:
        return self._address

    @address.setter
    def address(self, address: int) -> None:
        self._address = validate_address(address)

    @property
    def buffer(self) -> bytes:
        """The last response frame received."""
        return self._buffer

    def _exchange(self, command: Command) -> None:
        request = build_request(command)
        response = bytes(self._transport(self._address, request))
        if len(response) != request.response_size:
            raise SensorError(
                f"expected {request.response_size} bytes, got {len(response)}"
            )
        self._buffer = response

    def poll(self) -> None:
        """Read the status frame and update CO2, VOC and status."""
        self._exchange(Command.GET_STATUS)
        self._status = self._buffer[ERROR]
        self._voc = voc_from_level(self._buffer[VOC_LEVEL])
        self._co2 = co2_from_level(self._buffer[CO2_LEVEL])

    def request_revision(self) -> None:
        """Read the revision frame (date and revision character)."""
        self._exchange(Command.GET_REVISION)

    def request_r0(self) -> None:
        """Read the R0 calibration frame."""
        self._exchange(Command.GET_R0)

    @property
    def co2(self) -> float:
        return self._co2

    @property
    def voc(self) -> float:
        return self._voc

    @property
    def status(self) -> int:
        return self._status

    @property
    def raw_resistance(self) -> int:
        buf = self._buffer
        return (buf[RAW_MSB] << 16) | (buf[RAW_MID] << 8) | (buf[RAW_LSB] * 10)

    @property
    def r0_calibration(self) -> int:
        buf = self._buffer
        return ((buf[R0_MSB] & 0x3F) << 8) | buf[R0_LSB]

    @property
    def year(self) -> int:
        return self._buffer[YEAR]

    @property
    def month(self) -> int:
        return self._buffer[MONTH]

    @property
    def day(self) -> int:
        return self._buffer[DAY]

    @property
    def revision_char(self) -> str:
        return chr(self._buffer[CHAR])

    @property
    def crc(self) -> int:
        return self._buffer[CRC]

    @property
    def crc_valid(self) -> bool:
        return self.crc == compute_crc(self._buffer[:CRC])

    def check_crc(self) -> None:
        """Raise CrcError if the last frame's checksum does not match."""
        expected = compute_crc(self._buffer[:CRC])
        if self.crc != expected:
            raise CrcError(f"CRC mismatch: received {self.crc}, computed {expected}")