# vz89te

Pure Python protocol and driver logic for the MiCS-VZ-89TE indoor air quality
sensor. The package builds command frames, computes and checks checksums, and
decodes the sensor's 7-byte replies into VOC, CO2, status, raw resistance,
R0 calibration and revision data.

## What this package does not do

It does no bus I/O of its own. It has no I2C driver and no command-line tool.
You supply a transport callable that talks to the device. The transport is
called as `transport(address, request)`. It must write `request.payload` to
the device at `address` and return `request.response_size` bytes (7).

## Installation

```
pip install .
```

## Usage

```python
from vz89te.protocol import OutputType
from vz89te.sensor import VZ89TE


def transport(address, request):
    # Write request.payload to `address` on your I2C bus, wait about 2 ms,
    # then read request.response_size bytes and return them.
    ...


sensor = VZ89TE(transport, OutputType.I2C, 0x70)

sensor.request_revision()
print(sensor.year, sensor.month, sensor.day, sensor.revision_char)

sensor.request_r0()
print("R0 calibration:", sensor.r0_calibration, "Ohms")

sensor.poll()
sensor.check_crc()          # raises CrcError on a corrupted reply
print("VOC:", sensor.voc, "ppb")
print("CO2:", sensor.co2, "ppm")
print("Raw:", sensor.raw_resistance, "Ohms")
print("Status:", sensor.status)
```

`VZ89TE(transport, output=OutputType.I2C, address=0x70)`:

- `transport` must be callable, otherwise `CallbackError` is raised.
- `output` must be an `OutputType` (`I2C` or `PWM`) or its integer value,
  otherwise `OutputTypeError` is raised.
- `address` must be an integer between `0x70` and `0x77`, otherwise
  `AddressError` is raised. With `OutputType.PWM` the address is fixed to
  the default `0x70` and the given address is ignored.

`transport`, `output` and `address` are properties that can be reassigned,
with the same checks.

Reading:

- `poll()` sends the status command and updates `voc`, `co2` and `status`.
- `request_revision()` sends the revision command. `year`, `month`, `day`
  and `revision_char` then read from the reply.
- `request_r0()` sends the R0 command. `r0_calibration` then reads from the
  reply.
- `buffer` holds the last reply frame, `crc` its checksum byte.
  `crc_valid` tells whether the checksum matches. `check_crc()` raises
  `CrcError` if it does not.
- `raw_resistance` decodes the raw resistor bytes of the last status reply.

If the transport returns a reply of the wrong length, `SensorError` is raised
and the previous reply is kept. Until the first reply, every reading is zero.

## Protocol helpers

`vz89te.protocol` exposes the building blocks directly:

- `compute_crc(data)`: the sensor's checksum. It is the one's complement of the
  byte sum with the high byte added back as a carry.
- `build_request(command)`: a `Request` (`command`, `payload`,
  `response_size`, `size`) for a `Command` or its integer value
- `voc_from_level(level)` and `co2_from_level(level)`: convert raw level
  bytes to ppb and ppm
- `validate_address(address)`: return the address or raise `AddressError`

The protocol constants are also there: address limits, frame sizes, and the
byte positions within status, revision and R0 replies.

Errors derive from `SensorError`. They are `AddressError` and
`OutputTypeError` (also `ValueError`), `CallbackError` (also `TypeError`) and
`CrcError`.

## Running the tests

```
pip install .[test]
pytest
```