# espurna

Pure-Python helpers for the configuration side of a home automation
device: build timestamps, compile-time feature resolution, sensor
magnitude metadata, the RTC memory layout, runtime setting checks and a
small injectable stream buffer. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Modules

- `espurna.buildtime`: turn compiler-style date and time strings such as
  `"Mar 29 2018"` and `"12:34:56"` into a UNIX timestamp.
  `parse_build_date` returns a `BuildTime` named tuple,
  `build_timestamp` the timestamp; `unix_timestamp`, `year_day`,
  `february_days` and `month_number` are the building blocks. Malformed
  strings, unknown month names and years before 1970 raise `ValueError`.
- `espurna.streaminjector`: `StreamInjector(buflen)`, a ring buffer of
  1..255 bytes. `inject` takes an int, bytes or a str; `read` and `peek`
  return the next byte or `None`; `available` counts waiting bytes;
  `flush` discards them. `write` hands each byte to the callback set with
  `on_write`. There is no overflow guard: injecting a full buffer's worth
  makes it look empty again.
- `espurna.magnitudes`: the `Magnitude` and `ResetReason` enums, with
  `magnitude_topic`, `magnitude_unit`, `magnitude_decimals` and
  `reset_reason_text`.
- `espurna.features`: `FeatureFlags`, a frozen dataclass of build-time
  switches. `resolved()` applies the dependency rules between features
  (for example, no web support turns off the API, web debug and SSDP;
  the scheduler turns on NTP), `debug_enabled()` tells whether any debug
  channel remains, and `modules()` lists the built-in modules in
  capability order. `parse_build_flags` collects `-DNAME` /
  `-DNAME=value` definitions, and `features_from_build_flags` turns them
  into `FeatureFlags`, mapping the deprecated `TELNET_PASSWORD` and
  `RF_PIN` to their replacements with a `DeprecationWarning`.
- `espurna.rtcmem`: `RtcmemData`, packed to and unpacked from the
  little-endian RTC memory layout; `is_valid()` checks the magic number.
- `espurna.settings`: `ReconnectBackoff` (a linearly growing, capped
  reconnection delay), `validate_hostname`, `validate_admin_pass`,
  `wifi_distance` and `clamp_loop_delay`.

## Example

```python
from espurna.buildtime import build_timestamp
from espurna.features import features_from_build_flags
from espurna.magnitudes import Magnitude, magnitude_topic
from espurna.settings import ReconnectBackoff, wifi_distance
from espurna.streaminjector import StreamInjector

print(build_timestamp("Jan  1 1970", "00:00:00"))  # 0

stream = StreamInjector(128)
stream.inject(b"help\n")
print(stream.available())  # 5
print(chr(stream.read()))  # h

flags = features_from_build_flags("-DWEB_SUPPORT=0").resolved()
print(flags.api_support)  # False

print(magnitude_topic(Magnitude.LUX))  # lux

backoff = ReconnectBackoff()
print(backoff.next_delay(), backoff.next_delay())  # 5000 10000

print(wifi_distance(-70))  # 10.0
```

## What this package does not do

It does not run a device. There are no sensor drivers, no hardware
defaults for buttons, relays or LEDs, no websocket message reassembly,
no IR remote tables, and no MQTT, web or telnet client or server. It
holds no persistent settings store either: the settings module only
checks values and computes delays.