"""Sensor magnitudes, their topics, units and decimals, and reset reasons."""

from __future__ import annotations

from enum import IntEnum


class Magnitude(IntEnum):
    """Kinds of value a sensor slot can report."""

    NONE = 0
    TEMPERATURE = 1
    HUMIDITY = 2
    PRESSURE = 3
    CURRENT = 4
    VOLTAGE = 5
    POWER_ACTIVE = 6
    POWER_APPARENT = 7
    POWER_REACTIVE = 8
    POWER_FACTOR = 9
    ENERGY = 10
    ENERGY_DELTA = 11
    ANALOG = 12
    DIGITAL = 13
    EVENT = 14
    PM1DOT0 = 15
    PM2DOT5 = 16
    PM10 = 17
    CO2 = 18
    LUX = 19
    UVA = 20
    UVB = 21
    UVI = 22
    DISTANCE = 23
    HCHO = 24
    GEIGER_CPM = 25
    GEIGER_SIEVERT = 26
    COUNT = 27
    NO2 = 28
    CO = 29
    RESISTANCE = 30
    PH = 31


class ResetReason(IntEnum):
    """Reasons for a reboot requested by the firmware itself."""

    HARDWARE = 1
    WEB = 2
    TERMINAL = 3
    MQTT = 4
    RPC = 5
    OTA = 6
    HTTP = 7
    NOFUSS = 8
    UPGRADE = 9
    FACTORY = 10


_TOPICS = (
    "unknown", "temperature", "humidity",
    "pressure", "current", "voltage",
    "power", "apparent", "reactive",
    "factor", "energy", "energy_delta",
    "analog", "digital", "event",
    "pm1dot0", "pm2dot5", "pm10",
    "co2", "lux",
    "uva", "uvb", "uvi",
    "distance", "hcho",
    "ldr_cpm", "ldr_uSvh",
    "count",
    "no2", "co", "resistance", "ph",
)

_CELSIUS = "°C"
_PERCENT = "%"
_WATTS = "W"
_JOULES = "J"
_UGM3 = "µg/m³"
_PPM = "ppm"

_UNITS = (
    "", _CELSIUS, _PERCENT,
    "hPa", "A", "V",
    _WATTS, _WATTS, _WATTS,
    _PERCENT, _JOULES, _JOULES,
    "", "", "",
    _UGM3, _UGM3, _UGM3,
    _PPM, "lux",
    "", "", "",
    "m", "mg/m³",
    "cpm", "µSv/h",
    "",
    _PPM, _PPM,
    "ohm",
    "",
)

_DECIMALS = (
    0,
    1, 0, 2,
    3, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0,
    0, 0, 0,
    0, 0,
    0, 0, 3,
    3, 0,
    4, 4,
    0,
    0, 0, 0, 3,
)

_RESET_TEXT = {
    ResetReason.HARDWARE: "Hardware button",
    ResetReason.WEB: "Reboot from web interface",
    ResetReason.TERMINAL: "Reboot from terminal",
    ResetReason.MQTT: "Reboot from MQTT",
    ResetReason.RPC: "Reboot from RPC",
    ResetReason.OTA: "Reboot after successful OTA update",
    ResetReason.HTTP: "Reboot from HTTP",
    ResetReason.NOFUSS: "Reboot after successful NoFUSS update",
    ResetReason.UPGRADE: "Reboot after successful web update",
    ResetReason.FACTORY: "Factory reset",
}


def magnitude_topic(magnitude: int) -> str:
    """MQTT topic particle for a magnitude."""
    return _TOPICS[Magnitude(magnitude)]


def magnitude_unit(magnitude: int) -> str:
    """Unit symbol reported with a magnitude ('' when it has none)."""
    return _UNITS[Magnitude(magnitude)]


def magnitude_decimals(magnitude: int) -> int:
    """Number of decimals a magnitude is reported with."""
    return _DECIMALS[Magnitude(magnitude)]


def reset_reason_text(reason: int) -> str:
    """Human readable description of a custom reset reason."""
    return _RESET_TEXT[ResetReason(reason)]