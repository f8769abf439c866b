"""Build-time feature switches, their inter-dependencies and build flag parsing."""

from __future__ import annotations

import re
import shlex
import warnings
from dataclasses import dataclass, fields, replace
from typing import Dict, List, Mapping, Optional, Union

GPIO_NONE = 0x99

# Build flags the firmware was compiled with (none by default).
APP_BUILD_FLAGS = ""

# Support switches in the order they are listed as firmware capabilities.
_MODULE_ORDER = (
    ("alexa_support", "ALEXA"),
    ("api_support", "API"),
    ("broker_support", "BROKER"),
    ("button_support", "BUTTON"),
    ("debug_serial_support", "DEBUG_SERIAL"),
    ("debug_telnet_support", "DEBUG_TELNET"),
    ("debug_udp_support", "DEBUG_UDP"),
    ("debug_web_support", "DEBUG_WEB"),
    ("domoticz_support", "DOMOTICZ"),
    ("encoder_support", "ENCODER"),
    ("homeassistant_support", "HOMEASSISTANT"),
    ("i2c_support", "I2C"),
    ("influxdb_support", "INFLUXDB"),
    ("ir_support", "IR"),
    ("led_support", "LED"),
    ("llmnr_support", "LLMNR"),
    ("mdns_client_support", "MDNS_CLIENT"),
    ("mdns_server_support", "MDNS_SERVER"),
    ("mqtt_support", "MQTT"),
    ("netbios_support", "NETBIOS"),
    ("nofuss_support", "NOFUSS"),
    ("ntp_support", "NTP"),
    ("rfm69_support", "RFM69"),
    ("rf_support", "RF"),
    ("scheduler_support", "SCHEDULER"),
    ("sensor_support", "SENSOR"),
    ("spiffs_support", "SPIFFS"),
    ("ssdp_support", "SSDP"),
    ("telnet_support", "TELNET"),
    ("terminal_support", "TERMINAL"),
    ("thermostat_support", "THERMOSTAT"),
    ("thermostat_display_support", "THERMOSTAT_DISPLAY"),
    ("thingspeak_support", "THINGSPEAK"),
    ("uart_mqtt_support", "UART_MQTT"),
    ("web_support", "WEB"),
)

_BOOL_OPTIONS = (
    "telnet_authentication",
    "thingspeak_use_ssl",
    "thingspeak_use_async",
)

_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class FeatureFlags:
    """Compile-time feature switches.

    ``domoticz_support`` and ``homeassistant_support`` default to ``None``,
    meaning they follow ``mqtt_support``.
    """

    alexa_support: bool = True
    api_support: bool = True
    broker_support: bool = True
    button_support: bool = True
    debug_serial_support: bool = True
    debug_telnet_support: bool = True
    debug_udp_support: bool = False
    debug_web_support: bool = True
    domoticz_support: Optional[bool] = None
    encoder_support: bool = False
    homeassistant_support: Optional[bool] = None
    i2c_support: bool = False
    influxdb_support: bool = False
    ir_support: bool = False
    led_support: bool = True
    llmnr_support: bool = False
    mdns_client_support: bool = False
    mdns_server_support: bool = True
    mqtt_support: bool = True
    netbios_support: bool = False
    nofuss_support: bool = False
    ntp_support: bool = True
    rfm69_support: bool = False
    rf_support: bool = False
    scheduler_support: bool = True
    sensor_support: bool = False
    spiffs_support: bool = False
    ssdp_support: bool = False
    telnet_support: bool = True
    terminal_support: bool = True
    thermostat_support: bool = False
    thermostat_display_support: bool = False
    thingspeak_support: bool = True
    uart_mqtt_support: bool = False
    web_support: bool = True

    telnet_authentication: bool = True
    thingspeak_use_ssl: bool = False
    thingspeak_use_async: bool = True
    async_tcp_ssl_enabled: bool = False
    rfb_rx_pin: int = GPIO_NONE

    def resolved(self) -> "FeatureFlags":
        """Apply the dependency rules between features and return the result."""
        f = self
        if f.debug_telnet_support:
            f = replace(f, telnet_support=True)
        if not f.web_support:
            f = replace(f, debug_web_support=False, api_support=False,
                        ssdp_support=False)
        if f.uart_mqtt_support:
            f = replace(f, mqtt_support=True, terminal_support=False,
                        debug_serial_support=False)
        if f.alexa_support:
            f = replace(f, broker_support=True)
        if f.influxdb_support:
            f = replace(f, broker_support=True)
        domoticz = f.mqtt_support if f.domoticz_support is None else f.domoticz_support
        if domoticz:
            f = replace(f, mqtt_support=True, broker_support=True)
        homeassistant = (f.mqtt_support if f.homeassistant_support is None
                         else f.homeassistant_support)
        if homeassistant:
            f = replace(f, mqtt_support=True)
        if not f.async_tcp_ssl_enabled:
            if f.thingspeak_use_ssl and f.thingspeak_use_async:
                f = replace(f, thingspeak_support=False)
        if f.scheduler_support:
            f = replace(f, ntp_support=True)
        # Features that follow MQTT take its final value.
        if f.domoticz_support is None:
            f = replace(f, domoticz_support=f.mqtt_support)
        if f.homeassistant_support is None:
            f = replace(f, homeassistant_support=f.mqtt_support)
        return f

    def debug_enabled(self) -> bool:
        """Whether any debug output channel ends up enabled."""
        f = self.resolved()
        return bool(f.debug_serial_support or f.debug_udp_support
                    or f.debug_telnet_support or f.debug_web_support)

    def modules(self) -> List[str]:
        """Names of the modules built in, in capability listing order."""
        f = self.resolved()
        return [label for name, label in _MODULE_ORDER if getattr(f, name)]


def parse_build_flags(flags: str) -> Dict[str, str]:
    """Collect ``-DNAME`` and ``-DNAME=value`` definitions from a flag string.

    A name defined without a value gets ``"1"``. Other flags are ignored.
    """
    result: Dict[str, str] = {}
    tokens = shlex.split(flags)
    pending = False
    for token in tokens:
        if pending:
            definition = token
            pending = False
        elif token == "-D":
            pending = True
            continue
        elif token.startswith("-D"):
            definition = token[2:]
        else:
            continue
        name, sep, value = definition.partition("=")
        if not _NAME_RE.match(name):
            raise ValueError(f"invalid macro name in build flags: {name!r}")
        result[name] = value if sep else "1"
    if pending:
        raise ValueError("build flags end with a bare -D")
    return result


def _as_bool(name: str, value: str) -> bool:
    text = value.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    try:
        return int(text, 0) != 0
    except ValueError:
        raise ValueError(f"{name} needs a numeric or boolean value, got {value!r}") from None


def _as_int(name: str, value: str) -> int:
    try:
        return int(value.strip(), 0)
    except ValueError:
        raise ValueError(f"{name} needs an integer value, got {value!r}") from None


def features_from_build_flags(flags: Union[str, Mapping[str, str]]) -> FeatureFlags:
    """Build :class:`FeatureFlags` from build flags, before dependency resolution."""
    defines = dict(parse_build_flags(flags) if isinstance(flags, str) else flags)

    if "TELNET_PASSWORD" in defines:
        if "TELNET_AUTHENTICATION" in defines:
            raise ValueError("TELNET_PASSWORD and TELNET_AUTHENTICATION both defined")
        warnings.warn("TELNET_PASSWORD is deprecated! Please replace it with "
                      "TELNET_AUTHENTICATION", DeprecationWarning, stacklevel=2)
        defines["TELNET_AUTHENTICATION"] = defines.pop("TELNET_PASSWORD")

    if "RF_PIN" in defines:
        if "RFB_RX_PIN" in defines:
            raise ValueError("RF_PIN and RFB_RX_PIN both defined")
        warnings.warn("RF_PIN is deprecated! Please use RFB_RX_PIN instead",
                      DeprecationWarning, stacklevel=2)
        defines["RFB_RX_PIN"] = defines.pop("RF_PIN")

    values: Dict[str, object] = {}
    bool_names = {name for name, _ in _MODULE_ORDER} | set(_BOOL_OPTIONS)
    for field in fields(FeatureFlags):
        macro = field.name.upper()
        if macro not in defines:
            continue
        raw = defines[macro]
        if field.name in bool_names:
            values[field.name] = _as_bool(macro, raw)
        elif field.name == "async_tcp_ssl_enabled":
            values[field.name] = True  # only being defined matters
        elif field.name == "rfb_rx_pin":
            values[field.name] = _as_int(macro, raw)
    return FeatureFlags(**values)