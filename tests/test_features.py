import warnings
from dataclasses import fields

import pytest

from espurna.features import (
    FeatureFlags,
    features_from_build_flags,
    parse_build_flags,
)


def _all_off(**overrides):
    values = {f.name: False for f in fields(FeatureFlags) if f.name.endswith("_support")}
    values.update(overrides)
    return FeatureFlags(**values)


def test_parse_simple_flags():
    assert parse_build_flags("-DUSE_CUSTOM_H -DALEXA_SUPPORT=0") == {
        "USE_CUSTOM_H": "1",
        "ALEXA_SUPPORT": "0",
    }


def test_parse_quoted_flags():
    assert parse_build_flags("'-DUSE_CUSTOM_H'") == {"USE_CUSTOM_H": "1"}


def test_parse_separated_define_and_other_flags():
    assert parse_build_flags("-Os -D WEB_SUPPORT=0 -Wall") == {"WEB_SUPPORT": "0"}


def test_parse_empty():
    assert parse_build_flags("") == {}


def test_parse_dangling_define_raises():
    with pytest.raises(ValueError):
        parse_build_flags("-DA=1 -D")


def test_parse_bad_name_raises():
    with pytest.raises(ValueError):
        parse_build_flags("-D1BAD=2")


def test_web_off_disables_dependents():
    f = FeatureFlags(web_support=False, api_support=True, ssdp_support=True).resolved()
    assert not f.api_support
    assert not f.ssdp_support
    assert not f.debug_web_support


def test_debug_telnet_enables_telnet():
    f = _all_off(debug_telnet_support=True).resolved()
    assert f.telnet_support


def test_uart_mqtt_forces_mqtt_and_disables_terminal():
    f = FeatureFlags(uart_mqtt_support=True, mqtt_support=False).resolved()
    assert f.mqtt_support
    assert not f.terminal_support
    assert not f.debug_serial_support


def test_alexa_and_influxdb_enable_broker():
    assert _all_off(alexa_support=True).resolved().broker_support
    assert _all_off(influxdb_support=True).resolved().broker_support
    assert not _all_off().resolved().broker_support


def test_domoticz_follows_mqtt_by_default():
    on = FeatureFlags().resolved()
    assert on.domoticz_support is True
    assert on.homeassistant_support is True
    off = _all_off(domoticz_support=None, homeassistant_support=None).resolved()
    assert off.domoticz_support is False
    assert off.homeassistant_support is False


def test_explicit_domoticz_forces_mqtt_and_broker():
    f = _all_off(domoticz_support=True).resolved()
    assert f.mqtt_support
    assert f.broker_support


def test_homeassistant_forces_mqtt():
    f = _all_off(homeassistant_support=True).resolved()
    assert f.mqtt_support
    assert not f.broker_support


def test_thingspeak_ssl_async_needs_async_tcp_ssl():
    f = FeatureFlags(thingspeak_use_ssl=True, thingspeak_use_async=True).resolved()
    assert not f.thingspeak_support
    g = FeatureFlags(thingspeak_use_ssl=True, thingspeak_use_async=True,
                     async_tcp_ssl_enabled=True).resolved()
    assert g.thingspeak_support


def test_scheduler_enables_ntp():
    assert _all_off(scheduler_support=True).resolved().ntp_support


def test_resolved_is_idempotent():
    f = FeatureFlags(uart_mqtt_support=True, web_support=False).resolved()
    assert f.resolved() == f


def test_debug_enabled():
    assert FeatureFlags().debug_enabled()
    assert not _all_off().debug_enabled()
    assert _all_off(debug_udp_support=True).debug_enabled()


def test_modules_listing():
    assert _all_off().modules() == []
    assert _all_off(scheduler_support=True).modules() == ["NTP", "SCHEDULER"]
    mods = FeatureFlags().modules()
    assert "ALEXA" in mods and "WEB" in mods
    assert "DEBUG_UDP" not in mods
    assert mods.index("ALEXA") < mods.index("WEB")


def test_features_from_build_flags_string():
    f = features_from_build_flags("-DALEXA_SUPPORT=0 -DDEBUG_UDP_SUPPORT=1")
    assert f.alexa_support is False
    assert f.debug_udp_support is True
    assert f.web_support is True


def test_features_from_mapping_and_async_defined():
    f = features_from_build_flags({"ASYNC_TCP_SSL_ENABLED": "0", "WEB_SUPPORT": "false"})
    assert f.async_tcp_ssl_enabled is True
    assert f.web_support is False


def test_bad_bool_value_raises():
    with pytest.raises(ValueError):
        features_from_build_flags("-DWEB_SUPPORT=maybe")


def test_telnet_password_is_deprecated():
    with pytest.warns(DeprecationWarning):
        f = features_from_build_flags("-DTELNET_PASSWORD=0")
    assert f.telnet_authentication is False


def test_telnet_password_and_authentication_conflict():
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        with pytest.raises(ValueError):
            features_from_build_flags("-DTELNET_PASSWORD=0 -DTELNET_AUTHENTICATION=1")


def test_rf_pin_maps_to_rfb_rx_pin():
    with pytest.warns(DeprecationWarning):
        f = features_from_build_flags("-DRF_PIN=4")
    assert f.rfb_rx_pin == 4
    assert features_from_build_flags("").rfb_rx_pin == 0x99