"""Runtime setting checks and helpers: hostnames, admin password, reconnect backoff."""

from __future__ import annotations

# MQTT reconnection delays, in milliseconds.
MQTT_RECONNECT_DELAY_MIN = 5000
MQTT_RECONNECT_DELAY_STEP = 5000
MQTT_RECONNECT_DELAY_MAX = 120000

# Main loop delay, in milliseconds.
LOOP_DELAY_TIME = 10
LOOP_DELAY_MIN = 0
LOOP_DELAY_MAX = 250

HOSTNAME_MAX_LENGTH = 31
ADMIN_PASS_MIN_LENGTH = 8
ADMIN_PASS_MAX_LENGTH = 63

# RSSI read at one metre from the access point, and the path loss exponent
# (typically 2.7 to 4.3; free space is 2).
WIFI_RSSI_1M = -30
WIFI_PROPAGATION_CONST = 4


class ReconnectBackoff:
    """Linearly growing reconnection delay with an upper bound."""

    def __init__(self, minimum: int = MQTT_RECONNECT_DELAY_MIN,
                 step: int = MQTT_RECONNECT_DELAY_STEP,
                 maximum: int = MQTT_RECONNECT_DELAY_MAX) -> None:
        if minimum < 0 or step < 0:
            raise ValueError("minimum and step must not be negative")
        if maximum < minimum:
            raise ValueError(f"maximum {maximum} is below minimum {minimum}")
        self.minimum = minimum
        self.step = step
        self.maximum = maximum
        self._delay = minimum

    def next_delay(self) -> int:
        """Return the delay to wait now and grow the next one, up to the maximum."""
        delay = self._delay
        self._delay = min(self._delay + self.step, self.maximum)
        return delay

    def reset(self) -> None:
        """Start again from the minimum delay, as after a successful connection."""
        self._delay = self.minimum


def validate_hostname(name: str) -> str:
    """Check a device hostname; empty means the default, otherwise 1..31 characters."""
    if len(name) > HOSTNAME_MAX_LENGTH:
        raise ValueError(
            f"hostname must be at most {HOSTNAME_MAX_LENGTH} characters, got {len(name)}")
    return name


def validate_admin_pass(password: str) -> str:
    """Check the admin password: 8..63 printable ASCII characters."""
    if not ADMIN_PASS_MIN_LENGTH <= len(password) <= ADMIN_PASS_MAX_LENGTH:
        raise ValueError(
            f"admin password must be {ADMIN_PASS_MIN_LENGTH}..{ADMIN_PASS_MAX_LENGTH} "
            f"characters, got {len(password)}")
    if any(not 0x20 <= ord(ch) <= 0x7E for ch in password):
        raise ValueError("admin password must contain only printable ASCII characters")
    return password


def wifi_distance(rssi: float, rssi_1m: float = WIFI_RSSI_1M,
                  propagation: float = WIFI_PROPAGATION_CONST) -> float:
    """Estimated distance in metres to the access point from a signal strength."""
    if propagation <= 0:
        raise ValueError(f"propagation constant must be positive, got {propagation}")
    return 10 ** ((rssi_1m - rssi) / (10 * propagation))


def clamp_loop_delay(ms: int) -> int:
    """Keep a main loop delay within 0..250 milliseconds."""
    return max(LOOP_DELAY_MIN, min(LOOP_DELAY_MAX, ms))