"""Home automation device helpers: build time, feature flags, magnitudes, RTC memory, settings and a stream buffer."""

__version__ = "0.1.0"