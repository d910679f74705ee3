"""Config – ``AGGREGATOR_*`` environment settings."""

from aggregator.config.settings import ENV_PREFIX, AggregatorSettings, SettingsError

__all__ = ["ENV_PREFIX", "AggregatorSettings", "SettingsError"]
