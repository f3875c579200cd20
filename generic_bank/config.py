"""Configuration management for generic-bank."""

import os
from dataclasses import dataclass, field

from generic_bank.exceptions import ConfigurationError


@dataclass
class DemoConfig:
    """Demo scenario configuration."""

    extra_customers: int = 0
    as_json: bool = False


@dataclass
class BankConfig:
    """Main configuration for generic-bank."""

    demo: DemoConfig = field(default_factory=DemoConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "plain"
    locale: str = "en_US"
    currency_symbol: str = "$"

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        demo = DemoConfig(
            extra_customers=_int_env("EXTRA_CUSTOMERS", 0),
            as_json=os.getenv("OUTPUT_JSON", "false").lower() == "true",
        )

        seed_str = os.getenv("SEED")

        return cls(
            demo=demo,
            seed=_parse_int("SEED", seed_str) if seed_str else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "plain"),
            locale=os.getenv("FAKER_LOCALE", "en_US"),
            currency_symbol=os.getenv("CURRENCY_SYMBOL", "$"),
        )


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return _parse_int(name, value)


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from exc
