"""Output sinks for presenting bank data."""

from generic_bank.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
