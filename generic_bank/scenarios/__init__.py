"""Scenarios exercising the in-memory bank."""

from generic_bank.scenarios.demo import DemoResult, DemoScenario

__all__ = ["DemoResult", "DemoScenario"]
