"""Deterministic UNO simulator: rule engine, bots and CLI."""

__version__ = "0.1.0"
