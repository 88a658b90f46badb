"""Telemetry and observability helpers.

This package emits run events for deterministic auditing on stderr.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
