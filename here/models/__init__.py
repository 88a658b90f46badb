"""Shared typed data models for here.

This package contains dataclasses used across resolver, transformer, and output
modules to avoid cross-module coupling and circular imports.
"""

from .datatypes import (
    CurrentDirectory,
    LocationRequest,
    PipelineWarning,
    ProgramSearch,
    Segment,
    SinkFailure,
    TransformFlags,
    TransformResult,
)

__all__ = [
    "CurrentDirectory",
    "LocationRequest",
    "PipelineWarning",
    "ProgramSearch",
    "Segment",
    "SinkFailure",
    "TransformFlags",
    "TransformResult",
]
