"""Shared utility functions.

This subpackage provides helpers used across the package with no
dependencies on the core modules.

Key modules:
    - logging: Logging configuration
    - protocols: Protocol definitions for format decoders
"""

from .logging import configure_logging, get_logger
from .protocols import DecoderProtocol

__all__ = [
    # logging
    "configure_logging",
    "get_logger",
    # protocols
    "DecoderProtocol",
]
