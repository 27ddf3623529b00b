"""
Core utilities for deep-agent.

This package provides shared functionality such as logging configuration
and monitoring helpers.
"""

from deep_agent.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
