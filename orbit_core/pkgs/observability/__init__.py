"""Observability infrastructure for logging."""

from .logging import FORMATS, setup_logging

__all__ = ['FORMATS', 'setup_logging']
