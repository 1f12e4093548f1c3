"""
Position export CLI for orbit systems.
"""

from .main import main, run

__all__ = ['main', 'run']
