"""
Utilities module for the answer checker.
Contains helper functions and utilities.
"""

from .logger import setup_logger, get_logger

__all__ = ['setup_logger', 'get_logger']
