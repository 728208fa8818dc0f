"""Utilities module for the captainteemo API client.

This module provides formatting helpers for console output.
"""

from .formatters import OutputFormatter

__all__ = ['OutputFormatter']
