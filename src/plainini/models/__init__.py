"""
Data models for plainini.

This module contains the in-memory configuration model and its errors.
"""

from .config import (
    IniConfig,
    IniError,
    InvalidNameError,
    DuplicateSectionError,
    NoSectionError
)

__all__ = [
    'IniConfig',
    'IniError',
    'InvalidNameError',
    'DuplicateSectionError',
    'NoSectionError'
]
