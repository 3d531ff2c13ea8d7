"""
plainini - INI configuration parsing and serialization

Parses INI text into a queryable, mutable configuration model with an
implicit default section, and renders the model back to canonical INI text.
"""

from .models.config import (
    IniConfig,
    IniError,
    InvalidNameError,
    DuplicateSectionError,
    NoSectionError
)
from .config.parser import IniParser, IniParseResult, ParseError, loads, load_lines, validate
from .config.serializer import IniSerializer, dumps

__version__ = "0.1.0"
__author__ = "plainini Team"

__all__ = [
    'IniConfig',
    'IniError',
    'InvalidNameError',
    'DuplicateSectionError',
    'NoSectionError',
    'IniParser',
    'IniParseResult',
    'ParseError',
    'IniSerializer',
    'loads',
    'load_lines',
    'validate',
    'dumps'
]
