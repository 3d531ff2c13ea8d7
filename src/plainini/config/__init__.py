"""
INI text processing package for plainini.

This package provides line preprocessing, parsing into IniConfig models,
and serialization back to canonical INI text.
"""

from .parser import (
    IniParser,
    IniParseResult,
    ParseError,
    loads,
    load_lines,
    validate
)
from .preprocessor import preprocess, split_lines
from .serializer import IniSerializer, dumps

__all__ = [
    'IniParser',
    'IniParseResult',
    'ParseError',
    'loads',
    'load_lines',
    'validate',
    'preprocess',
    'split_lines',
    'IniSerializer',
    'dumps'
]
