"""
Codec package for .lenv files.

This package provides parsing and serialization of the colon-space separated
.lenv line format.
"""

from .parser import (
    Entry,
    LenvParser,
    LinoEnvError,
    ParseResult,
    parse_content,
    serialize,
    validate_lenv_file
)

__all__ = [
    'Entry',
    'LenvParser',
    'LinoEnvError',
    'ParseResult',
    'parse_content',
    'serialize',
    'validate_lenv_file'
]
