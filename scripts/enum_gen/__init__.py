"""
enum_gen - Go constant generation for C library enums

Scans enum definitions out of C public headers and emits Go type and
constant declarations for cgo bindings. Library-specific settings (header
paths, preamble, enum list) are applied by configuration modules under
`bindings/`.
"""

from .ir import EnumSpan, EnumMember, EnumInfo
from .header import (
    GeneratorError, HeaderReadError, VersionNotFoundError, EnumNotFoundError,
    read_header, find_version, find_enum, parse_enum_members,
)
from .codegen import CodeGen, as_go_name, as_go_type_name
from .enum import EnumGenerator
from .generator import Generator

__all__ = [
    'EnumSpan', 'EnumMember', 'EnumInfo',
    'GeneratorError', 'HeaderReadError', 'VersionNotFoundError', 'EnumNotFoundError',
    'read_header', 'find_version', 'find_enum', 'parse_enum_members',
    'CodeGen', 'as_go_name', 'as_go_type_name',
    'EnumGenerator',
    'Generator',
]
