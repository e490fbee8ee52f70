"""
Enum declaration generation module

Generates a Go type and a block of typed constants for one C enum.
"""

from typing import TYPE_CHECKING

from .codegen import CodeGen, LIBRARY_PREFIX, as_go_name, as_go_type_name

if TYPE_CHECKING:
    from .ir import EnumInfo


class EnumGenerator:
    """Generates Go constant declarations for C enums"""

    def __init__(self, prefix: str = LIBRARY_PREFIX):
        self.prefix = prefix

    def type_name(self, enum: 'EnumInfo') -> str:
        return as_go_type_name(enum.name, self.prefix)

    def generate(self, enum: 'EnumInfo', gen: CodeGen):
        """Generate type declaration and constants"""
        type_name = self.type_name(enum)
        gen.line(f'type {type_name} C.enum_{enum.name}')
        gen.line()
        if enum.is_empty:
            return

        names = [as_go_name(m.name, self.prefix) for m in enum.members]
        width = max(len(n) for n in names)

        with gen.block('const ('):
            for name, member in zip(names, enum.members):
                for comment in member.comment:
                    gen.line(f'// {comment}')
                gen.line(f'{name.ljust(width)} {type_name} = C.{member.name}')
        gen.line()
