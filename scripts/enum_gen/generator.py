"""
Main generator module

Orchestrates header scanning and emission to produce the Go defines file.
"""

from typing import Optional

from .codegen import CodeGen, LIBRARY_PREFIX
from .enum import EnumGenerator
from .header import read_header, find_version, find_enum, parse_enum_members
from .ir import EnumInfo


class Generator:
    """Go constant generator for a set of C enums"""

    def __init__(self, header_path: str, version_header_path: str, preamble: str = '',
                 prefix: str = LIBRARY_PREFIX, verbose: bool = True):
        self.header_path = header_path
        self.version_header_path = version_header_path
        self.preamble = preamble
        self.prefix = prefix
        self.verbose = verbose
        self._enums: list[str] = []
        self._member_prefixes: dict[str, str] = {}

    def enum(self, name: str, prefix: Optional[str] = None):
        """Register an enum for output; members are matched against `prefix`"""
        self._enums.append(name)
        if prefix is not None:
            self._member_prefixes[name] = prefix

    def member_prefix(self, name: str) -> str:
        return self._member_prefixes.get(name, name)

    def _log(self, text: str):
        if self.verbose:
            print(text)

    def load_enum(self, data: str, name: str) -> EnumInfo:
        """Locate one enum and extract its members"""
        span = find_enum(data, name)
        prefix = self.member_prefix(name)
        return EnumInfo(
            name=name,
            prefix=prefix,
            members=parse_enum_members(data, span, prefix),
        )

    def generate(self) -> str:
        """Generate the complete Go source"""
        self._log('=== Generating Go defines:')
        self._log(f'  {self.header_path}')
        data = read_header(self.header_path)
        self._log(f'  {self.version_header_path}')
        version = find_version(read_header(self.version_header_path))

        gen = CodeGen()
        gen.raw(self.preamble.format(version=version).rstrip('\n'))
        gen.line()

        enum_gen = EnumGenerator(self.prefix)
        for name in self._enums:
            enum = self.load_enum(data, name)
            enum_gen.generate(enum, gen)
            self._log(f'  {name} => {enum_gen.type_name(enum)} ({len(enum.members)} constants)')

        return gen.output().strip() + '\n'

    def write(self, output_path: str):
        """Generate and write the output file

        The file is only opened once generation succeeded.
        """
        code = self.generate()
        with open(output_path, 'w', newline='\n') as f:
            f.write(code)
        self._log(f'  => {output_path}')
