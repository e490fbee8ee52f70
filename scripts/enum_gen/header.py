"""
Header scanning module

Pulls enum definitions and the numeric version macro out of raw C header
text. This is a narrow pattern based scanner, not a C parser: it expects
the layout of hand-maintained public headers (one member per line,
`name = N,` with optional `//` comments, no nested braces).
"""

import re

from .ir import EnumSpan, EnumMember

VERSION_MACRO = 'LIBHEIF_NUMERIC_VERSION'

_WHITESPACE = ' \n\r\t'


class GeneratorError(Exception):
    """Base class for errors that abort generation"""


class HeaderReadError(GeneratorError):
    """Input header is missing or unreadable"""


class VersionNotFoundError(GeneratorError):
    """Version macro is not defined in the version header"""


class EnumNotFoundError(GeneratorError):
    """Enum definition is not present in the header"""


def read_header(path: str) -> str:
    """Read a whole header file"""
    try:
        with open(path, 'r') as f:
            return f.read()
    except OSError as e:
        raise HeaderReadError(f'Cannot read header {path}: {e.strerror or e}') from e


def find_version(data: str, macro: str = VERSION_MACRO) -> str:
    """Extract the expression of `#define <macro> (<expr>)`

    Examples:
        ((1<<24) | (17<<16) | (6<<8) | 0) -> (1<<24) | (17<<16) | (6<<8)
    """
    m = re.search(r'^#define\s+%s\s+\((.+)\)$' % re.escape(macro), data, re.MULTILINE)
    if m is None:
        raise VersionNotFoundError(f'Version macro {macro} not found')

    version = m.group(1).strip()
    while '  ' in version:
        version = version.replace('  ', ' ')
    if version.endswith(' | 0'):
        version = version[:-4]
    return version


def find_enum(data: str, name: str) -> EnumSpan:
    """Find the `enum <name> { ... };` block"""
    m = re.search(r'\nenum %s\s*\{\s*(?P<body>[^}]*)\};\n' % re.escape(name), data)
    if m is None:
        raise EnumNotFoundError(f'Enum {name} not found')
    return EnumSpan(start=m.start(), end=m.end(), body_start=m.start('body'))


def _member_regex(prefix: str) -> 're.Pattern[str]':
    # name = N[,] [// comment]
    return re.compile(
        r'^[ \t]*(?P<name>%s_[^=\s]+)\s*=\s*(?P<value>\d+)[ \t]*,?[ \t]*'
        r'(?://[ \t]*(?P<comment>[^\n]*?))?[ \t]*$' % re.escape(prefix),
        re.MULTILINE,
    )


def preceding_comment(data: str, floor: int, pos: int) -> list[str]:
    """Collect the `//` lines directly above `pos`, not looking before `floor`

    Lines are returned in source order with the `//` marker and
    surrounding whitespace removed. A blank or non-comment line ends
    the block.
    """
    if pos > floor and data[pos - 1] in _WHITESPACE:
        pos -= 1

    lines = data[floor:pos].split('\n')
    comments = []
    while lines:
        line = lines.pop().strip()
        if not line.startswith('//'):
            break
        comments.insert(0, line[2:].strip())
    return comments


def parse_enum_members(data: str, span: EnumSpan, prefix: str) -> list[EnumMember]:
    """Extract members of the enum at `span` whose names start with `prefix`_"""
    regex = _member_regex(prefix)
    members = []
    cursor = span.start
    floor = span.body_start
    while cursor < span.end:
        m = regex.search(data, cursor, span.end)
        if m is None:
            break

        comment = m.group('comment')
        if comment:
            lines = [comment.strip()]
        else:
            lines = preceding_comment(data, floor, m.start())

        members.append(EnumMember(
            name=m.group('name'),
            value=int(m.group('value')),
            comment=lines,
        ))
        cursor = m.end()
        floor = m.end()

    return members
