"""
Code generation utilities

Provides the output buffer and the C to Go identifier conversion.
"""

import re

LIBRARY_PREFIX = 'heif_'


class CodeGen:
    """Code generation helper with indentation support"""

    def __init__(self, indent_str: str = '\t'):
        self._lines: list[str] = []
        self._indent: int = 0
        self._indent_str: str = indent_str

    def line(self, text: str = ''):
        """Add a line with current indentation"""
        if text:
            self._lines.append(self._indent_str * self._indent + text)
        else:
            self._lines.append('')

    def raw(self, text: str):
        """Add raw text without indentation processing"""
        self._lines.append(text)

    def indent(self):
        """Increase indentation"""
        self._indent += 1

    def dedent(self):
        """Decrease indentation"""
        if self._indent > 0:
            self._indent -= 1

    def block(self, header: str, footer: str = ')'):
        """Context manager for code blocks"""
        return _BlockContext(self, header, footer)

    def output(self) -> str:
        """Get generated code as string"""
        return '\n'.join(self._lines)


class _BlockContext:
    """Context manager for indented code blocks"""

    def __init__(self, gen: CodeGen, header: str, footer: str):
        self._gen = gen
        self._header = header
        self._footer = footer

    def __enter__(self):
        self._gen.line(self._header)
        self._gen.indent()
        return self

    def __exit__(self, *args):
        self._gen.dedent()
        self._gen.line(self._footer)


_UPPERCASE = re.compile('[A-Z]')


def strip_prefix(name: str, prefix: str = LIBRARY_PREFIX) -> str:
    """Remove the library prefix from the start of a C name"""
    if prefix and name.startswith(prefix):
        return name[len(prefix):]
    return name


def split_words(name: str) -> list[str]:
    return name.split('_')


def is_acronym(word: str) -> bool:
    """Check if a word has more than one uppercase letter (RGB, YCbCr, AV1)"""
    return len(_UPPERCASE.findall(word)) > 1


def capitalize(word: str) -> str:
    """Uppercase the first character, leave the rest alone

    Examples:
        error -> Error
        av1 -> AV1
    """
    if not word:
        return word
    word = word[0].upper() + word[1:]
    return word.replace('Av1', 'AV1')


def case_words(words: list[str]) -> list[str]:
    """Capitalize words, keeping trailing acronyms intact

    Examples:
        [interleaved, RGB] -> [Interleaved, RGB]
        [chroma, interleaved, RRGGBB, BE] -> [Chroma, Interleaved, RRGGBB_BE]
    """
    last = words[-1]
    second_last = words[-2] if len(words) > 2 else ''
    cased = [capitalize(w) for w in words]
    if is_acronym(last) and is_acronym(second_last):
        return cased[:-2] + [second_last + '_' + last]
    if is_acronym(last):
        cased[-1] = last
    return cased


def drop_repeated_suffix(words: list[str]) -> list[str]:
    """Drop the last word if it repeats the first one"""
    if len(words) >= 2 and words[0] == words[-1]:
        return words[:-1]
    return words


def fix_ok_suffix(words: list[str]) -> list[str]:
    if words[-1] == 'Ok':
        return words[:-1] + ['OK']
    return words


def as_go_type_name(name: str, prefix: str = LIBRARY_PREFIX) -> str:
    """Convert a C enum type name to a Go type name

    Examples:
        heif_channel -> Channel
        heif_chroma_downsampling_algorithm -> ChromaDownsamplingAlgorithm
    """
    return ''.join(case_words(split_words(strip_prefix(name, prefix))))


def as_go_name(name: str, prefix: str = LIBRARY_PREFIX) -> str:
    """Convert a C enum member name to a Go constant name

    Examples:
        heif_error_Ok -> ErrorOK
        heif_compression_AV1 -> CompressionAV1
        heif_chroma_interleaved_RRGGBB_BE -> ChromaInterleavedRRGGBB_BE
    """
    words = case_words(split_words(strip_prefix(name, prefix)))
    words = drop_repeated_suffix(words)
    words = fix_ok_suffix(words)
    return ''.join(words)
