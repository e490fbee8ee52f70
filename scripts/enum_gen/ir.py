"""
IR (Intermediate Representation) module

Represents the enum definitions scanned out of C header text.
"""

from dataclasses import dataclass, field


@dataclass
class EnumSpan:
    """Location of an enum definition inside header text"""
    start: int
    end: int
    body_start: int  # first member after '{' and whitespace

    def text(self, data: str) -> str:
        return data[self.start:self.end]


@dataclass
class EnumMember:
    """Enum member (constant)"""
    name: str
    value: int
    comment: list[str] = field(default_factory=list)


@dataclass
class EnumInfo:
    """Enum type information"""
    name: str
    prefix: str
    members: list[EnumMember] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.members
