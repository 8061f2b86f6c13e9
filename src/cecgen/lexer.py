"""Tag lexer: locate `{cec:...}` tags embedded in free-form text.

Block tags capture the indentation preceding them on their line so the
caller can align every line of a multi-line expansion with the tag.
"""

from dataclasses import dataclass
from enum import StrEnum, unique
from functools import cache
from typing import final

import regex

__all__ = ("TagKind", "TagMatch", "find_tag", "scan_tags")


@final
@unique
class TagKind(StrEnum):
    """Recognised tag kinds; each value is the literal marker text."""

    KEEP_COMMENT = "{cec:enum:keepComment}"
    KEY_LIST = "{cec:enum:keyList}"
    KEY_VALUE_LIST = "{cec:enum:keyValueList}"
    NAME = "{cec:enum:name}"
    FULL_NAME = "{cec:enum:fullName}"
    TYPE = "{cec:enum:type}"
    MIN = "{cec:enum:min}"
    MAX = "{cec:enum:max}"
    SIZE = "{cec:enum:size}"
    FIRST_KEY = "{cec:enum:firstKey}"
    LAST_KEY = "{cec:enum:lastKey}"

    @property
    def marker(self) -> str:
        """Return the literal marker text."""
        return self.value

    @property
    def indentation_aware(self) -> bool:
        """Whether occurrences of this kind capture their leading indentation."""
        return self in _BLOCK_KINDS


_BLOCK_KINDS = frozenset(
    {TagKind.KEEP_COMMENT, TagKind.KEY_LIST, TagKind.KEY_VALUE_LIST}
)


@final
@dataclass(
    init=True,
    repr=True,
    eq=True,
    order=False,
    unsafe_hash=False,
    frozen=True,
    match_args=True,
    kw_only=True,
    slots=True,
)
class TagMatch:
    """A single tag occurrence found in a buffer.

    Attributes:
        kind: the tag kind found.
        start: index of the first character of `full_span`.
        end: index one past the last character of `full_span`.
        full_span: the text to replace, including captured indentation.
        indent_width: number of spaces preceding the marker on its line.
    """

    kind: TagKind
    start: int
    end: int
    full_span: str
    indent_width: int

    @property
    def indent(self) -> str:
        """Return the captured indentation as a string of spaces."""
        return " " * self.indent_width


@cache
def _pattern(kind: TagKind | None):
    """Return the pattern of `kind`, or of every kind when `kind` is `None`."""
    kinds = TagKind if kind is None else (kind,)
    return regex.compile(
        "|".join(regex.escape(each.marker) for each in kinds), regex.VERSION0
    )


def _leading_spaces(text: str, start: int, pos: int):
    """Return the number of spaces between the line start and `start`, or 0.

    The line must hold nothing but spaces before `start`, and the captured
    spaces must not reach back before `pos`.
    """
    begin = start
    while begin > pos and text[begin - 1] == " ":
        begin -= 1
    if begin > 0 and text[begin - 1] != "\n":
        return 0
    return start - begin


def _tag_match(text: str, kind: TagKind, start: int, end: int, pos: int):
    width = _leading_spaces(text, start, pos) if kind.indentation_aware else 0
    start -= width
    return TagMatch(
        kind=kind,
        start=start,
        end=end,
        full_span=text[start:end],
        indent_width=width,
    )


def find_tag(text: str, kind: TagKind, pos: int = 0) -> TagMatch | None:
    """Find the first occurrence of `kind` in `text` at or after `pos`.

    Returns `None` once no further occurrence exists. A marker preceded only
    by spaces back to the start of its line reports those spaces as its
    indentation and includes them in the span; otherwise the indentation is
    zero and the span is the marker alone.
    """
    match = _pattern(kind).search(text, pos)
    if match is None:
        return None
    return _tag_match(text, kind, *match.span(), pos)


def scan_tags(text: str, pos: int = 0) -> tuple[TagMatch, ...]:
    """Return every tag occurrence of any kind at or after `pos`, left to right.

    Spans never overlap: indentation is only captured back to the end of the
    previous occurrence.
    """

    def ret_gen():
        """Generate the matches, each bounded by the end of the previous one."""
        bound = pos
        for match in _pattern(None).finditer(text, pos):
            tag = _tag_match(text, TagKind(match[0]), *match.span(), bound)
            bound = tag.end
            yield tag

    return tuple(ret_gen())
