"""Renderers producing the replacement text of each tag kind.

Also holds `replace_all`, the literal all-occurrences replacement primitive.
"""

from collections.abc import Callable, Sequence
from types import MappingProxyType

from .lexer import TagKind
from .model import EnumDescription

__all__ = (
    "SCALAR_RENDERERS",
    "replace_all",
    "render_key_list",
    "render_key_value_list",
)

_COMMENT_TRAILING = " \t\r\n\v"


def replace_all(source: str, old: str, new: str, /) -> str:
    """Replace every non-overlapping occurrence of `old` in `source` with `new`.

    An empty `source` yields an empty result and an empty `old` leaves
    `source` unchanged. Occurrences are found left to right and inserted
    text is never rescanned.
    """
    if not source:
        return ""
    if not old:
        return source
    return new.join(source.split(old))


def _quote(text: str):
    return f'"{text}"'


def render_key_list(enum: EnumDescription, indent: str = "") -> str:
    """Render the quoted keys one per line, comma separated.

    Every line starts with `indent`; there is no trailing line break.
    """
    return ",\n".join(indent + _quote(key) for key in enum.keys)


def render_key_value_list(
    enum: EnumDescription,
    *,
    keyword: str,
    indent: str = "",
    comments: Sequence[str] | None = None,
) -> str:
    """Render one `keyword type key = value;` declaration per key.

    When `comments` is given it must align with the keys; each comment
    follows its declaration after a single space, except the last one
    which follows without a space.
    """

    def ret_gen():
        """Generate pieces used to assemble the declaration lines."""
        last = len(enum.keys) - 1
        for idx, (key, value) in enumerate(enum.values()):
            yield f"{indent}{keyword} {enum.type} {key} = {value};"
            if comments is not None:
                if idx != last:
                    yield " "
                yield comments[idx].rstrip(_COMMENT_TRAILING)
            if idx != last:
                yield "\n"

    return "".join(ret_gen())


SCALAR_RENDERERS: MappingProxyType[TagKind, Callable[[EnumDescription], str]] = (
    MappingProxyType(
        {
            TagKind.NAME: lambda enum: enum.name,
            TagKind.FULL_NAME: lambda enum: enum.full_name,
            TagKind.TYPE: lambda enum: enum.type,
            TagKind.MIN: lambda enum: str(enum.min_value),
            TagKind.MAX: lambda enum: str(enum.max_value),
            TagKind.SIZE: lambda enum: str(len(enum.keys)),
            TagKind.FIRST_KEY: lambda enum: enum.keys[0],
            TagKind.LAST_KEY: lambda enum: enum.keys[-1],
        }
    )
)
"""Scalar tag renderers, in substitution order."""
