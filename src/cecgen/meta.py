"""Package-level metadata and shared constants for cecgen.

This module contains the canonical package constants which are forwarded
from `src/cecgen/__init__.py`. Keeping them here keeps `__init__.py`
minimal and avoids import cycles between the generator and the I/O layer.
"""

from logging import getLogger as _getLogger
from re import MULTILINE as _MULTILINE
from re import compile as _re_comp
from typing import Literal as _Lit
from typing import TypedDict as _TDict
from typing import final as _fin

__all__ = (
    "NAME",
    "VERSION",
    "LOGGER",
    "OPEN_TEXT_OPTIONS",
    "SIGNATURE_FORMAT",
    "SIGNATURE_REGEX",
)


@_fin
class _OpenOptions(_TDict):
    """Typed dict describing options used when opening text files.

    Matches the arguments accepted by `open(..., encoding=..., errors=..., newline=...)`.
    """

    encoding: str
    errors: _Lit[
        "strict",
        "ignore",
        "replace",
        "surrogateescape",
        "xmlcharrefreplace",
        "backslashreplace",
        "namereplace",
    ]
    newline: _Lit["", "\n", "\r", "\r\n"] | None


# update `pyproject.toml`
NAME = "cecgen"
VERSION = "1.0.0"

LOGGER = _getLogger(NAME)
OPEN_TEXT_OPTIONS = _OpenOptions(
    encoding="UTF-8",
    errors="strict",
    newline=None,
)
SIGNATURE_FORMAT = "//Generated by <{version}> -- {now}"
SIGNATURE_REGEX = _re_comp(r"^//Generated by <([^>\r\n]*)> -- ([^\r\n]*)$", _MULTILINE)
assert SIGNATURE_REGEX.match(
    SIGNATURE_FORMAT.format(version=f"{NAME} v{VERSION}", now="now")
)
