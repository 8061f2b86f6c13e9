"""Enum class code generator.

Expands `{cec:...}` tags in a template into source text describing one
enumerated type. The public API is forwarded here; package constants live
in `meta`.
"""

from .config import DEFAULT_TEMPLATE, GeneratorConfig
from .generator import Clock, CodeGenerator, Diagnostics, generate
from .lexer import TagKind, TagMatch, find_tag, scan_tags
from .meta import NAME, VERSION
from .model import EnumComment, EnumDescription
from .render import replace_all

__all__ = (
    "NAME",
    "VERSION",
    "DEFAULT_TEMPLATE",
    "GeneratorConfig",
    "Clock",
    "CodeGenerator",
    "Diagnostics",
    "generate",
    "TagKind",
    "TagMatch",
    "find_tag",
    "scan_tags",
    "EnumComment",
    "EnumDescription",
    "replace_all",
)
