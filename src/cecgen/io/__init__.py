"""I/O for cecgen: enum description files, templates and generated output."""

from .options import GenOpts
from .read import EnumCommentModel, EnumModel, load_enums, parse_enums, read_template
from .write import strip_signature, write_output

__all__ = (
    "GenOpts",
    "EnumCommentModel",
    "EnumModel",
    "parse_enums",
    "load_enums",
    "read_template",
    "strip_signature",
    "write_output",
)
