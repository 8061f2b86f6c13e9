"""Readers for enum description files and templates.

Enum descriptions are JSON objects (or lists of them) validated with
pydantic before being turned into `EnumDescription` values.
"""

from collections.abc import Sequence
from typing import final

from anyio import Path
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from ..meta import OPEN_TEXT_OPTIONS
from ..model import EnumComment, EnumDescription

__all__ = (
    "EnumCommentModel",
    "EnumModel",
    "parse_enums",
    "load_enums",
    "read_template",
)


@final
class EnumCommentModel(BaseModel):
    """Model of the `comment` object of an enum description file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    head_comment: str = Field(default="", alias="headComment")
    key_comments: tuple[str, ...] = Field(default=(), alias="keyComments")


@final
class EnumModel(BaseModel):
    """Model of one enum in an enum description file.

    `fullName` defaults to `name`; camel-case and snake-case keys are both
    accepted.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    name: str = Field(min_length=1)
    full_name: str | None = Field(default=None, alias="fullName")
    type: str = "int"
    start_value: int = Field(default=0, alias="startValue")
    keys: tuple[str, ...] = Field(min_length=1)
    comment: EnumCommentModel = EnumCommentModel()

    def to_description(self):
        """Convert to the `EnumDescription` consumed by the generator."""
        return EnumDescription(
            name=self.name,
            full_name=self.name if self.full_name is None else self.full_name,
            type=self.type,
            start_value=self.start_value,
            keys=self.keys,
            comment=EnumComment(
                head_comment=self.comment.head_comment,
                key_comments=self.comment.key_comments,
            ),
        )


_ENUM_FILE = TypeAdapter(EnumModel | list[EnumModel])


def parse_enums(text: str | bytes) -> Sequence[EnumDescription]:
    """Parse the JSON `text` of an enum description file.

    Raises `pydantic.ValidationError` when the text is not a valid
    description or list of descriptions.
    """
    parsed = _ENUM_FILE.validate_json(text)
    models = parsed if isinstance(parsed, list) else (parsed,)
    return tuple(model.to_description() for model in models)


async def load_enums(path: Path) -> Sequence[EnumDescription]:
    """Read and parse the enum description file at `path`."""
    async with await path.open(mode="rt", **OPEN_TEXT_OPTIONS) as io:
        return parse_enums(await io.read())


async def read_template(path: Path | None) -> str | None:
    """Read the template at `path`; `None` selects the built-in default."""
    if path is None:
        return None
    async with await path.open(mode="rt", **OPEN_TEXT_OPTIONS) as io:
        return await io.read()
