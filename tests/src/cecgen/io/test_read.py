"""Tests for `cecgen.io.read`: enum description files and templates."""

import json
from os import PathLike

import pytest
from anyio import Path
from pydantic import ValidationError

from cecgen.io.read import load_enums, parse_enums, read_template
from cecgen.model import EnumComment, EnumDescription

__all__ = ()


def test_parse_enums_single_object():
    """A single object yields one description with camel-case fields."""
    (enum,) = parse_enums(
        json.dumps(
            {
                "name": "Color",
                "fullName": "gfx::Color",
                "type": "uint8_t",
                "startValue": 1,
                "keys": ["Red", "Green"],
                "comment": {"headComment": "// c", "keyComments": ["// r", "// g"]},
            }
        )
    )
    assert enum == EnumDescription(
        name="Color",
        full_name="gfx::Color",
        type="uint8_t",
        start_value=1,
        keys=("Red", "Green"),
        comment=EnumComment(head_comment="// c", key_comments=("// r", "// g")),
    )


def test_parse_enums_defaults_and_snake_case():
    """Optional fields default and snake-case names are accepted."""
    (enum,) = parse_enums('{"name": "E", "keys": ["A"], "start_value": 4}')
    assert enum.full_name == "E"
    assert enum.type == "int"
    assert enum.start_value == 4
    assert enum.comment == EnumComment()


def test_parse_enums_list():
    """A list yields one description per object, in order."""
    enums = parse_enums('[{"name": "A", "keys": ["x"]}, {"name": "B", "keys": ["y"]}]')
    assert [enum.name for enum in enums] == ["A", "B"]


@pytest.mark.parametrize(
    "text",
    [
        '{"name": "E", "keys": []}',
        '{"name": "", "keys": ["A"]}',
        '{"keys": ["A"]}',
        '{"name": "E", "keys": ["A"], "unknown": 1}',
        "not json",
    ],
)
def test_parse_enums_invalid(text: str):
    """Malformed descriptions raise a validation error."""
    with pytest.raises(ValidationError):
        parse_enums(text)


@pytest.mark.asyncio
async def test_load_enums_reads_file(tmp_path: PathLike[str]):
    """Descriptions are read from disk."""
    f = Path(tmp_path) / "color.json"
    await f.write_text('{"name": "Color", "keys": ["Red"]}', encoding="utf-8")
    (enum,) = await load_enums(f)
    assert enum.name == "Color"


@pytest.mark.asyncio
async def test_read_template(tmp_path: PathLike[str]):
    """A template file is read verbatim; no path selects the default."""
    f = Path(tmp_path) / "t.h"
    await f.write_text("{cec:enum:name}\n", encoding="utf-8")
    assert await read_template(f) == "{cec:enum:name}\n"
    assert await read_template(None) is None
