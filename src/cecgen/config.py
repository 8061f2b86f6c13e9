"""Generator configuration and the built-in default template."""

from dataclasses import dataclass
from typing import final

from .meta import NAME, VERSION

__all__ = (
    "DEFAULT_KEYWORD",
    "DEFAULT_TEMPLATE",
    "DEFAULT_VERSION",
    "GeneratorConfig",
)

DEFAULT_KEYWORD = "static constexpr"
DEFAULT_VERSION = f"{NAME} v{VERSION}"
DEFAULT_TEMPLATE = """\
#pragma once

#include <array>
#include <cstddef>
#include <string_view>

{cec:enum:keepComment}
struct {cec:enum:name}
{
    using value_type = {cec:enum:type};

    {cec:enum:keyValueList}

    static constexpr value_type min = {cec:enum:min};
    static constexpr value_type max = {cec:enum:max};
    static constexpr std::size_t size = {cec:enum:size};
    static constexpr value_type first = {cec:enum:firstKey};
    static constexpr value_type last = {cec:enum:lastKey};

    static constexpr std::string_view fullName = "{cec:enum:fullName}";
    static constexpr std::array<std::string_view, size> keys{
        {cec:enum:keyList}
    };

    static constexpr bool contains(value_type value)
    {
        return min <= value && value <= max;
    }

    static constexpr std::string_view toString(value_type value)
    {
        return contains(value) ? keys[static_cast<std::size_t>(value - min)]
                               : std::string_view{};
    }
};
"""


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
class GeneratorConfig:
    """Constants the generator writes into its output.

    Attributes:
        keyword: declaration keyword preceding each key-value declaration.
        version: tool label written into the signature line.
        default_template: template used when the caller supplies none.
    """

    keyword: str = DEFAULT_KEYWORD
    version: str = DEFAULT_VERSION
    default_template: str = DEFAULT_TEMPLATE
