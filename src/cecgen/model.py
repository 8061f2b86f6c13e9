"""Data model describing one enumerated type to generate code for."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import final

__all__ = ("EnumComment", "EnumDescription")


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
class EnumComment:
    """Comments carried over from the enum's original declaration.

    Attributes:
        head_comment: text replacing each keep-comment tag.
        key_comments: per-key comments, meant to align 1:1 with the keys.
    """

    head_comment: str = ""
    key_comments: Sequence[str] = ()

    def __post_init__(self):
        """Normalize `key_comments` into an immutable tuple after construction."""
        object.__setattr__(self, "key_comments", tuple(self.key_comments))

    def aligned_with(self, keys: Sequence[str]) -> bool:
        """Whether there is exactly one key comment per key."""
        return bool(self.key_comments) and len(self.key_comments) == len(keys)


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
class EnumDescription:
    """An enum class: its names, storage type, start value and ordered keys.

    Key `i` has the value `start_value + i`.

    Attributes:
        name: short identifier.
        full_name: qualified identifier, e.g. with namespaces.
        type: underlying storage type, emitted verbatim.
        start_value: value of the first key.
        keys: non-empty ordered key identifiers.
        comment: comments kept from the original declaration.
    """

    name: str
    full_name: str
    type: str
    start_value: int
    keys: Sequence[str]
    comment: EnumComment = field(default_factory=EnumComment)

    def __post_init__(self):
        """Normalize `keys` into a tuple and reject an enum without keys."""
        object.__setattr__(self, "keys", tuple(self.keys))
        if not self.keys:
            raise ValueError(f"enum has no keys: {self.name}")

    @property
    def min_value(self) -> int:
        """Value of the first key."""
        return self.start_value

    @property
    def max_value(self) -> int:
        """Value of the last key."""
        return self.start_value + len(self.keys) - 1

    def values(self):
        """Yield `(key, value)` pairs in declaration order."""
        return zip(self.keys, range(self.min_value, self.max_value + 1))
