"""Options used by the I/O layer and the command line."""

from dataclasses import dataclass, field
from typing import final

from anyio import Path

from ..config import GeneratorConfig

__all__ = ("GenOpts",)


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
class GenOpts:
    """Generation options passed from the command line to readers/writers.

    Attributes:
        template: template file, or `None` for the built-in default.
        output_dir: directory to write into, or `None` for beside the input.
        suffix: file suffix appended to the enum name to form the output name.
        config: generator configuration.
    """

    template: Path | None = None
    output_dir: Path | None = None
    suffix: str = ".h"
    config: GeneratorConfig = field(default_factory=GeneratorConfig)

    def output_path(self, input: Path, name: str) -> Path:
        """Return where the code generated for enum `name` read from `input` goes."""
        folder = input.parent if self.output_dir is None else self.output_dir
        return folder / f"{name}{self.suffix}"
