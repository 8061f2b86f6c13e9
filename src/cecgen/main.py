"""Command line: generate enum class code from enum description files.

This module exposes an async `main` entry point and a `parser` factory
used by `__main__`.
"""

from argparse import ONE_OR_MORE, ArgumentParser, Namespace
from asyncio import gather
from collections import Counter
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from dataclasses import dataclass
from enum import IntFlag, auto, unique
from functools import partial, reduce, wraps
from sys import exit
from typing import final

from anyio import Path

from .config import DEFAULT_KEYWORD, GeneratorConfig
from .generator import CodeGenerator
from .io.options import GenOpts
from .io.read import load_enums, read_template
from .io.write import write_output
from .meta import LOGGER, VERSION
from .model import EnumDescription

__all__ = ("ExitCode", "Arguments", "main", "parser")


@final
@unique
class ExitCode(IntFlag):
    """Exit flags used by the command line.

    Signals represent read/generate/write failures and are combinable.
    """

    READ_ERROR = auto()
    GENERATE_ERROR = auto()
    WRITE_ERROR = auto()


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
class Arguments:
    """Parsed arguments container.

    Attributes:
        inputs: Sequence of enum description files to generate from.
        options: Generation options (`GenOpts`) controlling behaviour.
    """

    inputs: Sequence[Path]
    options: GenOpts

    def __post_init__(self):
        """Normalize `inputs` into an immutable tuple after construction."""
        object.__setattr__(self, "inputs", tuple(self.inputs))


async def main(args: Arguments):
    """Main async entry point.

    Reads the template and every input, generates one output per described
    enum and writes it. Exits with an appropriate `ExitCode`.
    """
    options = args.options
    generator = CodeGenerator(config=options.config)
    try:
        template = await read_template(options.template)
    except Exception:
        LOGGER.exception(f"Exception reading template: {options.template}")
        exit(ExitCode.READ_ERROR)

    async def read(input: Path):
        """Read the enums described in `input` paired with their output paths."""
        try:
            enums = await load_enums(input)
        except Exception:
            LOGGER.exception(f"Exception reading file: {input}")
            return ExitCode.READ_ERROR
        return tuple((options.output_path(input, enum.name), enum) for enum in enums)

    def reduce_read_result(
        left: tuple[MutableSequence[tuple[Path, EnumDescription]], ExitCode],
        right: Iterable[tuple[Path, EnumDescription]] | ExitCode,
    ):
        """Accumulator combining read results into (jobs-seq, exit-code)."""
        seq, code = left
        if isinstance(right, ExitCode):
            code |= right
        else:
            seq.extend(right)
        return (seq, code)

    jobs, exit_code = reduce(
        reduce_read_result,
        await gather(*map(read, args.inputs)),
        (list[tuple[Path, EnumDescription]](), ExitCode(0)),
    )

    # outputs claimed by more than one enum are not written at all
    counts = Counter(output for output, _ in jobs)
    for output, count in counts.items():
        if count > 1:
            LOGGER.error(f"{count} enums would be written to the same file: {output}")
            exit_code |= ExitCode.WRITE_ERROR

    async def write(output: Path, enum: EnumDescription):
        """Generate the code of `enum` and write it to `output`."""
        try:
            text = generator.generate(enum, template)
        except Exception:
            LOGGER.exception(f"Error while generating: {enum.full_name}")
            return ExitCode.GENERATE_ERROR
        try:
            written = await write_output(output, text)
        except Exception:
            LOGGER.exception(f"Error while writing: {output}")
            return ExitCode.WRITE_ERROR
        LOGGER.info(
            f"{'Generated' if written else 'Unchanged'}: {enum.full_name} -> {output}"
        )
        return ExitCode(0)

    exit_code = reduce(
        lambda left, right: left | right,
        await gather(
            *(write(output, enum) for output, enum in jobs if counts[output] == 1)
        ),
        exit_code,
    )
    exit(exit_code)


def parser(parent: Callable[..., ArgumentParser] | None = None):
    """Create the `ArgumentParser` for the command line.

    The returned parser is configured with options for the template, the
    output location and the declaration keyword.
    """
    prog = __package__ or __name__

    parser = (ArgumentParser if parent is None else parent)(
        prog=f"python -m {prog}",
        description="generate enum class code from enum descriptions",
        add_help=True,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{prog} v{VERSION}",
        help="print version and exit",
    )
    parser.add_argument(
        "-t",
        "--template",
        action="store",
        default=None,
        type=Path,
        help="template file (default: built-in template)",
        dest="template",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        action="store",
        default=None,
        type=Path,
        help="directory to write into (default: beside each input)",
        dest="output_dir",
    )
    parser.add_argument(
        "-s",
        "--suffix",
        action="store",
        default=".h",
        help="suffix of generated files (default: .h)",
        dest="suffix",
    )
    parser.add_argument(
        "--keyword",
        action="store",
        default=DEFAULT_KEYWORD,
        help=f"declaration keyword of key-value lists (default: {DEFAULT_KEYWORD})",
        dest="keyword",
    )
    parser.add_argument(
        "inputs",
        action="store",
        nargs=ONE_OR_MORE,
        type=Path,
        help="sequence of enum description file(s) to read",
    )

    @wraps(main)
    async def invoke(args: Namespace):
        """Resolve paths and invoke `main` with prepared args."""
        await main(
            Arguments(
                inputs=await gather(
                    *map(partial(Path.resolve, strict=True), args.inputs)
                ),
                options=GenOpts(
                    template=(
                        None
                        if args.template is None
                        else await args.template.resolve(strict=True)
                    ),
                    output_dir=(
                        None
                        if args.output_dir is None
                        else await args.output_dir.resolve()
                    ),
                    suffix=args.suffix,
                    config=GeneratorConfig(keyword=args.keyword),
                ),
            )
        )

    parser.set_defaults(invoke=invoke)
    return parser
