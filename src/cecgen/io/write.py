"""Writer for generated code."""

from anyio import Path

from ..meta import OPEN_TEXT_OPTIONS, SIGNATURE_REGEX

__all__ = ("strip_signature", "write_output")


def strip_signature(text: str) -> str:
    """Return `text` without its first signature line."""
    return SIGNATURE_REGEX.sub("", text, count=1)


async def write_output(path: Path, text: str) -> bool:
    """Write generated `text` to `path`, creating parent directories.

    The file is left untouched when its content only differs from `text`
    in the signature line. Returns whether the file was written.
    """
    if await path.exists():
        async with await path.open(mode="rt", **OPEN_TEXT_OPTIONS) as io:
            read = await io.read()
        if strip_signature(read) == strip_signature(text):
            return False
    await path.parent.mkdir(parents=True, exist_ok=True)
    async with await path.open(mode="wt", **OPEN_TEXT_OPTIONS) as io:
        await io.write(text)
    return True
