"""Substitution engine expanding a template for one enum description.

The signed template is lexed once. Expansion then runs as a fixed sequence
of stages: keep-comment, key list, key-value list and scalars, each
rendering only the tag occurrences found in that single pass, before the
renderings are spliced in and the result is finalised. Text inserted by an
expansion is therefore never scanned for tags again.
"""

from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from typing import ClassVar, Protocol, final

from .config import GeneratorConfig
from .lexer import TagKind, TagMatch, scan_tags
from .meta import LOGGER, SIGNATURE_FORMAT
from .model import EnumDescription
from .render import SCALAR_RENDERERS, render_key_list, render_key_value_list

__all__ = ("Clock", "Diagnostics", "CodeGenerator", "generate", "local_time")

Clock = Callable[[], str]


class Diagnostics(Protocol):
    """Sink for informational and error messages; `logging.Logger` fits."""

    def info(self, msg: str, /) -> object:
        """Report an informational message."""
        ...

    def error(self, msg: str, /) -> object:
        """Report an error message."""
        ...


def local_time() -> str:
    """Return the current local time as human-readable text."""
    return datetime.now().astimezone().ctime()


def _splice(text: str, rendered: Mapping[TagMatch, str]):
    """Replace the span of every tag in `rendered` with its rendering."""

    def ret_gen():
        """Generate the text between tags and the renderings, left to right."""
        pos = 0
        for tag in sorted(rendered, key=lambda tag: tag.start):
            yield text[pos : tag.start]
            yield rendered[tag]
            pos = tag.end
        yield text[pos:]

    return "".join(ret_gen())


@final
class CodeGenerator:
    """Expand templates into enum class source text.

    Holds only immutable configuration and collaborators, so one instance
    may serve any number of `generate` calls.
    """

    __slots__: ClassVar = ("__clock", "__config", "__diagnostics")

    def __init__(
        self,
        *,
        config: GeneratorConfig | None = None,
        diagnostics: Diagnostics | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Create a generator; unset collaborators default to the package ones."""
        self.__config = GeneratorConfig() if config is None else config
        self.__diagnostics = LOGGER if diagnostics is None else diagnostics
        self.__clock = local_time if clock is None else clock

    def __repr__(self) -> str:
        """Return a representation showing the configuration."""
        return f"{type(self).__qualname__}(config={self.__config!r})"

    @property
    def config(self) -> GeneratorConfig:
        """The configuration constants used by this generator."""
        return self.__config

    def generate(self, enum: EnumDescription, template: str | None = None) -> str:
        """Expand `template`, or the default template, for `enum`.

        Never raises for template anomalies; mismatched key comments and an
        empty result are reported through the diagnostics sink instead.
        """
        signature = self.signature()
        code = self._sign(signature, template)
        tags = scan_tags(code, len(signature) + 1)
        kept = self._expand_keep_comment(enum, tags)
        rendered = (
            kept
            | self._expand_key_list(enum, tags)
            | self._expand_key_value_list(enum, tags, keep_comment=bool(kept))
            | self._substitute_scalars(enum, tags)
        )
        return self._finalize(_splice(code, rendered))

    def signature(self) -> str:
        """Return the signature line, without a line break."""
        return SIGNATURE_FORMAT.format(
            version=self.__config.version, now=self.__clock().rstrip("\r\n")
        )

    def _sign(self, signature: str, template: str | None):
        body = template if template else self.__config.default_template
        return f"{signature}\n{body}"

    def _expand_keep_comment(self, enum: EnumDescription, tags: Sequence[TagMatch]):
        return {
            tag: enum.comment.head_comment
            for tag in tags
            if tag.kind is TagKind.KEEP_COMMENT
        }

    def _expand_key_list(self, enum: EnumDescription, tags: Sequence[TagMatch]):
        return {
            tag: render_key_list(enum, tag.indent)
            for tag in tags
            if tag.kind is TagKind.KEY_LIST
        }

    def _key_comments(self, enum: EnumDescription) -> Sequence[str] | None:
        if enum.comment.aligned_with(enum.keys):
            return enum.comment.key_comments
        self.__diagnostics.info(
            f"Key comments of {enum.full_name} are not generated: "
            f"{len(enum.comment.key_comments)} comment(s) for {len(enum.keys)} key(s)"
        )
        return None

    def _expand_key_value_list(
        self, enum: EnumDescription, tags: Sequence[TagMatch], *, keep_comment: bool
    ) -> dict[TagMatch, str]:
        found = tuple(tag for tag in tags if tag.kind is TagKind.KEY_VALUE_LIST)
        if not found:
            return {}
        comments = self._key_comments(enum) if keep_comment else None
        return {
            tag: render_key_value_list(
                enum,
                keyword=self.__config.keyword,
                indent=tag.indent,
                comments=comments,
            )
            for tag in found
        }

    def _substitute_scalars(self, enum: EnumDescription, tags: Sequence[TagMatch]):
        values = {kind: render(enum) for kind, render in SCALAR_RENDERERS.items()}
        return {tag: values[tag.kind] for tag in tags if tag.kind in values}

    def _finalize(self, code: str):
        if not code:
            self.__diagnostics.error("Code generation produced no output")
        return code


def generate(
    enum: EnumDescription,
    template: str | None = None,
    *,
    config: GeneratorConfig | None = None,
    diagnostics: Diagnostics | None = None,
    clock: Clock | None = None,
) -> str:
    """Expand `template` for `enum` with a one-off `CodeGenerator`."""
    return CodeGenerator(
        config=config, diagnostics=diagnostics, clock=clock
    ).generate(enum, template)
