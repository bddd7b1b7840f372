"""
Compile-time template context.

A template may switch delimiters part way through, so every node keeps the
context that was in effect when it was compiled. Reconstruction uses that
context rather than the document's default delimiters.
"""

from attrs import field, frozen

from stachetree.exceptions import TemplateContextError

DEFAULT_START_CHARS = "{{"
DEFAULT_END_CHARS = "}}"


def _validate_delimiter(instance, attribute, value: str) -> None:
    if not value:
        raise TemplateContextError(value, f"{attribute.name} cannot be empty")
    if any(ch.isspace() for ch in value):
        raise TemplateContextError(value, f"{attribute.name} cannot contain whitespace")


@frozen
class TemplateContext:
    """Delimiters and source location in effect when a node was compiled.

    Params:
        start_chars: Tag-open delimiter (``{{`` by default)
        end_chars: Tag-close delimiter (``}}`` by default)
        file: Name of the template source, if known
        line: Line of the tag in the template source
    """

    start_chars: str = field(default=DEFAULT_START_CHARS, validator=_validate_delimiter)
    end_chars: str = field(default=DEFAULT_END_CHARS, validator=_validate_delimiter)
    file: str | None = None
    line: int = 0

    def with_delimiters(self, start_chars: str, end_chars: str) -> "TemplateContext":
        """Return a context at the same location with different delimiters."""
        return TemplateContext(
            start_chars=start_chars, end_chars=end_chars, file=self.file, line=self.line
        )

    def tag(self, marker: str, name: str) -> str:
        """Format a complete tag, e.g. ``{{#items}}`` for marker ``#``."""
        return f"{self.start_chars}{marker}{name}{self.end_chars}"

    def __str__(self) -> str:
        location = self.file or "<template>"
        return f"{location}:{self.line}"


DEFAULT_CONTEXT = TemplateContext()
