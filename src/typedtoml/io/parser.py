# topmark:header:start
#
#   project      : TypedToml
#   file         : parser.py
#   file_relpath : src/typedtoml/io/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser adapter around `tomlkit`.

[`parse_toml`][typedtoml.io.parser.parse_toml] turns TOML source text into the
immutable document model, or into a single
[`ParseFailure`][typedtoml.io.parser.ParseFailure] describing what went wrong.
It never raises: tomlkit errors, UTF-8 decoding errors and model construction
errors are all folded into the failure.

A failure renders as one line:

```text
<description> <label>(<begin.line>:<end.line>, <begin.col>:<end.col>)
```

Lines and columns are 1-based. tomlkit reports a single position with a 0-based
column, so spans produced here always begin and end on the same point. Failures
that carry no position (invalid UTF-8, out-of-range integers) render without the
parenthesized span.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.exceptions import TOMLKitError

from typedtoml.core.errors import DocumentBuildError
from typedtoml.core.logging import get_logger
from typedtoml.document.model import TableNode, build_document
from typedtoml.io.guards import is_toml_table, is_tomlkit_document, is_utf8_text
from typedtoml.io.readers import decode_toml_bytes

if TYPE_CHECKING:
    from typedtoml.core.logging import TypedTomlLogger

logger: TypedTomlLogger = get_logger(__name__)

# tomlkit appends the position to every ParseError message.
_TOMLKIT_POSITION_RE: Final[re.Pattern[str]] = re.compile(r"\s+at line \d+ col \d+$")


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """A 1-based line/column range in TOML source text."""

    begin_line: int
    begin_col: int
    end_line: int
    end_col: int

    @classmethod
    def point(cls, line: int, col: int) -> SourceSpan:
        """Return a span that begins and ends at ``(line, col)``."""
        return cls(begin_line=line, begin_col=col, end_line=line, end_col=col)

    def format(self) -> str:
        """Render as ``(<begin.line>:<end.line>, <begin.col>:<end.col>)``."""
        return f"({self.begin_line}:{self.end_line}, {self.begin_col}:{self.end_col})"


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Why a TOML source could not be turned into a document."""

    description: str
    source_label: str | None = None
    span: SourceSpan | None = None

    def format(self) -> str:
        """Render the failure as a single diagnostic line."""
        label: str = self.source_label or ""
        location: str = f"{label}{self.span.format()}" if self.span is not None else label
        return f"{self.description} {location}".rstrip()

    @classmethod
    def from_decode_error(
        cls, exc: UnicodeDecodeError, source_label: str | None = None
    ) -> ParseFailure:
        """Describe input that is not well-formed UTF-8."""
        return cls(f"Invalid UTF-8 input: {exc}", source_label)

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of [`parse_toml`][typedtoml.io.parser.parse_toml]: a root table or a failure."""

    root: TableNode | None = None
    failure: ParseFailure | None = None

    @property
    def ok(self) -> bool:
        """True if parsing produced a document."""
        return self.root is not None


def _failure_from_tomlkit(exc: TomlkitParseError, source_label: str | None) -> ParseFailure:
    """Convert a tomlkit `ParseError` into a `ParseFailure` with a 1-based span."""
    description: str = _TOMLKIT_POSITION_RE.sub("", str(exc))
    return ParseFailure(
        description=description,
        source_label=source_label,
        span=SourceSpan.point(exc.line, exc.col + 1),
    )


def parse_toml(text: str | bytes, source_label: str | None = None) -> ParseResult:
    """Parse TOML source text into the document model.

    Args:
        text (str | bytes): TOML source. ``bytes`` are decoded as strict UTF-8.
        source_label (str | None): Optional label (usually a file path) included in
            failure messages.

    Returns:
        ParseResult: The parsed root table, or a failure. Never raises.
    """
    if isinstance(text, bytes):
        try:
            text = decode_toml_bytes(text)
        except UnicodeDecodeError as exc:
            return ParseResult(failure=ParseFailure.from_decode_error(exc, source_label))
    elif not is_utf8_text(text):
        return ParseResult(failure=ParseFailure("Invalid UTF-8 input", source_label))

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data: Any = doc.unwrap() if is_tomlkit_document(doc) else doc
    except TomlkitParseError as exc:
        logger.debug("tomlkit rejected %s: %s", source_label or "<string>", exc)
        return ParseResult(failure=_failure_from_tomlkit(exc, source_label))
    except (TOMLKitError, TypeError, ValueError) as exc:
        logger.debug("tomlkit failed on %s: %s", source_label or "<string>", exc)
        return ParseResult(failure=ParseFailure(str(exc), source_label))

    if not is_toml_table(data):
        return ParseResult(failure=ParseFailure("Document root is not a table", source_label))

    try:
        root: TableNode = build_document(data)
    except DocumentBuildError as exc:
        return ParseResult(failure=ParseFailure(exc.message, source_label))

    return ParseResult(root=root)
