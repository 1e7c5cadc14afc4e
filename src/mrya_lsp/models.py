"""Data models for mrya-lsp."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ContextKind(Enum):
    """The completion contexts a cursor position can be classified into."""

    DECLARATION = "declaration"
    STRING_OR_COMMENT = "string_or_comment"
    IMPORT_PATH = "import_path"
    MODULE_MEMBER = "module_member"
    GENERAL = "general"


@dataclass(frozen=True)
class CompletionContext:
    """Result of classifying the text before the cursor.

    ``module_name`` is only set for ``ContextKind.MODULE_MEMBER``.
    """

    kind: ContextKind
    module_name: str | None = None

    @property
    def is_suppressed(self) -> bool:
        """Whether this context never yields completions."""
        return self.kind in (ContextKind.DECLARATION, ContextKind.STRING_OR_COMMENT)


@dataclass
class DeclaredSymbols:
    """Names declared in a document, grouped by declaration kind."""

    variables: set[str] = field(default_factory=set)
    functions: set[str] = field(default_factory=set)
    classes: set[str] = field(default_factory=set)


@dataclass(frozen=True)
class WorkspaceEntry:
    """A single directory entry reported by a workspace lister."""

    name: str
    is_directory: bool = False


@dataclass(frozen=True)
class HoverResult:
    """A resolved hover: the documentation key and its description."""

    key: str
    description: str

    def to_markdown(self) -> str:
        """Render the hover as markdown for the client."""
        return f"**{self.key}**\n\n{self.description}"
