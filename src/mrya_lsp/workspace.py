"""Host capabilities used by the engine: directory listing and document access."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from .models import WorkspaceEntry

if TYPE_CHECKING:
    from pygls.workspace import Workspace

logger = logging.getLogger(__name__)


class WorkspaceLister(Protocol):
    """Lists the entries of a workspace directory."""

    def list_entries(self, root: str) -> list[WorkspaceEntry]:
        """List the entries directly under ``root``. May raise ``OSError``."""
        ...


class DocumentAccessor(Protocol):
    """Read access to the documents open in the editor."""

    def get_text(self, uri: str) -> str | None:
        """Return the full text of the document, or None if it is unknown."""
        ...

    def line_prefix(self, uri: str, line: int, character: int) -> str | None:
        """Return the text of ``line`` up to ``character``."""
        ...


class FileSystemLister:
    """List workspace entries from the local file system."""

    def list_entries(self, root: str) -> list[WorkspaceEntry]:
        try:
            return sorted(
                (
                    WorkspaceEntry(name=path.name, is_directory=path.is_dir())
                    for path in Path(root).iterdir()
                ),
                key=lambda entry: entry.name,
            )
        except OSError as e:
            logger.debug(f"Failed to list workspace directory {root}: {e}")
            return []


class PyglsDocumentAccessor:
    """Document access backed by the pygls workspace."""

    def __init__(self, workspace: Workspace):
        self.workspace = workspace

    def get_text(self, uri: str) -> str | None:
        if uri not in self.workspace.text_documents:
            return None
        return self.workspace.get_text_document(uri).source

    def line_prefix(self, uri: str, line: int, character: int) -> str | None:
        if uri not in self.workspace.text_documents:
            return None
        lines = self.workspace.get_text_document(uri).source.split("\n")
        if line >= len(lines):
            return None
        return lines[line].rstrip("\r")[:character]
