"""Shared fixtures for the mrya-lsp test suite."""

from __future__ import annotations

import pytest

from mrya_lsp.engine import MryaEngine
from mrya_lsp.knowledge import KnowledgeBase
from mrya_lsp.models import WorkspaceEntry

SMALL_DOCS = {
    "output": "Prints a value to the console.",
    "import": "Imports a module or file.",
    "length": "Returns the number of items.",
    "math.sqrt": "Calculates the square root.",
    "window.rect": "Draws a rectangle.",
    "window.fill": "Fills the display surface.",
    "true": "Boolean literal for truth.",
    "nil": "Represents an absence of value.",
}


class FakeLister:
    """In-memory workspace lister."""

    def __init__(self, entries=None):
        self.entries = list(entries or [])
        self.roots: list[str] = []

    def list_entries(self, root):
        self.roots.append(root)
        return list(self.entries)


class FailingLister:
    """Workspace lister whose directory cannot be read."""

    def list_entries(self, root):
        raise PermissionError(f"Permission denied: {root}")


class FakeDocuments:
    """In-memory document accessor keyed by URI."""

    def __init__(self, documents=None):
        self.documents = dict(documents or {})

    def get_text(self, uri):
        return self.documents.get(uri)

    def line_prefix(self, uri, line, character):
        text = self.documents.get(uri)
        if text is None:
            return None
        lines = text.split("\n")
        if line >= len(lines):
            return None
        return lines[line][:character]


@pytest.fixture
def knowledge():
    """Create a small knowledge base."""
    return KnowledgeBase(
        docs=SMALL_DOCS,
        keywords=("let", "func", "class", "if", "true", "nil"),
        native_modules=("time", "math", "window"),
        package_modules=("gui",),
        package_namespace="pkg",
    )


@pytest.fixture
def workspace_entries():
    return [
        WorkspaceEntry(name="lib", is_directory=True),
        WorkspaceEntry(name="main.mrya"),
        WorkspaceEntry(name="notes.txt"),
        WorkspaceEntry(name="utils.mrya"),
    ]


@pytest.fixture
def lister(workspace_entries):
    return FakeLister(workspace_entries)


@pytest.fixture
def engine(knowledge, lister):
    """Create an engine over the small knowledge base with a fake workspace."""
    return MryaEngine(knowledge=knowledge, lister=lister, workspace_root="/project")


@pytest.fixture
def failing_lister():
    return FailingLister()


@pytest.fixture
def documents():
    """Create an accessor serving one open document."""
    return FakeDocuments(
        {
            "file:///project/game.mrya": """\
let speed = 4
func move(dx)
end
window.
window.rect(0, 0, 10, 10, 255, 0, 0)
output("speed.
""",
        }
    )
