"""Completion and hover engine, independent of any LSP host."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .completion import SOURCE_EXTENSION, CompletionAssembler
from .context import classify_context
from .hover import resolve_hover
from .knowledge import default_knowledge_base
from .workspace import FileSystemLister

if TYPE_CHECKING:
    from lsprotocol.types import CompletionItem

    from .knowledge import KnowledgeBase
    from .models import HoverResult
    from .workspace import WorkspaceLister

logger = logging.getLogger(__name__)


class MryaEngine:
    """Answers completion and hover requests for Mrya source text.

    The knowledge base and the workspace lister are injected so tests can
    substitute small tables and in-memory listers.
    """

    def __init__(
        self,
        knowledge: KnowledgeBase | None = None,
        lister: WorkspaceLister | None = None,
        workspace_root: str | None = None,
        source_extension: str = SOURCE_EXTENSION,
    ):
        self.knowledge = knowledge if knowledge is not None else default_knowledge_base()
        self.workspace_root = workspace_root
        self.assembler = CompletionAssembler(
            self.knowledge,
            lister if lister is not None else FileSystemLister(),
            source_extension=source_extension,
        )

    def complete(self, text: str, prefix: str) -> list[CompletionItem]:
        """Get completion items for a cursor whose line reads ``prefix`` so far."""
        context = classify_context(prefix)
        items = self.assembler.build(context, text, self.workspace_root)
        logger.debug(f"Completion context {context.kind.value}: {len(items)} item(s)")
        return items

    def hover(self, word: str) -> HoverResult | None:
        """Get the documentation entry for ``word``, if any."""
        return resolve_hover(word, self.knowledge)
