"""Candidate assembly for each completion context."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lsprotocol.types import CompletionItem, CompletionItemKind

from .models import CompletionContext, ContextKind
from .scanner import scan_document

if TYPE_CHECKING:
    from .knowledge import KnowledgeBase
    from .workspace import WorkspaceLister

logger = logging.getLogger(__name__)

SOURCE_EXTENSION = ".mrya"


def _call_insert_text(name: str) -> str:
    return f"{name}()"


class CompletionAssembler:
    """Builds completion items from the knowledge base, the document and the workspace."""

    def __init__(
        self,
        knowledge: KnowledgeBase,
        lister: WorkspaceLister,
        source_extension: str = SOURCE_EXTENSION,
    ):
        self.knowledge = knowledge
        self.lister = lister
        self.source_extension = source_extension

    def build(
        self, context: CompletionContext, text: str, workspace_root: str | None = None
    ) -> list[CompletionItem]:
        """Build the candidates for an already classified context."""
        if context.is_suppressed:
            return []
        if context.kind is ContextKind.IMPORT_PATH:
            return self._get_import_path_completions(workspace_root)
        if context.kind is ContextKind.MODULE_MEMBER:
            return self._get_module_member_completions(context.module_name or "")
        return self._get_general_completions(text)

    def _get_import_path_completions(self, workspace_root: str | None) -> list[CompletionItem]:
        """Get native modules, package modules and workspace files for ``import("``."""
        completions = [
            CompletionItem(
                label=module,
                kind=CompletionItemKind.Module,
                detail="Native Mrya module",
                insert_text=module,
                documentation=f'Native built-in module "{module}"',
            )
            for module in self.knowledge.native_modules
        ]

        completions.extend(
            CompletionItem(
                label=path,
                kind=CompletionItemKind.Module,
                detail="Mrya package module",
                insert_text=path,
                documentation=f'Package module "{path}"',
            )
            for path in self.knowledge.package_import_paths()
        )

        if workspace_root:
            completions.extend(self._get_workspace_completions(workspace_root))

        return completions

    def _get_workspace_completions(self, workspace_root: str) -> list[CompletionItem]:
        """Get folders and Mrya source files at the workspace root."""
        try:
            entries = self.lister.list_entries(workspace_root)
        except Exception as e:
            logger.debug(f"Workspace listing failed for {workspace_root}: {e}")
            return []

        completions = []
        for entry in entries:
            if entry.is_directory:
                completions.append(
                    CompletionItem(
                        label=entry.name,
                        kind=CompletionItemKind.Folder,
                        detail="Folder",
                        insert_text=f"{entry.name}/",
                        documentation="Folder in workspace",
                    )
                )
            elif entry.name.endswith(self.source_extension):
                completions.append(
                    CompletionItem(
                        label=entry.name,
                        kind=CompletionItemKind.File,
                        detail="File",
                        insert_text=entry.name,
                        documentation="Mrya source file",
                    )
                )
        return completions

    def _get_module_member_completions(self, module_name: str) -> list[CompletionItem]:
        """Get the documented members of ``module_name``; unknown modules have none."""
        return [
            CompletionItem(
                label=member,
                kind=CompletionItemKind.Function,
                detail=f"Member of module '{module_name}'",
                insert_text=_call_insert_text(member),
                documentation=description,
            )
            for member, description in self.knowledge.members(module_name)
        ]

    def _get_general_completions(self, text: str) -> list[CompletionItem]:
        """Get keywords, builtins, modules and the symbols declared in ``text``.

        Groups are not de-duplicated against each other; a user function
        named like a builtin shows up twice.
        """
        knowledge = self.knowledge
        completions = []

        for keyword in knowledge.keywords:
            completions.append(
                CompletionItem(
                    label=keyword,
                    kind=CompletionItemKind.Keyword,
                    insert_text=keyword,
                    documentation=knowledge.get(keyword),
                )
            )

        for name, description in knowledge.global_entries():
            if name in knowledge.literals:
                continue
            completions.append(
                CompletionItem(
                    label=name,
                    kind=CompletionItemKind.Function,
                    insert_text=_call_insert_text(name),
                    documentation=description,
                )
            )

        for module in knowledge.native_modules:
            completions.append(
                CompletionItem(
                    label=module,
                    kind=CompletionItemKind.Module,
                    insert_text=module,
                    documentation=f'Mrya built-in module "{module}"',
                )
            )

        symbols = scan_document(text)
        completions.extend(
            CompletionItem(
                label=name,
                kind=CompletionItemKind.Variable,
                detail="User variable",
                insert_text=name,
            )
            for name in sorted(symbols.variables)
        )
        completions.extend(
            CompletionItem(
                label=name,
                kind=CompletionItemKind.Function,
                detail="User function",
                insert_text=_call_insert_text(name),
            )
            for name in sorted(symbols.functions)
        )
        completions.extend(
            CompletionItem(
                label=name,
                kind=CompletionItemKind.Class,
                detail="User class",
                insert_text=name,
            )
            for name in sorted(symbols.classes)
        )

        return completions
