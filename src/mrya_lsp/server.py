from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lsprotocol.types import (
    INITIALIZE,
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    InitializeParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
)
from pygls.server import LanguageServer
from pygls.uris import to_fs_path

from . import __version__
from .config import ServerConfig
from .engine import MryaEngine
from .hover import extract_word
from .workspace import PyglsDocumentAccessor

if TYPE_CHECKING:
    from .workspace import DocumentAccessor, WorkspaceLister

logger = logging.getLogger(__name__)

TRIGGER_CHARACTERS = [".", "(", "[", "{", " ", "\t", '"']


class MryaLanguageServer(LanguageServer):
    """Language Server for Mrya."""

    def __init__(
        self,
        *args,
        config: ServerConfig | None = None,
        lister: WorkspaceLister | None = None,
        document_accessor: DocumentAccessor | None = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.config = config or ServerConfig()
        self.engine = MryaEngine(
            knowledge=self.config.knowledge_base(),
            lister=lister,
            source_extension=self.config.source_extension,
        )
        self._document_accessor = document_accessor

    @property
    def documents(self) -> DocumentAccessor:
        if self._document_accessor is None:
            self._document_accessor = PyglsDocumentAccessor(self.workspace)
        return self._document_accessor

    @property
    def workspace_root(self) -> str | None:
        return self.engine.workspace_root

    @workspace_root.setter
    def workspace_root(self, value: str | None) -> None:
        self.engine.workspace_root = value

    def _uri_to_path(self, uri: str) -> str | None:
        """Convert URI to file path, decoding percent escapes."""
        return to_fs_path(uri)

    def set_workspace_root(self, params: InitializeParams) -> None:
        """Capture the workspace root used for import path completions."""
        if params.workspace_folders:
            self.workspace_root = self._uri_to_path(params.workspace_folders[0].uri)
        elif params.root_uri:
            self.workspace_root = self._uri_to_path(params.root_uri)
        elif params.root_path:
            self.workspace_root = params.root_path

    def get_completion_list(self, uri: str, position: Position) -> CompletionList:
        """Get completion items for ``position`` in the document at ``uri``."""
        text = self.documents.get_text(uri)
        prefix = self.documents.line_prefix(uri, position.line, position.character)
        if text is None or prefix is None:
            return CompletionList(is_incomplete=False, items=[])

        return CompletionList(is_incomplete=False, items=self.engine.complete(text, prefix))

    def get_hover(self, uri: str, position: Position) -> Hover | None:
        """Get hover documentation for the word at ``position``."""
        text = self.documents.get_text(uri)
        if text is None:
            return None

        lines = text.split("\n")
        if position.line >= len(lines):
            return None

        word_info = extract_word(lines[position.line].rstrip("\r"), position.character)
        if word_info is None:
            return None
        word, start, end = word_info

        result = self.engine.hover(word)
        if result is None:
            return None

        return Hover(
            contents=MarkupContent(kind=MarkupKind.Markdown, value=result.to_markdown()),
            range=Range(
                start=Position(line=position.line, character=start),
                end=Position(line=position.line, character=end),
            ),
        )


def create_server(
    config: ServerConfig | None = None, lister: WorkspaceLister | None = None
) -> MryaLanguageServer:
    """Create the language server and register its features."""
    server = MryaLanguageServer("mrya-lsp", __version__, config=config, lister=lister)

    @server.feature(INITIALIZE)
    def initialize(params: InitializeParams) -> None:
        """Initialize the language server."""
        logger.info("Initializing Mrya LSP server")
        server.set_workspace_root(params)
        logger.info(f"Workspace root: {server.workspace_root}")

    @server.feature(TEXT_DOCUMENT_DID_OPEN)
    def did_open(params: DidOpenTextDocumentParams) -> None:
        """Handle document open event."""
        logger.info(f"Opened document: {params.text_document.uri}")

    @server.feature(
        TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=TRIGGER_CHARACTERS)
    )
    def completion(params: CompletionParams) -> CompletionList:
        """Provide completion suggestions."""
        return server.get_completion_list(params.text_document.uri, params.position)

    @server.feature(TEXT_DOCUMENT_HOVER)
    def hover(params: HoverParams) -> Hover | None:
        """Provide hover information."""
        return server.get_hover(params.text_document.uri, params.position)

    return server
