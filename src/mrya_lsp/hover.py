"""Hover lookups against the knowledge base."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import HoverResult

if TYPE_CHECKING:
    from .knowledge import KnowledgeBase


def resolve_hover(word: str, knowledge: KnowledgeBase) -> HoverResult | None:
    """Find the documentation entry for ``word``.

    The first entry in table order wins, whether it matches exactly or as a
    module member (``module.word``). The receiver of a member access is not
    resolved, so ``rect`` finds ``window.rect`` regardless of what precedes it.
    """
    if not word:
        return None
    suffix = f".{word}"
    for key, description in knowledge.docs.items():
        if key == word or key.endswith(suffix):
            return HoverResult(key=key, description=description)
    return None


def _is_identifier_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


def extract_word(line: str, character: int) -> tuple[str, int, int] | None:
    """Extract the identifier at ``character`` with its start and end columns."""
    if character > len(line):
        return None

    start = character
    end = character

    while start > 0 and _is_identifier_char(line[start - 1]):
        start -= 1
    while end < len(line) and _is_identifier_char(line[end]):
        end += 1

    if start == end:
        return None

    return line[start:end], start, end
