"""Regex scan of a document for user declarations."""

from __future__ import annotations

import re

from .models import DeclaredSymbols

# Compiled regex patterns for performance
_re_variable = re.compile(r"\blet\s+(?:const\s+)?([a-zA-Z_][a-zA-Z0-9_]*)")
_re_function = re.compile(r"\bfunc\s+([a-zA-Z_][a-zA-Z0-9_]*)")
_re_class = re.compile(r"\bclass\s+([a-zA-Z_][a-zA-Z0-9_]*)")


def scan_document(text: str) -> DeclaredSymbols:
    """Collect every variable, function and class name declared in ``text``.

    All non-overlapping matches are collected; a name declared twice appears
    once. Nothing is cached between calls.
    """
    return DeclaredSymbols(
        variables={match.group(1) for match in _re_variable.finditer(text)},
        functions={match.group(1) for match in _re_function.finditer(text)},
        classes={match.group(1) for match in _re_class.finditer(text)},
    )
