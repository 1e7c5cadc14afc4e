"""Classification of the text before the cursor into a completion context.

The detectors are plain regular expressions over the line prefix, not a
token stream. Their order matters: several of them overlap and the first
match wins.
"""

from __future__ import annotations

import re

from .models import CompletionContext, ContextKind

# Name being declared: `let x`, `let const x`, `func f`, `class C`
_re_declaration = re.compile(r"\b(?:let(?:\s+const)?|func|class)\s+[a-zA-Z_0-9]*$")

# Open string argument of an import call: `import("lib/`
_re_import_path = re.compile(r"""\bimport\s*\(\s*["'][^"']*$""")

# Closed string literals followed by an opening quote with no closing one
_re_unterminated_string = re.compile(r"""^(?:[^"']|"[^"]*"|'[^']*')*(?:"[^"]*|'[^']*)$""")

# `//` outside of any closed string literal
_re_line_comment = re.compile(r"""^(?:[^"'/]|/(?!/)|"[^"]*"|'[^']*')*//""")

_re_module_access = re.compile(r"\b([a-zA-Z_][a-zA-Z0-9_]*)\.$")


def is_declaration_context(prefix: str) -> bool:
    """Check if the cursor sits on the name of a new declaration."""
    return _re_declaration.search(prefix) is not None


def is_import_path_context(prefix: str) -> bool:
    """Check if the cursor is inside the quoted argument of ``import(``."""
    return _re_import_path.search(prefix) is not None


def is_string_or_comment_context(prefix: str) -> bool:
    """Check if the cursor is inside a string literal or a line comment."""
    return bool(_re_unterminated_string.match(prefix) or _re_line_comment.match(prefix))


def get_module_access(prefix: str) -> str | None:
    """Return the identifier before a trailing dot, e.g. ``window`` for ``window.``."""
    match = _re_module_access.search(prefix)
    if match:
        return match.group(1)
    return None


def classify_context(prefix: str) -> CompletionContext:
    """Decide which completion context applies to ``prefix``.

    Order of the checks:

    1. Declarations, so the name being typed is never suggested to itself.
    2. Import paths, before the string check since an import path is the
       only string where completions are wanted.
    3. Strings and comments.
    4. Module member access (``name.``), known module or not.
    5. Everything else.
    """
    if is_declaration_context(prefix):
        return CompletionContext(ContextKind.DECLARATION)

    if is_import_path_context(prefix):
        return CompletionContext(ContextKind.IMPORT_PATH)

    if is_string_or_comment_context(prefix):
        return CompletionContext(ContextKind.STRING_OR_COMMENT)

    module_name = get_module_access(prefix)
    if module_name is not None:
        return CompletionContext(ContextKind.MODULE_MEMBER, module_name=module_name)

    return CompletionContext(ContextKind.GENERAL)
