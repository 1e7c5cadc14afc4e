from __future__ import annotations


def labels(items, kind=None):
    """Get the labels of completion items, optionally filtered by kind."""
    return [item.label for item in items if kind is None or item.kind == kind]
