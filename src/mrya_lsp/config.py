"""Server configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .completion import SOURCE_EXTENSION
from .knowledge import KnowledgeBase, default_knowledge_base

PACKAGE_MODULES_ENV = "MRYA_LSP_PACKAGE_MODULES"


def _split_names(value: str) -> tuple[str, ...]:
    return tuple(name.strip() for name in value.split(",") if name.strip())


@dataclass(frozen=True)
class ServerConfig:
    """Settings for the language server.

    ``extra_package_modules`` are added to the shipped package modules and
    offered inside ``import("...")``.
    """

    source_extension: str = SOURCE_EXTENSION
    extra_package_modules: tuple[str, ...] = ()

    @classmethod
    def from_environment_variables(cls) -> ServerConfig:
        """Build the configuration from ``MRYA_LSP_*`` environment variables."""
        return cls(extra_package_modules=_split_names(os.environ.get(PACKAGE_MODULES_ENV, "")))

    @classmethod
    def from_arguments(cls, package_modules: str | None) -> ServerConfig:
        """Build the configuration from CLI values, falling back to the environment.

        Args:
            package_modules: Comma-separated package module names, or None
        """
        if package_modules is not None:
            return cls(extra_package_modules=_split_names(package_modules))
        return cls.from_environment_variables()

    def knowledge_base(self) -> KnowledgeBase:
        """Return the shipped knowledge base extended with this configuration."""
        knowledge = default_knowledge_base()
        if self.extra_package_modules:
            knowledge = knowledge.with_package_modules(self.extra_package_modules)
        return knowledge
