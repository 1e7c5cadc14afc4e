"""Static knowledge about the Mrya language: keywords, modules and builtin docs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

KEYWORDS = (
    "let",
    "const",
    "func",
    "define",
    "return",
    "class",
    "inherit",
    "this",
    "as",
    "if",
    "else",
    "while",
    "for",
    "break",
    "continue",
    "try",
    "catch",
    "end",
    "raise",
    "true",
    "false",
    "nil",
)

NATIVE_MODULES = ("time", "fs", "string", "math", "window", "json")

# Modules distributed as packages, none ship by default; import paths carry
# the namespace prefix.
PACKAGE_MODULES: tuple[str, ...] = ()
PACKAGE_NAMESPACE = "pkg"

LITERALS = frozenset({"true", "false", "nil"})

BUILTIN_DOCS: dict[str, str] = {
    # Core
    "output": 'Prints a value to the console.\n\nExample: `output("Hello")`',
    "import": 'Imports a module or file.\n\nExample: `let t = import("time")`',
    "request": "Prompts the user for input.",
    "raise": 'Raises a custom exception.\n\nExample: `raise("Something went wrong")`',
    "assert": "Asserts that a value equals expected; raises error otherwise.",
    # Type conversion
    "to_int": "Converts a value to an integer.",
    "to_float": "Converts a value to a float.",
    "to_bool": "Converts a value to a boolean.",
    # File I/O
    "fetch": "Reads the content of a file (creates if missing).",
    "store": "Writes content to a file.",
    "append_to": "Appends content to the end of a file.",
    # Lists
    "append": "Adds an item to the end of a list.",
    "length": "Returns the number of items in a list or characters in a string.",
    "list_slice": "Returns a slice of a list.",
    "get": "Retrieves an element from a list by index.",
    "set": "Sets a value at an index in a list.",
    # Maps
    "map_has": "Checks if a map contains a key.",
    "map_keys": "Returns all keys in a map.",
    "map_values": "Returns all values in a map.",
    "map_delete": "Removes a key-value pair from a map.",
    "map_get": "Gets a value from a map by key.",
    "map_set": "Sets a value in a map by key.",
    # Math
    "abs": "Returns the absolute value of a number.",
    "round": "Rounds a number to the nearest integer.",
    "up": "Rounds up to the nearest integer.",
    "down": "Rounds down to the nearest integer.",
    "root": "Calculates the square root.",
    "random": "Returns a random float between 0.0 and 1.0.",
    "randint": "Returns a random integer between min and max (inclusive).",
    # time
    "time.sleep": "Pauses execution for the specified seconds.",
    "time.time": "Returns the current Unix timestamp.",
    "time.datetime": "Returns the current date and time as a string.",
    # fs
    "fs.exists": "Checks if a file or directory exists.",
    "fs.is_file": "Returns true if path is a file.",
    "fs.is_dir": "Returns true if path is a directory.",
    "fs.list_dir": "Lists directory contents.",
    "fs.make_dir": "Creates a new directory.",
    "fs.remove_file": "Deletes a file.",
    "fs.remove_dir": "Deletes a directory and its contents.",
    "fs.get_size": "Returns the size of a file in bytes.",
    # string
    "str_utils.upper": "Converts string to uppercase.",
    "str_utils.lower": "Converts string to lowercase.",
    "str_utils.trim": "Removes whitespace from both ends of the string.",
    "str_utils.replace": "Replaces all occurrences of a substring.",
    "str_utils.split": "Splits a string into a list by separator.",
    "str_utils.contains": "Checks if a string contains a substring.",
    "str_utils.startsWith": "Checks if a string starts with a prefix.",
    "str_utils.endsWith": "Checks if a string ends with a suffix.",
    "str_utils.slice": "Returns a substring between indices.",
    "join": "Joins a list of strings using a separator.",
    # window
    "window.init": "Initializes the window system.",
    "window.create_display": "Creates a display window with width and height.",
    "window.update": "Updates the window display and limits FPS.",
    "window.get_events": "Returns the list of current event objects.",
    "window.get_event_type": "Returns the type of an event (e.g., QUIT, KEYDOWN).",
    "window.get_event_key": "Returns the key code for a keyboard event.",
    "window.get_const": "Gets a constant by name (e.g., 'K_w', 'QUIT').",
    "window.fill": "Fills the display surface with a solid color.",
    "window.rect": "Draws a rectangle at (x, y) with size (sx, sy) and color (r, g, b).",
    "window.circle": "Draws a circle centered at (x, y) with color (r, g, b).",
    "window.text": "Renders text at (x, y) with font, size, and color.",
    "window.update_key_states": "Updates the current key state cache.",
    "window.get_key_state": "Returns true if the specified key is pressed.",
    # Literals
    "true": "Boolean literal for truth.",
    "false": "Boolean literal for falsehood.",
    "nil": "Represents an absence of value.",
}


@dataclass(frozen=True)
class KnowledgeBase:
    """Immutable documentation table plus the fixed language vocabularies.

    Keys of ``docs`` are either bare names (global builtins, keywords,
    literals) or ``module.member``. Iteration follows the table's insertion
    order, which decides hover tie-breaks.
    """

    docs: Mapping[str, str]
    keywords: tuple[str, ...] = KEYWORDS
    native_modules: tuple[str, ...] = NATIVE_MODULES
    package_modules: tuple[str, ...] = PACKAGE_MODULES
    package_namespace: str = PACKAGE_NAMESPACE
    literals: frozenset[str] = field(default=LITERALS)

    def __post_init__(self) -> None:
        bad_keys = [key for key in self.docs if key.count(".") > 1]
        if bad_keys:
            msg = f"Documentation keys may contain at most one dot: {', '.join(bad_keys)}"
            raise ValueError(msg)
        # Own copy, later edits to the caller's dict do not show through
        object.__setattr__(self, "docs", MappingProxyType(dict(self.docs)))
        object.__setattr__(self, "keywords", tuple(self.keywords))
        object.__setattr__(self, "native_modules", tuple(self.native_modules))
        object.__setattr__(self, "package_modules", tuple(self.package_modules))
        object.__setattr__(self, "literals", frozenset(self.literals))

    def get(self, key: str) -> str | None:
        return self.docs.get(key)

    def global_entries(self) -> Iterator[tuple[str, str]]:
        """Yield the non-dotted entries in table order."""
        for key, description in self.docs.items():
            if "." not in key:
                yield key, description

    def members(self, module_name: str) -> Iterator[tuple[str, str]]:
        """Yield ``(member, description)`` for every ``module_name.member`` key."""
        prefix = f"{module_name}."
        for key, description in self.docs.items():
            if key.startswith(prefix):
                yield key[len(prefix) :], description

    def package_import_paths(self) -> list[str]:
        """Package module names as they are written inside ``import("...")``."""
        return [f"{self.package_namespace}:{name}" for name in self.package_modules]

    def with_package_modules(self, extra: Iterable[str]) -> KnowledgeBase:
        """Return a copy with additional package modules appended."""
        modules = list(self.package_modules)
        modules.extend(name for name in extra if name not in modules)
        return KnowledgeBase(
            docs=self.docs,
            keywords=self.keywords,
            native_modules=self.native_modules,
            package_modules=tuple(modules),
            package_namespace=self.package_namespace,
            literals=self.literals,
        )


def default_knowledge_base() -> KnowledgeBase:
    """Build the knowledge base shipped with mrya-lsp."""
    return KnowledgeBase(docs=BUILTIN_DOCS)
