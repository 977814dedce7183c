"""Context model: the organizational scope categories belong to."""

from dataclasses import dataclass
from typing import Optional

CONTEXT_SYSTEM = 10
CONTEXT_USER = 30
CONTEXT_COURSECAT = 40
CONTEXT_COURSE = 50
CONTEXT_MODULE = 70
CONTEXT_BLOCK = 80

# Language string identifiers for each level, used as display name prefixes.
CONTEXT_LEVEL_STRINGS = {
    CONTEXT_SYSTEM: "coresystem",
    CONTEXT_USER: "user",
    CONTEXT_COURSECAT: "category",
    CONTEXT_COURSE: "course",
    CONTEXT_MODULE: "activitymodule",
    CONTEXT_BLOCK: "block",
}


@dataclass
class Context:
    """An organizational scope (system, course category, course, module...).

    Attributes:
        id: Unique identifier.
        contextlevel: One of the CONTEXT_* level constants.
        name: Name of the instance the context wraps (course name, etc.).
        lang: Optional forced language for text shown in this context.
    """

    id: int
    contextlevel: int
    name: str
    lang: Optional[str] = None

    def get_context_name(self, strings, with_prefix: bool = True) -> str:
        """Human readable name, e.g. "Course: Algebra 101".

        The system context has no instance name and is shown as its level
        label alone.

        Args:
            strings: StringManager used to look up the level label.
            with_prefix: Whether to prefix the level label.
        """
        if self.contextlevel not in CONTEXT_LEVEL_STRINGS:
            raise ValueError(f"Unknown context level: {self.contextlevel}")

        label = strings.get_string(CONTEXT_LEVEL_STRINGS[self.contextlevel])
        if self.contextlevel == CONTEXT_SYSTEM:
            return label
        if with_prefix:
            return f"{label}: {self.name}"
        return self.name
