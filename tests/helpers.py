"""Helper utilities for tests."""

from dataclasses import dataclass
from typing import Optional

from models.context import CONTEXT_COURSE


@dataclass
class Record:
    """Minimal record for exercising the list engine without a database."""

    id: int
    parent: int
    name: str = ""


def create_context_with_top(services, name: str, level: int = CONTEXT_COURSE, lang: Optional[str] = None):
    """Create a context and its top category.

    Returns:
        (context, top category) tuple.
    """
    context = services.contexts.create(level, name, lang=lang)
    top = services.categories.create("top", context.id, parent=0, sortorder=0)
    return context, top


def create_categories(services, context_id: int, parent_id: int, names, questions: int = 0):
    """Create sibling categories under parent_id, each with some questions."""
    created = []
    for position, name in enumerate(names):
        category = services.categories.create(name, context_id, parent=parent_id, sortorder=position)
        for i in range(questions):
            services.categories.add_question(category.id, f"{name} q{i}")
        created.append(category)
    return created
