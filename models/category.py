"""Question category model."""

from dataclasses import dataclass


@dataclass
class Category:
    """A question category within one context.

    Attributes:
        id: Unique identifier (auto-generated).
        name: Category name, may carry multilang markup.
        contextid: Context the category belongs to.
        parent: Parent category ID, 0 for the context's top category.
        sortorder: Position among siblings.
        questioncount: Number of visible top level questions in the category.
        info: Optional description.
    """

    id: int
    name: str
    contextid: int
    parent: int = 0
    sortorder: int = 999
    questioncount: int = 0
    info: str = ""
