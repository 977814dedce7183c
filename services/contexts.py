"""Context service for database operations."""

from typing import List, Optional, Sequence
from models.context import Context, CONTEXT_LEVEL_STRINGS


class ContextService:
    """Service for managing contexts."""

    def __init__(self, db_manager):
        self.db_manager = db_manager

    def find_all(self) -> List[Context]:
        """Get all contexts ordered by level, then id."""
        with self.db_manager.connect() as conn:
            rows = conn.execute(
                "SELECT id, contextlevel, name, lang FROM contexts ORDER BY contextlevel, id"
            ).fetchall()

        return [
            Context(id=row[0], contextlevel=row[1], name=row[2], lang=row[3])
            for row in rows
        ]

    def find(self, context_id: int) -> Optional[Context]:
        """Get a single context by ID.

        Returns:
            Context object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            row = conn.execute(
                "SELECT id, contextlevel, name, lang FROM contexts WHERE id = ?",
                (context_id,),
            ).fetchone()

        if row:
            return Context(id=row[0], contextlevel=row[1], name=row[2], lang=row[3])
        return None

    def find_many(self, context_ids: Sequence[int]) -> List[Context]:
        """Get several contexts, keeping the order of the given IDs.

        Raises:
            ValueError: If any of the IDs does not exist.
        """
        contexts = []
        for context_id in context_ids:
            context = self.find(context_id)
            if context is None:
                raise ValueError(f"Context with ID {context_id} not found")
            contexts.append(context)
        return contexts

    def create(self, contextlevel: int, name: str, lang: Optional[str] = None) -> Context:
        """Create a new context.

        Raises:
            ValueError: If the context level is unknown.
        """
        if contextlevel not in CONTEXT_LEVEL_STRINGS:
            raise ValueError(f"Unknown context level: {contextlevel}")

        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "INSERT INTO contexts (contextlevel, name, lang) VALUES (?, ?, ?)",
                (contextlevel, name, lang),
            )
            conn.commit()
            context_id = cursor.lastrowid

        return Context(id=context_id, contextlevel=contextlevel, name=name, lang=lang)
