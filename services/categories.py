"""Question category service for database operations."""

from typing import List, Optional, Sequence
from models.category import Category
from logger import get_logger

logger = get_logger()

DEFAULT_SORT = ("parent", "sortorder", "name")

# Columns a caller may sort by; anything else would be interpolated into SQL.
SORTABLE_COLUMNS = {"id", "name", "parent", "sortorder", "contextid"}

_SELECT_CATEGORY = """
    SELECT c.id, c.name, c.contextid, c.parent, c.sortorder, c.info,
           (SELECT COUNT(1) FROM questions q
             WHERE q.category = c.id AND q.hidden = 0 AND q.parent = 0) AS questioncount
      FROM question_categories c
"""


def _row_to_category(row) -> Category:
    return Category(
        id=row[0],
        name=row[1],
        contextid=row[2],
        parent=row[3],
        sortorder=row[4],
        info=row[5],
        questioncount=row[6],
    )


def build_order_by(sort: Sequence[str]) -> str:
    """Build an ORDER BY clause from a sequence of column names.

    Each entry may end with " DESC" or " ASC".

    Raises:
        ValueError: If a column is not sortable or the sequence is empty.
    """
    if not sort:
        raise ValueError("Sort specification cannot be empty")

    parts = []
    for entry in sort:
        tokens = entry.split()
        column = tokens[0] if tokens else ""
        direction = tokens[1].upper() if len(tokens) > 1 else "ASC"
        if column not in SORTABLE_COLUMNS or direction not in ("ASC", "DESC") or len(tokens) > 2:
            raise ValueError(f"Invalid sort column: {entry!r}")
        parts.append(f"c.{column} {direction}")
    return ", ".join(parts)


class CategoryService:
    """Service for reading and creating question categories."""

    def __init__(self, db_manager):
        """Initialize the category service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_by_context(
        self,
        context_id: int,
        sort: Sequence[str] = DEFAULT_SORT,
        include_top: bool = False,
    ) -> List[Category]:
        """Get the categories of one context with their question counts.

        Args:
            context_id: Context whose categories to fetch.
            sort: Column names to order by, defaults to (parent, sortorder, name).
            include_top: Include the context's top category (parent = 0).
                         When excluded, its children become the top level.

        Returns:
            List of Category objects in the requested order.
        """
        where = "WHERE c.contextid = ?"
        if not include_top:
            where += " AND c.parent <> 0"
        sql = f"{_SELECT_CATEGORY} {where} ORDER BY {build_order_by(sort)}"

        with self.db_manager.connect() as conn:
            rows = conn.execute(sql, (context_id,)).fetchall()

        logger.debug(f"Fetched {len(rows)} categories for context {context_id}")
        return [_row_to_category(row) for row in rows]

    def find(self, category_id: int) -> Optional[Category]:
        """Get a single category by ID.

        Returns:
            Category object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            row = conn.execute(
                f"{_SELECT_CATEGORY} WHERE c.id = ?", (category_id,)
            ).fetchone()

        if row:
            return _row_to_category(row)
        return None

    def create(
        self,
        name: str,
        context_id: int,
        parent: int = 0,
        sortorder: int = 999,
        info: str = "",
    ) -> Category:
        """Create a new category.

        Args:
            name: Category name.
            context_id: Owning context ID.
            parent: Parent category ID, 0 for a top category.
            sortorder: Position among siblings.
            info: Optional description.

        Returns:
            The created Category object with id populated.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "INSERT INTO question_categories (name, contextid, info, parent, sortorder) "
                "VALUES (?, ?, ?, ?, ?)",
                (name, context_id, info, parent, sortorder),
            )
            conn.commit()
            category_id = cursor.lastrowid

        return Category(
            id=category_id,
            name=name,
            contextid=context_id,
            parent=parent,
            sortorder=sortorder,
            info=info,
        )

    def add_question(
        self, category_id: int, name: str, hidden: bool = False, parent: int = 0
    ) -> int:
        """Add a question to a category.

        Hidden questions and sub-questions (parent != 0) are stored but not
        counted in questioncount.

        Returns:
            ID of the new question.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "INSERT INTO questions (category, name, parent, hidden) VALUES (?, ?, ?, ?)",
                (category_id, name, parent, 1 if hidden else 0),
            )
            conn.commit()
            return cursor.lastrowid
