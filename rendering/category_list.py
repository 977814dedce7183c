"""Per-context question category lists and their row markup."""

from dataclasses import dataclass, field
from typing import Callable, List, Sequence, Tuple

from models.category import Category
from models.context import Context
from rendering import html_writer
from rendering.strings import StringFormatter
from services.categories import DEFAULT_SORT

FetchCategories = Callable[[int, Sequence[str]], List[Category]]


@dataclass
class CategoryList:
    """The categories of one context, in display order.

    Attributes:
        context: Context whose categories are listed.
        sort: Columns the categories are ordered by.
        records: Categories fetched by get_records().
    """

    context: Context
    sort: Tuple[str, ...] = DEFAULT_SORT
    records: List[Category] = field(default_factory=list)

    def get_records(self, fetch_categories: FetchCategories) -> List[Category]:
        self.records = fetch_categories(self.context.id, self.sort)
        return self.records


def category_item_html(category: Category, context: Context, formatter: StringFormatter) -> str:
    """Render one category row: checkbox, bold name, question count.

    The name is formatted for the context of the list the row belongs to.
    """
    item = html_writer.checkbox(
        f"cat{category.id}", 1, checked=False, attrs={"id": f"checkcat{category.id}"}
    ) + " "
    item += html_writer.tag("b", formatter.format_string(category.name, context)) + " "
    item += formatter.format_string(f"({category.questioncount})") + " "
    return item
