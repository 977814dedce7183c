"""Question category lists for the export page.

One list is built per context. The lists share a single run of page numbers,
so the page cursor returned by one list is handed to the next, and the page
links are printed once, after the last list.
"""

from typing import List, Optional, Sequence

from config import Config
from logger import get_logger
from models.context import Context
from rendering.category_list import CategoryList, FetchCategories, category_item_html
from rendering.output import OutputRenderer
from rendering.paged_list import (
    PageCursor,
    PagedList,
    Pagination,
    build_list,
    render_list,
    render_page_numbers,
)
from rendering.strings import StringFormatter, StringManager

logger = get_logger()

BOX_CLASSES = "boxwidthwide boxaligncenter generalbox questioncategories"


class CategoryExport:
    """Builds and renders the category lists of several contexts.

    Args:
        contexts: Contexts to list, in display order.
        pagination: Current page and page link settings.
        fetch_categories: Called as fetch_categories(context_id, sort).
        formatter: Formats category and context names.
        output: Renders boxes and headings.
    """

    def __init__(
        self,
        contexts: Sequence[Context],
        pagination: Pagination,
        fetch_categories: FetchCategories,
        formatter: StringFormatter,
        output: Optional[OutputRenderer] = None,
    ):
        self.pagination = pagination
        self.fetch_categories = fetch_categories
        self.formatter = formatter
        self.output = output or OutputRenderer()

        self.category_lists: List[CategoryList] = []
        self.paged_lists: List[PagedList] = []
        self.cursor = PageCursor()

        self.initialize(contexts)

    def initialize(self, contexts: Sequence[Context]) -> None:
        """Fetch every context's categories and paginate them in order."""
        self.category_lists = []
        for context in contexts:
            category_list = CategoryList(context)
            category_list.get_records(self.fetch_categories)
            self.category_lists.append(category_list)

        cursor = PageCursor()
        self.paged_lists = []
        for category_list in self.category_lists:
            paged_list, cursor = build_list(
                category_list.records, cursor, self.pagination, context=category_list.context
            )
            self.paged_lists.append(paged_list)
        self.cursor = cursor

        logger.debug(
            f"Built {len(self.paged_lists)} category list(s), "
            f"{cursor.count} top level categories, paged={cursor.paged}"
        )

    def _render_item(self, category, context) -> str:
        return category_item_html(category, context, self.formatter)

    def render_context_list(self, paged_list: PagedList) -> str:
        """Render one context's box, or "" when nothing of it is on this page."""
        list_html = render_list(paged_list, self._render_item)
        if not list_html:
            logger.debug(f"No categories to show for context {paged_list.context.id}")
            return ""

        context = paged_list.context
        context_name = self.formatter.format_string(
            context.get_context_name(self.formatter.strings), context
        )
        result = self.output.box_start(f"{BOX_CLASSES} contextlevel{context.contextlevel}")
        result += self.output.heading(
            self.formatter.get_string("questioncatsfor", context_name), 3
        )
        result += list_html
        result += self.output.box_end()
        return result

    def render(self) -> str:
        """Render all context boxes followed by the page links."""
        result = ""
        for paged_list in self.paged_lists:
            result += self.render_context_list(paged_list)

        if self.paged_lists:
            result += render_page_numbers(
                self.paged_lists[-1], self.pagination, self.formatter
            )
        return result


def build_category_export(
    services,
    config: Config,
    context_ids: Sequence[int],
    page: int = 1,
    strings: Optional[StringManager] = None,
) -> CategoryExport:
    """Create a CategoryExport for the given contexts from the services container.

    Raises:
        ValueError: If a context ID doesn't exist.
    """
    contexts = services.contexts.find_many(context_ids)
    pagination = Pagination(
        page=page,
        page_param_name=config.page_param_name,
        items_per_page=config.page_length,
        page_url=config.page_url,
    )
    strings = strings or StringManager(default_lang=config.lang)
    formatter = StringFormatter(strings, lang=config.lang)

    logger.info(f"Rendering category export page {page} for {len(contexts)} context(s)")
    return CategoryExport(
        contexts,
        pagination,
        services.categories.find_by_context,
        formatter,
        OutputRenderer(),
    )
