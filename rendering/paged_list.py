"""Hierarchical, paginated lists built from flat parent/child records.

Several lists can share one sequence of page numbers: the PageCursor returned
by build_list for one list is passed to build_list for the next, so top level
items keep counting across list boundaries.

Records only need ``id`` and ``parent`` attributes. A record whose parent is
not another record of the same list is a top level item.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from rendering.output import url_with_params


@dataclass
class Pagination:
    """Which slice of top level items is shown.

    A page of 0 turns pagination off and every item is shown.
    """

    page: int = 0
    page_param_name: str = "page"
    items_per_page: int = 20
    page_url: str = ""

    @property
    def first_item(self) -> int:
        if not self.page:
            return 0
        return (self.page - 1) * self.items_per_page

    @property
    def last_item(self) -> Optional[int]:
        if not self.page:
            return None
        return self.first_item + self.items_per_page - 1

    def in_page(self, index: int) -> bool:
        if not self.page:
            return True
        return self.first_item <= index <= self.last_item


@dataclass(frozen=True)
class PageCursor:
    """Running pagination state carried from one list to the next.

    Attributes:
        paged: True once some top level item fell outside the current page.
        count: Number of top level items seen so far.
    """

    paged: bool = False
    count: int = 0


@dataclass
class ListItem:
    record: Any
    display: bool = True
    children: List["ListItem"] = field(default_factory=list)


@dataclass
class PagedList:
    """One built list and the cursor values it started and ended with."""

    items: List[ListItem]
    context: Any = None
    paged: bool = False
    offset: int = 0
    count: int = 0


def _children_by_parent(records: Sequence[Any]) -> Dict[Any, List[Any]]:
    children: Dict[Any, List[Any]] = {}
    for record in records:
        children.setdefault(record.parent, []).append(record)
    return children


def _attach_children(item: ListItem, children: Dict[Any, List[Any]]) -> None:
    for record in children.get(item.record.id, []):
        child = ListItem(record)
        item.children.append(child)
        _attach_children(child, children)


def build_list(
    records: Sequence[Any],
    cursor: PageCursor,
    pagination: Pagination,
    context: Any = None,
) -> Tuple[PagedList, PageCursor]:
    """Nest flat records and work out which top level items are on the page.

    Children keep the order they have in records. Items off the page are
    kept hidden and get no children.

    Returns:
        The built list and the cursor to pass to the next list.
    """
    ids = {record.id for record in records}
    children = _children_by_parent(records)

    paged = cursor.paged
    index = cursor.count
    items = []
    for record in records:
        if record.parent in ids:
            continue
        in_page = pagination.in_page(index)
        item = ListItem(record, display=in_page)
        if in_page:
            _attach_children(item, children)
        else:
            paged = True
        items.append(item)
        index += 1

    paged_list = PagedList(
        items=items, context=context, paged=paged, offset=cursor.count, count=index
    )
    return paged_list, PageCursor(paged=paged, count=index)


def _render_items(
    items: List[ListItem],
    render_item: Callable[[Any, Any], str],
    context: Any,
    indent: int,
) -> str:
    tabs = "\t" * indent
    body = ""
    for item in items:
        item_html = _render_item(item, render_item, context, indent + 1)
        if item_html:
            body += f"{tabs}\t<li>{item_html}</li>\n"
    if not body:
        return ""
    return f"{tabs}<ul>\n{body}{tabs}</ul>\n"


def _render_item(
    item: ListItem,
    render_item: Callable[[Any, Any], str],
    context: Any,
    indent: int,
) -> str:
    if not item.display:
        return ""
    children_html = _render_items(item.children, render_item, context, indent + 1)
    item_html = render_item(item.record, context) + "&nbsp;"
    if children_html:
        item_html += "\n" + children_html
    return item_html


def render_list(
    paged_list: PagedList,
    render_item: Callable[[Any, Any], str],
    indent: int = 0,
) -> str:
    """Render a built list as nested <ul> markup.

    Args:
        paged_list: List returned by build_list.
        render_item: Called as render_item(record, context) for every shown
                     item, with the context the list was built for.
        indent: Number of tabs to indent the outer <ul> by.

    Returns:
        The markup, or "" when no item is shown.
    """
    return _render_items(paged_list.items, render_item, paged_list.context, indent)


def page_count(paged_list: PagedList, pagination: Pagination) -> int:
    if not pagination.page:
        return 1
    return math.ceil(paged_list.count / pagination.items_per_page)


def render_page_numbers(paged_list: PagedList, pagination: Pagination, strings) -> str:
    """Render the page number links that follow the last list of a chain.

    Nothing is shown unless pagination is on and some item was left off
    the current page.

    Args:
        paged_list: The last list built with the shared cursor.
        pagination: Pagination settings shared by all the lists.
        strings: StringManager used for the "Page" label.
    """
    if not pagination.page or not paged_list.paged:
        return ""

    html = f'<div class="paging">{strings.get_string("page")}:\n'
    for current in range(1, page_count(paged_list, pagination) + 1):
        if current == pagination.page:
            html += f" {current} \n"
        else:
            href = url_with_params(pagination.page_url, {pagination.page_param_name: current})
            html += f'<a href="{href}"> {current} </a>\n'
    html += "</div>"
    return html
