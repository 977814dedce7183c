"""Page layout helpers: boxes, headings and page links."""

from typing import Dict, List, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from rendering import html_writer


def url_with_params(url: str, params: Dict[str, object], escaped: bool = True) -> str:
    """Return url with params merged into its query string.

    Args:
        url: Base URL, may already carry a query string.
        params: Parameters to add or replace.
        escaped: Escape "&" as "&amp;" for use inside HTML attributes.
    """
    parts = urlsplit(url)
    query = dict(parse_qsl(parts.query, keep_blank_values=True))
    query.update({key: str(value) for key, value in params.items()})
    result = urlunsplit(
        (parts.scheme, parts.netloc, parts.path, urlencode(query), parts.fragment)
    )
    if escaped:
        result = result.replace("&", "&amp;")
    return result


class OutputRenderer:
    """Renders the common layout pieces of a page.

    Keeps track of open boxes so that every box_start is matched by a
    box_end.
    """

    def __init__(self):
        self._open_containers: List[str] = []

    def box_start(self, classes: str = "generalbox", id: Optional[str] = None) -> str:
        self._open_containers.append("box")
        return html_writer.start_tag("div", {"id": id, "class": f"box py-3 {classes}"})

    def box_end(self) -> str:
        """Close the most recently opened box.

        Raises:
            RuntimeError: If no box is open.
        """
        if not self._open_containers:
            raise RuntimeError("box_end() called without an open box")
        self._open_containers.pop()
        return html_writer.end_tag("div")

    def heading(self, text: str, level: int = 2, classes: str = "main") -> str:
        if not 1 <= level <= 6:
            raise ValueError(f"Heading level must be between 1 and 6, got {level}")
        return html_writer.tag(f"h{level}", text, {"class": classes})

    def box(self, contents: str, classes: str = "generalbox") -> str:
        return self.box_start(classes) + contents + self.box_end()
