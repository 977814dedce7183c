"""Small helpers for writing HTML fragments."""

import html
import itertools
from typing import Any, Dict, Optional

_id_counter = itertools.count(1)


def random_id(prefix: str = "") -> str:
    """Return an element id unique within this process."""
    return f"{prefix}{next(_id_counter)}"


def attributes(attrs: Optional[Dict[str, Any]] = None) -> str:
    """Render attributes in insertion order, skipping None values."""
    if not attrs:
        return ""
    return "".join(
        f' {name}="{html.escape(str(value), quote=True)}"'
        for name, value in attrs.items()
        if value is not None
    )


def empty_tag(tagname: str, attrs: Optional[Dict[str, Any]] = None) -> str:
    return f"<{tagname}{attributes(attrs)} />"


def start_tag(tagname: str, attrs: Optional[Dict[str, Any]] = None) -> str:
    return f"<{tagname}{attributes(attrs)}>"


def end_tag(tagname: str) -> str:
    return f"</{tagname}>"


def tag(tagname: str, contents: str, attrs: Optional[Dict[str, Any]] = None) -> str:
    """Wrap contents in a tag. Contents are not escaped."""
    return start_tag(tagname, attrs) + contents + end_tag(tagname)


def checkbox(
    name: str,
    value: Any,
    checked: bool = True,
    label: str = "",
    attrs: Optional[Dict[str, Any]] = None,
) -> str:
    """Render a checkbox input, optionally followed by its label.

    A label needs an id to point at, so one is generated when attrs has none.
    """
    attrs = dict(attrs or {})
    if label and not attrs.get("id"):
        attrs["id"] = random_id("checkbox_")

    attrs["type"] = "checkbox"
    attrs["value"] = value
    attrs["name"] = name
    attrs["checked"] = "checked" if checked else None

    output = empty_tag("input", attrs)
    if label:
        output += tag("label", label, {"for": attrs["id"]})
    return output
