"""Script snippet registering a custom element for a dashed tag name."""

from __future__ import annotations

from .attribute import HYPHENATED_NAME
from .builder import element
from .errors import MalformedBuilderInput
from .grouping import CHILDREN
from .node import Element, text

DEFINE_TEMPLATE = (
    "class {class_name} extends HTMLElement {{ constructor() {{ super(); }} }}\n"
    "customElements.define('{tag_name}', {class_name});"
)


def capitalize_word(word: str) -> str:
    """Uppercase the first character only (``str.capitalize`` would lower the rest)."""
    if not word:
        return ""
    return word[0].upper() + word[1:]


def class_name_for(tag_name: str) -> str:
    return "".join(capitalize_word(part) for part in tag_name.split("-"))


def define(tag_name: str) -> Element:
    """Return ``<script>`` registering ``tag_name``, e.g. ``my-custom`` as ``MyCustom``."""
    if not isinstance(tag_name, str) or not HYPHENATED_NAME.match(tag_name):
        raise MalformedBuilderInput(f"custom element names need dash-separated parts: {tag_name!r}")
    snippet = DEFINE_TEMPLATE.format(tag_name=tag_name, class_name=class_name_for(tag_name))
    return element("script", CHILDREN, text(snippet))


__all__ = ["capitalize_word", "class_name_for", "define"]
