"""Element construction on top of the grouping rules."""

from __future__ import annotations

from typing import Any, Iterable, List

from .attribute import Attribute, Flag
from .errors import MalformedBuilderInput
from .grouping import CHILDREN, attributes, group, nodes
from .node import Element, Node, is_node


def element(name_or_element: Any, *items: Any) -> Element:
    """Build an element.

    ``element("a", "hidden", ("style", "display:None"))`` renders as
    ``<a hidden style="display:None">``. ``CHILDREN`` separates attributes
    from children::

        element("title", CHILDREN, text("Document"))

    Passing an existing element instead of a name extends it: the new
    attributes and children follow the ones it already has.
    """
    if isinstance(name_or_element, Element):
        new_attributes, new_children = group(items)
        return name_or_element.extend(new_attributes, new_children)
    if is_node(name_or_element):
        raise MalformedBuilderInput(
            f"only an Element can be extended, got {type(name_or_element).__name__}"
        )
    if not isinstance(name_or_element, str) or not name_or_element:
        raise MalformedBuilderInput(f"element name must be a non-empty string, got {name_or_element!r}")
    grouped_attributes, grouped_children = group(items)
    return Element(name_or_element, grouped_attributes, grouped_children)


def doctype() -> Element:
    return Element("!DOCTYPE", (Flag("html"),))


class ElementBuilder:
    """Fluent alternative to :func:`element`; parts are kept in call order.

    >>> ElementBuilder("a").attr("hidden").attr("style", "display:None").build().render()
    '<a hidden style="display:None">'
    """

    def __init__(self, name: str):
        if not isinstance(name, str) or not name:
            raise MalformedBuilderInput(f"element name must be a non-empty string, got {name!r}")
        self.name = name
        self._attributes: List[Attribute] = []
        self._children: List[Node] = []

    def attr(self, key: Any, *value: Any) -> "ElementBuilder":
        if len(value) > 1:
            raise MalformedBuilderInput(f"attr() takes a key and at most one value, got {len(value)} values")
        item = (key, value[0]) if value else key
        self._attributes.extend(attributes(item))
        return self

    def attrs(self, items: Iterable[Any]) -> "ElementBuilder":
        self._attributes.extend(attributes(*items))
        return self

    def child(self, item: Any) -> "ElementBuilder":
        self._children.extend(nodes(item))
        return self

    def children(self, items: Iterable[Any]) -> "ElementBuilder":
        self._children.extend(nodes(*items))
        return self

    def build(self) -> Element:
        return Element(self.name, self._attributes, self._children)


__all__ = ["CHILDREN", "ElementBuilder", "doctype", "element"]
