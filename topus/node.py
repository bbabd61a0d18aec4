"""Immutable node model and markup serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Sequence, Tuple, Union

from .attribute import Attribute, is_attribute
from .errors import MalformedBuilderInput


@dataclass(frozen=True)
class Text:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            object.__setattr__(self, "value", str(self.value))

    def render(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Comment:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            object.__setattr__(self, "value", str(self.value))

    def render(self) -> str:
        return f"<!--{self.value}-->"

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Element:
    """Element node owning its attributes and children outright.

    Lists passed in are copied into tuples, so an element never changes
    after construction.
    """

    name: str
    attributes: Tuple[Attribute, ...] = field(default_factory=tuple)
    children: Tuple["Node", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise MalformedBuilderInput(f"element name must be a non-empty string, got {self.name!r}")
        attributes = tuple(self.attributes)
        children = tuple(self.children)
        for attribute in attributes:
            if not is_attribute(attribute):
                raise MalformedBuilderInput(f"<{self.name}> attribute is not an Attribute: {attribute!r}")
        for child in children:
            if not is_node(child):
                raise MalformedBuilderInput(f"<{self.name}> child is not a Node: {child!r}")
        object.__setattr__(self, "attributes", attributes)
        object.__setattr__(self, "children", children)

    def extend(
        self,
        attributes: Iterable[Attribute] = (),
        children: Iterable["Node"] = (),
    ) -> "Element":
        """Return a copy with ``attributes``/``children`` appended after the existing ones."""
        return Element(
            name=self.name,
            attributes=(*self.attributes, *attributes),
            children=(*self.children, *children),
        )

    def render(self) -> str:
        parts: List[str] = [f"<{self.name}", _render_attrs(self.attributes), ">"]
        # An empty element gets no closing tag.
        if self.children:
            parts.append(_render_children(self.children))
            parts.append(f"</{self.name}>")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()


Node = Union[Element, Text, Comment]


def is_node(value: Any) -> bool:
    return isinstance(value, (Element, Text, Comment))


def _render_attrs(attributes: Sequence[Attribute]) -> str:
    return "".join(f" {attribute.render()}" for attribute in attributes)


def _render_children(children: Sequence[Node]) -> str:
    return "".join(child.render() for child in children)


def render(node: Node) -> str:
    return node.render()


def render_all(nodes: Iterable[Node]) -> str:
    return _render_children(list(nodes))


def text(value: Any) -> Text:
    return Text(str(value))


def comment(value: Any) -> Comment:
    return Comment(str(value))


__all__ = [
    "Comment",
    "Element",
    "Node",
    "Text",
    "comment",
    "is_node",
    "render",
    "render_all",
    "text",
]
