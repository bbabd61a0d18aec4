"""Pydantic models for YAML page descriptions."""

from __future__ import annotations

from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .builder import element
from .custom_element import define
from .grouping import CHILDREN, nodes
from .node import Node, comment, text

AttributeSpec = Union[str, Dict[str, Any]]


def _attribute_item(spec: AttributeSpec) -> Any:
    if isinstance(spec, str):
        return spec
    ((key, value),) = spec.items()
    return (key, value)


class ElementSpec(BaseModel):
    """Element with attributes followed by children."""

    element: str = Field(..., description="Tag name.")
    attributes: List[AttributeSpec] = Field(
        default_factory=list,
        description="Flag names or one-entry {key: value} mappings, in output order.",
    )
    children: List["NodeSpec"] = Field(
        default_factory=list, description="Child nodes, in output order."
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("attributes")
    @classmethod
    def _single_entry_mappings(cls, value: List[AttributeSpec]) -> List[AttributeSpec]:
        for spec in value:
            if isinstance(spec, dict) and len(spec) != 1:
                raise ValueError(f"attribute mappings need exactly one key, got {sorted(spec)}")
        return value

    def to_node(self) -> Node:
        items = [_attribute_item(spec) for spec in self.attributes]
        children = [_child_item(spec) for spec in self.children]
        return element(self.element, *items, CHILDREN, *children)


class TextSpec(BaseModel):
    text: str = Field(..., description="Literal text, emitted without escaping.")

    model_config = ConfigDict(extra="forbid")

    def to_node(self) -> Node:
        return text(self.text)


class CommentSpec(BaseModel):
    comment: str = Field(..., description="Comment body.")

    model_config = ConfigDict(extra="forbid")

    def to_node(self) -> Node:
        return comment(self.comment)


class DefineSpec(BaseModel):
    define: str = Field(..., description="Dashed custom element tag name.")

    model_config = ConfigDict(extra="forbid")

    def to_node(self) -> Node:
        return define(self.define)


# A bare string is an empty child element.
NodeSpec = Union[str, ElementSpec, TextSpec, CommentSpec, DefineSpec]

ElementSpec.model_rebuild()


def _child_item(spec: NodeSpec) -> Any:
    if isinstance(spec, str):
        return spec
    return spec.to_node()


def to_nodes(specs: List[NodeSpec]) -> List[Node]:
    return nodes(*(_child_item(spec) for spec in specs))


class PageSpec(BaseModel):
    """One output document."""

    output: str = Field(..., description="Output path relative to the build directory.")
    title: str = Field("Document", description="Text of the <title> element.")
    head: List[NodeSpec] = Field(
        default_factory=list, description="Extra nodes appended to <head> after <title>."
    )
    body: List[NodeSpec] = Field(default_factory=list, description="Nodes inside <body>.")
    custom_elements: List[str] = Field(
        default_factory=list,
        alias="customElements",
        description="Dashed tag names registered with a <script> in <head>.",
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class SiteConfig(BaseModel):
    """Top-level YAML document."""

    pages: List[PageSpec] = Field(default_factory=list, description="Pages to build.")

    model_config = ConfigDict(extra="forbid")


__all__ = [
    "AttributeSpec",
    "CommentSpec",
    "DefineSpec",
    "ElementSpec",
    "NodeSpec",
    "PageSpec",
    "SiteConfig",
    "TextSpec",
    "to_nodes",
]
