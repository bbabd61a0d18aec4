"""Default document skeleton: doctype plus a fixed html/head/body tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .builder import doctype, element
from .grouping import CHILDREN
from .node import Node, Text, text

DEFAULT_TITLE = "Document"


def default_doctype() -> Node:
    return doctype()


def default_html(title: str, *, head: Iterable[Node] = (), body: Iterable[Node] = ()) -> Node:
    """Build the html skeleton; ``head`` nodes follow ``<title>``.

    An empty body keeps an empty text child so ``</body>`` is still emitted.
    """
    body_children = list(body) or [Text("")]
    return element(
        "html",
        ("charset", "UTF-8"),
        CHILDREN,
        element(
            "head",
            CHILDREN,
            element("meta", ("charset", "UTF-8")),
            element("meta", ("http-equiv", "X-UA-Compatible"), ("content", "IE=edge")),
            element("meta", ("name", "viewport"), ("content", "width=device-width, initial-scale=1.0")),
            element("title", CHILDREN, text(title)),
            list(head),
        ),
        element("body", CHILDREN, body_children),
    )


@dataclass(frozen=True)
class Document:
    doctype: Node
    html: Node

    @classmethod
    def from_title(cls, title: str, *, head: Iterable[Node] = (), body: Iterable[Node] = ()) -> "Document":
        return cls(doctype=default_doctype(), html=default_html(title, head=head, body=body))

    @classmethod
    def default(cls) -> "Document":
        return cls.from_title(DEFAULT_TITLE)

    def render(self) -> str:
        return self.doctype.render() + self.html.render()

    def __str__(self) -> str:
        return self.render()


__all__ = ["DEFAULT_TITLE", "Document", "default_doctype", "default_html"]
