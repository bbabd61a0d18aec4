"""Build markup documents from typed values and render them to text."""

from .attribute import Attribute, Flag, KeyValue, attribute, render_attribute
from .builder import ElementBuilder, doctype, element
from .custom_element import capitalize_word, define
from .dom import Document, default_doctype, default_html
from .errors import IOFailure, MalformedBuilderInput, TopusError
from .grouping import CHILDREN, attributes, group, nodes
from .node import Comment, Element, Node, Text, comment, render, text
from .util_fs import build

__version__ = "0.1.0"

__all__ = [
    "Attribute",
    "CHILDREN",
    "Comment",
    "Document",
    "Element",
    "ElementBuilder",
    "Flag",
    "IOFailure",
    "KeyValue",
    "MalformedBuilderInput",
    "Node",
    "Text",
    "TopusError",
    "attribute",
    "attributes",
    "build",
    "capitalize_word",
    "comment",
    "default_doctype",
    "default_html",
    "define",
    "doctype",
    "element",
    "group",
    "nodes",
    "render",
    "render_attribute",
    "text",
]
