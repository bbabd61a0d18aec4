"""Grouping of builder arguments into ordered attribute and child lists.

A builder call receives a flat sequence of heterogeneous items. Each item is
classified by its shape:

* ``Flag`` / ``KeyValue`` instances are attributes.
* ``Element`` / ``Text`` / ``Comment`` instances are children.
* a list, tuple or other iterable made only of attributes (or only of
  nodes) is spliced in place, keeping its order.
* ``("http-equiv", "X-UA-Compatible")`` is a key/value attribute with a
  dashed key, ``("charset", "UTF-8")`` one with a plain key. Values go
  through ``str()``.
* a bare name such as ``"hidden"`` is a flag attribute.
* ``CHILDREN`` ends the attribute section. After it, only children are
  accepted and a bare name such as ``"body"`` stands for an empty element.

Both result lists keep the caller's left-to-right order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Literal, Tuple

from .attribute import BARE_NAME, HYPHENATED_NAME, Attribute, Flag, KeyValue, is_attribute
from .errors import MalformedBuilderInput
from .node import Element, Node, is_node


class _Separator:
    def __repr__(self) -> str:
        return "CHILDREN"


CHILDREN = _Separator()

Mode = Literal["mixed", "attributes", "children"]


@dataclass
class _GroupState:
    mode: Mode
    attributes: List[Attribute] = field(default_factory=list)
    children: List[Node] = field(default_factory=list)
    separated: bool = False

    def add_attributes(self, attributes: Iterable[Attribute], item: Any, position: int) -> None:
        if self.mode == "children":
            raise MalformedBuilderInput("attributes are not allowed after CHILDREN", item=item, position=position)
        self.attributes.extend(attributes)

    def add_children(self, children: Iterable[Node], item: Any, position: int) -> None:
        if self.mode == "attributes":
            raise MalformedBuilderInput("nodes are not allowed in an attribute list", item=item, position=position)
        self.children.extend(children)


def _is_pair(item: Any) -> bool:
    return isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], str)


def _separator(item: Any, position: int, state: _GroupState) -> bool:
    if item is not CHILDREN:
        return False
    if state.mode == "attributes":
        raise MalformedBuilderInput("CHILDREN is not allowed in an attribute list", item=item, position=position)
    if state.separated:
        raise MalformedBuilderInput("CHILDREN may appear only once", item=item, position=position)
    if state.mode == "children":
        raise MalformedBuilderInput("CHILDREN is not allowed in a node list", item=item, position=position)
    state.mode = "children"
    state.separated = True
    return True


def _attribute_value(item: Any, position: int, state: _GroupState) -> bool:
    if not is_attribute(item):
        return False
    state.add_attributes([item], item, position)
    return True


def _node_value(item: Any, position: int, state: _GroupState) -> bool:
    if not is_node(item):
        return False
    state.add_children([item], item, position)
    return True


def _hyphenated_pair(item: Any, position: int, state: _GroupState) -> bool:
    if not (_is_pair(item) and HYPHENATED_NAME.match(item[0])):
        return False
    state.add_attributes([KeyValue(item[0], str(item[1]))], item, position)
    return True


def _plain_pair(item: Any, position: int, state: _GroupState) -> bool:
    if not (_is_pair(item) and BARE_NAME.match(item[0])):
        return False
    state.add_attributes([KeyValue(item[0], str(item[1]))], item, position)
    return True


def _bare_name(item: Any, position: int, state: _GroupState) -> bool:
    if not (isinstance(item, str) and BARE_NAME.match(item)):
        return False
    if state.mode == "children":
        state.children.append(Element(item))
    else:
        state.add_attributes([Flag(item)], item, position)
    return True


def _splice(item: Any, position: int, state: _GroupState) -> bool:
    if isinstance(item, (str, bytes, dict, set, frozenset)) or _is_pair(item):
        return False
    try:
        members = list(item)
    except TypeError:
        return False
    if not members:
        return True
    if all(is_attribute(member) for member in members):
        state.add_attributes(members, item, position)
    elif all(is_node(member) for member in members):
        state.add_children(members, item, position)
    else:
        raise MalformedBuilderInput(
            "a spliced collection must hold only attributes or only nodes",
            item=item,
            position=position,
        )
    return True


# Most specific shapes first.
_RULES: Tuple[Callable[[Any, int, _GroupState], bool], ...] = (
    _separator,
    _attribute_value,
    _node_value,
    _hyphenated_pair,
    _plain_pair,
    _bare_name,
    _splice,
)


def _reject(item: Any, position: int) -> MalformedBuilderInput:
    if _is_pair(item):
        reason = "attribute key must be a name or dash-joined names"
    elif isinstance(item, str):
        reason = "strings must be bare names; wrap text in text()"
    else:
        reason = "not an attribute, node, collection, key/value pair or name"
    return MalformedBuilderInput(reason, item=item, position=position)


def _group(items: Iterable[Any], mode: Mode) -> _GroupState:
    state = _GroupState(mode=mode)
    for position, item in enumerate(items):
        if not any(rule(item, position, state) for rule in _RULES):
            raise _reject(item, position)
    return state


def group(items: Iterable[Any]) -> Tuple[List[Attribute], List[Node]]:
    """Split builder ``items`` into ``(attributes, children)``."""
    state = _group(items, "mixed")
    return state.attributes, state.children


def attributes(*items: Any) -> List[Attribute]:
    """Group attribute-only items, e.g. ``attributes("html", ("style", "display:None"))``."""
    return _group(items, "attributes").attributes


def nodes(*items: Any) -> List[Node]:
    """Group child-only items; bare names become empty elements."""
    return _group(items, "children").children


__all__ = ["CHILDREN", "attributes", "group", "nodes"]
