"""Minimal document tree interface consumed by the form parser.

Any object implementing :class:`FormNode` can be parsed into a form. lxml
elements are wrapped in :class:`LxmlNode` automatically by :func:`as_node`.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol, runtime_checkable

from lxml import etree


@runtime_checkable
class FormNode(Protocol):
    """A read-only element of a parsed HTML document."""

    @property
    def tag(self) -> str:
        """The lower-cased tag name."""
        ...

    def get(self, name: str) -> str | None: ...

    def has(self, name: str) -> bool: ...

    def text_content(self) -> str: ...

    def iter_descendants(self) -> Iterator[FormNode]:
        """All descendant elements in document (pre-)order, excluding self."""
        ...

    def iter_options(self) -> Iterator[FormNode]:
        """The option elements of a select list."""
        ...


class LxmlNode:
    """Adapt an lxml element to :class:`FormNode`."""

    __slots__ = ("element",)

    def __init__(self, element: etree._Element) -> None:
        self.element = element

    @property
    def tag(self) -> str:
        return etree.QName(self.element).localname.lower()

    def get(self, name: str) -> str | None:
        return self.element.get(name)

    def has(self, name: str) -> bool:
        return name in self.element.attrib

    def text_content(self) -> str:
        return "".join(self.element.itertext())

    def iter_descendants(self) -> Iterator[LxmlNode]:
        # skip comments and processing instructions
        for element in self.element.iterdescendants(tag=etree.Element):
            yield LxmlNode(element)

    def iter_options(self) -> Iterator[LxmlNode]:
        for node in self.iter_descendants():
            if node.tag == "option":
                yield node

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LxmlNode) and other.element is self.element

    def __hash__(self) -> int:
        return hash(self.element)

    def __repr__(self) -> str:
        return f"<LxmlNode {self.tag}>"


def as_node(obj: Any) -> FormNode:
    """Return ``obj`` as a :class:`FormNode`, wrapping lxml elements."""
    if isinstance(obj, etree._Element):
        return LxmlNode(obj)
    if isinstance(obj, FormNode):
        return obj
    raise TypeError(f"Not a document node: {obj!r}")
