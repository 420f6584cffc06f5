"""Navigable XML node tree built on lxml."""

from typing import Dict, Iterator, List, Optional

from lxml import etree

XML_PARSER = etree.XMLParser(
    remove_comments=True,
    remove_pis=True,
    resolve_entities=False,
    no_network=True,
    encoding="utf-8",
)


class XmlNode:
    """Read-only view over an lxml element.

    Names are local names (namespace stripped), values are trimmed text and
    the position is the 1-based source line of the element's start tag.
    """

    __slots__ = ("_element",)

    def __init__(self, element: etree._Element) -> None:
        self._element = element

    @property
    def name(self) -> str:
        return etree.QName(self._element).localname

    @property
    def namespace(self) -> Optional[str]:
        return etree.QName(self._element).namespace

    @property
    def prefix(self) -> Optional[str]:
        return self._element.prefix

    @property
    def default_namespace(self) -> Optional[str]:
        """Namespace bound to the unprefixed ``xmlns`` attribute in scope."""
        return self._element.nsmap.get(None)

    @property
    def attrs(self) -> Dict[str, str]:
        return dict(self._element.attrib)

    @property
    def position(self) -> Optional[int]:
        return self._element.sourceline

    @property
    def value(self) -> str:
        """Text directly inside the element, trimmed.

        Text around child elements is joined, so ``<v>1.<x/>0</v>`` reads ``1.0``.
        """
        parts = [self._element.text or ""]
        parts.extend(child.tail or "" for child in self._element)
        return "".join(parts).strip()

    @property
    def children(self) -> List["XmlNode"]:
        return [XmlNode(child) for child in self._element if isinstance(child.tag, str)]

    def child_named(self, name: str) -> Optional["XmlNode"]:
        for child in self.children:
            if child.name == name:
                return child
        return None

    def children_named(self, name: str) -> List["XmlNode"]:
        return [child for child in self.children if child.name == name]

    def descendant_with_path(self, path: str) -> Optional["XmlNode"]:
        """Follow a dotted path of child names, e.g. ``parent.relativePath``."""
        node: Optional[XmlNode] = self
        for component in path.split("."):
            node = node.child_named(component)
            if node is None:
                return None
        return node

    def value_with_path(self, path: str) -> Optional[str]:
        """Trimmed text of the descendant at ``path``, or None if absent."""
        node = self.descendant_with_path(path)
        return node.value if node is not None else None

    def iter_descendants(self) -> Iterator["XmlNode"]:
        """Every element below this one, in document order."""
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XmlNode):
            return NotImplemented
        return self._element is other._element

    def __hash__(self) -> int:
        return id(self._element)

    def __repr__(self) -> str:
        return f"XmlNode({self.name!r}, line={self.position})"


def parse_xml(raw: str) -> XmlNode:
    """Parse XML text into a node tree.

    Args:
        raw: XML document text

    Returns:
        Root node of the document

    Raises:
        etree.XMLSyntaxError: If the markup is malformed
    """
    root = etree.fromstring(raw.encode("utf-8"), parser=XML_PARSER)
    return XmlNode(root)
