"""
parsetree.py - Node model for MediaWiki preprocessor parse trees

The API returns the parse tree of a page as XML (rvgeneratexml). We convert
it into a small tree of Element and Text nodes so the template lookups only
ever deal with names, attributes, children and text.
"""

from dataclasses import dataclass, field
from typing import Union

from defusedxml import DefusedXmlException, ElementTree
from defusedxml.ElementTree import ParseError

from errors import ParseTreeError


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class Element:
    name: str
    children: tuple = ()
    # Left out of the hash so nodes stay hashable
    attributes: dict = field(default_factory=dict, hash=False)

    def child(self, name: str) -> 'Element | None':
        """Return the first direct child element called `name`."""
        for node in self.children:
            if isinstance(node, Element) and node.name == name:
                return node
        return None

    def elements(self, name: str) -> list['Element']:
        """Return all direct child elements called `name`, in order."""
        return [node for node in self.children if isinstance(node, Element) and node.name == name]


Node = Union[Element, Text]


def parse_tree(xml: str) -> Element:
    """
    Parse a parse tree XML document and return its root element.

    Raises ParseTreeError for malformed or unsafe XML.
    """
    try:
        root = ElementTree.fromstring(xml)
    except (ParseError, DefusedXmlException) as e:
        raise ParseTreeError(f"Could not parse parse tree XML: {e}") from e
    return _convert(root)


def _convert(el) -> Element:
    children = []
    if el.text:
        children.append(Text(el.text))
    for sub in el:
        children.append(_convert(sub))
        if sub.tail:
            children.append(Text(sub.tail))
    return Element(el.tag, tuple(children), dict(el.attrib))


def text_content(node: Node) -> str:
    """Concatenate all text below `node` in document order."""
    if isinstance(node, Text):
        return node.content
    return ''.join(text_content(child) for child in node.children)


def capitalize(text: str) -> str:
    """
    Uppercase the first character only, the way wiki titles are normalized.

    Unlike str.capitalize() the rest of the string is left alone, so
    'en-GB' stays 'En-GB'.
    """
    return text[:1].upper() + text[1:]
