from enum import Enum
from bs4 import BeautifulSoup, Comment, Doctype, NavigableString, Tag
from bs4.element import PreformattedString


class NodeKind(Enum):
    """Kinds of node a parsed tree is made of"""
    DOCUMENT = "document"
    DOCTYPE = "doctype"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    OTHER = "other"       # CDATA, processing instructions, declarations
    ABSENT = "absent"     # No underlying node


def classify(node) -> NodeKind:
    """Map a BeautifulSoup node to its NodeKind

    Order matters: BeautifulSoup subclasses Tag, and Comment/Doctype
    subclass NavigableString.
    """
    if node is None:
        return NodeKind.ABSENT
    if isinstance(node, BeautifulSoup):
        return NodeKind.DOCUMENT
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, Doctype):
        return NodeKind.DOCTYPE
    if isinstance(node, Comment):
        return NodeKind.COMMENT
    if isinstance(node, PreformattedString):
        return NodeKind.OTHER
    if isinstance(node, NavigableString):
        return NodeKind.TEXT
    return NodeKind.OTHER
