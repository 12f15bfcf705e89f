"""
DOM Node - read-only navigation and queries over a parsed tree
Method names follow the browser Document/Element interfaces
"""

import threading
from typing import Dict, List, Optional
from .node_kind import NodeKind, classify
from ..error_handler import RenderError


class DOMNode:
    """
    Wraps one node of a BeautifulSoup tree, or no node at all

    A wrapper around no node (the absent node) answers every traversal with
    another absent node and every attribute query with an empty result, so
    calls can be chained without None checks. Wrappers are cheap and never
    reused: each traversal builds a fresh one.
    """

    def __init__(self, node=None):
        self._node = node
        self._kind = classify(node)
        self._flat_node_list: Optional[List['DOMNode']] = None
        self._flat_element_list: Optional[List['DOMNode']] = None
        self._lock = threading.Lock()

    @property
    def node(self):
        """The underlying BeautifulSoup node, None when absent"""
        return self._node

    @property
    def kind(self) -> NodeKind:
        return self._kind

    @property
    def is_absent(self) -> bool:
        return self._node is None

    def __bool__(self):
        return self._node is not None

    def __repr__(self):
        if self.is_absent:
            return "<DOMNode absent>"
        return f"<DOMNode {self.tag_name()}>"

    def tag_name(self) -> str:
        """Return the element's tag, or a fixed name for other node kinds"""
        if self._kind is NodeKind.ELEMENT:
            return self._node.name
        if self._kind is NodeKind.ABSENT:
            return ""
        return self._kind.value

    # Traversal

    def parent(self) -> 'DOMNode':
        if self._node is None:
            return DOMNode()
        return DOMNode(self._node.parent)

    def child_nodes(self) -> List['DOMNode']:
        """Return all direct children, whatever their kind"""
        contents = getattr(self._node, 'contents', None) or []
        return [DOMNode(child) for child in contents]

    def children(self) -> List['DOMNode']:
        """Return the direct element children in document order"""
        return [child for child in self.child_nodes() if child.kind is NodeKind.ELEMENT]

    def child_element_count(self) -> int:
        return len(self.children())

    def first_element_child(self) -> 'DOMNode':
        """
        Return the first child element, skipping text, comments and other
        non-element nodes. The absent node if there is none.
        """
        contents = getattr(self._node, 'contents', None) or []
        return self._first_element(contents)

    def last_element_child(self) -> 'DOMNode':
        contents = getattr(self._node, 'contents', None) or []
        return self._first_element(reversed(contents))

    def next_element_sibling(self) -> 'DOMNode':
        """Return the closest following sibling that is an element"""
        if self._node is None:
            return DOMNode()
        return self._first_element(self._node.next_siblings)

    def previous_element_sibling(self) -> 'DOMNode':
        """Return the closest preceding sibling that is an element"""
        if self._node is None:
            return DOMNode()
        return self._first_element(self._node.previous_siblings)

    @staticmethod
    def _first_element(nodes) -> 'DOMNode':
        for node in nodes:
            if classify(node) is NodeKind.ELEMENT:
                return DOMNode(node)
        return DOMNode()

    # Attributes

    def attributes(self) -> Dict[str, str]:
        """
        Return a new name -> value mapping of the node's attributes

        Values a tree builder split into lists are joined back with single
        spaces. Non-element and absent nodes have no attributes.
        """
        attributes = {}
        for key, value in (getattr(self._node, 'attrs', None) or {}).items():
            attributes[key] = value if isinstance(value, str) else ' '.join(value)
        return attributes

    def class_name(self) -> str:
        return self._get_attribute('class')

    def class_list(self) -> List[str]:
        """
        Return the class attribute split on single spaces

        A missing or empty class attribute gives [''].
        """
        return self.class_name().split(' ')

    def id(self) -> str:
        return self._get_attribute('id')

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes()

    def has_attributes(self) -> bool:
        return len(self.attributes()) > 0

    def _get_attribute(self, name: str) -> str:
        return self.attributes().get(name, "")

    # Rendering

    def render(self, formatter: str = "minimal") -> str:
        """
        Serialize the subtree rooted at this node back to markup

        Args:
            formatter: BeautifulSoup output formatter name ("minimal",
                "html", "html5" or None)

        Raises:
            RenderError: the node is absent or the serializer failed
        """
        if self._node is None:
            raise RenderError("Cannot render an absent node")
        try:
            if self._kind in (NodeKind.DOCUMENT, NodeKind.ELEMENT):
                return self._node.decode(formatter=formatter)
            return self._node.output_ready(formatter=formatter)
        except Exception as e:
            raise RenderError(f"Failed to render {self!r}: {e}") from e

    # Search

    def get_element_by_id(self, element_id: str) -> 'DOMNode':
        """
        Return the first element, in document order, whose id equals element_id

        The search covers this node and all of its descendants. Returns the
        absent node when nothing matches.
        """
        for element in self._get_flat_element_list():
            if element.id() == element_id:
                return element
        return DOMNode()

    def get_elements_by_tag_name(self, tag: str) -> List['DOMNode']:
        return [element for element in self._get_flat_element_list()
                if element.tag_name() == tag]

    def get_elements_by_class_name(self, class_name: str) -> List['DOMNode']:
        return [element for element in self._get_flat_element_list()
                if class_name in element.class_list()]

    # Text

    def text(self, full: bool = False) -> str:
        """
        Return the text content of the node

        With full=False only the direct text children are used; with
        full=True every text node of the subtree is. Each piece is followed
        by a single space and the result is stripped.
        """
        if full:
            nodes = self._get_flat_node_list()
        else:
            nodes = self.child_nodes()
        return ''.join(f"{node._node} " for node in nodes
                       if node.kind is NodeKind.TEXT).strip()

    # Flattened caches

    def _get_flat_element_list(self) -> List['DOMNode']:
        """Return every element in the subtree, self included, pre-order"""
        if self._flat_element_list is not None:
            return self._flat_element_list

        elements = [node for node in self._get_flat_node_list()
                    if node.kind is NodeKind.ELEMENT]

        with self._lock:
            if self._flat_element_list is None:
                self._flat_element_list = elements
            return self._flat_element_list

    def _get_flat_node_list(self) -> List['DOMNode']:
        """
        Return every node in the subtree, self included, pre-order

        bs4 yields descendants by following next_element links, so deep
        trees do not hit the recursion limit. Only this wrapper caches; the
        wrappers built for descendants are fresh.
        """
        if self._flat_node_list is not None:
            return self._flat_node_list
        if self._node is None:
            return []

        nodes = [self]
        if self._kind in (NodeKind.DOCUMENT, NodeKind.ELEMENT):
            nodes.extend(DOMNode(node) for node in self._node.descendants)

        with self._lock:
            if self._flat_node_list is None:
                self._flat_node_list = nodes
            return self._flat_node_list
