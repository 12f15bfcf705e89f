"""
DOM navigation and query layer over parsed HTML trees
"""

from .node_kind import NodeKind
from .dom_node import DOMNode
from .constants import ACCEPTED_ATTRIBUTES, is_accepted_attribute

__all__ = [
    'NodeKind',
    'DOMNode',
    'ACCEPTED_ATTRIBUTES',
    'is_accepted_attribute'
]
