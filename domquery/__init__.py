"""
domquery - DOM-style navigation and queries over parsed HTML documents
"""

__version__ = "1.0.0"

from .config import ParserConfig, FetchConfig, RetryConfig
from .error_handler import DOMError, ParseError, RenderError, FetchError, ErrorType
from .dom import DOMNode, NodeKind, ACCEPTED_ATTRIBUTES, is_accepted_attribute
from .parser import HTMLParser, parse
from .loaders import load_file, fetch, from_page

__all__ = [
    'ParserConfig',
    'FetchConfig',
    'RetryConfig',
    'DOMError',
    'ParseError',
    'RenderError',
    'FetchError',
    'ErrorType',
    'DOMNode',
    'NodeKind',
    'ACCEPTED_ATTRIBUTES',
    'is_accepted_attribute',
    'HTMLParser',
    'parse',
    'load_file',
    'fetch',
    'from_page'
]
