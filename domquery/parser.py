import logging
from bs4 import BeautifulSoup, FeatureNotFound, ParserRejectedMarkup
from .config import ParserConfig
from .dom import DOMNode
from .error_handler import ParseError

logger = logging.getLogger(__name__)


class HTMLParser:
    def __init__(self, config: ParserConfig = None):
        self.config = config or ParserConfig()

    def parse(self, markup) -> DOMNode:
        """Parse markup (str, bytes or a readable file object) into a document DOMNode

        Raises:
            ParseError: the tree builder is unavailable or rejected the markup
        """
        if hasattr(markup, 'read'):
            markup = markup.read()
        if not isinstance(markup, (str, bytes)):
            raise ParseError(f"Cannot parse markup of type {type(markup).__name__}")

        logger.debug(f"Parsing {len(markup)} {'bytes' if isinstance(markup, bytes) else 'characters'} "
                     f"with {self.config.features}")

        kwargs = {}
        if isinstance(markup, bytes) and self.config.from_encoding:
            kwargs['from_encoding'] = self.config.from_encoding

        try:
            # Keep attribute values as the literal strings from the markup
            soup = BeautifulSoup(markup, self.config.features,
                                 multi_valued_attributes=None, **kwargs)
        except FeatureNotFound as e:
            raise ParseError(f"Tree builder not available: {self.config.features}") from e
        except ParserRejectedMarkup as e:
            raise ParseError(f"Markup rejected by {self.config.features}: {e}") from e

        return DOMNode(soup)


def parse(markup, config: ParserConfig = None) -> DOMNode:
    """Parse markup with a one-off HTMLParser"""
    return HTMLParser(config).parse(markup)
