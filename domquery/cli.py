"""
domquery command line - load a document and run one query against it
"""

import argparse
import asyncio
import logging
import sys
from typing import List
import aiohttp
from .config import ParserConfig
from .dom import DOMNode
from .error_handler import DOMError
from .loaders import fetch, load_file
from .log_manager import LogManager

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="domquery",
        description="Query an HTML document by id, tag name or class name"
    )
    parser.add_argument("source", help="Path or http(s) URL of the document")

    query = parser.add_mutually_exclusive_group()
    query.add_argument("--id", dest="element_id", help="Select the element with this id")
    query.add_argument("--tag", help="Select elements with this tag name")
    query.add_argument("--class", dest="class_name", help="Select elements with this class")

    output = parser.add_mutually_exclusive_group()
    output.add_argument("--text", action="store_true", help="Print direct text of each match")
    output.add_argument("--full-text", action="store_true", help="Print all text of each match")
    output.add_argument("--render", action="store_true", help="Print the markup of each match")

    parser.add_argument("--parser", default="html5lib", help="BeautifulSoup tree builder (default: html5lib)")
    parser.add_argument("--formatter", default="minimal", help="Output formatter for --render")
    parser.add_argument("--log-level", default="WARNING", type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default: WARNING)")
    parser.add_argument("--log-dir", help="Also write a detailed log file here")
    return parser


async def load_document(source: str, config: ParserConfig) -> DOMNode:
    if source.startswith(('http://', 'https://')):
        return await fetch(source, config)
    return await load_file(source, config)


def select(document: DOMNode, args) -> List[DOMNode]:
    if args.element_id is not None:
        element = document.get_element_by_id(args.element_id)
        return [element] if element else []
    if args.tag is not None:
        return document.get_elements_by_tag_name(args.tag)
    if args.class_name is not None:
        return document.get_elements_by_class_name(args.class_name)
    return [document]


def describe(node: DOMNode) -> str:
    """Short label like div#main.nav.top"""
    label = node.tag_name()
    if node.id():
        label += f"#{node.id()}"
    classes = [name for name in node.class_list() if name]
    if classes:
        label += '.' + '.'.join(classes)
    return label


def format_match(node: DOMNode, args) -> str:
    if args.text:
        return node.text()
    if args.full_text:
        return node.text(full=True)
    if args.render:
        return node.render(args.formatter)
    return describe(node)


def run(args) -> int:
    config = ParserConfig(features=args.parser)

    try:
        document = asyncio.run(load_document(args.source, config))
        matches = select(document, args)
        logger.info(f"{len(matches)} matches in {args.source}")
        for node in matches:
            print(format_match(node, args))
    except (DOMError, OSError, aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error(f"Failed to query {args.source}: {e}")
        print(f"domquery: {e}", file=sys.stderr)
        return 2

    return 0 if matches else 1


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    LogManager(log_dir=args.log_dir, log_level=args.log_level)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
