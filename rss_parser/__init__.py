"""Typed RSS channel parser with Atom and Dublin Core extension support."""

from .config import LinkPolicy, ParserConfig
from .errors import ChannelNotFoundError, FeedParseError, MalformedDocumentError
from .models import Channel, Item
from .rss import ChannelExtractor, parse_channel

__all__ = [
    "Channel",
    "ChannelExtractor",
    "ChannelNotFoundError",
    "FeedParseError",
    "Item",
    "LinkPolicy",
    "MalformedDocumentError",
    "ParserConfig",
    "parse_channel",
]
