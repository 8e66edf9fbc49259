"""RSS channel extraction for the RSS parser."""

from xml.etree.ElementTree import Element, ParseError

import defusedxml.ElementTree as defused_ET
from defusedxml import DefusedXmlException

from .config import LinkPolicy, ParserConfig
from .errors import ChannelNotFoundError, FeedParseError, MalformedDocumentError
from .extensions import Namespace, resolve, split_tag
from .logging_config import create_execution_logger
from .models import Channel, Item


class ChannelExtractor:
    """Builds a Channel from the text of an RSS document."""

    def __init__(
        self, config: ParserConfig | None = None, execution_id: str | None = None
    ):
        """Initialize ChannelExtractor with configuration.

        Args:
            config: Extraction settings, defaults to ParserConfig()
            execution_id: Execution ID for logging context
        """
        self.config = config or ParserConfig()
        self.logger = create_execution_logger("channel_extractor", execution_id)

    def parse(self, text: str) -> Channel | None:
        """Parse an RSS document into a Channel.

        Args:
            text: Complete XML document

        Returns:
            The extracted Channel, or None when the document is malformed or
            has no <channel> element
        """
        try:
            return self.parse_strict(text)
        except MalformedDocumentError as e:
            self.logger.error(str(e), reason=e.reason)
            return None
        except FeedParseError as e:
            self.logger.warning(str(e))
            return None

    def parse_strict(self, text: str) -> Channel:
        """Parse an RSS document into a Channel, raising on failure.

        Args:
            text: Complete XML document

        Returns:
            The extracted Channel

        Raises:
            MalformedDocumentError: If the text is not well-formed XML
            ChannelNotFoundError: If no <channel> element exists in the tree
        """
        try:
            root = defused_ET.fromstring(text)
        except (ParseError, DefusedXmlException, UnicodeEncodeError) as e:
            raise MalformedDocumentError(str(e)) from e

        node = self.find_channel(root)
        if node is None:
            raise ChannelNotFoundError()

        channel = self.extract_channel(node)
        self.logger.log_channel_parsed(channel.title, len(channel.items))
        return channel

    @staticmethod
    def find_channel(root: Element) -> Element | None:
        """Return the first element named channel, searching the whole tree."""
        for element in root.iter():
            if split_tag(element.tag)[1] == "channel":
                return element
        return None

    def extract_channel(self, node: Element) -> Channel:
        """Build a Channel from the children of a <channel> element."""
        title = ""
        link = ""
        description = ""
        extension_link = None
        items: list[Item] = []

        for element in node:
            namespace, name = split_tag(element.tag)

            if name == "title":
                if element.text is not None:
                    title = element.text
            elif name == "description":
                if element.text is not None:
                    description = element.text
            elif name == "link":
                # atom:link and <link> share a local name, so tell them apart by URI
                if namespace == Namespace.ATOM:
                    href = resolve(Namespace.ATOM, element)
                    if href is not None:
                        if self.config.link_policy is LinkPolicy.ATOM_ONLY:
                            link = href
                        else:
                            extension_link = href
                        continue
                if self.config.link_policy is LinkPolicy.ATOM_ONLY:
                    continue
                if element.text is not None:
                    link = element.text
            elif name == "item":
                item = self.extract_item(element)
                if item is None:
                    self.logger.warning("Skipping item that could not be built")
                    continue
                items.append(item)

        return Channel(
            title=title,
            link=link,
            description=description,
            items=tuple(items),
            extension_link=extension_link,
        )

    def extract_item(self, node: Element) -> Item | None:
        """Build an Item from the children of an <item> element.

        Always returns an Item today; None is reserved for items that should
        be rejected.
        """
        title = ""
        description = ""
        content = ""
        author = ""
        categories: list[str] = []

        for element in node:
            namespace, name = split_tag(element.tag)
            text = element.text

            if name == "title":
                if text is not None:
                    title = text
            elif name == "encoded":
                if text is not None:
                    content = text
            elif name == "description":
                if text is not None:
                    description = text
            elif name == "category":
                if text is not None:
                    categories.append(text)
            elif namespace == Namespace.DUBLIN_CORE:
                value = resolve(Namespace.DUBLIN_CORE, element)
                if value is not None:
                    author = value

        return Item(
            title=title,
            description=description,
            content=content,
            author=author,
            categories=tuple(categories),
        )


def parse_channel(text: str, config: ParserConfig | None = None) -> Channel | None:
    """Parse an RSS document with a fresh ChannelExtractor."""
    return ChannelExtractor(config).parse(text)
