"""Exceptions raised while extracting a channel from a feed document."""


class FeedParseError(ValueError):
    """Base class for documents that cannot produce a Channel."""


class MalformedDocumentError(FeedParseError):
    """The input is not well-formed XML."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to parse XML: {reason}")


class ChannelNotFoundError(FeedParseError):
    """The document is well-formed but has no <channel> element."""

    def __init__(self):
        super().__init__("No <channel> element found in document")
