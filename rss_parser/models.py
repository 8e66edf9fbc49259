"""Data models for the RSS parser."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Item:
    """Represents a single entry within a channel."""

    title: str = ""
    description: str = ""
    content: str = ""  # HTML body from content:encoded
    author: str = ""
    categories: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return the item as a plain dictionary."""
        data = asdict(self)
        data["categories"] = list(self.categories)
        return data


@dataclass(frozen=True)
class Channel:
    """Represents one RSS feed."""

    title: str = ""
    link: str = ""
    description: str = ""
    items: tuple[Item, ...] = ()
    extension_link: str | None = None  # atom:link href

    def to_dict(self) -> dict[str, Any]:
        """Return the channel, items included, as a plain dictionary."""
        return {
            "title": self.title,
            "link": self.link,
            "description": self.description,
            "extension_link": self.extension_link,
            "items": [item.to_dict() for item in self.items],
        }
