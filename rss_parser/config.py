"""Configuration management for the RSS parser."""

import os
from dataclasses import dataclass
from enum import Enum

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class LinkPolicy(str, Enum):
    """How a channel's plain <link> and <atom:link href> are combined.

    FALLBACK keeps plain link text in ``link`` and records the Atom href in
    ``extension_link``. ATOM_ONLY takes ``link`` from the Atom href alone and
    ignores plain link text.
    """

    FALLBACK = "fallback"
    ATOM_ONLY = "atom_only"

    @classmethod
    def from_str(cls, value: str) -> "LinkPolicy":
        """Parse a policy name, accepting 'atomOnly' and 'atom-only' spellings."""
        normalized = value.strip().lower().replace("-", "_")
        if normalized == "atomonly":
            normalized = cls.ATOM_ONLY.value
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(policy.value for policy in cls)
            raise ValueError(
                f"Invalid link policy {value!r}, expected one of: {valid}"
            ) from None


@dataclass
class ParserConfig:
    """Configuration for channel extraction."""

    link_policy: LinkPolicy = LinkPolicy.FALLBACK


@dataclass
class FetchConfig:
    """Configuration for downloading feeds from the CLI."""

    timeout: int = 30
    user_agent: str = "rss-parser/1.0"


class Config:
    """Main configuration manager."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.link_policy = LinkPolicy.from_str(
            os.getenv("RSS_PARSER_LINK_POLICY", LinkPolicy.FALLBACK.value)
        )

        timeout = os.getenv("RSS_PARSER_TIMEOUT", "30")
        try:
            self.timeout = int(timeout)
        except ValueError:
            raise ValueError(
                f"Invalid RSS_PARSER_TIMEOUT {timeout!r}, expected whole seconds"
            ) from None

        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid LOG_LEVEL {self.log_level!r}, expected one of: "
                + ", ".join(LOG_LEVELS)
            )

    def get_parser_config(self) -> ParserConfig:
        """Get channel extraction configuration."""
        return ParserConfig(link_policy=self.link_policy)

    def get_fetch_config(self) -> FetchConfig:
        """Get feed download configuration."""
        return FetchConfig(timeout=self.timeout)
