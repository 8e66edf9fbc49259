"""Optional checks run on an extracted Channel.

Extraction itself is permissive: missing elements just leave empty fields.
Callers that need stricter guarantees can run validate_channel() afterwards.
"""

from dataclasses import dataclass

from .models import Channel


@dataclass(frozen=True)
class ValidationIssue:
    """A single problem found in an extracted channel."""

    field: str
    message: str
    item_index: int | None = None


def validate_channel(channel: Channel) -> list[ValidationIssue]:
    """Report channel fields RSS 2.0 requires and items with no content.

    Args:
        channel: Channel returned by the extractor

    Returns:
        Issues in document order, empty when the channel looks complete
    """
    issues = []

    for name in ("title", "link", "description"):
        if not getattr(channel, name):
            issues.append(ValidationIssue(name, f"Channel {name} is empty"))

    for index, item in enumerate(channel.items):
        # An RSS item needs at least one of title or description
        if not item.title and not item.description:
            issues.append(
                ValidationIssue(
                    "item",
                    "Item has neither title nor description",
                    item_index=index,
                )
            )

    return issues
