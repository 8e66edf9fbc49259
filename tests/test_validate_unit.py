"""Unit tests for post-extraction validation."""

from rss_parser.models import Channel, Item
from rss_parser.validate import ValidationIssue, validate_channel


class TestValidateUnit:
    """Unit tests for validate_channel."""

    def test_complete_channel_has_no_issues(self):
        """Test that a fully populated channel passes."""
        channel = Channel(
            title="News",
            link="https://example.com",
            description="Daily news",
            items=(Item(title="Story"), Item(description="Only a description")),
        )

        assert validate_channel(channel) == []

    def test_empty_channel_fields_reported(self):
        """Test that each missing required channel field is reported once."""
        issues = validate_channel(Channel())

        assert [issue.field for issue in issues] == ["title", "link", "description"]

    def test_empty_item_reported_with_index(self):
        """Test that items with no title or description are reported."""
        channel = Channel(
            title="News",
            link="https://example.com",
            description="Daily news",
            items=(Item(title="ok"), Item(author="Jane Doe", categories=("A",))),
        )

        assert validate_channel(channel) == [
            ValidationIssue("item", "Item has neither title nor description", item_index=1)
        ]
