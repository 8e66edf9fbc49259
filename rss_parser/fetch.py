"""Feed download for the command line front end."""

import requests

from .config import FetchConfig
from .logging_config import create_execution_logger


class FeedFetcher:
    """Downloads feed documents over HTTP."""

    def __init__(self, config: FetchConfig | None = None, execution_id: str | None = None):
        """Initialize FeedFetcher with configuration.

        Args:
            config: Timeout and user agent settings
            execution_id: Execution ID for logging context
        """
        self.config = config or FetchConfig()
        self.logger = create_execution_logger("fetcher", execution_id)
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": self.config.user_agent})

    def fetch(self, feed_url: str) -> str:
        """Download a feed and return its body as text.

        Args:
            feed_url: URL of the RSS feed

        Returns:
            Response body, decoded as UTF-8 unless the server names a charset

        Raises:
            requests.RequestException: If the download fails
        """
        self.logger.info("Downloading feed content", feed_url=feed_url)
        try:
            response = self.session.get(feed_url, timeout=self.config.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            self.logger.error(
                f"Failed to download feed {feed_url}: {e}",
                feed_url=feed_url,
                error=str(e),
            )
            raise

        self.logger.info(
            "Feed downloaded successfully",
            feed_url=feed_url,
            status_code=response.status_code,
            content_length=len(response.content),
        )

        # requests assumes ISO-8859-1 for text/* without a charset; feeds are UTF-8
        content_type = response.headers.get("Content-Type", "")
        if "charset" not in content_type.lower():
            response.encoding = "utf-8"
        return response.text
