"""
Page Content Retrieval Module

This module handles downloading a single page with a bounded retry loop and
returning its body markup after the configured classes and tags have been
stripped out.
"""

import logging
from typing import Optional

import requests
import soupsieve
from bs4 import BeautifulSoup

from ..config import CrawlConfig


class ContentFetcher:
    """
    Downloads page bodies for the crawl.

    Every attempt sends the configured user agent and is bounded by the
    configured timeout. Failures are retried immediately up to
    ``max_retries`` attempts in total; after that the page is reported as
    empty rather than raising.
    """

    def __init__(self, config: CrawlConfig, session: Optional[requests.Session] = None):
        """
        Initialize the content fetcher.

        Args:
            config: Crawl configuration (scraper and exclude options are used)
            session: Optional pre-built HTTP session
        """
        self.config = config
        self.user_agent = config.scraper.user_agent
        self.timeout = config.scraper.timeout_secs
        self.max_retries = config.scraper.max_retries
        self.exclude_classes = config.exclude.exclude_classes
        self.exclude_tags = config.exclude.exclude_tags
        self.logger = logging.getLogger(__name__)

        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': self.user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        })

    def fetch_content(self, url: str) -> str:
        """
        Retrieve the body markup of ``url``.

        Args:
            url: Full URL of the page

        Returns:
            Inner markup of ``<body>`` with excluded elements removed, or an
            empty string once every attempt has failed
        """
        self.logger.debug(f"Fetching content from: {url}")

        for attempt in range(1, self.max_retries + 1):
            try:
                response = self.session.get(url, timeout=self.timeout)
                response.raise_for_status()

                content = self.extract_body(response.text)
                self.logger.debug(f"Retrieved {len(content)} characters of body markup from {url}")
                return content

            except requests.exceptions.Timeout:
                self.logger.error(
                    f"Error scraping content from {url}, attempt {attempt} of {self.max_retries}: Timeout"
                )
            except requests.exceptions.RequestException as e:
                self.logger.error(
                    f"Error scraping content from {url}, attempt {attempt} of {self.max_retries}: {e}"
                )

        self.logger.error(f"Failed to scrape {url} after {self.max_retries} attempts.")
        return ""

    def extract_body(self, html_content: str) -> str:
        """
        Remove excluded elements and serialize what is left of ``<body>``.

        Args:
            html_content: Full page markup

        Returns:
            Inner markup of the body element, empty if there is none
        """
        soup = BeautifulSoup(html_content, 'lxml')

        removed_count = 0

        for class_name in self.exclude_classes:
            selector = self._class_selector(class_name)
            if not selector:
                continue
            for element in soup.select(selector):
                element.decompose()
                removed_count += 1

        for tag_name in self.exclude_tags:
            for element in soup.find_all(tag_name):
                element.decompose()
                removed_count += 1

        if removed_count > 0:
            self.logger.debug(f"Removed {removed_count} excluded elements")

        body = soup.body
        if body is None:
            return ""
        return body.decode_contents()

    @staticmethod
    def _class_selector(class_name: str) -> str:
        """Turn ``"nav main"`` into the compound selector ``.nav.main``.

        Each class is escaped, so names such as ``md:hidden`` or ``2col``
        match literally.
        """
        return "".join("." + soupsieve.escape(name) for name in class_name.split())

    def close(self):
        """Close the HTTP session."""
        self.session.close()
        self.logger.debug("Content fetcher session closed")
