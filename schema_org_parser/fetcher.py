"""Fetches schema.org pages over HTTP.

Every call performs one request. There is no caching, retrying or rate
limiting; callers that need those should wrap the fetcher.
"""

import logging
from typing import List

import requests

from schema_org_parser.config import FetchConfig
from schema_org_parser.domain.constants import INDEX_PATH
from schema_org_parser.domain.models import TermRecord
from schema_org_parser.parsers.term_list_parser import TermListParser
from schema_org_parser.parsers.term_parser import TermParser

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Error fetching a page."""

    def __init__(self, url: str, message: str):
        super().__init__(f"Failed to fetch {url}: {message}")
        self.url = url


class SchemaOrgFetcher:
    """Downloads the term index and term pages from a schema.org site."""

    def __init__(self, config: FetchConfig | None = None, session: requests.Session | None = None):
        self.config = config or FetchConfig()
        self._session = session or requests.Session()
        self._session.headers.update({'User-Agent': self.config.user_agent})

    def index_url(self) -> str:
        return f"{self.config.base_url}{INDEX_PATH}"

    def term_url(self, term: str) -> str:
        return f"{self.config.base_url}/{term}"

    def fetch_index(self) -> str:
        """Fetch the full term index page."""
        return self._get(self.index_url())

    def fetch_term(self, term: str) -> str:
        """Fetch one term's definition page."""
        return self._get(self.term_url(term))

    def load_terms(self) -> List[str]:
        """Fetch and parse the term index."""
        return TermListParser().parse(self.fetch_index())

    def load_term(self, term: str) -> TermRecord:
        """Fetch and parse one term."""
        return TermParser().parse(term, self.fetch_term(term))

    def _get(self, url: str) -> str:
        logger.info("Fetching %s", url)
        try:
            resp = self._session.get(url, timeout=self.config.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e
        return resp.text
