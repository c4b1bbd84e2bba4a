"""
Parser for the schema.org full term index.

This module provides the TermListParser class for extracting every term
identifier from the type hierarchy page (``/docs/full.html``).
"""

import logging
from typing import List, Union

from schema_org_parser.domain.constants import TERM_LINK_HREFS_XPATH
from schema_org_parser.parsers.base_parser import BaseParser

logger = logging.getLogger(__name__)


class TermListParser(BaseParser):
    """
    Parser for the term index page.

    Reads the ``href`` of each link in the type tree. Links are root-relative
    (``/Person``), so a single leading slash is removed.
    """

    def parse(self, markup: Union[str, bytes]) -> List[str]:
        """
        Parse the term index and extract term identifiers.

        Args:
            markup: HTML of the term index page

        Returns:
            Term identifiers in document order. Duplicates are kept. Empty if
            the type tree is missing.

        Raises:
            DocumentParseError: If the markup cannot be parsed
        """
        doc = self._load_document(markup)
        terms = [self._strip_leading_slash(str(href)) for href in doc.xpath(TERM_LINK_HREFS_XPATH)]
        logger.debug("Found %d terms in index", len(terms))
        return terms

    @staticmethod
    def _strip_leading_slash(href: str) -> str:
        return href[1:] if href.startswith('/') else href


def extract_term_list(markup: Union[str, bytes]) -> List[str]:
    """Extract term identifiers from the term index page."""
    return TermListParser().parse(markup)
