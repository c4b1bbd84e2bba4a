"""
Parser for a single schema.org term page.

This module provides the TermParser class for extracting a term's properties
and their expected types from its definition table.

Note: Expected types are kept as the raw tokens found in the page. They are
not resolved against the term index.
"""

import logging
import re
from typing import List, Union

from lxml import html

from schema_org_parser.domain.constants import (
    DEFINITION_ROWS_XPATH,
    EXPECTED_TYPE_TEXT_XPATH,
    PROPERTY_NAME_XPATH,
)
from schema_org_parser.domain.models import PropertyEntry, TermRecord
from schema_org_parser.parsers.base_parser import BaseParser

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r'\s')

# Type names are capitalized; prose ("or") and punctuation are not
TYPE_TOKEN_RE = re.compile(r'[A-Z]')


class TermParser(BaseParser):
    """
    Parser for term definition pages.

    Each body row of the definition table becomes one PropertyEntry. Rows
    are handled independently, so a row without a name or without expected
    types still produces an entry.
    """

    def parse(self, term: str, markup: Union[str, bytes]) -> TermRecord:
        """
        Parse a term page and extract its properties.

        Args:
            term: Term identifier the page belongs to
            markup: HTML of the term page

        Returns:
            TermRecord with one PropertyEntry per definition row, in
            document order. Properties are empty if there is no definition
            table.

        Raises:
            DocumentParseError: If the markup cannot be parsed
        """
        doc = self._load_document(markup)
        rows = doc.xpath(DEFINITION_ROWS_XPATH)
        properties = tuple(self._parse_row(row) for row in rows)

        unnamed = sum(1 for prop in properties if not prop.name)
        logger.debug(
            "Parsed %s: %d rows (%d without a property name)", term, len(rows), unnamed
        )
        return TermRecord(term=term, properties=properties)

    def _parse_row(self, row: html.HtmlElement) -> PropertyEntry:
        return PropertyEntry(
            name=self._get_text(row, PROPERTY_NAME_XPATH),
            expected_types=tuple(self._extract_expected_types(row)),
        )

    def _extract_expected_types(self, row: html.HtmlElement) -> List[str]:
        """
        Extract expected type names from the row's expected-types cell.

        Every text node is stripped of whitespace, and only tokens with an
        uppercase letter are kept.
        """
        return filter_type_tokens(row.xpath(EXPECTED_TYPE_TEXT_XPATH))


def filter_type_tokens(texts) -> List[str]:
    """Strip whitespace from each text and keep those that look like type names."""
    tokens = [WHITESPACE_RE.sub('', str(text)) for text in texts]
    return [token for token in tokens if TYPE_TOKEN_RE.search(token)]


def extract_term_record(term: str, markup: Union[str, bytes]) -> TermRecord:
    """Extract a TermRecord from a term definition page."""
    return TermParser().parse(term, markup)
