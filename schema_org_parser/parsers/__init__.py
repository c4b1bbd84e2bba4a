"""schema.org page parsers."""

from schema_org_parser.parsers.base_parser import BaseParser, DocumentParseError
from schema_org_parser.parsers.term_list_parser import TermListParser, extract_term_list
from schema_org_parser.parsers.term_parser import TermParser, extract_term_record

__all__ = [
    'BaseParser', 'DocumentParseError',
    'TermListParser', 'TermParser',
    'extract_term_list', 'extract_term_record',
]
