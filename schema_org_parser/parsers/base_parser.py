"""
Base class for schema.org page parsers.

Provides document loading and the text helpers shared by the term index
and term definition parsers.
"""

from typing import Union

from lxml import etree, html


class DocumentParseError(Exception):
    """Input could not be parsed as an HTML document."""
    pass


class BaseParser:
    """
    Base parser for schema.org HTML pages.

    Subclasses locate their structure with XPath against the document
    returned by ``_load_document``.
    """

    def _load_document(self, markup: Union[str, bytes]) -> html.HtmlElement:
        """
        Parse raw markup into an HTML document tree.

        Args:
            markup: HTML text or bytes, as fetched

        Returns:
            Root element of the parsed document

        Raises:
            DocumentParseError: If the input is not text, is blank, or lxml
                cannot build a document from it
        """
        if not isinstance(markup, (str, bytes)):
            raise DocumentParseError(
                f"Expected HTML text, got {type(markup).__name__}"
            )
        if not markup.strip():
            raise DocumentParseError("Document is empty")

        parser = None
        try:
            if isinstance(markup, str):
                # lxml rejects str input that carries an encoding declaration
                markup = markup.encode('utf-8')
                parser = html.HTMLParser(encoding='utf-8')
            return html.document_fromstring(markup, parser=parser)
        except (etree.ParserError, etree.XMLSyntaxError, ValueError) as e:
            raise DocumentParseError(f"Failed to parse document: {e}") from e

    def _get_text(self, elem: html.HtmlElement, path: str) -> str:
        """Return the concatenated text content of all elements matching path."""
        return ''.join(child.text_content() for child in elem.xpath(path))
