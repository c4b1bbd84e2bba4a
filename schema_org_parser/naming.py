"""Identifier normalization.

Converts mixed-case compound identifiers such as ``additionalName`` or
``XMLHttpRequest`` into lowercase, underscore-delimited identifiers
(``additional_name``, ``xml_http_request``). Used to derive table and column
names for SQL output.
"""

import re

NAMESPACE_RE = re.compile(r'::')

# Run of capitals followed by a capitalized word: "HTTPRequest" -> "HTTP_Request"
ACRONYM_BOUNDARY_RE = re.compile(r'([A-Z]+)([A-Z][a-z])')

# Lowercase letter or digit followed by a capital: "additionalName" -> "additional_Name"
CAMEL_BOUNDARY_RE = re.compile(r'([a-z0-9])([A-Z])')


def normalize(identifier: str) -> str:
    """Return the lowercase, underscore-delimited form of ``identifier``.

    Steps are applied in order: ``::`` becomes ``/``, acronym and camelCase
    boundaries get an underscore, hyphens become underscores, and the result
    is lowercased.

    Examples:
        >>> normalize('additionalName')
        'additional_name'
        >>> normalize('HTTPRequest')
        'http_request'
        >>> normalize('Foo::Bar')
        'foo/bar'
    """
    result = NAMESPACE_RE.sub('/', identifier)
    result = ACRONYM_BOUNDARY_RE.sub(r'\1_\2', result)
    result = CAMEL_BOUNDARY_RE.sub(r'\1_\2', result)
    result = result.replace('-', '_')
    return result.lower()
