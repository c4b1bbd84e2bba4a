"""Structural text output.

Pretty-prints a term as the nested structure returned by
``TermRecord.to_dict``, keeping source order. Names and types are shown
exactly as extracted.
"""

import pprint
from dataclasses import replace

from schema_org_parser.domain.models import TermRecord
from schema_org_parser.output.base_renderer import BaseRenderer


class TextRenderer(BaseRenderer):
    """Renders a TermRecord as a pretty-printed structure."""

    def __init__(self, width: int = 80) -> None:
        self._width = width

    def render(self, record: TermRecord) -> str:
        return pprint.pformat(record.to_dict(), width=self._width, sort_dicts=False)


def render_text(term: str, record: TermRecord) -> str:
    """Render ``record`` as a structural dump under the given term name."""
    return TextRenderer().render(replace(record, term=term))
