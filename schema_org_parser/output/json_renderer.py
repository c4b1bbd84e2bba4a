"""JSON output generation."""

import json

from schema_org_parser.domain.models import TermRecord
from schema_org_parser.output.base_renderer import BaseRenderer


class JSONRenderer(BaseRenderer):
    """Renders a TermRecord as a JSON document.

    Args:
        indent: JSON indentation; ``None`` for compact output.
    """

    def __init__(self, indent: int | None = 2) -> None:
        self._indent = indent

    def render(self, record: TermRecord) -> str:
        return json.dumps(record.to_dict(), indent=self._indent, ensure_ascii=False)
