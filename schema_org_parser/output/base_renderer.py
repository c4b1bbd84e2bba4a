"""Base class for term renderers."""

from typing import Iterable

from schema_org_parser.domain.models import TermRecord


class BaseRenderer:
    """Renders a TermRecord to text. Renderers never modify the record."""

    def render(self, record: TermRecord) -> str:
        raise NotImplementedError

    def render_all(self, records: Iterable[TermRecord]) -> str:
        """Render several records, one block per record."""
        return '\n'.join(self.render(record) for record in records)
