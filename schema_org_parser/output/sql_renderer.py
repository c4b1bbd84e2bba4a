"""SQL-like output.

Renders a term as a ``create table`` block for human review:

    create table person (
      additional_name text,
      address postal_address
    );

Each typed property becomes a column typed by its first expected type.
Properties without expected types are left out. The output is an
approximation and is not guaranteed to be valid SQL.
"""

from dataclasses import replace
from typing import Sequence

from schema_org_parser.domain.models import PropertyEntry, TermRecord
from schema_org_parser.naming import normalize
from schema_org_parser.output.base_renderer import BaseRenderer


class SQLRenderer(BaseRenderer):
    """Renders a TermRecord as a create table statement."""

    def render(self, record: TermRecord) -> str:
        return (
            "create table " + self.table_name(record.term) + " (\n"
            + self.columns(record.properties)
            + "\n);"
        )

    @staticmethod
    def table_name(term: str) -> str:
        return normalize(term)

    @staticmethod
    def column_name(property_name: str) -> str:
        return normalize(property_name)

    @staticmethod
    def column_type(expected_types: Sequence[str]) -> str:
        return normalize(expected_types[0])

    def columns(self, properties: Sequence[PropertyEntry]) -> str:
        lines = [
            f"  {self.column_name(prop.name)} {self.column_type(prop.expected_types)}"
            for prop in properties
            if prop.expected_types
        ]
        return ",\n".join(lines)


def render_schema_text(term: str, record: TermRecord) -> str:
    """Render ``record`` as a create table block named after ``term``."""
    return SQLRenderer().render(replace(record, term=term))
