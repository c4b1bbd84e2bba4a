"""Shared data models used across parser and output modules."""

from dataclasses import dataclass, field
from typing import Any

from schema_org_parser.domain.enums import OutputFormatEnum


@dataclass(frozen=True)
class PropertyEntry:
    """A single property row of a term's definition table."""

    name: str
    expected_types: tuple[str, ...] = ()


@dataclass(frozen=True)
class TermRecord:
    """A term and its properties, in source document order.

    Records are produced by ``TermParser`` and only read by renderers.
    """

    term: str
    properties: tuple[PropertyEntry, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return the nested term -> properties -> expected_types structure."""
        return {
            self.term: {
                'properties': [
                    {prop.name: {'expected_types': list(prop.expected_types)}}
                    for prop in self.properties
                ],
            },
        }


@dataclass
class RenderOptions:
    """Options controlling how terms are rendered."""

    output_format: OutputFormatEnum = OutputFormatEnum.TEXT
    indent: int | None = 2


@dataclass
class RenderError:
    """A fetch or parse failure for a single term."""

    term: str
    error: str


@dataclass
class RenderResult:
    """Result summary of a render run."""

    terms_requested: int
    terms_rendered: int
    errors_count: int
    errors: list[RenderError] = field(default_factory=list)
