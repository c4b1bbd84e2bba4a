"""Renderers for extracted terms."""

from schema_org_parser.output.base_renderer import BaseRenderer
from schema_org_parser.output.json_renderer import JSONRenderer
from schema_org_parser.output.sql_renderer import SQLRenderer, render_schema_text
from schema_org_parser.output.text_renderer import TextRenderer, render_text

__all__ = [
    'BaseRenderer', 'JSONRenderer', 'SQLRenderer', 'TextRenderer',
    'render_schema_text', 'render_text',
]
