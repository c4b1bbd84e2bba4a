"""Renderer registry for output formats."""

from schema_org_parser.domain.enums import OutputFormatEnum
from schema_org_parser.output.base_renderer import BaseRenderer


class RendererRegistry:
    """Registry mapping output formats to renderer instances."""

    def __init__(self, indent: int | None = 2):
        self._renderers: dict[OutputFormatEnum, BaseRenderer] = {}
        self._register_default_renderers(indent)

    def _register_default_renderers(self, indent: int | None) -> None:
        from schema_org_parser.output.text_renderer import TextRenderer
        from schema_org_parser.output.sql_renderer import SQLRenderer
        from schema_org_parser.output.json_renderer import JSONRenderer

        self.register_renderer(OutputFormatEnum.TEXT, TextRenderer())
        self.register_renderer(OutputFormatEnum.SQL, SQLRenderer())
        self.register_renderer(OutputFormatEnum.JSON, JSONRenderer(indent=indent))

    def get_renderer(self, output_format: OutputFormatEnum) -> BaseRenderer:
        try:
            return self._renderers[output_format]
        except KeyError:
            raise ValueError(f"No renderer registered for format: {output_format}")

    def register_renderer(self, output_format: OutputFormatEnum, renderer: BaseRenderer) -> None:
        self._renderers[output_format] = renderer

    def get_supported_formats(self) -> list[OutputFormatEnum]:
        return list(self._renderers.keys())
