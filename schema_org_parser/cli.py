"""CLI for schema-org-parser."""

import argparse
import logging
import sys
from typing import Iterable, TextIO

from schema_org_parser.config import load_config
from schema_org_parser.domain.enums import OutputFormatEnum
from schema_org_parser.domain.models import RenderError, RenderOptions, RenderResult
from schema_org_parser.fetcher import FetchError, SchemaOrgFetcher
from schema_org_parser.parsers.base_parser import DocumentParseError
from schema_org_parser.renderer_registry import RendererRegistry

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def render_terms(
    terms: Iterable[str],
    options: RenderOptions,
    fetcher: SchemaOrgFetcher,
    out: TextIO | None = None,
) -> RenderResult:
    """Main orchestration: term names -> fetched pages -> rendered output.

    Terms are processed in the given order. A term that cannot be fetched or
    parsed is recorded as an error and the remaining terms still render.
    """
    out = out or sys.stdout
    renderer = RendererRegistry(indent=options.indent).get_renderer(options.output_format)

    requested = 0
    rendered = 0
    errors: list[RenderError] = []

    for term in terms:
        requested += 1
        try:
            record = fetcher.load_term(term)
        except (FetchError, DocumentParseError) as e:
            logger.error("Skipping %s: %s", term, e)
            errors.append(RenderError(term=term, error=str(e)))
            continue

        print(renderer.render(record), file=out)
        rendered += 1

    return RenderResult(
        terms_requested=requested,
        terms_rendered=rendered,
        errors_count=len(errors),
        errors=errors,
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    # basicConfig is a no-op when the root logger already has handlers
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.WARNING)


def _add_fetch_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--base-url', help='Site to fetch from (default: https://schema.org)')
    parser.add_argument('--timeout', type=float, help='Request timeout in seconds (default: 30)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose logging')


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog='schema-org-parser',
        description='Extract schema.org terms, properties and expected types',
    )
    subparsers = parser.add_subparsers(dest='command')

    # show command
    show_parser = subparsers.add_parser('show', help='Fetch terms and print their properties')
    show_parser.add_argument('terms', nargs='+', metavar='TERM', help='Term names, e.g. Person')
    show_parser.add_argument(
        '-o', '--output',
        choices=[f.value for f in OutputFormatEnum],
        default=OutputFormatEnum.TEXT.value,
        help='Output format (default: text)',
    )
    show_parser.add_argument(
        '--indent', type=int, default=2, help='JSON indentation (default: 2)',
    )
    show_parser.add_argument(
        '--compact', action='store_true', help='Single-line JSON output',
    )
    _add_fetch_arguments(show_parser)

    # list command
    list_parser = subparsers.add_parser('list', help='List all terms in the index')
    _add_fetch_arguments(list_parser)

    # formats command
    subparsers.add_parser('formats', help='List supported output formats')

    args = parser.parse_args(argv)

    if args.command in ('show', 'list'):
        _configure_logging(args.verbose)
        try:
            config = load_config(base_url=args.base_url, timeout=args.timeout)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        fetcher = SchemaOrgFetcher(config)

    if args.command == 'show':
        options = RenderOptions(
            output_format=OutputFormatEnum(args.output),
            indent=None if args.compact else args.indent,
        )
        result = render_terms(args.terms, options, fetcher)
        for error in result.errors:
            print(f"Error: {error.term}: {error.error}", file=sys.stderr)
        return 1 if result.errors_count else 0

    elif args.command == 'list':
        try:
            terms = fetcher.load_terms()
        except (FetchError, DocumentParseError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        for term in terms:
            print(term)
        return 0

    elif args.command == 'formats':
        registry = RendererRegistry()
        for f in registry.get_supported_formats():
            print(f"  {f.value}")
        return 0

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
