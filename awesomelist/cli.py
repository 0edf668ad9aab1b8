"""CLI entrypoints for awesomelist commands."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from .loader import CatalogLoader
from .logging import configure_logging
from .stores import dumps
from .themes import ThemeNotFoundError, extract_theme_entries


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_cache_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Neither read nor write the catalog cache.",
    )
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Ignore any cached catalog and parse the README again.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="awesomelist",
        description="Parse an awesome-list README into a searchable catalog.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also append log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a README and summarise its sections.",
    )
    _add_verbose_option(parse_parser, suppress_default=True)
    _add_cache_options(parse_parser)
    parse_parser.add_argument("path", help="Path to the README markdown file.")
    parse_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the catalog as JSON to this file.",
    )

    search_parser = subparsers.add_parser(
        "search",
        help="Search repository names and descriptions.",
    )
    _add_verbose_option(search_parser, suppress_default=True)
    _add_cache_options(search_parser)
    search_parser.add_argument("path", help="Path to the README markdown file.")
    search_parser.add_argument("query", help="Case-insensitive substring to look for.")
    search_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of results to print.",
    )
    search_parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON.",
    )

    themes_parser = subparsers.add_parser(
        "themes",
        help="List repositories from the README's themes section.",
    )
    _add_verbose_option(themes_parser, suppress_default=True)
    _add_cache_options(themes_parser)
    themes_parser.add_argument("path", help="Path to the README markdown file.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for awesomelist commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        outcome = CatalogLoader().load(
            args.path,
            refresh=bool(getattr(args, "refresh", False)),
            use_cache=not bool(getattr(args, "no_cache", False)),
        )
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except (OSError, UnicodeDecodeError) as exc:
        parser.exit(1, f"awesomelist {args.command} failed: {exc}\n")
    catalog = outcome.catalog

    if args.command == "parse":
        if outcome.source == CatalogLoader.SOURCE_EMPTY:
            parser.exit(1, f"No catalog could be built from {outcome.path}\n")
        print(f"Title: {catalog.metadata.title}")
        print(f"Sections: {len(catalog.sections)}")
        print(f"Entries: {catalog.metadata.total_entries}")
        for section in catalog.sections:
            print(f"  {section.title} ({section.entry_count})")
        if args.output is not None:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(dumps(catalog), encoding="utf-8")
            print(f"Catalog written to {_relativize(args.output)}")
    elif args.command == "search":
        limit = args.limit if args.limit is not None else outcome.config.search.limit
        results = catalog.search(args.query, limit=limit)
        if args.json:
            print(json.dumps([asdict(result) for result in results], indent=2, ensure_ascii=False))
            return
        if not results:
            print("No matches")
            return
        for result in results:
            section_title = catalog.sections[result.section_index].title
            url = result.github_url or ""
            print(f"{result.relevance_score:4.1f}  [{section_title}] {result.display_text}  {url}".rstrip())
    elif args.command == "themes":
        try:
            themes = extract_theme_entries(catalog)
        except ThemeNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        for theme in themes:
            line = f"{theme.name}  {theme.url}"
            if theme.description:
                line += f"  {theme.description}"
            print(line)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
