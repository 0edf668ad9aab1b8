"""CLI parser and command behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from awesomelist.cli import _build_parser, main
from awesomelist.logging import configure_logging
from awesomelist.stores import loads


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "parse", "README.md"])
    assert args.verbose is True
    assert args.command == "parse"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["search", "README.md", "rust", "--verbose"])
    assert args.verbose is True
    assert args.command == "search"
    assert args.query == "rust"


def test_cli_accepts_log_file_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--log-file", "logs/run.log", "parse", "README.md"])
    assert args.log_file == Path("logs/run.log")

    args = parser.parse_args(["parse", "README.md"])
    assert args.log_file is None


def test_cli_accepts_cache_flags() -> None:
    parser = _build_parser()
    args = parser.parse_args(["themes", "README.md", "--no-cache", "--refresh"])
    assert args.no_cache is True
    assert args.refresh is True


def test_cli_parse_prints_summary_and_writes_json(
    readme_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output = tmp_path / "out" / "catalog.json"

    main(["parse", str(readme_file), "--no-cache", "--output", str(output)])

    printed = capsys.readouterr().out
    assert "Title: Awesome Omarchy" in printed
    assert "Sections: 3" in printed
    assert "Entries: 5" in printed
    assert "  Themes (2)" in printed
    assert loads(output.read_text(encoding="utf-8")).metadata.total_entries == 5


def test_cli_search_json(readme_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["search", str(readme_file), "rust", "--json", "--no-cache"])

    results = json.loads(capsys.readouterr().out)
    assert len(results) == 1
    assert results[0]["display_text"] == "Rust CLI"
    assert results[0]["github_url"] == "https://github.com/user/rust-cli"


def test_cli_search_reports_no_matches(readme_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["search", str(readme_file), "zzz-nomatch", "--no-cache"])

    assert capsys.readouterr().out.strip() == "No matches"


def test_cli_search_limit(readme_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["search", str(readme_file), "t", "--limit", "2", "--no-cache"])

    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    assert len(lines) == 2


def test_cli_themes(readme_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["themes", str(readme_file), "--no-cache"])

    printed = capsys.readouterr().out
    assert "Tokyo Night  https://github.com/user/tokyo-night-theme" in printed
    assert "Catppuccin" in printed


def test_cli_missing_readme_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["parse", str(tmp_path / "nope.md")])
    assert excinfo.value.code == 1


def test_cli_parse_blank_readme_exits(tmp_path: Path) -> None:
    readme = tmp_path / "README.md"
    readme.write_text("\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["parse", str(readme), "--no-cache"])
    assert excinfo.value.code == 1


def test_cli_log_file_records_load(readme_file: Path, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "awesomelist.log"

    main(["--log-file", str(log_file), "parse", str(readme_file), "--no-cache"])
    configure_logging()

    text = log_file.read_text(encoding="utf-8")
    assert "INFO awesomelist.loader: Loaded 3 sections (5 entries)" in text


def test_cli_search_uses_configured_limit(readme_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (readme_file.parent / ".awesomelist.yml").write_text("search:\n  limit: 1\n", encoding="utf-8")

    main(["search", str(readme_file), "t", "--no-cache"])

    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    assert len(lines) == 1
