"""Tests for list item splitting, tagging and GitHub link filtering."""

from __future__ import annotations

import pytest

from awesomelist.parsing.entries import (
    extract_tags,
    is_github_repo_link,
    split_entry,
    split_title_description,
)


def test_split_entry_uses_dash_separator() -> None:
    url = "https://github.com/user/awesome-tool"
    entry = split_entry("Awesome Tool - A comprehensive tool for doing awesome things", url)

    assert entry.title == "Awesome Tool"
    assert entry.description == "A comprehensive tool for doing awesome things"
    assert entry.url == url
    assert entry.tags == ["tool"]


def test_split_prefers_dash_over_colon() -> None:
    title, description = split_title_description("Name: subtitle - the description")
    assert title == "Name: subtitle"
    assert description == "the description"


def test_split_falls_back_to_colon_separator() -> None:
    title, description = split_title_description("  Catppuccin: Soothing pastel theme  ")
    assert title == "Catppuccin"
    assert description == "Soothing pastel theme"


def test_split_without_separator_keeps_whole_text_as_title() -> None:
    assert split_title_description("  just-a-name ") == ("just-a-name", "")
    assert split_title_description("") == ("", "")


def test_extract_tags_follows_table_order_without_dedup() -> None:
    tags = extract_tags("A JavaScript web API client and CLI tool")
    assert tags == ["javascript", "java", "command-line", "web", "api", "tool"]


def test_extract_tags_maps_golang_and_cpp() -> None:
    assert extract_tags("Written in Golang with C++ bindings") == ["go", "cpp"]
    assert extract_tags("Let's go outside") == []


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/user/repo",
        "https://github.com/user/repo/tree/main/themes",
        "https://github.com/user/repo#readme",
    ],
)
def test_is_github_repo_link_accepts_repositories(url: str) -> None:
    assert is_github_repo_link(url)


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/user/repo/issues/3",
        "https://github.com/user/repo/wiki",
        "https://github.com/user/repo/releases/latest",
        "https://github.com/user",
        "http://github.com/user/repo",
        "https://gitlab.com/user/repo",
        "#themes",
        "",
    ],
)
def test_is_github_repo_link_rejects_other_links(url: str) -> None:
    assert not is_github_repo_link(url)
