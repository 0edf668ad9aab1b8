from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

SAMPLE_README = textwrap.dedent(
    """\
    # Awesome Omarchy

    [![Awesome](https://awesome.re/badge.svg)](https://awesome.re)

    ## Table of Contents

    - [Official Resources](#official-resources)
    - [Themes](#themes)

    ## Official Resources

    - [Omarchy](https://github.com/basecamp/omarchy) - Beautiful, modern & opinionated Linux
    - [Manual](https://learn.omacom.io/2/the-omarchy-manual) - The official manual

    ## Themes

    - [Tokyo Night](https://github.com/user/tokyo-night-theme) - A clean dark theme
    - [Catppuccin](https://github.com/user/catppuccin): Soothing pastel theme
    - [Issue tracker](https://github.com/basecamp/omarchy/issues) - Report bugs

    ## Development Tools

    - [Rust CLI](https://github.com/user/rust-cli) - A command line tool written in Rust
    - [Python Script](https://github.com/user/python-script) - A useful Python script

    ## License

    Released under CC0.
    """
)


@pytest.fixture
def sample_readme() -> str:
    """Markdown for a small awesome list with three kept sections."""
    return SAMPLE_README


@pytest.fixture
def readme_file(tmp_path: Path, sample_readme: str) -> Path:
    """Write the sample README into a throwaway project directory."""
    project = tmp_path / "project"
    project.mkdir()
    path = project / "README.md"
    path.write_text(sample_readme, encoding="utf-8")
    return path
