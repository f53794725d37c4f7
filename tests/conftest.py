"""Shared pytest fixtures for the Appwrite Starter test suite.

Provides reusable fixtures for:
- Substitution contexts
- Small on-disk template trees (text, placeholder paths, binary files)
- Appwrite connection settings
"""

from __future__ import annotations

from pathlib import Path

import pytest

from appwrite_starter.config import AppwriteConfig


# ---------------------------------------------------------------------------
# Binary content
# ---------------------------------------------------------------------------

# PNG signature followed by bytes that are not valid UTF-8.
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\xff\xfe{{projectName}}\x00\x80"


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


# ---------------------------------------------------------------------------
# Contexts
# ---------------------------------------------------------------------------


@pytest.fixture
def context() -> dict[str, str]:
    """Substitution context as built by the CLI."""
    return {
        "projectName": "demo",
        "appwriteEndpoint": "https://x",
        "appwriteProject": "proj-123",
    }


@pytest.fixture
def appwrite_config() -> AppwriteConfig:
    return AppwriteConfig(
        endpoint="https://appwrite.example.com/v1",
        project="proj-123",
        key="secret-key",
    )


# ---------------------------------------------------------------------------
# Template trees
# ---------------------------------------------------------------------------


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """A small template tree mixing text, placeholder paths and a binary file.

    Layout::

        template/
            README.md
            logo.png
            src/{{projectName}}.txt
            {{projectName}}/nested/config.json
    """
    root = tmp_path / "template"
    (root / "src").mkdir(parents=True)
    (root / "{{projectName}}" / "nested").mkdir(parents=True)

    (root / "README.md").write_text("# {{projectName}}\n\nUses {{ count }} too.\n", encoding="utf-8")
    (root / "src" / "{{projectName}}.txt").write_text(
        "Hello {{projectName}}, endpoint={{appwriteEndpoint}}", encoding="utf-8"
    )
    (root / "{{projectName}}" / "nested" / "config.json").write_text(
        '{"project": "{{appwriteProject}}"}\n', encoding="utf-8"
    )
    (root / "logo.png").write_bytes(PNG_BYTES)
    return root


@pytest.fixture
def destination(tmp_path: Path) -> Path:
    """A not-yet-existing project directory."""
    return tmp_path / "out" / "demo"
