"""Integration tests for scaffolding from the bundled template pack.

These tests run the real generator against every framework/setup pair in
``appwrite_starter/templates`` and verify that the generated project is
complete, that every known placeholder was replaced, and that framework
template syntax and binary assets survive untouched.

No Appwrite server or network access is required.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from appwrite_starter.config import FRAMEWORKS, SERVICES, SERVICES_DIR, SETUPS, TEMPLATES_DIR
from appwrite_starter.scaffolder import ProjectConfig, ProjectGenerator, walk_files


KNOWN_PLACEHOLDER = re.compile(r"{{\s*(projectName|appwriteEndpoint|appwriteProject)\b")

PAIRS = [(framework, setup) for framework in FRAMEWORKS for setup in SETUPS]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _scaffold(output_dir: Path, framework: str, setup: str, services: list[str] | None = None) -> Path:
    config = ProjectConfig(
        name="My Demo",
        framework=framework,
        setup=setup,
        services=services or [],
        endpoint="https://cloud.appwrite.io/v1",
        project="proj-123",
    )
    return await ProjectGenerator(config).generate(output_dir)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestScaffoldFromPack:
    """Generate real projects from the bundled templates."""

    @pytest.mark.parametrize(("framework", "setup"), PAIRS)
    async def test_mirrors_template_tree(self, tmp_path: Path, framework: str, setup: str) -> None:
        project = await _scaffold(tmp_path, framework, setup)
        template_dir = TEMPLATES_DIR / framework / setup

        expected = sorted(str(p.relative_to(template_dir)) for p in walk_files(template_dir))
        actual = sorted(str(p.relative_to(project)) for p in walk_files(project))
        assert actual == expected, f"{framework}/{setup} produced a different file set"

    @pytest.mark.parametrize(("framework", "setup"), PAIRS)
    async def test_no_known_placeholder_left(self, tmp_path: Path, framework: str, setup: str) -> None:
        project = await _scaffold(tmp_path, framework, setup, services=list(SERVICES))

        for path in walk_files(project):
            if path.suffix == ".png":
                continue
            content = path.read_text(encoding="utf-8")
            assert not KNOWN_PLACEHOLDER.search(content), f"Unresolved placeholder in {path}"

    @pytest.mark.parametrize(("framework", "setup"), PAIRS)
    async def test_package_json_is_valid(self, tmp_path: Path, framework: str, setup: str) -> None:
        project = await _scaffold(tmp_path, framework, setup)

        pkg = json.loads((project / "package.json").read_text(encoding="utf-8"))
        assert pkg["name"] == "my-demo", "package name should be the slugified project name"
        assert "appwrite" in pkg.get("dependencies", {}), "package.json must depend on appwrite"

    async def test_vue_bindings_preserved(self, tmp_path: Path) -> None:
        project = await _scaffold(tmp_path, "vuejs", "basic")

        app = (project / "src" / "App.vue").read_text(encoding="utf-8")
        assert "Hello My Demo!" in app
        assert "count is {{ count }}" in app, "Vue binding was altered"

    async def test_nested_component_rendered(self, tmp_path: Path) -> None:
        project = await _scaffold(tmp_path, "vuejs", "batteriesincluded")

        component = (project / "src" / "components" / "HelloWorld.vue").read_text(encoding="utf-8")
        assert "{{ msg }}" in component
        assert "<code>https://cloud.appwrite.io/v1</code>" in component
        assert "<code>proj-123</code>" in component

    @pytest.mark.parametrize("framework", list(FRAMEWORKS))
    async def test_favicon_copied_byte_for_byte(self, tmp_path: Path, framework: str) -> None:
        project = await _scaffold(tmp_path, framework, "batteriesincluded")

        source = TEMPLATES_DIR / framework / "batteriesincluded" / "public" / "favicon.png"
        assert (project / "public" / "favicon.png").read_bytes() == source.read_bytes()

    async def test_selected_services_copied(self, tmp_path: Path) -> None:
        project = await _scaffold(tmp_path, "vanilla", "basic", services=["account", "localization"])

        appwrite_dir = project / "src" / "appwrite"
        assert sorted(p.name for p in appwrite_dir.iterdir()) == [
            "account.ts",
            "appwrite.ts",
            "localization.ts",
        ]
        client = (appwrite_dir / "appwrite.ts").read_text(encoding="utf-8")
        assert "'https://cloud.appwrite.io/v1'" in client
        assert "'proj-123'" in client

    async def test_every_service_module_copies(self, tmp_path: Path) -> None:
        project = await _scaffold(tmp_path, "vanilla", "basic", services=list(SERVICES))

        copied = {p.name for p in (project / "src" / "appwrite").iterdir()}
        bundled = {p.name for p in SERVICES_DIR.iterdir()}
        assert copied == bundled
