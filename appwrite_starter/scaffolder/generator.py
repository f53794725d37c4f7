"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` built from the CLI answers and generates a new
Vite project: the selected framework/setup template is materialized into
``<output_dir>/<name>``, then the client modules for the selected Appwrite
services are copied into ``src/appwrite``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from ..config import FRAMEWORKS, SERVICES, SERVICES_DIR, SETUPS, TEMPLATES_DIR
from ..utils import normalize_choice
from .materializer import copy_services, materialize
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Pydantic model describing the project to scaffold."""

    name: str = Field(..., min_length=1, description="Project name, also the directory name")
    framework: str = Field(default="vuejs", description="Template framework (vuejs or vanilla)")
    setup: str = Field(default="batteriesincluded", description="basic or batteriesincluded")
    services: list[str] = Field(default_factory=list, description="Appwrite services to include")
    endpoint: str = Field(default="", description="Appwrite endpoint written into the project")
    project: str = Field(default="", description="Appwrite project ID written into the project")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("project name must not be empty")
        if "/" in value or "\\" in value or value in {".", ".."}:
            raise ValueError(f"invalid project name: {value!r}")
        return value

    @field_validator("framework")
    @classmethod
    def _check_framework(cls, value: str) -> str:
        value = normalize_choice(value)
        if value not in FRAMEWORKS:
            raise ValueError(f"unknown framework {value!r}; expected one of {sorted(FRAMEWORKS)}")
        return value

    @field_validator("setup")
    @classmethod
    def _check_setup(cls, value: str) -> str:
        value = normalize_choice(value)
        if value not in SETUPS:
            raise ValueError(f"unknown setup {value!r}; expected one of {sorted(SETUPS)}")
        return value

    @field_validator("services")
    @classmethod
    def _check_services(cls, value: list[str]) -> list[str]:
        services = [normalize_choice(service) for service in value]
        unknown = [service for service in services if service not in SERVICES]
        if unknown:
            raise ValueError(f"unknown Appwrite service(s): {', '.join(unknown)}")
        return list(dict.fromkeys(services))

    def context(self) -> dict[str, str]:
        """Return the placeholder values available to the templates."""
        return {
            "projectName": self.name,
            "appwriteEndpoint": self.endpoint,
            "appwriteProject": self.project,
        }


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Creates a new project from the bundled template pack."""

    def __init__(
        self,
        config: ProjectConfig,
        template_root: str | Path | None = None,
        services_root: str | Path | None = None,
    ) -> None:
        self.config = config
        self.template_root = Path(template_root) if template_root else TEMPLATES_DIR
        self.services_root = Path(services_root) if services_root else SERVICES_DIR
        self.renderer = TemplateRenderer()

    @property
    def template_dir(self) -> Path:
        """Template directory selected by the framework and setup answers."""
        return self.template_root / self.config.framework / self.config.setup

    async def generate(self, output_dir: str | Path = ".") -> Path:
        """Generate the project.

        Args:
            output_dir: Parent directory; the project folder is created inside
                it and named after the project.

        Returns:
            Path to the generated project root.
        """
        project_root = Path(output_dir) / self.config.name
        context = self.config.context()

        await materialize(self.template_dir, project_root, context, renderer=self.renderer)
        if self.config.services:
            await copy_services(
                project_root,
                self.config.services,
                context,
                services_root=self.services_root,
                renderer=self.renderer,
            )
        return project_root
