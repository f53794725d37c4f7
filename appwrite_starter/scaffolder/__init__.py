"""Appwrite Starter scaffolder -- instantiates project templates.

A template is a directory tree whose file names and UTF-8 contents may hold
``{{ placeholder }}`` tokens. ``materialize`` copies such a tree into an empty
project directory, substituting placeholders from a context mapping and
copying binary files untouched.

Quick usage::

    from appwrite_starter.scaffolder import materialize

    written = await materialize(
        "templates/vuejs/basic",
        "./my-app",
        {"projectName": "my-app", "appwriteEndpoint": "https://host/v1"},
    )
"""

from appwrite_starter.scaffolder.generator import ProjectConfig, ProjectGenerator
from appwrite_starter.scaffolder.materializer import (
    DestinationNotEmptyError,
    DirectoryCreationError,
    ScaffoldError,
    UnsafeTargetPathError,
    copy_services,
    copy_tree,
    materialize,
    prepare_destination,
    walk_files,
    write_file,
)
from appwrite_starter.scaffolder.templates import TemplateRenderer, is_text

__all__ = [
    "DestinationNotEmptyError",
    "DirectoryCreationError",
    "ProjectConfig",
    "ProjectGenerator",
    "ScaffoldError",
    "TemplateRenderer",
    "UnsafeTargetPathError",
    "copy_services",
    "copy_tree",
    "is_text",
    "materialize",
    "prepare_destination",
    "walk_files",
    "write_file",
]
