"""Storage bucket file wrappers.

``get_file_preview``, ``get_file_download`` and ``get_file_view`` return the
raw file bytes as the value.
"""

from __future__ import annotations

from pathlib import Path

from appwrite.input_file import InputFile
from appwrite.services.storage import Storage

from ..config import AppwriteConfig
from .client import Result, call, create_client


def _storage(config: AppwriteConfig) -> Storage:
    return Storage(create_client(config))


def create_file(
    config: AppwriteConfig,
    bucket_id: str,
    file_id: str,
    path: str | Path,
    permissions: list[str] | None = None,
) -> Result:
    """Upload the local file at *path* into *bucket_id*."""
    return call(
        _storage(config).create_file,
        bucket_id=bucket_id,
        file_id=file_id,
        file=InputFile.from_path(str(path)),
        permissions=permissions,
    )


def list_files(
    config: AppwriteConfig,
    bucket_id: str,
    queries: list[str] | None = None,
    search: str | None = None,
) -> Result:
    return call(_storage(config).list_files, bucket_id=bucket_id, queries=queries, search=search)


def get_file(config: AppwriteConfig, bucket_id: str, file_id: str) -> Result:
    return call(_storage(config).get_file, bucket_id=bucket_id, file_id=file_id)


def get_file_preview(
    config: AppwriteConfig,
    bucket_id: str,
    file_id: str,
    width: int | None = None,
    height: int | None = None,
    quality: int | None = None,
    output: str | None = None,
) -> Result:
    """Fetch an image preview, resized and re-encoded on the server."""
    return call(
        _storage(config).get_file_preview,
        bucket_id=bucket_id,
        file_id=file_id,
        width=width,
        height=height,
        quality=quality,
        output=output,
    )


def get_file_download(config: AppwriteConfig, bucket_id: str, file_id: str) -> Result:
    return call(_storage(config).get_file_download, bucket_id=bucket_id, file_id=file_id)


def get_file_view(config: AppwriteConfig, bucket_id: str, file_id: str) -> Result:
    return call(_storage(config).get_file_view, bucket_id=bucket_id, file_id=file_id)


def update_file(
    config: AppwriteConfig,
    bucket_id: str,
    file_id: str,
    name: str | None = None,
    permissions: list[str] | None = None,
) -> Result:
    return call(
        _storage(config).update_file,
        bucket_id=bucket_id,
        file_id=file_id,
        name=name,
        permissions=permissions,
    )


def delete_file(config: AppwriteConfig, bucket_id: str, file_id: str) -> Result:
    return call(_storage(config).delete_file, bucket_id=bucket_id, file_id=file_id)
