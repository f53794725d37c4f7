"""Database document wrappers."""

from __future__ import annotations

from typing import Any

from appwrite.services.databases import Databases

from ..config import AppwriteConfig
from .client import Result, call, create_client


def _databases(config: AppwriteConfig) -> Databases:
    return Databases(create_client(config))


def create_document(
    config: AppwriteConfig,
    database_id: str,
    collection_id: str,
    document_id: str,
    data: dict[str, Any],
    permissions: list[str] | None = None,
) -> Result:
    """Create a document. Use ``"unique()"`` as *document_id* for a generated ID."""
    return call(
        _databases(config).create_document,
        database_id=database_id,
        collection_id=collection_id,
        document_id=document_id,
        data=data,
        permissions=permissions,
    )


def list_documents(
    config: AppwriteConfig,
    database_id: str,
    collection_id: str,
    queries: list[str] | None = None,
) -> Result:
    return call(
        _databases(config).list_documents,
        database_id=database_id,
        collection_id=collection_id,
        queries=queries,
    )


def get_document(
    config: AppwriteConfig,
    database_id: str,
    collection_id: str,
    document_id: str,
) -> Result:
    return call(
        _databases(config).get_document,
        database_id=database_id,
        collection_id=collection_id,
        document_id=document_id,
    )


def update_document(
    config: AppwriteConfig,
    database_id: str,
    collection_id: str,
    document_id: str,
    data: dict[str, Any] | None = None,
    permissions: list[str] | None = None,
) -> Result:
    """Patch a document; only the attributes present in *data* change."""
    return call(
        _databases(config).update_document,
        database_id=database_id,
        collection_id=collection_id,
        document_id=document_id,
        data=data,
        permissions=permissions,
    )


def delete_document(
    config: AppwriteConfig,
    database_id: str,
    collection_id: str,
    document_id: str,
) -> Result:
    return call(
        _databases(config).delete_document,
        database_id=database_id,
        collection_id=collection_id,
        document_id=document_id,
    )
