"""Cloud function execution wrappers."""

from __future__ import annotations

from appwrite.services.functions import Functions

from ..config import AppwriteConfig
from .client import Result, call, create_client


def _functions(config: AppwriteConfig) -> Functions:
    return Functions(create_client(config))


def create_execution(
    config: AppwriteConfig,
    function_id: str,
    body: str | None = None,
    path: str | None = None,
    method: str | None = None,
    headers: dict[str, str] | None = None,
) -> Result:
    """Trigger *function_id*. The value reports the execution status."""
    return call(
        _functions(config).create_execution,
        function_id=function_id,
        body=body,
        path=path,
        method=method,
        headers=headers,
    )


def list_executions(config: AppwriteConfig, function_id: str, queries: list[str] | None = None) -> Result:
    return call(_functions(config).list_executions, function_id=function_id, queries=queries)


def get_execution(config: AppwriteConfig, function_id: str, execution_id: str) -> Result:
    return call(_functions(config).get_execution, function_id=function_id, execution_id=execution_id)
