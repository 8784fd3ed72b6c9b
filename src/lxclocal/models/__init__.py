"""Pydantic models for configuration and validation."""

from lxclocal.models.config import LxcLocalConfig, PathsConfig
from lxclocal.models.context import ExecutionMode, NamespaceContext, PipelineContext
from lxclocal.models.request import CreateRequest

__all__ = [
    "LxcLocalConfig",
    "PathsConfig",
    "ExecutionMode",
    "NamespaceContext",
    "PipelineContext",
    "CreateRequest",
]
