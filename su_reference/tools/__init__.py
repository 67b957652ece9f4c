"""Tool servers for LLM agents."""

from .base import ToolDef, ToolParameter, ToolResult, ToolServer
from .reference import ReferenceToolServer

__all__ = [
    "ToolDef",
    "ToolParameter",
    "ToolResult",
    "ToolServer",
    "ReferenceToolServer",
]
