"""Tool server base classes.

A tool server describes its tools for an LLM agent and dispatches calls by
name to handler methods. Handler errors come back as failed results.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ToolParameter(BaseModel):
    """One argument of a tool."""

    name: str
    type: str
    description: str
    required: bool = True
    default: Any = None

    def json_schema(self) -> dict:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.default is not None:
            schema["default"] = self.default
        return schema


class ToolDef(BaseModel):
    """A tool as advertised to the agent."""

    name: str
    description: str
    parameters: list[ToolParameter] = Field(default_factory=list)

    def parameters_schema(self) -> dict:
        """JSON schema object for the tool's arguments."""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
            "required": [p.name for p in self.parameters if p.required],
        }

    def to_openai_format(self) -> dict:
        """Function-tool format used by OpenAI and Ollama."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters_schema(),
            },
        }

    def to_anthropic_format(self) -> dict:
        """Anthropic tool format, with the schema under ``input_schema``."""
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.parameters_schema(),
        }


class ToolResult(BaseModel):
    """Outcome of one tool call."""

    success: bool
    data: Any = None
    error: str | None = None

    @classmethod
    def ok(cls, data: Any) -> "ToolResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "ToolResult":
        return cls(success=False, error=error)

    def to_string(self) -> str:
        """Render the result as text for the agent's context."""
        if not self.success:
            return f"Error: {self.error}"
        if isinstance(self.data, str):
            return self.data
        if isinstance(self.data, list):
            return "\n\n".join(str(item) for item in self.data)
        if isinstance(self.data, dict):
            return json.dumps(self.data, indent=2, ensure_ascii=False)
        return str(self.data)


Handler = Callable[[dict[str, Any]], ToolResult]


class ToolServer(ABC):
    """Base class for tool servers.

    Subclasses list their tools and map each tool name to a handler taking
    the raw argument dict.
    """

    @abstractmethod
    def list_tools(self) -> list[ToolDef]:
        """Tools this server provides."""

    @abstractmethod
    def handlers(self) -> dict[str, Handler]:
        """Tool name to handler mapping."""

    def call_tool(self, name: str, args: dict[str, Any]) -> ToolResult:
        """Call a tool by name. Unknown tools and handler errors fail softly."""
        handler = self.handlers().get(name)
        if handler is None:
            return ToolResult.fail(f"Unknown tool: {name}")
        try:
            return handler(args)
        except Exception as e:
            logger.exception("Tool %s failed", name)
            return ToolResult.fail(str(e))

    def get_tool(self, name: str) -> ToolDef | None:
        return next((tool for tool in self.list_tools() if tool.name == name), None)
