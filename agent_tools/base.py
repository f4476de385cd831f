"""Shared types for tool inputs/outputs and the error taxonomy used across tools."""

from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class SearchResult:
    """One ranked hit from the documentation search API."""
    rank_order: int
    url: str
    title: str
    context: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class RecommendationResult:
    """Related page. Its category (highly rated, journey, new, similar) only shows in context."""
    url: str
    title: str
    context: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class RawContent:
    """Body and content type of a successful documentation fetch."""
    text: str
    content_type: str = ""


class ToolError(Exception):
    """Base class for tool errors."""


class PreconditionError(ToolError):
    """Invalid URL or missing argument; never reaches the agent as an exception."""


class TransportError(ToolError):
    """Network failure or non-success HTTP status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EmptyContentError(ToolError):
    """Nothing left to extract from a document."""


class UnknownToolError(ToolError, KeyError):
    """No tool registered under the requested id."""

    def __str__(self) -> str:
        return f"Unknown tool: {self.args[0]}"


class ToolValidationError(ToolError, ValueError):
    """
    Arguments failed the tool's translated input schema. The only tool error
    allowed to propagate to the caller.
    """

    def __init__(self, tool_id: str, errors: list[tuple[str, str]]):
        self.tool_id = tool_id
        self.errors = errors
        details = "; ".join(f"{path or '<root>'}: {msg}" for path, msg in errors)
        super().__init__(f"Invalid arguments for {tool_id}: {details}")
