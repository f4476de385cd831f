"""
Tool invocation adapter for the AWS documentation tools.

DocsToolkit is built once by the host and passed to whoever needs it. It owns
the settings and the HTTP client, translates every tool definition into a
descriptor, and executes calls by tool id. Argument validation errors are the
only failures that propagate; everything else comes back as tool output.
"""
import logging
import time
from collections.abc import Mapping
from typing import Any, Callable, Optional

import httpx
from langchain_core.tools import StructuredTool

from agent_tools.base import UnknownToolError
from agent_tools.definitions import AWS_DOCUMENTATION_TOOLS
from agent_tools.documentation import DEFAULT_MAX_LENGTH, read_documentation_impl
from agent_tools.http_client import build_http_client
from agent_tools.recommend import recommend_impl
from agent_tools.schema import ToolDescriptor, convert_tool_definition, validate_arguments
from agent_tools.search import DEFAULT_LIMIT, search_documentation_impl
from app.config import Settings, get_settings

logger = logging.getLogger(__name__)


def unwrap_arguments(envelope: Any) -> Any:
    """
    Hosts deliver either the arguments themselves or an envelope carrying them
    under "context". A mapping under "context" always wins.
    """
    if isinstance(envelope, Mapping) and isinstance(envelope.get("context"), Mapping):
        return dict(envelope["context"])
    return envelope


class DocsToolkit:
    """read_documentation, search_documentation and recommend behind one tool contract."""

    def __init__(self, settings: Optional[Settings] = None, client: Optional[httpx.Client] = None):
        self.settings = settings or get_settings()
        self._owns_client = client is None
        self.client = client or build_http_client(self.settings)
        self.descriptors: dict[str, ToolDescriptor] = {}
        for definition in AWS_DOCUMENTATION_TOOLS:
            descriptor = convert_tool_definition(definition)
            self.descriptors[descriptor.id] = descriptor
        self._handlers: dict[str, Callable[..., Any]] = {
            "read_documentation": self.read_documentation,
            "search_documentation": self.search_documentation,
            "recommend": self.recommend,
        }

    def read_documentation(self, url: str, max_length: int = DEFAULT_MAX_LENGTH, start_index: int = 0) -> str:
        return read_documentation_impl(url, max_length, start_index, client=self.client, settings=self.settings)

    def search_documentation(self, search_phrase: str, limit: int = DEFAULT_LIMIT) -> list[dict[str, Any]]:
        results = search_documentation_impl(search_phrase, limit, client=self.client, settings=self.settings)
        return [r.to_dict() for r in results]

    def recommend(self, url: str) -> list[dict[str, Any]]:
        return [r.to_dict() for r in recommend_impl(url, client=self.client, settings=self.settings)]

    def get_descriptor(self, tool_id: str) -> ToolDescriptor:
        try:
            return self.descriptors[tool_id]
        except KeyError:
            raise UnknownToolError(tool_id) from None

    def execute(self, tool_id: str, envelope: Any) -> Any:
        """Unwrap, validate (defaults applied) and dispatch one call. Raises ToolValidationError."""
        descriptor = self.get_descriptor(tool_id)
        arguments = validate_arguments(descriptor.input_schema, unwrap_arguments(envelope), tool_id)
        start = time.perf_counter()
        result = self._handlers[tool_id](**arguments)
        duration = time.perf_counter() - start
        logger.info("tool_executed", extra={"tool": tool_id, "duration_sec": round(duration, 3)})
        return result

    def as_langchain_tools(self) -> list[StructuredTool]:
        """LangChain tools for binding to an agent; args_schema is the translated descriptor."""
        return [self._as_langchain_tool(d) for d in self.descriptors.values()]

    def _as_langchain_tool(self, descriptor: ToolDescriptor) -> StructuredTool:
        def run(**kwargs: Any) -> Any:
            return self.execute(descriptor.id, kwargs)

        return StructuredTool.from_function(
            func=run,
            name=descriptor.id,
            description=descriptor.description,
            args_schema=descriptor.input_schema,
        )

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "DocsToolkit":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
