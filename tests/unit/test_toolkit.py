"""Unit tests for DocsToolkit: envelope unwrap, validation at the boundary, dispatch, LangChain binding."""
from unittest.mock import patch

import httpx
import pytest
from langchain_core.tools import StructuredTool

from agent_tools.base import SearchResult, ToolValidationError, UnknownToolError
from agent_tools.toolkit import DocsToolkit, unwrap_arguments

DOC_URL = "https://docs.aws.amazon.com/lambda/latest/dg/welcome.html"


@pytest.fixture
def toolkit(settings, make_client):
    def handler(request):
        if request.url.host == "docs.aws.amazon.com":
            return httpx.Response(200, text="y" * 6000)
        return httpx.Response(200, json={})

    with DocsToolkit(settings, client=make_client(handler)) as tk:
        yield tk


def test_unwrap_prefers_nested_context():
    assert unwrap_arguments({"context": {"url": "a"}, "url": "b"}) == {"url": "a"}


def test_unwrap_uses_envelope_when_no_nested_mapping():
    assert unwrap_arguments({"url": "a"}) == {"url": "a"}
    assert unwrap_arguments({"context": "text", "url": "a"}) == {"context": "text", "url": "a"}
    assert unwrap_arguments(None) is None


def test_descriptors_built_for_every_tool(toolkit):
    assert set(toolkit.descriptors) == {"read_documentation", "search_documentation", "recommend"}
    assert toolkit.get_descriptor("recommend").input_schema.model_json_schema()["required"] == ["url"]


@pytest.mark.parametrize(
    "envelope",
    [{"url": DOC_URL}, {"context": {"url": DOC_URL}}],
)
def test_read_accepts_both_envelope_shapes_and_applies_defaults(toolkit, envelope):
    out = toolkit.execute("read_documentation", envelope)
    assert out.startswith(f"AWS Documentation from {DOC_URL}:\n\n" + "y" * 5000)
    assert "start_index=5000" in out


def test_read_with_explicit_window(toolkit):
    out = toolkit.execute("read_documentation", {"context": {"url": DOC_URL, "start_index": 5990, "max_length": 100}})
    assert out == f"AWS Documentation from {DOC_URL}:\n\n" + "y" * 10


def test_missing_required_argument_raises_before_network(settings, no_network):
    with DocsToolkit(settings, client=no_network) as tk:
        with pytest.raises(ToolValidationError) as exc:
            tk.execute("read_documentation", {"context": {"max_length": 10}})
    assert exc.value.errors[0][0] == "url"
    assert no_network.calls == []


@pytest.mark.parametrize(
    "tool_id,arguments,path",
    [
        ("read_documentation", {"url": DOC_URL, "max_length": 0}, "max_length"),
        ("read_documentation", {"url": DOC_URL, "start_index": -1}, "start_index"),
        ("search_documentation", {"search_phrase": "s3", "limit": 51}, "limit"),
        ("search_documentation", {"search_phrase": ["not", "a", "string"]}, "search_phrase"),
        ("recommend", {}, "url"),
    ],
)
def test_out_of_range_arguments_rejected(toolkit, tool_id, arguments, path):
    with pytest.raises(ToolValidationError) as exc:
        toolkit.execute(tool_id, arguments)
    assert exc.value.errors[0][0] == path


def test_precondition_failures_are_text_not_errors(toolkit):
    out = toolkit.execute("read_documentation", {"url": "https://docs.aws.amazon.com/x"})
    assert "URL must end with .html" in out


def test_unknown_tool(toolkit):
    with pytest.raises(UnknownToolError) as exc:
        toolkit.execute("sequential_thinking", {})
    assert isinstance(exc.value, KeyError)
    assert str(exc.value) == "Unknown tool: sequential_thinking"


@patch("agent_tools.toolkit.search_documentation_impl")
def test_search_dispatch_returns_dicts(mock_search, toolkit):
    mock_search.return_value = [
        SearchResult(rank_order=1, url="https://docs.aws.amazon.com/a.html", title="A", context="ctx"),
        SearchResult(rank_order=2, url="https://docs.aws.amazon.com/b.html", title="B"),
    ]
    out = toolkit.execute("search_documentation", {"context": {"search_phrase": "lambda"}})
    assert out == [
        {"rank_order": 1, "url": "https://docs.aws.amazon.com/a.html", "title": "A", "context": "ctx"},
        {"rank_order": 2, "url": "https://docs.aws.amazon.com/b.html", "title": "B"},
    ]
    args, kwargs = mock_search.call_args
    assert args == ("lambda", 10)
    assert kwargs["client"] is toolkit.client


def test_recommend_dispatch(toolkit):
    assert toolkit.execute("recommend", {"url": DOC_URL}) == []


def test_langchain_tools(toolkit):
    tools = toolkit.as_langchain_tools()
    assert all(isinstance(t, StructuredTool) for t in tools)
    by_name = {t.name: t for t in tools}
    assert set(by_name) == {"read_documentation", "search_documentation", "recommend"}
    assert by_name["recommend"].args_schema is toolkit.get_descriptor("recommend").input_schema
    out = by_name["read_documentation"].invoke({"url": DOC_URL, "max_length": 3})
    assert out.startswith(f"AWS Documentation from {DOC_URL}:\n\nyyy")
    assert "start_index=3" in out


def test_close_leaves_injected_client_open(settings, make_client):
    client = make_client(lambda request: httpx.Response(200))
    DocsToolkit(settings, client=client).close()
    assert client.is_closed is False


def test_close_owned_client(settings):
    tk = DocsToolkit(settings)
    tk.close()
    assert tk.client.is_closed is True
