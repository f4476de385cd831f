"""Unit tests for HTML detection and main-content extraction to markdown."""
import pytest

from agent_tools.base import EmptyContentError
from agent_tools.content import (
    EMPTY_HTML_MARKER,
    SIMPLIFY_FAILED_MARKER,
    extract_content_from_html,
    html_to_markdown,
    is_html_content,
    normalize,
)

AWS_PAGE = """<!DOCTYPE html>
<html lang="en"><head><title>What is AWS Lambda?</title>
<meta charset="utf-8"><link rel="stylesheet" href="x.css"><style>body{color:red}</style>
<script>trackPage();</script></head>
<body>
<awsdocs-page-header>AWS Docs header</awsdocs-page-header>
<nav>Services menu</nav>
<header>Top banner</header>
<div id="main">
  <main>
    <h1>What is AWS Lambda?</h1>
    <p>Lambda runs your code without servers.</p>
    <h2>Example</h2>
    <pre><code>aws lambda invoke --function-name my-fn out.json</code></pre>
    <ul><li>First</li><li>Second</li></ul>
    <div class="prev-next">Previous page</div>
    <awsdocs-thumb-feedback>Was this page helpful?</awsdocs-thumb-feedback>
    <div id="main-col-footer">Footer links</div>
  </main>
</div>
<footer>Copyright</footer>
<awsdocs-cookie-banner>We use cookies</awsdocs-cookie-banner>
</body></html>"""


@pytest.mark.parametrize(
    "raw,content_type,expected",
    [
        ("<html><body>x</body></html>", "", True),
        ("<!DOCTYPE html>\n<HTML lang='en'>", "application/octet-stream", True),
        ("plain text", "text/html; charset=utf-8", True),
        ("plain text", "", True),
        ("plain text", "text/plain", False),
        ("# markdown", "text/markdown", False),
        (" " * 120 + "<html>", "text/plain", False),
    ],
)
def test_is_html_content(raw, content_type, expected):
    assert is_html_content(raw, content_type) is expected


def test_extracts_main_content_as_markdown():
    md = extract_content_from_html(AWS_PAGE)
    assert md.startswith("# What is AWS Lambda?")
    assert "Lambda runs your code without servers." in md
    assert "## Example" in md
    assert "```" in md
    assert "aws lambda invoke --function-name my-fn out.json" in md
    assert "- First" in md


@pytest.mark.parametrize(
    "furniture",
    [
        "trackPage",
        "color:red",
        "AWS Docs header",
        "Services menu",
        "Top banner",
        "Previous page",
        "Was this page helpful?",
        "Footer links",
        "Copyright",
        "We use cookies",
    ],
)
def test_furniture_removed(furniture):
    assert furniture not in extract_content_from_html(AWS_PAGE)


def test_content_selector_order_prefers_article_over_content_ids():
    html = (
        "<html><body><div id='main-content'><p>Secondary block</p></div>"
        "<article><p>Article body</p></article></body></html>"
    )
    md = extract_content_from_html(html)
    assert "Article body" in md
    assert "Secondary block" not in md


def test_role_main_selector():
    html = "<html><body><div><p>Sidebar text</p></div><div role='main'><p>Role main text</p></div></body></html>"
    md = extract_content_from_html(html)
    assert md == "Role main text"


def test_falls_back_to_body():
    md = extract_content_from_html("<html><body><p>Just a body</p></body></html>")
    assert md == "Just a body"


def test_fragment_without_body():
    assert extract_content_from_html("<p>Fragment</p>") == "Fragment"


def test_empty_html_marker():
    assert extract_content_from_html("") == EMPTY_HTML_MARKER


def test_nothing_left_marker():
    html = "<html><body><nav>Only nav</nav><script>x()</script></body></html>"
    assert extract_content_from_html(html) == SIMPLIFY_FAILED_MARKER
    with pytest.raises(EmptyContentError):
        html_to_markdown(html)


def test_normalize_parses_html_without_content_type():
    assert normalize("<html><body><main><h2>Title</h2></main></body></html>", "") == "## Title"


def test_normalize_passes_plain_text_through():
    raw = "plain text body\n\nwith <b>tags</b> later"
    assert normalize(raw, "text/plain") == raw
