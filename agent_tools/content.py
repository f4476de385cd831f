"""
Content normalizer: decide whether a fetched page is HTML and, if so, reduce
it to the main documentation text as markdown (ATX headings, fenced code).
Removal and lookup rules are ordered tables so they can be tested and extended
without touching the traversal code.
"""
import logging
import re

from bs4 import BeautifulSoup
from markdownify import ATX, MarkdownConverter

from agent_tools.base import EmptyContentError

logger = logging.getLogger(__name__)

EMPTY_HTML_MARKER = "<e>Empty HTML content</e>"
SIMPLIFY_FAILED_MARKER = "<e>Page failed to be simplified from HTML</e>"

# Removed from the whole document before the main content is located.
STRIP_TAGS = (
    "script",
    "style",
    "noscript",
    "meta",
    "link",
    "footer",
    "nav",
    "aside",
    "header",
    "awsdocs-cookie-consent-container",
    "awsdocs-feedback-container",
    "awsdocs-page-header",
    "awsdocs-page-header-container",
    "awsdocs-filter-selector",
    "awsdocs-breadcrumb-container",
    "awsdocs-page-footer",
    "awsdocs-page-footer-container",
    "awsdocs-footer",
    "awsdocs-cookie-banner",
)

# First match wins; most specific first. Falls back to <body>, then the document.
CONTENT_SELECTORS = (
    "main",
    "article",
    "#main-content",
    ".main-content",
    "#content",
    ".content",
    "div[role='main']",
    "#awsdocs-content",
    ".awsui-article",
)

# Removed from inside the selected content region.
NAV_SELECTORS = (
    "noscript",
    ".prev-next",
    "#main-col-footer",
    ".awsdocs-page-utilities",
    "#quick-feedback-yes",
    "#quick-feedback-no",
    ".page-loading-indicator",
    "#tools-panel",
    ".doc-cookie-banner",
    "awsdocs-copyright",
    "awsdocs-thumb-feedback",
)

_BLANK_RUNS = re.compile(r"\n{3,}")


def is_html_content(page_raw: str, content_type: str) -> bool:
    """HTML if the page opens with <html, the header says text/html, or no header was sent."""
    return "<html" in page_raw[:100].lower() or "text/html" in content_type.lower() or not content_type


def select_main_content(soup: BeautifulSoup):
    for selector in CONTENT_SELECTORS:
        found = soup.select_one(selector)
        if found is not None:
            return found
    return soup.body or soup


def html_to_markdown(html: str) -> str:
    """Strip page furniture and convert the main region. Raises EmptyContentError if nothing is left."""
    soup = BeautifulSoup(html, "html.parser")
    for element in soup.find_all(STRIP_TAGS):
        element.decompose()

    main = select_main_content(soup)
    for selector in NAV_SELECTORS:
        for element in main.select(selector):
            element.decompose()

    converter = MarkdownConverter(heading_style=ATX, bullets="-", code_language="")
    markdown = _BLANK_RUNS.sub("\n\n", converter.convert_soup(main)).strip()
    if not markdown:
        raise EmptyContentError("no text left after simplification")
    return markdown


def extract_content_from_html(html: str) -> str:
    """
    Markdown rendering of an HTML page. Never raises: empty input, empty output
    and converter failures come back as <e>...</e> marker strings, which callers
    pass on to the agent as ordinary content.
    """
    if not html:
        return EMPTY_HTML_MARKER
    try:
        return html_to_markdown(html)
    except EmptyContentError:
        return SIMPLIFY_FAILED_MARKER
    except Exception as e:
        logger.warning("HTML conversion failed: %s", e)
        return f"<e>Error converting HTML to Markdown: {e}</e>"


def normalize(page_raw: str, content_type: str) -> str:
    """Plain text for the paginator: converted markdown for HTML, the raw body otherwise."""
    if is_html_content(page_raw, content_type):
        return extract_content_from_html(page_raw)
    return page_raw
