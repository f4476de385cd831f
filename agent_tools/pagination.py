"""
Paginator for normalized documentation text. Pages are deterministic windows
over an immutable string: advancing start_index by the returned length always
reaches the "no more content" page.
"""
from dataclasses import dataclass

NO_MORE_CONTENT = "<e>No more content available.</e>"


@dataclass(frozen=True)
class DocumentPage:
    """One window of a document plus what the caller needs to fetch the next one."""
    url: str
    original_length: int
    start_index: int
    content: str

    @property
    def returned_length(self) -> int:
        return len(self.content)

    @property
    def has_more(self) -> bool:
        return bool(self.content) and self.start_index + self.returned_length < self.original_length

    @property
    def next_start_index(self) -> int | None:
        return self.start_index + self.returned_length if self.has_more else None

    @property
    def text(self) -> str:
        header = f"AWS Documentation from {self.url}:\n\n"
        if not self.content:
            return header + NO_MORE_CONTENT
        result = header + self.content
        if self.has_more:
            result += (
                "\n\n<e>Content truncated. Call the read_documentation tool with "
                f"start_index={self.next_start_index} to get more content.</e>"
            )
        return result


def paginate(url: str, content: str, start_index: int, max_length: int) -> DocumentPage:
    if start_index < 0:
        raise ValueError(f"start_index must be >= 0, got {start_index}")
    original_length = len(content)
    if start_index >= original_length:
        return DocumentPage(url=url, original_length=original_length, start_index=start_index, content="")
    end_index = min(start_index + max(max_length, 0), original_length)
    return DocumentPage(
        url=url,
        original_length=original_length,
        start_index=start_index,
        content=content[start_index:end_index],
    )


def format_documentation_result(url: str, content: str, start_index: int, max_length: int) -> str:
    return paginate(url, content, start_index, max_length).text
