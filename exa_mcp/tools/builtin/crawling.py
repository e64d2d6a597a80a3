"""Crawling tool — full-text extraction of one URL via the /contents endpoint."""
from pydantic import BaseModel, Field

from ...config import CONTENTS_ENDPOINT
from ...protocol import ContentsRequest
from ..executor import run_exa_call
from ..registry import ToolResult, ToolSpec

TOOL_ID = "crawling"


class CrawlingParams(BaseModel):
    url: str = Field(description="The URL to crawl (e.g., 'exa.ai')")


def build_request(params: CrawlingParams) -> ContentsRequest:
    return ContentsRequest(ids=[params.url], text=True, livecrawl="always")


async def crawling(params: CrawlingParams) -> ToolResult:
    return await run_exa_call(
        TOOL_ID,
        CONTENTS_ENDPOINT,
        build_request(params),
        query=params.url,
        error_label="Crawling error",
        empty_text="No content found at the specified URL. Please check the URL and try again.",
        step_note=f"Crawling URL: {params.url}",
    )


def crawling_tool() -> ToolSpec:
    return ToolSpec(
        id=TOOL_ID,
        name="crawling",
        description=(
            "Extract content from specific URLs using Exa AI - performs targeted crawling of web "
            "pages to retrieve their full content. Useful for reading articles, PDFs, or any web "
            "page when you have the exact URL. Returns the complete text content of the "
            "specified URL."
        ),
        params=CrawlingParams,
        handler=crawling,
        enabled_by_default=False,
    )
