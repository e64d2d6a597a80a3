"""Web search tool — real-time Exa search with live crawling."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...config import DEFAULT_MAX_CHARACTERS, DEFAULT_NUM_RESULTS, MAX_NUM_RESULTS, SEARCH_ENDPOINT
from ...protocol import SearchContents, SearchRequest, TextOptions
from ..executor import run_exa_call
from ..registry import ToolResult, ToolSpec

TOOL_ID = "web_search"


class WebSearchParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(description="Search query")
    num_results: Optional[int] = Field(
        default=None, alias="numResults", ge=1, le=MAX_NUM_RESULTS,
        description="Number of search results to return (default: 5)",
    )


def build_request(params: WebSearchParams) -> SearchRequest:
    return SearchRequest(
        query=params.query,
        num_results=params.num_results or DEFAULT_NUM_RESULTS,
        contents=SearchContents(
            text=TextOptions(max_characters=DEFAULT_MAX_CHARACTERS),
            livecrawl="always",
        ),
    )


async def web_search(params: WebSearchParams) -> ToolResult:
    return await run_exa_call(
        TOOL_ID,
        SEARCH_ENDPOINT,
        build_request(params),
        query=params.query,
        error_label="Search error",
        empty_text="No search results found. Please try a different query.",
    )


def web_search_tool() -> ToolSpec:
    return ToolSpec(
        id=TOOL_ID,
        name="web_search",
        description=(
            "Search the web using Exa AI - performs real-time web searches and can scrape "
            "content from specific URLs. Supports configurable result counts and returns "
            "the content from the most relevant websites."
        ),
        params=WebSearchParams,
        handler=web_search,
        enabled_by_default=True,
    )
