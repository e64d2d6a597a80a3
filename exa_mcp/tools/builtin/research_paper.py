"""Research paper search tool — Exa search restricted to the research paper category."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...config import DEFAULT_MAX_CHARACTERS, DEFAULT_NUM_RESULTS, MAX_NUM_RESULTS, SEARCH_ENDPOINT
from ...protocol import SearchContents, SearchRequest, TextOptions
from ..executor import run_exa_call
from ..registry import ToolResult, ToolSpec

TOOL_ID = "research_paper_search"


class ResearchPaperParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(description="Research topic or keyword to search for")
    num_results: Optional[int] = Field(
        default=None, alias="numResults", ge=1, le=MAX_NUM_RESULTS,
        description="Number of research papers to return (default: 5)",
    )


def build_request(params: ResearchPaperParams) -> SearchRequest:
    # Papers are mostly indexed already; only crawl when there is no cached copy
    return SearchRequest(
        query=params.query,
        category="research paper",
        num_results=params.num_results or DEFAULT_NUM_RESULTS,
        contents=SearchContents(
            text=TextOptions(max_characters=DEFAULT_MAX_CHARACTERS),
            livecrawl="fallback",
        ),
    )


async def research_paper_search(params: ResearchPaperParams) -> ToolResult:
    return await run_exa_call(
        TOOL_ID,
        SEARCH_ENDPOINT,
        build_request(params),
        query=params.query,
        error_label="Research paper search error",
        empty_text="No research papers found. Please try a different query.",
    )


def research_paper_tool() -> ToolSpec:
    return ToolSpec(
        id=TOOL_ID,
        name="research_paper_search",
        description=(
            "Search for research papers using Exa AI - performs targeted academic paper "
            "searches with a focus on research content. Returns detailed information about "
            "relevant academic papers including titles, authors, publication dates, and "
            "content excerpts."
        ),
        params=ResearchPaperParams,
        handler=research_paper_search,
        enabled_by_default=True,
    )
