"""Competitor finder tool — searches for businesses offering a similar product."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...config import DEFAULT_MAX_CHARACTERS, MAX_NUM_RESULTS, SEARCH_ENDPOINT
from ...protocol import SearchContents, SearchRequest, TextOptions
from ..executor import run_exa_call
from ..registry import ToolResult, ToolSpec

TOOL_ID = "competitor_finder"

DEFAULT_COMPETITORS = 10


class CompetitorFinderParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(
        description=(
            "Describe what the company/product in a few words (e.g., 'web search API', "
            "'AI image generation', 'cloud storage service'). Keep it simple. Do not include "
            "the company name."
        ),
    )
    exclude_domain: Optional[str] = Field(
        default=None, alias="excludeDomain",
        description="Optional: The company's website to exclude from results (e.g., 'exa.ai')",
    )
    num_results: Optional[int] = Field(
        default=None, alias="numResults", ge=1, le=MAX_NUM_RESULTS,
        description="Number of competitors to return (default: 10)",
    )


def build_request(params: CompetitorFinderParams) -> SearchRequest:
    return SearchRequest(
        query=params.query,
        exclude_domains=[params.exclude_domain] if params.exclude_domain else None,
        num_results=params.num_results or DEFAULT_COMPETITORS,
        contents=SearchContents(
            text=TextOptions(max_characters=DEFAULT_MAX_CHARACTERS),
            livecrawl="always",
        ),
    )


async def competitor_finder(params: CompetitorFinderParams) -> ToolResult:
    note = f"Finding competitors for: {params.query}"
    if params.exclude_domain:
        note += f" (excluding {params.exclude_domain})"
    return await run_exa_call(
        TOOL_ID,
        SEARCH_ENDPOINT,
        build_request(params),
        query=params.query,
        error_label="Competitor finder error",
        empty_text="No competitors found. Please try a different query.",
        step_note=note,
    )


def competitor_finder_tool() -> ToolSpec:
    return ToolSpec(
        id=TOOL_ID,
        name="competitor_finder",
        description=(
            "Find competitors of a company using Exa AI - performs targeted searches to "
            "identify businesses that offer similar products or services. Describe what the "
            "company does (without mentioning its name) and optionally provide the company's "
            "website to exclude it from results."
        ),
        params=CompetitorFinderParams,
        handler=competitor_finder,
        enabled_by_default=False,
    )
