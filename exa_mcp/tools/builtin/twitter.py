"""Twitter/X search tool — Exa search pinned to x.com and twitter.com."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...config import DEFAULT_MAX_CHARACTERS, DEFAULT_NUM_RESULTS, MAX_NUM_RESULTS, SEARCH_ENDPOINT
from ...protocol import SearchContents, SearchRequest, TextOptions
from ..executor import run_exa_call
from ..registry import ToolResult, ToolSpec

TOOL_ID = "twitter_search"

TWITTER_DOMAINS = ["x.com", "twitter.com"]


class TwitterSearchParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(
        description="Twitter username, hashtag, or search term (e.g., 'x.com/username' or search term)",
    )
    num_results: Optional[int] = Field(
        default=None, alias="numResults", ge=1, le=MAX_NUM_RESULTS,
        description="Number of Twitter results to return (default: 5)",
    )
    start_published_date: Optional[str] = Field(
        default=None, alias="startPublishedDate",
        description=(
            "Optional ISO date string (e.g., '2023-04-01T00:00:00.000Z') to filter tweets "
            "published after this date. Use only when necessary."
        ),
    )
    end_published_date: Optional[str] = Field(
        default=None, alias="endPublishedDate",
        description=(
            "Optional ISO date string (e.g., '2023-04-30T23:59:59.999Z') to filter tweets "
            "published before this date. Use only when necessary."
        ),
    )


def build_request(params: TwitterSearchParams) -> SearchRequest:
    return SearchRequest(
        query=params.query,
        include_domains=list(TWITTER_DOMAINS),
        num_results=params.num_results or DEFAULT_NUM_RESULTS,
        # Empty strings mean "no filter"
        start_published_date=params.start_published_date or None,
        end_published_date=params.end_published_date or None,
        contents=SearchContents(
            text=TextOptions(max_characters=DEFAULT_MAX_CHARACTERS),
            livecrawl="always",
        ),
    )


async def twitter_search(params: TwitterSearchParams) -> ToolResult:
    return await run_exa_call(
        TOOL_ID,
        SEARCH_ENDPOINT,
        build_request(params),
        query=params.query,
        error_label="Twitter search error",
        empty_text="No Twitter results found. Please try a different query.",
    )


def twitter_tool() -> ToolSpec:
    return ToolSpec(
        id=TOOL_ID,
        name="twitter_search",
        description=(
            "Search Twitter/X.com posts and accounts using Exa AI - performs targeted searches "
            "of Twitter (X.com) content including tweets, profiles, and discussions. Returns "
            "relevant tweets, profile information, and conversation threads based on your "
            "query. You can search for a user by x.com/username or from:username"
        ),
        params=TwitterSearchParams,
        handler=twitter_search,
        enabled_by_default=False,
    )
