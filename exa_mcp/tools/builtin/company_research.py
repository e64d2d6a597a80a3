"""Company research tool — crawls a company's own site and its subpages."""
import logging
from typing import List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field

from ...config import DEFAULT_MAX_CHARACTERS, SEARCH_ENDPOINT
from ...protocol import SearchContents, SearchRequest, TextOptions
from ..executor import run_exa_call
from ..registry import ToolResult, ToolSpec

logger = logging.getLogger(__name__)

TOOL_ID = "company_research"

DEFAULT_SUBPAGES = 10


class CompanyResearchParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(description="Company website URL (e.g., 'exa.ai' or 'https://exa.ai')")
    subpages: Optional[int] = Field(
        default=None, ge=1,
        description="Number of subpages to crawl (default: 10)",
    )
    subpage_target: Optional[List[str]] = Field(
        default=None, alias="subpageTarget",
        description=(
            "Specific sections to target (e.g., ['about', 'pricing', 'faq', 'blog']). "
            "If not provided, will crawl the most relevant pages."
        ),
    )


def company_domain(query: str) -> str:
    """'https://www.exa.ai/about' -> 'exa.ai'; bare domains pass through."""
    if "://" not in query:
        return query.strip()
    host = urlparse(query).hostname
    if not host:
        logger.warning(f"Could not parse URL from query: {query}")
        return query.strip()
    return host[4:] if host.startswith("www.") else host


def build_request(params: CompanyResearchParams) -> SearchRequest:
    return SearchRequest(
        query=params.query,
        category="company",
        include_domains=[company_domain(params.query)],
        num_results=1,
        contents=SearchContents(
            text=TextOptions(max_characters=DEFAULT_MAX_CHARACTERS),
            livecrawl="always",
            subpages=params.subpages or DEFAULT_SUBPAGES,
            subpage_target=params.subpage_target or None,
        ),
    )


async def company_research(params: CompanyResearchParams) -> ToolResult:
    note = f"Researching company: {company_domain(params.query)}"
    if params.subpage_target:
        note += f" (targeting: {', '.join(params.subpage_target)})"
    return await run_exa_call(
        TOOL_ID,
        SEARCH_ENDPOINT,
        build_request(params),
        query=params.query,
        error_label="Company research error",
        empty_text="No company information found. Please try a different query.",
        step_note=note,
    )


def company_research_tool() -> ToolSpec:
    return ToolSpec(
        id=TOOL_ID,
        name="company_research",
        description=(
            "Research companies using Exa AI - performs targeted searches of company websites "
            "to gather comprehensive information about businesses. Returns detailed information "
            "from company websites including about pages, pricing, FAQs, blogs, and other "
            "relevant content. Specify the company URL and optionally target specific sections "
            "of their website."
        ),
        params=CompanyResearchParams,
        handler=company_research,
        enabled_by_default=False,
    )
