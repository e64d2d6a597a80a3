"""Builtin Exa tools, in registration order."""
from .web_search import web_search_tool
from .research_paper import research_paper_tool
from .twitter import twitter_tool
from .company_research import company_research_tool
from .crawling import crawling_tool
from .competitor_finder import competitor_finder_tool

BUILTIN_TOOLS = [
    web_search_tool,
    research_paper_tool,
    twitter_tool,
    company_research_tool,
    crawling_tool,
    competitor_finder_tool,
]
