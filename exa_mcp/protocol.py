"""Exa API wire models — request bodies sent to /search and /contents."""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional, Union

LiveCrawl = Literal["always", "fallback", "never", "auto"]


class _Wire(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_body(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class TextOptions(_Wire):
    max_characters: int = Field(alias="maxCharacters")


class SearchContents(_Wire):
    text: TextOptions
    livecrawl: LiveCrawl = "always"
    subpages: Optional[int] = None
    subpage_target: Optional[List[str]] = Field(default=None, alias="subpageTarget")


class SearchRequest(_Wire):
    query: str
    type: str = "auto"
    category: Optional[str] = None
    include_domains: Optional[List[str]] = Field(default=None, alias="includeDomains")
    exclude_domains: Optional[List[str]] = Field(default=None, alias="excludeDomains")
    start_published_date: Optional[str] = Field(default=None, alias="startPublishedDate")
    end_published_date: Optional[str] = Field(default=None, alias="endPublishedDate")
    num_results: int = Field(alias="numResults")
    contents: SearchContents


class ContentsRequest(_Wire):
    ids: List[str]
    text: Union[bool, TextOptions] = True
    livecrawl: LiveCrawl = "always"


UpstreamRequest = Union[SearchRequest, ContentsRequest]
