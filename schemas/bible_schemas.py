from pydantic import BaseModel, Field, field_validator
from typing import List

from utils.search import SearchMode

class PageQuery(BaseModel):
    size: int = Field(10, ge=1)
    page: int = Field(0, ge=0)

class SearchQuery(BaseModel):
    q: str = ''
    mode: SearchMode = SearchMode.EXACT
    limit: int = Field(50, ge=1)
    size: int = Field(10, ge=1)

    @field_validator('mode', mode='before')
    @classmethod
    def parse_mode(cls, value):
        return SearchMode.parse(value)

class ShareRequest(BaseModel):
    book: str = Field(..., min_length=1, max_length=100)
    chapter: str
    verses: List[str] = Field(..., min_length=1)

    @field_validator('chapter', mode='before')
    @classmethod
    def chapter_as_text(cls, value):
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator('verses', mode='before')
    @classmethod
    def verses_as_text(cls, value):
        if isinstance(value, list):
            return [str(v) if isinstance(v, int) else v for v in value]
        return value
