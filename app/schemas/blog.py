import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class Heading(BaseModel):
    id: str
    text: str
    level: int = Field(ge=1, le=6)


class PostSummary(BaseModel):
    slug: str
    title: str
    date: str
    description: str
    author: str
    readingTime: str
    image: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class Post(PostSummary):
    """A parsed content document. Built fresh on every repository read."""

    content: str
    published: datetime.datetime = Field(exclude=True)

    def summary(self) -> PostSummary:
        return PostSummary(**self.model_dump(exclude={"content"}))


class PostDetail(PostSummary):
    content: str
    headings: List[Heading] = Field(default_factory=list)


class TagCount(BaseModel):
    tag: str
    count: int


class Page(BaseModel):
    items: List[PostSummary] = Field(default_factory=list)
    pageNumber: int
    pageSize: int
    totalPages: int
    totalItems: int
