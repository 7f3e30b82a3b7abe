from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from typing import Annotated, Optional


REQUIRED_FIELDS = ("title", "url")

# BSON stores integers as signed 64-bit
MAX_LIKES = 2**63 - 1

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class BlogPostSubmission(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: NonBlankStr
    author: Optional[str] = None
    url: NonBlankStr
    likes: int = Field(default=0, ge=0, le=MAX_LIKES, strict=True)

    @field_validator("likes", mode="before")
    @classmethod
    def default_missing_likes(cls, value):
        return 0 if value is None else value


class BlogPostOut(BaseModel):
    id: str
    title: str
    author: Optional[str] = None
    url: str
    likes: int


def single_blog_serializer(blog) -> dict:
    data = {
        "id": str(blog["_id"]),
        "title": blog["title"],
        "url": blog["url"],
        "likes": blog.get("likes", 0),
    }
    # "__v" and any other stored metadata never reach the wire
    if blog.get("author") is not None:
        data["author"] = blog["author"]
    return data
