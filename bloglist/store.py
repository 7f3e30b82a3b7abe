"""
Persistence port for blog posts.

Handlers talk to a ``BlogStore`` and only ever see wire-shaped dicts
(``id`` instead of ``_id``, no version metadata). ``MongoBlogStore`` is the
production implementation on top of a motor collection; tests inject their
own implementation through ``get_blog_store``.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Depends
from pymongo import ReturnDocument
from .db import get_db
from .errors import MalformattedIdError
from .models.blog import Blog
from .schemas import single_blog_serializer

logger = logging.getLogger(__name__)


class BlogStore(ABC):
    @abstractmethod
    async def find_all(self) -> list[dict]:
        """Return every stored blog in store order."""

    @abstractmethod
    async def find_by_id(self, blog_id: str) -> Optional[dict]:
        """Return the blog with this id, or None if there is none."""

    @abstractmethod
    async def insert(self, blog: Blog) -> dict:
        """Persist a new blog and return it with its assigned id."""

    @abstractmethod
    async def delete_by_id(self, blog_id: str) -> bool:
        """Remove the blog if present. Returns whether anything was removed."""

    @abstractmethod
    async def replace_by_id(self, blog_id: str, blog: Blog) -> Optional[dict]:
        """Overwrite every field of an existing blog. Returns None if it does not exist."""


def parse_object_id(blog_id: str) -> ObjectId:
    try:
        return ObjectId(blog_id)
    except (InvalidId, TypeError):
        raise MalformattedIdError()


class MongoBlogStore(BlogStore):
    def __init__(self, collection):
        self.collection = collection

    async def find_all(self) -> list[dict]:
        blogs = await self.collection.find({}).to_list(length=None)
        return [single_blog_serializer(blog) for blog in blogs]

    async def find_by_id(self, blog_id: str) -> Optional[dict]:
        blog = await self.collection.find_one({"_id": parse_object_id(blog_id)})
        return single_blog_serializer(blog) if blog else None

    async def insert(self, blog: Blog) -> dict:
        document = blog.to_document()
        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        logger.debug(f"inserted blog {result.inserted_id}")
        return single_blog_serializer(document)

    async def delete_by_id(self, blog_id: str) -> bool:
        try:
            object_id = parse_object_id(blog_id)
        except MalformattedIdError:
            # nothing can be stored under a malformed id
            return False
        result = await self.collection.delete_one({"_id": object_id})
        return result.deleted_count > 0

    async def replace_by_id(self, blog_id: str, blog: Blog) -> Optional[dict]:
        updated = await self.collection.find_one_and_replace(
            {"_id": parse_object_id(blog_id)},
            blog.to_document(),
            return_document=ReturnDocument.AFTER,
        )
        return single_blog_serializer(updated) if updated else None


async def get_blog_store(db=Depends(get_db)) -> BlogStore:
    return MongoBlogStore(db.blogs)
