import copy
from typing import Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from bloglist.main import app
from bloglist.models.blog import Blog
from bloglist.schemas import single_blog_serializer
from bloglist.store import BlogStore, get_blog_store, parse_object_id


BLOG_FIXTURES = [
    {
        "title": "My first blog",
        "author": "John",
        "url": "http://localhost:3003",
        "likes": 5,
    },
    {
        "title": "Hello World",
        "author": "David",
        "url": "http://localhost:3003",
        "likes": 6,
    },
]


class InMemoryBlogStore(BlogStore):
    """Dict-backed store that behaves like MongoBlogStore without a server."""

    def __init__(self, blogs=()):
        self.documents = {}
        for blog in blogs:
            object_id = ObjectId()
            self.documents[object_id] = {"_id": object_id, "__v": 0, **copy.deepcopy(blog)}

    async def find_all(self) -> list[dict]:
        return [single_blog_serializer(doc) for doc in self.documents.values()]

    async def find_by_id(self, blog_id: str) -> Optional[dict]:
        doc = self.documents.get(parse_object_id(blog_id))
        return single_blog_serializer(doc) if doc else None

    async def insert(self, blog: Blog) -> dict:
        object_id = ObjectId()
        self.documents[object_id] = {"_id": object_id, **blog.to_document()}
        return single_blog_serializer(self.documents[object_id])

    async def delete_by_id(self, blog_id: str) -> bool:
        if not ObjectId.is_valid(blog_id):
            return False
        return self.documents.pop(ObjectId(blog_id), None) is not None

    async def replace_by_id(self, blog_id: str, blog: Blog) -> Optional[dict]:
        object_id = parse_object_id(blog_id)
        if object_id not in self.documents:
            return None
        self.documents[object_id] = {"_id": object_id, **blog.to_document()}
        return single_blog_serializer(self.documents[object_id])

    def blogs_in_db(self) -> list[dict]:
        return [single_blog_serializer(doc) for doc in self.documents.values()]


@pytest.fixture
def store():
    return InMemoryBlogStore(BLOG_FIXTURES)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_blog_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
