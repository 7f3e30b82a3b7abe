from typing import Any, List
from fastapi import APIRouter, Body, Depends, Response, status
from bloglist.errors import BlogNotFoundError
from bloglist.schemas import BlogPostOut
from bloglist.store import BlogStore, get_blog_store
from bloglist.utils import blog_submission_form
import logging

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("", response_model=List[BlogPostOut], response_model_exclude_none=True)
@router.get("/", response_model=List[BlogPostOut], response_model_exclude_none=True,
            include_in_schema=False)
async def list_blogs(store: BlogStore = Depends(get_blog_store)):
    """
    Retrieves every stored blog post.
    There is no pagination or filtering; the whole collection is returned on every call.
    Args:
        store (BlogStore): Blog persistence dependency.
    Returns:
        list: Blog posts in their wire representation, each with its public ``id``.
    """
    return await store.find_all()


@router.get("/{blog_id}", response_model=BlogPostOut, response_model_exclude_none=True)
async def get_blog(blog_id: str, store: BlogStore = Depends(get_blog_store)):
    """
    Retrieves a single blog post by its ID.
    Raises:
        MalformattedIdError: 400 if ``blog_id`` is not a valid identifier
        BlogNotFoundError: 404 if no blog post has this ID
    """
    blog = await store.find_by_id(blog_id)
    if blog is None:
        raise BlogNotFoundError()
    return blog


@router.post("", status_code=status.HTTP_201_CREATED, response_model=BlogPostOut,
             response_model_exclude_none=True)
@router.post("/", status_code=status.HTTP_201_CREATED, response_model=BlogPostOut,
             response_model_exclude_none=True, include_in_schema=False)
async def create_blog(payload: Any = Body(...), store: BlogStore = Depends(get_blog_store)):
    """
    Creates a new blog post.
    Args:
        payload: JSON object with ``title``, ``url`` and optionally ``author`` and ``likes``.
        store (BlogStore): Blog persistence dependency.
    Returns:
        dict: The stored blog post, including the ``id`` assigned by the store.
    Raises:
        BlogValidationError: 400 if ``title`` or ``url`` is missing, or the payload is otherwise invalid.
    Note:
        - ``likes`` defaults to 0 when it is not sent
    """
    blog = blog_submission_form(payload)
    created = await store.insert(blog)
    logger.info(f"created blog {created['id']}")
    return created


@router.put("/{blog_id}", response_model=BlogPostOut, response_model_exclude_none=True)
async def update_blog(blog_id: str, payload: Any = Body(...), store: BlogStore = Depends(get_blog_store)):
    """
    Replaces an existing blog post.
    Every field except the ID is overwritten with the submitted values; fields left out
    of the payload fall back to their defaults rather than keeping their stored value.
    Args:
        blog_id (str): The ID of the blog post to replace
        payload: JSON object with the same shape as for creation
        store (BlogStore): Blog persistence dependency
    Returns:
        dict: The blog post as stored after the replacement
    Raises:
        BlogValidationError: 400 if the payload is invalid
        MalformattedIdError: 400 if ``blog_id`` is not a valid identifier
        BlogNotFoundError: 404 if no blog post has this ID
    """
    blog = blog_submission_form(payload)
    updated = await store.replace_by_id(blog_id, blog)
    if updated is None:
        raise BlogNotFoundError()
    logger.info(f"replaced blog {blog_id}")
    return updated


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(blog_id: str, store: BlogStore = Depends(get_blog_store)):
    """
    Deletes a blog post.
    Deleting is idempotent: an unknown or malformed ID is not an error and
    produces the same empty 204 response.
    """
    removed = await store.delete_by_id(blog_id)
    if removed:
        logger.info(f"deleted blog {blog_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
