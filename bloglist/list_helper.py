"""
Aggregations over an in-memory list of blogs.

Each blog is a mapping with at least ``likes`` and, where relevant,
``title`` and ``author``. Ties always go to whichever blog or author was
seen first.
"""

from typing import Iterable, Mapping, Optional


def dummy(blogs) -> int:
    return 1


def total_likes(blogs: Iterable[Mapping]) -> int:
    return sum(blog["likes"] for blog in blogs)


def favorite_blog(blogs: Iterable[Mapping]) -> Optional[dict]:
    favorite = None
    for blog in blogs:
        # strict comparison keeps the first of several equally liked blogs
        if favorite is None or blog["likes"] > favorite["likes"]:
            favorite = {
                "title": blog["title"],
                "author": blog.get("author"),
                "likes": blog["likes"],
            }
    return favorite


def _best_author(totals: dict, key: str) -> Optional[dict]:
    best = None
    for author, total in totals.items():
        if best is None or total > best[key]:
            best = {"author": author, key: total}
    return best


def most_blogs(blogs: Iterable[Mapping]) -> Optional[dict]:
    counts = {}
    for blog in blogs:
        author = blog.get("author")
        counts[author] = counts.get(author, 0) + 1
    return _best_author(counts, "blogs")


def most_likes(blogs: Iterable[Mapping]) -> Optional[dict]:
    likes = {}
    for blog in blogs:
        author = blog.get("author")
        likes[author] = likes.get(author, 0) + blog["likes"]
    return _best_author(likes, "likes")
