"""
Business logic for the in-memory post store.

``PostService`` owns an ordered list of :class:`Post` records and
implements every operation exposed by the posts router: listing,
filtering by category, lookup by id, creation, partial update,
deletion and appending comments.  Lookups are linear scans over the
list in insertion order.

Required fields are checked with truthiness rules: ``None``, empty
strings, ``0`` and ``False`` all count as missing, while a list (even
an empty one) counts as present.  A consequence is that a partial
update can never clear a field.

FastAPI may call into the service from several worker threads, so
each read or read-modify-write sequence runs under a single lock.
"""

import logging
import threading
import time
from typing import Any, Callable, List, Optional

from ..core.errors import MissingFieldError
from ..schemas.post import Comment, CommentCreate, Post, PostCreate, PostUpdate


logger = logging.getLogger(__name__)

POST_FIELDS = ("title", "image", "description", "category", "comments")
COMMENT_FIELDS = ("author", "content")


def is_present(value: Any) -> bool:
    """Return ``True`` if ``value`` counts as supplied.

    Request schemas already map falsy scalars to ``None``; the full
    rule is kept here for callers that build payloads directly.
    """
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


class TimestampIdFactory:
    """Generate post ids from the wall clock in milliseconds.

    Ids are decimal strings.  When two posts are created within the
    same millisecond (or the clock goes backwards) the next integer
    after the last issued id is used instead, so ids never repeat
    within one factory.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0

    def __call__(self) -> str:
        now = int(self._clock() * 1000)
        if now <= self._last:
            now = self._last + 1
        self._last = now
        return str(now)


class PostService:
    """In-memory store of posts."""

    def __init__(self, id_factory: Optional[Callable[[], str]] = None) -> None:
        self._posts: List[Post] = []
        self._lock = threading.Lock()
        self._new_id = id_factory or TimestampIdFactory()

    def __len__(self) -> int:
        return len(self._posts)

    def _find_index(self, post_id: str) -> int:
        """Return the position of the post with ``post_id`` or ``-1``."""
        for index, post in enumerate(self._posts):
            if post.id == post_id:
                return index
        return -1

    def list_posts(self) -> List[Post]:
        """Return all posts in insertion order."""
        with self._lock:
            return list(self._posts)

    def list_posts_by_category(self, category: str) -> List[Post]:
        """Return posts whose category matches exactly (case-sensitive)."""
        with self._lock:
            return [post for post in self._posts if post.category == category]

    def get_post(self, post_id: str) -> Optional[Post]:
        """Return the first post with the given id, or ``None``."""
        with self._lock:
            index = self._find_index(post_id)
            if index == -1:
                return None
            return self._posts[index]

    def create_post(self, data: Optional[PostCreate]) -> Post:
        """Create a post and append it to the end of the store.

        Raises
        ------
        MissingFieldError
            If any of the five post fields is missing or falsy.  The
            store is left untouched.
        """
        if data is None or not all(is_present(getattr(data, field)) for field in POST_FIELDS):
            raise MissingFieldError()
        with self._lock:
            post = Post(
                id=self._new_id(),
                title=data.title,
                image=data.image,
                description=data.description,
                category=data.category,
                comments=list(data.comments),
            )
            self._posts.append(post)
            total = len(self)
        logger.info("Created post %s in category %r (%d posts)", post.id, post.category, total)
        return post

    def add_comment(self, post_id: str, data: Optional[CommentCreate]) -> Optional[Comment]:
        """Append a comment to a post.

        Field presence is checked before the lookup, so a request that
        is both incomplete and aimed at an unknown post is reported as
        missing a field.  Returns ``None`` if the post does not exist.
        """
        if data is None or not all(is_present(getattr(data, field)) for field in COMMENT_FIELDS):
            raise MissingFieldError()
        comment = Comment(author=data.author, content=data.content)
        with self._lock:
            index = self._find_index(post_id)
            if index == -1:
                return None
            post = self._posts[index]
            post.comments.append(comment)
            count = len(post.comments)
        logger.info("Added comment by %r to post %s (%d comments)", comment.author, post_id, count)
        return comment

    def update_post(self, post_id: str, data: Optional[PostUpdate]) -> Optional[Post]:
        """Partially update a post.

        Only fields supplied with a truthy value are overwritten.  The
        stored record is replaced by an updated copy at the same
        position.  Returns ``None`` if the post does not exist.
        """
        changes = {}
        if data is not None:
            changes = {
                field: getattr(data, field)
                for field in POST_FIELDS
                if is_present(getattr(data, field))
            }
        if "comments" in changes:
            changes["comments"] = list(changes["comments"])
        with self._lock:
            index = self._find_index(post_id)
            if index == -1:
                return None
            updated = self._posts[index].model_copy(update=changes)
            self._posts[index] = updated
        logger.info("Updated post %s (fields: %s)", post_id, ", ".join(sorted(changes)) or "none")
        return updated

    def delete_post(self, post_id: str) -> bool:
        """Delete a post by id.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        with self._lock:
            index = self._find_index(post_id)
            if index == -1:
                return False
            del self._posts[index]
        logger.info("Deleted post %s", post_id)
        return True
