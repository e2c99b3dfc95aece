import logging
import threading
from datetime import datetime, timezone
from typing import Callable, List, Optional

from models.post import Comment, Post, POST_MAX_LENGTH, COMMENT_MAX_LENGTH
from services.errors import PostNotFoundError, PostValidationError

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def validate_text(value: str, max_length: int, label: str) -> None:
    """
    Reject text that is empty after trimming or longer than max_length.
    The length check applies to the raw, untrimmed value.
    """
    if not value or not value.strip():
        raise PostValidationError(f"{label} cannot be empty")
    if len(value) > max_length:
        raise PostValidationError(f"{label} exceeds maximum length of {max_length} characters")


class PostStore:
    """
    In-memory repository of posts and their comments.

    A single lock guards the whole collection; every operation holds it for
    its full duration. Posts handed back to callers are deep copies, so the
    caller never holds a live reference into the store.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._lock = threading.Lock()
        self._posts: List[Post] = []
        self._next_id = 1
        self._clock = clock or utc_now

    def create_post(self, content: str) -> Post:
        """
        Create a post with the given content

        Args:
            content: The post body, 1-250 characters after trimming

        Returns:
            Snapshot of the created post

        Raises:
            PostValidationError: If the content is empty or too long
        """
        validate_text(content, POST_MAX_LENGTH, "post content")

        with self._lock:
            now = self._clock()
            post = Post(
                id=self._next_id,
                content=content,
                likes=0,
                comments=[],
                created_at=now,
                updated_at=now,
            )
            self._next_id += 1
            self._posts.append(post)
            logger.debug("Created post %d", post.id)
            return post.model_copy(deep=True)

    def update_post(self, post_id: int, content: str) -> Post:
        """
        Replace the content of an existing post. Content is validated before
        the post is looked up, so bad content on an unknown ID is a validation
        error rather than not-found.

        Raises:
            PostValidationError: If the new content is empty or too long
            PostNotFoundError: If no post has the given ID
        """
        validate_text(content, POST_MAX_LENGTH, "post content")

        with self._lock:
            post = self._find(post_id)
            post.content = content
            post.updated_at = self._clock()
            logger.debug("Updated post %d", post_id)
            return post.model_copy(deep=True)

    def like_post(self, post_id: int) -> Post:
        """Increment the like counter of a post by one"""
        with self._lock:
            post = self._find(post_id)
            post.likes += 1
            logger.debug("Liked post %d, now at %d likes", post_id, post.likes)
            return post.model_copy(deep=True)

    def get_post(self, post_id: int) -> Post:
        """Current state of a post, including all of its comments"""
        with self._lock:
            return self._find(post_id).model_copy(deep=True)

    def add_comment(self, post_id: int, text: str) -> Post:
        """
        Append a comment to a post. Comment IDs are sequential within the post,
        starting at 1.

        Returns:
            Snapshot of the updated post, including the new comment

        Raises:
            PostValidationError: If the text is empty or too long
            PostNotFoundError: If no post has the given ID
        """
        validate_text(text, COMMENT_MAX_LENGTH, "comment")

        with self._lock:
            post = self._find(post_id)
            comment = Comment(
                id=len(post.comments) + 1,
                text=text,
                created_at=self._clock(),
            )
            post.comments.append(comment)
            logger.debug("Added comment %d to post %d", comment.id, post_id)
            return post.model_copy(deep=True)

    def list_posts(self) -> List[Post]:
        """All posts in creation order"""
        with self._lock:
            return [post.model_copy(deep=True) for post in self._posts]

    def count(self) -> int:
        with self._lock:
            return len(self._posts)

    def _find(self, post_id: int) -> Post:
        # caller must hold self._lock
        for post in self._posts:
            if post.id == post_id:
                return post
        raise PostNotFoundError(post_id)
