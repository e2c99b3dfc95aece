import logging

from fastapi import APIRouter, HTTPException, Query

from config import Config
from dependencies import Store
from models.post import PostRequest, CommentRequest, PostEnvelope, PostPage
from services.errors import PostNotFoundError, PostValidationError
from utils.pagination import paginate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", status_code=201, response_model=PostEnvelope, response_model_exclude_none=True)
def create_post(post_data: PostRequest, store: Store):
    """Create a new post"""
    try:
        post = store.create_post(post_data.content)
    except PostValidationError as e:
        logger.error("Failed to create the post: %s", e)
        raise HTTPException(status_code=400, detail=f"Failed to create post: {e}")

    logger.info("Post created successfully. ID: %d", post.id)
    return PostEnvelope(message="Post created successfully", post=post)


@router.put("/{post_id}", response_model=PostEnvelope, response_model_exclude_none=True)
def update_post(post_id: int, post_data: PostRequest, store: Store):
    """
    Replace the content of an existing post

    Args:
        post_id: The ID of the post to update
        post_data: New content for the post
        store: PostStore service
    """
    try:
        post = store.update_post(post_id, post_data.content)
    except PostValidationError as e:
        logger.error("Failed to update post %d: %s", post_id, e)
        raise HTTPException(status_code=400, detail=f"Failed to update post: {e}")
    except PostNotFoundError as e:
        logger.error("Failed to update post %d: %s", post_id, e)
        raise HTTPException(status_code=404, detail="Post not found")

    logger.info("Post updated successfully. ID: %d", post_id)
    return PostEnvelope(message="Post updated successfully", post=post)


@router.get("/", response_model=PostPage, response_model_exclude_none=True)
def get_posts(
        store: Store,
        page: int = Query(1, gt=0),
        limit: int = Query(Config.DEFAULT_PAGE_LIMIT, gt=0),
):
    """
    Get posts in creation order, one page at a time

    Args:
        store: PostStore service
        page: 1-based page number
        limit: The maximum number of posts to return
    """
    posts = store.list_posts()
    page_posts = paginate(posts, page, limit)

    if not page_posts:
        logger.info("No posts found for page %d with limit %d", page, limit)
        return PostPage(posts=[], page=page, limit=limit, total=len(posts), message="No posts found")

    logger.info("Retrieved posts for page %d with limit %d", page, limit)
    return PostPage(posts=page_posts, page=page, limit=limit, total=len(posts))


@router.get("/{post_id}", response_model=PostEnvelope, response_model_exclude_none=True)
def get_post(post_id: int, store: Store):
    """Get a post with all of its comments"""
    try:
        post = store.get_post(post_id)
    except PostNotFoundError as e:
        logger.error("Failed to get post details: %s", e)
        raise HTTPException(status_code=404, detail="Post not found")

    logger.info("Retrieved post successfully. ID: %d", post_id)
    return PostEnvelope(post=post)


@router.post("/{post_id}/like", response_model=PostEnvelope, response_model_exclude_none=True)
def like_post(post_id: int, store: Store):
    """Add one like to a post"""
    try:
        post = store.like_post(post_id)
    except PostNotFoundError as e:
        logger.error("Failed to like the post: %s", e)
        raise HTTPException(status_code=404, detail="Post not found")

    logger.info("Like added successfully. ID: %d", post_id)
    return PostEnvelope(message="Liked the post successfully", post=post)


@router.post("/{post_id}/comments", response_model=PostEnvelope, response_model_exclude_none=True)
def add_comment(post_id: int, comment: CommentRequest, store: Store):
    """
    Add a comment to a post

    Args:
        post_id: The ID of the post to comment on
        comment: Comment body
        store: PostStore service

    Returns:
        The updated post, including the new comment
    """
    try:
        post = store.add_comment(post_id, comment.text)
    except PostValidationError as e:
        logger.error("Failed to add comment to post %d: %s", post_id, e)
        raise HTTPException(status_code=400, detail=f"Failed to add the comment: {e}")
    except PostNotFoundError as e:
        logger.error("Failed to add comment to post %d: %s", post_id, e)
        raise HTTPException(status_code=404, detail="Post not found")

    logger.info("Comment added to post %d successfully", post_id)
    return PostEnvelope(message="Comment added successfully", post=post)
