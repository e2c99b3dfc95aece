from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

POST_MAX_LENGTH = 250
COMMENT_MAX_LENGTH = 150


class Comment(BaseModel):
    id: int
    text: str
    created_at: datetime


class Post(BaseModel):
    id: int
    content: str
    likes: int = 0
    comments: List[Comment] = []
    created_at: datetime
    updated_at: datetime


class PostRequest(BaseModel):
    content: str = Field(..., max_length=POST_MAX_LENGTH)


class CommentRequest(BaseModel):
    text: str = Field(..., max_length=COMMENT_MAX_LENGTH)


class PostEnvelope(BaseModel):
    message: Optional[str] = None
    post: Post


class PostPage(BaseModel):
    posts: List[Post] = []
    page: int
    limit: int
    total: int
    message: Optional[str] = None
