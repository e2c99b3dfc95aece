from typing import Annotated

from fastapi import Request, Depends

from services.posts import PostStore


async def get_post_store(request: Request) -> PostStore:
    """Get the post store from app state"""
    return request.app.state.post_store


# Type annotation for dependency injection into routes
Store = Annotated[PostStore, Depends(get_post_store)]
