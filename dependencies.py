from typing import Annotated

from fastapi import Request, Depends

from services.posts import PostStore


async def get_store(request: Request) -> PostStore:
    """Get the feed store from app state"""
    return request.app.state.store


# Type annotation for dependency injection
Store = Annotated[PostStore, Depends(get_store)]
