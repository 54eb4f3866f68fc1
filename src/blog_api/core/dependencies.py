from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.database.session import get_async_session
from blog_api.repositories import PostRepository, PostRepositoryContract
from blog_api.services import PostService


async def get_post_repository(db: AsyncSession = Depends(get_async_session)) -> PostRepositoryContract:
    # One repository per request, bound to the request's session
    return PostRepository(db)


async def get_post_service(repository: PostRepositoryContract = Depends(get_post_repository)) -> PostService:
    return PostService(repository)
