import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from blog_api.core.dependencies import get_post_service
from blog_api.domain import CreatePostRequest, EmptyValueError, PostId, UpdatePostRequest
from blog_api.exceptions import ServiceError
from blog_api.services import PostService
from .errors import map_service_error, map_validation_error
from .schemas import CreatePostBody, Envelope, PostResponse, UpdatePostBody

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Envelope[PostResponse])
async def create_post(payload: CreatePostBody, service: PostService = Depends(get_post_service)):
    try:
        request = CreatePostRequest.from_raw(payload.title, payload.body)
    except EmptyValueError as exc:
        raise map_validation_error(exc) from exc

    try:
        post = await service.create_post(request)
    except ServiceError as exc:
        raise map_service_error(exc, logger) from exc

    return Envelope[PostResponse](status_code=status.HTTP_201_CREATED, data=PostResponse.from_domain(post))


@router.get("", response_model=Envelope[list[PostResponse]])
async def list_posts(service: PostService = Depends(get_post_service)):
    try:
        posts = await service.get_all_posts()
    except ServiceError as exc:
        raise map_service_error(exc, logger) from exc

    return Envelope[list[PostResponse]](
        status_code=status.HTTP_200_OK,
        data=[PostResponse.from_domain(post) for post in posts],
    )


@router.get("/{post_id}", response_model=Envelope[PostResponse])
async def get_post(post_id: UUID, service: PostService = Depends(get_post_service)):
    try:
        post = await service.get_post_by_id(PostId.parse(post_id))
    except ServiceError as exc:
        raise map_service_error(exc, logger) from exc

    return Envelope[PostResponse](status_code=status.HTTP_200_OK, data=PostResponse.from_domain(post))


@router.patch("/{post_id}", response_model=Envelope[PostResponse])
async def update_post(post_id: UUID, payload: UpdatePostBody, service: PostService = Depends(get_post_service)):
    try:
        request = UpdatePostRequest.from_raw(title=payload.title, body=payload.body)
    except EmptyValueError as exc:
        raise map_validation_error(exc) from exc

    try:
        post = await service.update_post(PostId.parse(post_id), request)
    except ServiceError as exc:
        raise map_service_error(exc, logger) from exc

    return Envelope[PostResponse](status_code=status.HTTP_200_OK, data=PostResponse.from_domain(post))
