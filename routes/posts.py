from typing import List, Optional, Type, TypeVar

from fastapi import APIRouter, Query
from pydantic import BaseModel, ValidationError as PydanticValidationError

from dependencies import Store
from models.post import (
    CommentRequest,
    CommentResult,
    CreatePostRequest,
    LikeCommentRequest,
    LikeReplyRequest,
    Post,
    PostIdRequest,
    ReplyRequest,
    ReplyResult,
)
from models.rpc import RpcError, RpcResult, ok
from services.errors import ValidationError

M = TypeVar("M", bound=BaseModel)

router = APIRouter(
    responses={
        400: {"model": RpcError, "description": "Input failed validation"},
        404: {"model": RpcError, "description": "Referenced post, comment or reply does not exist"},
    }
)

QUERIES = ["listPosts", "getPosts", "getPost", "getPostById"]
MUTATIONS = [
    "createPost",
    "likePost",
    "unlikePost",
    "addComment",
    "addReply",
    "likeComment",
    "unlikeComment",
    "likeReply",
    "unlikeReply",
]


def parse_input(model: Type[M], raw: Optional[str]) -> M:
    """
    Validate the JSON `input` query parameter that queries receive

    Raises:
        ValidationError: if the parameter is not JSON or does not fit the model
    """
    try:
        return model.model_validate_json(raw or "{}")
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e


# Queries

@router.get("/listPosts", response_model=RpcResult[List[Post]])
@router.get("/getPosts", response_model=RpcResult[List[Post]], include_in_schema=False)
async def list_posts(store: Store):
    """Get every post in the feed, newest first"""
    return ok(store.list_posts())


@router.get("/getPost", response_model=RpcResult[Post])
@router.get("/getPostById", response_model=RpcResult[Post], include_in_schema=False)
async def get_post(store: Store, input: Optional[str] = Query(None, description='JSON, e.g. {"id": "1"}')):
    """Get a single post by id"""
    params = parse_input(PostIdRequest, input)
    return ok(store.get_post(params.id))


# Posts

@router.post("/createPost", response_model=RpcResult[Post])
async def create_post(body: CreatePostRequest, store: Store):
    """Create a new post at the top of the feed"""
    post = store.create_post(body.username, body.user_avatar, body.image, body.caption)
    return ok(post)


@router.post("/likePost", response_model=RpcResult[Post])
async def like_post(body: PostIdRequest, store: Store):
    return ok(store.like_post(body.id))


@router.post("/unlikePost", response_model=RpcResult[Post])
async def unlike_post(body: PostIdRequest, store: Store):
    return ok(store.unlike_post(body.id))


# Comments

@router.post("/addComment", response_model=RpcResult[CommentResult])
async def add_comment(body: CommentRequest, store: Store):
    """
    Add a comment to a post

    Returns:
        The updated post and the new comment
    """
    result = store.add_comment(body.post_id, body.username, body.user_avatar, body.text)
    return ok(result)


@router.post("/likeComment", response_model=RpcResult[CommentResult])
async def like_comment(body: LikeCommentRequest, store: Store):
    return ok(store.like_comment(body.post_id, body.comment_id))


@router.post("/unlikeComment", response_model=RpcResult[CommentResult])
async def unlike_comment(body: LikeCommentRequest, store: Store):
    return ok(store.unlike_comment(body.post_id, body.comment_id))


# Replies

@router.post("/addReply", response_model=RpcResult[ReplyResult])
async def add_reply(body: ReplyRequest, store: Store):
    """
    Reply to a comment on a post

    Returns:
        The updated post, the parent comment and the new reply
    """
    result = store.add_reply(
        body.post_id, body.comment_id, body.username, body.user_avatar, body.text
    )
    return ok(result)


@router.post("/likeReply", response_model=RpcResult[ReplyResult])
async def like_reply(body: LikeReplyRequest, store: Store):
    return ok(store.like_reply(body.post_id, body.comment_id, body.reply_id))


@router.post("/unlikeReply", response_model=RpcResult[ReplyResult])
async def unlike_reply(body: LikeReplyRequest, store: Store):
    return ok(store.unlike_reply(body.post_id, body.comment_id, body.reply_id))
