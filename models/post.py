from typing import Annotated, List

from pydantic import (
    AfterValidator,
    AliasChoices,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError as PydanticValidationError,
)

_any_url = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    """Reject anything that is not an absolute URL, but keep the caller's spelling"""
    try:
        _any_url.validate_python(value)
    except PydanticValidationError:
        raise ValueError("Must be a valid URL") from None
    return value


Url = Annotated[str, AfterValidator(_check_url)]
Username = Annotated[str, Field(min_length=1)]
Caption = Annotated[str, Field(max_length=500)]
Text = Annotated[str, Field(min_length=1, max_length=300)]
EntityId = Annotated[str, Field(min_length=1)]
Likes = Annotated[int, Field(ge=0)]


class Comment(BaseModel):
    """A comment on a post. Replies use the same shape."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    username: Username
    user_avatar: Url = Field(alias="userAvatar")
    text: Text
    likes: Likes = 0
    time_ago: str = Field("now", alias="timeAgo")
    replies: List["Comment"] = []


Reply = Comment


class Post(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    username: Username
    user_avatar: Url = Field(alias="userAvatar")
    image: Url
    caption: Caption
    likes: Likes = 0
    time_ago: str = Field("now", alias="timeAgo")
    comments: List[Comment] = []
    total_comments_count: Likes = Field(0, alias="totalCommentsCount")


class CommentResult(BaseModel):
    post: Post
    comment: Comment


class ReplyResult(CommentResult):
    reply: Reply


class PostIdRequest(BaseModel):
    id: EntityId


class CreatePostRequest(BaseModel):
    username: Username = Field(validation_alias=AliasChoices("username", "author"))
    user_avatar: Url = Field(validation_alias=AliasChoices("userAvatar", "avatarUrl"))
    image: Url = Field(validation_alias=AliasChoices("image", "imageUrl"))
    caption: Caption


class CommentRequest(BaseModel):
    post_id: EntityId = Field(alias="postId")
    username: Username = Field(validation_alias=AliasChoices("username", "author"))
    user_avatar: Url = Field(validation_alias=AliasChoices("userAvatar", "avatarUrl"))
    text: Text


class ReplyRequest(CommentRequest):
    comment_id: EntityId = Field(alias="commentId")


class LikeCommentRequest(BaseModel):
    post_id: EntityId = Field(alias="postId")
    comment_id: EntityId = Field(alias="commentId")


class LikeReplyRequest(LikeCommentRequest):
    reply_id: EntityId = Field(alias="replyId")
