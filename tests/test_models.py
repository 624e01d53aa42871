"""
Model Tests

Field constraints and wire names of the feed models.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from models.post import Comment, CommentRequest, CreatePostRequest, LikeReplyRequest, Post
from utils.ids import IdFactory

from .fixtures import AVATAR, IMAGE, FixedClock, T0


def make_post(**overrides):
    fields = dict(id="p1", username="alice", user_avatar=AVATAR, image=IMAGE, caption="hi")
    fields.update(overrides)
    return Post(**fields)


class TestPostModel:

    def test_serializes_with_wire_names(self):
        data = make_post().model_dump(by_alias=True)
        assert data == {
            "id": "p1",
            "username": "alice",
            "userAvatar": AVATAR,
            "image": IMAGE,
            "caption": "hi",
            "likes": 0,
            "timeAgo": "now",
            "comments": [],
            "totalCommentsCount": 0,
        }

    def test_url_is_kept_as_given(self):
        post = make_post(user_avatar="https://example.com")
        assert post.user_avatar == "https://example.com"

    @pytest.mark.parametrize("url", ["ftp://example.com/a.png", "http://localhost:5173/a.png"])
    def test_accepts_any_absolute_url(self, url):
        assert make_post(image=url).image == url

    @pytest.mark.parametrize("url", ["not-a-url", "example.com/a.png", "//example.com/a.png", ""])
    def test_rejects_bad_image_url(self, url):
        with pytest.raises(PydanticValidationError):
            make_post(image=url)

    def test_rejects_long_caption(self):
        with pytest.raises(PydanticValidationError):
            make_post(caption="a" * 501)

    def test_rejects_negative_likes(self):
        with pytest.raises(PydanticValidationError):
            make_post(likes=-1)

    def test_parses_nested_tree(self):
        post = Post.model_validate({
            "id": "p1",
            "username": "alice",
            "userAvatar": AVATAR,
            "image": IMAGE,
            "caption": "hi",
            "likes": 1,
            "timeAgo": "2h",
            "comments": [{
                "id": "c1",
                "username": "bob",
                "userAvatar": AVATAR,
                "text": "nice",
                "likes": 0,
                "timeAgo": "1h",
                "replies": [{
                    "id": "r1",
                    "username": "alice",
                    "userAvatar": AVATAR,
                    "text": "thanks",
                    "likes": 0,
                    "timeAgo": "1h",
                }],
            }],
            "totalCommentsCount": 2,
        })
        reply = post.comments[0].replies[0]
        assert reply.text == "thanks"
        assert reply.replies == []


class TestCommentModel:

    @pytest.mark.parametrize("text", ["", "x" * 301])
    def test_text_bounds(self, text):
        with pytest.raises(PydanticValidationError):
            Comment(id="c1", username="bob", user_avatar=AVATAR, text=text)

    def test_replies_default_to_empty_list(self):
        comment = Comment(id="c1", username="bob", user_avatar=AVATAR, text="x" * 300)
        assert comment.model_dump(by_alias=True)["replies"] == []


class TestRequests:

    def test_create_post_accepts_both_spellings(self):
        wire = CreatePostRequest.model_validate(
            {"username": "alice", "userAvatar": AVATAR, "image": IMAGE, "caption": "hi"}
        )
        named = CreatePostRequest.model_validate(
            {"author": "alice", "avatarUrl": AVATAR, "imageUrl": IMAGE, "caption": "hi"}
        )
        assert wire == named

    def test_comment_request_requires_post_id(self):
        with pytest.raises(PydanticValidationError):
            CommentRequest.model_validate({"postId": "", "username": "bob", "userAvatar": AVATAR, "text": "nice"})

    def test_like_reply_request_fields(self):
        request = LikeReplyRequest.model_validate({"postId": "1", "commentId": "c1", "replyId": "r1"})
        assert (request.post_id, request.comment_id, request.reply_id) == ("1", "c1", "r1")


def test_id_factory_skips_taken_stamps():
    ids = IdFactory(FixedClock())
    assert ids.new_id("c_") == f"c_{T0}"
    assert ids.new_id("c_", [f"c_{T0}", f"c_{T0 + 1}"]) == f"c_{T0 + 2}"
