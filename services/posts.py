import html
import logging
from typing import Callable, Iterable, List, Optional, Tuple

import bleach
from pydantic import ValidationError as PydanticValidationError

from models.post import Comment, CommentResult, Post, Reply, ReplyResult
from services.errors import NotFoundError, ValidationError
from services.seed import seed_posts
from utils.ids import IdFactory

logger = logging.getLogger(__name__)


def sanitize(text: str) -> str:
    """Strip every tag from user supplied text, leaving plain characters (no entities)"""
    return html.unescape(bleach.clean(text, tags=set(), strip=True))


class PostStore:
    """
    In-memory feed: an ordered list of posts, newest first.

    Every id-keyed operation raises NotFoundError before touching anything,
    and new entities are fully validated before they are attached, so a
    failed call never leaves a partial change behind.
    """

    def __init__(self, posts: Optional[Iterable[Post]] = None, clock: Optional[Callable[[], int]] = None):
        self.posts: List[Post] = list(posts or [])
        self.ids = IdFactory(clock)

    @classmethod
    def seeded(cls, clock: Optional[Callable[[], int]] = None) -> "PostStore":
        """Build a store loaded with the fixture feed"""
        return cls(seed_posts(), clock=clock)

    @staticmethod
    def _build(model, **fields):
        try:
            return model(**fields)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e) from e

    @staticmethod
    def _bump(entity, delta: int) -> None:
        entity.likes = max(0, entity.likes + delta)

    # Lookups

    def list_posts(self) -> List[Post]:
        """Get all posts, most recently created first"""
        return self.posts

    def get_post(self, post_id: str) -> Post:
        for post in self.posts:
            if post.id == post_id:
                return post
        raise NotFoundError("post", post_id)

    def _get_comment(self, post_id: str, comment_id: str) -> Tuple[Post, Comment]:
        post = self.get_post(post_id)
        for comment in post.comments:
            if comment.id == comment_id:
                return post, comment
        raise NotFoundError("comment", comment_id)

    def _get_reply(self, post_id: str, comment_id: str, reply_id: str) -> Tuple[Post, Comment, Reply]:
        post, comment = self._get_comment(post_id, comment_id)
        for reply in comment.replies:
            if reply.id == reply_id:
                return post, comment, reply
        raise NotFoundError("reply", reply_id)

    # Posts

    def create_post(self, username: str, user_avatar: str, image: str, caption: str) -> Post:
        """Create a post and put it at the top of the feed"""
        post = self._build(
            Post,
            id=self.ids.new_id("", (p.id for p in self.posts)),
            username=username,
            user_avatar=user_avatar,
            image=image,
            caption=sanitize(caption),
        )
        self.posts.insert(0, post)
        logger.info(f"Created post with ID: {post.id}")
        return post

    def like_post(self, post_id: str) -> Post:
        post = self.get_post(post_id)
        self._bump(post, 1)
        logger.info(f"Incremented likes for post {post.id}: {post.likes} likes")
        return post

    def unlike_post(self, post_id: str) -> Post:
        post = self.get_post(post_id)
        self._bump(post, -1)
        logger.info(f"Decremented likes for post {post.id}: {post.likes} likes")
        return post

    # Comments

    def add_comment(self, post_id: str, username: str, user_avatar: str, text: str) -> CommentResult:
        """Append a comment to a post and count it on the post"""
        post = self.get_post(post_id)
        comment = self._build(
            Comment,
            id=self.ids.new_id("c_", (c.id for c in post.comments)),
            username=username,
            user_avatar=user_avatar,
            text=sanitize(text),
        )
        post.comments.append(comment)
        post.total_comments_count += 1
        logger.info(f"Added comment {comment.id} to post {post.id}")
        return CommentResult(post=post, comment=comment)

    def like_comment(self, post_id: str, comment_id: str) -> CommentResult:
        post, comment = self._get_comment(post_id, comment_id)
        self._bump(comment, 1)
        logger.info(f"Liked comment {comment.id}: {comment.likes} likes")
        return CommentResult(post=post, comment=comment)

    def unlike_comment(self, post_id: str, comment_id: str) -> CommentResult:
        post, comment = self._get_comment(post_id, comment_id)
        self._bump(comment, -1)
        logger.info(f"Unliked comment {comment.id}: {comment.likes} likes")
        return CommentResult(post=post, comment=comment)

    # Replies

    def add_reply(self, post_id: str, comment_id: str, username: str, user_avatar: str, text: str) -> ReplyResult:
        """
        Append a reply under a top-level comment.

        Replies only ever hang off a post's own comments, so the tree stays
        two levels deep. The reply is counted on the post.
        """
        post, comment = self._get_comment(post_id, comment_id)
        reply = self._build(
            Reply,
            id=self.ids.new_id("r_", (r.id for r in comment.replies)),
            username=username,
            user_avatar=user_avatar,
            text=sanitize(text),
        )
        comment.replies.append(reply)
        post.total_comments_count += 1
        logger.info(f"Added reply {reply.id} to comment {comment.id}")
        return ReplyResult(post=post, comment=comment, reply=reply)

    def like_reply(self, post_id: str, comment_id: str, reply_id: str) -> ReplyResult:
        post, comment, reply = self._get_reply(post_id, comment_id, reply_id)
        self._bump(reply, 1)
        logger.info(f"Liked reply {reply.id}: {reply.likes} likes")
        return ReplyResult(post=post, comment=comment, reply=reply)

    def unlike_reply(self, post_id: str, comment_id: str, reply_id: str) -> ReplyResult:
        post, comment, reply = self._get_reply(post_id, comment_id, reply_id)
        self._bump(reply, -1)
        logger.info(f"Unliked reply {reply.id}: {reply.likes} likes")
        return ReplyResult(post=post, comment=comment, reply=reply)
