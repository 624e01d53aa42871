from typing import Any, Dict, List

from models.post import Post

DAVID_AVATAR = "https://i.pravatar.cc/150?img=12"
DTIW_AVATAR = "https://i.pravatar.cc/150?img=33"
ISAAC_AVATAR = "https://i.pravatar.cc/150?img=51"


def _reply(id: str, username: str, avatar: str, text: str, likes: int, time_ago: str) -> Dict[str, Any]:
    return {
        "id": id,
        "username": username,
        "userAvatar": avatar,
        "text": text,
        "likes": likes,
        "timeAgo": time_ago,
    }


# Fixture feed served when the app starts with seeding enabled.
# totalCommentsCount matches comments plus replies for each post.
SEED_POSTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "username": "david_tiw",
        "userAvatar": DAVID_AVATAR,
        "image": "https://picsum.photos/seed/david-desk/800/1000",
        "caption": "Built this feed over a long weekend. Comments below explain how to use it.",
        "likes": 42,
        "timeAgo": "2h",
        "comments": [
            {
                **_reply("c1", "david_tiw", DAVID_AVATAR, "Amazing shot! Self comment because this is my own photo.", 9, "1h"),
                "replies": [
                    _reply("r1", "isaactanlishung", ISAAC_AVATAR, "Thanks! Mirrorless camera with a 24-70mm lens.", 3, "45m"),
                    _reply("r2", "david_tiw", DAVID_AVATAR, "Do check out his work, he does UI/UX design and photoshoots.", 2, "30m"),
                ],
            },
            {
                **_reply("c2", "david_tiw", DAVID_AVATAR, "Stack notes", 3, "1h"),
                "replies": [
                    _reply("r1", "david_tiw", DAVID_AVATAR, "Project setup: a web client and a small API server.", 0, "45m"),
                    _reply("r2", "david_tiw", DAVID_AVATAR, "Client: router, query cache, schema validation, a tiny state store.", 2, "30m"),
                    _reply("r3", "david_tiw", DAVID_AVATAR, "Server: typed procedures over an in-memory feed.", 2, "30m"),
                    _reply("r4", "david_tiw", DAVID_AVATAR, "Picked these up to learn how they scale an app.", 2, "30m"),
                ],
            },
            {
                **_reply("c3", "david_tiw", DAVID_AVATAR, "How to use", 5, "1h"),
                "replies": [
                    _reply("r1", "david_tiw", DAVID_AVATAR, "Top right, \"+\" for image URL upload and caption.", 3, "45m"),
                    _reply("r2", "david_tiw", DAVID_AVATAR, "Double tap to like posts. Single tap on hearts for comments and replies.", 2, "30m"),
                    _reply("r3", "david_tiw", DAVID_AVATAR, "Click reply on a comment to mention the person you are replying to.", 2, "30m"),
                    _reply("r4", "david_tiw", DAVID_AVATAR, "That's it.", 2, "30m"),
                ],
            },
            {
                **_reply("c4", "david_tiw", DAVID_AVATAR, "WHY & HOW.md", 8, "1h"),
                "replies": [
                    _reply("r1", "david_tiw", DAVID_AVATAR, "Client architecture: file-based routing and a query cache for caching and error handling, schemas for type safety.", 3, "45m"),
                    _reply("r2", "david_tiw", DAVID_AVATAR, "Component control: routes fetch the data, components render it, and a small store keeps @reply state.", 2, "30m"),
                    _reply("r3", "david_tiw", DAVID_AVATAR, "Server architecture: typed procedures with explicit failure cases, on a lightweight framework that is easy to deploy.", 2, "30m"),
                    _reply("r4", "david_tiw", DAVID_AVATAR, "That's it.", 2, "30m"),
                ],
            },
        ],
        "totalCommentsCount": 18,
    },
    {
        "id": "2",
        "username": "dtiw.xyz",
        "userAvatar": DTIW_AVATAR,
        "image": "https://picsum.photos/seed/dtiw-portrait/800/1000",
        "caption": "A cooler David. Software Engineer, outdated portfolio at dtiw.xyz",
        "likes": 28,
        "timeAgo": "4h",
        "comments": [
            {
                **_reply("c1", "david_tiw", DAVID_AVATAR, "Personality", 5, "1h"),
                "replies": [
                    _reply("r1", "dtiw.xyz", DTIW_AVATAR, "INTJ. Straight forward, because I prefer truth and understanding.", 3, "45m"),
                    _reply("r2", "david_tiw", DAVID_AVATAR, "Mornings at work start with writing out the tasks for the day.", 2, "30m"),
                    _reply("r3", "david_tiw", DAVID_AVATAR, "Max social hours per day: 2.", 2, "30m"),
                ],
            },
            {
                **_reply("c2", "david_tiw", DAVID_AVATAR, "Hobbies", 5, "1h"),
                "replies": [
                    _reply("r1", "dtiw.xyz", DTIW_AVATAR, "F1. Go-kart. Sleep. Reading, on and off.", 3, "45m"),
                ],
            },
        ],
        "totalCommentsCount": 6,
    },
]


def seed_posts() -> List[Post]:
    """Fresh, validated copies of the fixture feed"""
    return [Post.model_validate(data) for data in SEED_POSTS]
