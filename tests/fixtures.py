"""
Shared test constants and helpers.
"""

AVATAR = "https://i.pravatar.cc/150?img=5"
IMAGE = "https://picsum.photos/seed/test-post/800/1000"

# 2023-11-14T22:13:20Z in milliseconds
T0 = 1_700_000_000_000


class FixedClock:
    """Millisecond clock that only moves when told to"""

    def __init__(self, now: int = T0):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1) -> None:
        self.now += ms


def snapshot(store):
    """Plain-data copy of the whole feed, for before/after comparisons"""
    return [post.model_dump() for post in store.list_posts()]
