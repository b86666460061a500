from typing import Any

from core.registry import Param  # type: ignore
from core.tiers import AccessTier  # type: ignore


def _paging() -> dict[str, Param]:
    return {"start": Param("number"), "limit": Param("number")}


def get_tools() -> dict[str, Any]:
    """News, posts and community trends. All require the Standard plan."""
    return {
        "contentLatest": {
            "path": "/v1/content/latest",
            "title": "Latest news",
            "description": "Returns latest cryptocurrency news and Alexandria articles.",
            "tier": AccessTier.STANDARD,
            "params": {
                **_paging(),
                "id": Param("string"),
                "slug": Param("string"),
                "symbol": Param("string"),
                "news_type": Param("string"),
            },
        },
        "contentPostsTop": {
            "path": "/v1/content/posts/top",
            "title": "Top posts",
            "description": "Returns top cryptocurrency posts.",
            "tier": AccessTier.STANDARD,
            "params": _paging(),
        },
        "contentPostsLatest": {
            "path": "/v1/content/posts/latest",
            "title": "Latest posts",
            "description": "Returns latest cryptocurrency posts.",
            "tier": AccessTier.STANDARD,
            "params": _paging(),
        },
        "contentPostsComments": {
            "path": "/v1/content/posts/comments",
            "title": "Post comments",
            "description": "Returns comments for a specific post.",
            "tier": AccessTier.STANDARD,
            "params": {
                "id": Param("string", required=True, description="Post id"),
                **_paging(),
            },
        },
        "communityTrendingTopic": {
            "path": "/v1/community/trending/topic",
            "title": "Trending topics",
            "description": "Returns community trending topics.",
            "tier": AccessTier.STANDARD,
            "params": _paging(),
        },
        "communityTrendingToken": {
            "path": "/v1/community/trending/token",
            "title": "Trending tokens",
            "description": "Returns community trending tokens.",
            "tier": AccessTier.STANDARD,
            "params": _paging(),
        },
    }
