"""
Blog API - blog contents and blog posts (bc-blog plugin).
"""

from typing import Optional, List

from ._http import HTTPClient, compact_params
from ..models import BlogContent, BlogContentDetail, BlogPost, PublishStatus, SortDirection

BLOG_CONTENTS_PATH = "/baser/api/bc-blog/blog_contents.json"
BLOG_CONTENT_PATH = "/baser/api/bc-blog/blog_contents/{blog_content_id}.json"
BLOG_POSTS_PATH = "/baser/api/bc-blog/blog_posts.json"
BLOG_POST_PATH = "/baser/api/bc-blog/blog_posts/{blog_post_id}.json"


class BlogAPI:
    """
    API for the blog plugin.

    Handles:
    - Blog contents (the blog containers)
    - Blog posts
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize Blog API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    def list_contents(
        self,
        *,
        status: Optional[PublishStatus] = None,
        limit: Optional[int] = None,
        page: Optional[int] = None,
        description: Optional[str] = None,
    ) -> List[BlogContent]:
        """
        List blog contents.

        Args:
            status: ``publish`` or ``all``
            limit: Items per page
            page: Page number
            description: Blog description (fuzzy match)

        Returns:
            The ``blogContents`` array of the response
        """
        params = compact_params({
            "status": status,
            "limit": limit,
            "page": page,
            "description": description,
        })
        return self._http.get_field("blogContents", BLOG_CONTENTS_PATH, params)

    def get_content(self, blog_content_id: int) -> BlogContentDetail:
        """Get a blog content, including its content node."""
        return self._http.get_field(
            "blogContent",
            BLOG_CONTENT_PATH.format(blog_content_id=blog_content_id),
            {"blogContentId": blog_content_id},
        )

    def list_posts(
        self,
        *,
        status: Optional[PublishStatus] = None,
        limit: Optional[int] = None,
        order: Optional[str] = None,
        direction: Optional[SortDirection] = None,
        id: Optional[int] = None,
        no: Optional[int] = None,
        title: Optional[str] = None,
        user_id: Optional[int] = None,
        blog_content_id: Optional[int] = None,
        site_id: Optional[int] = None,
        content_url: Optional[str] = None,
        blog_tag_id: Optional[int] = None,
        blog_category_id: Optional[int] = None,
        category: Optional[str] = None,
        tag: Optional[str] = None,
        year: Optional[str] = None,
        month: Optional[str] = None,
        day: Optional[str] = None,
        keyword: Optional[str] = None,
        author: Optional[str] = None,
    ) -> List[BlogPost]:
        """
        List blog posts.

        Args:
            status: ``publish`` or ``all``
            limit: Items per page
            order: Sort field (server default ``posted``)
            direction: ``asc`` or ``desc`` (server default ``desc``)
            id: Blog post ID
            no: Blog post number
            title: Title (fuzzy match)
            user_id: Author user ID
            blog_content_id: Blog content ID
            site_id: Site ID
            content_url: Blog URL (sent as ``contentUrl``)
            blog_tag_id: Tag ID
            blog_category_id: Category ID
            category: Category name
            tag: Tag name
            year: Posted year
            month: Posted month
            day: Posted day
            keyword: Searches title, summary and detail (fuzzy match)
            author: Author login name

        Returns:
            The ``blogPosts`` array of the response
        """
        params = compact_params({
            "status": status,
            "limit": limit,
            "order": order,
            "direction": direction,
            "id": id,
            "no": no,
            "title": title,
            "user_id": user_id,
            "blog_content_id": blog_content_id,
            "site_id": site_id,
            "contentUrl": content_url,
            "blog_tag_id": blog_tag_id,
            "blog_category_id": blog_category_id,
            "category": category,
            "tag": tag,
            "year": year,
            "month": month,
            "day": day,
            "keyword": keyword,
            "author": author,
        })
        return self._http.get_field("blogPosts", BLOG_POSTS_PATH, params)

    def get_post(self, blog_post_id: int) -> BlogPost:
        """Get a blog post by ID."""
        return self._http.get_field(
            "blogPost",
            BLOG_POST_PATH.format(blog_post_id=blog_post_id),
            {"blogPostId": blog_post_id},
        )
