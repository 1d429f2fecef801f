"""
Contents API - the generic content tree and navigation helpers.
"""

from typing import Optional, List

from ._http import HTTPClient, compact_params
from ..models import Content, ContentDetail, ContentType, ListType, PublishStatus

CONTENTS_PATH = "/baser/api/baser-core/contents.json"
CONTENT_PATH = "/baser/api/baser-core/contents/{content_id}.json"
NEXT_CONTENT_PATH = "/baser/api/baser-core/contents/get_next/{content_id}.json"
PREV_CONTENT_PATH = "/baser/api/baser-core/contents/get_prev/{content_id}.json"
GLOBAL_NAVI_PATH = "/baser/api/baser-core/contents/get_global_navi/{content_id}.json"
CRUMBS_PATH = "/baser/api/baser-core/contents/get_crumbs/{content_id}.json"
LOCAL_NAVI_PATH = "/baser/api/baser-core/contents/get_local_navi/{content_id}.json"


class ContentsAPI:
    """
    API for content tree nodes.

    Handles:
    - Content listing and detail
    - Next / previous sibling content
    - Global navigation, breadcrumbs and local navigation lists
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize Contents API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    def list(
        self,
        *,
        list_type: Optional[ListType] = None,
        limit: Optional[int] = None,
        page: Optional[int] = None,
        id: Optional[int] = None,
        type: Optional[ContentType] = None,
        parent_id: Optional[int] = None,
        author_id: Optional[int] = None,
        site_id: Optional[int] = None,
        title: Optional[str] = None,
        name: Optional[str] = None,
        status: Optional[PublishStatus] = None,
        folder_id: Optional[int] = None,
    ) -> List[Content]:
        """
        List contents.

        Args:
            list_type: ``index`` (flat, server default) or ``tree``
            limit: Items per page
            page: Page number
            id: Content ID
            type: Content type
            parent_id: Parent content ID
            author_id: Author user ID
            site_id: Site ID
            title: Title (wildcard match)
            name: URL file name or title (wildcard match)
            status: ``publish`` for published contents only, or ``all``
            folder_id: Return every content below this folder

        Returns:
            The ``contents`` array of the response
        """
        params = {
            "list_type": list_type,
            "limit": limit,
            "page": page,
            "id": id,
            "type": type,
            "parent_id": parent_id,
            "author_id": author_id,
            "site_id": site_id,
            "title": title,
            "name": name,
            "status": status,
            "folder_id": folder_id,
        }
        return self._http.get_field("contents", CONTENTS_PATH, compact_params(params))

    def get(self, content_id: int) -> ContentDetail:
        """
        Get a content with its site.

        Args:
            content_id: Content ID

        Returns:
            The ``content`` record
        """
        return self._http.get_field(
            "content",
            CONTENT_PATH.format(content_id=content_id),
            {"contentId": content_id},
        )

    def get_next(self, content_id: int) -> ContentDetail:
        """Get the content following ``content_id``."""
        return self._http.get_field(
            "content",
            NEXT_CONTENT_PATH.format(content_id=content_id),
            {"contentId": content_id},
        )

    def get_prev(self, content_id: int) -> ContentDetail:
        """Get the content preceding ``content_id``."""
        return self._http.get_field(
            "content",
            PREV_CONTENT_PATH.format(content_id=content_id),
            {"contentId": content_id},
        )

    def get_global_navi(self, content_id: int) -> List[Content]:
        """Get the contents for the global navigation."""
        return self._http.get_field(
            "contents",
            GLOBAL_NAVI_PATH.format(content_id=content_id),
            {"contentId": content_id},
        )

    def get_crumbs(self, content_id: int) -> List[Content]:
        """Get the breadcrumb trail leading to ``content_id``."""
        return self._http.get_field(
            "contents",
            CRUMBS_PATH.format(content_id=content_id),
            {"contentId": content_id},
        )

    def get_local_navi(self, content_id: int) -> List[Content]:
        """Get the contents for the local navigation."""
        return self._http.get_field(
            "contents",
            LOCAL_NAVI_PATH.format(content_id=content_id),
            {"contentId": content_id},
        )

