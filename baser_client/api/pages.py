"""
Pages API - fixed pages.
"""

from typing import Optional, List

from ._http import HTTPClient, compact_params
from ..models import Page, PageDetail, PublishStatus

PAGES_PATH = "/baser/api/baser-core/pages.json"
PAGE_PATH = "/baser/api/baser-core/pages/{page_id}.json"


class PagesAPI:
    """API for fixed pages."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(
        self,
        *,
        status: Optional[PublishStatus] = None,
        limit: Optional[int] = None,
        page: Optional[int] = None,
        contents: Optional[str] = None,
        draft: Optional[str] = None,
    ) -> List[Page]:
        """
        List pages.

        Args:
            status: ``publish`` or ``all``
            limit: Items per page
            page: Page number
            contents: Body text (fuzzy match)
            draft: Draft text (fuzzy match)

        Returns:
            The ``pages`` array of the response
        """
        params = compact_params({
            "status": status,
            "limit": limit,
            "page": page,
            "contents": contents,
            "draft": draft,
        })
        return self._http.get_field("pages", PAGES_PATH, params)

    def get(self, page_id: int) -> PageDetail:
        """
        Get a page by ID.

        The response also carries the page's content node at the top
        level; only ``page`` is returned since it nests the same node.
        """
        return self._http.get_field(
            "page",
            PAGE_PATH.format(page_id=page_id),
            {"pageId": page_id},
        )
