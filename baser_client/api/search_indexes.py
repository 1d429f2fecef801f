"""
Search Indexes API (bc-search-index plugin).
"""

from typing import Optional, List

from ._http import HTTPClient, compact_params
from ..models import SearchIndex

SEARCH_INDEXES_PATH = "/baser/api/bc-search-index/search_indexes.json"


class SearchIndexesAPI:
    """API for the full-text search index."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(
        self,
        *,
        q: Optional[str] = None,
        site_id: Optional[int] = None,
        content_id: Optional[int] = None,
        folder_id: Optional[int] = None,
        content_filter_id: Optional[int] = None,
        type: Optional[str] = None,
        model: Optional[str] = None,
        priority: Optional[str] = None,
    ) -> List[SearchIndex]:
        """
        Search the index.

        Args:
            q: Search keyword
            site_id: Site ID (sent as ``s``)
            content_id: Content ID (sent as ``c``)
            folder_id: Folder ID (sent as ``f``)
            content_filter_id: Content filter ID (sent as ``cf``)
            type: Content type
            model: Model (entity) name (sent as ``m``)
            priority: Priority

        Returns:
            The ``searchIndexes`` array of the response
        """
        params = compact_params({
            "q": q,
            "s": site_id,
            "c": content_id,
            "f": folder_id,
            "cf": content_filter_id,
            "type": type,
            "m": model,
            "priority": priority,
        })
        return self._http.get_field("searchIndexes", SEARCH_INDEXES_PATH, params)
