"""
Content Folders API.
"""

from typing import Optional, List

from ._http import HTTPClient, compact_params
from ..models import ContentFolder, ContentFolderDetail, PublishStatus

CONTENT_FOLDERS_PATH = "/baser/api/baser-core/content_folders.json"
CONTENT_FOLDER_PATH = "/baser/api/baser-core/content_folders/{content_folder_id}.json"


class ContentFoldersAPI:
    """API for content folders."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(
        self,
        *,
        status: Optional[PublishStatus] = None,
        limit: Optional[int] = None,
        page: Optional[int] = None,
        folder_template: Optional[str] = None,
        page_template: Optional[str] = None,
    ) -> List[ContentFolder]:
        """
        List content folders.

        Args:
            status: ``publish`` or ``all``
            limit: Items per page
            page: Page number
            folder_template: Folder template (fuzzy match)
            page_template: Page template (fuzzy match)

        Returns:
            The ``contentFolders`` array of the response
        """
        params = compact_params({
            "status": status,
            "limit": limit,
            "page": page,
            "folder_template": folder_template,
            "page_template": page_template,
        })
        return self._http.get_field("contentFolders", CONTENT_FOLDERS_PATH, params)

    def get(self, content_folder_id: int) -> ContentFolderDetail:
        """Get a content folder by ID."""
        return self._http.get_field(
            "contentFolder",
            CONTENT_FOLDER_PATH.format(content_folder_id=content_folder_id),
            {"contentFolderId": content_folder_id},
        )
