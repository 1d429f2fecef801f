"""
baserCMS API Client - main facade for the read endpoints.

Domain-specific modules hold the endpoint definitions; this class
exposes them both as sub-clients and as flat methods.
"""

from typing import Optional, Dict, Any, List

from ..models import (
    BlogContent,
    BlogContentDetail,
    BlogPost,
    Content,
    ContentDetail,
    ContentFolder,
    ContentFolderDetail,
    Page,
    PageDetail,
    SearchIndex,
)
from ._http import HTTPClient
from .contents import ContentsAPI
from .content_folders import ContentFoldersAPI
from .pages import PagesAPI
from .search_indexes import SearchIndexesAPI
from .blog import BlogAPI


class BaserClient:
    """
    Anonymous client for a baserCMS server.

    Usage (sub-clients):
        client = BaserClient("https://example.com")
        contents = client.contents.list(status="publish")
        post = client.blog.get_post(3)

    Usage (flat methods):
        contents = client.get_contents(status="publish")
        post = client.get_blog_post(3)

    Every method issues exactly one request and returns the payload found
    under the endpoint's envelope field. Filters are passed to the server
    as given.
    """

    def __init__(self, domain: str, verify_ssl: bool = True):
        """
        Initialize the API client.

        Args:
            domain: Server address, e.g. ``https://example.com``
            verify_ssl: Verify TLS certificates
        """
        self._http = HTTPClient(domain, verify_ssl)

        # Domain-specific API modules
        self.contents = ContentsAPI(self._http)
        self.content_folders = ContentFoldersAPI(self._http)
        self.pages = PagesAPI(self._http)
        self.search_indexes = SearchIndexesAPI(self._http)
        self.blog = BlogAPI(self._http)

    @property
    def domain(self) -> str:
        """Server address."""
        return self._http.domain

    @property
    def verify_ssl(self) -> bool:
        """Whether TLS certificates are verified."""
        return self._http.verify_ssl

    def request(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        method: str = "GET",
        token: Optional[str] = None,
    ) -> Any:
        """
        Send a request to any endpoint and return the decoded JSON body.

        Args:
            path: Endpoint path starting with ``/``
            params: Query parameters for GET, JSON body otherwise
            method: HTTP method
            token: Access token for the Authorization header
        """
        return self._http.request(path, params, method, token)

    # ========== Content Methods ==========

    def get_contents(self, **filters: Any) -> List[Content]:
        """List contents. See ``ContentsAPI.list`` for filters."""
        return self.contents.list(**filters)

    def get_content(self, content_id: int) -> ContentDetail:
        """Get a content with its site."""
        return self.contents.get(content_id)

    def get_next_content(self, content_id: int) -> ContentDetail:
        """Get the next content."""
        return self.contents.get_next(content_id)

    def get_prev_content(self, content_id: int) -> ContentDetail:
        """Get the previous content."""
        return self.contents.get_prev(content_id)

    def get_global_navi(self, content_id: int) -> List[Content]:
        """Get contents for the global navigation."""
        return self.contents.get_global_navi(content_id)

    def get_crumbs(self, content_id: int) -> List[Content]:
        """Get contents for the breadcrumb trail."""
        return self.contents.get_crumbs(content_id)

    def get_local_navi(self, content_id: int) -> List[Content]:
        """Get contents for the local navigation."""
        return self.contents.get_local_navi(content_id)

    # ========== Content Folder Methods ==========

    def get_content_folders(self, **filters: Any) -> List[ContentFolder]:
        """List content folders. See ``ContentFoldersAPI.list`` for filters."""
        return self.content_folders.list(**filters)

    def get_content_folder(self, content_folder_id: int) -> ContentFolderDetail:
        """Get a content folder."""
        return self.content_folders.get(content_folder_id)

    # ========== Page Methods ==========

    def get_pages(self, **filters: Any) -> List[Page]:
        """List pages. See ``PagesAPI.list`` for filters."""
        return self.pages.list(**filters)

    def get_page(self, page_id: int) -> PageDetail:
        """Get a page."""
        return self.pages.get(page_id)

    # ========== Search Index Methods ==========

    def get_search_indexes(self, **filters: Any) -> List[SearchIndex]:
        """Search the index. See ``SearchIndexesAPI.list`` for filters."""
        return self.search_indexes.list(**filters)

    # ========== Blog Methods ==========

    def get_blog_contents(self, **filters: Any) -> List[BlogContent]:
        """List blog contents. See ``BlogAPI.list_contents`` for filters."""
        return self.blog.list_contents(**filters)

    def get_blog_content(self, blog_content_id: int) -> BlogContentDetail:
        """Get a blog content."""
        return self.blog.get_content(blog_content_id)

    def get_blog_posts(self, **filters: Any) -> List[BlogPost]:
        """List blog posts. See ``BlogAPI.list_posts`` for filters."""
        return self.blog.list_posts(**filters)

    def get_blog_post(self, blog_post_id: int) -> BlogPost:
        """Get a blog post."""
        return self.blog.get_post(blog_post_id)

    # ========== Context Manager ==========

    def close(self) -> None:
        """Close the HTTP session."""
        self._http.close()

    def __enter__(self) -> "BaserClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def create_client(domain: str, verify_ssl: bool = True) -> BaserClient:
    """
    Create an anonymous client.

    Args:
        domain: Server address
        verify_ssl: Verify TLS certificates

    Returns:
        BaserClient instance
    """
    return BaserClient(domain, verify_ssl)
