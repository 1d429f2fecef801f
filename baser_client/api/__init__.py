"""
baserCMS API Client Package.

Structure:
    - client.py: BaserClient facade and create_client
    - admin.py: BaserAdminClient (logged in) and create_admin_client
    - _http.py: Base HTTP client with session and envelope handling
    - contents.py: Content tree and navigation
    - content_folders.py: Content folders
    - pages.py: Fixed pages
    - search_indexes.py: Search index
    - blog.py: Blog contents and posts

Usage:
    from baser_client.api import create_client

    client = create_client("https://example.com")

    # Domain-specific
    posts = client.blog.list_posts(limit=5)

    # Flat methods
    posts = client.get_blog_posts(limit=5)
"""

from .client import BaserClient, create_client
from .admin import BaserAdminClient, create_admin_client
from ._http import HTTPClient
from .contents import ContentsAPI
from .content_folders import ContentFoldersAPI
from .pages import PagesAPI
from .search_indexes import SearchIndexesAPI
from .blog import BlogAPI

__all__ = [
    # Clients
    "BaserClient",
    "BaserAdminClient",
    "create_client",
    "create_admin_client",
    # HTTP layer
    "HTTPClient",
    # Domain APIs
    "ContentsAPI",
    "ContentFoldersAPI",
    "PagesAPI",
    "SearchIndexesAPI",
    "BlogAPI",
]
