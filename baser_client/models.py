"""
Record types returned by the baserCMS Web API.

These are plain JSON objects; the TypedDicts only describe their shape.
Dates are ISO 8601 strings as sent by the server. Fields the server
currently always sends as null are typed Optional and left uninterpreted.
"""

from typing import Literal, Optional, TypedDict


ContentType = Literal["ContentFolder", "Page", "BlogContent", "MailContent"]
PublishStatus = Literal["publish", "all"]
ListType = Literal["index", "tree"]
SortDirection = Literal["asc", "desc"]

BLOG_PLUGIN = "BcBlog"


class Site(TypedDict):
    id: int
    main_site_id: Optional[int]
    name: str
    display_name: str
    title: str
    alias: str
    theme: str
    status: bool
    keyword: str
    description: str
    use_subdomain: bool
    relate_main_site: bool
    device: str
    lang: str
    same_main_url: bool
    auto_redirect: bool
    auto_link: bool
    domain_type: Optional[int]
    created: str
    modified: str


class Content(TypedDict):
    """A node of the content tree (nested set: lft < rght)."""

    id: int
    name: str
    plugin: str
    type: ContentType
    entity_id: int
    url: str
    site_id: int
    alias_id: Optional[int]
    main_site_content_id: Optional[int]
    parent_id: Optional[int]
    lft: int
    rght: int
    level: Optional[int]
    title: str
    description: str
    eyecatch: str
    author_id: int
    layout_template: str
    status: bool
    publish_begin: Optional[str]
    publish_end: Optional[str]
    self_status: bool
    self_publish_begin: Optional[str]
    self_publish_end: Optional[str]
    exclude_search: bool
    created_date: str
    modified_date: Optional[str]
    site_root: bool
    deleted_date: Optional[str]
    exclude_menu: bool
    blank_link: bool
    created: str
    modified: str


class ContentDetail(Content):
    site: Site


class ContentFolder(TypedDict):
    id: int
    folder_template: str
    page_template: str
    created: str
    modified: Optional[str]
    content: Content


class ContentFolderDetail(ContentFolder):
    content: ContentDetail  # type: ignore[misc]


class Page(TypedDict):
    id: int
    contents: str
    draft: str
    page_template: str
    modified: str
    created: str


class PageDetail(Page):
    content: ContentDetail


class SearchIndex(TypedDict):
    id: int
    type: str
    model: str
    model_id: int
    site_id: int
    content_id: int
    content_filter_id: Optional[int]
    lft: int
    rght: int
    title: Optional[str]
    detail: str
    url: str
    status: Optional[bool]
    priority: str
    publish_begin: Optional[str]
    publish_end: Optional[str]
    created: str
    modified: str


class BlogContent(TypedDict):
    id: int
    description: str
    template: str
    list_count: int
    list_direction: Literal["DESC", "ASC"]
    feed_count: int
    tag_use: bool
    comment_use: bool
    comment_approve: bool
    auth_captcha: bool
    widget_area: int
    eye_catch_size: str
    use_content: bool
    created: str
    modified: Optional[str]


class BlogContentDetail(BlogContent):
    content: ContentDetail


class BlogPost(TypedDict):
    id: int
    blog_content_id: int
    no: int
    name: Optional[str]
    title: str
    content: str
    blog_category_id: int
    user_id: int
    status: bool
    posted: str
    content_draft: str
    detail_draft: str
    publish_begin: Optional[str]
    publish_end: Optional[str]
    exclude_search: bool
    eye_catch: str
    created: str
    modified: str


class TokenPair(TypedDict):
    """Login response. Only access_token is kept by the client."""

    access_token: str
    refresh_token: str

