"""
Shared fixtures for baser-client tests.

The sample records mirror a fresh baserCMS 5 install with the sample theme.
"""

import copy
from unittest.mock import MagicMock

import pytest
import requests

from baser_client.api import BaserClient


SITE = {
    "id": 1,
    "main_site_id": None,
    "name": "",
    "display_name": "sample",
    "title": "sample",
    "alias": "",
    "theme": "BcThemeSample",
    "status": True,
    "keyword": "",
    "description": "",
    "use_subdomain": False,
    "relate_main_site": False,
    "device": "",
    "lang": "",
    "same_main_url": False,
    "auto_redirect": False,
    "auto_link": False,
    "domain_type": None,
    "created": "2023-04-15T14:24:49+09:00",
    "modified": "2023-04-15T14:27:30+09:00",
}


def _content(id, name, type, entity_id, lft, rght, plugin="BaserCore", parent_id=1, level=1):
    return {
        "id": id,
        "name": name,
        "plugin": plugin,
        "type": type,
        "entity_id": entity_id,
        "url": f"/{name}" if type == "Page" else f"/{name}/",
        "site_id": 1,
        "alias_id": None,
        "main_site_content_id": None,
        "parent_id": parent_id,
        "lft": lft,
        "rght": rght,
        "level": level,
        "title": name.upper(),
        "description": "",
        "eyecatch": "",
        "author_id": 1,
        "layout_template": "",
        "status": True,
        "publish_begin": None,
        "publish_end": None,
        "self_status": True,
        "self_publish_begin": None,
        "self_publish_end": None,
        "exclude_search": False,
        "created_date": "2023-04-15T14:27:31+09:00",
        "modified_date": None,
        "site_root": False,
        "deleted_date": None,
        "exclude_menu": False,
        "blank_link": False,
        "created": "2023-04-15T14:24:49+09:00",
        "modified": "2023-04-15T14:27:31+09:00",
    }


CONTENTS = [
    _content(1, "", "ContentFolder", 1, 1, 18, parent_id=None, level=0),
    _content(2, "index", "Page", 1, 2, 3),
    _content(10, "news", "BlogContent", 1, 4, 5, plugin="BcBlog"),
    _content(5, "about", "Page", 2, 6, 7),
    _content(6, "service", "ContentFolder", 2, 8, 13),
    _content(7, "service1", "Page", 3, 9, 10, parent_id=6, level=2),
    _content(8, "service2", "Page", 4, 11, 12, parent_id=6, level=2),
    _content(9, "recruit", "Page", 5, 14, 15),
    _content(11, "contact", "MailContent", 1, 16, 17, plugin="BcMail"),
]

BLOG_CONTENT = {
    "id": 1,
    "description": "<p>News</p>",
    "template": "default",
    "list_count": 10,
    "list_direction": "DESC",
    "feed_count": 10,
    "tag_use": True,
    "comment_use": True,
    "comment_approve": False,
    "auth_captcha": True,
    "widget_area": 2,
    "eye_catch_size": "YTo0OntzOjExOiJ0aHVtYl93aWR0aCI7fQ==",
    "use_content": True,
    "created": "2023-04-15T14:24:49+09:00",
    "modified": None,
}

BLOG_POSTS = [
    {
        "id": id,
        "blog_content_id": 1,
        "no": id,
        "name": None,
        "title": f"Post {id}",
        "content": f"<p>Body {id}</p>",
        "blog_category_id": 1,
        "user_id": 1,
        "status": True,
        "posted": f"2023-04-1{id}T10:00:00+09:00",
        "content_draft": "",
        "detail_draft": "",
        "publish_begin": None,
        "publish_end": None,
        "exclude_search": False,
        "eye_catch": "",
        "created": "2023-04-15T14:24:49+09:00",
        "modified": "2023-04-15T14:24:49+09:00",
    }
    for id in (3, 2, 1)
]


@pytest.fixture
def contents():
    """The nine content nodes of the sample site."""
    return copy.deepcopy(CONTENTS)


@pytest.fixture
def content_detail():
    """Content 5 ("about") with its site."""
    content = copy.deepcopy(CONTENTS[3])
    content["site"] = copy.deepcopy(SITE)
    return content


@pytest.fixture
def blog_content_detail():
    """Blog content 1 with its content node."""
    blog_content = copy.deepcopy(BLOG_CONTENT)
    content = copy.deepcopy(CONTENTS[2])
    content["site"] = copy.deepcopy(SITE)
    blog_content["content"] = content
    return blog_content


@pytest.fixture
def blog_posts():
    return copy.deepcopy(BLOG_POSTS)


@pytest.fixture
def make_response():
    """Factory for fake ``requests.Response`` objects."""
    def factory(payload=None, status_code=200, url="https://localhost/"):
        response = MagicMock()
        response.status_code = status_code
        response.url = url
        response.json.return_value = payload
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(
                f"{status_code} Error", response=response
            )
        return response
    return factory


@pytest.fixture
def session():
    """Mock HTTP session."""
    return MagicMock()


@pytest.fixture
def client(session):
    """Anonymous client whose session is mocked."""
    client = BaserClient("https://localhost")
    client._http._session = session
    return client
