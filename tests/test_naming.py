"""
Naming utility unit tests.
"""
from __future__ import annotations

import pytest

from bake_helper.core.naming import camelize, humanize, plugin_split, underscore, variable


@pytest.mark.parametrize(
    "value,expected",
    [
        ("form", "Form"),
        ("request_handler", "RequestHandler"),
        ("RequestHandler", "RequestHandler"),
        ("flash message", "FlashMessage"),
        ("", ""),
    ],
)
def test_camelize(value, expected):
    assert camelize(value) == expected


def test_other_cases():
    assert underscore("BlogPosts") == "blog_posts"
    assert underscore("blog-posts") == "blog_posts"
    assert variable("blog_posts") == "blogPosts"
    assert humanize("blog_posts") == "Blog Posts"


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Posts", (None, "Posts")),
        ("Blog.Posts", ("Blog", "Posts")),
        ("Vendor/Blog.Posts", ("Vendor/Blog", "Posts")),
        ("Blog.Admin.Posts", ("Blog", "Admin.Posts")),
    ],
)
def test_plugin_split(name, expected):
    assert plugin_split(name) == expected
