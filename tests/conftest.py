from __future__ import annotations

import pytest

from bake_helper import BakeHelper
from bake_helper.core.schema import Association, SchemaColumn, Table, TableSchema


@pytest.fixture()
def articles_schema() -> TableSchema:
    return TableSchema(
        [
            SchemaColumn("id", "integer", null=False),
            SchemaColumn("title", "string", length=255),
            SchemaColumn("body", "text"),
            SchemaColumn("author_id", "integer"),
            SchemaColumn("thumbnail", "binary"),
            SchemaColumn("published", "boolean", default=False),
            SchemaColumn("created", "datetime"),
        ]
    )


@pytest.fixture()
def articles_table(articles_schema) -> Table:
    return Table(
        alias="Articles",
        schema=articles_schema,
        association_list=[
            Association("Authors", "BelongsTo", "Authors"),
            Association("ArticlesTags", "HasMany", "ArticlesTags"),
            Association("Comments", "HasMany", "Comments"),
            Association("Tags", "BelongsToMany", "Tags", junction_alias="ArticlesTags"),
            Association("TagsHasMany", "HasMany", "Tags"),
            Association("Thumbnail", "HasOne", "Thumbnails"),
        ],
    )


@pytest.fixture()
def helper() -> BakeHelper:
    return BakeHelper()
