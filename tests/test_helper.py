"""
BakeHelper facade tests.
"""
from __future__ import annotations

import json

from bake_helper import BakeConfig, BakeHelper, FormattingOptions
from bake_helper.associations import AssociationFilter
from bake_helper.registry import ClassRegistry


def test_default_helper_end_to_end(helper, articles_table):
    assert helper.alias_extractor(articles_table, "HasMany") == ["Comments"]
    assert helper.get_associated_table_alias(articles_table, "Authors") == "Authors"
    assert helper.class_info("Articles", "Model/Table", "Table").fqn == (
        "\\App\\Model\\Table\\ArticlesTable"
    )
    assert helper.get_field_accessibility(None, articles_table.primary_key) == {
        "*": "true",
        "id": "false",
    }
    assert helper.get_validation_methods("title", {"scalar": {"rule": "scalar"}}) == [
        "->scalar('title')"
    ]
    fields = helper.filter_fields(articles_table.schema.columns(), articles_table.schema, 3)
    assert list(fields) == ["id", "title", "author_id"]
    assert helper.field_data("body", articles_table.schema).type == "text"


def test_config_dict():
    helper = BakeHelper({"app_namespace": "Shop", "formatting": {"indent": 1, "tab": "\t"}})
    assert helper.class_info("Orders", "Controller", "Controller").namespace == "Shop\\Controller"
    assert helper.stringify_list(["a"]) == "\n\t'a'\n"
    assert helper.stringify_list(["a"], indent=0) == "'a'"


def test_config_file(tmp_path):
    path = tmp_path / "bake.json"
    path.write_text(json.dumps({"app_namespace": "Blog", "framework_classes": []}))
    helper = BakeHelper(path)
    # empty registry: stock framework classes no longer override
    assert helper.class_info("Flash", "Controller/Component", "Component").namespace == (
        "Blog\\Controller\\Component"
    )


def test_config_object_and_injected_collaborators(articles_table):
    calls = []

    class NoopFilter(AssociationFilter):
        def filter_has_many_associations_aliases(self, table, aliases):
            calls.append(list(aliases))
            return list(aliases)

    helper = BakeHelper(
        BakeConfig(formatting=FormattingOptions(indent=0)),
        association_filter=NoopFilter(),
        framework_classes=ClassRegistry(["Cake\\View\\Helper\\ChartHelper"]),
    )
    assert helper.alias_extractor(articles_table, "HasMany") == ["ArticlesTags", "Comments", "Tags"]
    assert calls == [["ArticlesTags", "Comments", "Tags"]]
    assert helper.class_info("Chart", "View/Helper", "Helper").namespace == "Cake\\View\\Helper"
    assert helper.class_info("Form", "View/Helper", "Helper").namespace == "App\\View\\Helper"
    assert helper.stringify_list({"a": "b"}) == "'a' => 'b'"


def test_array_property(helper):
    assert helper.array_property("components", []) == ""
    result = helper.array_property("components", ["request_handler", "flash"])
    assert "public $components = [\n        'RequestHandler',\n        'Flash'\n    ];" in result


def test_filter_fields_custom_types(helper, articles_table):
    schema = articles_table.schema
    assert "body" in list(helper.filter_fields(schema.columns(), schema, filter_types=["binary"]))
