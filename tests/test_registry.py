"""
Framework class registry unit tests.
"""
from __future__ import annotations

import pytest

from bake_helper.registry import ClassRegistry, RegistryError, default_framework_registry


def test_names_are_normalized():
    registry = ClassRegistry(["\\Cake/View/Helper/FormHelper"])
    assert "Cake\\View\\Helper\\FormHelper" in registry
    assert registry.is_registered("\\Cake\\View\\Helper\\FormHelper")


def test_register_without_replace():
    registry = ClassRegistry(["Cake\\ORM\\Table"])
    registry.register("Cake\\ORM\\Table")
    assert len(registry) == 1
    with pytest.raises(RegistryError):
        registry.register("Cake\\ORM\\Table", replace=False)


@pytest.mark.parametrize("name", ["", "\\", None])
def test_invalid_names(name):
    with pytest.raises(RegistryError):
        ClassRegistry().register(name)


def test_unregister():
    registry = ClassRegistry(["Cake\\ORM\\Table"])
    registry.unregister("Cake\\ORM\\Table")
    registry.unregister("Cake\\ORM\\Entity")
    assert "Cake\\ORM\\Table" not in registry


def test_list_classes_by_namespace():
    registry = ClassRegistry(["Cake\\ORM\\Table", "Cake\\ORM\\Entity", "Cake\\View\\View"])
    assert registry.list_classes("Cake/ORM") == ["Cake\\ORM\\Entity", "Cake\\ORM\\Table"]
    assert len(registry.list_classes()) == 3


def test_non_string_membership():
    assert 42 not in ClassRegistry(["Cake\\ORM\\Table"])


def test_default_registry_has_stock_components():
    registry = default_framework_registry()
    assert "Cake\\Controller\\Component\\FlashComponent" in registry
    assert "Cake\\View\\Helper\\FormHelper" in registry
    assert "App\\View\\Helper\\FormHelper" not in registry
