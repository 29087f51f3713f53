"""
Bake helper

Formatting and lookup helpers that turn model metadata into source
fragments for scaffolding templates.
"""

from .core import (
    AppConfig,
    Association,
    AssociationKind,
    BakeConfig,
    BakeHelperError,
    ConfigError,
    FormattingOptions,
    SchemaColumn,
    Table,
    TableSchema,
    TemplateEngine,
    TemplateError,
    load_config,
)
from .associations import AssociationFilter, AssociationResolver
from .fields import FieldCollection, filter_fields, get_field_accessibility
from .formatting import ListFormatter, stringify_list
from .identity import ClassIdentity, IdentityResolver
from .registry import ClassRegistry, RegistryError, default_framework_registry
from .validation import ValidationRule, ValidationTranslator, get_validation_methods
from .helper import BakeHelper

# Version info
__version__ = "0.1.0"

__all__ = [
    "BakeHelper",
    "BakeConfig",
    "AppConfig",
    "FormattingOptions",
    "load_config",
    "ListFormatter",
    "stringify_list",
    "AssociationFilter",
    "AssociationResolver",
    "ValidationRule",
    "ValidationTranslator",
    "get_validation_methods",
    "ClassIdentity",
    "IdentityResolver",
    "ClassRegistry",
    "default_framework_registry",
    "FieldCollection",
    "filter_fields",
    "get_field_accessibility",
    "Association",
    "AssociationKind",
    "SchemaColumn",
    "Table",
    "TableSchema",
    "TemplateEngine",
    "BakeHelperError",
    "ConfigError",
    "TemplateError",
    "RegistryError",
]
