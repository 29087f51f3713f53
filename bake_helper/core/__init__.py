"""
Core helper components.

Provides the configuration, naming, schema and template building blocks
used by the helpers.
"""

from .errors import BakeHelperError
from .config import (
    AppConfig,
    BakeConfig,
    ConfigError,
    ConfigManager,
    FormattingOptions,
    load_config,
)
from .naming import camelize, humanize, plugin_split, underscore, variable
from .schema import (
    Association,
    AssociationCollection,
    AssociationKind,
    SchemaColumn,
    SchemaProvider,
    Table,
    TableSchema,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    "BakeHelperError",
    # Configuration system
    "AppConfig",
    "BakeConfig",
    "ConfigError",
    "ConfigManager",
    "FormattingOptions",
    "load_config",
    # Naming utilities
    "humanize",
    "camelize",
    "variable",
    "plugin_split",
    "underscore",
    # Model metadata
    "Association",
    "AssociationCollection",
    "AssociationKind",
    "SchemaColumn",
    "SchemaProvider",
    "Table",
    "TableSchema",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
