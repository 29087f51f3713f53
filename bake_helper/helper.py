"""
Bake helper facade.

Bundles the formatting, association, validation, identity and field helpers
behind the single object the scaffolding templates are given.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from .associations import AssociationFilter, AssociationResolver
from .core.config import BakeConfig, load_config
from .core.schema import SchemaColumn
from .core.templates import TemplateEngine, create_template_engine
from .fields import FieldCollection, field_data, filter_fields, get_field_accessibility
from .formatting import Items, ListFormatter
from .identity import ClassIdentity, IdentityResolver
from .logging_config import get_logger
from .registry import ClassRegistry, default_framework_registry
from .validation import ValidationRule, ValidationTranslator

logger = get_logger(__name__)


class BakeHelper:
    """Formatting and lookup helpers for scaffolding templates."""

    def __init__(
        self,
        config: Optional[Union[BakeConfig, Dict[str, Any], str, Path]] = None,
        template_engine: Optional[TemplateEngine] = None,
        association_filter: Optional[AssociationFilter] = None,
        framework_classes: Optional[ClassRegistry] = None,
    ):
        """
        Initialize the helper.

        Args:
            config: BakeConfig, dict of overrides, or path to a JSON file
            template_engine: Engine for element templates
            association_filter: Filter for hasMany aliases, created lazily
                when omitted
            framework_classes: Known framework classes; taken from the
                config or the stock set when omitted
        """
        if isinstance(config, BakeConfig):
            self.config = config
        elif isinstance(config, (str, Path)):
            self.config = load_config(config_file=config)
        else:
            self.config = load_config(custom_config=config)

        if template_engine is None:
            template_dir = Path(self.config.template_dir) if self.config.template_dir else None
            template_engine = create_template_engine(template_dir)

        if framework_classes is None:
            if self.config.framework_classes is not None:
                framework_classes = ClassRegistry(self.config.framework_classes)
            else:
                framework_classes = default_framework_registry()

        self.formatter = ListFormatter(self.config.formatting, template_engine)
        self.associations = AssociationResolver(association_filter)
        self.validation = ValidationTranslator()
        self.identity = IdentityResolver(
            self.config.app_config(),
            framework_classes,
            self.config.framework_namespace,
        )
        logger.debug("BakeHelper initialized for namespace %s", self.config.app_namespace)

    # List formatting

    def stringify_list(self, items: Items, **options: Any) -> str:
        """Return ``items`` as a formatted multiline array body."""
        return self.formatter.stringify_list(items, **options)

    def array_property(
        self, name: str, value: Sequence[str] = (), options: Optional[Dict[str, Any]] = None
    ) -> str:
        """Render a component or helper list property."""
        return self.formatter.array_property(name, value, options)

    # Associations

    def alias_extractor(self, table, assoc: str) -> List[str]:
        """Extract association aliases, skipping hasMany ones covered by belongsToMany."""
        return self.associations.alias_extractor(table, assoc)

    def get_associated_table_alias(self, table, assoc: str) -> str:
        return self.associations.associated_table_alias(table, assoc)

    # Identity

    def class_info(self, class_ref: str, type_: str, suffix: str) -> ClassIdentity:
        return self.identity.class_info(class_ref, type_, suffix)

    # Fields and validation

    def filter_fields(
        self,
        fields: Iterable[str],
        schema,
        take_fields: Union[int, Sequence[str], None] = None,
        filter_types: Optional[Sequence[str]] = None,
        model=None,
    ) -> FieldCollection:
        if filter_types is None:
            return filter_fields(fields, schema, take_fields, model=model)
        return filter_fields(fields, schema, take_fields, filter_types, model)

    def field_data(self, field: str, schema) -> Optional[SchemaColumn]:
        return field_data(field, schema)

    def get_validation_methods(
        self, field: str, rules: Mapping[str, Union[ValidationRule, Dict[str, Any]]]
    ) -> List[str]:
        return self.validation.get_validation_methods(field, rules)

    def get_field_accessibility(
        self,
        fields: Union[Sequence[str], bool, None] = None,
        primary_key: Optional[Sequence[str]] = None,
    ) -> Dict[str, str]:
        return get_field_accessibility(fields, primary_key)
