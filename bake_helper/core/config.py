"""
Configuration management for the bake helpers.

Handles loading and merging configuration from JSON files,
providing defaults and validation for helper settings.
"""

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional, Union

from .errors import BakeHelperError
from ..logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(BakeHelperError):
    """Exception raised for configuration-related errors."""

    pass


@dataclass(frozen=True)
class FormattingOptions:
    """Options understood by the list formatter."""

    # Nesting depth, counted in ``tab`` units
    indent: int = 2
    tab: str = "    "
    trailing_comma: bool = False
    # Wrap scalar values in single quotes
    quotes: bool = True

    def __post_init__(self):
        if not isinstance(self.indent, int) or isinstance(self.indent, bool):
            raise ConfigError(f"indent must be an integer, got {self.indent!r}")
        if self.indent < 0:
            raise ConfigError(f"indent must be non-negative, got {self.indent}")

    def merge(self, **overrides: Any) -> "FormattingOptions":
        """
        Return a copy with the given options replaced.

        Args:
            **overrides: Option values keyed by option name

        Returns:
            New FormattingOptions instance

        Raises:
            ConfigError: If an unknown option name is given
        """
        if not overrides:
            return self

        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError(f"Unknown formatting options: {', '.join(unknown)}")

        return replace(self, **overrides)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FormattingOptions":
        """Build options from a dict, accepting ``trailingComma`` as an alias."""
        data = dict(data or {})
        if "trailingComma" in data:
            data["trailing_comma"] = data.pop("trailingComma")
        return cls().merge(**data)


class AppConfig:
    """Read-only view over nested application settings with dotted keys."""

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        """
        Initialize application configuration.

        Args:
            values: Nested settings, e.g. ``{"App": {"namespace": "App"}}``
        """
        self._values: Dict[str, Any] = dict(values or {})

    def read(self, key: str, default: Any = None) -> Any:
        """
        Read a setting by dotted key.

        Args:
            key: Dotted path such as ``App.namespace``
            default: Value returned when the key is missing

        Returns:
            The stored value or ``default``
        """
        node: Any = self._values
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def check(self, key: str) -> bool:
        """Return True if the dotted key is set."""
        sentinel = object()
        return self.read(key, sentinel) is not sentinel


@dataclass
class BakeConfig:
    """Configuration for a BakeHelper instance."""

    # Root namespace of the application being baked
    app_namespace: str = "App"

    # Root namespace of the framework's own classes
    framework_namespace: str = "Cake"

    # Fully qualified framework class names, overrides the stock registry
    framework_classes: Optional[FrozenSet[str]] = None

    formatting: FormattingOptions = field(default_factory=FormattingOptions)

    template_dir: Optional[str] = None

    # Unrecognized settings
    custom: Dict[str, Any] = field(default_factory=dict)

    def app_config(self) -> AppConfig:
        """Expose the namespace settings as an AppConfig."""
        return AppConfig(
            {
                "App": {"namespace": self.app_namespace},
                "Framework": {"namespace": self.framework_namespace},
            }
        )


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = {
            "app_namespace": "App",
            "framework_namespace": "Cake",
            "formatting": {},
        }

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> BakeConfig:
        """
        Get complete helper configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config = dict(self._defaults)

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration file %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> BakeConfig:
        """Convert dictionary to BakeConfig instance."""
        known_fields = {f.name for f in fields(BakeConfig)}

        config_args: Dict[str, Any] = {}
        custom_args: Dict[str, Any] = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        formatting = config_args.get("formatting")
        if formatting is None or isinstance(formatting, dict):
            config_args["formatting"] = FormattingOptions.from_dict(formatting)
        elif not isinstance(formatting, FormattingOptions):
            raise ConfigError(f"Invalid formatting options: {formatting!r}")

        classes = config_args.get("framework_classes")
        if classes is not None:
            config_args["framework_classes"] = frozenset(classes)

        if custom_args:
            logger.warning("Unrecognized settings kept as custom: %s", sorted(custom_args))
            existing_custom = dict(config_args.get("custom") or {})
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return BakeConfig(**config_args)

    def save_config(self, config: BakeConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict: Dict[str, Any] = {
            "app_namespace": config.app_namespace,
            "framework_namespace": config.framework_namespace,
            "template_dir": config.template_dir,
            "formatting": {
                "indent": config.formatting.indent,
                "tab": config.formatting.tab,
                "trailing_comma": config.formatting.trailing_comma,
                "quotes": config.formatting.quotes,
            },
        }
        if config.framework_classes is not None:
            config_dict["framework_classes"] = sorted(config.framework_classes)

        config_dict.update(config.custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: BakeConfig) -> list[str]:
        """
        Validate helper configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        for label, value in (
            ("app_namespace", config.app_namespace),
            ("framework_namespace", config.framework_namespace),
        ):
            if not value or not value.strip("\\/"):
                warnings.append(f"Empty {label}")
                continue
            for part in value.replace("/", "\\").strip("\\").split("\\"):
                if not part.isidentifier():
                    warnings.append(f"Invalid {label} segment: {part!r}")

        if config.formatting.tab.strip(" \t"):
            warnings.append(f"Tab unit contains non-whitespace: {config.formatting.tab!r}")

        for key in config.custom:
            warnings.append(f"Unknown setting ignored: {key}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> BakeConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)
