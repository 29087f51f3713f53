"""
Class identity resolution.

Works out the fully qualified name, namespace and plugin of a class that
generated code refers to.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .core.config import AppConfig
from .core.naming import plugin_split
from .logging_config import get_logger
from .registry import ClassRegistry, default_framework_registry

logger = get_logger(__name__)

NS = "\\"


@dataclass(frozen=True)
class ClassIdentity:
    """Resolved identity of a class."""

    fqn: str
    namespace: str
    plugin: Optional[str]
    class_name: str
    name: str
    full_name: str

    def as_dict(self) -> Dict[str, Any]:
        """Return the identity keyed the way the templates read it."""
        return {
            "fqn": self.fqn,
            "namespace": self.namespace,
            "plugin": self.plugin,
            "class": self.class_name,
            "name": self.name,
            "fullName": self.full_name,
        }


def normalize_namespace(value: str) -> str:
    """Convert ``/`` to ``\\`` and strip separators from both ends."""
    return value.replace("/", NS).strip(NS)


class IdentityResolver:
    """Resolves class references against the app, plugins and the framework."""

    def __init__(
        self,
        app_config: AppConfig,
        framework_classes: Optional[ClassRegistry] = None,
        framework_namespace: Optional[str] = None,
    ):
        """
        Initialize the resolver.

        Args:
            app_config: Settings providing ``App.namespace``
            framework_classes: Known framework classes, stock set if omitted
            framework_namespace: Framework root namespace; read from
                ``Framework.namespace`` and defaulting to ``Cake``
        """
        self.app_config = app_config
        self.framework_classes = (
            framework_classes if framework_classes is not None else default_framework_registry()
        )
        if framework_namespace is None:
            framework_namespace = app_config.read("Framework.namespace", "Cake")
        self.framework_namespace = normalize_namespace(framework_namespace)

    def app_namespace(self) -> str:
        namespace = self.app_config.read("App.namespace")
        if not namespace:
            logger.warning("App.namespace is not configured, using the root namespace")
            return ""
        return namespace

    def class_info(self, class_ref: str, sub_namespace: str, suffix: str) -> ClassIdentity:
        """
        Return details about the given class.

        Plugin classes live below the plugin namespace, everything else
        below ``App.namespace``; names that match a registered framework
        class resolve to the framework namespace instead.

        Args:
            class_ref: ``Plugin.Name`` or ``Name``
            sub_namespace: Class type sub-namespace, e.g. ``Model/Table``
            suffix: Class name suffix, e.g. ``Table``

        Returns:
            The resolved ClassIdentity
        """
        plugin, name = plugin_split(class_ref)

        base = plugin if plugin is not None else self.app_namespace()
        base = normalize_namespace(base)
        sub = NS + normalize_namespace(sub_namespace)
        qualified_tail = sub + NS + name + suffix

        if (self.framework_namespace + qualified_tail) in self.framework_classes:
            logger.debug("%s resolves to framework class", class_ref)
            base = self.framework_namespace

        return ClassIdentity(
            fqn=NS + (base + qualified_tail).lstrip(NS),
            namespace=(base + sub).lstrip(NS),
            plugin=plugin,
            class_name=name + suffix,
            name=name,
            full_name=class_ref,
        )
