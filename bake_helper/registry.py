"""
Registry of built-in framework classes.

Identity resolution asks this registry whether a generated name refers to
one of the framework's own classes instead of probing the class loader.
"""

from typing import Iterable, List, Optional, Set

from .core.errors import BakeHelperError
from .logging_config import get_logger

logger = get_logger(__name__)


class RegistryError(BakeHelperError):
    """Exception raised for registry-related errors."""

    pass


def normalize_class_name(name: str) -> str:
    """Use ``\\`` separators and drop leading/trailing separators."""
    return name.replace("/", "\\").strip("\\")


class ClassRegistry:
    """Set of fully qualified class names known to exist."""

    def __init__(self, classes: Optional[Iterable[str]] = None):
        """
        Initialize registry.

        Args:
            classes: Fully qualified class names to register up front
        """
        self._classes: Set[str] = set()
        for name in classes or ():
            self.register(name)

    def register(self, class_name: str, replace: bool = True):
        """
        Register a fully qualified class name.

        Args:
            class_name: Name such as ``Cake\\View\\Helper\\FormHelper``
            replace: If False, registering a known name raises

        Raises:
            RegistryError: If the name is empty, or already known and
                ``replace`` is False
        """
        if not isinstance(class_name, str):
            raise RegistryError(f"Class name must be a string, got {type(class_name).__name__}")

        key = normalize_class_name(class_name)
        if not key:
            raise RegistryError("Class name must not be empty")

        if key in self._classes and not replace:
            raise RegistryError(f"Class already registered: {key}")

        self._classes.add(key)

    def unregister(self, class_name: str):
        """Remove a class name, ignoring names that are not registered."""
        self._classes.discard(normalize_class_name(class_name))

    def is_registered(self, class_name: str) -> bool:
        return normalize_class_name(class_name) in self._classes

    def __contains__(self, class_name: object) -> bool:
        return isinstance(class_name, str) and self.is_registered(class_name)

    def __len__(self) -> int:
        return len(self._classes)

    def list_classes(self, namespace: Optional[str] = None) -> List[str]:
        """
        List registered classes, optionally only those below a namespace.

        Args:
            namespace: Namespace prefix such as ``Cake\\View``

        Returns:
            Sorted class names
        """
        if namespace is None:
            return sorted(self._classes)
        prefix = normalize_class_name(namespace) + "\\"
        return sorted(name for name in self._classes if name.startswith(prefix))


# Stock classes shipped with the framework that bake may reference
FRAMEWORK_CLASSES = (
    "Cake\\Controller\\Component\\AuthComponent",
    "Cake\\Controller\\Component\\CookieComponent",
    "Cake\\Controller\\Component\\CsrfComponent",
    "Cake\\Controller\\Component\\FlashComponent",
    "Cake\\Controller\\Component\\PaginatorComponent",
    "Cake\\Controller\\Component\\RequestHandlerComponent",
    "Cake\\Controller\\Component\\SecurityComponent",
    "Cake\\Controller\\Controller",
    "Cake\\ORM\\Behavior\\CounterCacheBehavior",
    "Cake\\ORM\\Behavior\\TimestampBehavior",
    "Cake\\ORM\\Behavior\\TranslateBehavior",
    "Cake\\ORM\\Behavior\\TreeBehavior",
    "Cake\\ORM\\Entity",
    "Cake\\ORM\\Table",
    "Cake\\View\\Helper\\BreadcrumbsHelper",
    "Cake\\View\\Helper\\FlashHelper",
    "Cake\\View\\Helper\\FormHelper",
    "Cake\\View\\Helper\\HtmlHelper",
    "Cake\\View\\Helper\\NumberHelper",
    "Cake\\View\\Helper\\PaginatorHelper",
    "Cake\\View\\Helper\\TextHelper",
    "Cake\\View\\Helper\\TimeHelper",
    "Cake\\View\\Helper\\UrlHelper",
    "Cake\\View\\View",
)


def default_framework_registry() -> ClassRegistry:
    """Create a registry holding the stock framework classes."""
    registry = ClassRegistry(FRAMEWORK_CLASSES)
    logger.debug("Framework registry created with %d classes", len(registry))
    return registry
