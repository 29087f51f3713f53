"""
Template engine wrapper for scaffolding fragments.

Provides a simple interface for Jinja2 template rendering
with the formatting helpers exposed as filters.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    TemplateNotFound,
    select_autoescape,
)

from .errors import BakeHelperError
from .naming import camelize, humanize, underscore, variable
from ..formatting import stringify_list
from ..logging_config import get_logger

logger = get_logger(__name__)


class TemplateError(BakeHelperError):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with scaffolding filters."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
        """
        self.template_dir = Path(template_dir) if template_dir else None
        self._templates: Dict[str, str] = {}
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with scaffolding filters."""
        # Files in template_dir shadow in-memory templates of the same name
        if self.template_dir and self.template_dir.exists():
            loader = ChoiceLoader(
                [FileSystemLoader(str(self.template_dir)), DictLoader(self._templates)]
            )
        else:
            loader = DictLoader(self._templates)

        self._env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            lstrip_blocks=True,
        )

        self._env.filters["camelize"] = camelize
        self._env.filters["underscore"] = underscore
        self._env.filters["humanize"] = humanize
        self._env.filters["variable"] = variable
        self._env.filters["stringify_list"] = stringify_list
        self._env.globals["stringify_list"] = stringify_list

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        logger.debug("Rendering template %s", template_name)
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """
        Render a template string with the given context.

        Args:
            template_string: Template content as string
            context: Variables to pass to template

        Returns:
            Rendered content
        """
        try:
            template = self._env.from_string(template_string)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template string: {e}") from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        self._templates[name] = content

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True


# Built-in element templates
ARRAY_PROPERTY_TEMPLATE = """\
    /**
     * {{ name | humanize }}
     *
     * @var array
     */
    public ${{ name }} = [{{ value | stringify_list(indent=indent | default(2)) }}];
"""


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine with the built-in element templates registered."""
    engine = TemplateEngine(template_dir)
    engine.add_template("array_property", ARRAY_PROPERTY_TEMPLATE)
    return engine


# Default template engine instance
_default_engine = None


def get_default_template_engine() -> TemplateEngine:
    """Get the default template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = create_template_engine()
    return _default_engine
