"""
List formatting for generated source.

Renders keyed or ordered values as the body of an array literal, with the
indentation and quoting the scaffolding templates expect.
"""

import re
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from .core.config import FormattingOptions
from .core.naming import camelize
from .logging_config import get_logger

if TYPE_CHECKING:
    from .core.templates import TemplateEngine

logger = get_logger(__name__)

# Strings that count as numbers when used as keys: "1", " 2", "-3.5", "1e3"
_NUMERIC_KEY = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

Items = Union[Mapping[Any, Any], Sequence[Any]]


def is_numeric_key(key: Any) -> bool:
    """Return True if ``key`` is positional rather than a named key."""
    if isinstance(key, bool):
        return False
    if isinstance(key, (int, float)):
        return True
    return isinstance(key, str) and bool(_NUMERIC_KEY.match(key))


def _entries(items: Items) -> Iterable:
    if isinstance(items, Mapping):
        return items.items()
    return enumerate(items)


def _scalar(value: Any) -> str:
    # true renders as 1, false and None as empty text
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


def stringify_list(
    items: Items, options: Optional[FormattingOptions] = None, **overrides: Any
) -> str:
    """
    Return the items as the formatted body of an array literal.

    Named keys render as ``'key' => value``; numeric keys, including
    numeric looking strings, are left out. Values are not escaped.

    Args:
        items: Mapping of key to scalar, or a sequence of scalars
        options: Formatting options, defaults used when omitted
        **overrides: Individual options replacing those in ``options``

    Returns:
        The formatted entries, or an empty string for empty input
    """
    options = (options or FormattingOptions()).merge(**overrides)

    if not items:
        return ""

    rendered: List[str] = []
    for key, value in _entries(items):
        text = _scalar(value)
        if options.quotes:
            text = f"'{text}'"
        if not is_numeric_key(key):
            text = f"'{key}' => {text}"
        rendered.append(text)

    start = end = ""
    join = ", "
    if options.indent:
        start = "\n" + options.tab * options.indent
        join = "," + start
        end = "\n" + options.tab * (options.indent - 1)

    if options.trailing_comma:
        end = "," + end

    return start + join.join(rendered) + end


class ListFormatter:
    """Formats value lists and array properties with shared default options."""

    def __init__(
        self,
        options: Optional[FormattingOptions] = None,
        template_engine: Optional["TemplateEngine"] = None,
    ):
        """
        Initialize the formatter.

        Args:
            options: Default formatting options
            template_engine: Engine used to render ``array_property``
        """
        self.options = options or FormattingOptions()
        self._template_engine = template_engine

    @property
    def template_engine(self) -> "TemplateEngine":
        if self._template_engine is None:
            from .core.templates import get_default_template_engine

            self._template_engine = get_default_template_engine()
        return self._template_engine

    def stringify_list(self, items: Items, **overrides: Any) -> str:
        return stringify_list(items, self.options, **overrides)

    def array_property(
        self, name: str, values: Sequence[str] = (), options: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Render a class property holding a list of component or helper names.

        Args:
            name: The property name, e.g. ``helpers``
            values: Names to list, camelized before rendering
            options: Extra template variables; they win over ``name``/``value``

        Returns:
            Rendered property, or an empty string when ``values`` is empty
        """
        if not values:
            return ""

        context: Dict[str, Any] = {
            "name": name,
            "value": [camelize(value) for value in values],
        }
        context.update(options or {})

        logger.debug("Rendering array property %s with %d values", name, len(values))
        return self.template_engine.render_template("array_property", context)
