"""
Naming utilities for generated identifiers.

Handles the case conversions the scaffolding templates rely on and the
``Plugin.Name`` class reference convention.
"""

import re
from typing import Optional, Tuple

_UPPER_AFTER_WORD = re.compile(r"(?<=\w)([A-Z])")


def humanize(value: str, delimiter: str = "_") -> str:
    """
    Split on ``delimiter`` and upper-case the first letter of every word.

    Args:
        value: Identifier such as ``request_handler``
        delimiter: Word delimiter

    Returns:
        Space separated words, e.g. ``Request Handler``
    """
    words = str(value).replace(delimiter, " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def camelize(value: str, delimiter: str = "_") -> str:
    """
    Convert an identifier to CamelCase.

    ``request_handler`` becomes ``RequestHandler``; already camelized
    names are left alone apart from the first letter.
    """
    return humanize(value, delimiter).replace(" ", "")


def delimit(value: str, delimiter: str = "_") -> str:
    """Lower-case a CamelCased identifier, inserting ``delimiter`` between words."""
    return _UPPER_AFTER_WORD.sub(delimiter + r"\1", str(value)).lower()


def underscore(value: str) -> str:
    """Convert ``UserName`` or ``user-name`` to ``user_name``."""
    return delimit(str(value).replace("-", "_"), "_")


def variable(value: str) -> str:
    """Convert an identifier to lowerCamelCase."""
    camelized = camelize(underscore(value))
    return camelized[:1].lower() + camelized[1:]


def plugin_split(name: str) -> Tuple[Optional[str], str]:
    """
    Split a ``Plugin.Name`` reference into its parts.

    Only the first dot separates the plugin, so ``Vendor/Blog.Posts``
    yields ``("Vendor/Blog", "Posts")``.

    Args:
        name: Class reference, optionally plugin qualified

    Returns:
        Tuple of (plugin or None, name)
    """
    if "." in name:
        plugin, short_name = name.split(".", 1)
        return plugin, short_name
    return None, name
