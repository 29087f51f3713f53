"""
Field helpers for entity and form templates.
"""

from itertools import islice
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .core.schema import SchemaColumn
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_FILTER_TYPES = ("binary", "text")

# Columns maintained by the Tree behavior
TREE_FIELDS = ("lft", "rght")


class FieldCollection:
    """
    Lazy view over a list of field names.

    Filters and limits are kept as an ordered list of steps and replayed
    on every iteration, so the collection can be iterated any number of
    times and a ``take`` only caps the steps chained before it.
    """

    def __init__(self, fields: Iterable[str], steps: Sequence[Tuple[str, Any]] = ()):
        self._fields = list(fields)
        self._steps = tuple(steps)

    def __iter__(self) -> Iterator[str]:
        iterator: Iterator[str] = iter(self._fields)
        for kind, arg in self._steps:
            if kind == "filter":
                iterator = filter(arg, iterator)
            else:
                iterator = islice(iterator, arg)
        return iterator

    def _chain(self, kind: str, arg: Any) -> "FieldCollection":
        return FieldCollection(self._fields, self._steps + ((kind, arg),))

    def filter(self, predicate: Callable[[str], bool]) -> "FieldCollection":
        return self._chain("filter", predicate)

    def reject(self, predicate: Callable[[str], bool]) -> "FieldCollection":
        return self.filter(lambda field: not predicate(field))

    def take(self, size: int) -> "FieldCollection":
        return self._chain("take", max(size, 0))

    def to_list(self) -> List[str]:
        return list(self)


def get_field_accessibility(
    fields: Union[Sequence[str], bool, None] = None,
    primary_key: Optional[Sequence[str]] = None,
) -> Dict[str, str]:
    """
    Build the mass-assignment map of an entity.

    Args:
        fields: Accessible fields; ``False`` makes nothing accessible
        primary_key: Primary key columns, used when no fields are given

    Returns:
        Field name to ``"true"``/``"false"``
    """
    accessible: Dict[str, str] = {}

    if fields is False:
        return accessible

    if fields:
        for field in fields:
            accessible[field] = "true"
    elif primary_key:
        accessible["*"] = "true"
        for field in primary_key:
            accessible[field] = "false"

    return accessible


def filter_fields(
    fields: Iterable[str],
    schema,
    take_fields: Union[int, Sequence[str], None] = None,
    filter_types: Sequence[str] = DEFAULT_FILTER_TYPES,
    model=None,
) -> FieldCollection:
    """
    Return the fields to generate controls for.

    Args:
        fields: Candidate field names
        schema: Schema provider answering ``column_type(field)``
        take_fields: A count keeps the first N fields; a name or list of
            names keeps only those fields
        filter_types: Column types to leave out
        model: Optional model handle; Tree models also drop ``lft``/``rght``

    Returns:
        Lazy collection of field names in input order
    """
    excluded_types = frozenset(filter_types)
    collection = FieldCollection(fields).filter(
        lambda field: schema.column_type(field) not in excluded_types
    )

    if model is not None and model.has_behavior("Tree"):
        collection = collection.reject(lambda field: field in TREE_FIELDS)

    if take_fields:
        if isinstance(take_fields, int) and not isinstance(take_fields, bool):
            collection = collection.take(take_fields)
        else:
            names = [take_fields] if isinstance(take_fields, str) else take_fields
            wanted = frozenset(names)
            collection = collection.filter(lambda field: field in wanted)

    return collection


def field_data(field: str, schema) -> Optional[SchemaColumn]:
    """Return the schema column of a field."""
    return schema.column(field)
