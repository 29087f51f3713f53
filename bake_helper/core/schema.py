"""
Model metadata consumed by the helpers.

Defines the narrow interfaces the helpers read schema and association
information through, plus plain in-memory implementations of them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Protocol, runtime_checkable


class AssociationKind(str, Enum):
    """Relation kinds an association can have."""

    BELONGS_TO = "BelongsTo"
    HAS_ONE = "HasOne"
    HAS_MANY = "HasMany"
    BELONGS_TO_MANY = "BelongsToMany"


@dataclass(frozen=True)
class SchemaColumn:
    """A single table column as reported by the schema provider."""

    name: str
    type: str
    null: bool = True
    default: Optional[object] = None
    length: Optional[int] = None
    precision: Optional[int] = None
    comment: Optional[str] = None


@dataclass(frozen=True)
class Association:
    """A directed relation from one table to another."""

    name: str
    kind: str
    target_alias: str

    # Join table alias, only set for BelongsToMany
    junction_alias: Optional[str] = None

    def __post_init__(self):
        # Store the plain string so comparisons with "HasMany" work
        if isinstance(self.kind, AssociationKind):
            object.__setattr__(self, "kind", self.kind.value)


@runtime_checkable
class SchemaProvider(Protocol):
    """Column lookups for one table."""

    def column_type(self, field_name: str) -> Optional[str]: ...

    def column(self, field_name: str) -> Optional[SchemaColumn]: ...


@runtime_checkable
class AssociationSource(Protocol):
    """Associations of one table, queryable by kind or name."""

    def type(self, kind: str) -> List[Association]: ...

    def get(self, name: str) -> Association: ...


class TableSchema:
    """In-memory schema provider backed by SchemaColumn records."""

    def __init__(self, columns: Iterable[SchemaColumn] = ()):
        self._columns: Dict[str, SchemaColumn] = {}
        for column in columns:
            self.add_column(column)

    @classmethod
    def from_types(cls, types: Dict[str, str]) -> "TableSchema":
        """Build a schema from a ``{column: type}`` mapping."""
        return cls(SchemaColumn(name=name, type=type_) for name, type_ in types.items())

    def add_column(self, column: SchemaColumn) -> None:
        """Add a column to this schema."""
        self._columns[column.name] = column

    def columns(self) -> List[str]:
        """Column names in declaration order."""
        return list(self._columns)

    def column(self, field_name: str) -> Optional[SchemaColumn]:
        return self._columns.get(field_name)

    def column_type(self, field_name: str) -> Optional[str]:
        column = self._columns.get(field_name)
        return column.type if column else None


class AssociationCollection:
    """In-memory association source preserving declaration order."""

    def __init__(self, associations: Iterable[Association] = ()):
        self._items: Dict[str, Association] = {}
        for association in associations:
            self.add(association)

    def add(self, association: Association) -> None:
        self._items[association.name] = association

    def type(self, kind: str) -> List[Association]:
        """All associations of the given kind, in declaration order."""
        if isinstance(kind, AssociationKind):
            kind = kind.value
        return [a for a in self._items.values() if a.kind == kind]

    def get(self, name: str) -> Association:
        """
        Get an association by name.

        Raises:
            KeyError: If no association has that name
        """
        return self._items[name]

    def __iter__(self):
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class Table:
    """Minimal model handle: alias, schema, associations and behaviors."""

    alias: str
    schema: TableSchema = field(default_factory=TableSchema)
    association_list: List[Association] = field(default_factory=list)
    primary_key: List[str] = field(default_factory=lambda: ["id"])
    behaviors: List[str] = field(default_factory=list)

    def __post_init__(self):
        self._associations = AssociationCollection(self.association_list)

    def associations(self) -> AssociationCollection:
        return self._associations

    def association(self, name: str) -> Association:
        return self._associations.get(name)

    def has_behavior(self, name: str) -> bool:
        return name in self.behaviors
