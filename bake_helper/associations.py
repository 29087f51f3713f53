"""
Association alias extraction.

Collects the aliases of a table's associations for use in generated
association declarations, dropping hasMany entries that a belongsToMany
already covers.
"""

from typing import Iterable, List, Optional

from .core.schema import AssociationKind
from .logging_config import get_logger

logger = get_logger(__name__)


class AssociationFilter:
    """Filters association aliases that would otherwise be declared twice."""

    def belongs_to_many_aliases(self, table) -> List[str]:
        """
        Aliases made redundant by the table's belongsToMany associations.

        Both the join table and the target of every belongsToMany count.

        Args:
            table: Model handle exposing ``associations()``

        Returns:
            Aliases in declaration order, without duplicates
        """
        aliases: List[str] = []
        for association in table.associations().type(AssociationKind.BELONGS_TO_MANY.value):
            for alias in (association.junction_alias, association.target_alias):
                if alias and alias not in aliases:
                    aliases.append(alias)
        return aliases

    def filter_has_many_associations_aliases(self, table, aliases: Iterable[str]) -> List[str]:
        """
        Remove hasMany aliases already represented by a belongsToMany.

        Args:
            table: Model handle the aliases were extracted from
            aliases: hasMany aliases in declaration order

        Returns:
            Remaining aliases, order kept, each at most once
        """
        excluded = set(self.belongs_to_many_aliases(table))
        result: List[str] = []
        for alias in aliases:
            if alias in excluded or alias in result:
                continue
            result.append(alias)
        return result


class AssociationResolver:
    """Extracts association aliases by kind."""

    def __init__(self, association_filter: Optional[AssociationFilter] = None):
        """
        Initialize the resolver.

        Args:
            association_filter: Filter used for hasMany aliases, created on
                first use when omitted
        """
        self._association_filter = association_filter

    @property
    def association_filter(self) -> AssociationFilter:
        if self._association_filter is None:
            self._association_filter = AssociationFilter()
        return self._association_filter

    def alias_extractor(self, table, kind: str) -> List[str]:
        """
        Extract the target aliases of all associations of one kind.

        hasMany aliases also covered by a belongsToMany are filtered out.

        Args:
            table: Model handle exposing ``associations()``
            kind: Association kind, e.g. ``HasMany``

        Returns:
            Target aliases in declaration order
        """
        if isinstance(kind, AssociationKind):
            kind = kind.value

        aliases = [association.target_alias for association in table.associations().type(kind)]
        if kind == AssociationKind.HAS_MANY.value:
            filtered = self.association_filter.filter_has_many_associations_aliases(table, aliases)
            if len(filtered) != len(aliases):
                logger.debug(
                    "Dropped hasMany aliases on %s: %s",
                    getattr(table, "alias", table),
                    [alias for alias in aliases if alias not in filtered],
                )
            return filtered

        return aliases

    def associated_table_alias(self, table, association_name: str) -> str:
        """Return the target alias of the named association."""
        return table.association(association_name).target_alias
