"""
Query construction for TCGdex requests.

A query either targets a single resource by id, or narrows a list with
filtering, pagination and sorting. The two are mutually exclusive:

    Query().with_id("swsh3-136")                      -> "swsh3-136"
    Query().with_filtering(["hp=100"]).with_sorting("name", Order.DESC)
                                                      -> "hp=100&sort:field=name&sort:order=DESC"

Whichever group is configured first wins. Later calls targeting the other
group are ignored, so the exclusivity holds regardless of call order.

Query reference: https://tcgdex.dev/rest/filtering-sorting-pagination
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum


class Order(str, Enum):
    """Sort direction."""

    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True, slots=True)
class ById:
    """Targets a single resource by its id."""

    id: str

    def render(self) -> str:
        return self.id


@dataclass(frozen=True, slots=True)
class ByFilter:
    """
    Narrows a resource list.

    Attributes:
        filtering: Filter terms joined with "&" (e.g. "hp=100&name=furret")
        pagination: Rendered pagination parameters, or ""
        sorting: Rendered sort parameters, or ""
    """

    filtering: str = ""
    pagination: str = ""
    sorting: str = ""

    def render(self) -> str:
        return "&".join(part for part in (self.filtering, self.pagination, self.sorting) if part)


QuerySpec = ById | ByFilter


@dataclass(frozen=True, slots=True)
class Query:
    """
    Immutable query builder.

    Every ``with_*`` call returns a new Query; the receiver is never
    modified. Render with ``str(query)`` or ``query.render()``.
    """

    spec: QuerySpec | None = None

    @property
    def id(self) -> str:
        return self.spec.id if isinstance(self.spec, ById) else ""

    @property
    def filtering(self) -> str:
        return self.spec.filtering if isinstance(self.spec, ByFilter) else ""

    @property
    def pagination(self) -> str:
        return self.spec.pagination if isinstance(self.spec, ByFilter) else ""

    @property
    def sorting(self) -> str:
        return self.spec.sorting if isinstance(self.spec, ByFilter) else ""

    def with_id(self, resource_id: str) -> "Query":
        """
        Target a single resource.

        No effect once filtering, pagination or sorting has been set.
        """
        if not resource_id or (isinstance(self.spec, ByFilter) and self.spec.render()):
            return self
        return Query(ById(resource_id))

    def with_filtering(self, terms: Iterable[str]) -> "Query":
        """
        Filter the list with ``field=value`` terms.

        Each term is cut at its first whitespace, so "hp=100 extra text"
        becomes "hp=100". No effect once an id has been set.

        Args:
            terms: Filter terms such as "name=furret" or "cardCount.total=201".
                A single string is taken as one term.
        """
        if isinstance(self.spec, ById):
            return self
        if isinstance(terms, str):
            terms = [terms]
        tokens = [term.split()[0] for term in terms if term.strip()]
        return self._with_filter(filtering="&".join(tokens))

    def with_pagination(self, page: int, items_per_page: int) -> "Query":
        """Request one page of the list. No effect once an id has been set."""
        if isinstance(self.spec, ById):
            return self
        pagination = f"pagination:page={page}&pagination:itemsPerPage={items_per_page}"
        return self._with_filter(pagination=pagination)

    def with_sorting(self, field: str, order: Order = Order.ASC) -> "Query":
        """Sort the list on ``field``. No effect once an id has been set."""
        if isinstance(self.spec, ById):
            return self
        sorting = f"sort:field={field}&sort:order={Order(order).value}"
        return self._with_filter(sorting=sorting)

    def render(self) -> str:
        """Render as ``id``, ``filtering``, ``pagination``, ``sorting`` joined by "&"."""
        return self.spec.render() if self.spec is not None else ""

    def is_empty(self) -> bool:
        return not self.render()

    def _with_filter(self, **changes: str) -> "Query":
        current = self.spec if isinstance(self.spec, ByFilter) else ByFilter()
        updated = replace(current, **changes)
        # An all-empty filter does not lock out with_id
        return Query(updated if updated.render() else None)

    def __str__(self) -> str:
        return self.render()
