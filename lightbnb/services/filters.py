"""
Incremental SQL assembly with positional bind parameters.

Each value handed to the builder gets the next index and is rendered as
``:pN``. Clauses must be added in the order they are rendered (WHERE,
GROUP BY, HAVING, ORDER BY, LIMIT) so the N-th value always belongs to the
N-th placeholder in the finished statement.
"""
from typing import Any

_WHERE, _GROUP_BY, _HAVING, _ORDER_BY, _LIMIT = range(5)
_CLAUSE_NAMES = ("WHERE", "GROUP BY", "HAVING", "ORDER BY", "LIMIT")


class SqlBuilder:
    def __init__(self, select_sql: str):
        self._select = select_sql.strip()
        self._where: list[str] = []
        self._group_by: list[str] = []
        self._having: list[str] = []
        self._order_by: list[str] = []
        self._limit: str | None = None
        self._values: list[Any] = []
        self._stage = _WHERE

    def _enter(self, stage: int) -> None:
        if stage < self._stage:
            raise ValueError(
                f"cannot add a {_CLAUSE_NAMES[stage]} clause after {_CLAUSE_NAMES[self._stage]}"
            )
        self._stage = stage

    def _bind(self, template: str, values: tuple) -> str:
        names = []
        for value in values:
            self._values.append(value)
            names.append(f":p{len(self._values)}")
        return template.format(*names)

    def where(self, template: str, *values: Any) -> "SqlBuilder":
        """Add an AND-ed predicate; each ``{}`` in template takes one value."""
        self._enter(_WHERE)
        self._where.append(self._bind(template, values))
        return self

    def group_by(self, *columns: str) -> "SqlBuilder":
        self._enter(_GROUP_BY)
        self._group_by.extend(columns)
        return self

    def having(self, template: str, *values: Any) -> "SqlBuilder":
        """Add a post-aggregation predicate. Requires a GROUP BY."""
        if not self._group_by:
            raise ValueError("HAVING requires a GROUP BY clause")
        self._enter(_HAVING)
        self._having.append(self._bind(template, values))
        return self

    def order_by(self, *columns: str) -> "SqlBuilder":
        self._enter(_ORDER_BY)
        self._order_by.extend(columns)
        return self

    def limit(self, value: int) -> "SqlBuilder":
        self._enter(_LIMIT)
        if self._limit is not None:
            raise ValueError("LIMIT already set")
        self._limit = self._bind("{}", (value,))
        return self

    @property
    def values(self) -> tuple:
        return tuple(self._values)

    @property
    def params(self) -> dict[str, Any]:
        return {f"p{i}": value for i, value in enumerate(self._values, start=1)}

    def render(self) -> str:
        parts = [self._select]
        if self._where:
            parts.append("WHERE " + " AND ".join(self._where))
        if self._group_by:
            parts.append("GROUP BY " + ", ".join(self._group_by))
        if self._having:
            parts.append("HAVING " + " AND ".join(self._having))
        if self._order_by:
            parts.append("ORDER BY " + ", ".join(self._order_by))
        if self._limit is not None:
            parts.append("LIMIT " + self._limit)
        return "\n".join(parts)
