# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Mutable query builder over a SQLAlchemy 2.0 ``Select``.

SQLAlchemy statements are generative: every ``.where()`` returns a new
``Select``. Specifications, however, mutate a shared builder in a single
depth-first pass, so :class:`QueryBuilder` holds the current statement
and replaces it on every mutation.

Entities are referenced through named aliases. The root entity is
registered under the builder's root alias; each join registers its
target under the alias it introduces::

    qb = QueryBuilder(session, User, "e")
    qb.join("e", "posts", "p")
    qb.and_where(qb.column("p", "title") == "Hello")
    qb.set_first_result(10)
    users = qb.get_query().execute()
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, Select, select
from sqlalchemy.orm import Session, aliased
from sqlalchemy.orm.util import AliasedClass

from queryspec.adapters.sqlalchemy.query import Query


class QueryBuilder:
    """Mutable, call-scoped query builder rooted at one aliased entity."""

    def __init__(self, session: Session, entity: type[Any], alias: str) -> None:
        self._session = session
        self._root_alias = alias
        root = aliased(entity, name=alias)
        self._aliases: dict[str, AliasedClass[Any]] = {alias: root}
        self._statement: Select[Any] = select(root)
        self._first_result: int | None = None
        self._max_results: int | None = None

    @property
    def root_alias(self) -> str:
        return self._root_alias

    @property
    def aliases(self) -> tuple[str, ...]:
        """Registered aliases, root first, then joins in declaration order."""
        return tuple(self._aliases)

    @property
    def first_result(self) -> int | None:
        return self._first_result

    @property
    def max_results(self) -> int | None:
        return self._max_results

    @property
    def where_clause(self) -> ColumnElement[bool] | None:
        """The accumulated WHERE criteria, or ``None`` when unconstrained."""
        return self._statement.whereclause

    @property
    def statement(self) -> Select[Any]:
        """The statement with pagination bounds applied."""
        stmt = self._statement
        if self._first_result is not None:
            stmt = stmt.offset(self._first_result)
        if self._max_results is not None:
            stmt = stmt.limit(self._max_results)
        return stmt

    # ------------------------------------------------------------------
    # Alias resolution
    # ------------------------------------------------------------------

    def entity(self, alias: str) -> AliasedClass[Any]:
        """Return the aliased entity registered under *alias*."""
        try:
            return self._aliases[alias]
        except KeyError:
            raise KeyError(
                f"Unknown alias '{alias}'; registered aliases: {', '.join(self._aliases)}"
            ) from None

    def column(self, alias: str, field: str) -> Any:
        """Return the mapped attribute *field* of the entity behind *alias*."""
        return getattr(self.entity(alias), field)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def and_where(self, *predicates: Any) -> None:
        """AND *predicates* onto the existing WHERE criteria."""
        self._statement = self._statement.where(*predicates)

    def having(self, *predicates: Any) -> None:
        """AND *predicates* onto the existing HAVING criteria."""
        self._statement = self._statement.having(*predicates)

    def order_by(self, *clauses: Any) -> None:
        """Append ordering clauses after any existing ones."""
        self._statement = self._statement.order_by(*clauses)

    def group_by(self, *clauses: Any) -> None:
        """Append grouping clauses after any existing ones."""
        self._statement = self._statement.group_by(*clauses)

    def join(self, alias: str, field: str, new_alias: str, *, outer: bool = False) -> None:
        """Join the relationship *field* of *alias* and register it as *new_alias*."""
        if new_alias in self._aliases:
            raise ValueError(f"Alias '{new_alias}' is already registered")
        relationship = self.column(alias, field)
        target = aliased(relationship.property.mapper.class_, name=new_alias)
        self._statement = self._statement.join(relationship.of_type(target), isouter=outer)
        self._aliases[new_alias] = target

    def select(self, *columns: Any) -> None:
        """Replace the selected columns, keeping the current FROM clause."""
        self._statement = self._statement.with_only_columns(*columns, maintain_column_froms=True)

    def add_select(self, *columns: Any) -> None:
        """Add columns to the current selection."""
        self._statement = self._statement.add_columns(*columns)

    def set_first_result(self, first_result: int | None) -> None:
        self._first_result = first_result

    def set_max_results(self, max_results: int | None) -> None:
        self._max_results = max_results

    def get_query(self) -> Query:
        """Freeze the current state into an executable :class:`Query`."""
        return Query(self._session, self.statement)
