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
"""Repository that builds and executes queries from specifications."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, Self, TypeVar, cast, get_args, get_origin

import structlog
from sqlalchemy.exc import MultipleResultsFound, NoResultFound
from sqlalchemy.orm import Session

from queryspec.adapters.sqlalchemy.builder import QueryBuilder
from queryspec.adapters.sqlalchemy.query import Query, ResultIterator
from queryspec.core.config import Config, config_properties
from queryspec.filter.filter import Filter
from queryspec.kernel.exceptions import InvalidArgumentError, NonUniqueResultError, NoResultError, type_name
from queryspec.ports.outbound import QueryBuilderPort
from queryspec.query.modifier import QueryModifier
from queryspec.result.modifier import ResultModifier, ResultModifierCollection

T = TypeVar("T")

logger = structlog.get_logger("queryspec.repository")

ModifierArg = ResultModifier | Sequence[ResultModifier] | None


@config_properties(prefix="queryspec.repository")
@dataclass
class RepositoryProperties:
    """Repository defaults bound from ``queryspec.repository``.

    Attributes:
        default_alias: Alias of the root entity when none is given.
        iterate_batch_size: Rows fetched per round trip by ``iterate()``.
    """

    default_alias: str = "e"
    iterate_batch_size: int = 100


class SpecificationRepository(Generic[T]):
    """Match specifications against one entity type.

    Type Parameters:
        T: The entity type (any SQLAlchemy model).

    Usage::

        class UserRepository(SpecificationRepository[User]):
            pass  # entity type auto-extracted

        repo = UserRepository(session=session)
        admins = repo.match(Spec.eq("role", "admin") & Spec.order_by("name"))
        alice = repo.match_one_or_null_result(Spec.eq("name", "Alice"))
    """

    _entity_type: type | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for base in getattr(cls, "__orig_bases__", []):
            if get_origin(base) is SpecificationRepository:
                args = get_args(base)
                if args and not isinstance(args[0], TypeVar):
                    cls._entity_type = args[0]
                break

    def __init__(
        self,
        model: type[T] | None = None,
        session: Session | None = None,
        *,
        alias: str | None = None,
        properties: RepositoryProperties | None = None,
    ) -> None:
        resolved = model or getattr(type(self), "_entity_type", None)
        if resolved is None:
            raise TypeError(
                f"{type(self).__name__} requires either SpecificationRepository[Entity] "
                "declaration or explicit model argument"
            )
        properties = properties or RepositoryProperties()
        self._model: type[T] = cast(type[T], resolved)
        self._session = session
        self._alias = alias or properties.default_alias
        self._batch_size = properties.iterate_batch_size

    @classmethod
    def from_config(cls, config: Config, model: type[T] | None = None, session: Session | None = None) -> Self:
        """Create a repository using ``queryspec.repository`` settings from *config*."""
        return cls(model, session, properties=config.bind(RepositoryProperties))

    @property
    def model(self) -> type[T]:
        return self._model

    @property
    def alias(self) -> str:
        """The default alias used when a call does not pass its own."""
        return self._alias

    def set_alias(self, alias: str) -> Self:
        self._alias = alias
        return self

    def _require_session(self) -> Session:
        """Return the session or raise if none is configured."""
        if self._session is None:
            raise RuntimeError("No Session configured; pass one to the repository")
        return self._session

    # ------------------------------------------------------------------
    # Result contracts
    # ------------------------------------------------------------------

    def match(self, specification: Any, modifier: ModifierArg = None, *, alias: str | None = None) -> list[Any]:
        """Return every result matching *specification*."""
        return self.get_query(specification, modifier, alias).execute()

    def match_single_result(
        self, specification: Any, modifier: ModifierArg = None, *, alias: str | None = None
    ) -> Any:
        """Return the one result matching *specification*.

        Raises:
            NoResultError: Nothing matched.
            NonUniqueResultError: More than one result matched.
        """
        query = self.get_query(specification, modifier, alias)
        try:
            return query.get_single_result()
        except MultipleResultsFound as exc:
            raise self._mapped(NonUniqueResultError, exc) from exc
        except NoResultFound as exc:
            raise self._mapped(NoResultError, exc) from exc

    def match_one_or_null_result(
        self, specification: Any, modifier: ModifierArg = None, *, alias: str | None = None
    ) -> Any | None:
        """Return the one result matching *specification*, or ``None``.

        Raises:
            NonUniqueResultError: More than one result matched.
        """
        try:
            return self.match_single_result(specification, modifier, alias=alias)
        except NoResultError:
            return None

    def match_single_scalar_result(
        self, specification: Any, modifier: ModifierArg = None, *, alias: str | None = None
    ) -> Any:
        """Return the single scalar value selected by *specification*.

        Raises:
            NoResultError: Nothing matched.
            NonUniqueResultError: More than one row matched, or the row has
                more than one column.
        """
        query = self.get_query(specification, modifier, alias)
        try:
            return query.get_single_scalar_result()
        except MultipleResultsFound as exc:
            raise self._mapped(NonUniqueResultError, exc) from exc
        except NoResultFound as exc:
            raise self._mapped(NoResultError, exc) from exc

    def match_scalar_result(
        self, specification: Any, modifier: ModifierArg = None, *, alias: str | None = None
    ) -> list[dict[str, Any]]:
        """Return every matching row flattened into scalar column values."""
        return self.get_query(specification, modifier, alias).get_scalar_result()

    def iterate(
        self, specification: Any, modifier: ModifierArg = None, *, alias: str | None = None
    ) -> ResultIterator:
        """Lazily iterate the results matching *specification*.

        The returned iterator is single-pass. Close it (or use it in a
        ``with`` block) when abandoning iteration early::

            with repo.iterate(spec) as users:
                for user in users:
                    ...
        """
        return self.get_query(specification, modifier, alias).iterate(self._batch_size)

    # ------------------------------------------------------------------
    # Query building
    # ------------------------------------------------------------------

    def get_query(self, specification: Any, modifier: ModifierArg = None, alias: str | None = None) -> Query:
        """Build the query for *specification* and apply result modifiers."""
        query = self.get_query_builder(specification, alias).get_query()

        result_modifier = self._result_modifier(modifier)
        if result_modifier is not None:
            result_modifier.modify(query)

        logger.debug(
            "query_built",
            entity=self._model.__name__,
            alias=alias or self._alias,
            specification=type(specification).__name__,
            result_modifier=type(result_modifier).__name__ if result_modifier is not None else None,
        )
        return query

    def get_query_builder(self, specification: Any, alias: str | None = None) -> QueryBuilder:
        """Create a builder for the resolved alias and apply *specification* to it."""
        qb = self.create_query_builder(alias or self._alias)
        self.apply_specification(qb, specification, alias)
        return qb

    def create_query_builder(self, alias: str) -> QueryBuilder:
        return QueryBuilder(self._require_session(), self._model, alias)

    def apply_specification(
        self, qb: QueryBuilderPort, specification: Any = None, alias: str | None = None
    ) -> None:
        """Apply *specification*'s structure and predicate to *qb*.

        ``None`` leaves the builder untouched. The predicate is AND-ed onto
        any criteria already present on the builder.

        Raises:
            InvalidArgumentError: *specification* is neither a Filter nor a
                QueryModifier.
        """
        if specification is None:
            return

        if not isinstance(specification, (QueryModifier, Filter)):
            raise InvalidArgumentError(
                f'Expected argument of type "{type_name(QueryModifier)}" or "{type_name(Filter)}", '
                f'"{type_name(specification)}" given.'
            )

        alias = alias or self._alias

        if isinstance(specification, QueryModifier):
            specification.modify(qb, alias)

        if isinstance(specification, Filter):
            predicate = specification.get_filter(qb, alias)
            if predicate is not None:
                qb.and_where(predicate)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _result_modifier(modifier: ModifierArg) -> ResultModifier | None:
        if modifier is None or isinstance(modifier, ResultModifier):
            return modifier
        if isinstance(modifier, Sequence) and not isinstance(modifier, str):
            return ResultModifierCollection(*modifier)
        raise InvalidArgumentError(
            f'Expected argument of type "{type_name(ResultModifier)}" or a sequence of them, '
            f'"{type_name(modifier)}" given.'
        )

    def _mapped(self, error_cls: type[NoResultError | NonUniqueResultError], exc: Exception) -> Exception:
        logger.debug("result_error_mapped", entity=self._model.__name__, error=error_cls.__name__, cause=repr(exc))
        return error_cls(str(exc), context={"entity": self._model.__name__})
