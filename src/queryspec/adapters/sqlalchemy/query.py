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
"""Executable query over a synchronous SQLAlchemy ``Session``.

Single-row fetches surface SQLAlchemy's own ``NoResultFound`` and
``MultipleResultsFound``; mapping them onto the queryspec taxonomy is the
repository's job.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from sqlalchemy import Result, Row, Select, inspect
from sqlalchemy.exc import MultipleResultsFound
from sqlalchemy.orm import InstanceState, Mapper, Session

from queryspec.ports.outbound import HydrationMode


def _mapper_of(value: Any) -> Mapper[Any] | None:
    state = inspect(value, raiseerr=False)
    return state.mapper if isinstance(state, InstanceState) else None


def _flatten(row: Row[Any], *, prefixed: bool = False) -> dict[str, Any]:
    """Expand a row into a dict of column values.

    Mapped instances contribute one key per column attribute, prefixed
    with the row key (``e_name``) when *prefixed* is set.
    """
    data: dict[str, Any] = {}
    for key, value in row._mapping.items():
        mapper = _mapper_of(value)
        if mapper is None:
            data[str(key)] = value
            continue
        for attr in mapper.column_attrs:
            data[f"{key}_{attr.key}" if prefixed else attr.key] = getattr(value, attr.key)
    return data


class ResultIterator(Iterator[Any]):
    """Forward-only, single-pass iterator over a live result cursor.

    The cursor is released when the rows are exhausted, when :meth:`close`
    is called, or when a ``with`` block around the iterator exits. A closed
    iterator is exhausted.
    """

    def __init__(self, result: Result[Any], hydrate: Callable[[Row[Any]], Any]) -> None:
        self._result = result
        self._rows = iter(result)
        self._hydrate = hydrate
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> ResultIterator:
        return self

    def __next__(self) -> Any:
        if self._closed:
            raise StopIteration
        try:
            row = next(self._rows)
        except StopIteration:
            self.close()
            raise
        return self._hydrate(row)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._result.close()

    def __enter__(self) -> ResultIterator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class Query:
    """A built statement bound to a session, ready to execute."""

    def __init__(self, session: Session, statement: Select[Any]) -> None:
        self._session = session
        self._statement = statement
        self._hydration_mode = HydrationMode.OBJECT
        self._max_results: int | None = None
        self._execution_options: dict[str, Any] = {}

    @property
    def statement(self) -> Select[Any]:
        if self._max_results is not None:
            return self._statement.limit(self._max_results)
        return self._statement

    @property
    def hydration_mode(self) -> HydrationMode:
        return self._hydration_mode

    @property
    def max_results(self) -> int | None:
        return self._max_results

    @property
    def execution_options(self) -> dict[str, Any]:
        return dict(self._execution_options)

    def set_hydration_mode(self, mode: HydrationMode) -> None:
        self._hydration_mode = HydrationMode(mode)

    def set_max_results(self, max_results: int | None) -> None:
        """Cap the number of returned rows, overriding any builder limit."""
        self._max_results = max_results

    def set_execution_options(self, **options: Any) -> None:
        self._execution_options.update(options)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute(self) -> list[Any]:
        """Return every result row, hydrated per the current mode."""
        return [self._hydrate(row) for row in self._result()]

    def get_single_result(self) -> Any:
        """Return the only result row.

        Raises:
            sqlalchemy.exc.NoResultFound: No row matched.
            sqlalchemy.exc.MultipleResultsFound: More than one row matched.
        """
        return self._hydrate(self._result().one())

    def get_single_scalar_result(self) -> Any:
        """Return the single column value of the only result row.

        Raises:
            sqlalchemy.exc.NoResultFound: No row matched.
            sqlalchemy.exc.MultipleResultsFound: More than one row matched,
                or the row holds more than one column.
        """
        row = self._execute().one()
        if len(row) != 1 or _mapper_of(row[0]) is not None:
            raise MultipleResultsFound(
                "The query returned a row containing multiple columns. "
                "Change the query or use a different result function like get_scalar_result()."
            )
        return row[0]

    def get_scalar_result(self) -> list[dict[str, Any]]:
        """Return every row flattened into column values, entities prefixed by alias."""
        return [_flatten(row, prefixed=True) for row in self._execute()]

    def iterate(self, batch_size: int | None = None) -> ResultIterator:
        """Lazily yield the first column group of each row.

        Rows are fetched from the cursor in batches of *batch_size* when set.
        Iteration is row-level: rows are not de-duplicated, so joining a
        collection yields the root entity once per joined row.
        """
        options = {"yield_per": batch_size} if batch_size else {}
        if self._hydration_mode is HydrationMode.ARRAY:
            return ResultIterator(self._execute(**options), _flatten)
        return ResultIterator(self._execute(**options), lambda row: row[0])

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _execute(self, **options: Any) -> Result[Any]:
        return self._session.execute(
            self.statement,
            execution_options={**self._execution_options, **options},
        )

    def _result(self) -> Result[Any]:
        result = self._execute()
        # Entity-only selections are de-duplicated by identity in both hydration
        # modes, so joining a collection does not repeat the root entity.
        if self._selects_entities_only():
            return result.unique()
        return result

    def _selects_entities_only(self) -> bool:
        return all(isinstance(desc["type"], type) for desc in self._statement.column_descriptions)

    def _hydrate(self, row: Row[Any]) -> Any:
        if self._hydration_mode is HydrationMode.ARRAY:
            return _flatten(row)
        return row[0] if len(row) == 1 else tuple(row)
