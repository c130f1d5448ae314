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
"""Tests for the SQLAlchemy QueryBuilder, Query and ResultIterator."""

from __future__ import annotations

import pytest
from sqlalchemy import func
from sqlalchemy.exc import MultipleResultsFound, NoResultFound
from sqlalchemy.orm import Session

from queryspec.adapters.sqlalchemy import Query, QueryBuilder, ResultIterator
from queryspec.ports.outbound import HydrationMode


@pytest.fixture
def qb(seeded_session: Session, user_model) -> QueryBuilder:
    return QueryBuilder(seeded_session, user_model, "e")


class TestQueryBuilderAliases:
    def test_root_alias_registered(self, qb: QueryBuilder):
        assert qb.root_alias == "e"
        assert qb.aliases == ("e",)
        assert " AS e" in str(qb.statement)

    def test_column_resolves_through_alias(self, qb: QueryBuilder):
        assert "e.name" in str(qb.column("e", "name") == "x")

    def test_unknown_alias_raises(self, qb: QueryBuilder):
        with pytest.raises(KeyError, match="Unknown alias 'p'"):
            qb.entity("p")

    def test_join_registers_alias(self, qb: QueryBuilder):
        qb.join("e", "posts", "p")
        assert qb.aliases == ("e", "p")
        assert "JOIN posts AS p" in str(qb.statement)

    def test_left_join_is_outer(self, qb: QueryBuilder):
        qb.join("e", "posts", "p", outer=True)
        assert "LEFT OUTER JOIN posts AS p" in str(qb.statement)

    def test_duplicate_alias_rejected(self, qb: QueryBuilder):
        qb.join("e", "posts", "p")
        with pytest.raises(ValueError, match="already registered"):
            qb.join("e", "posts", "p")


class TestQueryBuilderMutators:
    def test_fresh_builder_has_no_where(self, qb: QueryBuilder):
        assert qb.where_clause is None

    def test_and_where_accumulates(self, qb: QueryBuilder):
        qb.and_where(qb.column("e", "active") == True)  # noqa: E712
        qb.and_where(qb.column("e", "role") == "admin")
        users = qb.get_query().execute()
        assert [u.name for u in users] == ["Alice"]

    def test_pagination_bounds(self, qb: QueryBuilder):
        qb.order_by(qb.column("e", "name").asc())
        qb.set_first_result(1)
        qb.set_max_results(2)
        assert qb.first_result == 1
        assert qb.max_results == 2
        assert [u.name for u in qb.get_query().execute()] == ["Bob", "Charlie"]

    def test_select_keeps_from_and_where(self, qb: QueryBuilder):
        qb.and_where(qb.column("e", "role") == "admin")
        qb.select(func.count())
        assert qb.get_query().get_single_scalar_result() == 2

    def test_add_select(self, qb: QueryBuilder):
        qb.add_select(qb.column("e", "role"))
        qb.and_where(qb.column("e", "name") == "Bob")
        row = qb.get_query().get_single_result()
        assert row[0].name == "Bob"
        assert row[1] == "user"


class TestQuery:
    def test_execute_returns_entities(self, qb: QueryBuilder):
        assert len(qb.get_query().execute()) == 4

    def test_join_on_collection_does_not_repeat_root(self, qb: QueryBuilder):
        qb.join("e", "posts", "p")
        users = qb.get_query().execute()
        assert sorted(u.name for u in users) == ["Alice", "Bob", "Diana"]

    def test_array_hydration(self, qb: QueryBuilder):
        qb.and_where(qb.column("e", "name") == "Alice")
        query = qb.get_query()
        query.set_hydration_mode(HydrationMode.ARRAY)
        [row] = query.execute()
        assert row["name"] == "Alice"
        assert row["role"] == "admin"

    def test_max_results_overrides_builder_limit(self, qb: QueryBuilder):
        qb.set_max_results(3)
        query = qb.get_query()
        query.set_max_results(1)
        assert len(query.execute()) == 1

    def test_execution_options_are_kept(self, qb: QueryBuilder):
        query = qb.get_query()
        query.set_execution_options(populate_existing=True)
        assert query.execution_options == {"populate_existing": True}
        assert len(query.execute()) == 4

    def test_single_result_errors_are_backend_native(self, qb: QueryBuilder):
        with pytest.raises(MultipleResultsFound):
            qb.get_query().get_single_result()
        qb.and_where(qb.column("e", "name") == "Nobody")
        with pytest.raises(NoResultFound):
            qb.get_query().get_single_result()

    def test_single_scalar_rejects_entity_rows(self, qb: QueryBuilder):
        qb.and_where(qb.column("e", "name") == "Alice")
        with pytest.raises(MultipleResultsFound, match="multiple columns"):
            qb.get_query().get_single_scalar_result()

    def test_scalar_result_prefixes_alias(self, qb: QueryBuilder):
        qb.and_where(qb.column("e", "name") == "Bob")
        [row] = qb.get_query().get_scalar_result()
        assert row["e_name"] == "Bob"
        assert row["e_age"] == 25

    def test_statement_is_query_type(self, qb: QueryBuilder):
        assert isinstance(qb.get_query(), Query)


class TestResultIterator:
    def test_yields_first_column(self, qb: QueryBuilder):
        qb.order_by(qb.column("e", "name").asc())
        with qb.get_query().iterate(batch_size=2) as rows:
            assert [u.name for u in rows] == ["Alice", "Bob", "Charlie", "Diana"]

    def test_exhaustion_closes(self, qb: QueryBuilder):
        rows = qb.get_query().iterate()
        assert isinstance(rows, ResultIterator)
        list(rows)
        assert rows.closed

    def test_early_close_stops_iteration(self, qb: QueryBuilder):
        rows = qb.get_query().iterate()
        next(rows)
        rows.close()
        assert rows.closed
        assert list(rows) == []

    def test_context_manager_closes_on_break(self, qb: QueryBuilder):
        with qb.get_query().iterate() as rows:
            for _ in rows:
                break
        assert rows.closed

    def test_array_mode_yields_dicts(self, qb: QueryBuilder):
        qb.and_where(qb.column("e", "name") == "Diana")
        query = qb.get_query()
        query.set_hydration_mode(HydrationMode.ARRAY)
        assert [row["name"] for row in query.iterate()] == ["Diana"]
