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
"""Tests for the deprecated combined Having wrapper."""

from __future__ import annotations

from typing import Any

import pytest
from sqlalchemy import func

from queryspec.filter import Filter
from queryspec.kernel.exceptions import InvalidArgumentError
from queryspec.ports.outbound import QueryBuilderPort
from queryspec.query import GroupBy, Join
from queryspec.query.modifier import QueryModifier
from queryspec.specification import Having


class PostCountAtLeast(Filter):
    def __init__(self, minimum: int) -> None:
        self.minimum = minimum

    def get_filter(self, qb: QueryBuilderPort, alias: str) -> Any:
        return func.count(qb.column("p", "id")) >= self.minimum


def _having(child: Any) -> Having:
    with pytest.warns(DeprecationWarning):
        return Having(child)


class TestDeprecatedHaving:
    def test_warns_on_construction(self):
        with pytest.warns(DeprecationWarning, match="queryspec.query.Having"):
            Having("count(*) > 1")

    def test_is_query_modifier_only(self, repo):
        having = _having(PostCountAtLeast(1))
        assert isinstance(having, QueryModifier)
        assert not isinstance(having, Filter)
        assert having.get_filter(repo.create_query_builder("e"), "e") is None

    def test_filter_child_lands_in_having(self, repo):
        spec = Join("posts", "p") & GroupBy("id") & _having(PostCountAtLeast(2))
        qb = repo.get_query_builder(spec)
        assert "HAVING" in str(qb.statement)
        assert qb.where_clause is None
        assert [u.name for u in repo.match(spec)] == ["Alice"]

    def test_raw_string(self, repo):
        spec = Join("posts", "p") & GroupBy("id") & _having("count(p.id) >= 2")
        assert [u.name for u in repo.match(spec)] == ["Alice"]

    def test_expression(self, repo):
        qb = repo.create_query_builder("e")
        qb.join("e", "posts", "p")
        qb.group_by(qb.column("e", "id"))
        _having(func.count(qb.column("p", "id")) >= 2).modify(qb, "e")
        assert [u.name for u in qb.get_query().execute()] == ["Alice"]

    def test_modifier_child_only_modifies(self, repo):
        qb = repo.get_query_builder(_having(GroupBy("role")))
        sql = str(qb.statement)
        assert "GROUP BY" in sql
        assert "HAVING" not in sql

    def test_invalid_child(self):
        with pytest.raises(InvalidArgumentError, match="expression or string"):
            _having(42)
