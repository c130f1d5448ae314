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
"""Tests for BaseSpecification and CountOf."""

from __future__ import annotations

import pytest

from queryspec.filter import Comparison
from queryspec.kernel.exceptions import InvalidArgumentError
from queryspec.query import Join, OrderBy
from queryspec.specification import BaseSpecification, CountOf


class ActiveUsers(BaseSpecification):
    def get_spec(self):
        return Comparison("=", "active", True) & OrderBy("name")


class TitledHello(BaseSpecification):
    def get_spec(self):
        return Comparison("=", "title", "Hello")


class OnlyOrdering(BaseSpecification):
    def get_spec(self):
        return OrderBy("name", "desc")


class Nothing(BaseSpecification):
    def get_spec(self):
        return None


class RawSql(BaseSpecification):
    def get_spec(self):
        return "name = 'Alice'"


class TestBaseSpecification:
    def test_delegates_filter_and_modify(self, repo):
        assert [u.name for u in repo.match(ActiveUsers())] == ["Alice", "Bob"]

    def test_composes_with_operators(self, repo):
        users = repo.match(ActiveUsers() & Comparison("=", "role", "user"))
        assert [u.name for u in users] == ["Bob"]

    def test_alias_targets_joined_entity(self, repo):
        users = repo.match(Join("posts", "p") & TitledHello(alias="p"))
        assert sorted(u.name for u in users) == ["Alice", "Bob"]

    def test_modifier_only_tree(self, repo):
        qb = repo.create_query_builder("e")
        spec = OnlyOrdering()
        assert spec.get_filter(qb, "e") is None
        assert [u.name for u in repo.match(spec)] == ["Diana", "Charlie", "Bob", "Alice"]

    def test_empty_tree(self, repo):
        assert len(repo.match(Nothing())) == 4

    def test_invalid_tree_raises(self, repo):
        with pytest.raises(InvalidArgumentError, match="Child passed to RawSql"):
            repo.match(RawSql())

    def test_abstract(self):
        with pytest.raises(TypeError):
            BaseSpecification()


class TestCountOf:
    def test_counts_everything(self, repo):
        assert repo.match_single_scalar_result(CountOf()) == 4

    def test_counts_matching(self, repo):
        assert repo.match_single_scalar_result(CountOf(Comparison("=", "role", "admin"))) == 2

    def test_counts_with_named_spec(self, repo):
        assert repo.match_single_scalar_result(CountOf(ActiveUsers())) == 2

    def test_rejects_invalid_child(self):
        with pytest.raises(InvalidArgumentError, match="Child passed to CountOf"):
            CountOf("users")
