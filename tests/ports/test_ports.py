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
"""Tests for the QueryBuilderPort and QueryPort protocols."""

from __future__ import annotations

from queryspec.adapters.sqlalchemy import QueryBuilder
from queryspec.ports.outbound import HydrationMode, QueryBuilderPort, QueryPort


class TestQueryBuilderPort:
    def test_sqlalchemy_builder_conforms(self, session, user_model):
        assert isinstance(QueryBuilder(session, user_model, "e"), QueryBuilderPort)

    def test_required_method_names(self):
        expected = {
            "entity",
            "column",
            "and_where",
            "having",
            "order_by",
            "group_by",
            "join",
            "select",
            "set_first_result",
            "set_max_results",
            "get_query",
        }
        attrs = {
            name
            for name in dir(QueryBuilderPort)
            if not name.startswith("_") and callable(getattr(QueryBuilderPort, name, None))
        }
        assert expected.issubset(attrs), f"Missing methods: {expected - attrs}"

    def test_non_conforming_class_is_not_instance(self):
        class Incomplete:
            def and_where(self, *predicates): ...

        assert not isinstance(Incomplete(), QueryBuilderPort)


class TestQueryPort:
    def test_sqlalchemy_query_conforms(self, session, user_model):
        query = QueryBuilder(session, user_model, "e").get_query()
        assert isinstance(query, QueryPort)

    def test_non_conforming_class_is_not_instance(self):
        class OnlyExecute:
            def execute(self): ...

        assert not isinstance(OnlyExecute(), QueryPort)


class TestHydrationMode:
    def test_values(self):
        assert HydrationMode("object") is HydrationMode.OBJECT
        assert HydrationMode("array") is HydrationMode.ARRAY
