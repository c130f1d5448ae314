"""Tests for the queryspec error taxonomy."""

from queryspec.kernel.exceptions import (
    InvalidArgumentError,
    NonUniqueResultError,
    NoResultError,
    QuerySpecException,
    type_name,
)


class TestQuerySpecException:
    def test_basic_creation(self):
        exc = QuerySpecException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_error_code(self):
        exc = QuerySpecException("bad", code="CUSTOM_001")
        assert exc.code == "CUSTOM_001"

    def test_context_defaults_to_empty_dict(self):
        exc = QuerySpecException("test")
        exc.context["key"] = "value"
        exc2 = QuerySpecException("test2")
        assert exc2.context == {}


class TestTaxonomy:
    def test_default_codes(self):
        assert InvalidArgumentError("x").code == "INVALID_ARGUMENT"
        assert NoResultError("x").code == "NO_RESULT"
        assert NonUniqueResultError("x").code == "NON_UNIQUE_RESULT"

    def test_explicit_code_wins(self):
        assert NoResultError("x", code="MISSING").code == "MISSING"

    def test_all_kinds_share_the_base(self):
        for cls in (InvalidArgumentError, NoResultError, NonUniqueResultError):
            assert issubclass(cls, QuerySpecException)

    def test_invalid_argument_is_value_error(self):
        assert issubclass(InvalidArgumentError, ValueError)

    def test_result_errors_are_distinct(self):
        assert not issubclass(NoResultError, NonUniqueResultError)
        assert not issubclass(NonUniqueResultError, NoResultError)

    def test_context_is_kept(self):
        exc = NoResultError("nothing", context={"entity": "User"})
        assert exc.context == {"entity": "User"}


class TestTypeName:
    def test_builtin_is_bare(self):
        assert type_name(42) == "int"
        assert type_name("x") == "str"

    def test_class_is_qualified(self):
        assert type_name(NoResultError) == "queryspec.kernel.exceptions.NoResultError"

    def test_instance_uses_its_class(self):
        assert type_name(NoResultError("x")) == "queryspec.kernel.exceptions.NoResultError"
