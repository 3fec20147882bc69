"""Tests for errorkind.kinds — building kinds and constructing instances."""

from __future__ import annotations

import pytest

from errorkind import ErrorKind, define_error_type, root_initializer


class TestDefineErrorType:
    def test_root_kind(self, root_kind):
        kind = root_kind.__error_kind__
        assert isinstance(kind, ErrorKind)
        assert issubclass(root_kind, Exception)
        assert root_kind.__name__ == "Error"
        assert kind.is_root
        assert kind.chain == (kind,)
        assert kind.initializer is root_initializer

    def test_named_class(self, root_kind):
        not_found = define_error_type("NotFoundError", root_kind)
        assert not_found.__name__ == "NotFoundError"
        assert not_found.__qualname__ == "NotFoundError"
        assert not_found.__module__ == __name__

    def test_chain(self, chain_kinds):
        root, a, b = chain_kinds
        kind = b.__error_kind__
        assert [k.name for k in kind.chain] == ["B", "A", "Root"]
        assert kind.root is root.__error_kind__
        assert kind.parent is a

    def test_child_has_no_initializer(self, chain_kinds):
        _, a, _ = chain_kinds
        assert not a.__error_kind__.has_initializer

    def test_root_with_factory_skips_stack_capture(self):
        def factory(error, properties, config):
            error.seen = dict(properties)

        kind = define_error_type("Quiet", factory)
        error = kind({"code": "Q1"})
        assert error.seen == {"code": "Q1"}
        assert not hasattr(error, "stack")
        assert error.code is None
        assert str(error) == "Quiet"

    def test_isinstance_through_chain(self, chain_kinds):
        root, a, b = chain_kinds
        error = b("boom")
        assert isinstance(error, b)
        assert isinstance(error, a)
        assert isinstance(error, root)
        assert isinstance(error, Exception)

    def test_raise_and_catch_by_parent(self, chain_kinds):
        root, a, b = chain_kinds
        with pytest.raises(a) as exc_info:
            raise b("deep")
        assert exc_info.value.message == "deep"


class TestProperties:
    def test_merge_order(self, chain_kinds):
        _, _, b = chain_kinds
        merged = b.__error_kind__.merge_properties({"y": 4, "z": 9})
        assert merged == {"x": 1, "y": 4, "z": 9}

    def test_leaf_defaults_win(self, chain_kinds):
        _, _, b = chain_kinds
        error = b()
        assert error.x == 1
        assert error.y == 3

    def test_call_site_wins(self, chain_kinds):
        _, _, b = chain_kinds
        error = b({"y": 4, "z": 9})
        assert (error.x, error.y, error.z) == (1, 4, 9)

    def test_string_message(self, root_kind):
        error = root_kind("missing")
        assert error.message == "missing"
        assert error.code is None

    def test_default_code_and_message(self, root_kind):
        not_found = define_error_type("NotFoundError", root_kind, {"code": "E404", "message": "missing"})
        error = not_found()
        assert error.code == "E404"
        assert error.message == "missing"

    def test_falsy_values_normalised(self, root_kind):
        error = root_kind({"code": "", "message": None})
        assert error.code is None
        assert error.message == ""


class TestInitializers:
    def test_root_to_leaf_order(self):
        log = []
        root = define_error_type("Root", lambda e, p, c: log.append("root"))
        a = define_error_type("A", root, lambda e, p, c: log.append("A"))
        b = define_error_type("B", a)
        b()
        assert log == ["root", "A"]

    def test_receives_merged_properties_and_config(self):
        calls = []
        root = define_error_type("Root", {"x": 1}, lambda e, p, c: calls.append((p, c)))
        root({"y": 2}, {"flag": True})
        assert calls == [({"x": 1, "y": 2}, {"flag": True})]

    def test_child_initializer_sees_root_state(self, root_kind):
        def factory(error, properties, config):
            error.header = error.stack_lines[0]

        child = define_error_type("Child", root_kind, {"code": "C1"}, factory)
        error = child("oops")
        assert error.header == "Error C1: oops"


class TestRendering:
    def test_uses_root_name(self, root_kind):
        not_found = define_error_type("NotFoundError", root_kind)
        error = not_found({"code": "E404", "message": "missing"})
        assert str(error) == "Error E404: missing"
        assert type(error).__name__ == "NotFoundError"

    def test_code_only(self, root_kind):
        assert str(root_kind({"code": "E1"})) == "Error E1"

    def test_message_only(self, root_kind):
        assert str(root_kind("boom")) == "Error: boom"

    def test_bare(self, root_kind):
        assert str(root_kind()) == "Error"

    def test_repr(self, root_kind):
        child = define_error_type("Child", root_kind)
        assert repr(child("boom")) == "Child('Error: boom')"

    def test_setters_update_rendering(self, root_kind):
        error = root_kind("boom")
        error.code = "E500"
        error.message = "changed"
        assert str(error) == "Error E500: changed"

    def test_chained_mutators(self, root_kind):
        error = root_kind().set_code("E1").set_message("late")
        assert str(error) == "Error E1: late"


class TestPlainCall:
    def test_call_matches_construction(self, chain_kinds):
        _, _, b = chain_kinds
        called = b("boom", {"stack_length": 0})
        constructed = b(message="boom", config={"stack_length": 0})
        assert type(called) is type(constructed)
        assert str(called) == str(constructed)
        assert called.stack_lines == constructed.stack_lines
        assert (called.x, called.y) == (constructed.x, constructed.y)


class TestMessageShapes:
    @pytest.mark.parametrize("message", [None, "", 0, ["not", "a", "mapping"]])
    def test_non_mapping_messages_are_empty(self, root_kind, message):
        error = root_kind(message)
        assert error.message == ""
        assert str(error) == "Error"
