from __future__ import annotations

import pytest

from record_factory import define_record_type, get_factory, get_registry
from record_factory.domain.record import Record
from record_factory.errors import ArgumentError, InvalidIdentifier


class TestDefinitionArguments:
    def test_anonymous_type(self, factory, registry):
        Point = factory.define(["x", "y"])
        assert issubclass(Point, Record)
        assert Point.__name__ == "AnonymousRecord"
        assert Point._fields == ("x", "y")
        assert len(registry) == 0

    def test_any_iterable_of_names(self, factory):
        Point = factory.define(name for name in ("x", "y"))
        assert Point(1, 2).members() == ["x", "y"]

    def test_named_type_is_registered(self, factory, registry):
        Point = factory.define("Point", ["x", "y"])
        assert Point.__name__ == "Point"
        assert registry["Point"] is Point
        assert Point._record_name == "Point"

    def test_name_must_be_capitalized(self, factory, registry):
        with pytest.raises(InvalidIdentifier, match="identifier point needs to be constant"):
            factory.define("point", ["x", "y"])
        assert "point" not in registry

    @pytest.mark.parametrize("name", ["", "1Point", "Po int"])
    def test_name_must_be_an_identifier(self, factory, name):
        with pytest.raises(InvalidIdentifier):
            factory.define(name, ["x"])

    def test_invalid_name_is_also_a_name_error(self, factory):
        with pytest.raises(NameError):
            factory.define("lower", ["x"])

    @pytest.mark.parametrize("call", [lambda f: f.define(), lambda f: f.define([]), lambda f: f.define("Point")])
    def test_no_fields_in_positional_mode(self, factory, call):
        with pytest.raises(ArgumentError, match="wrong number of arguments \\(given 0, expected 1\\+\\)"):
            call(factory)

    def test_fields_given_twice(self, factory):
        with pytest.raises(ArgumentError, match="given twice"):
            factory.define(["x"], ["y"])

    @pytest.mark.parametrize(
        "fields, message",
        [
            (["x", "x"], "duplicate field name 'x'"),
            (["x", 1], "is not a string"),
            (["not valid"], "invalid field name"),
            (["class"], "invalid field name"),
            (["_hidden"], "must not start with an underscore"),
        ],
    )
    def test_malformed_field_names(self, factory, fields, message):
        with pytest.raises(ArgumentError, match=message):
            factory.define(fields)

    def test_single_string_is_not_a_field_list(self, factory):
        with pytest.raises(ArgumentError, match="not a single string"):
            factory.define("Point", "xy")

    def test_non_iterable_fields(self, factory):
        with pytest.raises(ArgumentError, match="must be iterable"):
            factory.define("Point", 5)

    def test_factory_is_callable(self, factory):
        Point = factory("Point", ["x", "y"])
        assert Point(1, 2).x == 1

    def test_types_are_distinct_per_call(self, factory):
        assert factory.define(["x"]) is not factory.define(["x"])


class TestAccessors:
    def test_accessors_live_on_the_type(self, point_type):
        assert isinstance(point_type.__dict__["x"], property)
        assert "x" not in vars(point_type(1, 2))

    def test_field_shadowing_a_method_keeps_the_method(self, factory):
        Stats = factory.define(["size", "count"])
        s = Stats(10, 3)
        assert s.size() == 2
        assert s["size"] == 10
        assert s.count == 3


class TestKeywordInference:
    def test_first_mapping_fixes_fields(self, factory):
        Options = factory.define(keyword_init=True)
        first = Options({"verbose": True, "depth": 3})
        assert first.members() == ["verbose", "depth"]
        assert Options._fields == ("verbose", "depth")
        assert first.depth == 3

    def test_later_mappings_must_cover_inferred_fields(self, factory):
        Options = factory.define("Options", keyword_init=True)
        Options(verbose=True, depth=3)
        with pytest.raises(ArgumentError, match="missing keywords: depth"):
            Options({"verbose": False})

    def test_empty_first_mapping(self, factory):
        Options = factory.define(None, keyword_init=True)
        with pytest.raises(ArgumentError, match="empty mapping"):
            Options({})
        assert Options(a=1).members() == ["a"]

    def test_invalid_inferred_names(self, factory):
        Options = factory.define(keyword_init=True)
        with pytest.raises(ArgumentError, match="invalid field name"):
            Options({"not valid": 1})

    def test_extension_member_wins_over_inferred_field(self, factory):
        Options = factory.define(keyword_init=True, extensions={"label": lambda self: "custom"})
        o = Options({"label": "raw", "depth": 2})
        assert o.label() == "custom"
        assert o["label"] == "raw"
        assert o.depth == 2

    def test_extension_member_wins_over_declared_field(self, factory):
        Options = factory.define(["label"], extensions={"label": lambda self: "custom"})
        o = Options("raw")
        assert o.label() == "custom"
        assert o["label"] == "raw"


class TestExtensions:
    def test_mixin_class(self, factory):
        class VectorMethods:
            """Vector helpers."""

            scale = 2

            def norm(self):
                return (self.x ** 2 + self.y ** 2) ** 0.5

            def scaled(self):
                return type(self)(self.x * self.scale, self.y * self.scale)

        Vector = factory.define("Vector", ["x", "y"], extensions=VectorMethods)
        v = Vector(3, 4)
        assert v.norm() == 5.0
        assert v.scaled() == Vector(6, 8)
        assert Vector.__doc__ == "Vector(x, y)"

    def test_mapping_of_members(self, factory):
        Pair = factory.define(["left", "right"], extensions={"swap": lambda self: type(self)(self.right, self.left)})
        assert Pair(1, 2).swap().values() == [2, 1]

    def test_configure_function(self, factory, registry):
        seen = []

        def configure(record_type):
            seen.append("Named" in registry)
            record_type.total = lambda self: sum(self)

        Named = factory.define("Named", ["a", "b"], extensions=configure)
        assert Named(1, 2).total() == 3
        assert seen == [False]

    def test_extension_writes_through_accessors(self, factory):
        def bump(self):
            self.count += 1
            return self

        Counter = factory.define(["count"], extensions={"bump": bump})
        c = Counter(0).bump().bump()
        assert c[0] == 2

    def test_invalid_extensions(self, factory, registry):
        with pytest.raises(ArgumentError, match="extensions must be"):
            factory.define("Broken", ["a"], extensions=42)
        assert "Broken" not in registry


def test_default_factory_uses_process_registry():
    Sample = define_record_type("FactoryModuleSample", ["value"])
    assert get_factory().registry is get_registry()
    assert get_registry()["FactoryModuleSample"] is Sample
