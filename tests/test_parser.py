# tests/test_parser.py
"""Tests for parsing and validating helper signatures."""

import pytest

from helperspec.core.params import ParamType
from helperspec.core.parser import parse_signature, describe_spec
from helperspec.core.spec import HashParam, HelperSpec, PositionalParam
from helperspec.exceptions import SpecError


def accept_all(**bindings):
    return bindings


class TestSignatureParsing:
    """Tests for the signature grammar."""

    def test_empty_signature(self):
        spec = parse_signature("nothing", "", accept_all)
        assert spec.positional == ()
        assert spec.named == ()
        assert spec.variadic_args_name is None
        assert spec.variadic_kwargs_name is None

    def test_positional_params_keep_order(self):
        spec = parse_signature("h", "b: str, a: u64, c: Json", accept_all)
        assert spec.positional == (
            PositionalParam("b", ParamType.STR),
            PositionalParam("a", ParamType.U64),
            PositionalParam("c", ParamType.JSON),
        )

    def test_hash_block_with_defaults(self):
        spec = parse_signature(
            "h", 'x: u64, {compare: u64 = 10, label: str = "a, {b}", ratio: f64 = -0.5, tags: array = [1, "x"]}',
            accept_all,
        )
        assert spec.named == (
            HashParam("compare", ParamType.U64, 10),
            HashParam("label", ParamType.STR, "a, {b}"),
            HashParam("ratio", ParamType.F64, -0.5),
            HashParam("tags", ParamType.ARRAY, [1, "x"]),
        )

    @pytest.mark.parametrize("literal, expected", [
        ("true", True), ("false", False), ("null", None), ('{"k": 1}', {"k": 1}),
    ])
    def test_json_literal_defaults(self, literal, expected):
        spec = parse_signature("h", f"{{v: Json = {literal}}}", accept_all)
        assert spec.named[0].default == expected

    def test_variadic_captures(self):
        spec = parse_signature("h", "x: i64, {n: u64 = 1}, *args, **kwargs", accept_all)
        assert spec.variadic_args_name == "args"
        assert spec.variadic_kwargs_name == "kwargs"
        assert spec.bound_names() == ["x", "n", "args", "kwargs"]

    def test_commas_before_blocks_are_optional(self):
        spec = parse_signature("h", "x: u64 {n: u64 = 1} *rest **opts", accept_all)
        assert [p.name for p in spec.positional] == ["x"]
        assert [h.name for h in spec.named] == ["n"]
        assert spec.variadic_args_name == "rest"
        assert spec.variadic_kwargs_name == "opts"

    def test_trailing_comma_allowed(self):
        spec = parse_signature("h", "x: u64,", accept_all)
        assert len(spec.positional) == 1

    def test_empty_hash_block(self):
        assert parse_signature("h", "x: u64, {}", accept_all).named == ()

    def test_signature_text_is_kept(self):
        spec = parse_signature("h", "  x: u64  ", accept_all)
        assert spec.signature == "x: u64"


class TestSignatureErrors:
    """Malformed signatures are rejected at definition time."""

    def test_hash_param_without_default(self):
        with pytest.raises(SpecError, match="named parameter compare must declare a default"):
            parse_signature("is_above", "x: u64, {compare: u64}", accept_all)

    def test_unknown_type(self):
        with pytest.raises(SpecError, match="unknown type `int` for x"):
            parse_signature("h", "x: int", accept_all)

    def test_type_tags_are_case_sensitive(self):
        with pytest.raises(SpecError, match="unknown type `json`"):
            parse_signature("h", "x: json", accept_all)

    @pytest.mark.parametrize("signature", [
        "x: u64, x: str",
        "x: u64, {x: u64 = 1}",
        "x: u64, *x",
        "*rest, **rest",
    ])
    def test_duplicate_names(self, signature):
        with pytest.raises(SpecError, match="duplicate parameter name"):
            parse_signature("h", signature, accept_all)

    @pytest.mark.parametrize("signature, message", [
        ("{n: u64 = 1}, x: u64", "positional parameters must come first"),
        ("*args, {n: u64 = 1}", "named parameter block must follow"),
        ("**kw, *args", "\\*args must come before \\*\\*kwargs"),
        ("{a: u64 = 1}, {b: u64 = 2}", "named parameter block must follow"),
        ("**a, **b", "only one \\*\\*kwargs"),
    ])
    def test_out_of_order_items(self, signature, message):
        with pytest.raises(SpecError, match=message):
            parse_signature("h", signature, accept_all)

    def test_missing_colon(self):
        with pytest.raises(SpecError, match="expected ':'"):
            parse_signature("h", "x u64", accept_all)

    def test_missing_separator(self):
        with pytest.raises(SpecError, match="unexpected 'y'"):
            parse_signature("h", "x: u64 y: u64", accept_all)

    def test_bad_literal(self):
        with pytest.raises(SpecError, match="invalid default literal for n"):
            parse_signature("h", "{n: str = 'single'}", accept_all)

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity", "[1, NaN]"])
    def test_non_finite_literals_rejected(self, literal):
        with pytest.raises(SpecError, match="is not a JSON value") as exc_info:
            parse_signature("h", f"{{r: Json = {literal}}}", accept_all)
        assert "invalid default literal for r" in str(exc_info.value)

    def test_unclosed_hash_block(self):
        with pytest.raises(SpecError, match="expected ','"):
            parse_signature("h", "{n: u64 = 1", accept_all)

    def test_keyword_name_rejected(self):
        with pytest.raises(SpecError, match="not a valid identifier"):
            parse_signature("h", "class: str", accept_all)

    def test_error_reports_column(self):
        with pytest.raises(SpecError) as exc_info:
            parse_signature("h", "x: u64, y: bogus", accept_all)
        assert exc_info.value.column == 12
        assert "(at column 12)" in str(exc_info.value)

    def test_body_must_accept_bound_names(self):
        def body(x):
            return x
        with pytest.raises(SpecError, match="body does not accept"):
            parse_signature("h", "x: u64, {n: u64 = 1}", body)

    def test_non_string_signature(self):
        with pytest.raises(SpecError, match="signature must be a string"):
            parse_signature("h", None, accept_all)


class TestHelperSpecValidation:
    """Specs built directly are held to the same invariants."""

    def test_hash_param_missing_default(self):
        spec = HelperSpec("h", accept_all, named=(HashParam("n", ParamType.U64),))
        with pytest.raises(SpecError, match="must declare a default"):
            spec.validate()

    def test_invalid_helper_name(self):
        with pytest.raises(SpecError, match="helper name"):
            HelperSpec("is-above", accept_all).validate()

    def test_body_not_callable(self):
        with pytest.raises(SpecError, match="body is not callable"):
            HelperSpec("h", "not callable").validate()

    def test_callable_object_body(self):
        class Body:
            def __call__(self, x, **rest):
                return x
        spec = HelperSpec("h", Body(), positional=(PositionalParam("x", ParamType.JSON),),
                          named=(HashParam("n", ParamType.U64, 1),))
        assert spec.validate() is spec


def test_describe_spec_rows():
    spec = parse_signature("h", 'x: u64, {sep: str = ", "}, *args, **kw', accept_all)
    assert describe_spec(spec) == [
        ("positional", "x", "u64", ""),
        ("hash", "sep", "str", '", "'),
        ("*args", "args", "array", ""),
        ("**kwargs", "kw", "object", ""),
    ]
