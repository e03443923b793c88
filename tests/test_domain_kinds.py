"""Tests for the value-kind catalog: kinds, zero values and rendering."""

from envassert.domain import (
    URL,
    Enum,
    FieldKind,
    HostPort,
    Integer,
    IntegerList,
    RequiredHostPort,
    RequiredInteger,
    RequiredIntegerList,
    RequiredText,
    Text,
    TextList,
    kind_for_type,
    kind_render_value,
)


def test_domain_kinds_every_kind_is_bound_to_one_wrapper_type() -> None:
    """Map each kind to a distinct wrapper type and back.

    Returns:
        None: Assertions validate the kind/type bijection.

    Raises:
        AssertionError: Raised when a kind is not bound one-to-one.
    """

    value_types = [field_kind.value_type for field_kind in FieldKind]

    assert len(set(value_types)) == len(FieldKind)
    for field_kind in FieldKind:
        assert kind_for_type(field_kind.value_type) is field_kind
        assert field_kind.value_type.kind is field_kind


def test_domain_kinds_required_flag_matches_kind_names() -> None:
    """Flag exactly the seven required variants.

    Returns:
        None: Assertions validate required-kind classification.

    Raises:
        AssertionError: Raised when required flags are incorrect.
    """

    required_kinds = {field_kind for field_kind in FieldKind if field_kind.required}

    assert len(required_kinds) == 7
    assert FieldKind.REQUIRED_HOST_PORT in required_kinds
    assert FieldKind.TEXT not in required_kinds


def test_domain_kinds_unknown_annotations_have_no_kind() -> None:
    """Reject builtin types, wrapper subclasses and non-type annotations.

    Returns:
        None: Assertions validate exact-type lookup.

    Raises:
        AssertionError: Raised when an unsupported annotation resolves to a kind.
    """

    class CustomText(Text):
        pass

    assert kind_for_type(int) is None
    assert kind_for_type(str) is None
    assert kind_for_type(CustomText) is None
    assert kind_for_type("Text") is None
    assert kind_for_type(list[int]) is None


def test_domain_kinds_zero_values_match_catalog() -> None:
    """Produce zero integer, empty text, empty list and empty host:port pair.

    Returns:
        None: Assertions validate zero values.

    Raises:
        AssertionError: Raised when a zero value is incorrect.
    """

    assert FieldKind.INTEGER.zero_value() == 0
    assert FieldKind.TEXT.zero_value() == ""
    assert FieldKind.URL.zero_value() == ""
    assert FieldKind.ENUM.zero_value() == ""
    assert FieldKind.TEXT_LIST.zero_value() == []
    assert FieldKind.INTEGER_LIST.zero_value() == []
    assert FieldKind.HOST_PORT.zero_value() == HostPort(host="", port="")
    assert isinstance(FieldKind.REQUIRED_INTEGER.zero_value(), RequiredInteger)


def test_domain_kinds_render_values() -> None:
    """Render integers, lists and host:port pairs as display strings.

    Returns:
        None: Assertions validate rendering rules.

    Raises:
        AssertionError: Raised when rendering is incorrect.
    """

    assert str(Integer(-42)) == "-42"
    assert str(TextList(["bee", "goes", "buzz"])) == "bee,goes,buzz"
    assert str(RequiredIntegerList([1, 2, 3])) == "1,2,3"
    assert str(IntegerList()) == ""
    assert str(HostPort("localhost", "1234")) == "localhost:1234"
    assert str(RequiredHostPort("::1", "80")) == "[::1]:80"
    assert str(URL("https://example.com")) == "https://example.com"
    assert str(Enum("one")) == "one"
    assert str(RequiredText("hello")) == "hello"
    assert kind_render_value(None) == ""
    assert kind_render_value(Integer(7)) == "7"


def test_domain_kinds_host_port_variants_are_distinct_values() -> None:
    """Keep plain and required host:port values unequal across kinds.

    Returns:
        None: Assertions validate dataclass equality semantics.

    Raises:
        AssertionError: Raised when variants compare equal.
    """

    assert HostPort("a", "1") == HostPort("a", "1")
    assert HostPort("a", "1") != RequiredHostPort("a", "1")
    assert FieldKind.TEXT_LIST.is_list
    assert not FieldKind.HOST_PORT.is_list
