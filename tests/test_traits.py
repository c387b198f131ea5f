import pytest

from rustlings.drills.traits import (
    Licensed,
    OtherSoftware,
    SomeSoftware,
    append_bar,
    compare_license_types,
)


def test_is_foo_bar():
    assert append_bar("Foo") == "FooBar"


def test_is_bar_bar():
    assert append_bar(append_bar("")) == "BarBar"


def test_is_vec_pop_eq_bar():
    foo = append_bar(["Foo"])
    assert foo.pop() == "Bar"
    assert foo.pop() == "Foo"
    assert foo == []


def test_append_bar_does_not_change_input_list():
    original = ["Foo"]
    result = append_bar(original)
    assert original == ["Foo"]
    assert result == ["Foo", "Bar"]


def test_append_bar_rejects_other_types():
    with pytest.raises(TypeError):
        append_bar(42)


def test_is_licensing_info_the_same():
    licensing_info = "Some information"
    some_software = SomeSoftware(version_number=1)
    other_software = OtherSoftware(version_number="v2.0.0")
    assert some_software.licensing_info() == licensing_info
    assert other_software.licensing_info() == licensing_info


def test_compare_license_information():
    assert compare_license_types(SomeSoftware(1), OtherSoftware("v2.0.0")) is True


def test_compare_license_information_backwards():
    assert compare_license_types(OtherSoftware("v2.0.0"), SomeSoftware(1)) is True


def test_compare_detects_different_information():
    class Custom(Licensed):
        def licensing_info(self) -> str:
            return "other"

    assert compare_license_types(SomeSoftware(1), Custom()) is False