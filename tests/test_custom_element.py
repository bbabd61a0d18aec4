import pytest

from topus.custom_element import capitalize_word, class_name_for, define
from topus.errors import MalformedBuilderInput
from topus.node import Element, Text


def test_capitalize_word_only_touches_first_character():
    assert capitalize_word("custom") == "Custom"
    assert capitalize_word("mY") == "MY"
    assert capitalize_word("") == ""


def test_class_name_for_dashed_tag():
    assert class_name_for("my-custom") == "MyCustom"
    assert class_name_for("x-foo-bar") == "XFooBar"


def test_define_builds_registration_script():
    script = define("my-custom")
    assert isinstance(script, Element)
    assert script.name == "script"
    assert script.attributes == ()
    assert script.children == (
        Text(
            "class MyCustom extends HTMLElement { constructor() { super(); } }\n"
            "customElements.define('my-custom', MyCustom);"
        ),
    )
    assert script.render().startswith("<script>class MyCustom")
    assert script.render().endswith("</script>")


@pytest.mark.parametrize("tag_name", ["custom", "", "my--custom", "-custom", "my custom"])
def test_define_requires_dashed_name(tag_name):
    with pytest.raises(MalformedBuilderInput):
        define(tag_name)
