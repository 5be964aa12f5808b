import pytest

from image_resource_checker.extract.normalize import normalize, split_words


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("icon", "icon"),
        ("Home_Icon", "homeIcon"),
        ("My_Cool-Image", "myCoolImage"),
        ("my cool image", "myCoolImage"),
        ("ArrowRight", "arrowRight"),
        ("SETTINGS_icon", "sETTINGSIcon"),
        ("tab.bar-HOME", "tabBarHOME"),
        ("__leading__", "leading"),
    ],
)
def test_normalize_examples(raw, expected):
    assert normalize(raw) == expected


def test_dot_is_a_delimiter_so_extensions_become_words():
    assert normalize("My_Cool-Image.png") == "myCoolImagePng"


def test_leading_digit_gets_underscore():
    assert normalize("2Background") == "_2Background"
    assert normalize("3_dots") == "_3Dots"
    assert normalize("½x") == "_½x"


def test_names_without_words_are_returned_unchanged():
    assert normalize("") == ""
    assert normalize("_-. ") == "_-. "


def test_split_words_breaks_on_capitals_inside_segments():
    assert split_words("bigRedButton_Pressed") == ["big", "Red", "Button", "Pressed"]
    assert split_words("lower") == ["lower"]


@pytest.mark.parametrize("raw", ["Home_Icon", "ArrowRight", "a-b-c", "navBar.Back", "2x_Logo"])
def test_normalize_is_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once
