import pytest

from svgs_to_icons.naming import (
    UNNAMED_CLASS,
    UNNAMED_LABEL,
    ClassNameGenerator,
    DisplayNameGenerator,
    is_css_identifier,
    sanitize_class_name,
    strip_extension,
)


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("home.svg", "home"),
        ("Arrow Left.svg", "arrow-left"),
        ("--weird__name--.svg", "weird__name"),
        ("a  b!!c.svg", "a-b-c"),
        ("123.svg", "i123"),
        ("9-lives.svg", "i9-lives"),
        ("@@@.svg", UNNAMED_CLASS),
        ("_.svg", UNNAMED_CLASS),
        ("   .svg", UNNAMED_CLASS),
        ("", UNNAMED_CLASS),
    ],
)
def test_sanitize_class_name(file_name: str, expected: str) -> None:
    assert sanitize_class_name(file_name) == expected


def test_strip_extension_only_drops_last_suffix() -> None:
    assert strip_extension("icon.min.svg") == "icon.min"
    assert strip_extension("README") == "README"


def test_is_css_identifier() -> None:
    assert is_css_identifier("ui-home-icon")
    assert is_css_identifier("_private")
    assert not is_css_identifier("1abc")
    assert not is_css_identifier("has space")
    assert not is_css_identifier("")
    assert not is_css_identifier("caf\u00e9")


def test_collisions_get_numeric_suffixes_in_call_order() -> None:
    generator = ClassNameGenerator()

    names = [generator.name_for(name) for name in ("Home.svg", "home!.svg", "HOME@.svg", "other.svg")]

    assert names == ["home", "home-1", "home-2", "other"]
    assert generator.counts == {"home": 3, "other": 1}


def test_unnamed_files_collide_with_each_other() -> None:
    generator = ClassNameGenerator()

    names = [generator.name_for(name) for name in (".svg", "@#$.svg", "-.svg")]

    assert names == ["unnamed", "unnamed-1", "unnamed-2"]


def test_suffix_owned_by_another_file_is_skipped() -> None:
    generator = ClassNameGenerator()

    names = [generator.name_for(name) for name in ("Home.svg", "home-1.svg", "home.svg", "home-2.svg")]

    assert names == ["home", "home-1", "home-2", "home-2-1"]
    assert len(set(names)) == len(names)


def test_generators_are_independent() -> None:
    first = ClassNameGenerator()
    second = ClassNameGenerator()
    first.name_for("home.svg")

    assert second.name_for("home.svg") == "home"


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("arrow-left.svg", "Arrow Left"),
        ("user_PROFILE.svg", "User Profile"),
        ("  spaced   out .svg", "Spaced Out"),
        ("123.svg", "123"),
        ("---.svg", UNNAMED_LABEL),
    ],
)
def test_display_labels(file_name: str, expected: str) -> None:
    assert DisplayNameGenerator().label_for(file_name) == expected
