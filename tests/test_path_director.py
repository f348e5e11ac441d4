"""Tests for path directors and safe file names."""
from pathlib import Path

import pytest

from javadoc.paths import PackageListPathDirector, PathDirector, to_safe_file_name


@pytest.mark.parametrize("name,expected", [
    ("java", "java"),
    ("commons-lang3", "commons-lang3"),
    ("org.example_lib$1", "org.example_lib$1"),
    ("a/b", "a#2fb"),
    ("group:artifact", "group#3aartifact"),
    ("with space", "with#20space"),
    ("é", "#e9"),
    ("", ""),
])
def test_to_safe_file_name(name, expected):
    assert to_safe_file_name(name) == expected


def test_package_list_director_uses_safe_names(tmp_path):
    director = PackageListPathDirector(tmp_path)
    assert director.determine_path("java") == tmp_path / "java"
    assert director.determine_path("org.apache:commons") == tmp_path / "org.apache#3acommons"


def test_package_list_director_accepts_str_base():
    director = PackageListPathDirector("build/package-lists")
    assert director.determine_path("groovy") == Path("build/package-lists/groovy")


def test_package_list_director_never_returns_none():
    director = PackageListPathDirector("out")
    with pytest.raises(ValueError):
        director.determine_path("")


def test_custom_director_satisfies_protocol():
    class NameDirector:
        def determine_path(self, obj: str) -> Path:
            return Path("docs") / to_safe_file_name(obj)

    director: PathDirector[str] = NameDirector()
    assert director.determine_path("a b") == Path("docs/a#20b")
