import pytest

from image_resource_checker.crawl.walker import WalkError, file_extension, walk_files


def _touch(path, text=""):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def tree(tmp_path):
    _touch(tmp_path / "App.swift")
    _touch(tmp_path / "README.md")
    _touch(tmp_path / "Makefile")
    _touch(tmp_path / "Views" / "Home.SWIFT")
    _touch(tmp_path / "Views" / "Deep" / "Detail.swift")
    _touch(tmp_path / ".hidden.swift")
    _touch(tmp_path / ".git" / "config.swift")
    return tmp_path


def _names(paths):
    return sorted(path.name for path in paths)


def test_file_extension_is_lowercase_without_dot():
    assert file_extension("a/b/View.SWIFT") == "swift"
    assert file_extension("archive.tar.gz") == "gz"
    assert file_extension("Makefile") == ""


def test_non_recursive_walk_ignores_subdirectories(tree):
    assert _names(walk_files(tree, ["swift"], recursive=False)) == ["App.swift"]


def test_recursive_walk_filters_by_extension(tree):
    paths = list(walk_files(tree, ["swift"], recursive=True))
    assert _names(paths) == ["App.swift", "Detail.swift", "Home.SWIFT"]


def test_empty_filter_matches_every_visible_file(tree):
    assert _names(walk_files(tree, (), recursive=True)) == [
        "App.swift",
        "Detail.swift",
        "Home.SWIFT",
        "Makefile",
        "README.md",
    ]


def test_hidden_entries_are_skipped(tree):
    paths = list(walk_files(tree, recursive=True))
    assert all(not part.startswith(".") for path in paths for part in path.relative_to(tree).parts)


def test_unlistable_root_raises_walk_error(tmp_path):
    missing = tmp_path / "nope"
    with pytest.raises(WalkError) as excinfo:
        list(walk_files(missing, recursive=True))
    assert excinfo.value.path == missing
    assert "Could not open directory" in str(excinfo.value)
