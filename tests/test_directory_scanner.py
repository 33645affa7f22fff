import os

import pytest

from xcpolyglot.errors import DirectoryUnreadableError
from xcpolyglot.extraction.directory_scanner import scan


def test_scan_keeps_only_catalogs(tmp_path):
    (tmp_path / "Localizable.xcstrings").write_text("{}")
    (tmp_path / "InfoPlist.xcstrings").write_text("{}")
    (tmp_path / "Localizable.strings").write_text("")
    (tmp_path / "notes.txt").write_text("")

    paths = scan(str(tmp_path))

    assert paths == [
        os.path.join(str(tmp_path), "InfoPlist.xcstrings"),
        os.path.join(str(tmp_path), "Localizable.xcstrings"),
    ]


def test_scan_does_not_recurse(tmp_path):
    nested = tmp_path / "Nested"
    nested.mkdir()
    (nested / "Deep.xcstrings").write_text("{}")

    assert scan(str(tmp_path)) == []


def test_scan_empty_directory_is_not_an_error(tmp_path):
    assert scan(str(tmp_path)) == []


def test_scan_missing_directory(tmp_path):
    missing = str(tmp_path / "does-not-exist")

    with pytest.raises(DirectoryUnreadableError) as exc_info:
        scan(missing)

    assert exc_info.value.path == missing


def test_scan_file_instead_of_directory(tmp_path):
    path = tmp_path / "Localizable.xcstrings"
    path.write_text("{}")

    with pytest.raises(DirectoryUnreadableError):
        scan(str(path))
