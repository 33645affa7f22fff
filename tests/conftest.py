import json

import pytest


@pytest.fixture
def write_catalog(tmp_path):
    """Write an .xcstrings document into tmp_path and return its path."""

    def _write(name, strings=None, raw=None):
        path = tmp_path / name
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
        else:
            document = {"sourceLanguage": "en", "strings": strings or {}, "version": "1.0"}
            path.write_text(json.dumps(document), encoding="utf-8")
        return str(path)

    return _write
