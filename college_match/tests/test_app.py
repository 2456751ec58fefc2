import os
from pathlib import Path
from unittest.mock import patch

import pytest

from college_match import app as app_module


@pytest.mark.skipif("STATIC_DIR" in os.environ, reason="static dir overridden")
def test_static_dir_is_anchored_to_package():
    assert app_module._STATIC_DIR == Path(app_module.__file__).resolve().parent / "static"


@patch("college_match.app.uvicorn.run")
def test_main_starts_server(mock_run, monkeypatch):
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.setenv("PORT", "8123")

    app_module.main()

    mock_run.assert_called_once_with(app_module.app, host="127.0.0.1", port=8123)
