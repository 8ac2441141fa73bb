"""Root test configuration: isolate tests from host MDLITE_* settings"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Drop MDLITE_* env vars and run each test from an empty working directory."""
    for name in list(os.environ):
        if name.startswith("MDLITE_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
