import pytest

from library import Library, seed_library
from ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # --output seçeneği ortam değişkenini yazar; her test düz çıktı ile başlasın
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")


@pytest.fixture
def lib():
    return Library()


@pytest.fixture
def seeded_lib():
    lib = Library()
    assert seed_library(lib) == []
    return lib
