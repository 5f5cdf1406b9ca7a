import pytest

from s16design import clear_cache, load_catalog, load_section


@pytest.fixture(autouse=True)
def packaged_catalog(monkeypatch):
    """Every test reads the packaged CSVs unless it points elsewhere itself."""
    monkeypatch.delenv("S16_CATALOG_DIR", raising=False)
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def w_sections():
    return load_catalog("W")


@pytest.fixture
def w460x74():
    return load_section("W", "W460x74")


@pytest.fixture
def w250x73():
    return load_section("W", "W250x73")
