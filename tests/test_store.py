"""Tests for DataStore and store loading."""

import json
import shutil

import pytest

from norge_data.loader import DEFAULT_DATA_DIR, DataLoadError, LoaderConfig
from norge_data.models import County
from norge_data.store import DataStore, default_store, load_store


class TestDataStore:
    """Tests for the DataStore container."""

    def test_lists_become_tuples(self):
        """Test that sequences are stored as tuples."""
        store = DataStore(counties=[County("03", "Oslo", "https://x")], municipalities=[])
        assert isinstance(store.counties, tuple)
        assert isinstance(store.municipalities, tuple)

    def test_frozen(self):
        """Test that the store cannot be reassigned."""
        store = DataStore(counties=(), municipalities=())
        with pytest.raises(AttributeError):
            store.counties = ()

    def test_repr(self):
        """Test that repr shows table sizes."""
        store = DataStore(counties=[County("03", "Oslo", "https://x")], municipalities=[])
        assert repr(store) == "DataStore(counties=1, municipalities=0)"


class TestLoadStore:
    """Tests for load_store and default_store."""

    def test_default_config(self):
        """Test loading the bundled files."""
        store = load_store()
        assert len(store.counties) == 15
        assert len(store.municipalities) == 357

    def test_default_store_cached(self):
        """Test that the default store is built once."""
        assert default_store() is default_store()

    def test_load_store_equal_to_default(self):
        """Test that a fresh load is structurally equal to the default store."""
        assert load_store() == default_store()

    def test_custom_data_dir(self, tmp_path):
        """Test loading from a copied data directory."""
        for name in ("fylker-2025.json", "kommuner-2025.json"):
            shutil.copy(DEFAULT_DATA_DIR / name, tmp_path / name)
        store = load_store(LoaderConfig(data_dir=tmp_path))
        assert store == default_store()

    def test_missing_municipalities_is_fatal(self, tmp_path):
        """Test that a missing table fails the whole load."""
        shutil.copy(DEFAULT_DATA_DIR / "fylker-2025.json", tmp_path / "fylker-2025.json")
        with pytest.raises(DataLoadError):
            load_store(LoaderConfig(data_dir=tmp_path))

    def test_custom_file_names(self, tmp_path):
        """Test loading files with custom names."""
        (tmp_path / "c.json").write_text(json.dumps([
            {"f_id": "03", "f_name": "Oslo", "f_url": "https://x"},
        ]), encoding="utf-8")
        (tmp_path / "m.json").write_text(json.dumps([{
            "k_id": "0301",
            "k_name": "Oslo",
            "k_name_no": "Oslo",
            "k_adm_center": "Oslo",
            "k_population": 10,
            "k_area": 1.5,
            "k_language": "Nøytral",
            "k_url": "https://x",
        }]), encoding="utf-8")
        config = LoaderConfig(
            data_dir=tmp_path,
            counties_file="c.json",
            municipalities_file="m.json",
        )
        store = load_store(config)
        assert [c.id for c in store.counties] == ["03"]
        assert store.municipalities[0].area == 1.5
