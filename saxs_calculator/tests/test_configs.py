"""Tests for the calibration table loader."""

import json

import pytest

from saxs_calculator.configs import (
    get_amino_acid_table,
    get_sec_column_table,
    get_sec_column,
    get_detector_references,
    list_pore_sizes,
    list_reference_proteins,
    clear_cache,
)


class TestPackagedTables:
    """Tests for the shipped JSON tables."""

    def test_amino_acid_table(self):
        """Test 20 residues and water constants."""
        table = get_amino_acid_table()

        assert len(table.codes) == 20
        assert table.residues["W"].molecular_weight == pytest.approx(204.23)
        assert table.residues["G"].name == "Gly"
        assert table.water_mw == pytest.approx(18.015)
        assert table.water_electrons == 10
        assert dict(table.extinction_280nm) == {"W": 5500, "Y": 1490, "C": 125}

    def test_tables_are_read_only(self):
        """Test that loaded tables cannot be modified."""
        table = get_amino_acid_table()

        with pytest.raises(TypeError):
            table.residues["Z"] = table.residues["A"]

    def test_sec_columns(self):
        """Test SEC calibration table."""
        assert list_pore_sizes() == ["100", "150", "300"]
        assert get_sec_column("300").a == pytest.approx(6.731261)
        assert get_sec_column(None).pore_size == "100"
        assert get_sec_column_table().default_flow_rate == pytest.approx(0.35)

    def test_detector_references(self):
        """Test reference protein table and anchor."""
        references = get_detector_references()

        assert references.anchor.name == "BSA monomer"
        assert references.anchor.sd_mm == 1900
        assert "Cytochrome c" in list_reference_proteins()

    def test_cache_returns_same_object(self):
        """Test that tables are loaded once."""
        assert get_amino_acid_table() is get_amino_acid_table()

        first = get_amino_acid_table()
        clear_cache()
        assert get_amino_acid_table() is not first


class TestConfigDirectoryOverride:
    """Tests for SAXS_CALCULATOR_CONFIG_DIR."""

    def test_override_directory(self, tmp_path, monkeypatch):
        """Test loading a table from an alternative directory."""
        (tmp_path / "sec_columns.json").write_text(json.dumps({
            "default_pore_size": "200",
            "default_flow_rate": 0.5,
            "columns": [{"pore_size": "200", "a": 7.0, "b": -0.3}],
        }))
        monkeypatch.setenv("SAXS_CALCULATOR_CONFIG_DIR", str(tmp_path))
        clear_cache()

        assert list_pore_sizes() == ["200"]
        assert get_sec_column("100").a == pytest.approx(7.0)

    def test_missing_table_in_override(self, tmp_path, monkeypatch):
        """Test a directory without the requested file."""
        monkeypatch.setenv("SAXS_CALCULATOR_CONFIG_DIR", str(tmp_path))
        clear_cache()

        with pytest.raises(ValueError, match="not found"):
            get_amino_acid_table()

    def test_nonexistent_directory_ignored(self, tmp_path, monkeypatch):
        """Test fallback when the variable points nowhere."""
        monkeypatch.setenv("SAXS_CALCULATOR_CONFIG_DIR", str(tmp_path / "missing"))
        clear_cache()

        assert list_pore_sizes() == ["100", "150", "300"]
