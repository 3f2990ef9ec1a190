# ============================================================================
# FILE: tests/unit/test_scripts.py
# ============================================================================
"""
Unit tests for the command-line scripts
"""

import importlib.util
import json
import logging
from pathlib import Path

import pytest

from medicine_verification.config import logging_settings

SCRIPTS_DIR = Path(__file__).resolve().parents[2] / "scripts"


def _load_script(name):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Scripts reconfigure the root logger; keep it quiet and restore it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    monkeypatch.setattr(logging_settings, "LOG_LEVEL", "ERROR")
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def registry_csv(tmp_path):
    path = tmp_path / "registry.csv"
    path.write_text(
        "Generic Name,Brand Name,Dosage Code\n"
        "paracetamol,Panadol,T500\n"
        "cetirizine,Zyrtec,T10\n"
        ",Orphan,X\n"
    )
    return path


@pytest.fixture
def extraction_json(tmp_path, sample_extraction):
    path = tmp_path / "extracted.json"
    path.write_text(json.dumps(sample_extraction))
    return path


class TestImportScript:
    """Test scripts/import_registry.py"""

    def test_import(self, tmp_path, registry_csv, capsys):
        db = tmp_path / "registry.db"
        report_path = tmp_path / "report.json"

        code = _load_script("import_registry").main([
            str(registry_csv), "--db", str(db), "--report", str(report_path)
        ])

        assert code == 0
        out = json.loads(capsys.readouterr().out)
        assert out['inserted'] == 2
        assert out['invalid_records'] == 1
        assert db.exists()
        assert json.loads(report_path.read_text())['details']['invalid_records'][0]['row'] == 4

    def test_missing_file(self, tmp_path, capsys):
        code = _load_script("import_registry").main([
            str(tmp_path / "nope.xlsx"), "--db", str(tmp_path / "registry.db")
        ])

        assert code == 1
        assert "not found" in capsys.readouterr().err

    def test_bad_log_level(self, monkeypatch, registry_csv, tmp_path, capsys):
        monkeypatch.setattr(logging_settings, "LOG_LEVEL", "LOUD")

        code = _load_script("import_registry").main([str(registry_csv), "--db", str(tmp_path / "r.db")])

        assert code == 1
        assert "Unknown log level" in capsys.readouterr().err


class TestVerifyScript:
    """Test scripts/verify_prescription.py"""

    @pytest.mark.parametrize("extra_args", [[], ["--parallel", "--max-concurrent", "2"]])
    def test_verify(self, tmp_path, registry_csv, extraction_json, capsys, extra_args):
        db = tmp_path / "registry.db"
        assert _load_script("import_registry").main([str(registry_csv), "--db", str(db)]) == 0
        capsys.readouterr()

        code = _load_script("verify_prescription").main([str(extraction_json), "--db", str(db), *extra_args])

        assert code == 0
        out = json.loads(capsys.readouterr().out)
        assert out['verification_status'] == "manual"
        assert [m['verified'] for m in out['extracted_medicines']] == [True, False]

    def test_missing_database(self, tmp_path, extraction_json, capsys):
        code = _load_script("verify_prescription").main([
            str(extraction_json), "--db", str(tmp_path / "missing.db")
        ])

        assert code == 1
        assert "not available" in capsys.readouterr().err

    def test_unreadable_extraction(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")

        code = _load_script("verify_prescription").main([str(bad)])

        assert code == 1
        assert "cannot read extraction JSON" in capsys.readouterr().err

    @pytest.mark.parametrize("limit", ["0", "-1", "many"])
    def test_rejects_bad_concurrency_limit(self, extraction_json, capsys, limit):
        with pytest.raises(SystemExit) as exc_info:
            _load_script("verify_prescription").main([str(extraction_json), "--parallel", "--max-concurrent", limit])

        assert exc_info.value.code == 2
        assert "--max-concurrent" in capsys.readouterr().err
