"""Tests for the CLI."""

import json
import tempfile
from pathlib import Path

import pytest

from ipadict.main import main


@pytest.fixture
def pairs_file():
    """Temporary TSV of English pairs."""
    content = "Run\t/rʌn/\nrun\trʌn(z)\nro2bot\tɹoʊbɑt\n"
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir, "enwiktionary.tsv")
        path.write_text(content, encoding="utf-8")
        yield path


class TestMain:
    """Tests for the main entry point."""

    def test_json_output(self, pairs_file, capsys):
        """Test a build with curated metadata writes JSON to stdout."""
        code = main([
            "--language", "en",
            "--input", str(pairs_file),
            "--format", "json",
            "--no-reference",
        ])
        assert code == 0

        data = json.loads(capsys.readouterr().out)
        assert data["data"] == {"run": ["ɹʌn", "ɹʌnz"]}
        assert data["metadata"]["language"] == "en"

    def test_tsv_output(self, pairs_file, capsys):
        """Test TSV output has one line per pronunciation."""
        code = main(["-l", "en", "-i", str(pairs_file), "-f", "tsv", "--no-reference"])
        assert code == 0
        assert capsys.readouterr().out.splitlines() == ["run\tɹʌn", "run\tɹʌnz"]

    def test_unknown_language(self, pairs_file, capsys):
        """Test a language without curated metadata still builds."""
        code = main(["-l", "xx", "-i", str(pairs_file), "-f", "tsv", "--no-reference"])
        assert code == 0
        out = capsys.readouterr().out.splitlines()
        assert "run\trʌn" in out

    def test_missing_input(self):
        """Test a missing input file exits with an error."""
        code = main(["-l", "en", "-i", "/nonexistent/pairs.tsv", "--no-reference"])
        assert code == 1

    def test_unreachable_reference(self, pairs_file, tmp_path, monkeypatch):
        """Test a reference inventory failure exits with an error."""
        from ipadict.phonetics import inventory

        def fail(*args, **kwargs):
            raise OSError("offline")

        monkeypatch.setattr(inventory.urllib.request, "urlretrieve", fail)
        code = main([
            "-l", "fr",
            "-i", str(pairs_file),
            "--cache-dir", str(tmp_path),
        ])
        assert code == 1

    def test_undecodable_reference(self, pairs_file, tmp_path):
        """Test a cached reference inventory that is not UTF-8 exits with an error."""
        (tmp_path / "phoible.csv").write_bytes(
            b"InventoryID,ISO6393,Phoneme\n1,deu,\xff\xfe\n"
        )
        code = main([
            "-l", "fr",
            "-i", str(pairs_file),
            "--cache-dir", str(tmp_path),
        ])
        assert code == 1

    def test_source_format(self, tmp_path, capsys):
        """Test --source-format reads files with any extension."""
        path = tmp_path / "pairs.dat"
        path.write_text("Run\t/rʌn/\n", encoding="utf-8")
        code = main([
            "-l", "en",
            "-i", str(path),
            "--source-format", "tsv",
            "--no-reference",
        ])
        assert code == 0
        assert capsys.readouterr().out.splitlines() == ["run\tɹʌn"]

    def test_unknown_extension(self, tmp_path):
        """Test an undetectable input format exits with an error."""
        path = tmp_path / "pairs.dat"
        path.write_text("Run\t/rʌn/\n", encoding="utf-8")
        code = main(["-l", "en", "-i", str(path), "--no-reference"])
        assert code == 1
