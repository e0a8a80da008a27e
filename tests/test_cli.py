import yaml
from Bio import SeqIO
from typer.testing import CliRunner

from gfa2.cli import app

from conftest import FULL_GFA2, SIMPLE_GFA1

runner = CliRunner()


def test_validate(gfa2_file):
    result = runner.invoke(app, ["validate", str(gfa2_file)])
    assert result.exit_code == 0
    assert "valid GFA2" in result.output
    assert "4 segments" in result.output


def test_validate_gfa1(gfa1_file):
    result = runner.invoke(app, ["validate", str(gfa1_file)])
    assert result.exit_code == 0
    assert "valid GFA1" in result.output
    assert "3 links" in result.output


def test_validate_malformed(malformed_gfa2_file):
    result = runner.invoke(app, ["validate", str(malformed_gfa2_file)])
    assert result.exit_code == 1
    assert "Parse error" in result.output
    assert "line 2" in result.output


def test_validate_missing_file(tmp_path):
    result = runner.invoke(app, ["validate", str(tmp_path / "missing.gfa")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_bad_config(gfa2_file, tmp_path):
    config_path = tmp_path / "config.yaml"
    with open(config_path, "w") as f:
        yaml.dump({"identifiers": "hex"}, f)

    result = runner.invoke(app, ["validate", str(gfa2_file), "--config", str(config_path)])
    assert result.exit_code == 1
    assert "Configuration Error" in result.output


def test_format_to_file(gfa2_file, tmp_path):
    out = tmp_path / "formatted.gfa"
    result = runner.invoke(app, ["format", str(gfa2_file), "--output", str(out)])
    assert result.exit_code == 0
    assert out.read_text() == FULL_GFA2


def test_format_to_stdout(gfa1_file):
    result = runner.invoke(app, ["format", str(gfa1_file)])
    assert result.exit_code == 0
    assert SIMPLE_GFA1 in result.output


def test_format_without_tags(gfa2_file, tmp_path):
    out = tmp_path / "formatted.gfa"
    result = runner.invoke(app, ["format", str(gfa2_file), "--no-tags", "-o", str(out)])
    assert result.exit_code == 0
    written = out.read_text()
    assert "RC:i:12" not in written
    assert "S\t5\t130\t*\n" in written


def test_format_numeric_ids_from_config(gfa2_file, tmp_path):
    config_path = tmp_path / "config.yaml"
    with open(config_path, "w") as f:
        yaml.dump({"identifiers": "numeric"}, f)
    out = tmp_path / "formatted.gfa"

    result = runner.invoke(app, ["format", str(gfa2_file), "-c", str(config_path), "-o", str(out)])
    assert result.exit_code == 0
    assert "S\t49\t122\t*\n" in out.read_text()


def test_stats(gfa2_file):
    result = runner.invoke(app, ["stats", str(gfa2_file)])
    assert result.exit_code == 0
    assert "segments" in result.output
    assert "groups_u" in result.output
    assert "Version 2.0" in result.output


def test_fasta(gfa1_file, tmp_path):
    out = tmp_path / "segments.fa"
    result = runner.invoke(app, ["fasta", str(gfa1_file), "--output", str(out)])
    assert result.exit_code == 0
    assert "Wrote 3 sequences" in result.output
    assert [r.id for r in SeqIO.parse(str(out), "fasta")] == ["11", "12", "13"]
