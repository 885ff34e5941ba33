"""Tests for the command line interface and configuration."""

import json
import tempfile
from pathlib import Path

import pytest

from imgterms import Config, ImageSignature, load_signatures
from imgterms.cli import main

SIGNATURES = [
    {"name": "first", "coeffs": [[0, 3, -5], [2], [-1]], "averages": [0.5, -0.1, 0.05]},
    {"name": "second", "coeffs": [[1], [], [4, 4]], "averages": [0.2, 0.0, 0.0]},
]


def write_signatures(directory: Path, data) -> Path:
    """Write signature JSON into a directory.

    Args:
        directory: Target directory.
        data: JSON-serialisable signature data.

    Returns:
        Path to the written file.
    """
    path = directory / "signatures.json"
    path.write_text(json.dumps(data))
    return path


class TestLoadSignatures:
    """Test reading signatures from JSON."""

    def test_list_and_single_object(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_signatures(Path(tmpdir), SIGNATURES)
            sigs = load_signatures(path)
            assert [s.name for s in sigs] == ["first", "second"]
            assert sigs[1].coeffs[2] == frozenset({4})

            path = write_signatures(Path(tmpdir), SIGNATURES[0])
            assert len(load_signatures(path)) == 1

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_average_rejected(self, value):
        with pytest.raises(ValueError):
            ImageSignature(coeffs=([1], [], []), averages=(value, 0.0, 0.0))

    def test_signature_is_frozen(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            sig = load_signatures(write_signatures(Path(tmpdir), SIGNATURES[0]))[0]
            with pytest.raises(ValueError):
                sig.name = "other"


class TestCLI:
    """Test the imgterms command."""

    def test_terms_command(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_signatures(Path(tmpdir), SIGNATURES)
            main(["terms", str(path), "--prefix", "IMG"])

        out = capsys.readouterr().out.splitlines()
        assert out[0].startswith("first: ")
        assert {"IMG00", "IMG03", "IMG0-5", "IMG12", "IMG2-1", "IMGA0127"} <= set(out[0].split()[1:])
        assert out[1].startswith("second: ")

    def test_query_command(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_signatures(Path(tmpdir), SIGNATURES[:1])
            main(["query", str(path), "--prefix", "IMG", "--radius", "0"])

        out = capsys.readouterr().out
        assert out.startswith("first: Query((0.3 * IMG0-5 OR 5 * IMG00 OR 0.52 * IMG03 OR")
        assert "34.37 * 1 * IMGA2138" in out

    def test_missing_file_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["terms", "/nonexistent/signatures.json"])
        assert exc_info.value.code == 1

    def test_nan_average_rejected_at_load(self):
        """NaN in the JSON fails validation instead of reaching the indexer."""
        bad = {"coeffs": [[1], [], []], "averages": [float("nan"), 0.0, 0.0]}
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_signatures(Path(tmpdir), [bad])
            with pytest.raises(SystemExit) as exc_info:
                main(["terms", str(path)])
        assert exc_info.value.code == 1

    def test_coefficient_outside_domain_exits(self, capsys):
        bad = {"name": "huge", "coeffs": [[99999], [], []], "averages": [0.5, 0.0, 0.0]}
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_signatures(Path(tmpdir), [bad])
            with pytest.raises(SystemExit) as exc_info:
                main(["query", str(path)])
        assert exc_info.value.code == 1
        assert capsys.readouterr().out.startswith("Error: Signature huge:")

    def test_invalid_file_exits(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_signatures(Path(tmpdir), [{"coeffs": [[1]], "averages": []}])
            with pytest.raises(SystemExit) as exc_info:
                main(["terms", str(path)])
        assert exc_info.value.code == 1


class TestConfig:
    """Test configuration validation."""

    def test_domain_derived_from_grid(self):
        assert Config().domain_size == 128 * 128
        assert Config(num_pixels=4).domain_size == 16
        assert Config(domain_size=6).domain_size == 6

    def test_average_prefix(self):
        assert Config(prefix="IMG").average_prefix(2) == "IMGA2"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"prefix": ""},
            {"prefix": "X9"},
            {"value_slots": (0, 0, 1)},
            {"value_slots": (0, 1)},
            {"value_slots": (-1, 0, 1)},
            {"num_pixels": 0},
            {"domain_size": -1},
            {"num_buckets": 0},
            {"distance_radius": -1},
            {"channel_ranges": ((0.0, 1.0), (0.5, 0.5), (-1.0, 1.0))},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            Config(**kwargs).validate()
