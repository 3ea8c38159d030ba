"""
Tests for the command line entry point.

decode_image is replaced so exit codes and output can be checked without
real photographs.
"""

import json

import pytest

from pharma_datamatrix import __main__ as cli
from pharma_datamatrix import DecodeOutcome, PipelineState, ProcessingError, LookupResult


PAYLOAD = "010034928158905817131028100U42275AA"


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "carton.png"
    path.write_bytes(b"placeholder")
    return path


def patch_decode(monkeypatch, outcome=None, error=None):
    calls = []

    def fake_decode_image(path, pipeline=None):
        calls.append(path)
        if error is not None:
            raise error
        return outcome

    monkeypatch.setattr(cli, "decode_image", fake_decode_image)
    return calls


def succeeded(text=PAYLOAD):
    return DecodeOutcome(
        state=PipelineState.SUCCEEDED,
        text=text,
        attempt="standard",
        attempts_tried=["standard"],
    )


class TestExitCodes:
    """0 success, 1 usage, 2 decode/processing failure."""

    def test_success_prints_payload(self, monkeypatch, image_file, capsys):
        patch_decode(monkeypatch, succeeded())

        assert cli.main([str(image_file)]) == 0
        assert capsys.readouterr().out.strip() == PAYLOAD

    def test_missing_argument(self, capsys):
        assert cli.main([]) == 1
        assert "usage" in capsys.readouterr().err.lower()

    def test_nonexistent_file(self, monkeypatch, tmp_path, capsys):
        calls = patch_decode(monkeypatch, succeeded())

        assert cli.main([str(tmp_path / "nope.png")]) == 1
        assert "not found" in capsys.readouterr().err
        assert calls == []

    def test_decode_failure(self, monkeypatch, image_file, capsys):
        patch_decode(monkeypatch, DecodeOutcome(
            state=PipelineState.EXHAUSTED,
            attempts_tried=["standard", "original"],
        ))

        assert cli.main([str(image_file)]) == 2
        captured = capsys.readouterr()
        assert "Decode failed" in captured.err
        assert captured.out == ""

    def test_processing_error(self, monkeypatch, image_file, capsys):
        patch_decode(monkeypatch, error=ProcessingError("Cannot open image: truncated"))

        assert cli.main([str(image_file)]) == 2
        assert "Processing error" in capsys.readouterr().err

    def test_lookup_without_parse(self, monkeypatch, image_file, capsys):
        calls = patch_decode(monkeypatch, succeeded())

        assert cli.main([str(image_file), "--lookup"]) == 1
        assert "--lookup requires --parse" in capsys.readouterr().err
        assert calls == []

    def test_bad_settings_file(self, monkeypatch, image_file, tmp_path):
        patch_decode(monkeypatch, succeeded())
        bad = tmp_path / "settings.json"
        bad.write_text("[1, 2]", encoding="utf-8")

        assert cli.main([str(image_file), "--settings", str(bad)]) == 1


class TestParseOutput:
    """--parse and --lookup JSON output."""

    def test_parse(self, monkeypatch, image_file, capsys):
        patch_decode(monkeypatch, succeeded())

        assert cli.main([str(image_file), "--parse"]) == 0
        data = json.loads(capsys.readouterr().out)

        assert data["Raw"] == PAYLOAD
        assert data["NDC"] == "49281-5890-58"
        assert data["Expiry Date"] == "October 28, 2013"
        assert data["Expiry Status"] == "Expired"
        assert "Drug" not in data

    def test_parse_strip_symbology(self, monkeypatch, image_file, capsys):
        patch_decode(monkeypatch, succeeded("]d2" + PAYLOAD))

        assert cli.main([str(image_file), "--parse", "--strip-symbology"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["GTIN Code"] == "00349281589058"

    def test_lookup_match(self, monkeypatch, image_file, capsys):
        patch_decode(monkeypatch, succeeded())
        seen = []

        def fake_lookup(ndc, settings=None, session=None):
            seen.append(ndc)
            return LookupResult(
                success=True,
                search_query='product_ndc:"49281-5890"',
                result={"product_ndc": "49281-5890", "brand_name": "Fluzone", "openfda": {}},
                all_results=[],
            )

        monkeypatch.setattr(cli, "lookup_ndc", fake_lookup)

        assert cli.main([str(image_file), "--parse", "--lookup"]) == 0
        data = json.loads(capsys.readouterr().out)

        assert seen == ["49281-5890-58"]
        assert data["Lookup Query"] == 'product_ndc:"49281-5890"'
        assert data["Drug"] == {"product_ndc": "49281-5890", "brand_name": "Fluzone"}

    def test_lookup_no_match(self, monkeypatch, image_file, capsys):
        patch_decode(monkeypatch, succeeded())
        monkeypatch.setattr(
            cli, "lookup_ndc",
            lambda ndc, settings=None, session=None: LookupResult(success=False, error="nothing"),
        )

        assert cli.main([str(image_file), "--parse", "--lookup"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["_lookup_error"] == "nothing"

    def test_lookup_without_ndc(self, monkeypatch, image_file, capsys):
        patch_decode(monkeypatch, succeeded("10LOTONLY"))

        assert cli.main([str(image_file), "--parse", "--lookup"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["_lookup_error"] == "NDC not found in parsed result"
