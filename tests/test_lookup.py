"""
Tests for the OpenFDA lookup client and settings.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from pharma_datamatrix import lookup_ndc, load_settings, DEFAULT_SETTINGS
from pharma_datamatrix.settings import SETTINGS_ENV_VAR


NDC = "49281-5890-58"


def response(status_code=200, results=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = {"results": results} if results is not None else {}
    if status_code >= 400 and status_code != 404:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return resp


def searched(session):
    return [c.kwargs["params"]["search"] for c in session.get.call_args_list]


class TestLookupFallback:
    """Queries widen until one returns results."""

    def test_exact_match(self):
        session = MagicMock()
        session.get.return_value = response(results=[{"product_ndc": "49281-5890"}])

        result = lookup_ndc(NDC, session=session)

        assert result.success
        assert result.search_query == 'product_ndc:"49281-5890-58"'
        assert result.result == {"product_ndc": "49281-5890"}
        assert searched(session) == ['product_ndc:"49281-5890-58"']
        session.close.assert_not_called()

    def test_falls_back_to_labeler_product(self):
        session = MagicMock()
        session.get.side_effect = [
            response(404),
            response(results=[{"product_ndc": "49281-5890"}, {"product_ndc": "49281-5891"}]),
        ]

        result = lookup_ndc(NDC, session=session)

        assert result.success
        assert result.search_query == 'product_ndc:"49281-5890"'
        assert len(result.all_results) == 2

    def test_falls_back_to_labeler_wildcard(self):
        session = MagicMock()
        session.get.side_effect = [
            response(404),
            response(results=[]),
            response(results=[{"product_ndc": "49281-0001"}]),
        ]

        result = lookup_ndc(NDC, session=session)

        assert result.search_query == "product_ndc:49281*"
        assert searched(session) == [
            'product_ndc:"49281-5890-58"',
            'product_ndc:"49281-5890"',
            "product_ndc:49281*",
        ]

    def test_http_errors_move_on(self):
        session = MagicMock()
        session.get.side_effect = [
            requests.ConnectionError("offline"),
            response(500),
            response(results=[{"product_ndc": "49281-0001"}]),
        ]

        result = lookup_ndc(NDC, session=session)

        assert result.success
        assert result.search_query == "product_ndc:49281*"

    def test_no_match(self):
        session = MagicMock()
        session.get.return_value = response(404)

        result = lookup_ndc(NDC, session=session)

        assert not result.success
        assert "No matching drug information" in result.error
        assert session.get.call_count == 3

    def test_request_parameters(self):
        session = MagicMock()
        session.get.return_value = response(results=[{"product_ndc": "x"}])
        settings = dict(DEFAULT_SETTINGS, openfda_limit=3, openfda_timeout=2.5)

        lookup_ndc(NDC, settings=settings, session=session)

        args, kwargs = session.get.call_args
        assert args[0] == DEFAULT_SETTINGS["openfda_url"]
        assert kwargs["params"]["limit"] == 3
        assert kwargs["timeout"] == 2.5

    def test_empty_ndc(self):
        result = lookup_ndc("")

        assert not result.success

    def test_own_session_is_closed(self, monkeypatch):
        session = MagicMock()
        session.get.return_value = response(404)
        monkeypatch.setattr(requests, "Session", lambda: session)

        lookup_ndc(NDC)

        session.close.assert_called_once()


class TestSettings:
    """JSON settings layered over defaults."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv(SETTINGS_ENV_VAR, raising=False)

        assert load_settings() == DEFAULT_SETTINGS

    def test_file_overrides(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"near_expiry_months": 3, "bogus": 1}), encoding="utf-8")

        settings = load_settings(path)

        assert settings["near_expiry_months"] == 3
        assert settings["openfda_limit"] == DEFAULT_SETTINGS["openfda_limit"]
        assert "bogus" not in settings

    def test_env_var_path(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"openfda_limit": 1}), encoding="utf-8")
        monkeypatch.setenv(SETTINGS_ENV_VAR, str(path))

        assert load_settings()["openfda_limit"] == 1

    def test_non_object_rejected(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(ValueError):
            load_settings(path)
