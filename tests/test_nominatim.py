"""
Tests for the Nominatim place search.
"""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest
import requests

from biotope_map.datasources.nominatim import SEARCH_URL, resolve_city
from biotope_map.errors import CityNotFound, TransportFailure

SAMPLE_SEARCH_RESPONSE: list[dict] = [
    {
        "place_id": 123,
        "lat": "47.0505452",
        "lon": "8.3054682",
        "display_name": "Luzern, Schweiz/Suisse/Svizzera/Svizra",
    },
    {"place_id": 456, "lat": "1.0", "lon": "2.0", "display_name": "Elsewhere"},
]


def mock_response(payload: object) -> Mock:
    resp = Mock()
    resp.json.return_value = payload
    resp.raise_for_status = Mock()
    return resp


class TestResolveCity:
    """Test city lookup."""

    @patch("biotope_map.datasources.nominatim.search.session.get")
    def test_first_result(self, mock_get: Mock) -> None:
        mock_get.return_value = mock_response(SAMPLE_SEARCH_RESPONSE)

        city = resolve_city("Lucerne")

        assert city.name == "Lucerne"
        assert city.latitude == pytest.approx(47.0505452)
        assert city.longitude == pytest.approx(8.3054682)
        assert city.display_name.startswith("Luzern")

    @patch("biotope_map.datasources.nominatim.search.session.get")
    def test_request_params(self, mock_get: Mock) -> None:
        mock_get.return_value = mock_response(SAMPLE_SEARCH_RESPONSE)

        resolve_city("São Paulo")

        args, kwargs = mock_get.call_args
        assert args[0] == SEARCH_URL
        assert kwargs["params"] == {"format": "json", "q": "São Paulo"}

    @patch("biotope_map.datasources.nominatim.search.session.get")
    def test_empty_result_not_found(self, mock_get: Mock) -> None:
        mock_get.return_value = mock_response([])

        with pytest.raises(CityNotFound) as excinfo:
            resolve_city("Atlantis")
        assert excinfo.value.name == "Atlantis"

    @patch("biotope_map.datasources.nominatim.search.session.get")
    def test_connection_error(self, mock_get: Mock) -> None:
        mock_get.side_effect = requests.ConnectionError("boom")

        with pytest.raises(TransportFailure) as excinfo:
            resolve_city("Lucerne")
        assert isinstance(excinfo.value.__cause__, requests.ConnectionError)

    @patch("biotope_map.datasources.nominatim.search.session.get")
    def test_http_error_status(self, mock_get: Mock) -> None:
        resp = mock_response([])
        resp.raise_for_status.side_effect = requests.HTTPError("503")
        mock_get.return_value = resp

        with pytest.raises(TransportFailure):
            resolve_city("Lucerne")

    @patch("biotope_map.datasources.nominatim.search.session.get")
    def test_invalid_json(self, mock_get: Mock) -> None:
        resp = mock_response(None)
        resp.json.side_effect = ValueError("not json")
        mock_get.return_value = resp

        with pytest.raises(TransportFailure):
            resolve_city("Lucerne")

    @patch("biotope_map.datasources.nominatim.search.session.get")
    def test_non_list_response(self, mock_get: Mock) -> None:
        mock_get.return_value = mock_response({"error": "bad"})

        with pytest.raises(TransportFailure):
            resolve_city("Lucerne")

    @patch("biotope_map.datasources.nominatim.search.session.get")
    def test_missing_coordinates(self, mock_get: Mock) -> None:
        mock_get.return_value = mock_response([{"display_name": "Nowhere"}])

        with pytest.raises(TransportFailure):
            resolve_city("Nowhere")
