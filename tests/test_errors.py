from __future__ import annotations

import json

import pytest

from espn_api.adapters.json_exporter import export_payload_json
from espn_api.core.domain.models import NewsResponse
from espn_api.core.errors import (
    ESPNAPIError,
    ESPNError,
    ESPNNotFoundError,
    ESPNRateLimitError,
    error_for_status,
)


@pytest.mark.parametrize(
    "status_code, expected",
    [(429, ESPNRateLimitError), (404, ESPNNotFoundError), (400, ESPNAPIError), (500, ESPNAPIError), (418, ESPNAPIError)],
)
def test_error_kind_depends_only_on_status(status_code, expected):
    err = error_for_status(status_code, endpoint="/x", payload={"a": 1})
    assert type(err) is expected
    assert isinstance(err, ESPNError)
    assert err.status_code == status_code
    assert err.endpoint == "/x"
    assert err.payload == {"a": 1}


def test_error_str():
    assert str(error_for_status(503, endpoint="/sports/x")) == "HTTP 503 for /sports/x: request failed"
    assert str(ESPNAPIError("transport error", endpoint="/y")) == "transport error (/y)"


def test_export_payload_json(tmp_path):
    news = NewsResponse.model_validate({"articles": [{"headline": "Héroe", "lastModified": "2025-01-02"}]})

    path = export_payload_json(payload=news, output_path=tmp_path / "out" / "news.json")

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["articles"][0]["headline"] == "Héroe"
    assert data["articles"][0]["lastModified"] == "2025-01-02"
