from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


from geocoding_api.base import Transport  # noqa: E402


class FakeTransport(Transport):
    """Records requested URLs and answers with canned bodies."""

    def __init__(self, payload=None, error: Exception | None = None):
        self.payload = payload if payload is not None else {"status": "OK", "results": []}
        self.error = error
        self.urls: list[str] = []
        self.closed = False

    def fetch(self, url: str) -> bytes:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return json.dumps(self.payload).encode("utf-8")

    def close(self) -> None:
        self.closed = True


def make_component(long_name, types, short_name=None):
    return {
        "long_name": long_name,
        "short_name": short_name if short_name is not None else long_name,
        "types": list(types),
    }


@pytest.fixture
def tunbridge_wells_payload():
    return {
        "results": [
            {
                "address_components": [
                    make_component("25", ["street_number"]),
                    make_component("Old Gardens Close", ["route"]),
                    make_component("Tunbridge Wells", ["postal_town"]),
                    make_component("Kent", ["administrative_area_level_2", "political"]),
                    make_component("England", ["administrative_area_level_1", "political"], "England"),
                    make_component("United Kingdom", ["country", "political"], "GB"),
                    make_component("TN2 5ND", ["postal_code"]),
                ],
                "formatted_address": "25 Old Gardens Close, Tunbridge Wells TN2 5ND, UK",
                "geometry": {
                    "location": {"lat": 51.1172303, "lng": 0.2635245},
                    "location_type": "ROOFTOP",
                    "viewport": {
                        "northeast": {"lat": 51.1185792802915, "lng": 0.264873480291502},
                        "southwest": {"lat": 51.1158813197085, "lng": 0.262175519708498},
                    },
                },
                "place_id": "ChIJ5ZqB8KNE30cRP1x6fkGWG9w",
                "types": ["street_address"],
            }
        ],
        "status": "OK",
    }
