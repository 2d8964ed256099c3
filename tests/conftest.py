"""Shared test fixtures for chuk-mcp-maps."""

import pytest
from unittest.mock import AsyncMock, MagicMock


# Sample Google Maps API responses
SAMPLE_GEOCODE_RESPONSE = {
    "status": "OK",
    "results": [
        {
            "place_id": "ChIJ2eUgeAK6j4ARbn5u_wAGqWA",
            "formatted_address": "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA",
            "geometry": {
                "location": {"lat": 37.4224764, "lng": -122.0842499},
                "location_type": "ROOFTOP",
            },
            "address_components": [
                {"long_name": "1600", "short_name": "1600", "types": ["street_number"]},
                {
                    "long_name": "Amphitheatre Parkway",
                    "short_name": "Amphitheatre Pkwy",
                    "types": ["route"],
                },
                {
                    "long_name": "Mountain View",
                    "short_name": "Mountain View",
                    "types": ["locality", "political"],
                },
            ],
            "types": ["street_address"],
        }
    ],
}

SAMPLE_GEOCODE_MULTI = {
    "status": "OK",
    "results": [
        SAMPLE_GEOCODE_RESPONSE["results"][0],
        {
            "place_id": "ChIJsecond",
            "formatted_address": "1600 Amphitheatre Pkwy, Somewhere Else, USA",
            "geometry": {"location": {"lat": 10.0, "lng": 20.0}},
            "address_components": [],
        },
    ],
}

SAMPLE_PLACES_RESPONSE = {
    "status": "OK",
    "results": [
        {
            "name": "Blue Bottle Coffee",
            "place_id": "ChIJbluebottle",
            "formatted_address": "66 Mint St, San Francisco, CA 94103, USA",
            "geometry": {"location": {"lat": 37.7823, "lng": -122.4078}},
            "rating": 4.4,
            "types": ["cafe", "food"],
            "user_ratings_total": 1500,
        },
        {
            "name": "Unrated Cafe",
            "place_id": "ChIJunrated",
            "formatted_address": "1 Market St, San Francisco, CA 94105, USA",
            "geometry": {"location": {"lat": 37.7941, "lng": -122.3951}},
            "types": ["cafe"],
        },
    ],
}

SAMPLE_PLACE_DETAILS_RESPONSE = {
    "status": "OK",
    "result": {
        "name": "Googleplex",
        "place_id": "ChIJ2eUgeAK6j4ARbn5u_wAGqWA",
        "formatted_address": "1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA",
        "formatted_phone_number": "(650) 253-0000",
        "website": "https://about.google/",
        "rating": 4.5,
        "reviews": [
            {
                "author_name": "Ada",
                "rating": 5,
                "text": "Great campus",
                "time": 1700000000,
                "profile_photo_url": "https://example.com/ada.png",
            }
        ],
        "opening_hours": {
            "open_now": True,
            "weekday_text": ["Monday: 9:00 AM - 5:00 PM"],
            "periods": [],
        },
        "geometry": {"location": {"lat": 37.4224764, "lng": -122.0842499}},
    },
}

SAMPLE_DISTANCE_MATRIX_RESPONSE = {
    "status": "OK",
    "origin_addresses": ["A, USA", "B, USA"],
    "destination_addresses": ["C, USA"],
    "rows": [
        {
            "elements": [
                {
                    "status": "OK",
                    "duration": {"text": "1 hour", "value": 3600},
                    "distance": {"text": "100 km", "value": 100000},
                }
            ]
        },
        {"elements": [{"status": "NOT_FOUND"}]},
    ],
}

SAMPLE_ELEVATION_RESPONSE = {
    "status": "OK",
    "results": [
        {
            "elevation": 1608.637939453125,
            "location": {"lat": 39.7391536, "lng": -104.9847034},
            "resolution": 4.771975994110107,
        }
    ],
}

SAMPLE_DIRECTIONS_RESPONSE = {
    "status": "OK",
    "routes": [
        {
            "summary": "US-101 S",
            "legs": [
                {
                    "distance": {"text": "10.2 km", "value": 10200},
                    "duration": {"text": "12 mins", "value": 720},
                    "steps": [
                        {
                            "html_instructions": "Head <b>south</b>",
                            "distance": {"text": "0.2 km", "value": 200},
                            "duration": {"text": "1 min", "value": 40},
                            "travel_mode": "DRIVING",
                        },
                        {
                            "html_instructions": "Merge onto <b>US-101 S</b>",
                            "distance": {"text": "10.0 km", "value": 10000},
                            "duration": {"text": "11 mins", "value": 680},
                            "travel_mode": "DRIVING",
                        },
                    ],
                },
                {
                    "distance": {"text": "5 km", "value": 5000},
                    "duration": {"text": "6 mins", "value": 360},
                    "steps": [],
                },
            ],
        }
    ],
}

SAMPLE_REQUEST_DENIED = {
    "status": "REQUEST_DENIED",
    "error_message": "The provided API key is invalid.",
}

SAMPLE_ZERO_RESULTS = {"status": "ZERO_RESULTS", "results": []}


@pytest.fixture
def mock_maps_client():
    """Mock GoogleMapsClient returning a successful geocode envelope."""
    client = AsyncMock()
    client.get = AsyncMock(return_value=SAMPLE_GEOCODE_RESPONSE)
    client.base_url = "https://maps.googleapis.com/maps/api"
    return client


@pytest.fixture
def mock_maps(mock_maps_client):
    """GoogleMaps manager with mocked GoogleMapsClient."""
    from chuk_mcp_maps.core.maps import GoogleMaps

    return GoogleMaps(client=mock_maps_client)


@pytest.fixture
def mock_mcp():
    """Mock ChukMCPServer."""
    mcp = MagicMock()
    mcp.tool = MagicMock(return_value=lambda fn: fn)
    return mcp
