"""Fixtures with realistic logbook API response dicts for testing."""

from __future__ import annotations

import pytest


@pytest.fixture
def logbook_splits_payload() -> dict:
    """GET /api/users/me/results/{id} for an 8000 m piece with splits."""
    return {
        "data": {
            "id": 12345,
            "user_id": 1,
            "date": "2025-09-17 07:30:00",
            "timezone": "Europe/London",
            "distance": 8000,
            "type": "rower",
            "time": 21671,
            "time_formatted": "36:07.1",
            "workout_type": "FixedDistanceSplits",
            "source": "ErgData",
            "verified": True,
            "ranked": False,
            "stroke_rate": 19,
            "heart_rate": {"average": 143, "min": 98, "max": 171},
            "workout": {
                "splits": [
                    {"type": "distance", "time": 4357, "distance": 1600, "stroke_rate": 18,
                     "heart_rate": {"average": 104}},
                    {"type": "distance", "time": 4334, "distance": 1600, "stroke_rate": 19,
                     "heart_rate": {"average": 149}},
                    {"type": "distance", "time": 4313, "distance": 1600, "stroke_rate": 19,
                     "heart_rate": {"average": 150}},
                    {"type": "distance", "time": 4354, "distance": 1600, "stroke_rate": 19,
                     "heart_rate": {"average": 150}},
                    {"type": "distance", "time": 4312, "distance": 1600, "stroke_rate": 20,
                     "heart_rate": {"average": 163}},
                ]
            },
        }
    }


@pytest.fixture
def logbook_intervals_payload() -> dict:
    """A 2 x 1000 m interval session, unwrapped (as in a webhook body)."""
    return {
        "id": 54321,
        "user_id": 1,
        "date": "2025-09-18T18:00:00Z",
        "distance": 2000,
        "time": 6002,
        "stroke_rate": 24,
        "workout_type": "FixedDistanceInterval",
        "heart_rate": {"average": 0},
        "workout": {
            "intervals": [
                {"type": "distance", "time": 3002, "distance": 1000, "stroke_rate": 24,
                 "rest_time": 900},
                {"type": "distance", "time": 3000, "distance": 1000, "stroke_rate": 25,
                 "rest_time": 0},
            ]
        },
    }


@pytest.fixture
def logbook_user_payload() -> dict:
    """GET /api/users/me."""
    return {
        "data": {
            "id": 1,
            "username": "rower42",
            "first_name": "Pat",
            "last_name": "Doe",
            "profile_image": "https://log.concept2.com/images/rower42.png",
        }
    }


@pytest.fixture
def token_payload() -> dict:
    """POST /oauth/access_token."""
    return {
        "access_token": "new-access",
        "token_type": "Bearer",
        "expires_in": 604800,
        "refresh_token": "new-refresh",
        "scope": "user:read,results:read",
    }

