"""
Shared fixtures: an in-memory stand-in for the simulation backend.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from tournament_dashboard.client import TournamentApiClient
from tournament_dashboard.core.notifications import NotificationBus


BASE_URL = "http://backend.test"

TEAMS = ["Argentina", "Brazil", "England", "France", "Germany", "Spain", "Italy", "Netherlands"]


class FakeBackend:
    """Routes (method, path) to canned responses and records every request."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Tuple[int, bytes]] = {}
        self.requests: List[httpx.Request] = []

    def set(self, method: str, path: str, status: int = 200, body: Any = None, raw: Optional[bytes] = None):
        if raw is not None:
            content = raw
        else:
            content = json.dumps(body).encode()
        self.routes[(method, path)] = (status, content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"detail": "Not Found"})
        status, content = self.routes[key]
        return httpx.Response(status, content=content, headers={"Content-Type": "application/json"})

    def calls(self, method: str, path: str) -> int:
        return sum(1 for r in self.requests if r.method == method and r.url.path == path)

    def body_of(self, method: str, path: str) -> Any:
        for r in self.requests:
            if r.method == method and r.url.path == path:
                return json.loads(r.content)
        return None


def simulation_payload(simulation_id: str, teams: List[str]) -> dict:
    """Backend-style result: descending win probabilities in team order."""
    step = 1.0 / (len(teams) * (len(teams) + 1) / 2)
    results = [
        {"team": team, "win_prob": round((len(teams) - i) * step, 6)}
        for i, team in enumerate(teams)
    ]
    return {"simulation_id": simulation_id, "results": results}


def model_run(run_id: str, status: str = "PENDING", metrics: dict = None) -> dict:
    return {
        "id": run_id,
        "created_at": "2025-06-01T12:00:00",
        "model_s3_path": f"s3://models/{run_id}.pkl",
        "status": status,
        "metrics": metrics,
        "notes": None,
    }


@pytest.fixture
def backend() -> FakeBackend:
    """A fake backend with the team catalogue loaded."""
    fake = FakeBackend()
    fake.set("GET", "/teams", body=TEAMS)
    return fake


@pytest.fixture
def api_client(backend) -> TournamentApiClient:
    return TournamentApiClient(BASE_URL, transport=httpx.MockTransport(backend.handler))


@pytest.fixture
def bus() -> NotificationBus:
    return NotificationBus()
