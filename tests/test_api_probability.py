"""
API tests with the probability advancement policy.

Overrides the ``settings`` fixture so the whole module runs with
``status_policy=probability``; with probability 1.0 every poll steps forward.
"""

import random

import pytest
from httpx import ASGITransport, AsyncClient

from ridemock.api.app import create_app
from ridemock.config import Settings
from ridemock.domain.enums import RIDE_SEQUENCE, PolicyKind
from ridemock.domain.policies import ProbabilisticPolicy

ORDER = [s.value for s in RIDE_SEQUENCE]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        booking_delay_seconds=0, status_policy="probability", advance_probability=1.0
    )


async def _poll(client: AsyncClient, times: int) -> list[str]:
    return [(await client.get("/api/ride-status")).json()["status"] for _ in range(times)]


def test_settings_select_probability_policy(app):
    assert app.state.settings.status_policy is PolicyKind.PROBABILITY
    assert isinstance(app.state.ride_store.current.policy, ProbabilisticPolicy)


@pytest.mark.asyncio
async def test_every_poll_steps_forward(client: AsyncClient):
    await client.post("/api/book", json={})
    assert await _poll(client, 5) == [
        "driver_arrived",
        "in_progress",
        "completed",
        "completed",
        "completed",
    ]


@pytest.mark.asyncio
async def test_reset_then_poll_reaches_completed_again(client: AsyncClient):
    await client.post("/api/book", json={})
    await _poll(client, 3)
    resp = await client.post("/api/reset-ride")
    assert resp.json()["status"] == "driver_assigned"
    assert await _poll(client, 4) == [
        "driver_arrived",
        "in_progress",
        "completed",
        "completed",
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("seed", [1, 2, 3])
async def test_seeded_coin_flips_only_move_forward(seed):
    app = create_app(
        Settings(booking_delay_seconds=0, status_policy="probability", advance_probability=0.5),
        rng=random.Random(seed),
    )
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        await ac.post("/api/book", json={})
        statuses = await _poll(ac, 40)
    idx = [ORDER.index(s) for s in statuses]
    assert idx[0] in (0, 1)
    assert all(b - a in (0, 1) for a, b in zip(idx, idx[1:]))
