"""Visual route tests — /avatars and /colors.

Tests cover:
    - Avatar rendered through the injected surface factory
    - Background derived from string_to_color when omitted
    - Unparseable colors rejected at the boundary: 400 VALIDATION_ERROR naming the field
    - /colors is deterministic
"""

import pytest

from jutils.core.string_color import string_to_color
from jutils.infrastructure.pillow_surface import get_surface_factory
from jutils.main import app


class _FakeSurface:
    """Records the background fills it is asked for."""
    fills: list[str] = []

    def __init__(self, width, height):
        self.size = (width, height)

    def fill_rect(self, x, y, width, height, color):
        _FakeSurface.fills.append(color)

    def draw_centered_text(self, text, x, y, color):
        pass

    def to_data_uri(self):
        return "data:image/png;base64,iVBORw0KGgo="


@pytest.fixture
def fake_surface():
    _FakeSurface.fills = []
    app.dependency_overrides[get_surface_factory] = lambda: _FakeSurface
    return _FakeSurface


# --- /avatars -----------------------------------------------------------------

async def test_create_avatar(client, fake_surface):
    res = await client.post("/api/v1/avatars", json={
        "name": "Kiarash Soleimanzadeh",
        "foreground_color": "white",
        "background_color": "#009578",
    })
    assert res.status_code == 200
    body = res.json()
    assert body["initials"] == "KS"
    assert body["background_color"] == "#009578"
    assert body["data_uri"].startswith("data:image/png;base64,")
    assert fake_surface.fills == ["#009578"]


async def test_avatar_background_defaults_to_string_color(client, fake_surface):
    res = await client.post("/api/v1/avatars", json={"name": "Ada Lovelace"})
    assert res.status_code == 200
    expected = string_to_color("Ada Lovelace")
    assert res.json()["background_color"] == expected
    assert fake_surface.fills == [expected]


async def test_avatar_invalid_background_color_is_400(client, fake_surface):
    res = await client.post("/api/v1/avatars", json={
        "name": "Ada", "background_color": "bogus",
    })
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["path"] == "/api/v1/avatars"
    assert error["details"][0]["location"] == "body"
    assert error["details"][0]["field"] == "background_color"
    assert fake_surface.fills == []


async def test_avatar_invalid_foreground_color_is_400(client, fake_surface):
    res = await client.post("/api/v1/avatars", json={
        "name": "Ada", "foreground_color": "#12345",
    })
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "foreground_color"


async def test_avatar_accepts_css_color_forms(client, fake_surface):
    res = await client.post("/api/v1/avatars", json={
        "name": "Ada", "foreground_color": "rgb(255, 0, 0)", "background_color": "navy",
    })
    assert res.status_code == 200
    assert fake_surface.fills == ["navy"]


async def test_avatar_blank_name_is_400(client, fake_surface):
    res = await client.post("/api/v1/avatars", json={"name": "   "})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


# --- /colors ------------------------------------------------------------------

async def test_color_for_text(client):
    res = await client.get("/api/v1/colors", params={"text": "a"})
    assert res.status_code == 200
    assert res.json() == {"text": "a", "color": "#610000"}


async def test_color_for_text_is_deterministic(client):
    first = await client.get("/api/v1/colors", params={"text": "Kiarash Soleimanzadeh"})
    second = await client.get("/api/v1/colors", params={"text": "Kiarash Soleimanzadeh"})
    assert first.json() == second.json()
