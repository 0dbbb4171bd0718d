import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


def _video(title: str, **extra) -> dict:
    return {
        "titleEn": title,
        "titleFr": f"{title} (FR)",
        "urlEn": f"{title.lower()}-en.mp4",
        "urlFr": f"{title.lower()}-fr.mp4",
        **extra,
    }


async def _create(client: AsyncClient, title: str, **extra) -> dict:
    response = await client.post("/api/hero-videos", json=_video(title, **extra))
    assert response.status_code == 201
    return response.json()


async def test_create_requires_admin(client: AsyncClient):
    response = await client.post("/api/hero-videos", json=_video("Sunrise"))
    assert response.status_code == 401


async def test_create_appends_to_rotation(admin_client: AsyncClient):
    first = await _create(admin_client, "Sunrise")
    second = await _create(admin_client, "Sunset")
    assert first["orderIndex"] == 0
    assert second["orderIndex"] == 1
    assert second["isActive"] is True


async def test_create_with_explicit_order(admin_client: AsyncClient):
    await _create(admin_client, "Sunrise")
    video = await _create(admin_client, "Pinned", orderIndex=7)
    assert video["orderIndex"] == 7
    nxt = await _create(admin_client, "After")
    assert nxt["orderIndex"] == 8


async def test_list_is_public_and_ordered(admin_client: AsyncClient):
    await _create(admin_client, "B", orderIndex=2)
    await _create(admin_client, "A", orderIndex=1)
    await _create(admin_client, "Hidden", orderIndex=0, isActive=False)

    admin_client.cookies.clear()
    response = await admin_client.get("/api/hero-videos")
    assert response.status_code == 200
    assert [v["titleEn"] for v in response.json()] == ["Hidden", "A", "B"]

    response = await admin_client.get("/api/hero-videos", params={"active_only": "true"})
    assert [v["titleEn"] for v in response.json()] == ["A", "B"]


async def test_reorder(admin_client: AsyncClient):
    a = await _create(admin_client, "A")
    b = await _create(admin_client, "B")
    c = await _create(admin_client, "C")

    response = await admin_client.post("/api/hero-videos/reorder", json={"videoIds": [c["id"], a["id"], b["id"]]})
    assert response.status_code == 200
    data = response.json()
    assert [v["titleEn"] for v in data] == ["C", "A", "B"]
    assert [v["orderIndex"] for v in data] == [0, 1, 2]


async def test_reorder_with_unknown_id_changes_nothing(admin_client: AsyncClient):
    a = await _create(admin_client, "A")
    b = await _create(admin_client, "B")

    response = await admin_client.post("/api/hero-videos/reorder", json={"videoIds": [b["id"], 999]})
    assert response.status_code == 404

    response = await admin_client.get("/api/hero-videos")
    assert [v["id"] for v in response.json()] == [a["id"], b["id"]]


async def test_update_partial(admin_client: AsyncClient):
    video = await _create(admin_client, "A")

    response = await admin_client.put(f"/api/hero-videos/{video['id']}", json={"titleFr": "Nouveau", "isActive": False})
    assert response.status_code == 200
    data = response.json()
    assert data["titleFr"] == "Nouveau"
    assert data["titleEn"] == "A"
    assert data["isActive"] is False


async def test_update_accepts_snake_case(admin_client: AsyncClient):
    video = await _create(admin_client, "A")
    response = await admin_client.put(f"/api/hero-videos/{video['id']}", json={"title_en": "Renamed"})
    assert response.json()["titleEn"] == "Renamed"


async def test_update_missing(admin_client: AsyncClient):
    response = await admin_client.put("/api/hero-videos/404", json={"titleEn": "x"})
    assert response.status_code == 404


async def test_delete(admin_client: AsyncClient):
    video = await _create(admin_client, "A")

    response = await admin_client.delete(f"/api/hero-videos/{video['id']}")
    assert response.status_code == 204

    response = await admin_client.delete(f"/api/hero-videos/{video['id']}")
    assert response.status_code == 404
