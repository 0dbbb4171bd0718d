from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient

from memopyk.media.ffmpeg import MediaProcessingError, VideoInfo
from memopyk.media.temp_files import GalleryTempStore

pytestmark = pytest.mark.asyncio

GALLERY_API = "memopyk.server.api.v1.gallery"


def _item(title: str = "Wedding", **extra) -> dict:
    return {
        "titleEn": title,
        "titleFr": f"{title} FR",
        "descriptionEn": "Eighty photos turned into a film",
        "descriptionFr": "Quatre-vingts photos en film",
        "additionalInfoEn": ["80 photos", "3 minutes"],
        "additionalInfoFr": ["80 photos", "3 minutes"],
        "priceEn": "USD 325",
        "priceFr": "300 €",
        "imageUrlEn": "https://cdn.example.com/cover-en.jpg",
        "imageUrlFr": "https://cdn.example.com/cover-fr.jpg",
        "videoUrlEn": "https://cdn.example.com/film-en.mp4",
        "altTextEn": "Wedding cover",
        "altTextFr": "Couverture mariage",
        **extra,
    }


async def _create(client: AsyncClient, title: str = "Wedding", **extra) -> dict:
    response = await client.post("/api/gallery", json=_item(title, **extra))
    assert response.status_code == 201
    return response.json()["item"]


class TestGalleryCrud:
    async def test_create_generates_id(self, admin_client: AsyncClient):
        item = await _create(admin_client)
        assert item["id"].startswith("gallery-")
        assert item["additionalInfoEn"] == ["80 photos", "3 minutes"]
        assert item["videoUrlFr"] is None

    async def test_create_requires_admin(self, client: AsyncClient):
        response = await client.post("/api/gallery", json=_item())
        assert response.status_code == 401

    async def test_list_hides_inactive_by_default(self, admin_client: AsyncClient):
        await _create(admin_client, "Second", order=2)
        await _create(admin_client, "First", order=1)
        await _create(admin_client, "Hidden", order=0, isActive=False)

        response = await admin_client.get("/api/gallery")
        assert [i["titleEn"] for i in response.json()] == ["First", "Second"]

        response = await admin_client.get("/api/gallery", params={"include_inactive": "true"})
        assert [i["titleEn"] for i in response.json()] == ["Hidden", "First", "Second"]

    async def test_get_missing(self, client: AsyncClient):
        response = await client.get("/api/gallery/gallery-0-missing")
        assert response.status_code == 404

    async def test_update_clears_nullable_fields_only(self, admin_client: AsyncClient):
        item = await _create(admin_client)

        response = await admin_client.put(
            f"/api/gallery/{item['id']}", json={"priceEn": None, "titleEn": None, "order": 4}
        )
        assert response.status_code == 200
        updated = response.json()["item"]
        assert updated["priceEn"] is None
        assert updated["titleEn"] == "Wedding"
        assert updated["order"] == 4

    async def test_update_records_external_image_url(
        self, admin_client: AsyncClient, temp_store: GalleryTempStore
    ):
        item = await _create(admin_client)
        await admin_client.put(f"/api/gallery/{item['id']}", json={"imageUrlFr": "https://cdn.example.com/new-fr.jpg"})
        assert temp_store.read_original_url(item["id"]) == "https://cdn.example.com/new-fr.jpg"

    async def test_reorder(self, admin_client: AsyncClient):
        a = await _create(admin_client, "A", order=0)
        b = await _create(admin_client, "B", order=1)

        response = await admin_client.post(
            "/api/gallery/reorder",
            json={"itemOrders": [{"id": a["id"], "order": 1}, {"id": b["id"], "order": 0}]},
        )
        assert response.status_code == 200
        assert response.json()["success"] is True

        response = await admin_client.get("/api/gallery")
        assert [i["titleEn"] for i in response.json()] == ["B", "A"]

    async def test_delete_removes_temp_files(self, admin_client: AsyncClient, temp_store: GalleryTempStore):
        item = await _create(admin_client)
        temp_store.ensure_dir()
        temp_store.thumbnail_path(item["id"]).write_bytes(b"jpeg")
        temp_store.record_original_url(item["id"], "en", "https://cdn.example.com/cover-en.jpg")

        response = await admin_client.delete(f"/api/gallery/{item['id']}")
        assert response.status_code == 200
        assert response.json()["success"] is True
        assert not temp_store.thumbnail_path(item["id"]).exists()
        assert temp_store.read_original_url(item["id"]) is None

        response = await admin_client.get(f"/api/gallery/{item['id']}")
        assert response.status_code == 404

    async def test_delete_missing(self, admin_client: AsyncClient):
        response = await admin_client.delete("/api/gallery/gallery-0-missing")
        assert response.status_code == 404


class TestGalleryProcessing:
    async def test_process_extracts_thumbnail(self, admin_client: AsyncClient, temp_store: GalleryTempStore):
        item = await _create(admin_client)
        info = VideoInfo(width=1920, height=1080, aspect_ratio=16 / 9, duration=12.5)

        with patch(f"{GALLERY_API}.create_video_thumbnail", new=AsyncMock()) as mock_thumb, patch(
            f"{GALLERY_API}.get_video_info", new=AsyncMock(return_value=info)
        ):
            response = await admin_client.post(f"/api/gallery/{item['id']}/process", json={"timestamp": 8})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["thumbnailUrl"].startswith(f"/api/gallery/{item['id']}/thumbnail?t=")
        assert data["thumbnailPath"] == str(temp_store.thumbnail_path(item["id"]))
        assert data["videoDimensions"]["width"] == 1920
        assert data["videoDimensions"]["height"] == 1080
        mock_thumb.assert_awaited_once_with(
            "https://cdn.example.com/film-en.mp4", str(temp_store.thumbnail_path(item["id"])), 8
        )

        stored = (await admin_client.get(f"/api/gallery/{item['id']}")).json()
        assert stored["imageUrlEn"] == data["thumbnailUrl"]
        assert stored["imageUrlFr"] == data["thumbnailUrl"]

    async def test_process_defaults_to_five_seconds(self, admin_client: AsyncClient):
        item = await _create(admin_client)
        info = VideoInfo(width=1280, height=720, aspect_ratio=16 / 9, duration=3.0)

        with patch(f"{GALLERY_API}.create_video_thumbnail", new=AsyncMock()) as mock_thumb, patch(
            f"{GALLERY_API}.get_video_info", new=AsyncMock(return_value=info)
        ):
            response = await admin_client.post(f"/api/gallery/{item['id']}/process")

        assert response.status_code == 200
        assert mock_thumb.await_args.args[2] == 5

    async def test_process_without_video(self, admin_client: AsyncClient):
        item = await _create(admin_client, videoUrlEn=None)
        response = await admin_client.post(f"/api/gallery/{item['id']}/process")
        assert response.status_code == 400

    async def test_process_ffmpeg_failure(self, admin_client: AsyncClient):
        item = await _create(admin_client)

        with patch(
            f"{GALLERY_API}.create_video_thumbnail", new=AsyncMock(side_effect=MediaProcessingError("moov atom not found"))
        ):
            response = await admin_client.post(f"/api/gallery/{item['id']}/process")

        assert response.status_code == 500
        assert response.json() == {"detail": "Media processing failed", "error": "moov atom not found"}

        stored = (await admin_client.get(f"/api/gallery/{item['id']}")).json()
        assert stored["imageUrlEn"] == "https://cdn.example.com/cover-en.jpg"

    async def test_resize_external_image(self, admin_client: AsyncClient, temp_store: GalleryTempStore):
        item = await _create(admin_client)

        with patch(f"{GALLERY_API}.probe_image_dimensions", new=AsyncMock(return_value=(800, 600))), patch(
            f"{GALLERY_API}.resize_image", new=AsyncMock()
        ) as mock_resize:
            response = await admin_client.post(
                f"/api/gallery/{item['id']}/resize-image", json={"targetWidth": 1920, "targetHeight": 1080}
            )

        assert response.status_code == 200
        data = response.json()
        assert data["originalDimensions"] == {"width": 800, "height": 600}
        assert data["targetDimensions"] == {"width": 1920, "height": 1080}
        assert data["resizedUrl"].startswith(f"/api/gallery/{item['id']}/resized-image?t=")
        assert data["message"] == "Image resized from 800x600px to 1920x1080px"

        options = mock_resize.await_args.args[0]
        assert options.input_path == "https://cdn.example.com/cover-en.jpg"
        assert options.output_path == str(temp_store.resized_path(item["id"]))

    async def test_resize_with_unknown_source_size(self, admin_client: AsyncClient):
        item = await _create(admin_client)

        with patch(
            f"{GALLERY_API}.probe_image_dimensions", new=AsyncMock(side_effect=MediaProcessingError("no streams"))
        ), patch(f"{GALLERY_API}.resize_image", new=AsyncMock()):
            response = await admin_client.post(
                f"/api/gallery/{item['id']}/resize-image", json={"targetWidth": 640, "targetHeight": 360}
            )

        assert response.status_code == 200
        assert response.json()["message"] == "Image resized from original size to 640x360px"

    async def test_resize_refuses_generated_thumbnail(self, admin_client: AsyncClient):
        item = await _create(admin_client, imageUrlEn="/api/gallery/x/thumbnail?t=1")
        response = await admin_client.post(
            f"/api/gallery/{item['id']}/resize-image", json={"targetWidth": 640, "targetHeight": 360}
        )
        assert response.status_code == 400
        assert "thumbnail" in response.json()["detail"]

    async def test_resize_refuses_local_image(self, admin_client: AsyncClient):
        item = await _create(admin_client, imageUrlEn="/images/cover.jpg")
        response = await admin_client.post(
            f"/api/gallery/{item['id']}/resize-image", json={"targetWidth": 640, "targetHeight": 360}
        )
        assert response.status_code == 400

    async def test_resize_invalid_target(self, admin_client: AsyncClient):
        item = await _create(admin_client)
        response = await admin_client.post(
            f"/api/gallery/{item['id']}/resize-image", json={"targetWidth": 0, "targetHeight": 360}
        )
        assert response.status_code == 400

    async def test_video_info(self, client: AsyncClient, admin_client: AsyncClient):
        item = await _create(admin_client)
        info = VideoInfo(width=1080, height=1920, aspect_ratio=0.5625, duration=30.0)

        with patch(f"{GALLERY_API}.get_video_info", new=AsyncMock(return_value=info)):
            response = await client.get(f"/api/gallery/{item['id']}/video-info")

        assert response.status_code == 200
        assert response.json() == {"width": 1080, "height": 1920, "aspectRatio": 0.5625, "duration": 30.0}

    async def test_video_info_without_video(self, admin_client: AsyncClient):
        item = await _create(admin_client, videoUrlEn=None)
        response = await admin_client.get(f"/api/gallery/{item['id']}/video-info")
        assert response.status_code == 404


class TestGalleryFiles:
    async def test_serve_thumbnail(self, client: AsyncClient, temp_store: GalleryTempStore):
        temp_store.ensure_dir()
        temp_store.thumbnail_path("gallery-1-abc").write_bytes(b"\xff\xd8fake-jpeg")

        response = await client.get("/api/gallery/gallery-1-abc/thumbnail")
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/jpeg"
        assert response.headers["cache-control"] == "public, max-age=31536000"
        assert response.content == b"\xff\xd8fake-jpeg"

    async def test_serve_missing_files(self, client: AsyncClient):
        assert (await client.get("/api/gallery/gallery-1-abc/thumbnail")).status_code == 404
        assert (await client.get("/api/gallery/gallery-1-abc/resized-image")).status_code == 404

    async def test_serve_resized_image(self, client: AsyncClient, temp_store: GalleryTempStore):
        temp_store.ensure_dir()
        temp_store.resized_path("gallery-1-abc").write_bytes(b"resized")
        response = await client.get("/api/gallery/gallery-1-abc/resized-image")
        assert response.status_code == 200
        assert response.content == b"resized"

    async def test_compare_uses_recorded_original(self, admin_client: AsyncClient, temp_store: GalleryTempStore):
        item = await _create(admin_client)
        temp_store.record_original_url(item["id"], "en", "https://cdn.example.com/original.jpg")
        temp_store.resized_path(item["id"]).write_bytes(b"12345")

        response = await admin_client.get(f"/api/gallery/{item['id']}/compare")
        assert response.status_code == 200
        data = response.json()
        assert data["before"]["url"] == "https://cdn.example.com/original.jpg"
        assert data["before"]["note"] == "External image URL"
        assert data["after"]["exists"] is True
        assert data["after"]["size"] == 5

    async def test_compare_falls_back_to_current_image(self, admin_client: AsyncClient):
        item = await _create(admin_client)
        response = await admin_client.get(f"/api/gallery/{item['id']}/compare")
        data = response.json()
        assert data["before"]["url"] == "https://cdn.example.com/cover-en.jpg"
        assert data["after"]["exists"] is False

    async def test_debug_requires_admin(self, client: AsyncClient):
        response = await client.get("/api/gallery/gallery-1-abc/debug")
        assert response.status_code == 401

    async def test_debug_reports_files(self, admin_client: AsyncClient, temp_store: GalleryTempStore):
        item = await _create(admin_client)
        temp_store.ensure_dir()
        temp_store.thumbnail_path(item["id"]).write_bytes(b"abc")

        response = await admin_client.get(f"/api/gallery/{item['id']}/debug")
        assert response.status_code == 200
        data = response.json()
        assert data["galleryItem"]["id"] == item["id"]
        assert data["files"]["thumbnail"]["exists"] is True
        assert data["files"]["thumbnail"]["size"] == 3
        assert data["files"]["resized"]["exists"] is False

    async def test_cleanup_item_keeps_url_records(self, admin_client: AsyncClient, temp_store: GalleryTempStore):
        temp_store.ensure_dir()
        temp_store.thumbnail_path("gallery-1-abc").write_bytes(b"a")
        temp_store.resized_path("gallery-1-abc").write_bytes(b"b")
        temp_store.record_original_url("gallery-1-abc", "en", "https://cdn.example.com/o.jpg")

        response = await admin_client.delete("/api/gallery/gallery-1-abc/cleanup")
        assert response.status_code == 200
        assert response.json()["removed"] == 2
        assert temp_store.read_original_url("gallery-1-abc") == "https://cdn.example.com/o.jpg"

    async def test_cleanup_all(self, admin_client: AsyncClient, temp_store: GalleryTempStore):
        temp_store.ensure_dir()
        temp_store.thumbnail_path("gallery-1-a").write_bytes(b"a")
        temp_store.resized_path("gallery-2-b").write_bytes(b"b")
        (temp_store.base_dir / "notes.txt").write_text("keep")

        response = await admin_client.post("/api/gallery/cleanup")
        assert response.status_code == 200
        assert response.json()["removed"] == 2
        assert (temp_store.base_dir / "notes.txt").exists()
