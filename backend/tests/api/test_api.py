"""
API tests for the v1 endpoints.

Markers run against a temporary SQLite database swapped in through
dependency overrides; everything else is stateless.
"""

import json

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from marathon_tracker.db.session import get_async_db
from marathon_tracker.main import app
from marathon_tracker.models.base import Base


API = "/api/v1"

DRAWN_ROUTE = [(-74.0, 40.0 + i * 0.0145) for i in range(11)]

TRACK_GPX = b"""<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <trk>
    <name>Lakeside 26.2</name>
    <trkseg>
      <trkpt lat="40.0000" lon="-74.0000"><ele>10</ele></trkpt>
      <trkpt lat="40.0100" lon="-74.0000"><ele>20</ele></trkpt>
      <trkpt lat="40.0200" lon="-74.0000"><ele>15</ele></trkpt>
    </trkseg>
  </trk>
</gpx>
"""

SPLITS_CSV = (
    "Mile,Time,Pace,Split,Note\n"
    "5.00,0:35:00,7:00,0:35:00,Feeling good\n"
    "10.00,1:10:00,7:00,0:35:00,\n"
)


@pytest.fixture
def client(tmp_path):
    """Test client with markers stored in a throwaway database."""
    db_file = tmp_path / "api.db"

    sync_engine = create_engine(f"sqlite:///{db_file}")
    Base.metadata.create_all(bind=sync_engine)
    sync_engine.dispose()

    # NullPool: each request runs on its own event loop
    async_engine = create_async_engine(f"sqlite+aiosqlite:///{db_file}", poolclass=NullPool)
    session_factory = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_db] = override_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _marker(name="Bridge", distance_km=5.0, **kwargs):
    return {
        "name": name,
        "latitude": 40.6,
        "longitude": -74.0,
        "distance_km": distance_km,
        **kwargs,
    }


# =============================================================================
# Health
# =============================================================================

def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


# =============================================================================
# Markers
# =============================================================================

class TestMarkers:
    """Marker CRUD, race markers, splits and CSV."""

    def test_create_and_list(self, client):
        created = client.post(f"{API}/markers", json=_marker("10K", 10.0, race_time="0:42:00"))
        assert created.status_code == 201
        assert created.json()["id"] > 0

        client.post(f"{API}/markers", json=_marker("5K", 5.0))

        names = [m["name"] for m in client.get(f"{API}/markers").json()]
        assert names == ["5K", "10K"]

    def test_create_rejects_bad_time(self, client):
        response = client.post(f"{API}/markers", json=_marker(race_time="42 minutes"))
        assert response.status_code == 422

    def test_create_rejects_infinite_distance(self, client):
        body = '{"name": "Far", "latitude": 40.7, "longitude": -74.0, "distance_km": Infinity}'
        response = client.post(
            f"{API}/markers",
            content=body,
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 422
        assert client.get(f"{API}/markers").json() == []

    def test_latest(self, client):
        assert client.get(f"{API}/markers/latest").json() is None

        client.post(f"{API}/markers", json=_marker("First", 5.0))
        client.post(f"{API}/markers", json=_marker("Second", 2.0))

        assert client.get(f"{API}/markers/latest").json()["name"] == "Second"

    def test_delete(self, client):
        marker_id = client.post(f"{API}/markers", json=_marker()).json()["id"]

        response = client.delete(f"{API}/markers/{marker_id}")
        assert response.json() == {"success": True, "id": marker_id}
        assert client.get(f"{API}/markers").json() == []

    def test_delete_missing(self, client):
        assert client.delete(f"{API}/markers/999").status_code == 404

    def test_race_marker_on_catalog_route(self, client):
        response = client.post(f"{API}/markers/race", json={
            "label": "10K",
            "race_time": "0:42:00",
            "route_id": "nyc-marathon",
        })

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "10K"
        assert body["distance_km"] == 10.0
        # Between miles 6 and 7 of the course
        assert 40.678 < body["latitude"] < 40.690

    def test_race_marker_must_advance(self, client):
        client.post(f"{API}/markers/race", json={
            "label": "10K", "race_time": "0:42:00", "route_id": "nyc-marathon",
        })
        response = client.post(f"{API}/markers/race", json={
            "label": "5K", "race_time": "0:21:00", "route_id": "nyc-marathon",
        })

        assert response.status_code == 400
        assert "must be beyond" in response.json()["detail"]

    def test_race_marker_on_drawn_route(self, client):
        response = client.post(f"{API}/markers/race", json={
            "label": "5K", "race_time": "0:21:00", "coordinates": DRAWN_ROUTE,
        })
        assert response.status_code == 201

    def test_race_marker_without_route(self, client):
        response = client.post(f"{API}/markers/race", json={
            "label": "5K", "race_time": "0:21:00",
        })
        assert response.status_code == 400

    def test_race_marker_unknown_route(self, client):
        response = client.post(f"{API}/markers/race", json={
            "label": "5K", "race_time": "0:21:00", "route_id": "paris",
        })
        assert response.status_code == 404

    def test_race_marker_unknown_label(self, client):
        response = client.post(f"{API}/markers/race", json={
            "label": "7K", "race_time": "0:30:00", "route_id": "nyc-marathon",
        })
        assert response.status_code == 422

    def test_splits(self, client):
        for label, race_time in (("5K", "0:21:00"), ("10K", "0:42:00")):
            client.post(f"{API}/markers/race", json={
                "label": label, "race_time": race_time, "route_id": "nyc-marathon",
            })
        # Untimed markers are not splits
        client.post(f"{API}/markers", json=_marker("Water", 7.5))

        body = client.get(f"{API}/markers/splits").json()

        assert len(body["records"]) == 2
        assert body["records"][1]["split"]["formatted"] == "0:21:00"
        assert body["consistency"] == pytest.approx(100.0)

    def test_export_csv(self, client):
        client.post(f"{API}/markers", json=_marker("5K", 5.0, race_time="0:21:00"))

        response = client.get(f"{API}/markers/export.csv")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "splits.csv" in response.headers["content-disposition"]
        lines = response.text.splitlines()
        assert lines[0] == "Mile,Time,Pace,Split,Note"
        assert lines[1].startswith("3.11,0:21:00")

    def test_import_csv(self, client):
        response = client.post(
            f"{API}/markers/import",
            params={"route_id": "nyc-marathon"},
            files={"file": ("splits.csv", SPLITS_CSV, "text/csv")},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["imported"] == 2
        assert body["markers"][0]["name"] == "Mile 5.00"
        assert body["markers"][0]["race_time"] == "0:35:00"
        assert body["markers"][0]["note"] == "Feeling good"
        assert len(client.get(f"{API}/markers").json()) == 2

    def test_import_requires_route(self, client):
        response = client.post(
            f"{API}/markers/import",
            files={"file": ("splits.csv", SPLITS_CSV, "text/csv")},
        )
        assert response.status_code == 422

    def test_import_empty_file(self, client):
        response = client.post(
            f"{API}/markers/import",
            params={"route_id": "nyc-marathon"},
            files={"file": ("splits.csv", b"", "text/csv")},
        )
        assert response.status_code == 400

    def test_import_bad_header(self, client):
        response = client.post(
            f"{API}/markers/import",
            params={"route_id": "nyc-marathon"},
            files={"file": ("splits.csv", "Distance,Time\n5,0:35:00\n", "text/csv")},
        )
        assert response.status_code == 400
        assert "header" in response.json()["detail"]

    @pytest.mark.parametrize("mile", ["inf", "nan"])
    def test_import_non_finite_mile(self, client, mile):
        response = client.post(
            f"{API}/markers/import",
            params={"route_id": "nyc-marathon"},
            files={"file": ("splits.csv", f"Mile,Time,Pace,Split,Note\n{mile},0:35:00,,,\n", "text/csv")},
        )
        assert response.status_code == 400
        assert "invalid mile" in response.json()["detail"]
        assert client.get(f"{API}/markers").json() == []


# =============================================================================
# Routes
# =============================================================================

class TestRoutes:
    """Catalog routes, measurement, location lookup and streaming."""

    def test_list(self, client):
        ids = [r["id"] for r in client.get(f"{API}/routes").json()]
        assert "nyc-marathon" in ids
        assert "boston-marathon" in ids

    def test_detail(self, client):
        body = client.get(f"{API}/routes/nyc-marathon").json()

        assert body["total_distance"] == 26.2
        assert body["path"]["points"][0]["landmark"] == "Start - Verrazzano Bridge"
        assert body["path"]["mile_markers"]

    def test_detail_unknown(self, client):
        assert client.get(f"{API}/routes/paris").status_code == 404

    def test_location_at_landmark(self, client):
        body = client.get(f"{API}/routes/nyc-marathon/location", params={"distance": 13}).json()
        assert body["point"]["landmark"] == "Halfway Point"

    def test_location_interpolated(self, client):
        body = client.get(
            f"{API}/routes/nyc-marathon/location", params={"distance": 0.5}
        ).json()
        point = body["point"]
        assert point["mile"] == 0.5
        assert point["elevation"] == pytest.approx(47.5)
        assert point["landmark"] is None

    def test_measure(self, client):
        body = client.post(f"{API}/routes/measure", json={"coordinates": DRAWN_ROUTE}).json()

        assert body["total_distance"] == pytest.approx(10.0, rel=0.01)
        assert len(body["points"]) == 11

    def test_measure_rejects_bad_coordinates(self, client):
        response = client.post(f"{API}/routes/measure", json={"coordinates": [[200, 40]]})
        assert response.status_code == 422

    def test_drawn_location_empty_route(self, client):
        body = client.post(
            f"{API}/routes/location", json={"coordinates": [], "distance": 3}
        ).json()
        assert body["point"] is None
        assert body["total_distance"] == 0

    def test_simulate_stream(self, client):
        response = client.get(
            f"{API}/routes/nyc-marathon/simulate", params={"start": 26.0, "speed": 4}
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/x-ndjson")

        frames = [json.loads(line) for line in response.text.splitlines()]
        assert frames[0]["state"]["position"] == 26.0
        assert frames[0]["state"]["playing"] is True
        assert frames[-1]["state"]["finished"] is True
        assert frames[-1]["state"]["playing"] is False
        assert frames[-1]["point"]["landmark"] == "Finish Line - Central Park"

    def test_simulate_invalid_speed(self, client):
        response = client.get(f"{API}/routes/nyc-marathon/simulate", params={"speed": 0})
        assert response.status_code == 422


# =============================================================================
# GPX
# =============================================================================

class TestGPX:
    """GPX upload and export."""

    def test_upload(self, client):
        response = client.post(
            f"{API}/gpx/upload",
            files={"file": ("lakeside.gpx", TRACK_GPX, "application/gpx+xml")},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["info"]["name"] == "Lakeside 26.2"
        assert body["info"]["points_count"] == 3
        assert len(body["path"]["points"]) == 3

    def test_upload_wrong_extension(self, client):
        response = client.post(
            f"{API}/gpx/upload",
            files={"file": ("route.txt", TRACK_GPX, "text/plain")},
        )
        assert response.status_code == 400

    def test_upload_empty(self, client):
        response = client.post(
            f"{API}/gpx/upload",
            files={"file": ("route.gpx", b"", "application/gpx+xml")},
        )
        assert response.status_code == 400

    def test_upload_invalid(self, client):
        response = client.post(
            f"{API}/gpx/upload",
            files={"file": ("route.gpx", b"<not gpx", "application/gpx+xml")},
        )
        assert response.status_code == 400
        assert "Invalid GPX" in response.json()["detail"]

    def test_export(self, client):
        response = client.post(f"{API}/gpx/export", json={
            "coordinates": DRAWN_ROUTE,
            "name": "Long Run",
        })

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/gpx+xml")
        assert "marathon-route.gpx" in response.headers["content-disposition"]
        assert "<gpx" in response.text
        assert "Long Run" in response.text

    def test_export_requires_coordinates(self, client):
        response = client.post(f"{API}/gpx/export", json={"coordinates": []})
        assert response.status_code == 422


# =============================================================================
# Pacing
# =============================================================================

class TestPacing:
    """Zones, projection and split plans."""

    def test_zones(self, client):
        names = [z["name"] for z in client.get(f"{API}/pacing/zones").json()]
        assert names == ["Easy", "Target", "Aggressive", "Elite"]

    def test_projection(self, client):
        body = client.post(f"{API}/pacing/projection", json={
            "samples": [
                {"distance": 10, "time": "1:10:00"},
                {"distance": 5, "time": "0:35:00"},
            ],
        }).json()

        assert body["current"]["pace"]["formatted"] == "7:00"
        assert body["current"]["trend"] == "faster"
        assert body["current"]["zone"] == "Target"
        assert body["checkpoints"][-1]["label"] == "Finish"
        # Best case: 16.2 remaining miles at 7:00 after 1:10:00
        assert body["scenarios"]["best"]["seconds"] == pytest.approx(4200 + 16.2 * 420)
        assert body["analysis"]["consistency"] == 100

    def test_projection_without_samples(self, client):
        body = client.post(f"{API}/pacing/projection", json={}).json()

        assert body["current"]["pace"]["seconds"] == 455
        assert body["current"]["trend"] == "steady"
        assert body["analysis"] is None

    def test_projection_on_route(self, client):
        body = client.post(f"{API}/pacing/projection", json={
            "route_id": "nyc-marathon",
        }).json()
        assert body["checkpoints"][-1]["distance"] == 26.2

    def test_projection_unknown_route(self, client):
        response = client.post(f"{API}/pacing/projection", json={"route_id": "paris"})
        assert response.status_code == 404

    def test_projection_rejects_inverted_range(self, client):
        response = client.post(f"{API}/pacing/projection", json={
            "fast_pace_s": 500, "slow_pace_s": 420,
        })
        assert response.status_code == 422

    def test_even_splits(self, client):
        body = client.post(f"{API}/pacing/splits", json={"target_time": "3:30:00"}).json()

        assert body["target_total"]["seconds"] == 12600
        assert [s["distance"] for s in body["splits"]] == [5, 10, 15, 20, 25]
        assert body["splits"][0]["pace"]["seconds"] == pytest.approx(12600 / 26.2, abs=0.1)

    def test_negative_splits(self, client):
        body = client.post(f"{API}/pacing/splits", json={
            "target_time": "3:30:00", "strategy": "negative",
        }).json()
        assert body["splits"][0]["pace"]["seconds"] > body["average_pace"]["seconds"]

    def test_splits_default_to_midpoint(self, client):
        body = client.post(f"{API}/pacing/splits", json={}).json()
        assert body["average_pace"]["seconds"] == 455

    def test_splits_bad_target(self, client):
        response = client.post(f"{API}/pacing/splits", json={"target_time": "3h30"})
        assert response.status_code == 422


# =============================================================================
# Simulation
# =============================================================================

class TestSimulation:
    """Stateless simulation steps."""

    def test_advance(self, client):
        body = client.post(f"{API}/simulation/advance", json={
            "state": {"playing": True},
            "elapsed_ms": 1000,
        }).json()
        assert body["position"] == pytest.approx(0.6)

    def test_advance_paused(self, client):
        body = client.post(f"{API}/simulation/advance", json={
            "state": {"position": 3},
            "elapsed_ms": 1000,
        }).json()
        assert body["position"] == 3

    def test_seek_clamps(self, client):
        body = client.post(f"{API}/simulation/event", json={
            "state": {},
            "event": {"type": "seek", "value": 30},
        }).json()
        assert body["position"] == 26.2
        assert body["finished"] is True

    def test_seek_requires_value(self, client):
        response = client.post(f"{API}/simulation/event", json={
            "state": {},
            "event": {"type": "seek"},
        })
        assert response.status_code == 422

    def test_zero_speed_rejected(self, client):
        response = client.post(f"{API}/simulation/event", json={
            "state": {},
            "event": {"type": "set_speed", "value": 0},
        })
        assert response.status_code == 400


# =============================================================================
# Tracker
# =============================================================================

class TestTracker:
    """Dashboard for a session snapshot."""

    def test_dashboard_on_catalog_route(self, client):
        body = client.post(f"{API}/tracker/dashboard", json={
            "route_id": "nyc-marathon",
            "samples": [
                {"distance": 5, "time": "0:35:00"},
                {"distance": 10, "time": "1:10:00"},
            ],
            "target_time": "3:10:00",
            "simulation": {"position": 13},
        }).json()

        assert body["location"]["landmark"] == "Halfway Point"
        assert body["current"]["trend"] == "faster"
        assert len(body["records"]) == 2
        assert body["splits"][0]["elapsed"]["seconds"] == pytest.approx(11400 / 26.2 * 5, abs=0.1)

    def test_dashboard_without_route(self, client):
        body = client.post(f"{API}/tracker/dashboard", json={}).json()

        assert body["total_distance"] == 26.2
        assert body["location"] is None
        assert body["consistency"] == 100

    def test_dashboard_repeated_distance(self, client):
        response = client.post(f"{API}/tracker/dashboard", json={
            "samples": [
                {"distance": 5, "time": "0:35:00"},
                {"distance": 5, "time": "0:36:00"},
            ],
        })
        assert response.status_code == 400

    def test_dashboard_unknown_route(self, client):
        response = client.post(f"{API}/tracker/dashboard", json={"route_id": "paris"})
        assert response.status_code == 404
