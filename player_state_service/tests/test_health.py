import unittest

from fastapi import FastAPI
from fastapi.testclient import TestClient

from player_state_service.api.health import health_api
from player_state_service.processor.processor import StateProcessor


class TestHealthApi(unittest.TestCase):
    def setUp(self) -> None:
        self.app = FastAPI()
        self.app.include_router(health_api)
        self.client = TestClient(self.app)

    def tearDown(self) -> None:
        self.client.close()

    def test_health_returns_healthy(self):
        response = self.client.get("/api/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_ready_returns_503_when_processor_not_initialized(self):
        response = self.client.get("/api/ready")
        self.assertEqual(response.status_code, 503)
        data = response.json()
        self.assertEqual(data.get("status"), "not_ready")
        self.assertIn("processor_not_initialized", data.get("issues", []))

    def test_ready_lists_validation_rules(self):
        self.app.state.processor = StateProcessor()

        response = self.client.get("/api/ready")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ready", "validation_rules": ["equipment.items[2]"]})

    def test_info_lists_binder_modes(self):
        response = self.client.get("/api/info")
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["service_app_name"], "player-state-service")
        self.assertEqual(data["binder_modes"], ["permissive", "strict"])
        self.assertEqual(data["max_sword_level"], 20)
