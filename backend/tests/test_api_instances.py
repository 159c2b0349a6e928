import unittest
import sys
import os

import httpx
from fastapi.testclient import TestClient

# Add backend to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from dds_fakes import INSTANCE_ID, FakeDds
from dds_gateway.api.instances import get_instance_service
from dds_gateway.main import app
from dds_gateway.services.instance_service import DdsInstanceService


class TestInstanceEndpoints(unittest.TestCase):

    def use_fake(self, *responses) -> FakeDds:
        fake = FakeDds(*responses)
        app.dependency_overrides[get_instance_service] = lambda: DdsInstanceService(client=fake.client())
        return fake

    def setUp(self):
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_update_success(self):
        fake = self.use_fake(httpx.Response(202, json={"job_id": "j1"}), httpx.Response(200, json={"job_id": "j2"}))
        resp = self.client.post(f"/api/v1/dds/instances/{INSTANCE_ID}/update", json={"steps": [
            {"target": "enlarge-volume", "payload_key": "volume", "value": {"size": 30}, "verb": "PUT"},
            {"target": "resize", "value": {"resize": {"target_id": INSTANCE_ID, "target_spec_code": "s"}}, "verb": "POST"},
        ]})

        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["completed_steps"], 2)
        self.assertIsNone(data["error"])
        self.assertEqual(data["last_response_body"], {"job_id": "j2"})
        self.assertEqual(fake.body(0), {"volume": {"size": 30}})

    def test_update_failure_returns_502_with_step(self):
        fake = self.use_fake(httpx.Response(202, json={}), httpx.Response(500, text="boom"))
        resp = self.client.post(f"/api/v1/dds/instances/{INSTANCE_ID}/update", json={"steps": [
            {"target": "enlarge-volume", "value": {"volume": {"size": 30}}, "verb": "PUT"},
            {"target": "resize", "value": {}, "verb": "POST"},
            {"target": "modify-name", "payload_key": "new_instance_name", "value": "x", "verb": "PUT"},
        ]})

        self.assertEqual(resp.status_code, 502)
        details = resp.json()["detail"]["details"]
        self.assertEqual(details["step"], 2)
        self.assertEqual(details["target"], "resize")
        self.assertEqual(details["completed_steps"], 1)
        self.assertEqual(fake.call_count, 2)

    def test_update_rejects_unknown_verb(self):
        fake = self.use_fake()
        resp = self.client.post(f"/api/v1/dds/instances/{INSTANCE_ID}/update", json={"steps": [
            {"target": "resize", "value": {}, "verb": "PATCH"},
        ]})

        self.assertEqual(resp.status_code, 422)
        self.assertEqual(fake.call_count, 0)

    def test_list_instances(self):
        fake = self.use_fake(httpx.Response(200, json={"instances": [{"id": "i1", "name": "n1"}], "total_count": 1}))
        resp = self.client.get("/api/v1/dds/instances", params={"mode": "Single"})

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["total_count"], 1)
        self.assertEqual(fake.requests[0].url.params["mode"], "Single")

    def test_remote_not_found_forwarded(self):
        self.use_fake(httpx.Response(404, json={"error_code": "DBS.200823"}))
        resp = self.client.get(f"/api/v1/dds/instances/{INSTANCE_ID}/backup-policy")

        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"]["details"]["status"], 404)

    def test_transport_error_is_502(self):
        self.use_fake(httpx.ConnectError("refused"))
        resp = self.client.delete(f"/api/v1/dds/instances/{INSTANCE_ID}")

        self.assertEqual(resp.status_code, 502)

    def test_port(self):
        fake = self.use_fake(httpx.Response(200, json={"job_id": "jp"}))
        resp = self.client.post(f"/api/v1/dds/instances/{INSTANCE_ID}/port", json={"port": 8800})

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["job_id"], "jp")
        self.assertEqual(fake.body(0), {"port": 8800})

    def test_slow_log_round(self):
        fake = self.use_fake(httpx.Response(204), httpx.Response(200, json={"status": "on"}))
        put = self.client.put(f"/api/v1/dds/instances/{INSTANCE_ID}/slow-log", json={"status": "on"})
        get = self.client.get(f"/api/v1/dds/instances/{INSTANCE_ID}/slow-log")

        self.assertEqual(put.status_code, 204)
        self.assertEqual(get.json(), {"status": "on"})
        self.assertTrue(fake.path(0).endswith("/slowlog-desensitization/on"))

    def test_monitoring_update(self):
        fake = self.use_fake(httpx.Response(204))
        resp = self.client.put(f"/api/v1/dds/instances/{INSTANCE_ID}/monitoring", json={"enabled": True})

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(fake.body(0), {"enabled": True})

    def test_monitoring_update_requires_enabled(self):
        for body in ({}, {"enabled": None}):
            with self.subTest(body=body):
                fake = self.use_fake()
                resp = self.client.put(f"/api/v1/dds/instances/{INSTANCE_ID}/monitoring", json=body)

                self.assertEqual(resp.status_code, 422)
                self.assertEqual(fake.call_count, 0)


if __name__ == '__main__':
    unittest.main()
