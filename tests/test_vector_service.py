"""
Tests for the vecalc HTTP service, configuration and degenerate-input monitor.

Covers:
  - VectorConfig defaults, validation and environment loading
  - DegenerateMonitor aggregation from log records
  - /health, /metrics and /vector/<operation> via Flask's test client
"""

import sys
import os
import logging
import threading
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vecalc import DegenerateMonitor, VectorConfig, cross_product, new, normalize
from vecalc.vector_service import VectorService, create_vector_service


# ═══════════════════════════════════════════════════════════════════
#  CONFIG TESTS
# ═══════════════════════════════════════════════════════════════════

class TestVectorConfig(unittest.TestCase):
    """Tests for VectorConfig."""

    def test_defaults(self):
        config = VectorConfig()
        self.assertEqual(config.tolerance, 1.0e-10)
        self.assertEqual(config.equality_mode, "signed_sum")
        self.assertEqual(config.port, 8080)

    def test_from_env_overrides(self):
        config = VectorConfig.from_env({
            "VECALC_TOLERANCE": "1e-6",
            "VECALC_EQUALITY_MODE": "MAX_ABS",
            "VECALC_PORT": "9100",
            "VECALC_LOG_LEVEL": "debug",
            "VECALC_MAX_HISTORY": "50",
        })
        self.assertEqual(config.tolerance, 1.0e-6)
        self.assertEqual(config.equality_mode, "max_abs")
        self.assertEqual(config.port, 9100)
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.max_history, 50)

    def test_from_env_empty_uses_defaults(self):
        self.assertEqual(VectorConfig.from_env({}), VectorConfig())

    def test_from_env_invalid_number(self):
        with self.assertRaises(ValueError) as ctx:
            VectorConfig.from_env({"VECALC_PORT": "eighty"})
        self.assertIn("VECALC_PORT", str(ctx.exception))

    def test_validation(self):
        with self.assertRaises(ValueError):
            VectorConfig(tolerance=-1.0)
        with self.assertRaises(ValueError):
            VectorConfig(equality_mode="approximately")
        with self.assertRaises(ValueError):
            VectorConfig(port=0)

    def test_with_overrides(self):
        config = VectorConfig().with_overrides(tolerance=0.5)
        self.assertEqual(config.tolerance, 0.5)


# ═══════════════════════════════════════════════════════════════════
#  MONITOR TESTS
# ═══════════════════════════════════════════════════════════════════

class TestDegenerateMonitor(unittest.TestCase):
    """Tests for DegenerateMonitor."""

    def setUp(self):
        self.monitor = DegenerateMonitor(max_history=2).attach()

    def tearDown(self):
        self.monitor.detach()

    def test_records_degenerate_cases(self):
        normalize(new([0, 0]))
        cross_product(new([1]), new([1, 2, 3]))
        summary = self.monitor.summary()
        self.assertEqual(summary["total_events"], 2)
        self.assertEqual(summary["operation_counts"], {"normalize": 1, "cross_product": 1})
        self.assertEqual(summary["kind_counts"], {"zero_vector": 1, "dimension_mismatch": 1})

    def test_history_is_bounded(self):
        for _ in range(5):
            normalize(new([0]))
        self.assertEqual(self.monitor.summary()["total_events"], 5)
        self.assertEqual(len(self.monitor.get_recent_events(limit=10)), 2)

    def test_ignores_untagged_records(self):
        logging.getLogger("vecalc.somewhere").warning("not a degenerate case")
        self.assertEqual(self.monitor.summary()["total_events"], 0)

    def test_well_formed_inputs_record_nothing(self):
        normalize(new([3, 4]))
        self.assertEqual(self.monitor.summary()["total_events"], 0)

    def test_reset(self):
        normalize(new([0, 0]))
        self.monitor.reset()
        self.assertEqual(self.monitor.summary()["total_events"], 0)
        self.assertEqual(self.monitor.get_recent_events(), [])

    def test_detach_stops_recording(self):
        self.monitor.detach()
        normalize(new([0, 0]))
        self.assertEqual(self.monitor.summary()["total_events"], 0)


# ═══════════════════════════════════════════════════════════════════
#  HTTP SERVICE TESTS
# ═══════════════════════════════════════════════════════════════════

class TestVectorService(unittest.TestCase):
    """Tests for the Flask endpoints."""

    def setUp(self):
        self.service = VectorService(VectorConfig())
        self.service.monitor.attach()
        self.client = self.service.app.test_client()

    def tearDown(self):
        self.service.monitor.detach()

    def post(self, operation, body):
        return self.client.post(f"/vector/{operation}", json=body)

    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["status"], "healthy")

    def test_plus(self):
        response = self.post("plus", {"a": [1, 2, 3], "b": [5, 6, -8, 2]})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["result"], [6, 8, -5, 2])

    def test_dot_product(self):
        response = self.post("dot_product", {"a": [1, 2, 3], "b": [4, 5, 6.5]})
        self.assertEqual(response.get_json()["result"], 33.5)

    def test_cross_product(self):
        response = self.post("cross_product", {"a": [1, 2, 3], "b": [1, 5, 7]})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["result"], [-1, -4, 3])

    def test_times_scalar(self):
        response = self.post("times_scalar", {"a": [1, 2, 3], "scalar": 3})
        self.assertEqual(response.get_json()["result"], [3, 6, 9])

    def test_angle_between(self):
        response = self.post("angle_between", {"a": [1, 0], "b": [0, 1]})
        result = response.get_json()["result"]
        self.assertAlmostEqual(result["deg_angle"], 90.0)

    def test_are_parallel(self):
        response = self.post("are_parallel", {"a": [3, 2, 1], "b": [7.5, 5, 2.5]})
        self.assertIs(response.get_json()["result"], True)

    def test_tolerance_override_on_projection(self):
        body = {"a": [2, 3], "b": [1.0e-4, 0]}
        self.assertEqual(self.post("project", body).status_code, 200)
        self.assertEqual(self.post("scalar_project", body).status_code, 200)

        body["tolerance"] = 1.0e-3
        for operation in ("project", "scalar_project", "angle_between"):
            response = self.post(operation, body)
            self.assertEqual(response.status_code, 422, operation)
            self.assertEqual(response.get_json()["error"], "zero_vector")

    def test_tolerance_override_on_parallel(self):
        body = {"a": [1, 2], "b": [1.0e-4, 0]}
        self.assertIs(self.post("are_parallel", body).get_json()["result"], False)
        body["tolerance"] = 1.0e-3
        self.assertIs(self.post("are_parallel", body).get_json()["result"], True)

    def test_are_equal_mode(self):
        body = {"a": [1, -1], "b": [0, 0]}
        self.assertIs(self.post("are_equal", body).get_json()["result"], True)
        body["mode"] = "max_abs"
        self.assertIs(self.post("are_equal", body).get_json()["result"], False)

    def test_tolerance_override(self):
        response = self.post("is_zero_vector", {"a": [1.0e-3], "tolerance": 1.0e-2})
        self.assertIs(response.get_json()["result"], True)

    def test_normalize_zero_vector_is_422(self):
        response = self.post("normalize", {"a": [0, 0]})
        self.assertEqual(response.status_code, 422)
        payload = response.get_json()
        self.assertEqual(payload["error"], "zero_vector")
        self.assertEqual(payload["operation"], "normalize")

    def test_cross_product_dimension_mismatch_is_422(self):
        response = self.post("cross_product", {"a": [1, 2], "b": [1, 2, 3]})
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.get_json()["error"], "dimension_mismatch")

    def test_unknown_operation_is_404(self):
        response = self.post("invert", {"a": [1]})
        self.assertEqual(response.status_code, 404)
        self.assertIn("plus", response.get_json()["operations"])

    def test_missing_field_is_400(self):
        response = self.post("plus", {"a": [1, 2]})
        self.assertEqual(response.status_code, 400)
        self.assertIn("b", response.get_json()["message"])

    def test_bad_vector_is_400(self):
        self.assertEqual(self.post("magnitude", {"a": "123"}).status_code, 400)
        self.assertEqual(self.post("magnitude", {"a": ["x"]}).status_code, 400)

    def test_strings_and_bools_are_400(self):
        for raw in (["1", "2"], ["3.5"], [True, False], [1, None]):
            response = self.post("magnitude", {"a": raw})
            self.assertEqual(response.status_code, 400, raw)
            self.assertEqual(response.get_json()["error"], "bad_request")

    def test_non_json_body_is_400(self):
        response = self.client.post("/vector/magnitude", data="not json")
        self.assertEqual(response.status_code, 400)

    def test_metrics(self):
        self.post("magnitude", {"a": [3, 4]})
        self.post("normalize", {"a": [0, 0]})
        self.post("plus", {"a": [1]})
        metrics = self.client.get("/metrics").get_json()
        self.assertEqual(metrics["requests_total"], 3)
        self.assertEqual(metrics["requests_success"], 1)
        self.assertEqual(metrics["requests_degenerate"], 1)
        self.assertEqual(metrics["requests_error"], 1)
        self.assertEqual(metrics["degenerate_inputs"]["kind_counts"], {"zero_vector": 1})

    def test_metrics_under_concurrent_requests(self):
        def worker():
            client = self.service.app.test_client()
            for _ in range(25):
                client.post("/vector/magnitude", json={"a": [3, 4]})

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        metrics = self.client.get("/metrics").get_json()
        self.assertEqual(metrics["requests_total"], 100)
        self.assertEqual(metrics["requests_success"], 100)
        self.assertEqual(metrics["success_rate"], 100.0)

    def test_factory_reads_config(self):
        service = create_vector_service(VectorConfig(port=9200))
        self.assertEqual(service.config.port, 9200)


if __name__ == "__main__":
    unittest.main(verbosity=2)
