"""
HTTP service endpoints for vecalc.

Exposes:
- /health
- /metrics
- /vector/<operation>

Each POST to /vector/<operation> takes a JSON body such as
{"a": [1, 2, 3], "b": [4, 5, 6], "scalar": 2, "tolerance": 1e-10}
and answers with {"operation": ..., "result": ...}. Degenerate inputs are
answered with 422 and the name of the degenerate case.
"""

import logging
import threading
import time
from typing import Any, Callable, Dict, Optional

from flask import Flask, jsonify, request

from vecalc import math_utils
from vecalc.config import VectorConfig
from vecalc.observability import DegenerateMonitor
from vecalc.results import Angle, OpResult, VectorError
from vecalc.vector import Vector, new


logger = logging.getLogger(__name__)


def _vector(data: Dict, key: str) -> Vector:
    raw = data[key]
    if not isinstance(raw, list):
        raise TypeError(f"'{key}' must be a list of numbers")
    return new(raw)


def _serialize(value: Any) -> Any:
    if isinstance(value, Vector):
        return value.to_list()
    if isinstance(value, Angle):
        return value.to_dict()
    if isinstance(value, list):
        return [_serialize(v) for v in value]
    return value


class VectorService:
    """
    HTTP facade over the vecalc operations.

    Degenerate cases go through the try_* variants so the client gets a
    422 with a named error instead of the library's pass-through values.
    """

    def __init__(self, config: Optional[VectorConfig] = None, monitor: Optional[DegenerateMonitor] = None):
        """
        Initialize vector service.

        Args:
            config:  Runtime settings (tolerance, equality mode, bind address)
            monitor: Degenerate-input monitor reported under /metrics
        """
        self.config = config or VectorConfig()
        self.monitor = monitor or DegenerateMonitor(max_history=self.config.max_history)
        self.app = Flask(__name__)
        self.operations: Dict[str, Callable[[Dict], Any]] = self._build_operations()
        self._setup_routes()
        self._counters: Dict[str, int] = {
            "requests_total": 0,
            "requests_success": 0,
            "requests_degenerate": 0,
            "requests_error": 0,
        }
        self._counter_lock = threading.Lock()
        self._started = time.time()

    def _count(self, counter: str) -> None:
        with self._counter_lock:
            self._counters[counter] += 1

    def _snapshot(self) -> Dict[str, int]:
        with self._counter_lock:
            return dict(self._counters)

    def _tolerance(self, data: Dict) -> float:
        return float(data.get("tolerance", self.config.tolerance))

    def _build_operations(self) -> Dict[str, Callable[[Dict], Any]]:
        """Map operation names to handlers taking the parsed JSON body."""
        m = math_utils
        return {
            "new": lambda d: _vector(d, "a"),
            "plus": lambda d: m.plus(_vector(d, "a"), _vector(d, "b")),
            "minus": lambda d: m.minus(_vector(d, "a"), _vector(d, "b")),
            "times_scalar": lambda d: m.times_scalar(_vector(d, "a"), float(d["scalar"])),
            "magnitude": lambda d: m.magnitude(_vector(d, "a")),
            "normalize": lambda d: m.try_normalize(_vector(d, "a"), self._tolerance(d)),
            "dot_product": lambda d: m.dot_product(_vector(d, "a"), _vector(d, "b")),
            "angle_between": lambda d: m.try_angle_between(_vector(d, "a"), _vector(d, "b"), self._tolerance(d)),
            "is_zero_vector": lambda d: m.is_zero_vector(_vector(d, "a"), self._tolerance(d)),
            "are_equal": lambda d: m.are_equal(
                _vector(d, "a"), _vector(d, "b"), self._tolerance(d),
                d.get("mode", self.config.equality_mode),
            ),
            "are_parallel": lambda d: m.are_parallel(
                _vector(d, "a"), _vector(d, "b"), self._tolerance(d),
                d.get("mode", self.config.equality_mode),
            ),
            "are_orthogonal": lambda d: m.are_orthogonal(_vector(d, "a"), _vector(d, "b"), self._tolerance(d)),
            "scalar_project": lambda d: m.try_scalar_project(_vector(d, "a"), _vector(d, "b"), self._tolerance(d)),
            "project": lambda d: m.try_project(_vector(d, "a"), _vector(d, "b"), self._tolerance(d)),
            "cross_product": lambda d: m.try_cross_product(_vector(d, "a"), _vector(d, "b")),
        }

    def _setup_routes(self):
        """Setup Flask routes."""

        @self.app.route('/health', methods=['GET'])
        def health():
            return jsonify({
                "status": "healthy",
                "uptime_seconds": round(time.time() - self._started, 1),
                "timestamp": time.time()
            }), 200

        @self.app.route('/vector/<operation>', methods=['POST'])
        def run_operation(operation: str):
            handler = self.operations.get(operation)
            if handler is None:
                return jsonify({
                    "error": "unknown_operation",
                    "message": f"Unknown operation: {operation}",
                    "operations": sorted(self.operations)
                }), 404

            self._count("requests_total")
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                self._count("requests_error")
                return jsonify({"error": "bad_request", "message": "Expected a JSON object body"}), 400

            try:
                outcome = handler(data)
                if isinstance(outcome, OpResult):
                    outcome = outcome.unwrap()
            except VectorError as e:
                self._count("requests_degenerate")
                logger.warning(
                    e.message,
                    extra={"operation": e.operation, "kind": e.kind_name},
                )
                return jsonify({
                    "operation": operation,
                    "error": e.kind_name,
                    "message": e.message
                }), 422
            except KeyError as e:
                self._count("requests_error")
                logger.error(f"Missing field for {operation}: {e}")
                return jsonify({"error": "bad_request", "message": f"Missing field: {e.args[0]}"}), 400
            except (TypeError, ValueError) as e:
                self._count("requests_error")
                logger.error(f"Invalid input for {operation}: {e}")
                return jsonify({"error": "bad_request", "message": str(e)}), 400

            self._count("requests_success")
            logger.debug(f"{operation} ok")
            return jsonify({"operation": operation, "result": _serialize(outcome)}), 200

        @self.app.route('/metrics', methods=['GET'])
        def metrics():
            counters = self._snapshot()
            return jsonify({
                **counters,
                "success_rate": (
                    counters["requests_success"] / counters["requests_total"] * 100
                    if counters["requests_total"] > 0 else 0.0
                ),
                "degenerate_inputs": self.monitor.summary(),
                "tolerance": self.config.tolerance,
                "equality_mode": self.config.equality_mode
            }), 200

    def run(self, debug: bool = False):
        """
        Run the Flask service on the configured host and port.

        Args:
            debug: Enable debug mode
        """
        self.monitor.attach()
        logger.info(f"Starting vecalc service on {self.config.host}:{self.config.port}")
        try:
            self.app.run(host=self.config.host, port=self.config.port, debug=debug, threaded=True)
        finally:
            self.monitor.detach()


def create_vector_service(config: Optional[VectorConfig] = None) -> VectorService:
    """
    Factory function to create a vector service.

    Args:
        config: Optional runtime settings; read from the environment when omitted

    Returns:
        VectorService instance
    """
    return VectorService(config or VectorConfig.from_env())
