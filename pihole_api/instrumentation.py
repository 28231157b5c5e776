"""
Performance Instrumentation for the Pi-hole API Client
======================================================

Records one TimingMetrics per API request so callers can see how long the
appliance takes to answer each endpoint.

One instrumentation object may be shared by calls on several threads, so every
read and write goes through a lock. Only the most recent ``max_history``
metrics are kept; per-operation totals are running aggregates and stay bounded
by the number of distinct endpoints.

License: MIT
"""

import logging
import threading
import time
from collections import deque
from typing import Any, Deque, Dict, List, Optional

from .models import TimingMetrics

logger = logging.getLogger("pihole-api")

DEFAULT_MAX_HISTORY = 1000


class PerformanceInstrumentation:
    """
    Collects per-request timing metrics.

    Operations are named after the endpoint query, e.g. ``"api_request_topItems"``.
    """

    def __init__(self, max_history: int = DEFAULT_MAX_HISTORY) -> None:
        self._lock = threading.Lock()
        self.timing_metrics: Deque[TimingMetrics] = deque(maxlen=max_history)
        self.request_metrics: Dict[str, Dict[str, Any]] = {}
        self.session_start_time = time.time()
        self._total_operations = 0
        self._successful_operations = 0
        self._total_response_bytes = 0

    def start_timer(self, operation: str) -> float:
        """Start timing an operation."""
        return time.time()

    def record_timing(
        self,
        operation: str,
        start_time: float,
        success: bool = True,
        error_type: Optional[str] = None,
        http_status: Optional[int] = None,
        response_size: int = 0,
    ) -> TimingMetrics:
        """Record timing metrics for an operation."""
        end_time = time.time()
        duration = end_time - start_time

        metric = TimingMetrics(
            operation=operation,
            start_time=start_time,
            end_time=end_time,
            duration=duration,
            success=success,
            error_type=error_type,
            http_status=http_status,
            response_size=response_size,
        )

        with self._lock:
            self.timing_metrics.append(metric)
            self._total_operations += 1
            self._successful_operations += int(success)
            self._total_response_bytes += response_size

            stats = self.request_metrics.get(operation)
            if stats is None:
                stats = {"count": 0, "successes": 0, "total_time": 0.0, "min_time": duration, "max_time": duration}
                self.request_metrics[operation] = stats
            stats["count"] += 1
            stats["successes"] += int(success)
            stats["total_time"] += duration
            stats["min_time"] = min(stats["min_time"], duration)
            stats["max_time"] = max(stats["max_time"], duration)

        logger.debug(f"📊 {operation}: {duration * 1000:.1f}ms (success: {success})")
        return metric

    def recent_metrics(self) -> List[TimingMetrics]:
        """Snapshot of the retained metrics, oldest first."""
        with self._lock:
            return list(self.timing_metrics)

    def get_performance_summary(self) -> Dict[str, Any]:
        """Get per-operation statistics and overall success counts."""
        with self._lock:
            if not self._total_operations:
                return {"error": "No timing metrics recorded"}
            per_operation = {operation: dict(stats) for operation, stats in self.request_metrics.items()}
            total = self._total_operations
            successful = self._successful_operations
            total_bytes = self._total_response_bytes
            session_start = self.session_start_time

        operation_stats = {
            operation: {
                "count": stats["count"],
                "total_time": stats["total_time"],
                "avg_time": stats["total_time"] / stats["count"],
                "min_time": stats["min_time"],
                "max_time": stats["max_time"],
                "success_rate": stats["successes"] / stats["count"],
            }
            for operation, stats in per_operation.items()
        }

        return {
            "session_metrics": {
                "total_session_time": time.time() - session_start,
                "total_operations": total,
                "successful_operations": successful,
                "failed_operations": total - successful,
                "total_response_bytes": total_bytes,
            },
            "operation_breakdown": operation_stats,
        }

    def reset(self) -> None:
        """Discard all recorded metrics."""
        with self._lock:
            self.timing_metrics.clear()
            self.request_metrics.clear()
            self._total_operations = 0
            self._successful_operations = 0
            self._total_response_bytes = 0
            self.session_start_time = time.time()


__all__ = ["DEFAULT_MAX_HISTORY", "PerformanceInstrumentation"]
