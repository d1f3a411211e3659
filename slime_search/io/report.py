"""Cluster report records and the sinks that deliver them.

Every sink implements ``report(record) -> bool``. Sinks are best effort:
delivery failures are logged and reported as ``False``, never raised into
the scan loop.
"""

from __future__ import annotations

import http.client
import json
import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from urllib import error, request

import pyarrow as pa
import pyarrow.parquet as pq

from slime_search.config.constants import (
    HTTP_MAX_RETRIES,
    HTTP_RETRY_BACKOFF_SECONDS,
    HTTP_TIMEOUT_SECONDS,
    REPORT_FLUSH_THRESHOLD,
    RETRYABLE_HTTP_STATUS_CODES,
)
from slime_search.domain.cluster import Cluster
from slime_search.domain.coordinates import Coordinate
from slime_search.io.paths import cluster_image_path
from slime_search.io.schemas import REPORT_SCHEMA, REPORT_SCHEMA_VERSION
from slime_search.metrics.rectangle import RectangleDimensions
from slime_search.viz.text import render_cluster

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClusterReport:
    """An accepted cluster, ready to hand to a sink.

    ``area`` is the rectangle area in rectangles-only mode and the raw
    cluster size otherwise.
    """

    seed: int
    cluster: Cluster
    rectangle: RectangleDimensions
    area: int

    @property
    def origin(self) -> Coordinate:
        return self.cluster.origin

    @property
    def chunks(self) -> tuple[Coordinate, ...]:
        return self.cluster.coordinates

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-ready record sent to collectors."""
        return {
            "seed": self.seed,
            "origin": {"x": self.origin.x, "z": self.origin.z},
            "chunks": [{"x": c.x, "z": c.z} for c in self.chunks],
            "area": self.area,
        }


class ReportSink:
    """Destination for accepted cluster reports."""

    def report(self, record: ClusterReport) -> bool:
        raise NotImplementedError

    def close(self) -> None:
        """Release resources; a no-op unless the sink buffers."""

    def __enter__(self) -> ReportSink:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class MemoryReportSink(ReportSink):
    """Keeps every report in :attr:`records`."""

    def __init__(self) -> None:
        self.records: list[ClusterReport] = []

    def report(self, record: ClusterReport) -> bool:
        self.records.append(record)
        return True


class ConsoleReportSink(ReportSink):
    """Logs a human-readable summary and grid of each report."""

    def report(self, record: ClusterReport) -> bool:
        block_x, block_z = record.origin.to_block()
        logger.info(
            "Seed: %d | Chunks: (%d, %d) | Coordinates: (%d, %d) | Size: %d\n%s",
            record.seed,
            record.origin.x,
            record.origin.z,
            block_x,
            block_z,
            record.area,
            render_cluster(record.cluster),
        )
        return True


class HttpReportSink(ReportSink):
    """POSTs each report as JSON to a collector endpoint.

    Retries on connection errors and on retryable HTTP status codes with
    exponential backoff; the response body is logged, not validated.
    """

    def __init__(
        self,
        url: str,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        max_retries: int = HTTP_MAX_RETRIES,
        backoff_seconds: float = HTTP_RETRY_BACKOFF_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_retries < 1:
            raise ValueError("max_retries must be >= 1")
        self.url = url
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_seconds = backoff_seconds
        self._sleep = sleep

    def _build_request(self, record: ClusterReport) -> request.Request:
        data = json.dumps(record.to_payload()).encode("utf-8")
        req = request.Request(url=self.url, method="POST", data=data)
        req.add_header("Content-Type", "application/json")
        return req

    def report(self, record: ClusterReport) -> bool:
        try:
            req = self._build_request(record)
        except ValueError as exc:
            logger.warning("Cannot report seed %d to %s: %s", record.seed, self.url, exc)
            return False
        for attempt in range(self.max_retries):
            try:
                with request.urlopen(req, timeout=self.timeout) as resp:
                    body = resp.read().decode("utf-8", errors="replace")
                logger.debug("Collector accepted seed %d: %s", record.seed, body)
                return True
            except error.HTTPError as exc:
                if exc.code in RETRYABLE_HTTP_STATUS_CODES and attempt < self.max_retries - 1:
                    self._sleep(self.backoff_seconds * (2**attempt))
                    continue
                logger.warning(
                    "Report for seed %d rejected by %s (%d)", record.seed, self.url, exc.code
                )
                return False
            except (OSError, http.client.HTTPException) as exc:
                if attempt < self.max_retries - 1:
                    self._sleep(self.backoff_seconds * (2**attempt))
                    continue
                logger.warning("Report for seed %d failed: %s", record.seed, exc)
                return False
            except ValueError as exc:
                logger.warning("Cannot report seed %d to %s: %s", record.seed, self.url, exc)
                return False
        return False


class ParquetReportSink(ReportSink):
    """Appends reports to a Parquet file in buffered batches."""

    def __init__(self, path: Path, flush_threshold: int = REPORT_FLUSH_THRESHOLD) -> None:
        if flush_threshold < 1:
            raise ValueError("flush_threshold must be >= 1")
        self.path = Path(path)
        self.flush_threshold = flush_threshold
        self._writer: pq.ParquetWriter | None = None
        self._columns: dict[str, list[object]] = {name: [] for name in REPORT_SCHEMA.names}

    def report(self, record: ClusterReport) -> bool:
        columns = self._columns
        columns["schema_version"].append(REPORT_SCHEMA_VERSION)
        columns["seed"].append(record.seed)
        columns["origin_x"].append(record.origin.x)
        columns["origin_z"].append(record.origin.z)
        columns["area"].append(record.area)
        columns["size"].append(record.cluster.size)
        columns["rect_width"].append(record.rectangle.width)
        columns["rect_height"].append(record.rectangle.height)
        columns["chunks_x"].append([c.x for c in record.chunks])
        columns["chunks_z"].append([c.z for c in record.chunks])
        if len(columns["seed"]) >= self.flush_threshold:
            self.flush()
        return True

    def flush(self) -> None:
        """Write buffered rows and clear the in-memory buffers."""
        if not self._columns["seed"]:
            return
        table = pa.Table.from_pydict(self._columns, schema=REPORT_SCHEMA)
        if self._writer is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._writer = pq.ParquetWriter(self.path, REPORT_SCHEMA)
        self._writer.write_table(table)
        for values in self._columns.values():
            values.clear()

    def close(self) -> None:
        self.flush()
        if self._writer is not None:
            self._writer.close()
            self._writer = None


class ImageReportSink(ReportSink):
    """Renders each reported cluster to a PNG under ``image_dir``."""

    def __init__(self, image_dir: Path) -> None:
        self.image_dir = Path(image_dir)

    def report(self, record: ClusterReport) -> bool:
        from slime_search.viz.image import render_cluster_image

        path = cluster_image_path(self.image_dir, record.seed, record.origin.x, record.origin.z)
        try:
            render_cluster_image(record.cluster, path, title=f"seed {record.seed}")
        except OSError as exc:
            logger.warning("Could not write cluster image %s: %s", path, exc)
            return False
        return True


class MultiReportSink(ReportSink):
    """Fans each report out to several sinks; succeeds when all of them do."""

    def __init__(self, sinks: Iterable[ReportSink]) -> None:
        self.sinks = list(sinks)

    def report(self, record: ClusterReport) -> bool:
        delivered = True
        for sink in self.sinks:
            try:
                ok = sink.report(record)
            except Exception:
                logger.exception("Sink %s raised for seed %d", type(sink).__name__, record.seed)
                ok = False
            delivered = delivered and ok
        return delivered

    def close(self) -> None:
        for sink in self.sinks:
            sink.close()
