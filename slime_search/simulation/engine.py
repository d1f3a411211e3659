"""Core scan engine: per-seed cluster search, scoring and reporting."""

from __future__ import annotations

import itertools
import logging
import threading
from collections.abc import Iterable, Iterator

import numpy as np

from slime_search.config.types import ScanConfig, ScanResult
from slime_search.domain.cache import CoordinateValueCache
from slime_search.domain.cluster import Cluster, ClusterRegistry, flood_fill
from slime_search.domain.coordinates import Coordinate
from slime_search.domain.field import MarkingField, SeedField
from slime_search.io.report import ClusterReport, ReportSink
from slime_search.metrics.rectangle import RectangleDimensions, largest_rectangle

logger = logging.getLogger(__name__)


def accept_cluster(size: int, rectangle: RectangleDimensions, config: ScanConfig) -> bool:
    """Apply the size threshold and the optional one-wide rectangle exclusion."""
    if config.rectangles_only:
        accepted = rectangle.area > config.rect_area_threshold
    else:
        accepted = size > config.min_size
    if not config.allow_one_wides:
        accepted = accepted and rectangle.width != 1 and rectangle.height != 1
    return accepted


def build_report(seed: int, cluster: Cluster, config: ScanConfig) -> ClusterReport | None:
    """Score ``cluster`` and return its report, or None when it is rejected."""
    rectangle = largest_rectangle(cluster.to_bitmap())
    if not accept_cluster(cluster.size, rectangle, config):
        return None
    area = rectangle.area if config.rectangles_only else cluster.size
    return ClusterReport(seed=seed, cluster=cluster, rectangle=rectangle, area=area)


def _deliver(sink: ReportSink, record: ClusterReport) -> bool:
    try:
        return sink.report(record)
    except Exception:
        logger.exception("Sink %s raised for seed %d", type(sink).__name__, record.seed)
        return False


def _check_cache(cache: CoordinateValueCache, config: ScanConfig) -> None:
    if cache.radius != config.radius:
        raise ValueError("cache radius conflicts with config.radius")
    if cache.spacing != config.spacing:
        raise ValueError("cache spacing conflicts with config.spacing")


def scan_seed(
    seed: int,
    config: ScanConfig,
    sink: ReportSink | None = None,
    *,
    cache: CoordinateValueCache | None = None,
    field: MarkingField | None = None,
    stop: threading.Event | None = None,
) -> ScanResult:
    """Scan the configured region of ``seed`` and report accepted clusters.

    Region cells are visited in cache order; each unassigned marked cell
    starts a flood fill. Clusters of at least ``min_size`` chunks are
    registered, scored and, when accepted and new, handed to ``sink``.
    ``field`` replaces the seed's slime-chunk map (synthetic maps).
    Setting ``stop`` ends the scan before the next flood fill.
    """
    if cache is None:
        cache = CoordinateValueCache(config.radius, config.spacing)
    else:
        _check_cache(cache, config)
    if field is None:
        field = SeedField(seed, cache)

    registry = ClusterRegistry()
    assigned = np.zeros(len(cache), dtype=bool)
    clusters_found = 0
    reports_sent = 0
    reports_failed = 0
    cancelled = False

    for row in range(len(cache.zs)):
        z = int(cache.zs[row])
        row_offset = row * cache.row_length
        for col in field.marked_columns(cache, row):
            if assigned[row_offset + col]:
                continue
            if stop is not None and stop.is_set():
                cancelled = True
                break

            cluster = flood_fill(Coordinate(int(cache.xs[col]), z), field)
            clusters_found += 1
            for x, cz in cluster.coordinates:
                index = cache.index_of(x, cz)
                if index is not None:
                    assigned[index] = True

            if cluster.size < config.min_size or not registry.register(cluster):
                continue
            record = build_report(seed, cluster, config)
            if record is None or sink is None:
                continue
            if _deliver(sink, record):
                reports_sent += 1
            else:
                reports_failed += 1
        if cancelled:
            break

    result = ScanResult(
        seed=seed,
        clusters_found=clusters_found,
        clusters_registered=len(registry),
        reports_sent=reports_sent,
        reports_failed=reports_failed,
        cancelled=cancelled,
    )
    logger.debug(
        "Seed %d: %d clusters, %d registered, %d reported, %d failed%s",
        seed,
        clusters_found,
        result.clusters_registered,
        reports_sent,
        reports_failed,
        " (cancelled)" if cancelled else "",
    )
    return result


def run_seed_search(
    seeds: Iterable[int],
    config: ScanConfig,
    sink: ReportSink | None = None,
    *,
    cache: CoordinateValueCache | None = None,
    stop: threading.Event | None = None,
    max_seeds: int | None = None,
) -> Iterator[ScanResult]:
    """Scan seeds one after another, yielding one result per seed.

    The coordinate value cache is built once and shared by every scan.
    Iteration ends when ``seeds`` is exhausted, ``max_seeds`` scans have
    run, or ``stop`` is set.
    """
    if max_seeds is not None and max_seeds < 1:
        raise ValueError("max_seeds must be >= 1")
    if cache is None:
        cache = CoordinateValueCache(config.radius, config.spacing)
    else:
        _check_cache(cache, config)

    if max_seeds is not None:
        seeds = itertools.islice(seeds, max_seeds)
    for seed in seeds:
        if stop is not None and stop.is_set():
            break
        result = scan_seed(seed, config, sink, cache=cache, stop=stop)
        yield result
        if result.cancelled:
            break
