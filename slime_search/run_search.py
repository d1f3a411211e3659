"""CLI entrypoint for slime-chunk cluster search.

This module owns CLI argument parsing and sink wiring. Domain logic lives in:

- ``slime_search.config``             – configuration dataclasses and constants
- ``slime_search.domain``             – coordinates, marking, cache, flood fill
- ``slime_search.metrics.rectangle``  – largest-rectangle scoring
- ``slime_search.simulation.engine``  – per-seed scan and seed loop
- ``slime_search.io.report``          – report records and sinks
"""

from __future__ import annotations

import argparse
import json
import logging
import threading
from collections.abc import Iterable, Iterator
from pathlib import Path
from random import Random

from slime_search.config.constants import MIN_CLUSTER_SIZE, SCAN_RADIUS, SCAN_SPACING
from slime_search.config.types import ScanConfig
from slime_search.domain.cache import CoordinateValueCache
from slime_search.domain.field import SeedField
from slime_search.io.paths import images_dir, reports_path
from slime_search.io.report import (
    ConsoleReportSink,
    HttpReportSink,
    ImageReportSink,
    MultiReportSink,
    ParquetReportSink,
    ReportSink,
)
from slime_search.simulation.engine import run_seed_search
from slime_search.simulation.seeds import parse_seed_list, random_seeds, sequential_seeds
from slime_search.viz.text import render_region

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_optional_int(raw: object, key: str) -> int | None:
    """Like :func:`_coerce_int` but passes ``None`` through."""
    return None if raw is None else _coerce_int(raw, key)


def _coerce_optional_str(raw: object, key: str) -> str | None:
    """Coerce raw value to str or None; rejects booleans."""
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Search world seeds for large slime-chunk clusters"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--radius", type=int, default=None, help="Scan half-width in chunks")
    parser.add_argument("--spacing", type=int, default=None, help="Step between scanned chunks")
    parser.add_argument("--min-size", type=int, default=None)
    parser.add_argument("--min-rect-area", type=int, default=None)
    parser.add_argument("--rectangles-only", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--allow-one-wides", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--verbose", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument(
        "--n-seeds", type=int, default=None, help="Stop after this many seeds (default: never)"
    )
    parser.add_argument("--seeds", type=str, default=None, help="Comma-delimited fixed seeds")
    parser.add_argument(
        "--start-seed", type=int, default=None, help="Scan seeds start, start + 1, ... in order"
    )
    parser.add_argument("--rng-seed", type=int, default=None, help="Seed for the seed sampler")
    parser.add_argument("--collector-url", type=str, default=None)
    parser.add_argument("--out-dir", type=Path, default=None, help="Write reports to Parquet here")
    parser.add_argument(
        "--image-dir",
        type=Path,
        default=None,
        help="Render a PNG per report (defaults to <out-dir>/images when --images is set)",
    )
    parser.add_argument("--images", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument(
        "--print-map",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print the slime-chunk map of the first seed before scanning",
    )
    return parser


def _build_sink(
    collector_url: str | None,
    out_dir: Path | None,
    image_dir: Path | None,
) -> ReportSink:
    sinks: list[ReportSink] = [ConsoleReportSink()]
    if collector_url is not None:
        sinks.append(HttpReportSink(collector_url))
    if out_dir is not None:
        sinks.append(ParquetReportSink(reports_path(out_dir)))
    if image_dir is not None:
        sinks.append(ImageReportSink(image_dir))
    return sinks[0] if len(sinks) == 1 else MultiReportSink(sinks)


def _print_first_map(
    seeds: Iterable[int], cache: CoordinateValueCache, config: ScanConfig
) -> Iterator[int]:
    """Pass seeds through, printing the region map of the first one."""
    for index, seed in enumerate(seeds):
        if index == 0:
            print(render_region(SeedField(seed, cache), config.radius, config.spacing))
        yield seed


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for seed search.

    Supports ``--config path/to/config.json``. CLI arguments override
    config-file values; config-file values override built-in defaults.
    Seeds come from ``--seeds``, else ``--start-seed`` counting upwards, else
    a random sampler. Without ``--n-seeds`` or ``--seeds`` the search runs
    until interrupted.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        config = ScanConfig(
            radius=_coerce_int(_get_val(args.radius, "radius", file_cfg, SCAN_RADIUS), "radius"),
            spacing=_coerce_int(
                _get_val(args.spacing, "spacing", file_cfg, SCAN_SPACING), "spacing"
            ),
            min_size=_coerce_int(
                _get_val(args.min_size, "min_size", file_cfg, MIN_CLUSTER_SIZE), "min_size"
            ),
            min_rect_area=_coerce_optional_int(
                _get_val(args.min_rect_area, "min_rect_area", file_cfg, None), "min_rect_area"
            ),
            rectangles_only=_coerce_bool(
                _get_val(args.rectangles_only, "rectangles_only", file_cfg, True),
                "rectangles_only",
            ),
            allow_one_wides=_coerce_bool(
                _get_val(args.allow_one_wides, "allow_one_wides", file_cfg, True),
                "allow_one_wides",
            ),
            verbose=_coerce_bool(_get_val(args.verbose, "verbose", file_cfg, False), "verbose"),
        )
        n_seeds = _coerce_optional_int(_get_val(args.n_seeds, "n_seeds", file_cfg, None), "n_seeds")
        seeds_val = _get_val(args.seeds, "seeds", file_cfg, None)
        if isinstance(seeds_val, list):
            seeds_val = ",".join(str(seed) for seed in seeds_val)
        seeds_raw = _coerce_optional_str(seeds_val, "seeds")
        start_seed = _coerce_optional_int(
            _get_val(args.start_seed, "start_seed", file_cfg, None), "start_seed"
        )
        rng_seed = _coerce_optional_int(
            _get_val(args.rng_seed, "rng_seed", file_cfg, None), "rng_seed"
        )
        collector_url = _coerce_optional_str(
            _get_val(args.collector_url, "collector_url", file_cfg, None), "collector_url"
        )
        out_dir_raw = _coerce_optional_str(
            _get_val(args.out_dir, "out_dir", file_cfg, None), "out_dir"
        )
        image_dir_raw = _coerce_optional_str(
            _get_val(args.image_dir, "image_dir", file_cfg, None), "image_dir"
        )
        images = _coerce_bool(_get_val(args.images, "images", file_cfg, False), "images")
        print_map = _coerce_bool(
            _get_val(args.print_map, "print_map", file_cfg, False), "print_map"
        )
        seeds = parse_seed_list(seeds_raw) if seeds_raw is not None else None
    except ValueError as exc:
        parser.error(str(exc))

    if seeds is not None and start_seed is not None:
        parser.error("--seeds and --start-seed are mutually exclusive")
    if n_seeds is not None and n_seeds < 1:
        parser.error("n-seeds must be >= 1")

    out_dir = Path(out_dir_raw) if out_dir_raw is not None else None
    image_dir = Path(image_dir_raw) if image_dir_raw is not None else None
    if images and image_dir is None:
        if out_dir is None:
            parser.error("--images requires --image-dir or --out-dir")
        image_dir = images_dir(out_dir)

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    seed_source: Iterable[int]
    if seeds is not None:
        seed_source = seeds
    elif start_seed is not None:
        seed_source = sequential_seeds(start_seed)
    else:
        seed_source = random_seeds(Random(rng_seed))
    cache = CoordinateValueCache(config.radius, config.spacing)
    if print_map:
        seed_source = _print_first_map(seed_source, cache, config)
    stop = threading.Event()
    seeds_scanned = 0
    clusters_registered = 0
    reports_sent = 0
    reports_failed = 0
    interrupted = False

    sink = _build_sink(collector_url, out_dir, image_dir)
    try:
        with sink:
            for result in run_seed_search(
                seed_source, config, sink, cache=cache, stop=stop, max_seeds=n_seeds
            ):
                seeds_scanned += 1
                clusters_registered += result.clusters_registered
                reports_sent += result.reports_sent
                reports_failed += result.reports_failed
    except KeyboardInterrupt:
        stop.set()
        interrupted = True
        logger.info("Search interrupted after %d seeds", seeds_scanned)

    summary = {
        "radius": config.radius,
        "spacing": config.spacing,
        "min_size": config.min_size,
        "rectangles_only": config.rectangles_only,
        "seeds_scanned": seeds_scanned,
        "clusters_registered": clusters_registered,
        "reports_sent": reports_sent,
        "reports_failed": reports_failed,
        "interrupted": interrupted,
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
