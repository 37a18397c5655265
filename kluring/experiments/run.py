"""CLI entrypoint for headless tiling runs.

This module owns CLI argument parsing and the run loop. Domain logic lives in:

- ``kluring.config``                 – configuration dataclasses
- ``kluring.simulation.engine``      – the ``Simulation`` tick driver
- ``kluring.simulation.persistence`` – Parquet trace logging
- ``kluring.metrics.spatial``        – summary metrics
"""

from __future__ import annotations

import argparse
import json
import logging
import math
from pathlib import Path

from kluring.config.constants import DEFAULT_RESTOCK_COUNT, NUM_STEPS, SEED_CELL
from kluring.config.types import SearchStrategy, SimulationConfig
from kluring.io.paths import summary_path
from kluring.metrics.spatial import fill_ratio, occupied_component_count
from kluring.simulation.engine import Simulation, parse_restock_count
from kluring.simulation.persistence import PlacementLogRecorder

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Run helpers
# ---------------------------------------------------------------------------


def run_simulation(config: SimulationConfig, out_dir: Path | None = None) -> dict[str, object]:
    """Run ``config.steps`` ticks and return a JSON-serialisable summary.

    With ``out_dir`` set, placement and frontier events are written to
    Parquet under ``out_dir/logs`` and the summary to ``out_dir/summary.json``.
    """
    simulation = Simulation(config)
    recorder: PlacementLogRecorder | None = None
    if out_dir is not None:
        recorder = PlacementLogRecorder(out_dir)
        simulation.add_observer(recorder)
    try:
        simulation.run(config.steps)
    finally:
        if recorder is not None:
            recorder.close()

    ratio = fill_ratio(simulation.field)
    summary: dict[str, object] = {
        **simulation.summary().to_dict(),
        "steps": config.steps,
        "sim_seed": config.sim_seed,
        "strategy": config.strategy.value,
        "all_orientations": config.all_orientations,
        "status": simulation.status_line(),
        "component_count": occupied_component_count(simulation.field),
        "fill_ratio": None if math.isnan(ratio) else ratio,
    }
    logger.info(simulation.status_line())
    if out_dir is not None:
        summary_path(Path(out_dir)).write_text(json.dumps(summary, indent=2))
    return summary


# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_strategy(raw_strategy: str) -> SearchStrategy:
    """Parse search strategy from CLI/config."""
    try:
        return SearchStrategy(raw_strategy)
    except ValueError as exc:
        valid = ", ".join(strategy.value for strategy in SearchStrategy)
        raise ValueError(f"strategy must be one of {valid}") from exc


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
        return int(raw)
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    """CLI > file > default resolution for boolean flags."""
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    """CLI > file > default resolution for integer values."""
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    """CLI > file > default resolution for string values."""
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run a headless greedy polyomino tiling")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument(
        "--restock-count",
        type=str,
        default=None,
        help="Per-shape bag count; unparsable values fall back to 1",
    )
    parser.add_argument("--sim-seed", type=int, default=None)
    parser.add_argument("--seed-x", type=int, default=None)
    parser.add_argument("--seed-y", type=int, default=None)
    parser.add_argument(
        "--all-orientations",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Search all rotations and flips, not only the unrotated footprint",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        choices=[strategy.value for strategy in SearchStrategy],
        default=None,
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Write Parquet trace logs and summary.json here",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for headless runs.

    Supports ``--config path/to/config.json`` for reproducibility. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must hold a JSON object: {args.config}")

    try:
        steps = _get_int(args.steps, "steps", file_cfg, NUM_STEPS)
        restock_count = parse_restock_count(
            _get_val(args.restock_count, "restock_count", file_cfg, DEFAULT_RESTOCK_COUNT)
        )
        sim_seed = _get_int(args.sim_seed, "sim_seed", file_cfg, 0)
        seed_x = _get_int(args.seed_x, "seed_x", file_cfg, SEED_CELL[0])
        seed_y = _get_int(args.seed_y, "seed_y", file_cfg, SEED_CELL[1])
        all_orientations = _get_bool(
            args.all_orientations, "all_orientations", file_cfg, False
        )
        strategy = _parse_strategy(
            _get_str(args.strategy, "strategy", file_cfg, SearchStrategy.BEST_SCORE.value)
        )
        out_dir_raw = _get_val(args.out_dir, "out_dir", file_cfg, None)
        out_dir = None if out_dir_raw is None else Path(_coerce_str(out_dir_raw, "out_dir"))
        config = SimulationConfig(
            restock_count=restock_count,
            seed_cell=(seed_x, seed_y),
            all_orientations=all_orientations,
            strategy=strategy,
            steps=steps,
            sim_seed=sim_seed,
        )
    except ValueError as exc:
        parser.error(str(exc))

    summary = run_simulation(config, out_dir=out_dir)
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
