"""Parquet persistence helpers for the placement and frontier event streams."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from kluring.config.constants import FLUSH_THRESHOLD
from kluring.io.paths import frontier_log_path, logs_dir, placement_log_path
from kluring.io.schemas import FRONTIER_LOG_SCHEMA, PLACEMENT_LOG_SCHEMA
from kluring.simulation.engine import FrontierEvent, PlacementEvent


def flush_columns(
    columns: dict[str, list[int | bool]],
    schema: pa.Schema,
    path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated rows to Parquet and clear in-memory buffers."""
    if not columns["step"]:
        return writer
    table = pa.Table.from_pydict(columns, schema=schema)
    if writer is None:
        writer = pq.ParquetWriter(path, schema)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer


class PlacementLogRecorder:
    """Observer that streams simulation events to Parquet under ``out_dir/logs``.

    Rows are buffered and flushed every ``flush_threshold`` rows per stream.
    :meth:`close` flushes the remainder and always leaves both files on disk,
    empty if no event of that kind occurred.
    """

    def __init__(self, out_dir: Path, flush_threshold: int = FLUSH_THRESHOLD) -> None:
        if flush_threshold < 1:
            raise ValueError("flush_threshold must be >= 1")
        self.out_dir = Path(out_dir)
        logs_dir(self.out_dir).mkdir(parents=True, exist_ok=True)
        self.flush_threshold = flush_threshold
        self._placement_columns: dict[str, list[int | bool]] = {
            name: [] for name in PLACEMENT_LOG_SCHEMA.names
        }
        self._frontier_columns: dict[str, list[int | bool]] = {
            name: [] for name in FRONTIER_LOG_SCHEMA.names
        }
        self._placement_writer: pq.ParquetWriter | None = None
        self._frontier_writer: pq.ParquetWriter | None = None
        self._closed = False

    def __enter__(self) -> PlacementLogRecorder:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def on_placement(self, event: PlacementEvent) -> None:
        columns = self._placement_columns
        columns["step"].append(event.step)
        columns["shape_id"].append(event.shape_id)
        columns["rotation"].append(event.rotation)
        columns["flipped"].append(event.flipped)
        columns["anchor_x"].append(event.anchor.x)
        columns["anchor_y"].append(event.anchor.y)
        columns["n_cells"].append(len(event.cells))
        if len(columns["step"]) >= self.flush_threshold:
            self._placement_writer = flush_columns(
                columns,
                PLACEMENT_LOG_SCHEMA,
                placement_log_path(self.out_dir),
                self._placement_writer,
            )

    def on_frontier_update(self, event: FrontierEvent) -> None:
        columns = self._frontier_columns
        columns["step"].append(event.step)
        columns["x"].append(event.cell.x)
        columns["y"].append(event.cell.y)
        columns["adjacency_score"].append(event.adjacency_score)
        columns["distance_score"].append(event.distance_score)
        if len(columns["step"]) >= self.flush_threshold:
            self._frontier_writer = flush_columns(
                columns,
                FRONTIER_LOG_SCHEMA,
                frontier_log_path(self.out_dir),
                self._frontier_writer,
            )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._close_stream(
            self._placement_columns,
            PLACEMENT_LOG_SCHEMA,
            placement_log_path(self.out_dir),
            self._placement_writer,
        )
        self._close_stream(
            self._frontier_columns,
            FRONTIER_LOG_SCHEMA,
            frontier_log_path(self.out_dir),
            self._frontier_writer,
        )
        self._placement_writer = None
        self._frontier_writer = None

    @staticmethod
    def _close_stream(
        columns: dict[str, list[int | bool]],
        schema: pa.Schema,
        path: Path,
        writer: pq.ParquetWriter | None,
    ) -> None:
        writer = flush_columns(columns, schema, path, writer)
        if writer is None:
            pq.write_table(schema.empty_table(), path)
        else:
            writer.close()
