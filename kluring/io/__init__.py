"""I/O layer: trace-log schemas and output paths."""
