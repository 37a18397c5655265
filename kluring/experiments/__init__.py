"""Run orchestration: headless simulation runs and their CLI."""

from kluring.experiments.run import main, run_simulation

__all__ = ["main", "run_simulation"]
