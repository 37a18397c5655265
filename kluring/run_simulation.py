"""Module entrypoint: ``python -m kluring.run_simulation``."""

from kluring.experiments.run import (
    main as main,
)
from kluring.experiments.run import (
    run_simulation as run_simulation,
)

if __name__ == "__main__":
    main()
