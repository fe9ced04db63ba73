#!/usr/bin/env python3
"""Main script to run the fire spread simulation.

Edit the CONFIG block to tweak the run. The script prints every snapshot
to the console, exports the history to CSV and logs the per-step counts.
"""

import logging
import random
import sys
import time
from pathlib import Path
from typing import Any, Dict

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import CompositionConfig, Environment, FireModel, create_grid, ignite
from forest_fire.export import export_csv
from forest_fire.render import print_grid

logger = logging.getLogger(__name__)

CONFIG: Dict[str, Any] = {
    "seed": 12345,
    "grid_size": 40,
    "max_steps": 50,
    "temperature": 35.0,
    "humidity": 0.4,
    "composition": CompositionConfig(
        water=0.05, rock=0.02, grass=0.35, bush=0.25, small_tree=0.15, growing_tree=0.13, tree=0.05
    ),
    "frame_delay": 0.5,  # seconds between printed snapshots
    "output_csv": project_root / "forest_fire_simulation.csv",
}


def main():
    """Run the fire spread simulation."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    size = CONFIG["grid_size"]
    environment = Environment(temperature=CONFIG["temperature"], humidity=CONFIG["humidity"])

    # One seeded generator draws the initial vegetation and every step
    rng = random.Random(CONFIG["seed"])
    initial = create_grid(size, size, CONFIG["composition"], environment, rng=rng)

    print("--- INITIAL GRID ---")
    print_grid(initial)

    grid = initial
    for x, y in [(size // 2, size // 2), (2, 2), (size - 2, size - 2)]:
        grid = ignite(grid, x, y)

    print("--- GRID WITH FIRES STARTED ---")
    print_grid(grid)

    model = FireModel(grid, rng=rng)
    history = model.run(CONFIG["max_steps"])

    print("--- SIMULATION STEPS ---")
    for snapshot in history:
        print_grid(snapshot)
        time.sleep(CONFIG["frame_delay"])

    counts = model.datacollector.get_model_vars_dataframe()
    logger.info(f"Final counts:\n{counts.tail(1).to_string(index=False)}")

    path = export_csv(history, CONFIG["output_csv"])
    print(f"Simulation exported to: {path}")


if __name__ == "__main__":
    main()
