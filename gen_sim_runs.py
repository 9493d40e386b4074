import logging
import os

from uxsim.config import DEFAULT_VISITORS, configure_logging
from uxsim.data.experiments import TEST_CATEGORIES
from uxsim.data.loader import outputs_to_frame
from uxsim.data.segments import CUSTOMER_SEGMENTS
from uxsim.sim.engine import simulate
from uxsim.sim.model import SimulationInput

SEEDS = [7, 42, 1234]
OUT = os.path.join("data", "sim_runs.csv")

configure_logging()
log = logging.getLogger("gen_sim_runs")

rows = []
for cat in TEST_CATEGORIES.values():
    for test in cat.tests.values():
        for seg in CUSTOMER_SEGMENTS.values():
            for seed in SEEDS:
                inp = SimulationInput(test.variant_a, test.variant_b, seg,
                                      traffic_split_percent=50, total_visitors=DEFAULT_VISITORS,
                                      seeded=True, seed=seed,
                                      sample_size_needed=test.meta.sample_size_needed)
                rows.append({"category": cat.key, "test": test.key, "segment": seg.key,
                             "seed": seed, "output": simulate(inp)})

df = outputs_to_frame(rows)
os.makedirs("data", exist_ok=True)
df.to_csv(OUT, index=False)
log.info("wrote %s (%d rows)", OUT, len(df))
