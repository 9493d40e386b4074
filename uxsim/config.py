import logging
import os

# Simulation defaults (UI controls start here)
DEFAULT_TRAFFIC_SPLIT = 50
DEFAULT_VISITORS = 1000
DEFAULT_SEED = 42
MAX_VISITORS = 1_000_000

# Power targets for the required-sample-size readout
ALPHA = 0.05
POWER = 0.80

HOST = os.environ.get("UXSIM_HOST", "0.0.0.0")
PORT = int(os.environ.get("UXSIM_PORT", "7860"))
LOG_LEVEL = os.environ.get("UXSIM_LOG_LEVEL", "INFO").upper()


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
