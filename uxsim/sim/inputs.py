"""Caller-side guards: turn raw UI selections into a SimulationInput.

The engine never fails on its own; everything that can be wrong about a
request (nothing selected, a bad split or visitor count) is rejected here.
"""

import logging
import math
from typing import Any, Optional

from uxsim.config import DEFAULT_SEED, MAX_VISITORS
from uxsim.data.experiments import get_test
from uxsim.data.segments import get_segment
from uxsim.sim.model import SimulationInput

logger = logging.getLogger(__name__)


class SimulationInputError(ValueError):
    pass


class MissingSelectionError(SimulationInputError):
    pass


class InvalidVisitorCountError(SimulationInputError):
    pass


class InvalidTrafficSplitError(SimulationInputError):
    pass


def parse_visitors(value: Any) -> int:
    """Accept ints, integral floats and digit strings; reject the rest."""
    if value is None or isinstance(value, bool):
        raise InvalidVisitorCountError("Visitor count is required")
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value.isdecimal():
            raise InvalidVisitorCountError(f"Visitor count must be a whole number, got {value!r}")
        try:
            value = int(value)
        except ValueError:
            # past the interpreter's int-string digit limit
            raise InvalidVisitorCountError(f"Visitor count must be between 0 and {MAX_VISITORS:,}")
    if isinstance(value, int):
        # range-check huge ints as-is; float() would overflow
        n = value
    else:
        try:
            fvalue = float(value)
        except (TypeError, ValueError, OverflowError):
            raise InvalidVisitorCountError(f"Visitor count must be a number, got {value!r}")
        if math.isnan(fvalue) or math.isinf(fvalue) or fvalue != int(fvalue):
            raise InvalidVisitorCountError(f"Visitor count must be a whole number, got {value!r}")
        n = int(fvalue)
    if n < 0 or n > MAX_VISITORS:
        raise InvalidVisitorCountError(f"Visitor count must be between 0 and {MAX_VISITORS:,}")
    return n


def build_simulation_input(
    category_key: Optional[str],
    test_key: Optional[str],
    segment_key: Optional[str],
    traffic_split: float,
    visitors: Any,
    seeded: bool = False,
    seed: Optional[int] = None,
) -> SimulationInput:
    if not category_key or not test_key:
        logger.warning("simulation requested without a category/test selection")
        raise MissingSelectionError("Select both a category and a test")
    try:
        test = get_test(category_key, test_key)
    except KeyError as e:
        raise MissingSelectionError(str(e).strip("'\"")) from e
    try:
        segment = get_segment(segment_key or "")
    except KeyError as e:
        raise MissingSelectionError(str(e).strip("'\"")) from e

    try:
        split = float(traffic_split)
    except (TypeError, ValueError):
        raise InvalidTrafficSplitError(f"Traffic split must be a number, got {traffic_split!r}")
    # NaN fails both comparisons
    if not 0 <= split <= 100:
        raise InvalidTrafficSplitError(f"Traffic split must be in [0, 100], got {traffic_split}")

    try:
        n = parse_visitors(visitors)
    except InvalidVisitorCountError:
        logger.warning("rejected visitor count %r", visitors)
        raise

    return SimulationInput(
        variant_a=test.variant_a,
        variant_b=test.variant_b,
        segment=segment,
        traffic_split_percent=split,
        total_visitors=n,
        seeded=bool(seeded),
        seed=DEFAULT_SEED if seed is None else int(seed),
        sample_size_needed=test.meta.sample_size_needed,
    )
