import math
from typing import Callable, Optional

import numpy as np

RandFn = Callable[[], float]

_MASK32 = 0xFFFFFFFF


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


class Xorshift32:
    """
    Seeded xorshift32 generator (shifts 13/17/5).
    Calling the instance returns the next uniform in [0, 1).
    A zero seed stays at zero forever, so every draw is 0.0.
    """

    def __init__(self, seed: int = 42):
        self.state = int(seed) & _MASK32

    def next_u32(self) -> int:
        x = self.state
        x ^= (x << 13) & _MASK32
        x ^= x >> 17
        x ^= (x << 5) & _MASK32
        self.state = x
        return x

    def __call__(self) -> float:
        return self.next_u32() / 4294967296.0


def unseeded_rng() -> RandFn:
    gen = np.random.default_rng()
    return lambda: float(gen.random())


def make_rng(seeded: bool, seed: Optional[int] = None) -> RandFn:
    if seeded:
        return Xorshift32(42 if seed is None else seed)
    return unseeded_rng()


def normal_from_uniform(u1: float, u2: float) -> float:
    # Box-Muller, cosine branch only
    r = math.sqrt(-2.0 * math.log(max(u1, 1e-12)))
    theta = 2.0 * math.pi * u2
    return r * math.cos(theta)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def binomial_sample_approx(n: int, p: float, rand: RandFn) -> int:
    """
    Normal approximation to Binomial(n, p): N(np, np(1-p)).
    Always consumes two uniforms, result clamped to [0, n].
    """
    n = max(0, int(n))
    p = clamp(float(p), 0.0, 1.0)
    mean = n * p
    std = math.sqrt(max(n * p * (1 - p), 1e-9))
    z = normal_from_uniform(rand(), rand())
    sample = _round_half_up(mean + std * z)
    return int(clamp(sample, 0, n))
