"""Incentive Generator - randomized per-round incentive and target demand.

Invariants:
    - generate_incentive(0) == 0 without consuming randomness
    - Result always lies in [-|magnitude|, |magnitude|]
    - Two draws r1, r2; r1 wins only when |r1| > |r2| (ties go to r2)
    - compute_demand adds the incentive only from incentive_start_round onwards

Design Decisions:
    - Random source injected (anything with randint): tests pin the draws
"""

import random
from typing import Protocol


class RandomSource(Protocol):
    """Subset of random.Random used here."""
    def randint(self, a: int, b: int) -> int: ...


def generate_incentive(magnitude: int, rng: RandomSource = random) -> int:
    """Draw two values in [-|m|, |m|] and keep the one farther from zero."""
    if magnitude == 0:
        return 0
    bound = abs(magnitude)
    r1 = rng.randint(-bound, bound)
    r2 = rng.randint(-bound, bound)
    if abs(r1) > abs(r2):
        return r1
    return r2


def compute_demand(
    baseline: int,
    magnitude: int,
    round_number: int,
    incentive_start_round: int,
    rng: RandomSource = random,
) -> int:
    """Target demand for one member in one round."""
    if round_number >= incentive_start_round:
        return baseline + generate_incentive(magnitude, rng)
    return baseline
