"""
Uniform random sources for the Markov chain sampler.

A random source is any zero-argument callable returning a float in [0, 1).
The chain draws exactly once per sampled token, so a scripted source gives
full control over a walk in tests.
"""

import random

import numpy as np

# Process-global, non-cryptographic PRNG
default_uniform_source = random.random


def seeded_uniform_source(seed):
    """Return a private `random.Random` stream seeded with `seed`."""
    return random.Random(seed).random


def numpy_uniform_source(seed=None):
    """Return a draw function backed by a numpy `Generator`."""
    rng = np.random.default_rng(seed)

    def draw():
        return float(rng.random())

    return draw


class ScriptedUniformSource:
    """
    Replays a fixed sequence of draws.

    Args:
        values (iterable of float): Draws to hand out, each in [0, 1).
        cycle (bool): Start over from the first value once exhausted instead
                      of raising `IndexError`.
    """

    def __init__(self, values, cycle=False):
        self.values = [float(v) for v in values]
        for value in self.values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Scripted draw {value} is outside [0, 1)")
        if cycle and not self.values:
            raise ValueError("A cycling source needs at least one value")
        self.cycle = cycle
        self.calls = 0

    def __call__(self):
        if self.calls >= len(self.values):
            if not self.cycle:
                raise IndexError(
                    f"Scripted random source exhausted after {self.calls} draws")
            value = self.values[self.calls % len(self.values)]
        else:
            value = self.values[self.calls]
        self.calls += 1
        return value

    @property
    def remaining(self):
        if self.cycle:
            return None
        return len(self.values) - self.calls
