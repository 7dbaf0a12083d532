import math
import operator
import time
from typing import Optional

import numpy as np

from logging_utils import get_logger

logger = get_logger(__name__)

MULTIPLIER = 1220703125         # 5^13
CORRECTION = 2 * 1073741824     # 2^31
SCALE = np.float32(4.656613e-10)

# float32(y) округляется до 2^31 при y >= 2^31 - 64, произведение становится 1.0
_BELOW_ONE = np.nextafter(np.float32(1.0), np.float32(0.0))


def wrap_int32(value: int) -> int:
    """Two's-complement wraparound of an arbitrary int to signed 32 bits."""
    value &= 0xFFFFFFFF
    if value & 0x80000000:
        return value - (1 << 32)
    return value


def check_count(count, name="count") -> int:
    try:
        count = operator.index(count)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(count).__name__}") from None
    if count < 0:
        raise ValueError(f"{name} must be non-negative, got {count}")
    return count


class CustomRNG:
    # Реализован как LCG генератор без инкремента, модуль задается переполнением int32
    a: int      # множитель
    state: int  # текущее состояние (int32)

    def __init__(self, seed=None):
        self.a = MULTIPLIER
        if seed is None:
            seed = int(time.time())
            logger.debug("seeding CustomRNG from wall clock: %d", seed)
        self.state = wrap_int32(int(seed))

    def _next_state(self) -> int:
        y = wrap_int32(self.state * self.a)
        if y < 0:
            y = wrap_int32(y + CORRECTION)
        self.state = y
        return y

    def uniform_batch(self, count) -> np.ndarray:
        """Return `count` float32 values in [0, 1), continuing the stream."""
        count = check_count(count)
        r = np.empty(count, dtype=np.float32)
        for i in range(count):
            r[i] = self._next_state()
        r *= SCALE
        # состояние не трогаем, только выход прижимаем ниже 1.0
        np.minimum(r, _BELOW_ONE, out=r)
        return r

    def normal_batch(self, count, mean=0.0, stddev=1.0, uniforms_per_sample=12) -> np.ndarray:
        """
        Approximately normal values: each output is the centred and scaled sum
        of its own fresh batch of `uniforms_per_sample` uniforms.
        """
        count = check_count(count)
        k = check_count(uniforms_per_sample, "uniforms_per_sample")
        if k < 1:
            raise ValueError("uniforms_per_sample must be at least 1")

        k32 = np.float32(k)
        half = k32 / np.float32(2.0)
        scale = np.sqrt(np.float32(12.0) / k32)
        mean32 = np.float32(mean)
        stddev32 = np.float32(stddev)

        result = np.empty(count, dtype=np.float32)
        for i in range(count):
            # cumsum суммирует последовательно, как цикл в оригинале
            a = np.cumsum(self.uniform_batch(k), dtype=np.float32)[-1]
            result[i] = mean32 + stddev32 * ((a - half) * scale)
        return result

    def exponential_batch(self, count, lam) -> np.ndarray:
        count = check_count(count)
        if not lam > 0 or math.isinf(lam):
            raise ValueError(f"lam must be a positive finite number, got {lam}")

        uniforms = self.uniform_batch(count)
        with np.errstate(divide="ignore"):
            result = -np.log(uniforms) / np.float32(lam)

        zeros = int(np.count_nonzero(uniforms == 0.0))
        if zeros:
            logger.debug("%d zero uniform draws mapped to inf", zeros)
        return result

    def uniform(self) -> float:
        return float(self.uniform_batch(1)[0])

    def normal(self, mean=0.0, stddev=1.0, uniforms_per_sample=12) -> float:
        return float(self.normal_batch(1, mean, stddev, uniforms_per_sample)[0])

    def exponential(self, lam) -> float:
        return float(self.exponential_batch(1, lam)[0])


_default_rng: Optional[CustomRNG] = None


def get_default_rng() -> CustomRNG:
    """Process-wide engine, seeded from the clock on first use."""
    global _default_rng
    if _default_rng is None:
        _default_rng = CustomRNG()
    return _default_rng


def _resolve(rng):
    return get_default_rng() if rng is None else rng


def generate_uniform(count, rng: Optional[CustomRNG] = None) -> np.ndarray:
    return _resolve(rng).uniform_batch(count)


def generate_normal(count, mean=0.0, stddev=1.0, uniforms_per_sample=12,
                    rng: Optional[CustomRNG] = None) -> np.ndarray:
    return _resolve(rng).normal_batch(count, mean, stddev, uniforms_per_sample)


def generate_exponential(count, lam, rng: Optional[CustomRNG] = None) -> np.ndarray:
    return _resolve(rng).exponential_batch(count, lam)
