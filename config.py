import copy
import logging
import math
from typing import Dict, Optional

from customrng import check_count


class ValidationConfig:
    SAMPLE_SIZE: int
    BINS: int
    PERIOD_SAMPLE_SIZE: int

    CHI_SQUARE_THRESHOLD: float
    AUTOCORRELATION_TOLERANCE: float

    SEED: Optional[int]            # None -> сид от текущего времени
    REFERENCE_SEED: Optional[int]  # None -> энтропия ОС

    LOG_LEVEL: int

    DEFAULT_DISTRIBUTIONS = {
        "uniform": {
            "low": 0.0,
            "high": 1.0
        },
        "normal": {
            "mean": 0.0,
            "stddev": 1.0,
            "uniforms_per_sample": 12,
            "low": -3.0,
            "high": 3.0
        },
        "exponential": {
            "lam": 1.0,
            "low": 0.0,
            "high": 5.0
        }
    }
    DISTRIBUTIONS: Dict

    def __init__(
            self,
            SAMPLE_SIZE = 10000,
            BINS = 10,
            PERIOD_SAMPLE_SIZE = 100000,
            CHI_SQUARE_THRESHOLD = 30.0,
            AUTOCORRELATION_TOLERANCE = 0.05,
            SEED = None,
            REFERENCE_SEED = None,
            LOG_LEVEL = logging.INFO,
            DISTRIBUTIONS = None,
        ):
        self.SAMPLE_SIZE = SAMPLE_SIZE
        self.BINS = BINS
        self.PERIOD_SAMPLE_SIZE = PERIOD_SAMPLE_SIZE
        self.CHI_SQUARE_THRESHOLD = CHI_SQUARE_THRESHOLD
        self.AUTOCORRELATION_TOLERANCE = AUTOCORRELATION_TOLERANCE
        self.SEED = SEED
        self.REFERENCE_SEED = REFERENCE_SEED
        self.LOG_LEVEL = LOG_LEVEL
        # копия, чтобы правки одного конфига не портили дефолты
        self.DISTRIBUTIONS = copy.deepcopy(
            DISTRIBUTIONS if DISTRIBUTIONS is not None else self.DEFAULT_DISTRIBUTIONS)

        self.validate()

    def validate(self):
        check_count(self.SAMPLE_SIZE, "SAMPLE_SIZE")
        check_count(self.BINS, "BINS")
        check_count(self.PERIOD_SAMPLE_SIZE, "PERIOD_SAMPLE_SIZE")
        if self.SAMPLE_SIZE < 2:
            raise ValueError("SAMPLE_SIZE must be at least 2")
        if self.BINS < 1:
            raise ValueError("BINS must be at least 1")
        if not self.AUTOCORRELATION_TOLERANCE > 0:
            raise ValueError("AUTOCORRELATION_TOLERANCE must be positive")
        for kind in ("uniform", "normal", "exponential"):
            if kind not in self.DISTRIBUTIONS:
                raise ValueError(f"missing distribution settings: {kind}")
            params = self.DISTRIBUTIONS[kind]
            if params["high"] <= params["low"]:
                raise ValueError(f"{kind}: upper bound must be greater than lower bound")
        # те же проверки, что и в CustomRNG
        k = check_count(self.DISTRIBUTIONS["normal"]["uniforms_per_sample"], "uniforms_per_sample")
        if k < 1:
            raise ValueError("uniforms_per_sample must be at least 1")
        lam = self.DISTRIBUTIONS["exponential"]["lam"]
        if not lam > 0 or not math.isfinite(lam):
            raise ValueError(f"lam must be a positive finite number, got {lam}")

    def get_expected_per_bin(self):
        return self.SAMPLE_SIZE / self.BINS

    def get_bin_width(self, kind):
        params = self.DISTRIBUTIONS[kind]
        return (params["high"] - params["low"]) / self.BINS
