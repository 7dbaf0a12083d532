from typing import Dict, List, Optional

import numpy as np

from config import ValidationConfig
from customrng import CustomRNG
from logging_utils import get_logger
import statsprocessing as sp

logger = get_logger(__name__)


def make_reference_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Mersenne Twister reference; seed None draws from OS entropy."""
    return np.random.Generator(np.random.MT19937(seed))


class RNGValidator:
    def __init__(self, config: ValidationConfig, rng: CustomRNG,
                 reference: Optional[np.random.Generator] = None, logging_on=False):
        self.config = config
        self.rng = rng
        self.reference = reference if reference is not None else make_reference_rng(config.REFERENCE_SEED)
        self.logging_on = logging_on

        self.stats: List[Dict] = []

    def run(self):
        self.current_stats = {
            "sample_size": self.config.SAMPLE_SIZE,
            "bins": self.config.BINS,
        }

        self.uniform_phase()
        self.period_phase()
        self.normal_phase()
        self.exponential_phase()

        self.stats.append(self.current_stats)
        return self.current_stats

    def log(self, message):
        if self.logging_on:
            logger.info(message)

    def get_stats(self):
        return self.stats

    def _uniform_summary(self, values):
        params = self.config.DISTRIBUTIONS["uniform"]
        hist = sp.histogram(values, self.config.BINS, params["low"], params["high"])
        chi2 = sp.chi_square(hist, self.config.get_expected_per_bin())
        ac = sp.autocorrelation(values)
        return {
            "histogram": hist,
            "edges": sp.bin_edges(self.config.BINS, params["low"], params["high"]),
            "bin_width": self.config.get_bin_width("uniform"),
            "chi_square": chi2,
            "chi_square_pvalue": sp.chi_square_pvalue(chi2, self.config.BINS),
            "autocorrelation": ac,
            "autocorrelation_ok": abs(ac) < self.config.AUTOCORRELATION_TOLERANCE,
        }

    def uniform_phase(self):
        self.log("Начинается проверка равномерного распределения")
        n = self.config.SAMPLE_SIZE

        custom = self.rng.uniform_batch(n).astype(np.float64)
        reference = self.reference.random(n)

        self.current_stats["uniform"] = {
            "custom": self._uniform_summary(custom),
            "reference": self._uniform_summary(reference),
        }
        self.log(f"Хи-квадрат: наш {self.current_stats['uniform']['custom']['chi_square']:.4f}, "
                 f"библиотечный {self.current_stats['uniform']['reference']['chi_square']:.4f}")
        self.log("Завершена проверка равномерного распределения")

    def period_phase(self):
        size = self.config.PERIOD_SAMPLE_SIZE
        self.log(f"Поиск периода на {size} числах")
        period = sp.find_period(self.rng.uniform_batch(size))
        self.current_stats["period"] = {"sample_size": size, "period": period}
        self.log(f"Период: {period}")

    def _derived_summary(self, values, kind, gof_distribution, gof_args):
        params = self.config.DISTRIBUTIONS[kind]
        return {
            "histogram": sp.histogram(values, self.config.BINS, params["low"], params["high"]),
            "edges": sp.bin_edges(self.config.BINS, params["low"], params["high"]),
            "bin_width": self.config.get_bin_width(kind),
            "moments": sp.describe(values),
            "goodness_of_fit": sp.goodness_of_fit(values, gof_distribution, gof_args),
            "autocorrelation": sp.autocorrelation(values),
        }

    def normal_phase(self):
        self.log("Начинается проверка нормального распределения")
        params = self.config.DISTRIBUTIONS["normal"]
        values = self.rng.normal_batch(
            self.config.SAMPLE_SIZE,
            mean=params["mean"],
            stddev=params["stddev"],
            uniforms_per_sample=params["uniforms_per_sample"])
        self.current_stats["normal"] = self._derived_summary(
            values, "normal", "norm", (params["mean"], params["stddev"]))
        self.current_stats["normal"]["params"] = dict(params)
        self.log("Завершена проверка нормального распределения")

    def exponential_phase(self):
        self.log("Начинается проверка экспоненциального распределения")
        params = self.config.DISTRIBUTIONS["exponential"]
        values = self.rng.exponential_batch(self.config.SAMPLE_SIZE, params["lam"])
        self.current_stats["exponential"] = self._derived_summary(
            values, "exponential", "expon", (0.0, 1.0 / params["lam"]))
        self.current_stats["exponential"]["params"] = dict(params)
        self.log("Завершена проверка экспоненциального распределения")
