from typing import Dict, List, Sequence, Tuple

import numpy as np
from scipy import stats as scipy_stats


def bin_edges(bins: int, low=0.0, high=1.0) -> List[Tuple[float, float]]:
    width = (high - low) / bins
    return [(low + i * width, low + (i + 1) * width) for i in range(bins)]


def histogram(values, bins: int, low=0.0, high=1.0) -> List[int]:
    # значения вне [low, high) отбрасываются
    if bins < 1:
        raise ValueError("bins must be at least 1")
    if high <= low:
        raise ValueError("Upper bound must be greater than lower bound")
    width = (high - low) / bins
    hist = [0] * bins
    for value in np.asarray(values, dtype=np.float64).tolist():
        if value < low:
            continue
        index = int((value - low) / width)
        if index < bins:
            hist[index] += 1
    return hist


def chi_square(hist: Sequence[int], expected: float) -> float:
    # expected - ожидаемое число попаданий в каждый бин
    return sum((count - expected) ** 2 / expected for count in hist)


def chi_square_pvalue(chi2: float, bins: int) -> float:
    return float(scipy_stats.chi2.sf(chi2, bins - 1))


def autocorrelation(values) -> float:
    """Lag-1 autocorrelation: cov(x_i, x_{i+1}) / var(x)."""
    x = np.asarray(values, dtype=np.float64)
    n = len(x)
    if n < 2:
        raise ValueError("autocorrelation needs at least two values")

    mean = x.mean()
    deviations = x - mean
    var = np.sum(deviations ** 2) / n
    if var == 0:
        raise ValueError("autocorrelation is undefined for a constant sample")
    cov = np.sum(deviations[:-1] * deviations[1:]) / (n - 1)
    return float(cov / var)


def find_period(values) -> int:
    """
    Naive search for a repeating run: when a value reappears, check that the
    whole stretch since its previous occurrence repeats right after it.
    Returns -1 if no period fits inside the sample.
    """
    nums = np.asarray(values, dtype=np.float64).tolist()
    size = len(nums)
    seen: Dict[float, int] = {}
    for i, value in enumerate(nums):
        if value in seen:
            start = seen[value]
            length = i - start
            match = True
            for j in range(length):
                if i + j >= size or nums[start + j] != nums[i + j]:
                    match = False
                    break
            if match:
                return length
        seen[value] = i
    return -1


def describe(values) -> Dict[str, float]:
    x = np.asarray(values, dtype=np.float64)
    if len(x) == 0:
        raise ValueError("cannot describe an empty sample")
    return {
        "mean": float(x.mean()),
        "variance": float(x.var()),
        "min": float(x.min()),
        "max": float(x.max()),
    }


GOF_DISTRIBUTIONS = {"uniform", "norm", "expon"}


def goodness_of_fit(values, distribution: str, args=()) -> Dict[str, float]:
    """Kolmogorov-Smirnov test against a scipy.stats distribution."""
    if distribution not in GOF_DISTRIBUTIONS:
        raise ValueError(f"unsupported distribution: {distribution}")
    result = scipy_stats.kstest(np.asarray(values, dtype=np.float64), distribution, args=tuple(args))
    return {"statistic": float(result.statistic), "pvalue": float(result.pvalue)}


def extract_avg_chi_square(stats, source="custom"):
    return sum(stat["uniform"][source]["chi_square"] for stat in stats) / len(stats)
def extract_avg_autocorrelation(stats, source="custom"):
    return sum(stat["uniform"][source]["autocorrelation"] for stat in stats) / len(stats)
def extract_chi_square_pass_rate(stats, threshold, source="custom"):
    return sum(stat["uniform"][source]["chi_square"] < threshold for stat in stats) / len(stats)
def extract_autocorrelation_pass_rate(stats, source="custom"):
    return sum(stat["uniform"][source]["autocorrelation_ok"] for stat in stats) / len(stats)

def extract_uniform_metrics(stats, threshold):
    return {
        source: {
            'avg_chi_square': extract_avg_chi_square(stats, source),
            'avg_autocorrelation': extract_avg_autocorrelation(stats, source),
            'chi_square_pass_rate': extract_chi_square_pass_rate(stats, threshold, source),
            'autocorrelation_pass_rate': extract_autocorrelation_pass_rate(stats, source),
        }
        for source in ("custom", "reference")
    }

def extract_distribution_metrics(stats):
    return {
        kind: {
            'avg_mean': sum(stat[kind]["moments"]["mean"] for stat in stats) / len(stats),
            'avg_variance': sum(stat[kind]["moments"]["variance"] for stat in stats) / len(stats),
        }
        for kind in ("normal", "exponential")
    }
