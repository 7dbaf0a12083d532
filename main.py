"""
Console entry point: compares the custom LCG generator with the library
Mersenne Twister and prints histograms and statistics.

    python main.py
    python main.py --n 20000 --bins 20 --seed 1 --runs 5
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, TextIO

from config import ValidationConfig
from customrng import CustomRNG
from logging_utils import configure_root_logger
import statsprocessing as sp
from validation import RNGValidator


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, received {number}.")
    return number


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc
    if number < 0:
        raise argparse.ArgumentTypeError(f"Expected a non-negative integer, received {number}.")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate the custom LCG generator")
    parser.add_argument("--n", type=_positive_int, default=10000,
                        help="Sample size for histograms and statistics (default: 10000)")
    parser.add_argument("--bins", type=_positive_int, default=10,
                        help="Number of histogram bins (default: 10)")
    parser.add_argument("--period-size", type=_non_negative_int, default=100000,
                        help="Sample size for the period search (default: 100000)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the custom generator (default: current time)")
    parser.add_argument("--reference-seed", type=int, default=None,
                        help="Seed for the library generator (default: OS entropy)")
    parser.add_argument("--runs", type=_positive_int, default=1,
                        help="Number of validation passes (default: 1)")
    parser.add_argument("--verbose", action="store_true", help="Log harness progress to stderr")
    return parser


def _fmt(value) -> str:
    return f"{value:g}"


def _print_histogram(title: str, section: dict, out: TextIO) -> None:
    print(title, file=out)
    for i, ((low, high), count) in enumerate(zip(section["edges"], section["histogram"])):
        print(f"Бин {i} ({_fmt(low)}-{_fmt(high)}): {count}", file=out)
    print(f"Ширина бина: {_fmt(section['bin_width'])}", file=out)


def print_report(stats: dict, out: Optional[TextIO] = None) -> None:
    uniform = stats["uniform"]

    _print_histogram("Гистограмма (частоты в бинах) для нашего ГПСЧ:", uniform["custom"], out)
    print(file=out)
    _print_histogram("Гистограмма (частоты в бинах) для библиотечного:", uniform["reference"], out)

    print(file=out)
    print(f"Наш ГПСЧ: Хи-квадрат = {_fmt(uniform['custom']['chi_square'])}"
          f" (p = {_fmt(uniform['custom']['chi_square_pvalue'])})", file=out)
    print(f"Библиотечный: Хи-квадрат = {_fmt(uniform['reference']['chi_square'])}"
          f" (p = {_fmt(uniform['reference']['chi_square_pvalue'])})", file=out)

    print(file=out)
    print(f"Наш ГПСЧ: Автокорреляция (лаг 1) = {_fmt(uniform['custom']['autocorrelation'])}", file=out)
    print(f"Библиотечный: Автокорреляция (лаг 1) = {_fmt(uniform['reference']['autocorrelation'])}", file=out)

    period = stats["period"]
    print(file=out)
    if period["period"] != -1:
        print(f"Период нашего ГПСЧ: {period['period']}", file=out)
    else:
        print(f"Период нашего ГПСЧ: Не найден в {period['sample_size']} числах", file=out)

    normal = stats["normal"]
    print(file=out)
    _print_histogram(
        f"Гистограмма (частоты в бинах) для нашего нормального "
        f"N({_fmt(normal['params']['mean'])},{_fmt(normal['params']['stddev'])}):", normal, out)
    print(f"Среднее = {_fmt(normal['moments']['mean'])}, "
          f"дисперсия = {_fmt(normal['moments']['variance'])}", file=out)

    expo = stats["exponential"]
    print(file=out)
    _print_histogram(
        f"Гистограмма (частоты в бинах) для нашего экспоненциального "
        f"(lambda={_fmt(expo['params']['lam'])}):", expo, out)
    print(f"Среднее = {_fmt(expo['moments']['mean'])}, "
          f"дисперсия = {_fmt(expo['moments']['variance'])}", file=out)

    print(file=out)
    print(f"Автокорреляция (лаг 1) для нормального: {_fmt(normal['autocorrelation'])}", file=out)
    print(f"Автокорреляция (лаг 1) для экспоненциального: {_fmt(expo['autocorrelation'])}", file=out)
    print(f"Критерий Колмогорова для нормального: p = {_fmt(normal['goodness_of_fit']['pvalue'])}", file=out)
    print(f"Критерий Колмогорова для экспоненциального: p = {_fmt(expo['goodness_of_fit']['pvalue'])}",
          file=out)


def print_summary(all_stats: List[dict], config: ValidationConfig, out: Optional[TextIO] = None) -> None:
    uniform = sp.extract_uniform_metrics(all_stats, config.CHI_SQUARE_THRESHOLD)
    derived = sp.extract_distribution_metrics(all_stats)

    print(file=out)
    print(f"Итоги по {len(all_stats)} прогонам:", file=out)
    for source, label in (("custom", "Наш ГПСЧ"), ("reference", "Библиотечный")):
        metrics = uniform[source]
        print(f"{label}: средний хи-квадрат = {_fmt(metrics['avg_chi_square'])}, "
              f"доля прогонов с хи-квадрат < {_fmt(config.CHI_SQUARE_THRESHOLD)} = "
              f"{_fmt(metrics['chi_square_pass_rate'])}, "
              f"доля прогонов с |автокорреляцией| < {_fmt(config.AUTOCORRELATION_TOLERANCE)} = "
              f"{_fmt(metrics['autocorrelation_pass_rate'])}, "
              f"средняя автокорреляция = {_fmt(metrics['avg_autocorrelation'])}", file=out)
    for kind, label in (("normal", "Нормальное"), ("exponential", "Экспоненциальное")):
        print(f"{label}: среднее = {_fmt(derived[kind]['avg_mean'])}, "
              f"дисперсия = {_fmt(derived[kind]['avg_variance'])}", file=out)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ValidationConfig(
            SAMPLE_SIZE=args.n,
            BINS=args.bins,
            PERIOD_SAMPLE_SIZE=args.period_size,
            SEED=args.seed,
            REFERENCE_SEED=args.reference_seed,
            LOG_LEVEL=logging.INFO if args.verbose else logging.WARNING,
        )
    except (TypeError, ValueError) as exc:
        parser.error(str(exc))
    configure_root_logger(config.LOG_LEVEL)

    validator = RNGValidator(config, CustomRNG(config.SEED), logging_on=args.verbose)
    for _ in range(args.runs):
        print_report(validator.run())

    if args.runs > 1:
        print_summary(validator.get_stats(), config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
