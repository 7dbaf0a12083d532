import pytest

from config import ValidationConfig


def test_defaults():
    config = ValidationConfig()

    assert config.SAMPLE_SIZE == 10000
    assert config.BINS == 10
    assert config.PERIOD_SAMPLE_SIZE == 100000
    assert config.get_expected_per_bin() == 1000
    assert config.get_bin_width("normal") == pytest.approx(0.6)
    assert config.get_bin_width("exponential") == pytest.approx(0.5)


def test_distributions_are_copied():
    config = ValidationConfig()
    config.DISTRIBUTIONS["normal"]["mean"] = 42.0

    assert ValidationConfig.DEFAULT_DISTRIBUTIONS["normal"]["mean"] == 0.0
    assert ValidationConfig().DISTRIBUTIONS["normal"]["mean"] == 0.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"SAMPLE_SIZE": 1},
        {"BINS": 0},
        {"PERIOD_SAMPLE_SIZE": -1},
    ],
)
def test_rejects_bad_sizes(overrides):
    with pytest.raises(ValueError):
        ValidationConfig(**overrides)


def _distributions(**changes):
    distributions = {
        "uniform": {"low": 0.0, "high": 1.0},
        "normal": {"mean": 0.0, "stddev": 1.0, "uniforms_per_sample": 12, "low": -3.0, "high": 3.0},
        "exponential": {"lam": 1.0, "low": 0.0, "high": 5.0},
    }
    for kind, params in changes.items():
        distributions[kind].update(params)
    return distributions


@pytest.mark.parametrize(
    "changes",
    [
        {"normal": {"uniforms_per_sample": 0}},
        {"exponential": {"lam": 0.0}},
        {"uniform": {"high": 0.0}},
    ],
)
def test_rejects_bad_distributions(changes):
    with pytest.raises(ValueError):
        ValidationConfig(DISTRIBUTIONS=_distributions(**changes))


def test_rejects_missing_distribution():
    distributions = _distributions()
    del distributions["exponential"]

    with pytest.raises(ValueError):
        ValidationConfig(DISTRIBUTIONS=distributions)


@pytest.mark.parametrize("lam", [float("inf"), float("nan"), -0.5])
def test_rejects_rate_the_generator_would_reject(lam):
    with pytest.raises(ValueError):
        ValidationConfig(DISTRIBUTIONS=_distributions(exponential={"lam": lam}))


def test_rejects_fractional_uniform_count():
    with pytest.raises(TypeError):
        ValidationConfig(DISTRIBUTIONS=_distributions(normal={"uniforms_per_sample": 2.5}))


@pytest.mark.parametrize("overrides", [{"SAMPLE_SIZE": 100.5}, {"BINS": 2.0}])
def test_rejects_fractional_sizes(overrides):
    with pytest.raises(TypeError):
        ValidationConfig(**overrides)


def test_rejects_non_positive_autocorrelation_tolerance():
    with pytest.raises(ValueError):
        ValidationConfig(AUTOCORRELATION_TOLERANCE=0.0)
