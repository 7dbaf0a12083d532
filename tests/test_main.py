"""CLI tests: report text and argument errors."""

import pytest

import main


ARGS = ["--n", "1000", "--period-size", "2000", "--seed", "1", "--reference-seed", "2"]


def test_report_sections(capsys):
    assert main.main(ARGS) == 0
    out = capsys.readouterr().out

    assert "Гистограмма (частоты в бинах) для нашего ГПСЧ:" in out
    assert "Гистограмма (частоты в бинах) для библиотечного:" in out
    assert "Бин 0 (0-0.1):" in out
    assert "Бин 9 (0.9-1):" in out
    assert "Ширина бина: 0.1" in out
    assert "Ширина бина: 0.6" in out
    assert "Наш ГПСЧ: Хи-квадрат = " in out
    assert "Наш ГПСЧ: Автокорреляция (лаг 1) = " in out
    assert "Период нашего ГПСЧ: Не найден в 2000 числах" in out
    assert "нормального N(0,1):" in out
    assert "Бин 0 (-3--2.4):" in out
    assert "экспоненциального (lambda=1):" in out
    assert "Автокорреляция (лаг 1) для экспоненциального:" in out
    assert "Итоги по" not in out


def test_report_is_reproducible_with_seeds(capsys):
    main.main(ARGS)
    first = capsys.readouterr().out
    main.main(ARGS)
    second = capsys.readouterr().out

    assert first == second


def test_multiple_runs_print_summary(capsys):
    assert main.main(ARGS + ["--runs", "2"]) == 0
    out = capsys.readouterr().out

    assert out.count("Гистограмма (частоты в бинах) для нашего ГПСЧ:") == 2
    assert "Итоги по 2 прогонам:" in out
    assert "доля прогонов с |автокорреляцией| < 0.05 = " in out
    assert "Экспоненциальное: среднее = " in out


@pytest.mark.parametrize(
    "argv",
    [
        ["--n", "0"],
        ["--n", "abc"],
        ["--n", "1"],
        ["--bins", "-2"],
        ["--period-size", "-1"],
    ],
)
def test_bad_arguments_exit_with_usage_error(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main(argv)

    assert excinfo.value.code == 2
    assert capsys.readouterr().err
