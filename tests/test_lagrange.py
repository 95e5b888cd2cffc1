import io

import pytest

from numethods.lagrange import MAX_POINTS, interpolate, main, relative_error


POINTS = [(1.0, 2.0), (2.5, -1.0), (4.0, 3.5), (7.0, 0.25)]


@pytest.mark.parametrize("px, py", POINTS)
def test_passes_through_nodes(px, py):
    assert interpolate(POINTS, px) == pytest.approx(py)


@pytest.mark.parametrize("x", [-2.0, 0.5, 3.3, 10.0])
def test_reproduces_quadratic(x):
    def f(t):
        return 3 * t * t - 2 * t + 1

    points = [(t, f(t)) for t in (0.0, 1.0, 2.0, 5.0)]
    assert interpolate(points, x) == pytest.approx(f(x))


def test_order_of_points_irrelevant():
    forward = interpolate(POINTS, 3.0)
    backward = interpolate(list(reversed(POINTS)), 3.0)
    assert forward == pytest.approx(backward)


def test_too_few_points():
    with pytest.raises(ValueError):
        interpolate([(1.0, 1.0)], 0.5)


def test_too_many_points():
    points = [(float(i), float(i)) for i in range(MAX_POINTS + 1)]
    with pytest.raises(ValueError):
        interpolate(points, 0.5)


def test_duplicate_nodes_rejected():
    with pytest.raises(ValueError):
        interpolate([(1.0, 1.0), (1.0, 2.0)], 0.5)


def test_relative_error_percent():
    assert relative_error(100.0, 90.0) == pytest.approx(10.0)


def test_relative_error_is_absolute():
    assert relative_error(100.0, 110.0) == pytest.approx(relative_error(100.0, 90.0))


def test_relative_error_zero_real():
    assert relative_error(0.0, 0.5) == pytest.approx(50.0)


def test_relative_error_exact():
    assert relative_error(7.0, 7.0) == 0.0


def test_main_single_run(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0 0\n1 1\n2 4\n1.5\n2.25\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "para 1.5000 es: 2.250000" in out
    assert "El porcentaje de error relativo es: 0.000000 %" in out


def test_main_reprompts_and_repeats(monkeypatch, capsys):
    data = "1\n2\n0 0\n1 1\n0.5\n0.5\n1\n2\n0 0\n2 2\n1\n1\n9\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Por favor, introduce un número de puntos entre 2 y 100" in out
    assert out.count("El valor obtenido en la interpolación") == 2