import io

import pytest

from numethods.least_squares import format_system, main, normal_equations

XS = [0.5, 1.0, 2.0, 3.5, 4.0]
YS = [1.2, 0.7, 2.9, 4.1, 5.5]


@pytest.mark.parametrize("degree", [2, 3])
def test_normal_equations_structure(degree):
    rows = normal_equations(XS, YS, degree)
    assert len(rows) == degree + 1
    assert all(len(row) == degree + 2 for row in rows)
    assert rows[0][0] == len(XS)
    assert rows[0][1] == pytest.approx(sum(XS))
    assert rows[0][-1] == pytest.approx(sum(YS))
    assert rows[1][-1] == pytest.approx(sum(x * y for x, y in zip(XS, YS)))
    for i in range(degree):
        for j in range(degree):
            assert rows[i][j + 1] == rows[i + 1][j]


@pytest.mark.parametrize(
    "xs, ys, degree",
    [(XS, YS, 1), (XS, YS, 4), (XS, YS, 0), ([1.0, 2.0], [1.0], 2)],
)
def test_invalid_arguments(xs, ys, degree):
    with pytest.raises(ValueError):
        normal_equations(xs, ys, degree)


def test_format_system_first_field_is_count():
    lines = format_system(normal_equations([0.0, 1.0, 2.0], [1.0, 1.0, 1.0], 2)).splitlines()
    assert len(lines) == 3
    assert lines[0] == "\t3\t3.000000\t5.000000\t3.000000"
    assert all(line.startswith("\t") and line.count("\t") == 4 for line in lines)


@pytest.mark.parametrize(
    "stdin, present, absent",
    [
        ("3\n3\n0 1 2\n1 1 1\n", "\t3\t3.000000\t5.000000\t9.000000\t3.000000\n", None),
        ("2\n5\n1 2\n3 4\n", "Y(2)=", "\t2\t"),
    ],
)
def test_main(monkeypatch, capsys, stdin, present, absent):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert present in out
    if absent is not None:
        assert absent not in out