"""Command line front end."""

import pytest

from crandom.cli import main


def run(capsys, *argv):
    code = main(list(argv))
    out = capsys.readouterr().out
    return code, out.split()


def test_sample_prints_requested_count(capsys):
    code, values = run(capsys, "sample", "equilikely", "1", "6", "-n", "20", "--seed", "3")
    assert code == 0
    assert len(values) == 20
    assert all(1 <= int(v) <= 6 for v in values)


def test_sample_is_reproducible(capsys):
    _, first = run(capsys, "sample", "normal", "0", "1", "-n", "10", "--seed", "42")
    _, second = run(capsys, "sample", "normal", "0", "1", "-n", "10", "--seed", "42")
    _, other = run(capsys, "sample", "normal", "0", "1", "-n", "10", "--seed-array", "42", "43")
    assert first == second
    assert first != other


def test_sample_accepts_negative_parameters(capsys):
    code, values = run(capsys, "sample", "uniform", "-5", "-2", "-n", "50", "--seed", "1")
    assert code == 0
    assert all(-5.0 <= float(v) < -2.0 for v in values)


def test_sample_with_pcg64_engine(capsys):
    code, values = run(capsys, "sample", "exponential", "2", "-n", "5", "--seed", "1", "--engine", "pcg64")
    assert code == 0
    assert all(float(v) > 0 for v in values)


def test_sample_summary(capsys):
    code, values = run(capsys, "sample", "erlang", "2", "1.5", "-n", "100", "--seed", "5", "--summary")
    assert code == 0
    assert len(values) == 100


@pytest.mark.parametrize("argv", [
    ["sample", "cauchy", "-n", "3", "--seed", "1"],
    ["sample", "bernoulli", "1.5", "--seed", "1"],
    ["sample", "normal", "0", "--seed", "1"],
    ["sample", "normal", "0", "1", "-n", "0", "--seed", "1"],
    ["-c", "/nonexistent/crandom.yaml", "sample", "normal", "0", "1"],
])
def test_errors_exit_with_one(capsys, argv):
    code, values = run(capsys, *argv)
    assert code == 1
    assert values == []


def test_histogram_rows(capsys):
    code, lines = run(
        capsys, "histogram", "--draws", "5000", "--bins", "10", "--seed", "1",
    )
    assert code == 0
    # two numbers per row
    rows = list(zip(lines[::2], lines[1::2]))
    edges = [float(edge) for edge, _ in rows]
    assert edges == sorted(edges)
    assert all(-5.0 <= e <= 5.0 for e in edges)
    assert all(float(d) >= 0 for _, d in rows)


def test_histogram_of_other_distribution(capsys):
    code, lines = run(
        capsys, "histogram", "exponential", "1", "--lower", "0", "--upper", "4",
        "--bins", "8", "--draws", "2000", "--seed", "2",
    )
    assert code == 0
    assert float(lines[0]) == 0.0
