import pytest

from parexp.cli import FRACTION_MATRIX, INTEGER_MATRIX, main
from parexp.taylor import block_taylor_sum, taylor_sum


def _run(capsys, argv):
    assert main(argv) == 0
    return capsys.readouterr().out


def _result_block(out, header):
    lines = out.splitlines()
    start = lines.index(header)
    return lines[start + 1 : start + 4]


def test_serial_report_header(capsys):
    out = _run(capsys, ["--terms", "30"])
    lines = out.splitlines()
    assert lines[0] == "Matrix size: 3x3"
    assert lines[1] == "Number of terms: 30 (+ Identity)"
    assert lines[2] == "A (Initial) (3x3):"
    assert "Calculation finished." in lines
    assert any(line.startswith("Execution time: ") for line in lines)


def test_serial_result_matches_taylor_sum(capsys):
    out = _run(capsys, ["--method", "serial", "--terms", "30"])
    expected = taylor_sum(INTEGER_MATRIX, 30).format("e^A (Result)")
    assert out.endswith(expected)


def test_strided_reports_processor_count(capsys):
    out = _run(capsys, ["--method", "strided", "--workers", "4", "--terms", "30"])
    assert "Number of processors: 4\n" in out


def test_strided_agrees_with_serial(capsys):
    serial = _run(capsys, ["--method", "serial", "--terms", "40"])
    strided = _run(capsys, ["--method", "strided", "--workers", "3", "--terms", "40"])
    header = "e^A (Result) (3x3):"
    assert _result_block(serial, header) == _result_block(strided, header)


def test_block_report(capsys):
    out = _run(capsys, ["--method", "block", "--workers", "2", "--terms", "50"])
    assert out.startswith(FRACTION_MATRIX.format_plain("Matrix A"))
    expected = block_taylor_sum(FRACTION_MATRIX, 2, 50).format_plain(
        "Result e^A (Taylor approximation)"
    )
    assert expected in out
    assert out.splitlines()[-1].startswith("Time taken: ")


def test_block_matches_serial_series(capsys):
    out = _run(capsys, ["--method", "block", "--workers", "3", "--terms", "40"])
    serial = taylor_sum(FRACTION_MATRIX, 40).format_plain(
        "Result e^A (Taylor approximation)"
    )
    assert serial in out


@pytest.mark.parametrize(
    "argv",
    [
        ["--workers", "0"],
        ["--terms", "-1"],
        ["--method", "parallel"],
    ],
)
def test_invalid_arguments_exit(argv):
    with pytest.raises(SystemExit):
        main(argv)