import logging

import pytest

from rangesum.__main__ import main, parse_arguments


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_csv(tmp_path):
    path = tmp_path / "sample.csv"
    path.write_text("1,2,5,11\n5,9,11,15\n2,17,8,-10\n", encoding="utf-8")
    return path


def test_defaults():
    args = parse_arguments([])
    assert args.csv == "sample.csv"
    assert args.rect == [1, 1, 3, 2]
    assert args.method == "all"
    assert args.log_file is None


def test_both_methods(sample_csv, capsys):
    assert main([str(sample_csv)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "[RowSum method] Sum: 50",
        "---------------------",
        "[Allsum method] Sum: 50",
    ]


@pytest.mark.parametrize("method, label", [("rowsum", "RowSum"), ("allsum", "Allsum")])
def test_single_method(sample_csv, capsys, method, label):
    assert main([str(sample_csv), "--method", method, "--rect", "0", "0", "3", "2"]) == 0
    assert capsys.readouterr().out == f"[{label} method] Sum: 76\n"


def test_out_of_range_query(sample_csv, capsys):
    assert main([str(sample_csv), "--rect", "0", "0", "4", "0"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "OutOfRange" in captured.err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.csv")]) == 1
    assert "SourceReadError" in capsys.readouterr().err


def test_log_file(sample_csv, tmp_path, capsys):
    log_file = tmp_path / "rangesum.log"
    assert main([str(sample_csv), "--log-file", str(log_file), "--method", "allsum"]) == 0
    capsys.readouterr()

    # Debug messages always reach the file
    assert "Built SummedAreaMatrix with 3 rows and 4 columns" in log_file.read_text()


def test_bad_method():
    with pytest.raises(SystemExit) as excinfo:
        main(["--method", "colsum"])
    assert excinfo.value.code == 2
