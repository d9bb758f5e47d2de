from argkit.cli import main


def test_sum_of_values(capsys):
    assert main(["--sum", "--mult", "1", "2", "3"]) == 0
    assert capsys.readouterr().out.strip() == "Result: 6"


def test_missing_flag_is_wrong_argument(capsys):
    assert main(["1", "2", "3", "--sum"]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Wrong argument\n")
    assert "Program accumulate arguments" in out


def test_missing_values_is_wrong_argument(capsys):
    assert main(["--sum", "--mult"]) == 1
    assert "Wrong argument" in capsys.readouterr().out


def test_help_exits_zero(capsys):
    assert main(["--help"]) == 0
    out = capsys.readouterr().out
    assert out.count("Program accumulate arguments") == 2
    assert "--N=<int>" in out


def test_short_help(capsys):
    assert main(["-h"]) == 0
    assert "--sum=<flag> add args" in capsys.readouterr().out


def test_unknown_option_fails(capsys):
    assert main(["--sum", "--mult", "--other", "1"]) == 1
    assert "Wrong argument" in capsys.readouterr().out