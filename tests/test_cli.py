from philosophers.cli import main


def test_wrong_number_of_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Error: Wrong number of arguments.\n"


def test_invalid_arguments(capsys):
    assert main(["5", "abc", "200", "200"]) == 1
    assert capsys.readouterr().out == "Error: Invalid arguments.\n"


def test_zero_philosophers_exits_silently(capsys):
    assert main(["0", "100", "100", "100"]) == 1
    assert capsys.readouterr().out == ""


def test_single_philosopher_run(capsys):
    assert main(["1", "50", "10", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith(" 1 is thinking")
    assert lines[-1].endswith(" 1 died")


def test_meal_limited_run(capsys):
    assert main(["3", "800", "20", "20", "2"]) == 0
    output = capsys.readouterr().out
    assert "died" not in output
    assert "is eating" in output