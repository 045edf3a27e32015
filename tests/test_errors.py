import pytest

from linc.errors import LincError, die


def test_lincerror_message_is_its_text():
    err = LincError("! something went wrong")
    assert str(err) == "! something went wrong"


def test_die_prints_message_to_stderr_and_exits_with_one(capsys):
    with pytest.raises(SystemExit) as info:
        die("! fatal problem")
    assert info.value.code == 1
    captured = capsys.readouterr()
    assert captured.err == "! fatal problem\n"
    assert captured.out == ""


def test_die_accepts_an_error_instance(capsys):
    with pytest.raises(SystemExit) as info:
        die(LincError("! bad input"))
    assert info.value.code == 1
    assert capsys.readouterr().err == "! bad input\n"