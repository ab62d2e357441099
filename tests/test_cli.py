import pytest

from zeroize.cli import main


def test_main_succeeds(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out.startswith("Welcome to Zeroize MVP!\n")


def test_main_prints_default_object_twice(capsys):
    main([])
    out = capsys.readouterr().out
    assert out.count("Object ID: 1234534\n") == 2
    assert out.count("Object Data: 123098\n") == 2


def test_main_prints_reinitialized_values(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert "Object1 reinitialized." in lines
    assert lines[-2:] == [
        "Object1 ID after reinitialization: 99887733",
        "Object1 Data after reinitialization: 11223344",
    ]


def test_main_separates_objects_with_blank_line(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert "" in lines
    blank = lines.index("")
    assert lines[blank + 1] == "Object ID: 1234534"


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2