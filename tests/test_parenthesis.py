import io

import pytest

from edakit.parenthesis import main, validate_parentheses


@pytest.mark.parametrize(
    "text, expected",
    [
        ("(())", (True, 3)),
        ("())", (False, 2)),
        ("((", (False, 1)),
        ("", (True, -1)),
        ("a(b)c", (True, 4)),
        (")(", (False, 0)),
        ("(a+b)*(c", (False, 7)),
    ],
)
def test_validate(text, expected):
    assert tuple(validate_parentheses(text)) == expected


def test_main_valid(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(1+(2))\n"))
    assert main([]) == 0
    assert "Expresión Correcta" in capsys.readouterr().out


def test_main_invalid(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(()\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Expresión Inválida" in out
    assert "Pos error:  2" in out