import io

import pytest

from snplabs.triangle import main, run

PROMPTS = "Seite a: Seite b: Seite c: "


def _run(text):
    out = io.StringIO()
    code = run(io.StringIO(text), out)
    return code, out.getvalue()


def _header():
    return "\n" + "Dreiecksbestimmung (CTRL-C: Abbruch)" + "\n\n"


def _round(prompts, sides, right_angled):
    kind = "ist rechtwinklig" if right_angled else "ist nicht rechtwinklig"
    a, b, c = sides
    return _header() + f"{prompts}-> Dreieck {a}-{b}-{c} {kind}\n" + "\n\n"


def _farewell():
    return _header() + "Seite a: " + "\n\n" + "bye bye" + "\n\n"


def _stimulus(triangles):
    return "".join(f"{a}\n{b}\n{c}\n" for a, b, c in triangles)


@pytest.mark.parametrize(
    "triangles, right_angled",
    [
        ([(3, 4, 5), (5, 4, 3), (3, 5, 4), (33, 44, 55)], True),
        ([(3, 4, 6), (5, 4, 4), (3, 5, 5), (33, 43, 55)], False),
    ],
)
def test_sessions(triangles, right_angled):
    expected = "".join(_round(PROMPTS, t, right_angled) for t in triangles)
    expected += _farewell()
    code, out = _run(_stimulus(triangles))
    assert code == 0
    assert out == expected


def test_error():
    prompts = "Seite a: " * 5 + "Seite b: " * 5 + "Seite c: " * 2
    expected = _round(prompts, (3, 4, 5), True) + _farewell()
    stimulus = (
        "abc\n\n12345678901\n1001\n3\n"
        "-4\n4x\n  \n4 4\n 4 \n"
        "x\n5\n"
    )
    code, out = _run(stimulus)
    assert code == 0
    assert out == expected


def test_empty_input_says_goodbye():
    code, out = _run("")
    assert code == 0
    assert out == _farewell()


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n4\n5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "-> Dreieck 3-4-5 ist rechtwinklig\n" in out
    assert out.endswith("\n\nbye bye\n\n")