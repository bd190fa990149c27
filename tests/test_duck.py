from tinyshell.programs.duck import CLEAR, WAVE, animate, render_duck


def test_render_duck_at_start_quacks():
    assert render_duck(0, 0).splitlines() == ["__(.)< QUACK", "\\___)   ", "~" * 18]


def test_render_duck_indented_without_quack():
    lines = render_duck(8, 1).splitlines()
    assert lines[0] == " " * 8 + "__(.)<"
    assert lines[1] == " " * 8 + "\\___)   "
    assert lines[2] == " " * 2 + WAVE


def test_render_duck_quacks_every_tenth():
    assert render_duck(3, 20).splitlines()[0].endswith("QUACK")
    assert not render_duck(3, 21).splitlines()[0].endswith("QUACK")


def test_animate_wraps_position(capsys):
    animate(width=4, frames=6, delay=0)
    frames = capsys.readouterr().out.split(CLEAR)[1:]
    assert len(frames) == 6
    assert frames[4] == render_duck(0, 4)
    assert frames[5] == render_duck(1, 5)
    assert frames[3] == render_duck(3, 3)