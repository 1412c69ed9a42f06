import io
from unittest import mock

from minedigger.assets import bomb_ascii, game_title, loading_animation, win_ascii


def test_bomb_contains_messages():
    buf = io.StringIO()
    bomb_ascii(buf)
    text = buf.getvalue()
    assert "BOOM!" in text
    assert "GAME OVER!" in text
    assert text.startswith("\n\n")
    assert text.endswith("\n\n")


def test_win_banner_has_five_art_lines():
    buf = io.StringIO()
    win_ascii(buf)
    text = buf.getvalue()
    art_lines = [line for line in text.split("\n") if line.strip()]
    assert len(art_lines) == 5
    assert all("**" in line for line in art_lines)


def test_title_contains_name_and_backslashes():
    buf = io.StringIO()
    game_title(buf)
    text = buf.getvalue()
    assert '"CODE MINE DIGGER"' in text
    assert "\\|_______|" in text


def test_default_stream_is_stdout(capsys):
    bomb_ascii()
    assert "BOOM!" in capsys.readouterr().out


def test_loading_animation_frames_cycle():
    buf = io.StringIO()
    loading_animation(buf, iterations=8, delay=0)
    frames = buf.getvalue().split("\r")
    assert frames[-1] == ""
    frames = frames[:-1]
    assert len(frames) == 8
    assert frames[0] == "Loading |"
    assert frames[1] == "Loading \\"
    assert frames[:4] == frames[4:]


def test_loading_animation_sleeps_each_step():
    buf = io.StringIO()
    with mock.patch("time.sleep") as sleeper:
        loading_animation(buf, iterations=3, delay=0.5)
    assert buf.getvalue() == "Loading |\rLoading \\\rLoading -\r"
    assert sleeper.call_count == 3
    assert all(call.args == (0.5,) for call in sleeper.call_args_list)


def test_loading_animation_zero_iterations():
    buf = io.StringIO()
    loading_animation(buf, iterations=0, delay=0)
    assert buf.getvalue() == ""