import io

import pytest

from sigconv.app import App, main
from sigconv.fomot import ConvFOMOT
from sigconv.fourbthreet import Conv4B3T
from sigconv.keys import Key, KeyType
from sigconv.settings import Settings


def make_app(keys, stdin_text="", settings=None):
    key_iter = iter(keys)
    stdout = io.StringIO()
    app = App(
        settings=settings if settings is not None else Settings(),
        stdin=io.StringIO(stdin_text),
        stdout=stdout,
        key_reader=lambda: next(key_iter),
    )
    return app, stdout


UP = Key(KeyType.ARROW_UP)
DOWN = Key(KeyType.ARROW_DOWN)
ENTER = Key(KeyType.ENTER)
ESCAPE = Key(KeyType.ESCAPE)
ANY = Key(KeyType.CHARACTER, "x")


def test_switch_output_toggles():
    app, _ = make_app([])
    assert app.settings.in_file is False
    app.switch_output()
    assert app.settings.in_file is True
    app.switch_output()
    assert app.settings.in_file is False


def test_main_menu_enter_returns_first_position():
    app, out = make_app([ENTER])
    assert app.main_menu() == 0
    assert "Convert to 4B3T" in out.getvalue()


def test_main_menu_arrow_down_moves_selection():
    app, _ = make_app([DOWN, ENTER])
    assert app.main_menu() == 1
    assert app.msg_to_display == "Convert signal to FOMOT"


def test_main_menu_arrow_up_wraps_to_exit():
    app, _ = make_app([UP, ENTER])
    assert app.main_menu() == 5
    assert app.msg_to_display == "Exit from programm"


def test_main_menu_down_wraps_to_first():
    app, _ = make_app([DOWN] * 6 + [ENTER])
    assert app.main_menu() == 0


def test_main_menu_escape_exits():
    app, _ = make_app([ESCAPE])
    assert app.main_menu() == 5


def test_main_menu_message_for_paths():
    app, _ = make_app([DOWN, DOWN, DOWN, ENTER])
    app.main_menu()
    assert app.msg_to_display == "Enter path for input file. Now: " + app.settings.path_in


def test_set_in_path_existing(tmp_path):
    source = tmp_path / "signal.txt"
    source.write_text("0000")
    app, _ = make_app([], stdin_text=f"{source}\n")
    app.set_in_path()
    assert app.settings.path_in == str(source)
    assert app.msg_to_display == "Path added successful"


def test_set_in_path_missing(tmp_path):
    app, _ = make_app([], stdin_text=f"{tmp_path / 'missing.txt'}\n")
    before = app.settings.path_in
    app.set_in_path()
    assert app.settings.path_in == before
    assert app.msg_to_display == "Path not exist"


def test_set_out_path_creates_directory(tmp_path):
    target = tmp_path / "sub" / "out.txt"
    app, _ = make_app([], stdin_text=f"{target}\n")
    app.set_out_path()
    assert app.settings.path_out == str(target)
    assert target.parent.is_dir()
    assert app.msg_to_display == "Path added successful"


def test_convert_4b3t_console_writes_file(tmp_path):
    out_path = tmp_path / "out.txt"
    settings = Settings(path_out=str(out_path))
    app, _ = make_app([ANY], stdin_text="0000\n1\n", settings=settings)
    app.convert_4b3t()
    assert app.settings.start_mode == 1
    expected = Conv4B3T().render(Conv4B3T().convert(1, [0, 0, 0, 0]))
    assert out_path.read_text() == expected


def test_convert_4b3t_rejects_out_of_range_start(tmp_path):
    settings = Settings(path_out=str(tmp_path / "out.txt"))
    app, _ = make_app([ANY], stdin_text="0000\n7\n", settings=settings)
    app.convert_4b3t()
    assert app.settings.start_mode == 0


def test_convert_4b3t_in_file_mode(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("1111 0000")
    out_path = tmp_path / "out.txt"
    settings = Settings(path_in=str(source), path_out=str(out_path), in_file=True)
    app, out = make_app([ANY], settings=settings)
    app.convert_4b3t()
    expected = Conv4B3T().render(Conv4B3T().convert(0, [15, 0, 0, 0]))
    assert out_path.read_text() == expected
    assert "Start sum: " in out.getvalue()


def test_convert_fomot_console_prints(tmp_path):
    out_path = tmp_path / "out.txt"
    settings = Settings(path_out=str(out_path))
    app, out = make_app([ANY], stdin_text="0101\n2\n", settings=settings)
    app.convert_fomot()
    assert app.settings.start_mode == 2
    assert "FOMOT convert print: " in out.getvalue()
    assert not out_path.exists()


def test_convert_fomot_in_file_mode(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("0011")
    out_path = tmp_path / "out.txt"
    settings = Settings(path_in=str(source), path_out=str(out_path), in_file=True)
    app, _ = make_app([ANY], stdin_text="-1\n", settings=settings)
    app.convert_fomot()
    assert app.settings.start_mode == -1
    expected = ConvFOMOT().render(ConvFOMOT().convert(-1, [3, 0, 0, 0]))
    assert out_path.read_text() == expected


def test_convert_reports_invalid_signal(tmp_path):
    out_path = tmp_path / "out.txt"
    settings = Settings(path_out=str(out_path))
    app, out = make_app([ANY], stdin_text="01x1\n0\n", settings=settings)
    app.convert_4b3t()
    assert "Error" in out.getvalue()
    assert not out_path.exists()


def test_run_switches_then_exits():
    app, _ = make_app([DOWN, DOWN, ENTER, UP, ENTER])
    app.run()
    assert app.settings.in_file is True
    assert app.msg_to_display == "Exit from programm"


def test_run_exits_on_escape():
    app, _ = make_app([ESCAPE])
    app.run()
    assert app.msg_to_display == "Convert signal to 4B3T"


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2