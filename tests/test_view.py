"""Test frame rendering."""

from giga.constants import Ansi
from giga.model import CursorPosition
from giga.view import FrameBuffer, ScreenRenderer
from giga.winsize import WindowSize


def split_rows(frame: bytes, rows: int) -> list:
    """Strip the frame prologue/epilogue and return the row segments."""
    prologue = Ansi.HIDE_CURSOR + Ansi.CURSOR_HOME
    assert frame.startswith(prologue)
    body = frame[len(prologue):]
    body = body[:body.rindex(b"\x1b[", 0, body.rindex(Ansi.SHOW_CURSOR))]
    segments = body.split(Ansi.ROW_SEPARATOR)
    assert len(segments) == rows
    return segments


def test_frame_layout(make_terminal):
    renderer = ScreenRenderer(make_terminal(), banner="hi")
    frame = renderer.build_frame(WindowSize(rows=3, cols=10), CursorPosition(1, 4),
                                 lambda row: b"row%d" % row)
    assert frame == (
        b"\x1b[?25l\x1b[H"
        b"row0\x1b[K\r\n"
        b"row1\x1b[K\r\n"
        b"row2\x1b[K"
        b"\x1b[2;5H\x1b[?25h"
    )


def test_placeholder_rows_and_banner(make_terminal):
    renderer = ScreenRenderer(make_terminal(), banner="Hello")
    frame = renderer.build_frame(WindowSize(rows=6, cols=11), CursorPosition())
    segments = split_rows(frame, 6)
    # Banner on row rows // 3, centered with the placeholder in the padding
    assert segments[2] == b"~  Hello" + Ansi.ERASE_LINE_END
    for row in (0, 1, 3, 4, 5):
        assert segments[row] == b"~" + Ansi.ERASE_LINE_END


def test_banner_truncated_to_width(make_terminal):
    renderer = ScreenRenderer(make_terminal(), banner="Giga editor")
    frame = renderer.build_frame(WindowSize(rows=3, cols=4), CursorPosition())
    assert split_rows(frame, 3)[1] == b"Giga" + Ansi.ERASE_LINE_END


def test_supplied_content_replaces_banner(make_terminal):
    renderer = ScreenRenderer(make_terminal(), banner="Hello")
    frame = renderer.build_frame(WindowSize(rows=3, cols=20), CursorPosition(),
                                 lambda row: b"text")
    assert b"Hello" not in frame


def test_rows_truncated_to_width(make_terminal):
    """Each row segment holds at most cols bytes before its escape sequence."""
    renderer = ScreenRenderer(make_terminal(), banner="a very long banner message")
    bounds = WindowSize(rows=24, cols=7)
    frame = renderer.build_frame(bounds, CursorPosition(),
                                 lambda row: b"x" * (row * 2) if row % 2 else None)
    segments = split_rows(frame, bounds.rows)
    for segment in segments:
        assert segment.endswith(Ansi.ERASE_LINE_END)
        assert len(segment[:-len(Ansi.ERASE_LINE_END)]) <= bounds.cols


def test_cursor_sent_one_based(make_terminal):
    renderer = ScreenRenderer(make_terminal(), banner="")
    frame = renderer.build_frame(WindowSize(rows=24, cols=80), CursorPosition(23, 79))
    assert frame.endswith(b"\x1b[24;80H\x1b[?25h")


def test_render_frame_is_single_write(make_terminal):
    terminal = make_terminal()
    renderer = ScreenRenderer(terminal, banner="x")
    bounds = WindowSize(rows=4, cols=8)
    renderer.render_frame(bounds, CursorPosition())
    assert terminal.writes == [renderer.build_frame(bounds, CursorPosition())]


def test_default_banner_has_version(make_terminal):
    renderer = ScreenRenderer(make_terminal())
    assert renderer.banner.startswith(b"Giga editor -- version ")


def test_frame_buffer():
    buf = FrameBuffer()
    buf.append(b"ab")
    buf.append(b"c")
    assert len(buf) == 3
    assert bytes(buf) == b"abc"
