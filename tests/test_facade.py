import pytest

from patternkit.facade import Buffer, Console, Viewport


def test_default_console_layout():
    console = Console.default()
    assert len(console.buffers) == 1
    assert console.viewports[0].buffer is console.buffers[0]
    assert (console.buffers[0].width, console.buffers[0].height) == (200, 150)
    assert len(console.buffers[0]) == 200 * 150


def test_default_console_reads_empty_cell():
    assert Console.default().character_at(10) == "\0"


def test_console_out_of_range():
    console = Console.default()
    with pytest.raises(IndexError):
        console.character_at(200 * 150)
    with pytest.raises(IndexError):
        console.character_at(-1)


def test_viewport_offset_applies():
    buffer = Buffer(2, 2)
    viewport = Viewport(buffer, offset=3)
    assert viewport.character_at(0) == buffer.at(3)
    with pytest.raises(IndexError):
        viewport.character_at(1)


def test_buffer_bounds():
    buffer = Buffer(3, 1)
    assert buffer.at(2) == "\0"
    with pytest.raises(IndexError):
        buffer.at(3)