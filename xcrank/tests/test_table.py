import io

from xcrank.models import DisplayRow
from xcrank.table import format_table, render_table

ROWS = [
    DisplayRow(1, "Bo Ray", "95.00", "Sky Ramp", "Field", "1700002"),
    DisplayRow(2, "Ann Li", "80.50", "Sky Ramp", "Valley", "1700001"),
]


def test_ascii_table_has_header_and_rows_in_order():
    out = format_table(ROWS, ascii=True)
    lines = out.splitlines()
    assert lines[0].split() == ["#", "NAME", "XC-POINTS", "TAKEOFF", "LANDING", "FLIGHT", "ID"]
    assert lines[1].split() == ["1", "Bo", "Ray", "95.00", "Sky", "Ramp", "Field", "1700002"]
    assert lines[2].split()[:3] == ["2", "Ann", "Li"]
    assert "\x1b[" not in out


def test_ascii_table_has_no_borders():
    out = format_table(ROWS, ascii=True)
    assert "|" not in out
    assert "+-" not in out
    assert "---" not in out


def test_columns_are_aligned():
    lines = format_table(ROWS, ascii=True).splitlines()
    starts = {line.index("Field") if "Field" in line else line.index("Valley") for line in lines[1:]}
    assert len(starts) == 1


def test_color_table_styles_header_and_points():
    out = format_table(ROWS)
    assert "\x1b[" in out
    # white on red for the points header, bold bright red for the points
    assert "\x1b[37m\x1b[41mXC-POINTS" in out
    assert "\x1b[91m\x1b[1m95.00" in out


def test_compact_table_drops_flight_id():
    out = format_table(ROWS, ascii=True, compact=True)
    assert "FLIGHT ID" not in out
    assert "1700002" not in out


def test_empty_rows_render_header_only():
    out = format_table([], ascii=True)
    assert out.split() == ["#", "NAME", "XC-POINTS", "TAKEOFF", "LANDING", "FLIGHT", "ID"]


def test_render_table_writes_to_stream():
    buf = io.StringIO()
    render_table(ROWS, ascii=True, out=buf)
    assert buf.getvalue().endswith("\n")
    assert "Bo Ray" in buf.getvalue()
