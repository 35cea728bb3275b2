import io

from models import Point, Region
from output import format_region, write_csv, write_regions
from progress import ProgressRenderer


def _regions():
    a = Region.seed(Point(10, 10, 200), 5)
    a.glue(Point(12, 11, 100))
    b = Region.seed(Point(3, 4, 60), 5)
    return [a, b]


def test_format_region():
    assert format_region(Region.seed(Point(9, 9, 200), 5)) == "[ 9 : 9 : 200 ]"


def test_write_regions_in_order():
    buf = io.StringIO()
    write_regions(_regions(), buf)

    assert buf.getvalue() == "[ 11 : 10 : 150 ]\n[ 3 : 4 : 60 ]\n"


def test_write_csv():
    buf = io.StringIO()
    write_csv(_regions(), buf)

    lines = buf.getvalue().splitlines()
    assert lines[0] == "Region,X,Y,V,Left,Top,Width,Height,Points"
    assert lines[1] == "1,11,10,150,10,10,3,2,1"
    assert lines[2] == "2,3,4,60,3,4,1,1,1"


def test_progress_renderer_writes_to_stream():
    buf = io.StringIO()
    renderer = ProgressRenderer(enable=True, width=10, stream=buf)

    renderer.update(5, 10, 1)
    renderer.update(10, 10, 2)

    out = buf.getvalue()
    assert "[#####-----] 5/10 regions:1" in out
    assert "[##########] 10/10 regions:2" in out
    assert out.endswith("\n")


def test_progress_renderer_disabled():
    buf = io.StringIO()
    ProgressRenderer(enable=False, stream=buf).update(1, 2, 1)
    assert buf.getvalue() == ""


def test_log_handler_ends_open_bar_line():
    import logging

    from progress import ProgressLogHandler

    buf = io.StringIO()
    renderer = ProgressRenderer(enable=True, width=4, stream=buf)
    handler = ProgressLogHandler(renderer)
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))

    renderer.update(1, 2, 1)
    handler.emit(logging.makeLogRecord({"levelname": "INFO", "msg": "seeded"}))
    renderer.update(2, 2, 1)

    lines = buf.getvalue().split("\n")
    assert lines[0].startswith("\r[##--] 1/2 regions:1 elapsed:")
    assert lines[1] == "INFO seeded"
    assert lines[2].startswith("\r[####] 2/2 regions:1")
    assert renderer.open_line is False
