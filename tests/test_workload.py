import pytest

from tiersched.errors import InvalidPriority, MalformedWorkloadRecord
from tiersched.workload import (
    ProcessDescriptor,
    Rand48,
    dump_workload,
    format_line,
    generate_workload,
    load_workload,
    parse_line,
    read_workload,
)


def test_parse_line_with_trailing_separator():
    assert parse_line("30, 0, 1, 45, 7, 33, ") == ProcessDescriptor(30, 0, 1, (45, 7, 33))
    assert parse_line("31,1,3,40") == ProcessDescriptor(31, 1, 3, (40,))


@pytest.mark.parametrize("line", ["30, 0, 1", "30, 0, x, 40", "30, -1, 1, 40", "30, 0, 1, 40, 0", "30, 0, 1,, 40"])
def test_parse_line_malformed(line):
    with pytest.raises(MalformedWorkloadRecord):
        parse_line(line, 4)


def test_malformed_record_reports_line():
    with pytest.raises(MalformedWorkloadRecord, match="line 4"):
        parse_line("30, 0", 4)


def test_parse_line_invalid_priority():
    with pytest.raises(InvalidPriority) as e:
        parse_line("30, 0, 4, 40")
    assert e.value.pid == 30
    assert e.value.value == 4


def test_read_workload_skips_blank_lines():
    workload = read_workload(["30, 0, 1, 45, 7, 33, \n", "\n", "31, 1, 2, 50\n"])
    assert [d.pid for d in workload] == [30, 31]


def test_dump_and_load(tmp_path):
    workload = [ProcessDescriptor(30, 0, 1, (45, 7, 33)), ProcessDescriptor(31, 1, 3, (50, 9))]
    path = tmp_path / "processes.txt"
    dump_workload(workload, str(path))
    assert path.read_text().splitlines()[0] == format_line(workload[0]) == "30, 0, 1, 45, 7, 33"
    assert load_workload(str(path)) == workload


def test_rand48_is_reproducible():
    a, b = Rand48(0), Rand48(0)
    a.srand(42)
    b.srand(42)
    assert [a.next() for _ in range(5)] == [b.next() for _ in range(5)]
    assert all(0 <= a.drand() < 1 for _ in range(100))
    assert all(3 <= a.randrange(3, 6) < 6 for _ in range(100))


def test_generated_workload_respects_bounds():
    rand_obj = Rand48(0)
    rand_obj.srand(11)
    workload = generate_workload(rand_obj)

    assert 50 <= len(workload) < 100
    assert [d.pid for d in workload] == list(range(30, 30 + len(workload)))
    assert [d.arrival for d in workload] == list(range(len(workload)))
    for d in workload:
        assert d.priority in (1, 2, 3)
        assert 1 <= len(d.bursts) < 8
        assert all(30 <= b < 60 for b in d.bursts[0::2])
        assert all(5 <= b < 10 for b in d.bursts[1::2])
