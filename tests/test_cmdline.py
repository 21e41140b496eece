import pytest

from bcfileio.cmdline import OptionScanner, getopt


def test_separate_options_and_argument():
    opts, rest = getopt(["-a", "-b", "val", "file"], "ab:")
    assert opts == [("a", None), ("b", "val")]
    assert rest == ["file"]


def test_clustered_flags():
    opts, rest = getopt(["-ab", "x"], "ab")
    assert opts == [("a", None), ("b", None)]
    assert rest == ["x"]


def test_attached_argument():
    opts, rest = getopt(["-bvalue"], "b:")
    assert opts == [("b", "value")]
    assert rest == []


def test_cluster_ending_in_argument_option():
    opts, rest = getopt(["-abvalue", "tail"], "ab:")
    assert opts == [("a", None), ("b", "value")]
    assert rest == ["tail"]


def test_slash_prefix():
    opts, rest = getopt(["/a", "/b", "v"], "ab:")
    assert opts == [("a", None), ("b", "v")]
    assert rest == []


@pytest.mark.parametrize("marker", ["-", "--"])
def test_end_markers_are_consumed(marker):
    opts, rest = getopt(["-a", marker, "-b"], "ab")
    assert opts == [("a", None)]
    assert rest == ["-b"]


def test_stops_at_first_non_option():
    opts, rest = getopt(["file", "-a"], "a")
    assert opts == []
    assert rest == ["file", "-a"]


def test_empty_argument_stops_scanning():
    opts, rest = getopt(["", "-a"], "a")
    assert opts == []
    assert rest == ["", "-a"]


def test_empty_argument_list():
    assert getopt([], "a") == ([], [])


def test_unknown_option_reported():
    assert getopt(["-z"], "a") == ([("?", None)], [])


def test_unknown_option_letter_when_not_reporting():
    assert getopt(["-z"], "a", report_errors=False) == ([("z", None)], [])


def test_unknown_option_discards_rest_of_cluster():
    opts, rest = getopt(["-za", "x"], "a")
    assert opts == [("?", None)]
    assert rest == ["x"]


def test_missing_argument():
    assert getopt(["-b"], "b:") == ([("?", None)], [])
    assert getopt(["-b"], "b:", report_errors=False) == ([("b", None)], [])


def test_colon_option():
    assert getopt(["-:"], "a") == ([("?", None)], [])
    assert getopt(["-:"], "a", report_errors=False) == ([(":", None)], [])


def test_colon_inside_cluster_continues():
    opts, _ = getopt(["-a:a"], "a")
    assert opts == [("a", None), ("?", None), ("a", None)]


def test_scanner_iteration_and_remaining():
    scanner = OptionScanner(["-c", "-d", "in", "out"], "cd:")
    seen = list(scanner)
    assert seen == [("c", None), ("d", "in")]
    assert scanner.remaining() == ["out"]
    assert list(scanner) == []
    assert scanner.remaining() == ["out"]


def test_argument_may_look_like_option():
    opts, rest = getopt(["-b", "-a", "x"], "ab:")
    assert opts == [("b", "-a")]
    assert rest == ["x"]