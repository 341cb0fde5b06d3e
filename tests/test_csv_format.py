import pytest

from d2modgen.csv_format import Table, read_csv, write_csv


def test_round_trip_crlf():
    text = "name\tvalue\r\nfoo\t1\r\nbar\t\r\n"
    table = read_csv(text)
    assert table.columns == ["name", "value"]
    assert table.rows == [["foo", "1"], ["bar", ""]]
    assert write_csv(table) == text


def test_empty_input_raises():
    with pytest.raises(ValueError):
        read_csv("")


def test_mixed_line_endings():
    table = read_csv("a\nb\rc")
    assert table.columns == ["a"]
    assert table.rows == [["b"], ["c"]]


def test_consecutive_cr_gives_empty_row():
    table = read_csv("h\r\r")
    assert table.columns == ["h"]
    assert table.rows == [[""]]


def test_lf_then_cr_are_two_breaks():
    table = read_csv("h\n\rx")
    assert table.rows == [[""], ["x"]]


def test_only_newline():
    table = read_csv("\n")
    assert table.columns == [""]
    assert table.rows == []


def test_empty_cells_preserved():
    table = read_csv("\t\r\n")
    assert table.columns == ["", ""]


def test_rows_may_have_differing_width():
    text = "a\tb\r\n1\r\n1\t2\t3\r\n"
    table = read_csv(text)
    assert [len(row) for row in table.rows] == [1, 3]
    assert write_csv(table) == text


def test_write_constructed_table():
    table = Table(columns=["x", "y"], rows=[["1", "2"]])
    assert read_csv(write_csv(table)) == table


def test_write_header_only():
    table = Table(columns=["only"])
    assert read_csv(write_csv(table)) == table