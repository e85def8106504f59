import pytest

from tsptour import (DistanceMatrix, InvalidCityCountError, MalformedMatrixError, NO_EDGE,
                     load_matrix, parse_matrix)


def test_parse_infers_size():
    D = parse_matrix("0 10\n10 0\n")
    assert len(D) == 2
    assert D.cost(0, 1) == 10


def test_parse_is_whitespace_agnostic():
    D = parse_matrix("0 1 2\n3\t0 4 5 6\n\n 0", n=3)
    assert D.to_rows() == [[0, 1, 2], [3, 0, 4], [5, 6, 0]]


def test_too_few_values():
    with pytest.raises(MalformedMatrixError, match="found only 3"):
        parse_matrix("0 1 1", n=2)


def test_too_many_values():
    with pytest.raises(MalformedMatrixError):
        parse_matrix("0 1 1 0 7", n=2)


def test_not_square_without_size():
    with pytest.raises(MalformedMatrixError):
        parse_matrix("0 1 1")
    with pytest.raises(MalformedMatrixError):
        parse_matrix("")


@pytest.mark.parametrize("text", ["0 a 1 0", "0 1.5 1 0"])
def test_non_integer_value(text):
    with pytest.raises(MalformedMatrixError):
        parse_matrix(text, n=2)


def test_negative_value():
    with pytest.raises(MalformedMatrixError, match="negative"):
        parse_matrix("0 -1 1 0", n=2)
    with pytest.raises(MalformedMatrixError, match="negative"):
        DistanceMatrix([[0, 1], [-3, 0]])


@pytest.mark.parametrize("value", [1.9, 0.4, "3"])
def test_non_integer_cost_is_not_truncated(value):
    with pytest.raises(MalformedMatrixError, match="non-integer"):
        DistanceMatrix([[0, value, 2], [value, 0, 2], [2, 2, 0]])


def test_integral_floats_are_accepted():
    D = DistanceMatrix([[0, 2.0], [3.0, 0]])
    assert D.cost(0, 1) == 2 and isinstance(D.cost(0, 1), int)


@pytest.mark.parametrize("n", [0, -2])
def test_invalid_city_count(n):
    with pytest.raises(InvalidCityCountError):
        parse_matrix("0", n=n)


def test_empty_matrix():
    with pytest.raises(InvalidCityCountError):
        DistanceMatrix([])


def test_ragged_rows():
    with pytest.raises(MalformedMatrixError):
        DistanceMatrix([[0, 1], [1]])


def test_zero_means_no_edge_by_default():
    D = parse_matrix("0 0 3\n0 0 4\n3 4 0")
    assert D.cost(0, 1) is NO_EDGE
    assert not D.has_edge(1, 0)
    assert D.has_edge(0, 2)


def test_zero_cost_edges_can_be_kept():
    D = parse_matrix("0 0 3\n0 0 4\n3 4 0", missing=None)
    assert D.cost(0, 1) == 0
    assert D.has_edge(1, 0)


def test_diagonal_is_ignored():
    D = parse_matrix("7 1\n1 9")
    assert D.cost(0, 0) == 0
    assert D.cost(1, 1) == 0


def test_symmetry(four_cities):
    assert four_cities.is_symmetric()
    assert not DistanceMatrix([[0, 1], [2, 0]]).is_symmetric()


def test_tour_cost(four_cities):
    assert four_cities.tour_cost([0, 1, 3, 2, 0]) == 80
    assert parse_matrix("0 0 1\n0 0 1\n1 1 0").tour_cost([0, 1, 2, 0]) is None


def test_rows_are_read_only(four_cities):
    row = four_cities[0]
    assert row == (0, 10, 15, 20)
    with pytest.raises(TypeError):
        row[1] = 3


def test_load_matrix(tmp_path):
    path = tmp_path / "cities.txt"
    path.write_text("0 10 15 20\n10 0 35 25\n15 35 0 30\n20 25 30 0\n")
    D = load_matrix(str(path), n=4)
    assert D.cost(2, 1) == 35


def test_load_missing_file(tmp_path):
    with pytest.raises(MalformedMatrixError, match="cannot read"):
        load_matrix(str(tmp_path / "nope.txt"), n=3)


def test_load_binary_file(tmp_path):
    path = tmp_path / "cities.bin"
    path.write_bytes(b"0 1\xff\xfe 1 0\n")
    with pytest.raises(MalformedMatrixError, match="not a text file"):
        load_matrix(str(path), n=2)
