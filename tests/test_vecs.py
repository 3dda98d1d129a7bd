from exercisekit.lessons.vecs import array_and_vec, vec_loop, vec_map

EVENS = [2, 4, 6, 8, 10]


def test_array_and_vec_similarity():
    a, v = array_and_vec()
    assert list(a) == v
    assert v == [10, 20, 30, 40]


def test_vec_loop():
    assert vec_loop(EVENS) == [4, 8, 12, 16, 20]


def test_vec_map():
    assert vec_map(EVENS) == [4, 8, 12, 16, 20]


def test_vec_map_leaves_input_alone():
    values = list(EVENS)
    vec_map(values)
    vec_loop(values)
    assert values == EVENS


def test_empty_input():
    assert vec_loop([]) == []
    assert vec_map([]) == []