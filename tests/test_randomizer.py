from casetree.randomizer import Randomizer


def test_same_seed_same_sequence():
    first = Randomizer(123)
    second = Randomizer(123)
    assert [first.next_int(0, 1000) for _ in range(5)] == [second.next_int(0, 1000) for _ in range(5)]


def test_next_int_in_range():
    randomizer = Randomizer(5)
    values = [randomizer.next_int(3, 6) for _ in range(50)]
    assert all(3 <= v < 6 for v in values)


def test_next_float_in_unit_interval():
    randomizer = Randomizer(5)
    assert all(0.0 <= randomizer.next_float() < 1.0 for _ in range(50))


def test_shuffle_keeps_items():
    items = list(range(20))
    shuffled = Randomizer(9).shuffle(items)
    assert sorted(shuffled) == items
    assert items == list(range(20))


def test_shuffle_empty():
    assert Randomizer(1).shuffle([]) == []


def test_initial_seed_restarts_stream():
    Randomizer.set_initial_seed(2024)
    assert Randomizer.get_initial_seed() == 2024
    first = [Randomizer.random_seed() for _ in range(3)]
    Randomizer.set_initial_seed(2024)
    assert [Randomizer.random_seed() for _ in range(3)] == first


def test_default_seed_drawn_from_stream():
    Randomizer.set_initial_seed(77)
    expected = Randomizer.random_seed()
    Randomizer.set_initial_seed(77)
    assert Randomizer().seed == expected
