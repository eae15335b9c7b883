from tinysearch.counters import Counters


def test_add_starts_at_one_and_increments():
    c = Counters()
    assert c.add(4) == 1
    assert c.add(4) == 2
    assert c.get(4) == 2


def test_absent_key_reads_zero_without_being_stored():
    c = Counters()
    assert c.get(7) == 0
    assert 7 not in c
    assert len(c) == 0


def test_negative_inputs_are_ignored():
    c = Counters()
    assert c.add(-1) == 0
    c.set(-2, 5)
    c.set(3, -1)
    assert len(c) == 0


def test_set_overwrites():
    c = Counters({1: 5})
    c.set(1, 2)
    assert c.get(1) == 2


def test_copy_is_independent():
    c = Counters({1: 1, 2: 2})
    dup = c.copy()
    dup.add(1)
    dup.discard(2)
    assert c == {1: 1, 2: 2}
    assert dup == {1: 2}


def test_items_visits_every_pair():
    c = Counters({3: 1, 1: 4, 2: 2})
    assert sorted(c.items()) == [(1, 4), (2, 2), (3, 1)]
    assert sorted(c) == [1, 2, 3]
