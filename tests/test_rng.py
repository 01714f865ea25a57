from mazespinner.utils.rng import SeededRNG, resolve_rng


def test_same_seed_same_sequence():
    a = SeededRNG(99)
    b = SeededRNG(99)

    assert [a.randrange(1000) for _ in range(20)] == [b.randrange(1000) for _ in range(20)]


def test_set_seed_restarts_sequence():
    rng = SeededRNG(5)
    first = [rng.random() for _ in range(5)]

    rng.set_seed(5)

    assert [rng.random() for _ in range(5)] == first
    assert rng.seed == 5


def test_shuffle_and_choice_stay_within_input():
    rng = SeededRNG(1)
    items = list(range(10))

    rng.shuffle(items)

    assert sorted(items) == list(range(10))
    assert rng.choice(items) in items


def test_resolve_rng():
    rng = SeededRNG(3)
    assert resolve_rng(rng) is rng

    fresh = resolve_rng(None)
    assert isinstance(fresh, SeededRNG)
    assert fresh.seed is None
    assert resolve_rng(None) is not fresh
