"""Seeded random stream tests."""

from __future__ import annotations

import pytest

from labyrinth.engine.generator.rng import (
    SeededRandom,
    char_code_sum,
    create_rng,
    hash_seed,
)


def test_same_seed_same_stream():
    a, b = create_rng("SEED_2025-08-11"), create_rng("SEED_2025-08-11")
    assert [a.random() for _ in range(50)] == [b.random() for _ in range(50)]


def test_different_seeds_diverge():
    a, b = create_rng("alpha"), create_rng("beta")
    assert [a.random() for _ in range(10)] != [b.random() for _ in range(10)]


def test_hash_is_32_bit():
    for seed in ("", "a", "SEED_2025-08-11", "ünïcødé", "🧩"):
        assert 0 <= hash_seed(seed) < 2**32


def test_random_in_unit_interval():
    rng = create_rng("range")
    assert all(0.0 <= rng.random() < 1.0 for _ in range(2000))


def test_randint_is_inclusive():
    rng = create_rng("dice")
    seen = {rng.randint(1, 3) for _ in range(300)}
    assert seen == {1, 2, 3}
    assert rng.randint(5, 5) == 5


def test_choice_and_shuffle():
    rng = create_rng("cards")
    items = list(range(10))
    rng.shuffle(items)
    assert sorted(items) == list(range(10))
    assert rng.choice(items) in items
    with pytest.raises(IndexError):
        rng.choice([])


def test_shuffle_is_deterministic():
    a, b = list(range(20)), list(range(20))
    create_rng("deck").shuffle(a)
    create_rng("deck").shuffle(b)
    assert a == b


def test_char_code_sum():
    assert char_code_sum("abc") == 294
    assert char_code_sum("") == 0


def test_unseeded_stream_works():
    rng = create_rng()
    assert isinstance(rng, SeededRandom)
    assert 0.0 <= rng.random() < 1.0


# -- cross-platform reference values ------------------------------------------


def test_daily_seed_reference_stream():
    assert hash_seed("SEED_2025-08-11") == 893503604
    rng = create_rng("SEED_2025-08-11")
    assert [rng.random() for _ in range(3)] == [
        0.7258855337277055,
        0.1913110965397209,
        0.4826328482013196,
    ]


def test_non_bmp_seed_hashes_surrogate_pairs():
    assert hash_seed("🧩x") == 605137111
