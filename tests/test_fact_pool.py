import random
from collections import Counter

from swipe_times.models import TOTAL_FACTS
from swipe_times.schemas import Fact
from swipe_times.services.fact_pool import FactPool, generate_facts


def test_generate_facts_covers_whole_table_once():
    facts = generate_facts()

    assert len(facts) == TOTAL_FACTS == 144
    assert len(set(facts)) == 144
    pairs = {(f.multiplicand, f.multiplier) for f in facts}
    assert pairs == {(a, b) for a in range(1, 13) for b in range(1, 13)}
    for fact in facts:
        assert fact.answer == fact.multiplicand * fact.multiplier
        assert fact.question == f"{fact.multiplicand} x {fact.multiplier}"


def test_fact_labels_are_unique():
    labels = [f.question for f in generate_facts()]
    assert len(labels) == len(set(labels))


def test_new_pool_is_empty_until_initialized():
    pool = FactPool()
    assert pool.size() == 0
    assert pool.draw_random() is None

    pool.initialize()
    assert pool.size() == 144


def test_initialize_resets_contents(pool):
    for _ in range(10):
        pool.draw_random()
    assert pool.size() == 134

    pool.initialize()
    assert pool.size() == 144


def test_draw_removes_the_drawn_fact(pool):
    fact = pool.draw_random()

    assert fact is not None
    assert pool.size() == 143
    assert fact not in pool


def test_draining_the_pool_yields_every_fact_then_none(pool):
    drawn = []
    while True:
        fact = pool.draw_random()
        if fact is None:
            break
        drawn.append(fact)

    assert len(drawn) == 144
    assert set(drawn) == set(generate_facts())
    assert pool.draw_random() is None
    assert len(pool) == 0


def test_reinsert_puts_fact_back(pool):
    fact = pool.draw_random()
    pool.reinsert(fact)

    assert pool.size() == 144
    assert fact in pool


def test_draw_order_is_reproducible_with_same_seed():
    first, second = FactPool(random.Random(7)), FactPool(random.Random(7))
    first.initialize()
    second.initialize()

    assert [first.draw_random() for _ in range(20)] == [second.draw_random() for _ in range(20)]


def test_draws_are_roughly_uniform():
    rng = random.Random(42)
    counts = Counter()
    trials = 6000
    pool = FactPool(rng)

    for _ in range(trials):
        pool._facts = [Fact(multiplicand=1, multiplier=b) for b in range(1, 4)]
        counts[pool.draw_random().multiplier] += 1

    # Expected 2000 each; allow a generous margin
    for multiplier in (1, 2, 3):
        assert 1700 < counts[multiplier] < 2300
