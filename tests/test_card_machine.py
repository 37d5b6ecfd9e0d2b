from swipe_times.models import CardPhase, Grade
from swipe_times.services.card_machine import CardStateMachine
from swipe_times.services.fact_pool import FactPool
from swipe_times.services.metrics import MetricsAccumulator


def test_starts_without_a_card(machine):
    assert machine.phase is CardPhase.NO_CARD
    assert machine.current_fact is None
    assert not machine.is_revealed


def test_load_next_shows_a_card(machine, pool):
    fact = machine.load_next()

    assert fact is not None
    assert machine.phase is CardPhase.CARD_SHOWN
    assert machine.current_fact == fact
    assert not machine.is_revealed
    assert pool.size() == 143


def test_reveal_only_from_card_shown(machine):
    assert machine.reveal() is False
    assert machine.phase is CardPhase.NO_CARD

    machine.load_next()
    assert machine.reveal() is True
    assert machine.phase is CardPhase.ANSWER_REVEALED


def test_reveal_twice_is_idempotent(machine, pool, metrics):
    machine.load_next()
    machine.reveal()
    snapshot = (machine.phase, machine.current_fact, pool.size(), metrics.total_graded)

    assert machine.reveal() is False
    assert (machine.phase, machine.current_fact, pool.size(), metrics.total_graded) == snapshot


def test_grade_before_reveal_is_ignored(machine, pool, metrics):
    fact = machine.load_next()

    assert machine.grade(Grade.CORRECT) is False
    assert machine.grade(Grade.INCORRECT) is False
    assert metrics.total_graded == 0
    assert metrics.correct_graded == 0
    assert machine.current_fact == fact
    assert machine.phase is CardPhase.CARD_SHOWN
    assert pool.size() == 143


def test_grade_without_card_is_ignored(machine, metrics):
    assert machine.grade(Grade.CORRECT) is False
    assert metrics.total_graded == 0


def test_correct_grade_retires_card(machine, pool, metrics):
    fact = machine.load_next()
    machine.reveal()

    assert machine.grade(Grade.CORRECT) is True
    assert metrics.total_graded == 1
    assert metrics.correct_graded == 1
    assert fact not in pool
    # next card already drawn
    assert machine.phase is CardPhase.CARD_SHOWN
    assert pool.size() == 142


def test_incorrect_grade_recycles_card(machine, pool, metrics):
    fact = machine.load_next()
    machine.reveal()

    assert machine.grade(Grade.INCORRECT) is True
    assert metrics.total_graded == 1
    assert metrics.correct_graded == 0
    assert pool.size() + 1 == 144
    assert fact in pool or machine.current_fact == fact


def test_empty_pool_finishes_and_notifies_once(metrics):
    calls = []
    pool = FactPool()
    machine = CardStateMachine(pool, metrics, on_finished=lambda: calls.append(True))

    assert machine.load_next() is None
    assert machine.is_finished
    assert machine.current_fact is None

    machine.load_next()
    assert calls == [True]
    assert machine.reveal() is False
    assert machine.grade(Grade.CORRECT) is False


def test_pool_size_moves_by_one_per_correct_grade(machine, pool):
    machine.load_next()
    sizes = [pool.size()]
    outcomes = [Grade.CORRECT, Grade.INCORRECT, Grade.CORRECT, Grade.INCORRECT, Grade.INCORRECT, Grade.CORRECT]

    for outcome in outcomes:
        machine.reveal()
        machine.grade(outcome)
        sizes.append(pool.size())

    for before, after, outcome in zip(sizes, sizes[1:], outcomes):
        expected = before - 1 if outcome is Grade.CORRECT else before
        assert after == expected


def test_drill_terminates_after_144_correct_grades(machine, metrics):
    machine.load_next()
    while not machine.is_finished:
        assert machine.reveal()
        assert machine.grade(Grade.CORRECT)

    assert metrics.total_graded == 144
    assert metrics.correct_graded == 144
