"""
Practice quiz: scoring and progression.

INVARIANT: a question adds to the score at most once, and only for a
correct pick.
"""

import pytest

from accounting_game.core.quiz.practice_bank import PRACTICE, QuizItem
from accounting_game.core.quiz.quiz import QuizSession


def test_bank_shape():
    assert len(PRACTICE) == 5
    for item in PRACTICE:
        assert 0 <= item.answer < len(item.options)
        assert item.tag
    assert PRACTICE[0].correct_option == "Bank lender"


def test_answer_index_out_of_range_rejected():
    with pytest.raises(ValueError):
        QuizItem("q", ("a", "b"), 2, "e", "t")


def test_correct_pick_scores(quiz):
    assert quiz.pick(quiz.current.answer) is True
    assert quiz.score == 1
    assert quiz.show
    assert quiz.selected == quiz.current.answer


def test_incorrect_pick_never_scores(quiz):
    wrong = (quiz.current.answer + 1) % len(quiz.current.options)
    assert quiz.pick(wrong) is False
    assert quiz.score == 0


def test_pick_ignored_while_answer_showing(quiz):
    wrong = (quiz.current.answer + 1) % len(quiz.current.options)
    quiz.pick(wrong)
    quiz.pick(quiz.current.answer)
    assert quiz.score == 0
    assert quiz.selected == wrong


def test_revisit_does_not_double_count(quiz):
    quiz.pick(quiz.current.answer)
    quiz.next()
    quiz.previous()
    assert quiz.index == 0
    assert not quiz.show

    quiz.pick(quiz.current.answer)
    assert quiz.score == 1

    for _ in range(3):
        quiz.next()
        quiz.previous()
        quiz.pick(quiz.current.answer)
    assert quiz.score == 1


def test_retry_after_wrong_scores_once(quiz):
    wrong = (quiz.current.answer + 1) % len(quiz.current.options)
    quiz.pick(wrong)
    quiz.next()
    quiz.previous()
    quiz.pick(quiz.current.answer)
    assert quiz.score == 1


def test_perfect_run(quiz):
    for _ in range(len(quiz.items)):
        quiz.pick(quiz.current.answer)
        quiz.next()
    assert quiz.score == 5
    assert quiz.is_last


def test_navigation_clamps(quiz):
    assert quiz.previous() == 0
    for _ in range(10):
        quiz.next()
    assert quiz.index == 4
    assert quiz.next() == 4


def test_next_clears_selection(quiz):
    quiz.pick(0)
    quiz.next()
    assert quiz.selected is None
    assert quiz.show is False


def test_progress_counts_current_question(quiz):
    assert quiz.progress_percent() == 20
    quiz.next()
    assert quiz.progress_percent() == 40
    for _ in range(3):
        quiz.next()
    assert quiz.progress_percent() == 100


def test_reset(quiz):
    quiz.pick(quiz.current.answer)
    quiz.next()
    quiz.reset()
    assert (quiz.index, quiz.score, quiz.selected, quiz.show) == (0, 0, None, False)
    quiz.pick(quiz.current.answer)
    assert quiz.score == 1


def test_custom_items():
    items = [QuizItem("only", ("yes", "no"), 0, "because", "t")]
    q = QuizSession(items)
    assert q.is_first and q.is_last
    q.pick(0)
    assert q.score == 1
