# ===== accounting_game/core/quiz/quiz.py =====

from typing import Optional, Sequence, Set

from accounting_game.core.quiz.practice_bank import PRACTICE, QuizItem
from accounting_game.core.simulation.navigation import Navigator
from accounting_game.logging_setup import get_logger

logger = get_logger("accounting_game.quiz")


class QuizSession:
    """
    Practice quiz progression and score.

    A question scores at most once: the first time it is answered
    correctly. Moving away and back lets the learner try again, but a
    question already in `scored` never adds to the score a second time.
    """

    def __init__(self, items: Optional[Sequence[QuizItem]] = None):
        self.items = tuple(items) if items is not None else PRACTICE
        self.nav = Navigator(len(self.items))
        self.selected: Optional[int] = None
        self.show = False
        self.score = 0
        self.scored: Set[int] = set()

    @property
    def index(self) -> int:
        return self.nav.current_index

    @property
    def current(self) -> QuizItem:
        return self.items[self.nav.current_index]

    @property
    def is_last(self) -> bool:
        return self.nav.is_last

    @property
    def is_first(self) -> bool:
        return self.nav.is_first

    def pick(self, option: int) -> bool:
        """
        Record a pick for the current question. Ignored while the answer
        is already showing. Returns whether the pick was correct.
        """
        if self.show:
            return self.selected == self.current.answer

        self.selected = option
        self.show = True
        correct = option == self.current.answer

        if correct and self.index not in self.scored:
            self.scored.add(self.index)
            self.score += 1

        logger.info("quiz q%s picked %s correct=%s score=%s",
                    self.index + 1, option, correct, self.score)
        return correct

    def _reset_question(self):
        self.selected = None
        self.show = False

    def next(self) -> int:
        self.nav.next()
        self._reset_question()
        return self.index

    def previous(self) -> int:
        self.nav.previous()
        self._reset_question()
        return self.index

    def reset(self):
        self.nav.reset()
        self._reset_question()
        self.score = 0
        self.scored = set()

    def progress_percent(self) -> int:
        # counts the question on screen as reached
        if not self.items:
            return 0
        return int(round(100 * (self.index + 1) / len(self.items)))

# ===== end quiz.py =====
