"""
conftest.py - Shared pytest fixtures for the accounting game tests
"""

import pytest

from accounting_game.core.bookkeeping.transaction_bank import TXN_BANK
from accounting_game.core.ledger.accounts import empty_vector
from accounting_game.core.quiz.quiz import QuizSession
from accounting_game.core.simulation.session import GameSession


@pytest.fixture
def bank():
    return TXN_BANK


@pytest.fixture
def zero_ledger():
    return empty_vector()


@pytest.fixture
def session():
    return GameSession()


@pytest.fixture
def quiz():
    return QuizSession()
