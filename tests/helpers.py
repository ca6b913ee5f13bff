"""
helpers.py - learner-typing helpers shared by the session and app tests
"""

from typing import Dict, Mapping

from accounting_game.core.ledger.accounts import ACCOUNT_KEYS
from accounting_game.core.simulation.session import GameSession


def as_text(vector: Mapping[str, int]) -> Dict[str, str]:
    """Render a vector the way a learner would type it (zeros left blank)."""
    return {k: (str(vector[k]) if vector[k] else "") for k in ACCOUNT_KEYS}


def solve_current(session: GameSession):
    """Type the answer key for the current transaction and submit it."""
    session.set_entries(as_text(session.current_transaction.expected))
    return session.submit()
