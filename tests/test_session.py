"""
Equation Lab session: submit / check / navigation / reset scenarios.
"""

import pytest

from accounting_game.core.bookkeeping.transaction_bank import Transaction, TransactionBank
from accounting_game.core.ledger.accounts import ACCOUNT_KEYS, empty_vector, make_vector
from accounting_game.core.simulation.session import GameSession

from tests.helpers import as_text, solve_current


# =============================================================================
# SUBMIT
# =============================================================================

class TestSubmit:

    def test_t1_then_t2(self, session):
        result = solve_current(session)
        assert result.ok
        assert session.running["cash"] == 30000
        assert session.running["capital"] == 30000
        eq = session.equation()
        assert (eq.assets, eq.liabilities, eq.equity, eq.balanced) == (30000, 0, 30000, True)

        session.next()
        assert session.current_transaction.id == "T2"
        assert solve_current(session).ok
        assert session.running["cash"] == 27500
        assert session.running["supplies"] == 2500
        assert session.equation().assets == 30000
        assert session.equation().balanced

    def test_wrong_entry_leaves_ledger_untouched(self, session):
        solve_current(session)
        session.next()
        before = dict(session.running)

        session.set_entry("cash", "100")
        result = session.submit()

        assert not result.ok
        assert {"cash", "supplies"} <= result.mismatches
        assert session.running == before
        assert session.ready_for_next is False
        assert session.last_result is result

    def test_fractional_entry_is_rejected(self, session):
        solve_current(session)
        session.next()
        before = dict(session.running)

        session.set_entries({"cash": "-2500", "supplies": "2500.5"})
        result = session.submit()

        assert not result.ok
        assert result.ordered_mismatches() == ("supplies",)
        assert session.running == before
        assert "T2" not in session.solved_ids

    def test_fractions_truncating_to_the_answer_are_rejected(self, session):
        session.set_entries({"cash": "30000.9", "capital": "30000.5", "ap": "0.7"})
        result = session.submit()

        assert not result.ok
        assert {"cash", "capital", "ap"} <= result.mismatches
        assert session.running == empty_vector()
        assert session.ready_for_next is False

    def test_submit_sets_ready_and_solved(self, session):
        assert not session.is_solved("T1")
        solve_current(session)
        assert session.ready_for_next
        assert session.is_solved("T1")

    def test_all_transactions_in_order_end_balanced(self, session):
        for i in range(session.bank.size()):
            assert session.current_index == i
            assert solve_current(session).ok
            session.next()

        assert session.equation().balanced
        assert session.solved_ids == [f"T{i}" for i in range(1, 12)]

    def test_resubmitting_applies_again(self, session):
        solve_current(session)
        solve_current(session)
        assert session.running["cash"] == 60000
        assert session.solved_ids == ["T1"]

    def test_ledger_reference_held_by_caller_is_unchanged(self, session):
        held = session.running
        solve_current(session)
        assert held == empty_vector()
        assert session.running is not held


class TestCheckOnly:

    def test_check_only_never_applies(self, session):
        session.set_entries(as_text(session.current_transaction.expected))
        result = session.check_only()
        assert result.ok
        assert session.running == empty_vector()
        assert session.ready_for_next is False

    def test_malformed_input_degrades_to_mismatch(self, session):
        session.set_entries({"cash": "thirty thousand", "capital": "30000"})
        result = session.check_only()
        assert not result.ok
        assert result.ordered_mismatches() == ("cash",)


# =============================================================================
# NAVIGATION
# =============================================================================

class TestNavigation:

    def test_previous_from_first_stays(self, session):
        assert session.previous() == 0
        assert session.current_transaction.id == "T1"

    def test_next_from_last_stays(self, session):
        session.jump_to(10)
        assert session.next() == 10
        assert session.current_transaction.id == "T11"

    def test_jump_is_clamped(self, session):
        assert session.jump_to(42) == 10
        assert session.jump_to(-3) == 0

    def test_index_change_clears_entries_and_result(self, session):
        session.set_entry("cash", "30000")
        session.check_only()
        session.next()
        assert all(v == "" for v in session.entries.values())
        assert session.last_result is None
        assert session.ready_for_next is False

    def test_navigation_keeps_ledger(self, session):
        solve_current(session)
        session.jump_to(5)
        session.previous()
        assert session.running["cash"] == 30000

    def test_progress_percent(self, session):
        assert session.progress_percent() == 0
        session.jump_to(1)
        assert session.progress_percent() == 9
        session.jump_to(10)
        assert session.progress_percent() == 91


# =============================================================================
# CLEAR / RESET
# =============================================================================

class TestReset:

    def test_clear_keeps_index_and_ledger(self, session):
        solve_current(session)
        session.set_entry("cash", "5")
        session.clear()
        assert session.current_index == 0
        assert session.running["cash"] == 30000
        assert session.entries == {k: "" for k in ACCOUNT_KEYS}
        assert session.last_result is None

    def test_reset_all(self, session):
        solve_current(session)
        session.next()
        session.set_entry("cash", "-2500")

        session.reset_all()

        assert session.running == empty_vector()
        assert session.current_index == 0
        assert session.solved_ids == []
        assert session.entries["cash"] == ""

    def test_unknown_account_entry_rejected(self, session):
        with pytest.raises(KeyError):
            session.set_entry("wages", "1")


def test_unbalanced_custom_bank_is_reported():
    bank = TransactionBank([Transaction("U1", "one-sided", "cash appears", 5, make_vector(cash=5))])
    session = GameSession(bank)
    session.set_entry("cash", "5")
    assert session.submit().ok
    assert session.equation().balanced is False
