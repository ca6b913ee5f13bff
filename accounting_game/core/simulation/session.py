# ===============================
# accounting_game/core/simulation/session.py
# ===============================

from typing import Dict, List, Mapping, Optional

from accounting_game.core.bookkeeping.transaction_bank import (
    TXN_BANK,
    Transaction,
    TransactionBank,
)
from accounting_game.core.bookkeeping.validator import CheckResult, check
from accounting_game.core.finance.equation import EquationResult, evaluate
from accounting_game.core.ledger.accounts import ACCOUNT_KEYS, AccountVector, empty_vector
from accounting_game.core.ledger.ledger import apply_delta
from accounting_game.core.simulation.navigation import Navigator, progress_percent
from accounting_game.logging_setup import get_logger

logger = get_logger("accounting_game.session")


class GameSession:
    """
    Equation Lab state for one learner.

    ・running      : cumulative AccountVector since the last reset_all()
    ・entries      : raw text per account for the current transaction
    ・last_result  : outcome of the last check / submit, None after navigation
    Only submit() changes `running`.
    """

    def __init__(self, bank: Optional[TransactionBank] = None):
        self.bank = bank if bank is not None else TXN_BANK
        self.nav = Navigator(self.bank.size())
        self.running: AccountVector = empty_vector()
        self.entries: Dict[str, str] = {k: "" for k in ACCOUNT_KEYS}
        self.last_result: Optional[CheckResult] = None
        self.ready_for_next = False
        self.solved_ids: List[str] = []

    # ------------------------------------------------------------
    # current transaction
    # ------------------------------------------------------------
    @property
    def current_index(self) -> int:
        return self.nav.current_index

    @property
    def current_transaction(self) -> Transaction:
        return self.bank.get(self.nav.current_index)

    # ------------------------------------------------------------
    # entered delta
    # ------------------------------------------------------------
    def set_entry(self, account: str, text: str):
        if account not in self.entries:
            raise KeyError(account)
        self.entries[account] = "" if text is None else str(text)

    def set_entries(self, raw: Mapping[str, str]):
        for k in ACCOUNT_KEYS:
            if k in raw:
                self.set_entry(k, raw[k])

    def clear(self):
        """
        Clear the typed amounts and the last feedback.
        """
        self.entries = {k: "" for k in ACCOUNT_KEYS}
        self.last_result = None
        self.ready_for_next = False

    # ------------------------------------------------------------
    # check / submit
    # ------------------------------------------------------------
    def check_only(self) -> CheckResult:
        self.last_result = check(self.entries, self.current_transaction.expected)
        return self.last_result

    def submit(self) -> CheckResult:
        """
        Check, and only on a full match fold the delta into `running`.
        """
        txn = self.current_transaction
        result = self.check_only()

        if not result.ok:
            logger.info(
                "%s rejected, fix: %s", txn.id, ", ".join(result.ordered_mismatches())
            )
            return result

        self.running = apply_delta(self.running, result.entered)
        self.ready_for_next = True
        if txn.id not in self.solved_ids:
            self.solved_ids.append(txn.id)

        logger.info("%s applied, balanced=%s", txn.id, self.equation().balanced)
        return result

    # ------------------------------------------------------------
    # navigation (every index change clears the input)
    # ------------------------------------------------------------
    def next(self) -> int:
        self.nav.next()
        self.clear()
        return self.nav.current_index

    def previous(self) -> int:
        self.nav.previous()
        self.clear()
        return self.nav.current_index

    def jump_to(self, index: int) -> int:
        self.nav.jump_to(index)
        self.clear()
        return self.nav.current_index

    def reset_all(self):
        self.running = empty_vector()
        self.nav.reset()
        self.solved_ids = []
        self.clear()
        logger.info("lab reset")

    # ------------------------------------------------------------
    # derived
    # ------------------------------------------------------------
    def equation(self) -> EquationResult:
        return evaluate(self.running)

    def progress_percent(self) -> int:
        return progress_percent(self.nav.current_index, self.bank.size())

    def is_solved(self, txn_id: str) -> bool:
        return txn_id in self.solved_ids

# ============= end session.py
