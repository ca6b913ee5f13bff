# ===============================
# accounting_game/core/ledger/ledger.py
# ===============================

from typing import Mapping

from accounting_game.core.ledger.accounts import (
    ACCOUNT_KEYS,
    AccountVector,
    clamp_money,
)


# -------------------------------------------------
# delta -> ledger
# -------------------------------------------------
def apply_delta(ledger: Mapping[str, int], delta: Mapping[str, int]) -> AccountVector:
    """
    Fold one transaction's delta into the running ledger.

    Returns a new AccountVector; neither argument is modified, so a caller
    still holding the previous ledger sees it unchanged.
    """
    return {
        k: clamp_money(ledger.get(k, 0) + delta.get(k, 0))
        for k in ACCOUNT_KEYS
    }


# ===============================
# END ledger.py
# ===============================
