# ===============================
# accounting_game/core/ledger/accounts.py
# ===============================

from typing import Dict

from accounting_game.config.params import DEFAULT_PARAMS

# AccountVector: exactly these ten keys, in this order
AccountVector = Dict[str, int]

ACCOUNT_KEYS = (
    "cash",
    "supplies",
    "equipment",
    "ar",
    "ap",
    "notes",
    "capital",
    "withdrawals",
    "revenue",
    "expense",
)

ACCOUNT_LABELS = {
    "cash": "Cash",
    "supplies": "Supplies",
    "equipment": "Equipment",
    "ar": "Accounts Receivable",
    "ap": "Accounts Payable",
    "notes": "Notes Payable",
    "capital": "Owner Capital",
    "withdrawals": "Withdrawals",
    "revenue": "Revenues",
    "expense": "Expenses",
}

MONEY_LIMIT = DEFAULT_PARAMS.money.limit


def clamp_money(n: int) -> int:
    """
    Keep an amount inside [-MONEY_LIMIT, MONEY_LIMIT].
    Negative amounts are allowed (a decrease), only extremes are cut.
    """
    if n > MONEY_LIMIT:
        return MONEY_LIMIT
    if n < -MONEY_LIMIT:
        return -MONEY_LIMIT
    return n


def empty_vector() -> AccountVector:
    return {k: 0 for k in ACCOUNT_KEYS}


def make_vector(**amounts: int) -> AccountVector:
    """
    Full AccountVector from a partial set of accounts, the rest zero.

        make_vector(cash=-2500, supplies=2500)
    """
    unknown = set(amounts) - set(ACCOUNT_KEYS)
    if unknown:
        raise ValueError(f"Unknown account key(s): {sorted(unknown)}")

    vec = empty_vector()
    for k, v in amounts.items():
        vec[k] = clamp_money(int(v))
    return vec


# ===============================
# END accounts.py
# ===============================
