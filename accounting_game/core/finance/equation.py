# ============================================
# accounting_game/core/finance/equation.py
# Assets = Liabilities + Equity
# ============================================

from dataclasses import dataclass
from typing import Mapping

import pandas as pd

from accounting_game.core.finance.fs_mapping import (
    BS_ASSETS,
    BS_EQUITY,
    BS_LIABILITIES,
    SECTIONS,
)
from accounting_game.core.ledger.accounts import ACCOUNT_LABELS


@dataclass(frozen=True)
class EquationResult:
    assets: int
    liabilities: int
    equity: int
    balanced: bool

    @property
    def difference(self) -> int:
        # 0 when balanced
        return self.assets - (self.liabilities + self.equity)


def _signed_total(ledger: Mapping[str, int], mapping: Mapping[str, int]) -> int:
    return sum(sign * ledger.get(k, 0) for k, sign in mapping.items())


def evaluate(ledger: Mapping[str, int]) -> EquationResult:
    """
    Recompute the three totals from the ledger and check the equation.

    This only reports. An unbalanced ledger gives balanced=False; nothing
    here assumes the transactions applied so far were balanced.
    """
    assets = _signed_total(ledger, BS_ASSETS)
    liabilities = _signed_total(ledger, BS_LIABILITIES)
    equity = _signed_total(ledger, BS_EQUITY)

    return EquationResult(
        assets=assets,
        liabilities=liabilities,
        equity=equity,
        balanced=assets == liabilities + equity,
    )


def equation_frame(ledger: Mapping[str, int]) -> pd.DataFrame:
    """
    Scoreboard table: one row per account grouped by section.
    """
    rows = []
    for section, mapping in SECTIONS:
        for k in mapping:
            rows.append({
                "section": section,
                "account": k,
                "label": ACCOUNT_LABELS[k],
                "amount": int(ledger.get(k, 0)),
            })
    return pd.DataFrame(rows, columns=["section", "account", "label", "amount"])

# ============================================
# END equation.py
# ============================================
