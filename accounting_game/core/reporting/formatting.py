# ============== accounting_game/core/reporting/formatting.py

import pandas as pd

from accounting_game.config.params import DEFAULT_PARAMS

CURRENCY = DEFAULT_PARAMS.money.currency_symbol


def fmt_money(n) -> str:
    """
    30000 -> "$30,000", -2500 -> "-$2,500"
    """
    value = int(n)
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY}{abs(value):,}"


def format_amount_column(df: pd.DataFrame, column: str = "amount") -> pd.DataFrame:
    """
    Copy of df with one numeric column rendered through fmt_money.
    """
    out = df.copy()
    if column in out.columns:
        out[column] = out[column].apply(
            lambda v: "" if pd.isna(v) else fmt_money(v)
        )
    return out

# ============== end accounting_game/core/reporting/formatting.py
