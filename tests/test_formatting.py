"""
Display formatting.
"""

import pandas as pd
import pytest

from accounting_game.core.reporting.formatting import fmt_money, format_amount_column


@pytest.mark.parametrize("value,text", [
    (30000, "$30,000"),
    (-2500, "-$2,500"),
    (0, "$0"),
    (999_999_999, "$999,999,999"),
    (-1, "-$1"),
])
def test_fmt_money(value, text):
    assert fmt_money(value) == text


def test_format_amount_column_leaves_input_alone():
    df = pd.DataFrame({"label": ["Cash", "Supplies"], "amount": [27500, -2500]})
    out = format_amount_column(df)
    assert out["amount"].tolist() == ["$27,500", "-$2,500"]
    assert df["amount"].tolist() == [27500, -2500]
