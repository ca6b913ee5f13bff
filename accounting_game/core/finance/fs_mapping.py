# ============================================
# accounting_game/core/finance/fs_mapping.py
# account -> side of the equation, with sign
# ============================================

# ----------------------------
# Assets
# ----------------------------
BS_ASSETS = {
    "cash": 1,
    "supplies": 1,
    "equipment": 1,
    "ar": 1,
}

# ----------------------------
# Liabilities
# ----------------------------
BS_LIABILITIES = {
    "ap": 1,
    "notes": 1,
}

# ----------------------------
# Equity (expanded form)
# Capital + Revenues - Expenses - Withdrawals
# ----------------------------
BS_EQUITY = {
    "capital": 1,
    "revenue": 1,
    "expense": -1,
    "withdrawals": -1,
}

SECTIONS = (
    ("Assets", BS_ASSETS),
    ("Liabilities", BS_LIABILITIES),
    ("Equity", BS_EQUITY),
)


# ============================================
# END fs_mapping.py
# ============================================
