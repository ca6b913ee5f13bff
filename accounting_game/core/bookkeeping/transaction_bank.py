# ================================
# accounting_game/core/bookkeeping/transaction_bank.py
# ================================

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from accounting_game.core.ledger.accounts import make_vector
from accounting_game.core.simulation.navigation import clamp_index


@dataclass(frozen=True)
class Transaction:
    """
    One instructional business event.

    ・story     : what the learner reads
    ・amount    : shown on the card only, never used when checking
    ・expected  : the answer key (signed change per account)
    """

    id: str
    title: str
    story: str
    amount: int
    expected: Mapping[str, int] = field(compare=False)
    hint: str = ""

    def __post_init__(self):
        # answer key is read-only once authored
        object.__setattr__(self, "expected", MappingProxyType(dict(self.expected)))


class TransactionBank:
    """
    Ordered, read-only catalog of Transactions.
    Order is the default traversal; any index may be visited directly.
    """

    def __init__(self, transactions: Sequence[Transaction]):
        ids = [t.id for t in transactions]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate transaction ids in bank: {ids}")
        if not ids:
            raise ValueError("TransactionBank needs at least one transaction")

        self._transactions: Tuple[Transaction, ...] = tuple(transactions)

    def get(self, index: int) -> Transaction:
        return self._transactions[clamp_index(index, len(self._transactions))]

    def size(self) -> int:
        return len(self._transactions)

    def all(self) -> Tuple[Transaction, ...]:
        return self._transactions

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self):
        return iter(self._transactions)


# =======================================
# Chapter 1 catalog
# =======================================

TXN_BANK = TransactionBank([
    Transaction(
        id="T1",
        title="Owner invests cash",
        story="Owner invests $30,000 cash to start the business.",
        amount=30000,
        expected=make_vector(cash=30000, capital=30000),
        hint="Investment increases Cash (asset ↑) and Owner's Capital (equity ↑).",
    ),
    Transaction(
        id="T2",
        title="Buy supplies for cash",
        story="The business buys $2,500 supplies and pays cash.",
        amount=2500,
        expected=make_vector(cash=-2500, supplies=2500),
        hint="Swap one asset for another: Cash ↓, Supplies ↑. Equity doesn't change.",
    ),
    Transaction(
        id="T3",
        title="Buy equipment for cash",
        story="The business buys $26,000 equipment and pays cash.",
        amount=26000,
        expected=make_vector(cash=-26000, equipment=26000),
        hint="Another asset swap: Cash ↓, Equipment ↑.",
    ),
    Transaction(
        id="T4",
        title="Buy supplies on credit",
        story="The business buys $7,100 supplies on account (credit).",
        amount=7100,
        expected=make_vector(supplies=7100, ap=7100),
        hint="Supplies ↑ (asset) and Accounts Payable ↑ (liability).",
    ),
    Transaction(
        id="T5",
        title="Provide services for cash",
        story="The business earns $4,200 cash from services immediately.",
        amount=4200,
        expected=make_vector(cash=4200, revenue=4200),
        hint="Cash ↑ (asset) and Revenue ↑ (equity ↑).",
    ),
    Transaction(
        id="T6",
        title="Pay rent expense",
        story="The business pays rent of $1,000 in cash.",
        amount=1000,
        expected=make_vector(cash=-1000, expense=1000),
        hint="Cash ↓ (asset) and Expense ↑ (which decreases equity overall).",
    ),
    Transaction(
        id="T7",
        title="Pay salaries expense",
        story="The business pays salaries of $700 in cash.",
        amount=700,
        expected=make_vector(cash=-700, expense=700),
        hint="Same pattern as rent: Cash ↓ and Expenses ↑ (equity ↓).",
    ),
    Transaction(
        id="T8",
        title="Provide services on credit",
        story="The business provides $1,600 consulting + $300 rental on credit (total $1,900).",
        amount=1900,
        expected=make_vector(ar=1900, revenue=1900),
        hint="No cash yet. Accounts Receivable ↑ and Revenue ↑.",
    ),
    Transaction(
        id="T9",
        title="Collect receivable",
        story="Customer pays $1,900 owed from the previous credit sale.",
        amount=1900,
        expected=make_vector(cash=1900, ar=-1900),
        hint="Convert A/R to Cash: Cash ↑, Accounts Receivable ↓. No new revenue now.",
    ),
    Transaction(
        id="T10",
        title="Pay accounts payable",
        story="The business pays $900 of what it owes suppliers.",
        amount=900,
        expected=make_vector(cash=-900, ap=-900),
        hint="Paying a liability: Cash ↓, Accounts Payable ↓.",
    ),
    Transaction(
        id="T11",
        title="Owner withdraws cash",
        story="Owner takes $200 cash for personal use.",
        amount=200,
        expected=make_vector(cash=-200, withdrawals=200),
        hint="Withdrawals increase (equity decreases): Cash ↓ and Withdrawals ↑.",
    ),
])

# ================================
# END transaction_bank.py
# ================================
