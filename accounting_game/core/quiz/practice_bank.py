# ===== accounting_game/core/quiz/practice_bank.py =====

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class QuizItem:
    question: str
    options: Tuple[str, ...]
    answer: int          # index into options
    explanation: str
    tag: str             # topic

    def __post_init__(self):
        if not 0 <= self.answer < len(self.options):
            raise ValueError(
                f"answer index {self.answer} out of range for {len(self.options)} options: {self.question}"
            )

    @property
    def correct_option(self) -> str:
        return self.options[self.answer]


PRACTICE: Tuple[QuizItem, ...] = (
    QuizItem(
        question="1) Which is MOST likely an external user?",
        options=("Production manager", "Marketing manager", "Bank lender", "HR manager"),
        answer=2,
        explanation=(
            "Lenders are external users; they rely on financial accounting reports. "
            "Managers are internal users."
        ),
        tag="Users",
    ),
    QuizItem(
        question="2) Fraud triangle includes:",
        options=(
            "Opportunity, Pressure, Rationalization",
            "Assets, Liabilities, Equity",
            "Cost, Matching, Disclosure",
            "Revenue, Expense, Cash",
        ),
        answer=0,
        explanation=(
            "Fraud needs a chance (opportunity), a reason (pressure), "
            "and a justification (rationalization)."
        ),
        tag="Ethics",
    ),
    QuizItem(
        question="3) If a business buys supplies ON CREDIT, what happens?",
        options=(
            "Assets ↑, Liabilities ↑",
            "Assets ↓, Liabilities ↓",
            "Assets ↑, Equity ↑",
            "Assets ↓, Equity ↓",
        ),
        answer=0,
        explanation=(
            "Supplies is an asset that increases; Accounts Payable is a liability "
            "that increases. Equation stays balanced."
        ),
        tag="Equation",
    ),
    QuizItem(
        question="4) Revenues do what to equity?",
        options=("Decrease equity", "Increase equity", "Do not affect equity", "Increase liabilities"),
        answer=1,
        explanation="Revenue increases equity because it represents value earned by the business.",
        tag="Equation",
    ),
    QuizItem(
        question="5) Which statement shows assets, liabilities, and equity at a point in time?",
        options=("Income statement", "Balance sheet", "Statement of cash flows", "Owner's equity statement"),
        answer=1,
        explanation="Balance sheet is a snapshot at a specific date.",
        tag="Statements",
    ),
)

# ===== end practice_bank.py =====
