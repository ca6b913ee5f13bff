# ============================================
# accounting_game/core/content/learning_content.py
# static text for Quick Sheet / Coach / Quest
# ============================================

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class SheetSection:
    title: str
    bullets: Tuple[str, ...]


@dataclass(frozen=True)
class CoachStep:
    title: str
    body: str


@dataclass(frozen=True)
class QuestStage:
    title: str
    body: str
    cta: str
    jump: Optional[str] = None   # tab key: "lab" / "practice"


QUICK_SHEET: Tuple[SheetSection, ...] = (
    SheetSection(
        "Accounting: what & why",
        (
            "Accounting = system to identify, record, and communicate business activities.",
            "It's the language of business: helps decisions.",
            "Bookkeeping = recording only (part of accounting).",
        ),
    ),
    SheetSection(
        "Users of accounting info",
        (
            "External users (financial accounting): investors, lenders, regulators, auditors, suppliers, etc.",
            "Internal users (managerial accounting): CEO + managers (HR, marketing, production, etc.) for better decisions.",
        ),
    ),
    SheetSection(
        "Ethics + fraud triangle",
        (
            "Useful info must be trusted → ethics matter.",
            "Fraud triangle: Opportunity + Pressure + Rationalization.",
        ),
    ),
    SheetSection(
        "GAAP / IFRS / EAS",
        (
            "GAAP aims for: Relevance + Faithful representation.",
            "FASB sets GAAP (US). IASB sets IFRS (international).",
            "Egypt: EAS largely based on IFRS with local adjustments.",
        ),
    ),
    SheetSection(
        "Core principles + constraints",
        (
            "Cost (measurement) principle: record at actual cost.",
            "Matching principle: expenses recorded to generate revenue.",
            "Full disclosure: important details in notes.",
            "Constraints: cost-benefit + materiality.",
        ),
    ),
    SheetSection(
        "The accounting equation",
        (
            "Assets = Liabilities + Equity",
            "Assets: what the company owns/controls (cash, supplies, equipment, A/R).",
            "Liabilities: what the company owes (A/P, notes payable, wages payable).",
            "Equity: owner's claim. Increases with investments & revenues; decreases with expenses & withdrawals.",
            "Expanded: A = L + Capital + Revenues − Expenses − Withdrawals",
        ),
    ),
    SheetSection(
        "Financial statements (links)",
        (
            "Income Statement: revenues − expenses = net income.",
            "Statement of Owner's Equity: begins with capital, adds net income, subtracts withdrawals.",
            "Balance Sheet: assets, liabilities, ending equity.",
            "Statement of Cash Flows: how cash changed.",
        ),
    ),
)

# the seven transaction patterns, shown with hints and on the sheet
PATTERNS: Tuple[str, ...] = (
    "Cash sale: Cash ↑, Revenue ↑",
    "Credit sale: A/R ↑, Revenue ↑",
    "Pay expense: Cash ↓, Expense ↑",
    "Buy on credit: Asset ↑, A/P ↑",
    "Pay A/P: Cash ↓, A/P ↓",
    "Owner invest: Cash ↑, Capital ↑",
    "Owner withdraw: Cash ↓, Withdrawals ↑",
)

MEMORIZE: Tuple[Tuple[str, str], ...] = (
    ("I-R-C-E-S", "Identify, Record, Communicate, (Equation), Statements."),
    ("A = L + E", "Then learn the patterns below."),
)

EXAM_CHECKLIST: Tuple[str, ...] = (
    "Know definitions: Assets, Liabilities, Equity.",
    "Know who uses accounting: Internal vs External.",
    "Know Ethics + Fraud triangle.",
    "Practice: analyze transactions with A = L + E.",
    "Understand statement links: Net income → Owner's equity → Balance sheet.",
)

COACH_STEPS: Tuple[CoachStep, ...] = (
    CoachStep(
        "1) Read the story",
        "Who is involved? What happened? Is it cash, credit, expense, revenue, owner action, or liability?",
    ),
    CoachStep(
        "2) Pick the accounts",
        "Choose which accounts change (at least TWO). Example: Cash + Revenue, or Supplies + Accounts Payable.",
    ),
    CoachStep(
        "3) Decide direction",
        "For each chosen account, decide Increase (↑) or Decrease (↓).",
    ),
    CoachStep(
        "4) Enter amounts",
        "Same amount on both sides of the equation (but could be different accounts).",
    ),
    CoachStep(
        "5) Balance check",
        "Confirm Assets = Liabilities + Equity still holds. If not, re-check accounts/directions.",
    ),
)

QUEST_STAGES: Tuple[QuestStage, ...] = (
    QuestStage(
        "Level 1 - Learn the equation",
        "Memorize: Assets = Liabilities + Equity. Then memorize: Equity = Capital + Revenues − Expenses − Withdrawals.",
        "I know the equation",
    ),
    QuestStage(
        "Level 2 - Learn the 7 transaction patterns",
        "Cash sale (Cash ↑, Rev ↑), Credit sale (A/R ↑, Rev ↑), Pay expense (Cash ↓, Exp ↑), "
        "Buy on credit (Asset ↑, A/P ↑), Pay A/P (Cash ↓, A/P ↓), Owner invest (Cash ↑, Capital ↑), "
        "Owner withdraw (Cash ↓, Withdrawals ↑).",
        "I know the patterns",
    ),
    QuestStage(
        "Level 3 - Play Equation Lab step-by-step",
        "Go to Equation Lab and solve T1 → T11. Use the Coach controls to guide you through each transaction.",
        "Take me to Equation Lab",
        jump="lab",
    ),
    QuestStage(
        "Level 4 - Practice quiz",
        "Try the practice questions. If you miss any, return to Quick Sheet for review.",
        "Take me to Practice",
        jump="practice",
    ),
)

STUDY_PLAN: Tuple[str, ...] = (
    "Open Quick Sheet and read once.",
    "Go to Equation Lab and solve T1 → T11 using the coach.",
    "Do Practice questions.",
    "Repeat Equation Lab until you can solve all transactions without hints.",
)

# ============================================
# END learning_content.py
# ============================================
