# ============================================
# accounting_game/core/bookkeeping/validator.py
# (learner input -> AccountVector, and comparison with the answer key)
# ============================================

import math
from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional, Tuple

from accounting_game.core.ledger.accounts import (
    ACCOUNT_KEYS,
    AccountVector,
    clamp_money,
)
from accounting_game.logging_setup import get_logger

logger = get_logger("accounting_game.validator")


# -------------------------------------------------------
# 1: one text field -> number
# -------------------------------------------------------
def _parse_number(text: Optional[str]) -> Optional[float]:
    """
    Finite number typed in one field, or None when blank / unparseable.
    Commas and "$" are ignored; "_" separators are not accepted.
    """
    s = str(text if text is not None else "").strip()
    if s in ("", "-", "+"):
        return None

    cleaned = s.replace(",", "").replace("$", "").replace(" ", "")
    if "_" in cleaned:
        logger.debug("unparseable amount %r treated as 0", s)
        return None
    try:
        value = float(cleaned)
    except ValueError:
        logger.debug("unparseable amount %r treated as 0", s)
        return None

    if not math.isfinite(value):
        logger.debug("non-finite amount %r treated as 0", s)
        return None
    return value


def parse_amount(text: Optional[str]) -> int:
    """
    Forgiving parse of one learner-typed amount.

    ・"" / "-" / None              -> 0
    ・"2,500" / "$2,500" / "-1000" -> the number
    ・anything unparseable         -> 0 (never raises)
    Whole units only: a fraction is cut toward zero here, and check()
    reports that field as a mismatch.
    """
    value = _parse_number(text)
    if value is None:
        return 0
    return clamp_money(int(value))


def is_fractional(text: Optional[str]) -> bool:
    value = _parse_number(text)
    return value is not None and not value.is_integer()


# -------------------------------------------------------
# 2: raw entries -> AccountVector
# -------------------------------------------------------
def normalize(raw_entries: Mapping[str, Optional[str]]) -> AccountVector:
    """
    Every account gets a value; keys missing from raw_entries are 0.
    Keys that are not accounts are ignored.
    """
    return {k: parse_amount(raw_entries.get(k, "")) for k in ACCOUNT_KEYS}


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    mismatches: FrozenSet[str] = frozenset()

    def ordered_mismatches(self) -> Tuple[str, ...]:
        return tuple(k for k in ACCOUNT_KEYS if k in self.mismatches)


# -------------------------------------------------------
# 3: entered vs expected
# -------------------------------------------------------
def validate(entered: Mapping[str, int], expected: Mapping[str, int]) -> ValidationResult:
    """
    Exact integer equality on every account; ok iff nothing mismatches.
    """
    mismatches = frozenset(
        k for k in ACCOUNT_KEYS if entered.get(k, 0) != expected.get(k, 0)
    )
    return ValidationResult(ok=not mismatches, mismatches=mismatches)


@dataclass(frozen=True)
class CheckResult:
    """
    What the learner sees after "Check" / "Check & Apply".
    """

    ok: bool
    mismatches: FrozenSet[str]
    entered: AccountVector = field(compare=False)
    expected: Mapping[str, int] = field(compare=False)

    def ordered_mismatches(self) -> Tuple[str, ...]:
        return tuple(k for k in ACCOUNT_KEYS if k in self.mismatches)


def check(raw_entries: Mapping[str, Optional[str]], expected: Mapping[str, int]) -> CheckResult:
    """
    normalize + validate. Never touches any ledger.
    A field holding a fraction never matches, whatever it truncates to.
    """
    entered = normalize(raw_entries)
    result = validate(entered, expected)
    fractional = frozenset(k for k in ACCOUNT_KEYS if is_fractional(raw_entries.get(k)))
    mismatches = result.mismatches | fractional
    return CheckResult(
        ok=not mismatches,
        mismatches=mismatches,
        entered=entered,
        expected=dict(expected),
    )


# ============================================
# END validator.py
# ============================================
