#=========== accounting_game/config/params.py

from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class MoneyParams:
    # whole-unit amounts are clamped into [-limit, limit]
    limit: int = 999_999_999
    currency_symbol: str = "$"


@dataclass
class UIParams:
    page_title: str = "Accounting for Managers - Chapter 1 Game"
    layout: str = "wide"
    coach_step_count: int = 5


@dataclass
class GameParams:
    money: MoneyParams = field(default_factory=MoneyParams)
    ui: UIParams = field(default_factory=UIParams)

    # None -> logging_setup falls back to its own default
    log_level: Optional[str] = None


def load_params() -> GameParams:
    """
    Build the default GameParams.
    Only the log level can be overridden, via ACCOUNTING_GAME_LOG_LEVEL.
    """
    return GameParams(log_level=os.getenv("ACCOUNTING_GAME_LOG_LEVEL"))


DEFAULT_PARAMS = GameParams()

#=========== end params.py
