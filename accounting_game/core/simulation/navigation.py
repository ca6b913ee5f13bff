# ===============================
# accounting_game/core/simulation/navigation.py
# ===============================

from accounting_game.logging_setup import get_logger

logger = get_logger("accounting_game.navigation")


def clamp_index(index: int, size: int) -> int:
    """
    Clamp index into [0, size-1]. Out-of-range is never an error.
    """
    if size <= 0:
        return 0
    clamped = min(max(int(index), 0), size - 1)
    if clamped != index:
        logger.debug("index %s clamped to %s (size=%s)", index, clamped, size)
    return clamped


def progress_percent(index: int, size: int) -> int:
    """
    round(100 * index / size); 0 for an empty sequence.
    """
    if size <= 0:
        return 0
    return int(round(100 * index / size))


class Navigator:
    """
    Cursor over a fixed-size sequence.
    next() / previous() / jump_to() never leave [0, size-1].
    """

    def __init__(self, size: int, start: int = 0):
        self.size = size
        self.current_index = clamp_index(start, size)

    def next(self) -> int:
        self.current_index = clamp_index(self.current_index + 1, self.size)
        return self.current_index

    def previous(self) -> int:
        self.current_index = clamp_index(self.current_index - 1, self.size)
        return self.current_index

    def jump_to(self, index: int) -> int:
        self.current_index = clamp_index(index, self.size)
        return self.current_index

    def reset(self) -> int:
        self.current_index = 0
        return self.current_index

    @property
    def is_first(self) -> bool:
        return self.current_index == 0

    @property
    def is_last(self) -> bool:
        return self.current_index >= self.size - 1

# ===============================
# END navigation.py
# ===============================
