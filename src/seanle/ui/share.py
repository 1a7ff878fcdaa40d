from typing import Optional, Union

from ..config import SHARE_URL

def _seconds(elapsed: Union[float, str]) -> str:
    # Stored times are already formatted strings
    return elapsed if isinstance(elapsed, str) else f"{elapsed:.2f}"

def heading(day: int) -> str:
    return f"Daily Seanle #{day}"

def share_text(day: int, won: bool, elapsed: float) -> str:
    """Clipboard message for the end-of-game share button."""
    if won:
        return f"I completed Daily Seanle #{day} in {elapsed:.2f} seconds! Can you do better: {SHARE_URL}"
    return f"I got Seaned on Daily Seanle #{day}! Can you do better: {SHARE_URL}"

def end_text(result: Optional[str], elapsed: Union[float, str, None] = None) -> str:
    """
    End-of-game popup text. `result` is "win", "lose" or None (played today
    but nothing stored).
    """
    if result == "win":
        return f"Congrats! You collected S, E, A, N in {_seconds(elapsed if elapsed is not None else 0.0)} seconds."
    if result == "lose":
        return "You got Seaned! Try again tomorrow."
    return "You have already played today. Come back tomorrow!"
