"""Theme colors and color utilities for the UI."""

from termo.core.scoring import CharStatus


class TermoColors:
    """Dark palette of the game board and keyboard."""

    BG = "#121213"
    TEXT = "#FFFFFF"
    TEXT_MUTED = "#9CA3AF"

    CORRECT = "#538D4E"
    PRESENT = "#B59F3B"
    ABSENT = "#3A3A3C"
    KEY_DEFAULT = "#818384"

    TILE_BORDER_EMPTY = "#3A3A3C"
    TILE_BORDER_FILLED = "#565758"
    CURSOR = "#4C4C4E"

    HINT = "#CA8A04"
    HINT_DISABLED = "#374151"
    TOAST_BG = "#FFFFFF"
    TOAST_TEXT = "#000000"

    # Level controls
    NEXT_LEVEL = "#16A34A"
    RETRY = "#2563EB"
    RESET = "#4B5563"


# Fraction of the background mixed into rows of boards that are already solved
DIM_FACTOR = 0.8


def status_fill(status: CharStatus) -> str:
    """Fill color of a scored tile; unscored tiles are transparent (background)."""
    return {
        CharStatus.CORRECT: TermoColors.CORRECT,
        CharStatus.PRESENT: TermoColors.PRESENT,
        CharStatus.ABSENT: TermoColors.ABSENT,
    }.get(status, TermoColors.BG)


def key_fill(status: CharStatus) -> str:
    """Fill color of an on-screen keyboard key."""
    if status is CharStatus.INITIAL:
        return TermoColors.KEY_DEFAULT
    return status_fill(status)


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except (ValueError, TypeError):
        return a


def dimmed(color: str) -> str:
    return blend_hex(color, TermoColors.BG, DIM_FACTOR)
