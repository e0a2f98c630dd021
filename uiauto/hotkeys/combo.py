"""
Key combo parsing.

Combos are written X11 style, modifiers and key joined by hyphens:
    "Control-Mod1-b"   -> "<ctrl>+<alt>+b"
    "Mod4-Shift-F5"    -> "<cmd>+<shift>+<f5>"
    "Super-Mod1-Left"  -> "<cmd>+<alt>+<left>"

and translated to the pynput GlobalHotKeys syntax on the right.
Modifier names are case-insensitive. Anything unrecognised raises
ComboError, which registration reports and skips.
"""

from __future__ import annotations

SEPARATOR = "-"


class ComboError(ValueError):
    """The combo string cannot be bound."""


_MODIFIERS: dict[str, str] = {
    "control": "<ctrl>",
    "ctrl": "<ctrl>",
    "shift": "<shift>",
    "mod1": "<alt>",
    "alt": "<alt>",
    "mod4": "<cmd>",
    "super": "<cmd>",
    "cmd": "<cmd>",
    "win": "<cmd>",
    "mod5": "<alt_gr>",
    "altgr": "<alt_gr>",
}

# X keysym names -> pynput Key names
_SPECIAL_KEYS: dict[str, str] = {
    "return": "enter",
    "enter": "enter",
    "space": "space",
    "tab": "tab",
    "escape": "esc",
    "esc": "esc",
    "backspace": "backspace",
    "delete": "delete",
    "insert": "insert",
    "home": "home",
    "end": "end",
    "prior": "page_up",
    "page_up": "page_up",
    "next": "page_down",
    "page_down": "page_down",
    "left": "left",
    "right": "right",
    "up": "up",
    "down": "down",
    "print": "print_screen",
    "pause": "pause",
    "menu": "menu",
}
for _n in range(1, 21):
    _SPECIAL_KEYS[f"f{_n}"] = f"f{_n}"


def join_combo(prefix: str, key: str) -> str:
    """Build the full combo identifier for a prefixed key."""
    if not prefix:
        return key
    return f"{prefix}{SEPARATOR}{key}"


def to_hotkey(combo: str) -> str:
    """
    Translate an X11-style combo into a pynput hotkey string.

    Args:
        combo: e.g. "Control-Mod1-b"

    Returns:
        Hotkey string accepted by pynput, e.g. "<ctrl>+<alt>+b"

    Raises:
        ComboError: For empty parts, unknown modifiers or unknown keys
    """
    parts = combo.split(SEPARATOR)
    if not combo or any(not part for part in parts):
        raise ComboError(f"Invalid key combo {combo!r}")

    *modifiers, key = parts

    translated: list[str] = []
    for modifier in modifiers:
        name = _MODIFIERS.get(modifier.lower())
        if name is None:
            raise ComboError(f"Unknown modifier {modifier!r} in {combo!r}")
        if name not in translated:
            translated.append(name)

    translated.append(_translate_key(key, combo))
    return "+".join(translated)


def _translate_key(key: str, combo: str) -> str:
    if len(key) == 1:
        # "+" is the pynput separator
        if not key.isprintable() or key.isspace() or key == "+":
            raise ComboError(f"Invalid key {key!r} in {combo!r}")
        return key.lower()

    name = _SPECIAL_KEYS.get(key.lower())
    if name is None:
        raise ComboError(f"Unknown key {key!r} in {combo!r}")
    return f"<{name}>"
