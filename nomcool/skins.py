"""Mascot skins: the catalogue, ownership, purchases and custom skins."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from nomcool.settings import SettingsStore

SELECTED_KEY = "skin/selected"
OWNED_KEY = "skin/owned"
CUSTOM_COUNT_KEY = "skin/custom/count"


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue, self.alpha):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    @classmethod
    def from_name(cls, text: str) -> "Color":
        """Parse ``#rgb``, ``#rrggbb`` or ``#aarrggbb``."""
        value = text.strip()
        digits = value[1:]
        if not value.startswith("#") or not digits or any(
            ch not in string.hexdigits for ch in digits
        ):
            raise ValueError(f"invalid colour name: {text!r}")
        if len(digits) == 3:
            red, green, blue = (int(ch * 2, 16) for ch in digits)
            return cls(red, green, blue)
        if len(digits) == 6:
            return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
        if len(digits) == 8:
            return cls(
                int(digits[2:4], 16),
                int(digits[4:6], 16),
                int(digits[6:8], 16),
                int(digits[0:2], 16),
            )
        raise ValueError(f"invalid colour name: {text!r}")

    def name(self) -> str:
        """Return ``#rrggbb`` in lower case."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def lightness(self) -> int:
        """HSL lightness on a 0-255 scale."""
        channels = (self.red, self.green, self.blue)
        return (max(channels) + min(channels)) // 2


TRANSPARENT = Color(0, 0, 0, 0)


@dataclass(frozen=True)
class Skin:
    """A mascot tint; a price of 0 means the skin is free."""

    name: str
    tint: Color
    price: int = 0


BUILT_IN_SKINS: Tuple[Skin, ...] = (
    Skin("Default", TRANSPARENT, 0),
    Skin("Golden", Color(255, 215, 0), 15),
    Skin("Ice", Color(100, 180, 255), 30),
    Skin("Fire", Color(255, 80, 40), 50),
    Skin("Shadow", Color(120, 60, 200), 80),
)


class PurchaseError(Exception):
    """A skin could not be bought."""


def _parse_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


class SkinManager:
    """Tracks which skins exist, which are owned and which one is worn."""

    def __init__(self, store: Optional[SettingsStore] = None) -> None:
        self.store = store if store is not None else SettingsStore()
        self._skins: List[Skin] = list(BUILT_IN_SKINS)
        self._owned = {0}
        self._selected = 0
        self.load()

    def all_skins(self) -> Tuple[Skin, ...]:
        return tuple(self._skins)

    def is_owned(self, index: int) -> bool:
        return index in self._owned

    def owned_skin_indices(self) -> List[int]:
        return sorted(self._owned)

    def selected_skin_index(self) -> int:
        return self._selected

    def selected_skin(self) -> Skin:
        return self._skins[self._selected]

    def select_skin(self, index: int) -> None:
        """Wear skin ``index``; unknown or unowned skins are ignored."""
        if 0 <= index < len(self._skins) and self.is_owned(index):
            self._selected = index
            self.save()

    def purchase(self, index: int, gold: int) -> int:
        """Buy skin ``index`` with ``gold`` and return the gold left."""
        if not 0 <= index < len(self._skins):
            raise PurchaseError(f"no skin at index {index}")
        skin = self._skins[index]
        if self.is_owned(index):
            raise PurchaseError(f"{skin.name} is already owned")
        if gold < skin.price:
            raise PurchaseError(f"{skin.name} costs {skin.price} gold, only {gold} available")
        self._owned.add(index)
        self.save()
        return gold - skin.price

    def add_custom_skin(self, name: str, color: Color) -> None:
        self._skins.append(Skin(name, color, 0))
        self._owned.add(len(self._skins) - 1)
        self.save()

    def save(self) -> None:
        self.store.set(SELECTED_KEY, self._selected)
        self.store.set(OWNED_KEY, [str(index) for index in sorted(self._owned)])
        custom = self._skins[len(BUILT_IN_SKINS):]
        self.store.set(CUSTOM_COUNT_KEY, len(custom))
        for position, skin in enumerate(custom):
            self.store.set(f"skin/custom/{position}/name", skin.name)
            self.store.set(f"skin/custom/{position}/color", skin.tint.name())

    def load(self) -> None:
        self._skins = list(BUILT_IN_SKINS)
        self._owned = {0}

        # Custom skins come first so that saved indices can refer to them.
        count = _parse_int(self.store.get(CUSTOM_COUNT_KEY, 0)) or 0
        for position in range(count):
            name = self.store.get(f"skin/custom/{position}/name", "")
            color_name = self.store.get(f"skin/custom/{position}/color", "")
            if not isinstance(name, str) or not name:
                continue
            try:
                color = Color.from_name(str(color_name))
            except ValueError:
                continue
            self._skins.append(Skin(name, color, 0))
            self._owned.add(len(self._skins) - 1)

        selected = _parse_int(self.store.get(SELECTED_KEY, 0))
        self._selected = selected if selected is not None else 0

        owned = self.store.get(OWNED_KEY, [])
        if isinstance(owned, str):
            owned = [owned]
        if isinstance(owned, list):
            for entry in owned:
                index = _parse_int(entry)
                if index is not None and 0 <= index < len(self._skins):
                    self._owned.add(index)

        if not self.is_owned(self._selected):
            self._selected = 0