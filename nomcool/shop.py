"""The skin shop: what is on offer, what it costs and buying it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from nomcool.experience import Experience
from nomcool.skins import Color, Skin, SkinManager

FREE_LABEL = "Free"
OWNED_LABEL = "Owned"


@dataclass(frozen=True)
class ShopItem:
    """One row of the shop: a skin with its ownership and affordability."""

    index: int
    skin: Skin
    owned: bool
    affordable: bool

    @property
    def name(self) -> str:
        return self.skin.name

    @property
    def price_label(self) -> str:
        """``"<price> gold"``, or ``"Free"`` for skins that cost nothing."""
        return f"{self.skin.price} gold" if self.skin.price > 0 else FREE_LABEL

    @property
    def action_label(self) -> str:
        """``"Owned"`` for owned skins, otherwise the buy button's text."""
        return OWNED_LABEL if self.owned else f"Buy ({self.skin.price}g)"

    @property
    def can_buy(self) -> bool:
        return not self.owned and self.affordable


def shop_items(skin_manager: SkinManager, experience: Experience) -> List[ShopItem]:
    """List every skin in catalogue order as it appears in the shop."""
    return [
        ShopItem(
            index=index,
            skin=skin,
            owned=skin_manager.is_owned(index),
            affordable=experience.gold >= skin.price,
        )
        for index, skin in enumerate(skin_manager.all_skins())
    ]


def buy(skin_manager: SkinManager, experience: Experience, index: int) -> Skin:
    """Buy skin ``index`` with the player's gold and return it.

    Raises ``PurchaseError`` when the skin does not exist, is already owned
    or costs more than the player has; the gold is then left untouched.
    """
    left = skin_manager.purchase(index, experience.gold)
    experience.spend_gold(experience.gold - left)
    return skin_manager.all_skins()[index]


def tint_pixel(pixel: Color, tint: Color) -> Color:
    """Blend a preview pixel halfway towards ``tint``, keeping its alpha.

    Fully transparent pixels and a fully transparent tint leave the pixel as is.
    """
    if pixel.alpha == 0 or tint.alpha == 0:
        return pixel
    return Color(
        (pixel.red + tint.red) // 2,
        (pixel.green + tint.green) // 2,
        (pixel.blue + tint.blue) // 2,
        pixel.alpha,
    )