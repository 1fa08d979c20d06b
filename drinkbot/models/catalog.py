from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Sequence, Tuple

from drinkbot.core.exceptions import UnknownShopError

DEFAULT_SHOPS: Dict[str, Tuple[str, ...]] = {
    "Starbucks": ("Caramel Frappucino", "Java Chip Frappuccino", "White Chocolate Mocha"),
    "Veloce": ("Blend Coffee", "Hot Chocolate", "Latte"),
    "Doutor": ("Blend Coffee", "Cafe au Lait", "Iced Tea"),
}


@dataclass(frozen=True)
class ShopCatalog:
    """Read-only mapping of shop name to the drinks it sells, in menu order."""

    shops: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: MappingProxyType(dict(DEFAULT_SHOPS)))

    @classmethod
    def from_mapping(cls, shops: Mapping[str, Sequence[str]]) -> "ShopCatalog":
        frozen = {str(name): tuple(str(drink) for drink in drinks) for name, drinks in shops.items()}
        return cls(shops=MappingProxyType(frozen))

    @classmethod
    def from_settings(cls, shops: Optional[Mapping[str, Sequence[str]]]) -> "ShopCatalog":
        if shops is None:
            return cls()
        return cls.from_mapping(shops)

    def drinks_for(self, shop: str) -> Tuple[str, ...]:
        try:
            return self.shops[shop]
        except KeyError as exc:
            raise UnknownShopError(shop) from exc

    def shop_names(self) -> Tuple[str, ...]:
        return tuple(self.shops)

    def __contains__(self, shop: object) -> bool:
        return shop in self.shops

    def __iter__(self) -> Iterator[str]:
        return iter(self.shops)
