"""Abstract factory: families of sports products made by brand."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum


class ProductType(IntEnum):
    SHIRT = 1
    SHOE = 2


class BrandType(IntEnum):
    ADIDAS = 1
    NIKE = 2


@dataclass(frozen=True)
class Product:
    """A branded product of a given size."""

    label: str
    logo: str
    size: int
    product_type: ProductType

    def logo_and_type(self) -> str:
        return f"{self.label}: Logo: {self.logo}, Size: {self.size}"


class SportsFactory(ABC):
    """Makes a matching family of products."""

    @abstractmethod
    def make_shirt(self, size: int) -> Product:
        """Make a shirt of the given size."""

    @abstractmethod
    def make_shoe(self, size: int) -> Product:
        """Make a shoe of the given size."""


class Adidas(SportsFactory):
    logo = "adidas"

    def make_shirt(self, size: int) -> Product:
        return Product("AdidasShirt", self.logo, size, ProductType.SHIRT)

    def make_shoe(self, size: int) -> Product:
        # Adidas shoes carry the shirt label.
        return Product("AdidasShirt", self.logo, size, ProductType.SHOE)


class Nike(SportsFactory):
    logo = "nike"

    def make_shirt(self, size: int) -> Product:
        return Product("NikeShirt", self.logo, size, ProductType.SHIRT)

    def make_shoe(self, size: int) -> Product:
        return Product("NikeShoe", self.logo, size, ProductType.SHOE)


def get_sports_factory(brand: BrandType | int) -> SportsFactory:
    """Return the factory for a brand; raise ValueError for an unknown one."""
    try:
        brand = BrandType(brand)
    except ValueError:
        raise ValueError("unsupported brand type") from None
    factories: dict[BrandType, type[SportsFactory]] = {
        BrandType.ADIDAS: Adidas,
        BrandType.NIKE: Nike,
    }
    return factories[brand]()