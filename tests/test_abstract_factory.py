import pytest

from lldkit.abstract_factory import (
    BrandType,
    ProductType,
    get_sports_factory,
)


def test_nike_shirt_description():
    shirt = get_sports_factory(BrandType.NIKE).make_shirt(14)
    assert shirt.logo_and_type() == "NikeShirt: Logo: nike, Size: 14"


def test_adidas_shoe_carries_shirt_label():
    shoe = get_sports_factory(BrandType.ADIDAS).make_shoe(18)
    assert shoe.logo_and_type() == "AdidasShirt: Logo: adidas, Size: 18"
    assert shoe.product_type is ProductType.SHOE


@pytest.mark.parametrize(
    "brand, logo", [(BrandType.ADIDAS, "adidas"), (BrandType.NIKE, "nike")]
)
def test_factory_products_share_brand_logo(brand, logo):
    factory = get_sports_factory(brand)
    shirt = factory.make_shirt(10)
    shoe = factory.make_shoe(11)
    assert shirt.logo == shoe.logo == logo
    assert (shirt.size, shoe.size) == (10, 11)
    assert shirt.product_type is ProductType.SHIRT
    assert shoe.product_type is ProductType.SHOE


def test_nike_shoe_label():
    shoe = get_sports_factory(BrandType.NIKE).make_shoe(9)
    assert shoe.logo_and_type().startswith("NikeShoe: Logo: nike")


def test_plain_integer_brand_accepted():
    assert get_sports_factory(2).make_shirt(1).logo == "nike"


@pytest.mark.parametrize("brand", [5, 0, "x"])
def test_unknown_brand_rejected(brand):
    with pytest.raises(ValueError, match="unsupported brand type"):
        get_sports_factory(brand)