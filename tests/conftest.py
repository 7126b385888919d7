import pytest

from core.catalog import Catalog
from core.engine import CommerceEngine
from core.models import Product, Review


def _make_product(
    id,
    title,
    price,
    rating,
    brand=None,
    category="mobiles",
    specs=None,
    images=(),
):
    return Product(
        id=id,
        title=title,
        price_inr=price,
        url=f"https://www.amazon.in/dp/{id}",
        brand=brand,
        category=category,
        rating=rating,
        rating_count=100,
        specs=specs or {},
        images=tuple(images),
    )


@pytest.fixture
def make_product():
    return _make_product


@pytest.fixture
def camx_pro():
    return _make_product(
        "B00PHONE001",
        "CamX Pro 5G Smartphone",
        13999,
        4.3,
        brand="CamX",
        specs={
            "camera": "50MP OIS main + 8MP ultra-wide",
            "battery": "5000 mAh",
            "display": '6.5" AMOLED 120Hz',
            "storage": "128GB",
            "ram": "6GB",
        },
        images=["https://example.com/img/camxpro-front.jpg"],
    )


@pytest.fixture
def products(camx_pro):
    return [
        camx_pro,
        _make_product(
            "B00PHONE002", "VoltMax Power 5G Phone", 11499, 4.1, brand="VoltMax",
            specs={"battery": "6000 mAh with 33W fast charge", "display": '6.6" LCD 90Hz'},
        ),
        _make_product(
            "B00PHONE003", "Pixelon Vivid Display Phone", 18999, 4.4, brand="Pixelon",
            specs={"battery": "4500 mAh", "display": '6.7" OLED 120Hz HDR10+'},
        ),
        _make_product(
            "B00PHONE004", "Turbo X1 Gaming Smartphone", 24999, 4.5, brand="Turbo",
            specs={"processor": "Snapdragon 8 Gen 2", "ram": "12GB"},
        ),
        _make_product(
            "B00PHONE005", "CamX Lite 4G Phone", 8999, 3.9, brand="CamX",
            specs={"camera": "13MP main", "battery": "5000 mAh"},
        ),
        # Same rating and price: only the id tells these two apart
        _make_product("B00PHONE007", "Budget Phone B", 9999, 4.1, brand="Generic"),
        _make_product("B00PHONE006", "Budget Phone A", 9999, 4.1, brand="Generic"),
        _make_product(
            "B00SKIN001", "HydraGlow Niacinamide Serum 30ml", 599, 4.2,
            brand="HydraGlow", category="skincare",
            specs={"ingredients": "niacinamide, zinc", "skinType": "oily"},
        ),
    ]


@pytest.fixture
def reviews():
    return {
        "B00PHONE001": [
            Review("B00PHONE001", 5, "Great camera!", "OIS helps a lot in night photos.", "camera"),
            Review("B00PHONE001", 4, "Good display", "120Hz feels smooth.", "display"),
        ],
        "B00PHONE002": [
            Review("B00PHONE002", 5, "Two-day battery", "Lasts two days.", "battery"),
        ],
        # Orphaned: no such product in the catalog
        "B00GHOST01": [
            Review("B00GHOST01", 3, "Discontinued?", "Can't find it anymore."),
        ],
    }


@pytest.fixture
def catalog(products, reviews):
    return Catalog.from_records(products, reviews)


@pytest.fixture
def engine(catalog):
    return CommerceEngine(catalog)


@pytest.fixture
def camx_engine(camx_pro, reviews):
    """An engine whose catalog holds only the CamX Pro."""
    return CommerceEngine(Catalog.from_records([camx_pro], {"B00PHONE001": reviews["B00PHONE001"]}))
