"""
Demo Store Catalog
Fixed data used to seed a fresh store with demo products

Used by: app/services/mock_service.py

Author: TM3
Date: 2025-12-02
"""
from dataclasses import dataclass, asdict, field
from typing import Dict, List, Optional


@dataclass
class AttributeValue:
    """One selectable value of an attribute (optionally with a swatch icon)"""
    value: str
    icon: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"value": self.value}
        if self.icon:
            data["icon"] = self.icon
        return data


@dataclass
class Attribute:
    """Product attribute definition (Size, Color, ...)"""
    key: str
    values: List[AttributeValue]
    type: str = "radio"

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "values": [v.to_dict() for v in self.values],
            "type": self.type,
        }


@dataclass
class ReviewTemplate:
    """Review text attached to random products"""
    title: str
    description: str
    rating: float
    user_name: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ProductTemplate:
    """Product seeded `times` times by mock_products"""
    name: str
    price: float
    old_price: Optional[float] = None


@dataclass
class Category:
    """Product category to create; parent_id links subcategories"""
    name: str
    description: str
    parent_id: Optional[int] = None


@dataclass
class DemoProduct:
    """Product ready to be stored"""
    name: str
    price: float
    old_price: Optional[float]
    main_image: str
    images: List[str]
    description: str
    attributes: List[Dict]
    category_ids: List[int] = field(default_factory=list)
    views: int = 0


# ================================================================================
# ATTRIBUTES
# ================================================================================

SIZE_ATTRIBUTE = Attribute(
    key="Size",
    values=[AttributeValue(str(size)) for size in range(35, 46)],
)

COLOR_ATTRIBUTE = Attribute(
    key="Color",
    values=[
        AttributeValue("Orange", icon="/plugins/ProductFilter/color_orange.png"),
        AttributeValue("Purple", icon="/plugins/ProductFilter/color_purple.png"),
        AttributeValue("Blue", icon="/plugins/ProductFilter/color_blue.png"),
    ],
)

CONDITION_ATTRIBUTE = Attribute(
    key="Condition",
    values=[AttributeValue("New"), AttributeValue("Used")],
)

DEMO_ATTRIBUTES: List[Attribute] = [SIZE_ATTRIBUTE, COLOR_ATTRIBUTE, CONDITION_ATTRIBUTE]


# ================================================================================
# REVIEWS
# ================================================================================

DEMO_REVIEWS: List[ReviewTemplate] = [
    ReviewTemplate("Just awesome", "Best product ever!!!", 5, "Kevin"),
    ReviewTemplate("All good", "Satisfied on 99%", 4.5, "Jim"),
    ReviewTemplate("Nothing special", "You can go with it, but I'm good", 4, "Dwight"),
    ReviewTemplate("Not bad", "To be honest it could be worse but well it wasn't", 3.5, "Tobby"),
    ReviewTemplate("Could be better", "Actually, for the record, it is NOT good", 3, "Oscar"),
    ReviewTemplate("", "Ryan doesn't like it", 2.5, "Kelly"),
    ReviewTemplate("", "Remind me not to buy this stuff again", 2, "Creed"),
    ReviewTemplate("", "Way too flashy", 1.5, "Angela"),
    ReviewTemplate("", "How could it be SO bad?!", 1, "Michael"),
]


# ================================================================================
# PRODUCTS
# ================================================================================

DEMO_PRODUCTS: List[ProductTemplate] = [
    ProductTemplate("Top Laptop", 231.0, 869.0),
    ProductTemplate("YouPhone", 210.0, 1024.0),
    ProductTemplate("Throbber", 1, 2),
    ProductTemplate("Teapot", 10.0, 11.0),
    ProductTemplate("Intelligent Artificency", 920.0, 720.0),
    ProductTemplate("Space Trampoline", 1490.0, 1490.01),
    ProductTemplate("Meaning of 42", 42.0),
    ProductTemplate("CyberCowboy", 9128.0),
]

# Image -> colour shown on it
DEMO_IMAGES: Dict[str, str] = {
    "/themes/demoshop/product.jpg": "Blue",
    "/themes/demoshop/product_2.jpg": "Orange",
    "/themes/demoshop/product_3.jpg": "Purple",
}

# Gallery size besides the main image
DEMO_GALLERY_SIZE = 6

DEMO_CATEGORIES_COUNT = 20
DEMO_MAX_SUBCATEGORIES = 4

DEMO_DESCRIPTION = (
    '<p>Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor '
    'incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud '
    'exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat. Duis aute irure '
    'dolor in reprehenderit in voluptate velit esse cillum dolore eu fugiat nulla pariatur. '
    'Excepteur sint occaecat.</p>'
    '<ul><li><i class="icon-ok"></i>Any Product types that You want - Simple, Configurable</li>'
    '<li><i class="icon-ok"></i>Downloadable/Digital Products, Virtual Products</li>'
    '<li><i class="icon-ok"></i>Inventory Management with Backordered items</li></ul>'
    '<p>Sed do eiusmod tempor incididunt ut labore et dolore magna aliqua. Ut enim ad minim '
    'veniam, <br>quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea commodo '
    'consequat.</p>'
)
