from decimal import Decimal
from typing import List

from .dtos import AFFILIATE, DROPSHIPPING, CatalogProduct

# (id, name, price, category, type, in_stock, discount, description, image, affiliate_url)
PRODUCTS = [
    (
        "1",
        "Wireless Bluetooth Headphones",
        "129.99",
        "Electronics",
        DROPSHIPPING,
        True,
        15,
        "Premium noise-cancelling headphones with 30-hour battery life and crystal clear sound quality.",
        "https://images.unsplash.com/photo-1505740420928-5e560c06d30e",
        None,
    ),
    (
        "2",
        "Smart Fitness Watch",
        "199.99",
        "Fitness",
        AFFILIATE,
        True,
        0,
        "Track your fitness goals with heart rate monitoring, GPS, and 7-day battery life.",
        "https://images.unsplash.com/photo-1579586337278-3befd40fd17a",
        "https://example.com/fitness-watch",
    ),
    (
        "3",
        "Portable Bluetooth Speaker",
        "79.99",
        "Electronics",
        DROPSHIPPING,
        True,
        10,
        "Waterproof speaker with 360° sound and 12-hour playtime, perfect for outdoor adventures.",
        "https://images.unsplash.com/photo-1608043152269-423dbba4e7e1",
        None,
    ),
    (
        "4",
        "Professional DSLR Camera",
        "899.99",
        "Photography",
        AFFILIATE,
        True,
        0,
        "24.1 megapixel camera with 4K video recording and interchangeable lens system.",
        "https://images.unsplash.com/photo-1516035069371-29a1b244cc32",
        "https://example.com/dslr-camera",
    ),
    (
        "5",
        "Smart Home Security System",
        "299.99",
        "Home",
        DROPSHIPPING,
        False,
        0,
        "Complete home security with motion sensors, cameras, and smartphone alerts.",
        "https://images.unsplash.com/photo-1558002038-1055e2dae1d7",
        None,
    ),
    (
        "6",
        "Ergonomic Office Chair",
        "249.99",
        "Furniture",
        AFFILIATE,
        True,
        20,
        "Adjustable lumbar support and breathable mesh back for all-day comfort.",
        "https://images.unsplash.com/photo-1505843490701-5be5d0b19d58",
        "https://example.com/office-chair",
    ),
    (
        "7",
        "Stainless Steel Water Bottle",
        "34.99",
        "Lifestyle",
        DROPSHIPPING,
        True,
        0,
        "Double-walled insulation keeps drinks cold for 24 hours or hot for 12 hours.",
        "https://images.unsplash.com/photo-1602143407151-7111542de6e8",
        None,
    ),
    (
        "8",
        "Wireless Charging Pad",
        "49.99",
        "Electronics",
        AFFILIATE,
        True,
        5,
        "Fast wireless charging for all Qi-enabled devices with sleek, minimalist design.",
        "https://images.unsplash.com/photo-1608042314453-ae338d80c427",
        "https://example.com/charging-pad",
    ),
]


def seed_products() -> List[CatalogProduct]:
    return [
        CatalogProduct(
            id=pid,
            name=name,
            price=Decimal(price),
            category=category,
            type=product_type,
            in_stock=in_stock,
            discount_percent=Decimal(discount),
            description=description,
            image=image,
            affiliate_url=affiliate_url,
        )
        for (
            pid,
            name,
            price,
            category,
            product_type,
            in_stock,
            discount,
            description,
            image,
            affiliate_url,
        ) in PRODUCTS
    ]
