#!/usr/bin/env python3
"""Seed the gift catalog with demo data.

Creates a few categories and products, each with its options, through
the same services the API uses.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --clear
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import structlog

from giftshop.catalog.dto import CategoryRequest, OptionAddRequest, ProductAddRequest
from giftshop.catalog.service import get_category_service, get_product_service
from giftshop.domain.exceptions import CatalogError, ErrorCode
from giftshop.infrastructure.database import (
    async_session_factory,
    create_schema,
    drop_schema,
    engine,
)
from giftshop.infrastructure.logging import configure_logging

logger = structlog.get_logger()

CATEGORIES = [
    CategoryRequest(
        name="교환권",
        color="#6c95d1",
        image_url="https://gift-s.kakaocdn.net/dn/gift/images/m640/dimm_theme.png",
        description="Vouchers redeemable in store",
    ),
    CategoryRequest(
        name="상품권",
        color="#ff8a65",
        image_url="https://gift-s.kakaocdn.net/dn/gift/images/m640/dimm_gift.png",
    ),
    CategoryRequest(
        name="뷰티",
        color="#ba68c8",
        image_url="https://gift-s.kakaocdn.net/dn/gift/images/m640/dimm_beauty.png",
    ),
]

# (category index, name, price, image, options)
PRODUCTS = [
    (0, "아이스 아메리카노 T", 4500, "https://example.com/americano.jpg",
     [("Tall", 100), ("Grande", 80), ("Venti", 50)]),
    (0, "카페 라떼 T", 5000, "https://example.com/latte.jpg",
     [("Hot", 120), ("Iced", 120)]),
    (1, "모바일 상품권 3만원", 30000, "https://example.com/voucher30.jpg",
     [("기본", 1000)]),
    (1, "모바일 상품권 5만원", 50000, "https://example.com/voucher50.jpg",
     [("기본", 1000)]),
    (2, "핸드크림 세트", 18000, "https://example.com/handcream.jpg",
     [("Rose", 40), ("Citrus", 35), ("Unscented", 25)]),
]


async def create_tables(clear: bool) -> None:
    """Create database tables, dropping existing ones first if asked."""
    if clear:
        await drop_schema()
    await create_schema()


async def seed() -> dict[str, int]:
    """Insert demo categories and products in one transaction.

    Entries that already exist are skipped.

    Returns:
        Counts of created rows.
    """
    created = {"categories": 0, "products": 0, "options": 0}

    async with async_session_factory() as session:
        category_service = get_category_service(session)
        product_service = get_product_service(session)

        existing = {c.name: c.id for c in await category_service.get_all_categories()}
        category_ids = []
        for request in CATEGORIES:
            if request.name not in existing:
                summary = await category_service.add_category(request)
                existing[summary.name] = summary.id
                created["categories"] += 1
            category_ids.append(existing[request.name])

        for category_index, name, price, image_url, options in PRODUCTS:
            request = ProductAddRequest(
                name=name,
                price=price,
                image_url=image_url,
                category_id=category_ids[category_index],
                options=[OptionAddRequest(name=n, quantity=q) for n, q in options],
            )
            try:
                await product_service.add_product(request)
            except CatalogError as e:
                if e.code is not ErrorCode.PRODUCT_ALREADY_EXISTS:
                    raise
                logger.info("Product already seeded", name=name)
                continue
            created["products"] += 1
            created["options"] += len(options)

        await session.commit()

    return created


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Seed the gift catalog")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Drop and recreate all tables before seeding",
    )
    args = parser.parse_args()

    configure_logging(json_output=False)

    await create_tables(clear=args.clear)
    result = await seed()
    logger.info("Seeding complete", **result)

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
