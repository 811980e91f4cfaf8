"""
Products Insert — insert a generated sample product.

The product links to the merchant's website URL, which must be claimed in
Merchant Center for the product to be approved.

Usage:
    python -m samples.products_insert
    python -m samples.products_insert --offer-id book123
"""
from __future__ import annotations

import argparse
import logging
import uuid
from pathlib import Path
from typing import Any, Optional

from shopping.config import DEFAULT_CONFIG_PATH, ConfigurationError
from shopping.content_sample import ContentSample
from shopping.service_factory import ContentServiceFactory

CHANNEL = "online"
CONTENT_LANGUAGE = "en"
TARGET_COUNTRY = "US"


def new_offer_id() -> str:
    return f"book#{uuid.uuid4().hex[:12]}"


def create_sample_product(offer_id: str, website_url: str) -> dict[str, Any]:
    """Return a products.insert body for a book sold online in the US."""
    base_url = website_url.rstrip("/")
    return {
        "offerId": offer_id,
        "title": "A Tale of Two Cities",
        "description": "A classic novel about the French Revolution",
        "link": f"{base_url}/tale-of-two-cities.html",
        "imageLink": f"{base_url}/image1.jpg",
        "contentLanguage": CONTENT_LANGUAGE,
        "targetCountry": TARGET_COUNTRY,
        "channel": CHANNEL,
        "availability": "in stock",
        "condition": "new",
        "googleProductCategory": "Media > Books",
        "gtin": "9780007350896",
        "price": {"value": "2.50", "currency": "USD"},
        "shipping": [{
            "country": TARGET_COUNTRY,
            "service": "Standard shipping",
            "price": {"value": "0.99", "currency": "USD"},
        }],
        "shippingWeight": {"value": "200", "unit": "grams"},
    }


class ProductsInsert(ContentSample):
    """Insert a sample product into the merchant's catalog."""

    def __init__(
        self,
        offer_id: Optional[str] = None,
        config_path: str | Path = DEFAULT_CONFIG_PATH,
        log_level: int = logging.INFO,
        factory: Optional[ContentServiceFactory] = None,
    ) -> None:
        super().__init__(config_path=config_path, log_level=log_level, factory=factory)
        self.offer_id = offer_id or new_offer_id()

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--offer-id", metavar="ID", default=None,
            help="Offer ID for the new product (default: random book#... ID)",
        )

    @classmethod
    def from_args(cls, args: argparse.Namespace, log_level: int) -> "ProductsInsert":
        return cls(args.offer_id, config_path=args.config_path, log_level=log_level)

    def run(self) -> None:
        self.check_non_mca()
        merchant_id = self.merchant_id
        if not self.config.website_url:
            raise ConfigurationError(
                f"Merchant Center {merchant_id} has no website URL; "
                "set websiteUrl in merchant-info.json"
            )

        body = create_sample_product(self.offer_id, self.config.website_url)
        product = self.content.insert_product(merchant_id, body)

        print(f'Product "{product.product_id}" with title "{product.title}" was created.')
        self.print_warnings(product.warnings, "  ")


if __name__ == "__main__":
    ProductsInsert.main()
