"""
Products List — every product of the merchant, fetched page by page.

Usage:
    python -m samples.products_list
    python -m samples.products_list --config_path ~/shopping-samples --max-results 50
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from shopping.config import DEFAULT_CONFIG_PATH
from shopping.content_client import MAX_PAGE_SIZE
from shopping.content_sample import ContentSample
from shopping.models import Product
from shopping.pagination import print_paged_list
from shopping.service_factory import ContentServiceFactory


class ProductsList(ContentSample):
    """List all products for the merchant, following page tokens."""

    def __init__(
        self,
        config_path: str | Path = DEFAULT_CONFIG_PATH,
        log_level: int = logging.INFO,
        factory: Optional[ContentServiceFactory] = None,
        max_results: int = MAX_PAGE_SIZE,
    ) -> None:
        super().__init__(config_path=config_path, log_level=log_level, factory=factory)
        self.max_results = max_results

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--max-results", type=int, default=MAX_PAGE_SIZE, metavar="N",
            help=f"Page size (default: {MAX_PAGE_SIZE})",
        )

    @classmethod
    def from_args(cls, args: argparse.Namespace, log_level: int) -> "ProductsList":
        return cls(
            config_path=args.config_path, log_level=log_level, max_results=args.max_results
        )

    def run(self) -> None:
        self.check_non_mca()
        self.logger.info("Listing products for merchant %s", self.merchant_id)

        pages = self.content.iter_products(self.merchant_id, max_results=self.max_results)
        count = print_paged_list(pages, self._print_product, "No products found.")
        self.logger.info("Listed %d product(s)", count)

    def _print_product(self, product: Product) -> None:
        print(f"- {product.product_id} {product.title}")
        self.print_warnings(product.warnings, "  ")


if __name__ == "__main__":
    ProductsList.main()
