"""
Products Delete — remove one product by its REST ID.

Usage:
    python -m samples.products_delete --product-id online:en:US:book123
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from shopping.config import DEFAULT_CONFIG_PATH
from shopping.content_sample import ContentSample
from shopping.service_factory import ContentServiceFactory


class ProductsDelete(ContentSample):
    """Delete a single product by ID."""

    def __init__(
        self,
        product_id: str,
        config_path: str | Path = DEFAULT_CONFIG_PATH,
        log_level: int = logging.INFO,
        factory: Optional[ContentServiceFactory] = None,
    ) -> None:
        super().__init__(config_path=config_path, log_level=log_level, factory=factory)
        self.product_id = product_id

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--product-id", required=True, metavar="ID",
            help="REST ID of the product, e.g. online:en:US:book123",
        )

    @classmethod
    def from_args(cls, args: argparse.Namespace, log_level: int) -> "ProductsDelete":
        return cls(args.product_id, config_path=args.config_path, log_level=log_level)

    def run(self) -> None:
        self.check_non_mca()
        self.content.delete_product(self.merchant_id, self.product_id)
        print(f'Product "{self.product_id}" was deleted.')


if __name__ == "__main__":
    ProductsDelete.main()
