"""
ContentClient — typed, high-level wrapper around the Content API v2.1 service.

Single-resource calls return shopping.models objects; list calls return an
iterator of pages (lists of models) driven by shopping.pagination, so the
caller decides how to print and when to stop.
"""
from __future__ import annotations

import logging
from typing import Any, Iterator, Optional

from .models import (
    Account,
    AccountIdentifier,
    Datafeed,
    ItemLevelIssue,
    Price,
    Product,
    ProductStatus,
    ProductWarning,
)
from .pagination import iter_pages, map_pages
from .service_factory import ContentServiceFactory

logger = logging.getLogger(__name__)

# Content API caps maxResults at 250 for products, 50 for most other collections.
MAX_PAGE_SIZE = 250


class ContentClient:
    """
    High-level Content API operations for one merchant.

    Usage:
        factory = ContentServiceFactory(config)
        content = ContentClient(factory)

        for page in content.iter_products(merchant_id):
            for product in page:
                print(product.product_id, product.title)
    """

    def __init__(self, factory: ContentServiceFactory) -> None:
        self._svc = factory.content

    # ── Accounts ──────────────────────────────────────────────────────────────

    def authinfo(self) -> list[AccountIdentifier]:
        """Return the accounts the authenticated user can access."""
        resp = self._svc.accounts().authinfo().execute()
        return [_parse_identifier(raw) for raw in resp.get("accountIdentifiers", [])]

    def get_account(self, merchant_id: int, account_id: int) -> Account:
        raw = self._svc.accounts().get(merchantId=merchant_id, accountId=account_id).execute()
        return _parse_account(raw)

    def iter_accounts(self, merchant_id: int, max_results: int = 50) -> Iterator[list[Account]]:
        """Page through the sub-accounts of a multi-client account."""
        pages = iter_pages(
            self._svc.accounts().list, merchantId=merchant_id, maxResults=max_results
        )
        return map_pages(pages, _parse_account)

    # ── Products ──────────────────────────────────────────────────────────────

    def iter_products(
        self, merchant_id: int, max_results: int = MAX_PAGE_SIZE
    ) -> Iterator[list[Product]]:
        pages = iter_pages(
            self._svc.products().list, merchantId=merchant_id, maxResults=max_results
        )
        return map_pages(pages, _parse_product)

    def get_product(self, merchant_id: int, product_id: str) -> Product:
        raw = self._svc.products().get(merchantId=merchant_id, productId=product_id).execute()
        return _parse_product(raw)

    def insert_product(self, merchant_id: int, body: dict[str, Any]) -> Product:
        """Insert (or replace) a product and return the stored resource."""
        raw = self._svc.products().insert(merchantId=merchant_id, body=body).execute()
        product = _parse_product(raw)
        logger.info("Inserted product %s", product.product_id)
        return product

    def delete_product(self, merchant_id: int, product_id: str) -> None:
        self._svc.products().delete(merchantId=merchant_id, productId=product_id).execute()
        logger.info("Deleted product %s", product_id)

    # ── Product statuses ──────────────────────────────────────────────────────

    def iter_product_statuses(
        self, merchant_id: int, max_results: int = MAX_PAGE_SIZE
    ) -> Iterator[list[ProductStatus]]:
        pages = iter_pages(
            self._svc.productstatuses().list, merchantId=merchant_id, maxResults=max_results
        )
        return map_pages(pages, _parse_product_status)

    # ── Datafeeds ─────────────────────────────────────────────────────────────

    def iter_datafeeds(self, merchant_id: int, max_results: int = 50) -> Iterator[list[Datafeed]]:
        pages = iter_pages(
            self._svc.datafeeds().list, merchantId=merchant_id, maxResults=max_results
        )
        return map_pages(pages, _parse_datafeed)


# ── Parsers ───────────────────────────────────────────────────────────────────

def _optional_int(value: Any) -> Optional[int]:
    return int(value) if value not in (None, "") else None


def _parse_identifier(raw: dict) -> AccountIdentifier:
    return AccountIdentifier(
        merchant_id=_optional_int(raw.get("merchantId")),
        aggregator_id=_optional_int(raw.get("aggregatorId")),
    )


def _parse_account(raw: dict) -> Account:
    return Account(
        account_id=str(raw.get("id", "")),
        name=raw.get("name", ""),
        website_url=raw.get("websiteUrl", ""),
    )


def _parse_warning(raw: dict) -> ProductWarning:
    return ProductWarning(
        reason=raw.get("reason", ""),
        message=raw.get("message", ""),
    )


def _parse_product(raw: dict) -> Product:
    price = raw.get("price")
    return Product(
        product_id=raw.get("id", ""),
        offer_id=raw.get("offerId", ""),
        title=raw.get("title", ""),
        channel=raw.get("channel", ""),
        content_language=raw.get("contentLanguage", ""),
        target_country=raw.get("targetCountry", ""),
        link=raw.get("link", ""),
        price=Price(value=price.get("value", ""), currency=price.get("currency", "")) if price else None,
        warnings=[_parse_warning(w) for w in raw.get("warnings", [])],
    )


def _parse_issue(raw: dict) -> ItemLevelIssue:
    return ItemLevelIssue(
        code=raw.get("code", ""),
        description=raw.get("description", ""),
        servability=raw.get("servability", ""),
        destination=raw.get("destination", ""),
        attribute_name=raw.get("attributeName", ""),
    )


def _parse_product_status(raw: dict) -> ProductStatus:
    return ProductStatus(
        product_id=raw.get("productId", ""),
        title=raw.get("title", ""),
        link=raw.get("link", ""),
        item_level_issues=[_parse_issue(i) for i in raw.get("itemLevelIssues", [])],
    )


def _parse_datafeed(raw: dict) -> Datafeed:
    return Datafeed(
        datafeed_id=str(raw.get("id", "")),
        name=raw.get("name", ""),
        file_name=raw.get("fileName", ""),
    )
