"""
Typed data models for Content API resources.

All classes are plain dataclasses — no external dependencies, safe to import
anywhere. Parsing from raw API dicts lives in shopping.content_client.
The samples only read these records; nothing here is sent back to the API.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


# ── Products ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ProductWarning:
    """A non-fatal, service-supplied annotation attached to a product."""

    reason: str
    message: str


@dataclass(frozen=True)
class Price:
    value: str
    currency: str

    def __str__(self) -> str:
        return f"{self.value} {self.currency}"


@dataclass(frozen=True)
class Product:
    """A product resource (REST ID format: channel:contentLanguage:targetCountry:offerId)."""

    product_id: str
    offer_id: str
    title: str
    channel: str = ""
    content_language: str = ""
    target_country: str = ""
    link: str = ""
    price: Optional[Price] = None
    warnings: list[ProductWarning] = field(default_factory=list)


@dataclass(frozen=True)
class ItemLevelIssue:
    """A data-quality issue reported for one destination of a product."""

    code: str
    description: str
    servability: str = ""
    destination: str = ""
    attribute_name: str = ""

    @property
    def is_disapproval(self) -> bool:
        return self.servability == "disapproved"


@dataclass(frozen=True)
class ProductStatus:
    product_id: str
    title: str
    link: str = ""
    item_level_issues: list[ItemLevelIssue] = field(default_factory=list)


# ── Accounts ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Account:
    """A Merchant Center account (or MCA sub-account)."""

    account_id: str
    name: str
    website_url: str = ""


@dataclass(frozen=True)
class AccountIdentifier:
    """
    One account the authenticated user can access.

    For a multi-client account (MCA) only aggregator_id is set; for a
    sub-account of an MCA both are set.
    """

    merchant_id: Optional[int] = None
    aggregator_id: Optional[int] = None

    @property
    def is_mca(self) -> bool:
        return self.aggregator_id is not None and self.merchant_id is None

    @property
    def account_id(self) -> Optional[int]:
        return self.merchant_id if self.merchant_id is not None else self.aggregator_id


# ── Datafeeds ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Datafeed:
    datafeed_id: str
    name: str
    file_name: str = ""
