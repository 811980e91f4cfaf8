"""
ContentSample — BaseSample bound to one Merchant Center account.

The Content API client and the merchant details missing from
merchant-info.json (merchant ID, MCA status, website URL) are resolved on
first use, so constructing a sample never authenticates or touches the network.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

from .base import BaseSample
from .config import DEFAULT_CONFIG_PATH, ConfigurationError, SampleConfig
from .content_client import ContentClient
from .models import AccountIdentifier, ProductWarning
from .service_factory import ContentServiceFactory


class ContentSample(BaseSample):
    """Base for samples that operate on the configured merchant."""

    def __init__(
        self,
        config_path: str | Path = DEFAULT_CONFIG_PATH,
        log_level: int = logging.INFO,
        factory: Optional[ContentServiceFactory] = None,
    ) -> None:
        super().__init__(config_path=config_path, log_level=log_level)
        self.factory = factory or ContentServiceFactory(self.config)
        self._content: Optional[ContentClient] = None
        self._resolved = False

    # ── Client / merchant ─────────────────────────────────────────────────────

    @property
    def content(self) -> ContentClient:
        if self._content is None:
            self._content = ContentClient(self.factory)
        return self._content

    @property
    def merchant_id(self) -> int:
        self._resolve_config()
        return self.config.merchant_id

    @property
    def is_mca(self) -> bool:
        self._resolve_config()
        return self.config.is_mca

    def _resolve_config(self) -> None:
        """Fill in merchant ID, MCA status and website URL from the API, once."""
        if self._resolved:
            return
        self.config = self._retrieve_remaining_config(self.config)
        self._resolved = True

    def _retrieve_remaining_config(self, config: SampleConfig) -> SampleConfig:
        identifiers = self.content.authinfo()
        if not identifiers:
            raise ConfigurationError(
                "The authenticated user does not have access to any Merchant Center accounts"
            )

        merchant_id = config.merchant_id
        if merchant_id is None:
            merchant_id = identifiers[0].account_id
            print(f"Running samples on Merchant Center {merchant_id}.")

        is_mca = _is_mca(identifiers, merchant_id)
        self.logger.debug("Merchant %s is_mca=%s", merchant_id, is_mca)

        website_url = config.website_url
        if not website_url:
            account = self.content.get_account(merchant_id, merchant_id)
            website_url = account.website_url
            if not website_url:
                self.logger.warning("No website URL is configured for Merchant Center %s", merchant_id)

        return replace(config, merchant_id=merchant_id, is_mca=is_mca, website_url=website_url)

    def check_mca(self) -> None:
        if not self.is_mca:
            raise ConfigurationError(
                "This operation can only be run on multi-client accounts (MCAs)."
            )

    def check_non_mca(self) -> None:
        if self.is_mca:
            raise ConfigurationError(
                "This operation cannot be run on multi-client accounts (MCAs)."
            )

    # ── Output helpers ────────────────────────────────────────────────────────

    @staticmethod
    def print_warnings(warnings: list[ProductWarning], prefix: str = "") -> None:
        if not warnings:
            return
        print(f"{prefix}There are {len(warnings)} warning(s):")
        for warning in warnings:
            print(f"{prefix}- [{warning.reason}] {warning.message}")


def _is_mca(identifiers: list[AccountIdentifier], merchant_id: int) -> bool:
    """MCA status from the first identifier naming merchant_id, as merchant or aggregator."""
    for ident in identifiers:
        if ident.merchant_id == merchant_id:
            return False
        if ident.aggregator_id == merchant_id:
            return True
    return False
