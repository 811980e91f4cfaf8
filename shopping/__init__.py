"""
Shopping samples — Content API for Shopping integration library.

Package structure:
    shopping.base             — BaseSample abstract class (logging, timing, CLI)
    shopping.content_sample   — ContentSample (merchant resolution, MCA checks)
    shopping.config           — SampleConfig, config directory checks
    shopping.auth             — OAuth2 credentials (service account / user / ADC)
    shopping.service_factory  — ContentServiceFactory (single credential, lazy service)
    shopping.content_client   — ContentClient
    shopping.pagination       — page-token loop
    shopping.errors           — 4xx API error reporting
    shopping.models           — Typed dataclasses (Product, Account, Datafeed, ...)
"""
