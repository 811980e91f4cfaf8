"""
ContentServiceFactory — one OAuth2 credential, one Content API service object.

The credential, the authorised transport and the discovery-built service are
created lazily on first access and cached, so a sample that touches the
service several times authenticates once.

If GOOGLE_SHOPPING_SAMPLES_ENDPOINT is set, the service is bound to that
absolute URL instead of the public endpoint.

Usage:
    factory = ContentServiceFactory(config)
    content = factory.content          # googleapiclient Resource for content v2.1
    content.products().list(merchantId=123).execute()
"""
from __future__ import annotations

import logging
import os
import ssl
import sys
from typing import Any, Optional
from urllib.parse import urlsplit, urlunsplit

import google_auth_httplib2
import httplib2
from google.auth.credentials import Credentials
from googleapiclient import http as api_http
from googleapiclient.discovery import build

from .auth import CONTENT_SCOPE, authenticate
from .config import ConfigurationError, SampleConfig

logger = logging.getLogger(__name__)

ENDPOINT_ENV_VAR = "GOOGLE_SHOPPING_SAMPLES_ENDPOINT"
SERVICE_NAME = "content"
SERVICE_VERSION = "v2.1"


def split_endpoint(endpoint: str) -> tuple[str, str]:
    """
    Split an absolute endpoint URL into (root_url, service_path).

        "https://example.com/content/v2.1/" -> ("https://example.com/", "content/v2.1/")
    """
    try:
        parts = urlsplit(endpoint)
    except ValueError as exc:
        raise ConfigurationError(f"Malformed endpoint URL: {endpoint}") from exc
    if not parts.scheme or not parts.netloc:
        raise ConfigurationError(f"Endpoint URL must be absolute: {endpoint}")

    root_url = urlunsplit((parts.scheme, parts.netloc, "/", "", ""))
    return root_url, parts.path.lstrip("/")


def endpoint_override() -> Optional[str]:
    """
    Return the API base URL from ENDPOINT_ENV_VAR, or None when unset.

    Raises ConfigurationError for a relative or malformed URL.
    """
    endpoint = os.environ.get(ENDPOINT_ENV_VAR)
    if not endpoint:
        return None
    root_url, service_path = split_endpoint(endpoint)
    return root_url + service_path


def create_http_transport(credentials: Credentials, application_name: str) -> httplib2.Http:
    """
    Build an authorised httplib2 transport tagged with the application's user agent.

    Exits the process if the CA bundle used for TLS verification cannot be loaded.
    """
    try:
        ssl.create_default_context(cafile=httplib2.CA_CERTS)
    except (ssl.SSLError, OSError):
        logger.exception("Could not load trusted CA certificates from %s", httplib2.CA_CERTS)
        sys.exit(1)

    http = api_http.set_user_agent(api_http.build_http(), application_name)
    return google_auth_httplib2.AuthorizedHttp(credentials, http=http)


class ContentServiceFactory:
    """
    Constructs and caches the Content API service object for one sample run.

    The endpoint override is validated before credentials are requested, so a
    bad override never triggers an auth flow or a network call.
    """

    def __init__(self, config: SampleConfig, scopes: Optional[list[str]] = None) -> None:
        self._config = config
        self._scopes: list[str] = scopes or [CONTENT_SCOPE]
        self._creds: Optional[Credentials] = None
        self._service: Any = None

    # ── Credentials ───────────────────────────────────────────────────────────

    @property
    def credentials(self) -> Credentials:
        """Return OAuth2 credentials, authenticating on first access."""
        if self._creds is None:
            self._creds = authenticate(self._config.config_dir, self._scopes)
        return self._creds

    # ── Service ───────────────────────────────────────────────────────────────

    @property
    def content(self) -> Any:
        """Content API v2.1 service object."""
        if self._service is None:
            self._service = self._build()
        return self._service

    def _build(self) -> Any:
        endpoint = endpoint_override()

        kwargs: dict = {
            "http": create_http_transport(self.credentials, self._config.application_name),
            "cache_discovery": False,
        }
        if endpoint:
            kwargs["client_options"] = {"api_endpoint": endpoint}
            print(f"Using non-standard API endpoint: {endpoint}")

        logger.debug("Building %s %s service", SERVICE_NAME, SERVICE_VERSION)
        return build(SERVICE_NAME, SERVICE_VERSION, **kwargs)
