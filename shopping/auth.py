"""
Google OAuth2 credentials for the Content API samples.

Credential sources, tried in order:
  1. service-account.json in the content config directory
  2. client-secrets.json + stored-token.json (installed-app flow); the token
     is refreshed silently, or the browser flow runs on first use, and the
     result is saved back to stored-token.json
  3. Application Default Credentials (gcloud, GCE metadata server, ...)

Usage:
    from shopping.auth import authenticate
    creds = authenticate(content_dir, [CONTENT_SCOPE])
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import google.auth
from google.auth.credentials import Credentials
from google.auth.exceptions import DefaultCredentialsError
from google.auth.transport.requests import Request
from google.oauth2 import credentials as user_credentials
from google.oauth2 import service_account
from google_auth_oauthlib.flow import InstalledAppFlow

logger = logging.getLogger(__name__)

CONTENT_SCOPE = "https://www.googleapis.com/auth/content"

SERVICE_ACCOUNT_FILE = "service-account.json"
CLIENT_SECRETS_FILE = "client-secrets.json"
TOKEN_FILE = "stored-token.json"


class AuthenticationError(RuntimeError):
    pass


def _from_service_account(content_dir: Path, scopes: list[str]) -> Optional[Credentials]:
    path = content_dir / SERVICE_ACCOUNT_FILE
    if not path.exists():
        return None
    logger.info("Loading service account credentials from %s", path)
    return service_account.Credentials.from_service_account_file(str(path), scopes=scopes)


def _from_client_secrets(content_dir: Path, scopes: list[str]) -> Optional[Credentials]:
    secrets_file = content_dir / CLIENT_SECRETS_FILE
    if not secrets_file.exists():
        return None

    token_file = content_dir / TOKEN_FILE
    creds = None
    if token_file.exists():
        creds = user_credentials.Credentials.from_authorized_user_file(str(token_file), scopes)

    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            creds.refresh(Request())
            logger.info("Stored token refreshed")
        else:
            flow = InstalledAppFlow.from_client_secrets_file(str(secrets_file), scopes)
            creds = flow.run_local_server(port=0)
            logger.info("OAuth flow completed")

        token_file.write_text(creds.to_json(), encoding="utf-8")
        logger.info("Token saved to %s", token_file)

    return creds


def _from_application_default(scopes: list[str]) -> Optional[Credentials]:
    try:
        creds, _project = google.auth.default(scopes=scopes)
    except DefaultCredentialsError:
        return None
    logger.info("Using Application Default Credentials")
    return creds


def authenticate(content_dir: Path, scopes: Optional[list[str]] = None) -> Credentials:
    """
    Return credentials able to sign Content API requests.

    Raises AuthenticationError when no credential source is configured. File
    and token-refresh errors propagate unchanged.
    """
    scopes = scopes or [CONTENT_SCOPE]
    for source in (_from_service_account, _from_client_secrets):
        creds = source(content_dir, scopes)
        if creds is not None:
            return creds

    creds = _from_application_default(scopes)
    if creds is not None:
        return creds

    raise AuthenticationError(
        f"No OAuth2 credentials found. Place {SERVICE_ACCOUNT_FILE} or "
        f"{CLIENT_SECRETS_FILE} in {content_dir}, or configure Application "
        "Default Credentials."
    )
