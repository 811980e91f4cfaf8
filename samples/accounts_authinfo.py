"""
Accounts Authinfo — the Merchant Center accounts the current user can access.

Usage:
    python -m samples.accounts_authinfo
"""
from __future__ import annotations

from shopping.content_sample import ContentSample


class AccountsAuthinfo(ContentSample):
    """Print the account identifiers available to the authenticated user."""

    def run(self) -> None:
        identifiers = self.content.authinfo()
        if not identifiers:
            print("The currently authenticated user does not have access to any accounts.")
            return

        for ident in identifiers:
            if ident.is_mca:
                print(f"- Multi-client account {ident.aggregator_id}")
            elif ident.aggregator_id is not None:
                print(f"- Sub-account {ident.merchant_id} of multi-client account {ident.aggregator_id}")
            else:
                print(f"- Merchant Center account {ident.merchant_id}")


if __name__ == "__main__":
    AccountsAuthinfo.main()
