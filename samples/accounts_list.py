"""
Accounts List — sub-accounts of a multi-client account (MCA).

Usage:
    python -m samples.accounts_list
"""
from __future__ import annotations

from shopping.content_sample import ContentSample
from shopping.models import Account
from shopping.pagination import print_paged_list


class AccountsList(ContentSample):
    """List all sub-accounts of the configured multi-client account."""

    def run(self) -> None:
        self.check_mca()
        pages = self.content.iter_accounts(self.merchant_id)
        print_paged_list(pages, _print_account, "No sub-accounts found.")


def _print_account(account: Account) -> None:
    print(f'- {account.account_id} "{account.name}"')


if __name__ == "__main__":
    AccountsList.main()
