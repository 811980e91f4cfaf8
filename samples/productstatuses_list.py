"""
Product Statuses List — every product status, with item-level issues.

Usage:
    python -m samples.productstatuses_list
"""
from __future__ import annotations

from shopping.content_sample import ContentSample
from shopping.models import ProductStatus
from shopping.pagination import print_paged_list


class ProductStatusesList(ContentSample):
    """List the status of every product for the merchant."""

    def run(self) -> None:
        self.check_non_mca()
        pages = self.content.iter_product_statuses(self.merchant_id)
        count = print_paged_list(pages, _print_status, "No product statuses found.")
        self.logger.info("Listed %d product status(es)", count)


def _print_status(status: ProductStatus) -> None:
    print(f'- {status.product_id} "{status.title}"')
    issues = status.item_level_issues
    if issues:
        print(f"  There are {len(issues)} issue(s):")
        for issue in issues:
            where = f" ({issue.destination})" if issue.destination else ""
            flag = " [disapproved]" if issue.is_disapproval else ""
            print(f"  - [{issue.code}] {issue.description}{where}{flag}")


if __name__ == "__main__":
    ProductStatusesList.main()
