"""
Datafeeds List — every datafeed configured for the merchant.

Usage:
    python -m samples.datafeeds_list
"""
from __future__ import annotations

from shopping.content_sample import ContentSample
from shopping.models import Datafeed
from shopping.pagination import print_paged_list


class DatafeedsList(ContentSample):
    """List all datafeeds for the merchant."""

    def run(self) -> None:
        self.check_non_mca()
        pages = self.content.iter_datafeeds(self.merchant_id)
        print_paged_list(pages, _print_datafeed, "No datafeeds found.")


def _print_datafeed(feed: Datafeed) -> None:
    print(f'- {feed.datafeed_id} "{feed.name}" ({feed.file_name})')


if __name__ == "__main__":
    DatafeedsList.main()
