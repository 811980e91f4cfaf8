"""
Content API for Shopping samples — one module per API operation.

    samples.products_list         products.list (paged)
    samples.products_get          products.get
    samples.products_insert       products.insert of a generated sample product
    samples.products_delete       products.delete
    samples.productstatuses_list  productstatuses.list (paged)
    samples.datafeeds_list        datafeeds.list (paged)
    samples.accounts_list         accounts.list (paged, MCA only)
    samples.accounts_authinfo     accounts.authinfo

Run any of them with:
    python -m samples.products_list --config_path ~/shopping-samples
"""
