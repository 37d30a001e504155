"""Python client for the Sajari search and indexing service.

Typical use::

    from sajari_sdk.client import Client
    from sajari_sdk.query import Request, FieldFilter

    async with Client("project", "collection") as client:
        results = await client.query().search(
            Request(filter=FieldFilter("price <", 100), limit=10)
        )
"""

__version__ = "0.1.0"
