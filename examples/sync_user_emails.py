#!/usr/bin/env python3
"""Copy user e-mail addresses from one SharePoint list into another.

Reads the site's user information list (expanded with the EMail field),
then creates one item per user in a target list.

Usage:
    1. Register an app with Sites.ReadWrite.All application permission
    2. Set the environment variables below
    3. Run: python sync_user_emails.py

Environment Variables:
    GRAPH_CLIENT_ID: Application (client) ID
    GRAPH_TENANT_ID: Directory (tenant) ID
    GRAPH_CLIENT_SECRET: Client secret (a Key Vault reference in Azure Functions)
    GRAPH_SITE_ID: Site holding both lists
    SOURCE_LIST_ID: User information list ID
    TARGET_LIST_ID: List to populate
"""

import asyncio
import json
import logging
import os
import sys

from graph_list_kit import (
    Credentials,
    EnvironmentSecretSource,
    GraphListClient,
    NewItem,
    PageQuery,
    ResourceLocator,
    UserLookupItem,
    load_config,
    parse_items,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


async def main() -> int:
    credentials = Credentials.from_secret_source(
        client_id=os.environ["GRAPH_CLIENT_ID"],
        tenant_id=os.environ["GRAPH_TENANT_ID"],
        secret_name="GRAPH_CLIENT_SECRET",
        source=EnvironmentSecretSource(),
    )
    site_id = os.environ["GRAPH_SITE_ID"]
    source = ResourceLocator(site_id=site_id, list_id=os.environ["SOURCE_LIST_ID"])
    target = ResourceLocator(site_id=site_id, list_id=os.environ["TARGET_LIST_ID"])

    client = GraphListClient(load_config())

    token_result = await client.acquire_token(credentials)
    if not token_result.ok:
        print(f"Token request failed: {token_result.payload}")
        return 1
    token = token_result.value

    read = await client.get_items(source, token, PageQuery(item_fields=["EMail"], page_limit=20))
    if not read.ok:
        print(f"Read failed: {read.payload}")
        return 1
    if read.details.get("truncated"):
        print("Warning: page limit reached, some users were not read")

    emails = [
        item.lookup_data.email
        for item in parse_items(read.value, UserLookupItem)
        if item.lookup_data and item.lookup_data.email
    ]
    print(f"Found {len(emails)} user(s) with an e-mail address")
    if not emails:
        return 0

    items = [NewItem(json_body=json.dumps({"fields": {"Title": email}})) for email in emails]
    write = await client.create_items(items, target, token)
    if not write.ok:
        print(f"Write failed: {write.payload}")
        return 1

    print(f"Created {len(items)} item(s)")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
