"""AB2Web SMS example: render a template and send it to one contact.

Run with:
    AB2WEB_API_KEY=... uv run python examples/ab2web_sms.py +918123456789
"""

from __future__ import annotations

import logging
import os
import sys

from ab2websms import (
    Ab2webConfig,
    Ab2webSmsProvider,
    ContactRecord,
    InMemoryCredentialProvider,
    Sent,
)


def main() -> int:
    logging.basicConfig(level=logging.INFO)

    # --- Configuration -------------------------------------------------------
    credentials = InMemoryCredentialProvider.with_api_key(os.environ.get("AB2WEB_API_KEY", ""))
    config = Ab2webConfig(default_region="IN", timeout=15.0)

    contact = ContactRecord(
        phone=sys.argv[1] if len(sys.argv) > 1 else "081234 56789",
        title="Ms",
        first_name="Asha",
        display_name="Asha Rao",
        city="Pune",
    )

    # --- Send ----------------------------------------------------------------
    with Ab2webSmsProvider(credentials, config) as provider:
        template = "Hello {contact_title} {contact_lastname} from {contact_city}!"
        result = provider.send(contact, template)

    if isinstance(result, Sent):
        print(f"Sent, message id {result.message_id}")
        return 0
    print(f"Not sent ({result.error}): {result.reason}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
