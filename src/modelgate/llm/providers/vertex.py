"""Vertex AI client construction.

Credentials come from ``VERTEX_CREDENTIALS`` (a base64-encoded service
account JSON document) when set, otherwise from a key file on disk.  The
key file is only read by litellm when a request is sent, so a missing file
is not an error at startup.  Malformed inline credentials are.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Any

from modelgate.exceptions import ProviderConfigError
from modelgate.llm.providers.client import ProviderClient
from modelgate.llm.providers.types import Provider

logger = logging.getLogger(__name__)


def load_vertex_credentials(encoded: str) -> dict[str, Any]:
    """Decode base64-encoded JSON service account credentials."""
    try:
        decoded = base64.b64decode("".join(encoded.split()), validate=True).decode("utf-8")
        credentials = json.loads(decoded)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ProviderConfigError(f"VERTEX_CREDENTIALS is not valid base64 JSON: {exc}") from exc

    if not isinstance(credentials, dict):
        raise ProviderConfigError("VERTEX_CREDENTIALS must decode to a JSON object")
    return credentials


def create_vertex(
    *,
    project: str,
    location: str,
    credentials: str = "",
    key_file: str = "",
) -> ProviderClient:
    if credentials:
        vertex_credentials = json.dumps(load_vertex_credentials(credentials))
        logger.debug("Vertex client using inline credentials")
    else:
        vertex_credentials = key_file or None
        logger.debug("Vertex client using key file: %s", key_file)

    return ProviderClient(
        provider=Provider.VERTEX,
        prefix="vertex_ai/",
        options={
            "vertex_project": project,
            "vertex_location": location,
            "vertex_credentials": vertex_credentials,
        },
    )
