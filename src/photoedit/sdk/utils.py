"""
Utility Functions

Helpers shared across the SDK.
"""

import json
from typing import Any


def build_api_url(base_url: str, path: str) -> str:
    """
    Join base URL and path without doubling slashes.

    Example:
        >>> build_api_url("http://localhost:2022/", "/api/rpc/getImage")
        'http://localhost:2022/api/rpc/getImage'
    """
    return base_url.rstrip("/") + "/" + path.lstrip("/")


def encode_mask(mask: Any) -> str:
    """
    Serialize a mask description for mask_data.

    Strings are passed through untouched so pre-serialized masks are not
    double-encoded.
    """
    if isinstance(mask, str):
        return mask
    return json.dumps(mask)

