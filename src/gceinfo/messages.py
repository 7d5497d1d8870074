"""
Bridges google-cloud-compute `compute_v1.Instance` messages and the REST
payload dicts understood by `gceinfo.wire`.

Proto messages cannot tell an empty repeated field from an absent one, so
lists read from a message are always present (possibly empty).
"""

import json
from typing import Any

from google.cloud import compute_v1


def payload_from_message(message: compute_v1.Instance) -> dict[str, Any]:
    """Serializes a message with its REST (camelCase) field names."""
    payload: dict[str, Any] = json.loads(
        compute_v1.Instance.to_json(message, use_integers_for_enums=False)
    )
    return payload


def message_from_payload(payload: dict[str, Any]) -> compute_v1.Instance:
    return compute_v1.Instance.from_json(
        json.dumps(payload), ignore_unknown_fields=True
    )
