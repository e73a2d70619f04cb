"""JSON-compatible serialization helpers for output documents."""

from __future__ import annotations

import copy
import json
from typing import Any

from chainproof.domain.models import MessageKind, OutputDocument


def mapping_document_to_payload(document: OutputDocument) -> dict[str, object]:
    """Convert one output document into a JSON-compatible payload.

    Args:
        document: Output document to convert.

    Returns:
        dict[str, object]: Payload keyed by `type`, `version`, `createdAt`, `messageId` and `content`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    kind = document.kind.value if isinstance(document.kind, MessageKind) else document.kind
    return {
        "type": kind,
        "version": document.schema_version,
        "createdAt": document.generated_at,
        "messageId": document.message_id,
        "content": copy.deepcopy(document.body),
    }


def mapping_document_from_payload(payload: dict[str, Any]) -> OutputDocument:
    """Rebuild one output document from a decoded payload.

    Missing keys become empty strings (or None for `content`) and unknown kind
    strings are kept verbatim, so malformed payloads surface through the
    structural validator instead of raising.

    Args:
        payload: Decoded JSON object.

    Returns:
        OutputDocument: Reconstructed document, possibly structurally invalid.

    Raises:
        ValueError: Raised when payload is not a mapping.
    """

    if not isinstance(payload, dict):
        raise ValueError("payload must be a JSON object")

    raw_kind = payload.get("type", "")
    try:
        kind = MessageKind(raw_kind)
    except ValueError:
        kind = raw_kind

    return OutputDocument(
        kind=kind,
        schema_version=payload.get("version", ""),
        generated_at=payload.get("createdAt", ""),
        message_id=payload.get("messageId", ""),
        body=payload.get("content"),
    )


def mapping_serialize_json(payload: object) -> str:
    """Render one JSON-compatible payload as indented JSON text.

    Args:
        payload: Document payload, mapping of payloads, or proof bundle.

    Returns:
        str: Two-space indented JSON text.

    Raises:
        TypeError: Raised when payload contains non-JSON values.
    """

    return json.dumps(payload, indent=2, ensure_ascii=False)
