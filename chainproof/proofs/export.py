"""Downloadable proof bundle and share-link helpers."""

from __future__ import annotations

from chainproof.domain.clock import Clock, SystemClock
from chainproof.domain.formatting import domain_format_iso_timestamp, domain_truncate_identifier
from chainproof.domain.models import ProofRecord
from chainproof.mapping.service import MAPPING_NETWORK_NAME, MAPPING_REPORTING_ENTITY

PROOF_BUNDLE_VERSION = "1.0.0"
PROOF_BUNDLE_TYPE = "Payment Proof"
PROOF_HASH_ROUTE_PREFIX = "#proof-"
PROOF_DEFAULT_SHARE_BASE_URL = "https://chainproof.app"
PROOF_DEFAULT_EXPLORER_TX_BASE_URL = "https://coston2-explorer.flare.network/tx/"


def proof_build_share_url(record: ProofRecord, base_url: str = PROOF_DEFAULT_SHARE_BASE_URL) -> str:
    """Build the shareable hash-routed link for one proof.

    Args:
        record: Proof record.
        base_url: Application base URL.

    Returns:
        str: Link such as `https://chainproof.app/#proof-<proof_id>`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return f"{base_url.rstrip('/')}/{PROOF_HASH_ROUTE_PREFIX}{record.proof_id}"


def proof_build_explorer_url(record: ProofRecord, base_url: str = PROOF_DEFAULT_EXPLORER_TX_BASE_URL) -> str:
    """Build the block explorer link for the proof's transaction."""

    return f"{base_url}{record.tx_hash}"


def proof_build_download_filename(record: ProofRecord, extension: str = "json") -> str:
    """Build the download file name for one exported proof.

    Args:
        record: Proof record.
        extension: File extension without leading dot.

    Returns:
        str: File name such as `chainproof-<proof_id>.json`.

    Raises:
        ValueError: Raised when extension is blank.
    """

    normalized_extension = extension.strip().lstrip(".")
    if not normalized_extension:
        raise ValueError("extension must not be blank")
    return f"chainproof-{record.proof_id}.{normalized_extension}"


def proof_build_bundle(
    record: ProofRecord,
    clock: Clock | None = None,
    share_base_url: str = PROOF_DEFAULT_SHARE_BASE_URL,
    explorer_tx_base_url: str = PROOF_DEFAULT_EXPLORER_TX_BASE_URL,
) -> dict[str, object]:
    """Build the downloadable JSON proof bundle for one proof.

    Args:
        record: Proof record.
        clock: Optional clock for the bundle generation timestamp.
        share_base_url: Application base URL for the shareable link.
        explorer_tx_base_url: Block explorer transaction URL prefix.

    Returns:
        dict[str, object]: JSON-compatible bundle with metadata, verification,
        transaction and proof sections.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    resolved_clock = clock or SystemClock()
    return {
        "metadata": {
            "generator": MAPPING_REPORTING_ENTITY,
            "version": PROOF_BUNDLE_VERSION,
            "generatedAt": domain_format_iso_timestamp(resolved_clock.clock_now_utc()),
            "proofId": record.proof_id,
        },
        "verification": {
            "status": record.status,
            "network": MAPPING_NETWORK_NAME,
            "anchor": record.flare_anchor,
            "explorerUrl": proof_build_explorer_url(record, explorer_tx_base_url),
        },
        "transaction": {
            "hash": record.tx_hash,
            "amount": record.amount,
            "currency": record.currency,
            "sender": record.sender,
            "recipient": record.recipient,
            "timestamp": record.timestamp,
            "recordHash": record.record_hash,
        },
        "proof": {
            "type": PROOF_BUNDLE_TYPE,
            "description": (
                f"Proof of payment of {record.amount} {record.currency} "
                f"from {domain_truncate_identifier(record.sender)} "
                f"to {domain_truncate_identifier(record.recipient)}"
            ),
            "shareableUrl": proof_build_share_url(record, share_base_url),
        },
    }
