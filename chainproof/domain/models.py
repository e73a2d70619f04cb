"""Typed domain models shared across runtime layers.

This module provides the proof-record input contract and the kind-tagged output
document contract used by the ProofRails mapping layer.
"""

from dataclasses import dataclass
from enum import Enum


class MessageKind(str, Enum):
    """Closed set of ISO 20022-aligned output document kinds."""

    PAIN = "PAIN"  # payment initiation
    PACS = "PACS"  # payment status
    CAMT = "CAMT"  # cash-management statement
    REMT = "REMT"  # remittance advice


@dataclass(frozen=True)
class ProofRecord:
    """Canonical payment-proof record consumed by every document mapper.

    All values are opaque strings passed through verbatim. The mapping layer
    never parses, validates, or mutates them.

    Attributes:
        proof_id: Unique proof identifier.
        tx_hash: Referenced transaction hash.
        amount: Decimal amount encoded as text.
        currency: Currency or token ticker.
        sender: Sender address.
        recipient: Recipient address.
        timestamp: ISO-8601 proof creation timestamp.
        flare_anchor: Settlement network anchor reference.
        record_hash: Precomputed content hash of the proof.
        status: Verification state label, for example `verified`.
    """

    proof_id: str
    tx_hash: str
    amount: str
    currency: str
    sender: str
    recipient: str
    timestamp: str
    flare_anchor: str
    record_hash: str
    status: str


@dataclass(frozen=True)
class OutputDocument:
    """Kind-tagged output document produced by one mapping call.

    Attributes:
        kind: Document kind tag.
        schema_version: Fixed schema version literal for the kind.
        generated_at: ISO-8601 UTC timestamp of the mapping call.
        message_id: Deterministic `<KIND>-<proof_id>` identifier.
        body: Kind-specific nested document content.
    """

    kind: MessageKind
    schema_version: str
    generated_at: str
    message_id: str
    body: dict[str, object]

