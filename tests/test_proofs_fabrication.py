"""Regression tests for simulated proof fabrication."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

import pytest

from chainproof.domain import FixedClock
from chainproof.proofs import (
    ProofFabricationConfig,
    ProofFabricationService,
    ProofPlaceholderValues,
    ProofRequestError,
)


class _RecordingSleep:
    """Sleep test double that records requested delays."""

    def __init__(self) -> None:
        """Initialize empty delay log.

        Returns:
            None: Initializer does not return values.

        Raises:
            RuntimeError: This stub does not raise runtime errors.
        """

        self.delays: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def test_proof_generate_fabricates_record_from_placeholders_after_delay() -> None:
    """Fabricate one proof using placeholders, the tx hash and the clock after the configured delay.

    Returns:
        None: Assertions validate fabricated proof content.

    Raises:
        AssertionError: Raised when fabricated values differ.
    """

    sleep = _RecordingSleep()
    service = ProofFabricationService(
        config=ProofFabricationConfig(delay_seconds=2.0),
        clock=FixedClock(datetime(2024, 1, 1, tzinfo=timezone.utc)),
        sleep=sleep,
        id_factory=lambda: "proof-1",
    )

    record = service.proof_generate("0xabc")

    assert sleep.delays == [2.0]
    assert record.proof_id == "proof-1"
    assert record.tx_hash == "0xabc"
    assert record.amount == "100.00"
    assert record.currency == "USDT0"
    assert record.sender == "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"
    assert record.recipient == "0x742d35Cc6634C0532925a3b844Bc454e4438f44f"
    assert record.timestamp == "2024-01-01T00:00:00.000Z"
    assert record.flare_anchor == "block-12345"
    assert record.record_hash == "0xdef123..."
    assert record.status == "verified"


def test_proof_generate_uses_configured_placeholders_and_skips_zero_delay() -> None:
    """Use configured placeholder values and skip the wait when delay is zero.

    Returns:
        None: Assertions validate configurable fabrication.

    Raises:
        AssertionError: Raised when configuration is ignored.
    """

    sleep = _RecordingSleep()
    service = ProofFabricationService(
        config=ProofFabricationConfig(
            delay_seconds=0.0,
            placeholders=ProofPlaceholderValues(amount="5.00", currency="FLR", status="pending"),
        ),
        sleep=sleep,
    )

    record = service.proof_generate("  0xdef  ")

    assert sleep.delays == []
    assert record.tx_hash == "  0xdef  "
    assert record.amount == "5.00"
    assert record.currency == "FLR"
    assert record.status == "pending"
    assert str(uuid.UUID(record.proof_id)) == record.proof_id


def test_proof_generate_assigns_unique_identifiers() -> None:
    """Assign a fresh identifier to every fabricated proof.

    Returns:
        None: Assertions validate identifier uniqueness.

    Raises:
        AssertionError: Raised when identifiers repeat.
    """

    service = ProofFabricationService(config=ProofFabricationConfig(delay_seconds=0.0))

    proof_ids = {service.proof_generate("0xabc").proof_id for _ in range(5)}

    assert len(proof_ids) == 5


@pytest.mark.parametrize("tx_hash", ["", "   ", "\n\t"])
def test_proof_generate_rejects_blank_transaction_hash(tx_hash: str) -> None:
    """Reject blank transaction hashes before waiting.

    Returns:
        None: Assertions validate request guard.

    Raises:
        AssertionError: Raised when blank hashes are accepted.
    """

    sleep = _RecordingSleep()
    service = ProofFabricationService(sleep=sleep)

    with pytest.raises(ProofRequestError, match="Please enter a transaction hash"):
        service.proof_generate(tx_hash)
    assert sleep.delays == []


def test_proof_fabrication_config_rejects_negative_delay() -> None:
    """Reject negative simulated delays at construction.

    Returns:
        None: Assertions validate configuration guard.

    Raises:
        AssertionError: Raised when negative delays are accepted.
    """

    with pytest.raises(ValueError):
        ProofFabricationService(config=ProofFabricationConfig(delay_seconds=-1.0))
