"""Simulated proof fabrication from configured placeholder values.

No transaction lookup happens here. The service waits a configured delay to
mimic a lookup round-trip and then assembles a proof record from placeholder
values, the caller's transaction hash and a fresh proof identifier.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass
from typing import Callable

from chainproof.domain.clock import Clock, SystemClock
from chainproof.domain.formatting import domain_format_iso_timestamp
from chainproof.domain.models import ProofRecord

logger = logging.getLogger(__name__)

PROOF_MISSING_TX_HASH_MESSAGE = "Please enter a transaction hash"


class ProofRequestError(ValueError):
    """Raised when a proof request cannot be accepted."""


@dataclass(frozen=True)
class ProofPlaceholderValues:
    """Placeholder values stamped onto every fabricated proof.

    Attributes:
        amount: Placeholder amount text.
        currency: Placeholder currency ticker.
        sender: Placeholder sender address.
        recipient: Placeholder recipient address.
        flare_anchor: Placeholder settlement anchor.
        record_hash: Placeholder record hash.
        status: Placeholder verification status.
    """

    amount: str = "100.00"
    currency: str = "USDT0"
    sender: str = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"
    recipient: str = "0x742d35Cc6634C0532925a3b844Bc454e4438f44f"
    flare_anchor: str = "block-12345"
    record_hash: str = "0xdef123..."
    status: str = "verified"


@dataclass(frozen=True)
class ProofFabricationConfig:
    """Configuration for simulated proof fabrication.

    Attributes:
        delay_seconds: Simulated lookup delay.
        placeholders: Placeholder values for fabricated proofs.
    """

    delay_seconds: float = 2.0
    placeholders: ProofPlaceholderValues = ProofPlaceholderValues()

    def proof_validate(self) -> None:
        """Validate fabrication configuration values.

        Returns:
            None: This method does not return a value.

        Raises:
            ValueError: Raised when configured values are invalid.
        """

        if self.delay_seconds < 0:
            raise ValueError("config.delay_seconds must not be negative")


class ProofFabricationService:
    """Fabricates proof records for a submitted transaction hash."""

    def __init__(
        self,
        config: ProofFabricationConfig | None = None,
        clock: Clock | None = None,
        sleep: Callable[[float], None] | None = None,
        id_factory: Callable[[], str] | None = None,
    ):
        """Initialize proof fabrication service.

        Args:
            config: Optional fabrication configuration values.
            clock: Optional clock used for the proof timestamp.
            sleep: Optional blocking wait used for the simulated delay.
            id_factory: Optional proof identifier factory. Defaults to UUID4 text.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when config values are invalid.
        """

        resolved_config = config or ProofFabricationConfig()
        resolved_config.proof_validate()

        self._config = resolved_config
        self._clock = clock or SystemClock()
        self._sleep = sleep or time.sleep
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))

    def proof_generate(self, tx_hash: str) -> ProofRecord:
        """Fabricate one proof record for a transaction hash.

        Args:
            tx_hash: Submitted transaction hash, kept verbatim.

        Returns:
            ProofRecord: Fabricated proof record.

        Raises:
            ProofRequestError: Raised when tx_hash is blank.
        """

        if not isinstance(tx_hash, str) or not tx_hash.strip():
            raise ProofRequestError(PROOF_MISSING_TX_HASH_MESSAGE)

        if self._config.delay_seconds > 0:
            self._sleep(self._config.delay_seconds)

        placeholders = self._config.placeholders
        record = ProofRecord(
            proof_id=self._id_factory(),
            tx_hash=tx_hash,
            amount=placeholders.amount,
            currency=placeholders.currency,
            sender=placeholders.sender,
            recipient=placeholders.recipient,
            timestamp=domain_format_iso_timestamp(self._clock.clock_now_utc()),
            flare_anchor=placeholders.flare_anchor,
            record_hash=placeholders.record_hash,
            status=placeholders.status,
        )
        logger.info("fabricated proof proof_id=%s tx_hash=%s", record.proof_id, record.tx_hash)
        return record


def proof_generate(tx_hash: str) -> ProofRecord:
    """Fabricate one proof record with default configuration.

    Args:
        tx_hash: Submitted transaction hash.

    Returns:
        ProofRecord: Fabricated proof record.

    Raises:
        ProofRequestError: Raised when tx_hash is blank.
    """

    service = ProofFabricationService()
    return service.proof_generate(tx_hash)
