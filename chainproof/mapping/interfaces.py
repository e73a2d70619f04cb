"""Typed interfaces for ProofRails document mapping."""

from typing import Protocol

from chainproof.domain.models import MessageKind, OutputDocument, ProofRecord


class MessageMapperPort(Protocol):
    """Port definition for mapping proof records into ISO-aligned documents."""

    def mapping_to_payment_initiation(self, record: ProofRecord) -> OutputDocument:
        """Map a proof record into a payment-initiation document.

        Args:
            record: Proof record to map.

        Returns:
            OutputDocument: PAIN document.

        Raises:
            RuntimeError: Mapping does not raise runtime errors.
        """

    def mapping_to_payment_status(self, record: ProofRecord) -> OutputDocument:
        """Map a proof record into a payment-status document.

        Args:
            record: Proof record to map.

        Returns:
            OutputDocument: PACS document.

        Raises:
            RuntimeError: Mapping does not raise runtime errors.
        """

    def mapping_to_cash_management(self, record: ProofRecord) -> OutputDocument:
        """Map a proof record into a cash-management statement document.

        Args:
            record: Proof record to map.

        Returns:
            OutputDocument: CAMT document.

        Raises:
            RuntimeError: Mapping does not raise runtime errors.
        """

    def mapping_to_remittance_advice(self, record: ProofRecord) -> OutputDocument:
        """Map a proof record into a remittance-advice document.

        Args:
            record: Proof record to map.

        Returns:
            OutputDocument: REMT document.

        Raises:
            RuntimeError: Mapping does not raise runtime errors.
        """

    def mapping_to_all(self, record: ProofRecord) -> dict[MessageKind, OutputDocument]:
        """Map a proof record into all four document kinds.

        Args:
            record: Proof record to map.

        Returns:
            dict[MessageKind, OutputDocument]: One document per kind.

        Raises:
            RuntimeError: Mapping does not raise runtime errors.
        """
