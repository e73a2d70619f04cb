"""ProofRails mapping service for proof-record to ISO-aligned document transformations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from chainproof.domain.clock import Clock, SystemClock
from chainproof.domain.formatting import (
    domain_format_iso_timestamp,
    domain_format_locale_timestamp,
    domain_format_status_label,
    domain_truncate_identifier,
)
from chainproof.domain.models import MessageKind, OutputDocument, ProofRecord

logger = logging.getLogger(__name__)

MAPPING_SCHEMA_VERSIONS: dict[MessageKind, str] = {
    MessageKind.PAIN: "008.003.02",
    MessageKind.PACS: "008.003.02",
    MessageKind.CAMT: "053.002.02",
    MessageKind.REMT: "002.004.01",
}

MAPPING_NETWORK_NAME = "Flare Network"
MAPPING_REPORTING_ENTITY = "ChainProof"
MAPPING_VERIFIED_STATUS = "verified"

MAPPING_PAYMENT_METHOD = "ESCT"  # electronic credit transfer
MAPPING_PAYMENT_TYPE_CODE = "STD"
MAPPING_INSTRUCTION_PRIORITY = "NORM"
MAPPING_CHARGE_BEARER = "SHAR"
MAPPING_DEBTOR_NAME = "Payment Initiator"
MAPPING_CREDITOR_NAME = "Payment Recipient"

MAPPING_STATUS_CODE_ACCEPTED_CLEARED = "ACCC"
MAPPING_STATUS_CODE_ACCEPTED_PENDING = "ACCP"
MAPPING_STATUS_REASON_CODE = "COMC"  # compliance
MAPPING_STATUS_REASON_TEXT = "Payment verified on Flare Network"

MAPPING_STATEMENT_FREQUENCY = "ONET"  # one-time
MAPPING_TRANSACTION_TYPE = "DEBIT"
MAPPING_BALANCE_TYPE = "XPCD"  # expected credit

MAPPING_REMITTER_NAME = "Payment Sender"
MAPPING_PAYEE_NAME = "Payment Recipient"
MAPPING_DOCUMENT_TYPE = "PROOF"
MAPPING_INVOICE_STATUS = "PAID"
MAPPING_REMITTANCE_TITLE = "ChainProof Payment Verification"


@dataclass(frozen=True)
class MappingServiceConfig:
    """Configuration for document mapping behavior.

    Attributes:
        display_timezone: IANA timezone used for the locale-formatted remittance line.
    """

    display_timezone: str = "UTC"

    def mapping_display_zone(self) -> ZoneInfo:
        """Return the configured display timezone.

        Returns:
            ZoneInfo: Resolved display timezone.

        Raises:
            ValueError: Raised when the timezone name cannot be resolved.
        """

        try:
            return ZoneInfo(self.display_timezone.strip())
        except (ZoneInfoNotFoundError, ValueError) as error:
            raise ValueError(f"config.display_timezone is not a known timezone: {self.display_timezone!r}") from error

    def mapping_validate(self) -> None:
        """Validate mapping configuration values.

        Returns:
            None: This method does not return a value.

        Raises:
            ValueError: Raised when configured values are invalid.
        """

        if not self.display_timezone.strip():
            raise ValueError("config.display_timezone must not be blank")
        self.mapping_display_zone()


def mapping_message_id(kind: MessageKind, proof_id: str) -> str:
    """Build the deterministic message identifier for one document kind.

    Args:
        kind: Document kind tag.
        proof_id: Proof identifier.

    Returns:
        str: Identifier in `<KIND>-<proof_id>` form.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return f"{kind.value}-{proof_id}"


def mapping_select_status_code(status: str) -> str:
    """Select the payment-status code for one verification status.

    Only the literal, case-sensitive `verified` maps to accepted/cleared.
    Every other value maps to accepted/pending.

    Args:
        status: Free-form verification status.

    Returns:
        str: `ACCC` or `ACCP`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if status == MAPPING_VERIFIED_STATUS:
        return MAPPING_STATUS_CODE_ACCEPTED_CLEARED
    return MAPPING_STATUS_CODE_ACCEPTED_PENDING


class ProofRailsMappingService:
    """Concrete mapping service producing PAIN, PACS, CAMT and REMT documents."""

    def __init__(self, clock: Clock | None = None, config: MappingServiceConfig | None = None):
        """Initialize ProofRails mapping service.

        Args:
            clock: Optional clock capability. Defaults to the system clock.
            config: Optional mapping configuration values.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when config values are invalid.
        """

        resolved_config = config or MappingServiceConfig()
        resolved_config.mapping_validate()

        self._clock = clock or SystemClock()
        self._config = resolved_config
        self._display_zone = resolved_config.mapping_display_zone()

    def mapping_to_payment_initiation(self, record: ProofRecord) -> OutputDocument:
        """Map a proof record into a payment-initiation document.

        Args:
            record: Proof record to map.

        Returns:
            OutputDocument: PAIN document.

        Raises:
            RuntimeError: Mapping does not raise runtime errors.
        """

        now = self._clock.clock_now_utc()
        message_id = mapping_message_id(MessageKind.PAIN, record.proof_id)
        body: dict[str, object] = {
            "messageHeader": {
                "messageId": message_id,
                "creationDateTime": record.timestamp,
                "instructionId": f"INSTR-{record.proof_id}",
            },
            "payment": {
                "paymentInformationId": f"PAYINF-{record.proof_id}",
                "paymentMethod": MAPPING_PAYMENT_METHOD,
                "paymentTypeCode": MAPPING_PAYMENT_TYPE_CODE,
                "instructionPriority": MAPPING_INSTRUCTION_PRIORITY,
                "chargeBearer": MAPPING_CHARGE_BEARER,
                "debtor": {
                    "name": MAPPING_DEBTOR_NAME,
                    "identification": record.sender,
                },
                "debtorAccount": {
                    "identification": record.sender,
                    "currency": record.currency,
                },
                "creditor": {
                    "name": MAPPING_CREDITOR_NAME,
                    "identification": record.recipient,
                },
                "creditorAccount": {
                    "identification": record.recipient,
                    "currency": record.currency,
                },
                "transactionAmount": record.amount,
                "currency": record.currency,
                "transactionHash": record.tx_hash,
                "flareAnchor": record.flare_anchor,
                "recordHash": record.record_hash,
            },
            "supplementaryData": {
                "blockchain": {
                    "network": MAPPING_NETWORK_NAME,
                    "transactionHash": record.tx_hash,
                    "blockAnchor": record.flare_anchor,
                    "verificationStatus": record.status,
                },
            },
        }
        return self._mapping_build_document(MessageKind.PAIN, now, message_id, body)

    def mapping_to_payment_status(self, record: ProofRecord) -> OutputDocument:
        """Map a proof record into a payment-status document.

        Args:
            record: Proof record to map.

        Returns:
            OutputDocument: PACS document with exactly one status entry.

        Raises:
            RuntimeError: Mapping does not raise runtime errors.
        """

        now = self._clock.clock_now_utc()
        now_iso = domain_format_iso_timestamp(now)
        message_id = mapping_message_id(MessageKind.PACS, record.proof_id)
        original_message_id = mapping_message_id(MessageKind.PAIN, record.proof_id)
        body: dict[str, object] = {
            "messageHeader": {
                "messageId": message_id,
                "creationDateTime": now_iso,
                "originalMessageId": original_message_id,
            },
            "transactionStatusReport": {
                "reportId": f"REPORT-{record.proof_id}",
                "origMessageReference": original_message_id,
                "creationDateTime": record.timestamp,
                "reportingEntity": MAPPING_REPORTING_ENTITY,
                "transactionStatuses": [
                    {
                        "originalTransactionId": record.tx_hash,
                        "transactionStatus": domain_format_status_label(record.status),
                        "statusCode": mapping_select_status_code(record.status),
                        "statusReasonCode": MAPPING_STATUS_REASON_CODE,
                        "statusReasonInformation": MAPPING_STATUS_REASON_TEXT,
                        "lastUpdateDateTime": now_iso,
                        "flareVerification": {
                            "blockchainNetwork": MAPPING_NETWORK_NAME,
                            "transactionHash": record.tx_hash,
                            "blockAnchor": record.flare_anchor,
                            "verificationTimestamp": record.timestamp,
                        },
                    }
                ],
            },
        }
        return self._mapping_build_document(MessageKind.PACS, now, message_id, body)

    def mapping_to_cash_management(self, record: ProofRecord) -> OutputDocument:
        """Map a proof record into a cash-management statement document.

        Args:
            record: Proof record to map.

        Returns:
            OutputDocument: CAMT document.

        Raises:
            RuntimeError: Mapping does not raise runtime errors.
        """

        now = self._clock.clock_now_utc()
        now_iso = domain_format_iso_timestamp(now)
        message_id = mapping_message_id(MessageKind.CAMT, record.proof_id)
        body: dict[str, object] = {
            "messageHeader": {
                "messageId": message_id,
                "creationDateTime": now_iso,
            },
            "bankToCustomerStatement": {
                "statementId": f"STMT-{record.proof_id}",
                "statementFrequency": MAPPING_STATEMENT_FREQUENCY,
                "fromDate": record.timestamp,
                "toDate": now_iso,
                "account": {
                    "identification": record.sender,
                    "currency": record.currency,
                },
                "transaction": {
                    "entryDate": record.timestamp,
                    "valueDate": record.timestamp,
                    "amount": record.amount,
                    "currency": record.currency,
                    "transactionType": MAPPING_TRANSACTION_TYPE,
                    "description": f"Payment to {domain_truncate_identifier(record.recipient)}",
                    "counterparty": record.recipient,
                    "transactionId": record.tx_hash,
                    "blockchainReference": {
                        "network": MAPPING_NETWORK_NAME,
                        "anchor": record.flare_anchor,
                        "recordHash": record.record_hash,
                    },
                },
                "balance": {
                    "date": now_iso,
                    "amount": record.amount,
                    "currency": record.currency,
                    "balanceType": MAPPING_BALANCE_TYPE,
                },
            },
        }
        return self._mapping_build_document(MessageKind.CAMT, now, message_id, body)

    def mapping_to_remittance_advice(self, record: ProofRecord) -> OutputDocument:
        """Map a proof record into a remittance-advice document.

        Args:
            record: Proof record to map.

        Returns:
            OutputDocument: REMT document with seven unstructured lines and one invoice.

        Raises:
            RuntimeError: Mapping does not raise runtime errors.
        """

        now = self._clock.clock_now_utc()
        message_id = mapping_message_id(MessageKind.REMT, record.proof_id)
        body: dict[str, object] = {
            "messageHeader": {
                "messageId": message_id,
                "creationDateTime": domain_format_iso_timestamp(now),
            },
            "remittanceAdvice": {
                "remittanceId": f"REM-{record.proof_id}",
                "relatedPaymentInstructionId": mapping_message_id(MessageKind.PAIN, record.proof_id),
                "remitter": {
                    "name": MAPPING_REMITTER_NAME,
                    "identification": record.sender,
                },
                "payee": {
                    "name": MAPPING_PAYEE_NAME,
                    "identification": record.recipient,
                },
                "remittanceInformation": {
                    "structured": {
                        "documentLineIdentification": f"DOCLINE-{record.proof_id}",
                        "documentNumber": record.tx_hash,
                        "documentDate": record.timestamp,
                        "documentType": MAPPING_DOCUMENT_TYPE,
                        "documentStatus": domain_format_status_label(record.status),
                    },
                    "unstructured": self._mapping_build_remittance_lines(record, now),
                },
                "invoices": [
                    {
                        "invoiceNumber": record.proof_id,
                        "invoiceDate": record.timestamp,
                        "invoiceAmount": record.amount,
                        "invoiceCurrency": record.currency,
                        "invoiceStatus": MAPPING_INVOICE_STATUS,
                        "paymentReference": record.tx_hash,
                        "blockchainReference": {
                            "network": MAPPING_NETWORK_NAME,
                            "transactionHash": record.tx_hash,
                            "blockAnchor": record.flare_anchor,
                            "verificationStatus": record.status,
                        },
                    }
                ],
            },
        }
        return self._mapping_build_document(MessageKind.REMT, now, message_id, body)

    def mapping_to_all(self, record: ProofRecord) -> dict[MessageKind, OutputDocument]:
        """Map a proof record into all four document kinds.

        Args:
            record: Proof record to map.

        Returns:
            dict[MessageKind, OutputDocument]: One document per kind, in PAIN, PACS, CAMT, REMT order.

        Raises:
            RuntimeError: Mapping does not raise runtime errors.
        """

        return {
            MessageKind.PAIN: self.mapping_to_payment_initiation(record),
            MessageKind.PACS: self.mapping_to_payment_status(record),
            MessageKind.CAMT: self.mapping_to_cash_management(record),
            MessageKind.REMT: self.mapping_to_remittance_advice(record),
        }

    def mapping_to_kind(self, record: ProofRecord, kind: MessageKind) -> OutputDocument:
        """Map a proof record into the document of one selected kind.

        Args:
            record: Proof record to map.
            kind: Document kind to produce.

        Returns:
            OutputDocument: Document of the selected kind.

        Raises:
            ValueError: Raised when kind is not a recognized document kind.
        """

        mappers = {
            MessageKind.PAIN: self.mapping_to_payment_initiation,
            MessageKind.PACS: self.mapping_to_payment_status,
            MessageKind.CAMT: self.mapping_to_cash_management,
            MessageKind.REMT: self.mapping_to_remittance_advice,
        }
        return mappers[MessageKind(kind)](record)

    def _mapping_build_remittance_lines(self, record: ProofRecord, now: datetime) -> list[str]:
        # Line order is part of the display contract.
        display_moment = now.astimezone(self._display_zone)
        return [
            MAPPING_REMITTANCE_TITLE,
            f"Transaction Hash: {record.tx_hash}",
            f"Amount: {record.amount} {record.currency}",
            f"Flare Network Anchor: {record.flare_anchor}",
            f"Record Hash: {record.record_hash}",
            f"Verification Status: {record.status}",
            f"Generated: {domain_format_locale_timestamp(display_moment)}",
        ]

    def _mapping_build_document(
        self,
        kind: MessageKind,
        now: datetime,
        message_id: str,
        body: dict[str, object],
    ) -> OutputDocument:
        logger.debug("mapped proof document kind=%s message_id=%s", kind.value, message_id)
        return OutputDocument(
            kind=kind,
            schema_version=MAPPING_SCHEMA_VERSIONS[kind],
            generated_at=domain_format_iso_timestamp(now),
            message_id=message_id,
            body=body,
        )


_MAPPING_RECOGNIZED_KINDS = frozenset(kind.value for kind in MessageKind)


def _mapping_is_non_empty_text(value: object) -> bool:
    return isinstance(value, str) and bool(value)


def is_structurally_valid(document: OutputDocument) -> bool:
    """Check shallow structural validity of one output document.

    Only presence and kind membership are checked. The body content is not
    inspected and cross-field consistency is not verified.

    Args:
        document: Output document to check.

    Returns:
        bool: True when kind is recognized, version/timestamp/message id are
        non-empty strings and a body is present.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    kind = getattr(document, "kind", None)
    if not isinstance(kind, str) or kind not in _MAPPING_RECOGNIZED_KINDS:
        return False
    if not _mapping_is_non_empty_text(getattr(document, "schema_version", None)):
        return False
    if not _mapping_is_non_empty_text(getattr(document, "generated_at", None)):
        return False
    if not _mapping_is_non_empty_text(getattr(document, "message_id", None)):
        return False
    return getattr(document, "body", None) is not None


def map_to_payment_initiation(record: ProofRecord) -> OutputDocument:
    """Map a proof record into a payment-initiation document using the system clock."""

    return ProofRailsMappingService().mapping_to_payment_initiation(record)


def map_to_payment_status(record: ProofRecord) -> OutputDocument:
    """Map a proof record into a payment-status document using the system clock."""

    return ProofRailsMappingService().mapping_to_payment_status(record)


def map_to_cash_management(record: ProofRecord) -> OutputDocument:
    """Map a proof record into a cash-management document using the system clock."""

    return ProofRailsMappingService().mapping_to_cash_management(record)


def map_to_remittance_advice(record: ProofRecord) -> OutputDocument:
    """Map a proof record into a remittance-advice document using the system clock."""

    return ProofRailsMappingService().mapping_to_remittance_advice(record)


def map_to_all(record: ProofRecord) -> dict[MessageKind, OutputDocument]:
    """Map a proof record into all four document kinds using the system clock.

    Args:
        record: Proof record to map.

    Returns:
        dict[MessageKind, OutputDocument]: Documents keyed by kind.

    Raises:
        RuntimeError: Mapping does not raise runtime errors.
    """

    service = ProofRailsMappingService()
    return service.mapping_to_all(record)


__all__ = [
    "MAPPING_SCHEMA_VERSIONS",
    "MAPPING_STATUS_CODE_ACCEPTED_CLEARED",
    "MAPPING_STATUS_CODE_ACCEPTED_PENDING",
    "MappingServiceConfig",
    "ProofRailsMappingService",
    "is_structurally_valid",
    "map_to_all",
    "map_to_cash_management",
    "map_to_payment_initiation",
    "map_to_payment_status",
    "map_to_remittance_advice",
    "mapping_message_id",
    "mapping_select_status_code",
]
