"""Mapping layer package for proof-record to ISO-aligned document transformations."""

from .interfaces import MessageMapperPort
from .serialization import mapping_document_from_payload, mapping_document_to_payload, mapping_serialize_json
from .service import (
    MappingServiceConfig,
    ProofRailsMappingService,
    is_structurally_valid,
    map_to_all,
    map_to_cash_management,
    map_to_payment_initiation,
    map_to_payment_status,
    map_to_remittance_advice,
)

__all__ = [
    "MappingServiceConfig",
    "MessageMapperPort",
    "ProofRailsMappingService",
    "is_structurally_valid",
    "map_to_all",
    "map_to_cash_management",
    "map_to_payment_initiation",
    "map_to_payment_status",
    "map_to_remittance_advice",
    "mapping_document_from_payload",
    "mapping_document_to_payload",
    "mapping_serialize_json",
]
