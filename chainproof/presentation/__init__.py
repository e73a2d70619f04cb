"""Presentation state package."""

from .view_model import (
    ProofViewModel,
    ViewName,
    view_back_to_landing,
    view_complete_generation,
    view_fail_generation,
    view_open_form,
    view_parse_proof_hash,
    view_route_hash,
    view_start_generation,
)

__all__ = [
    "ProofViewModel",
    "ViewName",
    "view_back_to_landing",
    "view_complete_generation",
    "view_fail_generation",
    "view_open_form",
    "view_parse_proof_hash",
    "view_route_hash",
    "view_start_generation",
]
