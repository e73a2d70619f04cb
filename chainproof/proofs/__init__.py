"""Proof fabrication and export package."""

from .export import (
    PROOF_HASH_ROUTE_PREFIX,
    proof_build_bundle,
    proof_build_download_filename,
    proof_build_explorer_url,
    proof_build_share_url,
)
from .fabrication import (
    ProofFabricationConfig,
    ProofFabricationService,
    ProofPlaceholderValues,
    ProofRequestError,
    proof_generate,
)

__all__ = [
    "PROOF_HASH_ROUTE_PREFIX",
    "ProofFabricationConfig",
    "ProofFabricationService",
    "ProofPlaceholderValues",
    "ProofRequestError",
    "proof_build_bundle",
    "proof_build_download_filename",
    "proof_build_explorer_url",
    "proof_build_share_url",
    "proof_generate",
]
