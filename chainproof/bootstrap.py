"""Application bootstrap wiring for startup validation and dependency assembly."""

from chainproof.config import AppSettings, config_load_settings
from chainproof.domain import Clock
from chainproof.mapping import MappingServiceConfig, ProofRailsMappingService
from chainproof.proofs import ProofFabricationConfig, ProofFabricationService, ProofPlaceholderValues


def bootstrap_create_mapping_service(
    settings: AppSettings | None = None,
    clock: Clock | None = None,
) -> ProofRailsMappingService:
    """Build the document mapping service from validated settings.

    Args:
        settings: Optional preloaded settings. Loaded from environment when omitted.
        clock: Optional clock capability override.

    Returns:
        ProofRailsMappingService: Configured mapping service.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return ProofRailsMappingService(
        clock=clock,
        config=MappingServiceConfig(display_timezone=resolved_settings.display_timezone),
    )


def bootstrap_create_fabrication_service(
    settings: AppSettings | None = None,
    clock: Clock | None = None,
    skip_delay: bool = False,
) -> ProofFabricationService:
    """Build the proof fabrication service from validated settings.

    Args:
        settings: Optional preloaded settings. Loaded from environment when omitted.
        clock: Optional clock capability override.
        skip_delay: Disable the simulated lookup delay.

    Returns:
        ProofFabricationService: Configured fabrication service.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    placeholders = ProofPlaceholderValues(
        amount=resolved_settings.proof_placeholder_amount,
        currency=resolved_settings.proof_placeholder_currency,
        sender=resolved_settings.proof_placeholder_sender,
        recipient=resolved_settings.proof_placeholder_recipient,
        flare_anchor=resolved_settings.proof_placeholder_anchor,
        record_hash=resolved_settings.proof_placeholder_record_hash,
        status=resolved_settings.proof_placeholder_status,
    )
    return ProofFabricationService(
        config=ProofFabricationConfig(
            delay_seconds=0.0 if skip_delay else resolved_settings.proof_generation_delay_seconds,
            placeholders=placeholders,
        ),
        clock=clock,
    )
