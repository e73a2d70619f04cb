"""Main module entrypoint for local runtime execution.

This module validates startup configuration, fabricates proofs and prints
ISO-aligned documents or proof bundles as JSON.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from chainproof.bootstrap import bootstrap_create_fabrication_service, bootstrap_create_mapping_service
from chainproof.config import AppSettings, SettingsLoadError, config_load_settings
from chainproof.domain import MessageKind, ProofRecord
from chainproof.mapping import (
    is_structurally_valid,
    mapping_document_from_payload,
    mapping_document_to_payload,
    mapping_serialize_json,
)
from chainproof.proofs import ProofRequestError, proof_build_bundle

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list. Defaults to process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 when configuration, input or validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="ChainProof ProofRails runtime entrypoint")
    argument_parser.add_argument(
        "command",
        choices=("generate", "bundle", "validate"),
        help="Runtime command: `generate` prints ISO-aligned documents for a fabricated proof, "
        "`bundle` prints the downloadable proof bundle, `validate` checks one serialized document file",
        type=str,
    )
    argument_parser.add_argument(
        "target",
        help="Transaction hash for `generate`/`bundle`, or a JSON document path for `validate`",
        type=str,
    )
    argument_parser.add_argument(
        "--kind",
        dest="kind",
        choices=tuple(kind.value for kind in MessageKind),
        help="Optional single document kind for `generate`",
        type=str,
    )
    argument_parser.add_argument(
        "--no-delay",
        dest="no_delay",
        action="store_true",
        help="Skip the simulated lookup delay",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        print(str(error), file=sys.stderr)
        raise SystemExit(1) from error

    logging.basicConfig(level=settings.log_level)

    if parsed_arguments.command == "validate":
        main_validate_document_file(Path(parsed_arguments.target))
        return

    fabrication_service = bootstrap_create_fabrication_service(settings=settings, skip_delay=parsed_arguments.no_delay)
    try:
        record = fabrication_service.proof_generate(parsed_arguments.target)
    except ProofRequestError as error:
        print(str(error), file=sys.stderr)
        raise SystemExit(1) from error

    if parsed_arguments.command == "bundle":
        print(mapping_serialize_json(main_build_bundle(settings, record)))
        return

    mapping_service = bootstrap_create_mapping_service(settings=settings)
    if parsed_arguments.kind:
        document = mapping_service.mapping_to_kind(record, MessageKind(parsed_arguments.kind))
        print(mapping_serialize_json(mapping_document_to_payload(document)))
        return

    documents = mapping_service.mapping_to_all(record)
    print(mapping_serialize_json({kind.value: mapping_document_to_payload(doc) for kind, doc in documents.items()}))


def main_build_bundle(settings: AppSettings, record: ProofRecord) -> dict[str, object]:
    """Build the proof bundle using configured link bases.

    Args:
        settings: Validated runtime settings.
        record: Fabricated proof record.

    Returns:
        dict[str, object]: JSON-compatible proof bundle.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return proof_build_bundle(
        record,
        share_base_url=settings.share_base_url,
        explorer_tx_base_url=settings.explorer_tx_base_url,
    )


def main_validate_document_file(document_path: Path) -> None:
    """Print structural validity of one serialized document file.

    Args:
        document_path: Path to a JSON document written by `generate --kind`.

    Returns:
        None: Prints `valid` or `invalid` to stdout as side effect.

    Raises:
        SystemExit: Raised with status 1 when the file is unreadable or invalid.
    """

    try:
        payload = json.loads(document_path.read_text(encoding="utf-8"))
        document = mapping_document_from_payload(payload)
    except (OSError, ValueError) as error:
        logger.error("could not read document path=%s error=%s", document_path, error)
        print("invalid")
        raise SystemExit(1) from error

    if not is_structurally_valid(document):
        print("invalid")
        raise SystemExit(1)
    print("valid")


if __name__ == "__main__":
    main()
