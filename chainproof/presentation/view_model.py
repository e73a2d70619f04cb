"""Explicit view model for the landing, form and result views.

The view model is immutable. Every transition returns a new instance, and the
caller owns the current instance and hands it to whatever renders it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from chainproof.domain.models import ProofRecord
from chainproof.proofs.export import PROOF_HASH_ROUTE_PREFIX


class ViewName(str, Enum):
    """Closed set of top-level views."""

    LANDING = "landing"
    FORM = "form"
    RESULT = "result"


@dataclass(frozen=True)
class ProofViewModel:
    """Caller-owned presentation state.

    Attributes:
        view: Active view.
        proofs: Proofs generated during the session, oldest first.
        current_proof: Proof selected for the result view.
        error_message: Error shown on the form view.
        loading: Whether a proof generation is in flight.
    """

    view: ViewName = ViewName.LANDING
    proofs: tuple[ProofRecord, ...] = ()
    current_proof: ProofRecord | None = None
    error_message: str = ""
    loading: bool = False


def view_parse_proof_hash(fragment: str) -> str | None:
    """Extract the proof identifier from a `#proof-<id>` hash fragment.

    Args:
        fragment: URL hash fragment including the leading `#`.

    Returns:
        str | None: Proof identifier, or None for other fragments.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if not fragment.startswith(PROOF_HASH_ROUTE_PREFIX):
        return None
    proof_id = fragment[len(PROOF_HASH_ROUTE_PREFIX):]
    return proof_id or None


def view_open_form(state: ProofViewModel) -> ProofViewModel:
    return replace(state, view=ViewName.FORM, error_message="")


def view_back_to_landing(state: ProofViewModel) -> ProofViewModel:
    return replace(state, view=ViewName.LANDING, current_proof=None, error_message="", loading=False)


def view_start_generation(state: ProofViewModel) -> ProofViewModel:
    """Mark a proof generation as in flight and clear the previous error."""

    return replace(state, view=ViewName.FORM, error_message="", loading=True)


def view_fail_generation(state: ProofViewModel, message: str) -> ProofViewModel:
    """Return to the form view with an error message.

    Args:
        state: Current view model.
        message: Error message to show.

    Returns:
        ProofViewModel: Form view with error and loading cleared.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return replace(state, view=ViewName.FORM, error_message=message, loading=False)


def view_complete_generation(state: ProofViewModel, record: ProofRecord) -> ProofViewModel:
    """Append a freshly generated proof and show it on the result view.

    Args:
        state: Current view model.
        record: Generated proof.

    Returns:
        ProofViewModel: Result view selecting the new proof.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return replace(
        state,
        view=ViewName.RESULT,
        proofs=(*state.proofs, record),
        current_proof=record,
        error_message="",
        loading=False,
    )


def view_route_hash(state: ProofViewModel, fragment: str) -> ProofViewModel:
    """Select a known proof from a `#proof-<id>` hash fragment.

    Unknown proof identifiers and unrelated fragments leave the state unchanged.

    Args:
        state: Current view model.
        fragment: URL hash fragment including the leading `#`.

    Returns:
        ProofViewModel: Result view for a known proof, else the input state.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    proof_id = view_parse_proof_hash(fragment)
    if proof_id is None:
        return state
    for record in state.proofs:
        if record.proof_id == proof_id:
            return replace(state, view=ViewName.RESULT, current_proof=record)
    return state
