"""Regression tests for the landing/form/result view model transitions."""

from chainproof.domain import ProofRecord
from chainproof.presentation import (
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


def _build_record(proof_id: str) -> ProofRecord:
    return ProofRecord(
        proof_id=proof_id,
        tx_hash="0xabc",
        amount="100.00",
        currency="USDT0",
        sender="0xAA",
        recipient="0xBB",
        timestamp="2024-01-01T00:00:00.000Z",
        flare_anchor="block-1",
        record_hash="0xdead",
        status="verified",
    )


def test_view_model_walks_landing_form_result_flow() -> None:
    """Walk the landing, form and result views through one generation.

    Returns:
        None: Assertions validate transition sequence.

    Raises:
        AssertionError: Raised when a transition yields unexpected state.
    """

    state = ProofViewModel()
    assert state.view is ViewName.LANDING

    state = view_open_form(state)
    assert state.view is ViewName.FORM

    state = view_start_generation(state)
    assert state.loading

    record = _build_record("p1")
    state = view_complete_generation(state, record)
    assert state.view is ViewName.RESULT
    assert state.current_proof == record
    assert state.proofs == (record,)
    assert not state.loading

    state = view_back_to_landing(state)
    assert state.view is ViewName.LANDING
    assert state.current_proof is None
    assert state.proofs == (record,)


def test_view_fail_generation_keeps_form_with_error_message() -> None:
    """Return to the form with an error message and loading cleared.

    Returns:
        None: Assertions validate failure transition.

    Raises:
        AssertionError: Raised when failure state differs.
    """

    state = view_start_generation(view_open_form(ProofViewModel()))
    state = view_fail_generation(state, "Please enter a transaction hash")

    assert state.view is ViewName.FORM
    assert state.error_message == "Please enter a transaction hash"
    assert not state.loading

    assert view_start_generation(state).error_message == ""


def test_view_transitions_do_not_mutate_previous_state() -> None:
    """Return new view models and leave earlier instances unchanged.

    Returns:
        None: Assertions validate immutability.

    Raises:
        AssertionError: Raised when earlier state changes.
    """

    initial = ProofViewModel()
    completed = view_complete_generation(initial, _build_record("p1"))

    assert initial == ProofViewModel()
    assert completed is not initial


def test_view_parse_proof_hash_extracts_identifier() -> None:
    """Extract proof identifiers only from `#proof-<id>` fragments.

    Returns:
        None: Assertions validate hash parsing.

    Raises:
        AssertionError: Raised when parsing differs.
    """

    assert view_parse_proof_hash("#proof-abc-123") == "abc-123"
    assert view_parse_proof_hash("#proof-") is None
    assert view_parse_proof_hash("#other") is None
    assert view_parse_proof_hash("") is None


def test_view_route_hash_selects_known_proofs_only() -> None:
    """Select known proofs from hash fragments and ignore unknown ones.

    Returns:
        None: Assertions validate hash routing.

    Raises:
        AssertionError: Raised when routing selects the wrong proof.
    """

    first = _build_record("p1")
    second = _build_record("p2")
    state = view_back_to_landing(view_complete_generation(view_complete_generation(ProofViewModel(), first), second))

    routed = view_route_hash(state, "#proof-p1")
    assert routed.view is ViewName.RESULT
    assert routed.current_proof == first

    assert view_route_hash(state, "#proof-missing") == state
    assert view_route_hash(state, "#about") == state
