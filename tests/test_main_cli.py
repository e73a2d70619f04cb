"""Tests for the command-line entrypoint behavior."""

import json
from pathlib import Path

import pytest

from chainproof.config import AppSettings
from chainproof.main import main


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for field_name in AppSettings.model_fields:
        monkeypatch.delenv(field_name.upper(), raising=False)
    monkeypatch.setenv("PROOF_GENERATION_DELAY_SECONDS", "0")


def test_main_generate_prints_all_four_documents(capsys: pytest.CaptureFixture[str]) -> None:
    """Print PAIN, PACS, CAMT and REMT documents for a fabricated proof.

    Returns:
        None: Assertions validate generated output.

    Raises:
        AssertionError: Raised when output is incomplete.
    """

    main(["generate", "0xabc"])

    payload = json.loads(capsys.readouterr().out)
    assert list(payload) == ["PAIN", "PACS", "CAMT", "REMT"]
    proof_id = payload["PAIN"]["content"]["payment"]["paymentInformationId"].removeprefix("PAYINF-")
    for kind, document in payload.items():
        assert document["type"] == kind
        assert document["messageId"] == f"{kind}-{proof_id}"
    assert payload["PAIN"]["content"]["payment"]["transactionHash"] == "0xabc"


def test_main_generate_single_kind_output_validates(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Print one selected document and validate it from a file.

    Returns:
        None: Assertions validate single-kind output and file validation.

    Raises:
        AssertionError: Raised when output or validation differs.
    """

    main(["generate", "0xabc", "--kind", "REMT"])
    output = capsys.readouterr().out
    assert json.loads(output)["type"] == "REMT"

    document_path = tmp_path / "remt.json"
    document_path.write_text(output, encoding="utf-8")
    main(["validate", str(document_path)])
    assert capsys.readouterr().out.strip() == "valid"


def test_main_validate_exits_non_zero_for_invalid_document(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Exit with status 1 for structurally invalid or unreadable documents.

    Returns:
        None: Assertions validate failure exit codes.

    Raises:
        AssertionError: Raised when invalid documents pass.
    """

    document_path = tmp_path / "bad.json"
    document_path.write_text(json.dumps({"type": "XXXX", "version": "1", "createdAt": "t", "messageId": "m"}))

    with pytest.raises(SystemExit) as invalid_exit:
        main(["validate", str(document_path)])
    assert invalid_exit.value.code == 1
    assert capsys.readouterr().out.strip() == "invalid"

    with pytest.raises(SystemExit) as missing_exit:
        main(["validate", str(tmp_path / "missing.json")])
    assert missing_exit.value.code == 1


def test_main_bundle_prints_proof_bundle(capsys: pytest.CaptureFixture[str]) -> None:
    """Print the downloadable proof bundle for a fabricated proof.

    Returns:
        None: Assertions validate bundle output.

    Raises:
        AssertionError: Raised when bundle output differs.
    """

    main(["bundle", "0xabc"])

    bundle = json.loads(capsys.readouterr().out)
    assert bundle["transaction"]["hash"] == "0xabc"
    assert bundle["proof"]["shareableUrl"] == f"https://chainproof.app/#proof-{bundle['metadata']['proofId']}"


def test_main_rejects_blank_transaction_hash(capsys: pytest.CaptureFixture[str]) -> None:
    """Exit with status 1 and an error message for blank transaction hashes.

    Returns:
        None: Assertions validate input error handling.

    Raises:
        AssertionError: Raised when blank hashes are accepted.
    """

    with pytest.raises(SystemExit) as blank_exit:
        main(["generate", "  "])

    assert blank_exit.value.code == 1
    assert "Please enter a transaction hash" in capsys.readouterr().err


def test_main_reports_invalid_configuration(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Exit with status 1 when startup settings are invalid.

    Returns:
        None: Assertions validate configuration failure handling.

    Raises:
        AssertionError: Raised when invalid configuration is accepted.
    """

    monkeypatch.setenv("DISPLAY_TIMEZONE", "Mars/Olympus_Mons")

    with pytest.raises(SystemExit) as config_exit:
        main(["generate", "0xabc"])

    assert config_exit.value.code == 1
    assert "Startup configuration validation failed" in capsys.readouterr().err
