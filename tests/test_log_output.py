import logging

import pytest

from flowemu.log_output import print_script_result, print_transaction_result
from flowemu.model import Identifier
from flowemu.result import ScriptResult, TransactionResult, TransactionResultDebug

LOGGER_NAME = "flowemu.tests.output"
ID = Identifier(bytes.fromhex("ab" * 32))


@pytest.fixture
def logger(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    return logging.getLogger(LOGGER_NAME)


def test_script_success_logs_once(logger, caplog):
    print_script_result(logger, ScriptResult(script_id=ID, computation_used=7))
    assert [r.getMessage() for r in caplog.records] == ["⭐  Script executed"]
    assert caplog.records[0].levelno == logging.DEBUG
    assert caplog.records[0].fields == {"scriptID": ID.hex(), "computationUsed": 7}


def test_script_failure_logs_error(logger, caplog):
    result = ScriptResult(script_id=ID, error=RuntimeError("bad script"))
    print_script_result(logger, result)
    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "❗  Script reverted"
    assert len(messages) == 2
    assert "ERR" in messages[1]
    assert f"[{ID.hex()[:6]}]" in messages[1]
    assert messages[1].endswith("bad script")
    assert all(r.levelno == logging.WARNING for r in caplog.records)


def test_transaction_success_logs_events(logger, caplog):
    result = TransactionResult(transaction_id=ID, events=["evt-one", "evt-two"])
    print_transaction_result(logger, result)
    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "⭐  Transaction executed"
    assert len(messages) == 3
    assert messages[1].endswith("evt-one")
    assert messages[2].endswith("evt-two")
    assert all("EVT" in m for m in messages[1:])


def test_transaction_failure_logs_debug(logger, caplog):
    meta = {"payer": "f8d6e0586b0a20c7", "gasLimit": "9999"}
    result = TransactionResult(
        transaction_id=ID,
        error=RuntimeError("revert!"),
        debug=TransactionResultDebug(message="details", meta=meta),
    )
    print_transaction_result(logger, result)
    records = caplog.records
    assert records[0].getMessage() == "❗  Transaction reverted"
    assert records[1].getMessage().endswith("revert!")
    assert records[2].getMessage() == "❗  Transaction Signature Error details"
    assert records[2].fields == meta
    assert len(records) == 3


def test_transaction_failure_without_debug(logger, caplog):
    result = TransactionResult(transaction_id=ID, error=RuntimeError("revert!"))
    print_transaction_result(logger, result)
    assert len(caplog.records) == 2
    assert caplog.records[1].levelno == logging.WARNING