"""Results of executing transactions and scripts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from flowemu.model import (
    AccountPublicKey,
    Address,
    HashAlgorithm,
    Identifier,
    TransactionBody,
)


@dataclass
class StorableTransactionResult:
    """A transaction result in the form kept by storage."""

    error_code: int = 0
    error_message: str = ""
    logs: list[str] = field(default_factory=list)
    events: list[Any] = field(default_factory=list)
    block_id: Identifier = field(default_factory=Identifier)
    block_height: int = 0


@dataclass
class TransactionResultDebug:
    """Details about an unsuccessful transaction execution."""

    message: str = ""
    meta: dict[str, Any] | None = None


@dataclass
class TransactionResult:
    """The result of executing a transaction."""

    transaction_id: Identifier = field(default_factory=Identifier)
    computation_used: int = 0
    memory_estimate: int = 0
    error: BaseException | None = None
    logs: list[str] = field(default_factory=list)
    events: list[Any] = field(default_factory=list)
    debug: TransactionResultDebug | None = None

    def succeeded(self) -> bool:
        """Return True if the transaction executed without errors."""
        return self.error is None

    def reverted(self) -> bool:
        """Return True if the transaction executed with errors."""
        return not self.succeeded()


def new_transaction_invalid_hash_algo(
    key: AccountPublicKey,
    address: Address,
    invalid_algo: HashAlgorithm,
) -> TransactionResultDebug:
    """Describe a signature made with the wrong hashing algorithm."""
    return TransactionResultDebug(
        message=(
            "invalid hashing algorithm signature: public key "
            f"{key.index} on account {address} does not have a valid signature: "
            f"key requires {key.hash_algo} hashing algorithm, but {invalid_algo} was used"
        ),
        meta=None,
    )


def new_transaction_invalid_signature(tx: TransactionBody) -> TransactionResultDebug:
    """Describe the signing parties of a transaction with an invalid signature."""
    authorizers = "[" + " ".join(str(a) for a in tx.authorizers) + "]"
    return TransactionResultDebug(
        message="",
        meta={
            "payer": str(tx.payer),
            "proposer": str(tx.proposal_key.address),
            "proposerKeyIndex": str(tx.proposal_key.key_index),
            "authorizers": authorizers,
            "gasLimit": str(tx.gas_limit),
        },
    )


@dataclass
class ScriptResult:
    """The result of executing a script."""

    script_id: Identifier = field(default_factory=Identifier)
    value: Any = None
    error: BaseException | None = None
    logs: list[str] = field(default_factory=list)
    events: list[Any] = field(default_factory=list)
    computation_used: int = 0
    memory_estimate: int = 0

    def succeeded(self) -> bool:
        """Return True if the script executed without errors."""
        return self.error is None

    def reverted(self) -> bool:
        """Return True if the script executed with errors."""
        return not self.succeeded()