"""Core value types shared by transactions, results and accounts."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

IDENTIFIER_LENGTH = 32
ADDRESS_LENGTH = 8


@dataclass(frozen=True)
class Identifier:
    """A 32-byte entity identifier such as a block, transaction or collection ID."""

    value: bytes = bytes(IDENTIFIER_LENGTH)

    def __post_init__(self) -> None:
        if len(self.value) != IDENTIFIER_LENGTH:
            raise ValueError(
                f"identifier must be {IDENTIFIER_LENGTH} bytes, got {len(self.value)}"
            )

    def hex(self) -> str:
        """Return the identifier as lower-case hex without a prefix."""
        return self.value.hex()

    def __str__(self) -> str:
        return self.hex()


@dataclass(frozen=True)
class Address:
    """An 8-byte account address."""

    value: bytes = bytes(ADDRESS_LENGTH)

    def __post_init__(self) -> None:
        if len(self.value) != ADDRESS_LENGTH:
            raise ValueError(
                f"address must be {ADDRESS_LENGTH} bytes, got {len(self.value)}"
            )

    def hex(self) -> str:
        """Return the address as lower-case hex without a prefix."""
        return self.value.hex()

    def __str__(self) -> str:
        return self.hex()


class HashAlgorithm(enum.IntEnum):
    """Hashing algorithms an account key may require."""

    UNKNOWN = 0
    SHA2_256 = 1
    SHA2_384 = 2
    SHA3_256 = 3
    SHA3_384 = 4
    KMAC128 = 5
    Keccak_256 = 6

    def __str__(self) -> str:
        return self.name


@dataclass
class AccountPublicKey:
    """A public key registered on an account."""

    index: int = 0
    public_key: bytes | None = None
    sign_algo: int = 0
    hash_algo: HashAlgorithm = HashAlgorithm.UNKNOWN
    seq_number: int = 0
    weight: int = 0
    revoked: bool = False


@dataclass
class ProposalKey:
    """The key that proposes a transaction and its expected sequence number."""

    address: Address = field(default_factory=Address)
    key_index: int = 0
    sequence_number: int = 0


@dataclass
class TransactionBody:
    """The payload and signatures of a transaction."""

    reference_block_id: Identifier = field(default_factory=Identifier)
    script: bytes | None = None
    arguments: list[bytes] | None = None
    gas_limit: int = 0
    proposal_key: ProposalKey = field(default_factory=ProposalKey)
    payer: Address = field(default_factory=Address)
    authorizers: list[Address] = field(default_factory=list)
    payload_signatures: list[bytes] | None = None
    envelope_signatures: list[bytes] | None = None