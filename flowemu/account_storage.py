"""Values held in an account's storage domains."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from flowemu.model import Address


class StorageItem(dict):
    """Values of one storage domain, keyed by path identifier.

    Looking up a missing key with ``get`` yields None.
    """


@dataclass
class AccountStorage:
    """Storage values of an account, split by domain."""

    address: Address = field(default_factory=Address)
    private: StorageItem = field(default_factory=StorageItem)
    public: StorageItem = field(default_factory=StorageItem)
    storage: StorageItem = field(default_factory=StorageItem)
    account: Any = None


def new_account_storage(
    account: Any,
    address: Address,
    private: StorageItem,
    public: StorageItem,
    storage: StorageItem,
) -> AccountStorage:
    """Create the storage record holding the values for each storage path."""
    return AccountStorage(
        address=address,
        private=private,
        public=public,
        storage=storage,
        account=account,
    )