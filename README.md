# flowemu

Core building blocks for a local blockchain emulator. The package has no
dependencies outside the standard library.

## Modules

### `flowemu.model`

Plain value types:

- `Identifier` – a frozen 32-byte ID (all zeros by default); `hex()` and
  `str()` give lower-case hex. Any other length raises `ValueError`.
- `Address` – a frozen 8-byte account address with the same `hex()` / `str()`
  behaviour and length check.
- `HashAlgorithm` – an `IntEnum` (`UNKNOWN`, `SHA2_256`, `SHA2_384`,
  `SHA3_256`, `SHA3_384`, `KMAC128`, `Keccak_256`) whose `str()` is its name.
- `AccountPublicKey`, `ProposalKey`, `TransactionBody` – dataclasses describing
  account keys, the proposal key and a transaction's payload.

### `flowemu.errors`

The exception hierarchy. Everything derives from `EmulatorError`:

- `InvalidArgumentError`, `InternalError`
- `NotFoundError` and its subclasses `BlockNotFoundError`
  (`BlockNotFoundByHeightError`, `BlockNotFoundByIDError`),
  `CollectionNotFoundError`, `TransactionNotFoundError`, `AccountNotFoundError`
- `TransactionValidationError` and its subclasses `DuplicateTransactionError`,
  `IncompleteTransactionError`, `ExpiredTransactionError`,
  `InvalidTransactionScriptError`, `InvalidTransactionGasLimitError`
- `InvalidStateVersionError`, `PendingBlockCommitBeforeExecutionError`,
  `PendingBlockMidExecutionError`, `PendingBlockTransactionsExhaustedError`
- `StorageError` and `FVMError`, which wrap another exception and set it as
  `__cause__`; `ExecutionError` carrying a `code` and `message`.

The access-layer exceptions `AccessIncompleteTransactionError`,
`AccessExpiredTransactionError`, `AccessInvalidGasLimitError` and
`AccessInvalidScriptError` are mapped to their emulator counterparts by
`convert_access_error(err)`; any other exception is returned unchanged.

### `flowemu.result`

- `TransactionResult` and `ScriptResult`, each with `succeeded()` (no `error`
  set) and `reverted()`.
- `StorableTransactionResult`, the stored form of a transaction result.
- `TransactionResultDebug`, built by
  `new_transaction_invalid_hash_algo(key, address, invalid_algo)` (a message
  naming the key index, account and both algorithms) and
  `new_transaction_invalid_signature(tx)` (a `meta` dict with `payer`,
  `proposer`, `proposerKeyIndex`, `authorizers` and `gasLimit`).

### `flowemu.account_storage`

- `StorageItem` – a `dict` of values keyed by path identifier; `get` on a
  missing key returns `None`.
- `AccountStorage` – an account's `storage`, `public` and `private` items,
  its `address` and the `account` object, created with
  `new_account_storage(account, address, private, public, storage)`.

### `flowemu.log_output`

- `print_script_result(logger, result)` – logs `Script executed` at DEBUG, or
  `Script reverted` at WARNING followed by an `ERR` line with the error.
- `print_transaction_result(logger, result)` – logs `Transaction executed` at
  DEBUG or `Transaction reverted` at WARNING, one DEBUG `EVT` line per event,
  then on failure an `ERR` line and, when debug details are present, a DEBUG
  signature-error line.

Summary lines pass their fields (ID and computation used) in the record's
`fields` attribute. The `EVT`/`ERR` prefixes carry ANSI colour codes and the
first six characters of the ID.

## What the package does not do

It holds types, errors and logging helpers only. It does not execute
transactions or scripts, produce or store blocks, keep any persistent
storage, or run a server or command-line tool.

## Installation

```
pip install .
```

## Example

```python
import logging

from flowemu.errors import BlockNotFoundByHeightError, NotFoundError
from flowemu.log_output import print_transaction_result
from flowemu.model import Identifier
from flowemu.result import TransactionResult

try:
    raise BlockNotFoundByHeightError(height=7)
except NotFoundError as exc:
    print(exc)  # could not find block at height 7

result = TransactionResult(transaction_id=Identifier(bytes(32)), computation_used=20)
assert result.succeeded() and not result.reverted()

logging.basicConfig(level=logging.DEBUG)
print_transaction_result(logging.getLogger("emulator"), result)
```

## Running the tests

```
pip install .[test]
pytest
```