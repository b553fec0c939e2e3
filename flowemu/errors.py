"""Errors raised by the emulator and conversion of access-layer errors."""

from __future__ import annotations

from collections.abc import Sequence

from flowemu.model import Address, Identifier


def _format_list(items: Sequence[object]) -> str:
    return "[" + " ".join(str(item) for item in items) + "]"


class EmulatorError(Exception):
    """Base class of all emulator errors."""


class InvalidArgumentError(EmulatorError):
    """An argument passed to the emulator is invalid."""

    def __init__(self, msg: str) -> None:
        self.msg = msg
        super().__init__(f"Invalid argument error: {msg}")


class InternalError(EmulatorError):
    """An unexpected failure inside the emulator."""

    def __init__(self, msg: str) -> None:
        self.msg = msg
        super().__init__(f"Internal error: {msg}")


class NotFoundError(EmulatorError):
    """An entity could not be found."""


class BlockNotFoundError(NotFoundError):
    """A block could not be found."""


class BlockNotFoundByHeightError(BlockNotFoundError):
    """No block exists at the given height."""

    def __init__(self, height: int) -> None:
        self.height = height
        super().__init__(f"could not find block at height {height}")


class BlockNotFoundByIDError(BlockNotFoundError):
    """No block exists with the given ID."""

    def __init__(self, id: Identifier) -> None:
        self.id = id
        super().__init__(f"could not find block with ID {id}")


class CollectionNotFoundError(NotFoundError):
    """No collection exists with the given ID."""

    def __init__(self, id: Identifier) -> None:
        self.id = id
        super().__init__(f"could not find collection with ID {id}")


class TransactionNotFoundError(NotFoundError):
    """No transaction exists with the given ID."""

    def __init__(self, id: Identifier) -> None:
        self.id = id
        super().__init__(f"could not find transaction with ID {id}")


class AccountNotFoundError(NotFoundError):
    """No account exists at the given address."""

    def __init__(self, address: Address) -> None:
        self.address = address
        super().__init__(f"could not find account with address {address}")


class TransactionValidationError(EmulatorError):
    """A submitted transaction is invalid."""


class DuplicateTransactionError(TransactionValidationError):
    """A transaction has already been submitted."""

    def __init__(self, tx_id: Identifier) -> None:
        self.tx_id = tx_id
        super().__init__(f"transaction with ID {tx_id} has already been submitted")


class IncompleteTransactionError(TransactionValidationError):
    """A transaction lacks one or more required fields."""

    def __init__(self, missing_fields: Sequence[str]) -> None:
        self.missing_fields = list(missing_fields)
        super().__init__(
            "transaction is missing required fields: "
            + _format_list(self.missing_fields)
        )


class ExpiredTransactionError(TransactionValidationError):
    """A transaction references a block outside the expiry window."""

    def __init__(self, ref_height: int, final_height: int) -> None:
        self.ref_height = ref_height
        self.final_height = final_height
        super().__init__(
            f"transaction is expired: ref_height={ref_height} final_height={final_height}"
        )


class InvalidTransactionScriptError(TransactionValidationError):
    """A transaction's script could not be parsed."""

    def __init__(self, parser_err: BaseException | None) -> None:
        self.parser_err = parser_err
        super().__init__(f"failed to parse transaction Cadence script: {parser_err}")
        self.__cause__ = parser_err


class InvalidTransactionGasLimitError(TransactionValidationError):
    """A transaction's gas limit exceeds the maximum."""

    def __init__(self, maximum: int, actual: int) -> None:
        self.maximum = maximum
        self.actual = actual
        super().__init__(
            f"transaction gas limit ({actual}) exceeds the maximum gas limit ({maximum})"
        )


class InvalidStateVersionError(EmulatorError):
    """An execution state version hash is invalid."""

    def __init__(self, version: bytes) -> None:
        self.version = version
        super().__init__(
            f"execution state with version hash {bytes(version).hex()} is invalid"
        )


class PendingBlockCommitBeforeExecutionError(EmulatorError):
    """The pending block cannot be committed before it is executed."""

    def __init__(self, block_id: Identifier) -> None:
        self.block_id = block_id
        super().__init__(
            f"pending block with ID {block_id} cannot be committed before execution"
        )


class PendingBlockMidExecutionError(EmulatorError):
    """The pending block is being executed."""

    def __init__(self, block_id: Identifier) -> None:
        self.block_id = block_id
        super().__init__(f"pending block with ID {block_id} is currently being executed")


class PendingBlockTransactionsExhaustedError(EmulatorError):
    """The pending block has no more transactions to execute."""

    def __init__(self, block_id: Identifier) -> None:
        self.block_id = block_id
        super().__init__(
            f"pending block with ID {block_id} contains no more transactions to execute"
        )


class StorageError(EmulatorError):
    """The storage provider failed."""

    def __init__(self, inner: BaseException) -> None:
        self.inner = inner
        super().__init__(f"storage failure: {inner}")
        self.__cause__ = inner


class ExecutionError(EmulatorError):
    """A transaction failed to execute."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"execution error code {code}: {message}")


class FVMError(EmulatorError):
    """Wraps an error reported by the execution environment."""

    def __init__(self, flow_error: BaseException) -> None:
        self.flow_error = flow_error
        super().__init__(str(flow_error))
        self.__cause__ = flow_error


class AccessIncompleteTransactionError(Exception):
    """Access-layer report of missing transaction fields."""

    def __init__(self, missing_fields: Sequence[str]) -> None:
        self.missing_fields = list(missing_fields)
        super().__init__(f"missing required fields: {_format_list(self.missing_fields)}")


class AccessExpiredTransactionError(Exception):
    """Access-layer report of an expired transaction."""

    def __init__(self, ref_height: int, final_height: int) -> None:
        self.ref_height = ref_height
        self.final_height = final_height
        super().__init__(f"expired: ref_height={ref_height} final_height={final_height}")


class AccessInvalidGasLimitError(Exception):
    """Access-layer report of an excessive gas limit."""

    def __init__(self, maximum: int, actual: int) -> None:
        self.maximum = maximum
        self.actual = actual
        super().__init__(f"invalid gas limit: {actual} exceeds {maximum}")


class AccessInvalidScriptError(Exception):
    """Access-layer report of an unparsable script."""

    def __init__(self, parser_err: BaseException | None) -> None:
        self.parser_err = parser_err
        super().__init__(f"failed to parse script: {parser_err}")


def convert_access_error(err: BaseException) -> BaseException:
    """Map an access-layer validation error to its emulator counterpart.

    Errors of any other kind are returned unchanged.
    """
    match err:
        case AccessIncompleteTransactionError():
            return IncompleteTransactionError(err.missing_fields)
        case AccessExpiredTransactionError():
            return ExpiredTransactionError(err.ref_height, err.final_height)
        case AccessInvalidGasLimitError():
            return InvalidTransactionGasLimitError(err.maximum, err.actual)
        case AccessInvalidScriptError():
            return InvalidTransactionScriptError(err.parser_err)
    return err