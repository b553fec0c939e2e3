from flowemu.account_storage import AccountStorage, StorageItem, new_account_storage
from flowemu.model import Address


def test_storage_item_get():
    item = StorageItem({"storageTest": '"storage value"'})
    assert item.get("storageTest") == '"storage value"'
    assert item.get("missing") is None


def test_new_account_storage_holds_values():
    addr = Address(bytes.fromhex("01cf0e2f2f715450"))
    account = {"balance": 100000}
    private = StorageItem({"privateTest": "PathLink<&String>(/storage/storageTest)"})
    public = StorageItem({"publicTest": "PathLink<&String>(/storage/storageTest)"})
    storage = StorageItem({"storageTest": '"storage value"'})

    result = new_account_storage(account, addr, private, public, storage)

    assert result == AccountStorage(
        address=addr, private=private, public=public, storage=storage, account=account
    )
    assert result.public.get("publicTest") == "PathLink<&String>(/storage/storageTest)"
    assert result.private.get("privateTest") == "PathLink<&String>(/storage/storageTest)"
    assert result.storage.get("storageTest") == '"storage value"'
    assert result.account is account


def test_default_account_storage_is_empty():
    record = AccountStorage()
    assert record.public == {}
    assert record.storage.get("anything") is None