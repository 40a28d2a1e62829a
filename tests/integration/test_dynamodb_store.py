"""
Integration tests for the DynamoDB credential store.

Uses an in-process table stand-in that honours the conditional put, so no
AWS account is needed. Requires boto3 installed.
"""

import pytest
from tokengate.domain.credential import Credential, Role
from tokengate.errors import CredentialStoreError, DuplicateCredentialError

botocore_exceptions = pytest.importorskip("botocore.exceptions")


class FakeTable:
    """Minimal Table resource: get_item / put_item with attribute_not_exists."""

    def __init__(self, fail_with=None):
        self.items = {}
        self.fail_with = fail_with

    def get_item(self, Key, ConsistentRead=False):
        if self.fail_with:
            raise self.fail_with
        item = self.items.get(Key["identifier"])
        return {"Item": dict(item)} if item else {}

    def put_item(self, Item, ConditionExpression=None):
        if self.fail_with:
            raise self.fail_with
        if ConditionExpression == "attribute_not_exists(identifier)" and Item["identifier"] in self.items:
            raise botocore_exceptions.ClientError(
                {"Error": {"Code": "ConditionalCheckFailedException", "Message": "exists"}},
                "PutItem",
            )
        self.items[Item["identifier"]] = dict(Item)
        return {}


@pytest.fixture
def table():
    return FakeTable()


@pytest.fixture
def store(table):
    from tokengate.adapters import DynamoDBCredentialStore
    return DynamoDBCredentialStore(table=table)


def test_insert_and_find(store):
    cred = Credential(identifier="user@test.io", password_hash="$2b$04$abc", role=Role.GUEST)
    store.insert(cred)

    assert store.find_by_identifier("user@test.io") == cred


def test_find_missing(store):
    assert store.find_by_identifier("ghost@test.io") is None


def test_conditional_put_rejects_duplicate(store, table):
    store.insert(Credential(identifier="user@test.io", password_hash="first"))

    with pytest.raises(DuplicateCredentialError):
        store.insert(Credential(identifier="user@test.io", password_hash="second"))

    assert table.items["user@test.io"]["password_hash"] == "first"


def test_service_errors_become_store_errors():
    from tokengate.adapters import DynamoDBCredentialStore

    error = botocore_exceptions.ClientError(
        {"Error": {"Code": "ProvisionedThroughputExceededException", "Message": "slow down"}},
        "GetItem",
    )
    store = DynamoDBCredentialStore(table=FakeTable(fail_with=error))

    with pytest.raises(CredentialStoreError):
        store.find_by_identifier("user@test.io")

    with pytest.raises(CredentialStoreError) as exc_info:
        store.insert(Credential(identifier="user@test.io", password_hash="x"))
    assert not isinstance(exc_info.value, DuplicateCredentialError)


def test_connection_errors_become_store_errors():
    from tokengate.adapters import DynamoDBCredentialStore

    store = DynamoDBCredentialStore(
        table=FakeTable(fail_with=botocore_exceptions.EndpointConnectionError(endpoint_url="http://dynamodb"))
    )

    with pytest.raises(CredentialStoreError):
        store.find_by_identifier("user@test.io")
