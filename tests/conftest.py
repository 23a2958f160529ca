"""Shared fixtures: an in-memory metadata source standing in for a cluster."""

import pytest

from cass_bulkload.metadata import (
    CLUSTERING,
    PARTITION_KEY,
    REGULAR,
    ColumnDescriptor,
    MetadataSession,
    MetadataSource,
    TableDescription,
)

MURMUR3 = "org.apache.cassandra.dht.Murmur3Partitioner"


class FakeSession(MetadataSession):

    def __init__(self, source):
        self.source = source
        self.closed = False

    def partitioner_class_name(self):
        return self.source.partitioner

    def known_host_count(self):
        return self.source.host_count

    def keyspace_exists(self, keyspace):
        return keyspace in self.source.keyspaces

    def table(self, keyspace, table):
        return self.source.keyspaces.get(keyspace, {}).get(table)

    def close(self):
        self.closed = True


class FakeMetadataSource(MetadataSource):

    def __init__(self, partitioner=MURMUR3, host_count=3):
        self.partitioner = partitioner
        self.host_count = host_count
        self.keyspaces = {}
        self.sessions = []
        self.connects = []

    def add_table(self, description):
        self.keyspaces.setdefault(description.keyspace, {})[description.name] = description
        return description

    def connect(self, contact_point, port=None):
        self.connects.append((contact_point, port))
        session = FakeSession(self)
        self.sessions.append(session)
        return session


def make_table(keyspace, name, columns, partition_key):
    """columns: list of (name, type); partition_key: names in declared order."""
    descriptors = tuple(
        ColumnDescriptor(col, cql_type, PARTITION_KEY if col in partition_key else REGULAR)
        for col, cql_type in columns
    )
    key = tuple(ColumnDescriptor(col, "text", PARTITION_KEY) for col in partition_key)
    cols = ", ".join(f"{col} {cql_type}" for col, cql_type in columns)
    schema = f"CREATE TABLE {keyspace}.{name} ({cols}, PRIMARY KEY (({', '.join(partition_key)})))"
    return TableDescription(keyspace, name, descriptors, key, schema)


@pytest.fixture
def source():
    src = FakeMetadataSource()
    src.add_table(make_table(
        "ks", "events",
        [("id", "uuid"), ("ts", "timestamp"), ("payload", "text")],
        ["id"],
    ))
    src.add_table(make_table(
        "ks", "composite",
        [("a", "text"), ("b", "int"), ("c", "text")],
        ["b", "a"],
    ))
    src.add_table(TableDescription(
        "ks", "clustered",
        (
            ColumnDescriptor("user_id", "uuid", PARTITION_KEY),
            ColumnDescriptor("day", "date", PARTITION_KEY),
            ColumnDescriptor("seq", "int", CLUSTERING),
            ColumnDescriptor("body", "text", REGULAR),
        ),
        (
            ColumnDescriptor("user_id", "uuid", PARTITION_KEY),
            ColumnDescriptor("day", "date", PARTITION_KEY),
        ),
        "CREATE TABLE ks.clustered (...)",
    ))
    return src
