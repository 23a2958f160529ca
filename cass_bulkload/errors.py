"""Failures raised while resolving cluster metadata. All of them are fatal."""

from typing import Optional


class ClusterInfoError(Exception):
    """Base class for every metadata resolution failure."""


class UnknownPartitioner(ClusterInfoError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"No such partitioner: {name}")


class SchemaNotFound(ClusterInfoError):
    def __init__(self, keyspace, table, keyspace_exists=False):
        self.keyspace = keyspace
        self.table = table
        self.keyspace_exists = keyspace_exists
        missing = "table" if keyspace_exists else "keyspace"
        super().__init__(f"No such keyspace/table: {keyspace}/{table} ({missing} not found)")


class PartitionKeyColumnMissing(ClusterInfoError):
    def __init__(self, column_name):
        self.column_name = column_name
        super().__init__(f"No matching column for key {column_name}")


class ConnectionFailure(ClusterInfoError):
    def __init__(self, host, port: Optional[int], cause: Optional[BaseException] = None):
        self.host = host
        self.port = port
        self.cause = cause
        where = host if port is None else f"{host}:{port}"
        msg = f"Could not fetch cluster metadata from {where}"
        if cause is not None:
            msg = f"{msg}: {cause}"
        super().__init__(msg)
