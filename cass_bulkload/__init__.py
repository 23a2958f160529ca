"""
Cassandra cluster metadata for bulk loading.

Resolves a table's schema and the cluster topology once, into an immutable
snapshot that bulk writers share:

    from cass_bulkload import ClusterHandle

    snapshot = ClusterHandle.parse("10.0.0.1;9042").resolve("ks", "events")
    snapshot.partition_key_indexes
    snapshot.build_insert_statement(["id", "ts", "payload"])
"""

from .config import ClusterHandle
from .errors import (
    ClusterInfoError,
    ConnectionFailure,
    PartitionKeyColumnMissing,
    SchemaNotFound,
    UnknownPartitioner,
)
from .metadata import (
    ColumnDescriptor,
    DriverMetadataSource,
    MetadataSession,
    MetadataSource,
    TableDescription,
)
from .partitioners import Partitioner, TokenRange, resolve_partitioner, split_token_ring
from .resolver import map_partition_key, resolve
from .snapshot import ClusterSchemaSnapshot
from .statements import build_insert_statement

__version__ = "0.1.0"

__all__ = [
    "ClusterHandle",
    "ClusterInfoError",
    "ClusterSchemaSnapshot",
    "ColumnDescriptor",
    "ConnectionFailure",
    "DriverMetadataSource",
    "MetadataSession",
    "MetadataSource",
    "Partitioner",
    "PartitionKeyColumnMissing",
    "SchemaNotFound",
    "TableDescription",
    "TokenRange",
    "UnknownPartitioner",
    "build_insert_statement",
    "map_partition_key",
    "resolve",
    "resolve_partitioner",
    "split_token_ring",
]
