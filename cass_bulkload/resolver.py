"""One-shot resolution of cluster metadata into a ClusterSchemaSnapshot."""

import logging
from typing import Optional, Sequence, Tuple

from .errors import PartitionKeyColumnMissing, SchemaNotFound
from .metadata import ColumnDescriptor, MetadataSource
from .partitioners import resolve_partitioner
from .snapshot import ClusterSchemaSnapshot

logger = logging.getLogger(__name__)


def map_partition_key(columns: Sequence[ColumnDescriptor],
                      key_columns: Sequence[ColumnDescriptor]) -> Tuple[int, ...]:
    """Position in ``columns`` of each key column, in declared key order."""
    indexes = []
    for key_col in key_columns:
        for j, col in enumerate(columns):
            if col.name == key_col.name:
                logger.info("partition key column %s index %d", key_col.name, j)
                indexes.append(j)
                break
        else:
            raise PartitionKeyColumnMissing(key_col.name)
    return tuple(indexes)


def resolve(handle, keyspace, table, source: Optional[MetadataSource] = None) -> ClusterSchemaSnapshot:
    """
    Fetch metadata for ``keyspace.table`` through one transient connection to
    ``handle`` and build the snapshot.

    Names are matched exactly as given (case-sensitive). Raises
    ``ConnectionFailure``, ``UnknownPartitioner``, ``SchemaNotFound`` or
    ``PartitionKeyColumnMissing``; nothing is returned on failure.
    """
    if source is None:
        from .metadata import DriverMetadataSource
        source = DriverMetadataSource()

    logger.info("getting cluster metadata for %s.%s from %s", keyspace, table, handle)
    with source.connect(handle.host, handle.port) as session:
        partitioner_class = session.partitioner_class_name()
        partitioner = resolve_partitioner(partitioner_class)

        description = session.table(keyspace, table)
        if description is None:
            raise SchemaNotFound(keyspace, table, keyspace_exists=session.keyspace_exists(keyspace))

        node_count = session.known_host_count()

    partition_key_indexes = map_partition_key(description.columns, description.partition_key)

    logger.info("%s.%s: partitioner %s, %d nodes", keyspace, table, partitioner.short_name, node_count)
    return ClusterSchemaSnapshot(
        keyspace=keyspace,
        table=table,
        partitioner_class_name=partitioner_class,
        node_count=node_count,
        cql_schema=description.cql_schema,
        columns=description.columns,
        partition_key_indexes=partition_key_indexes,
    )
