"""
Cluster metadata query interface.

The resolver only talks to a ``MetadataSource``. ``DriverMetadataSource``
implements it on top of cassandra-driver; tests plug in an in-memory one.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import ConnectionFailure

logger = logging.getLogger(__name__)

PARTITION_KEY = "partition_key"
CLUSTERING = "clustering"
STATIC = "static"
REGULAR = "regular"


@dataclass(frozen=True)
class ColumnDescriptor:
    name: str
    cql_type: str
    kind: str = REGULAR


@dataclass(frozen=True)
class TableDescription:
    """
    One table as reported by the cluster.

    ``columns`` is in the cluster's storage order; ``partition_key`` is in
    declared key order and is not required to follow ``columns``.
    """
    keyspace: str
    name: str
    columns: Tuple[ColumnDescriptor, ...]
    partition_key: Tuple[ColumnDescriptor, ...]
    cql_schema: str


class MetadataSession(ABC):
    """An open metadata connection. Use it as a context manager."""

    @abstractmethod
    def partitioner_class_name(self) -> str:
        ...

    @abstractmethod
    def known_host_count(self) -> int:
        ...

    @abstractmethod
    def keyspace_exists(self, keyspace) -> bool:
        ...

    @abstractmethod
    def table(self, keyspace, table) -> Optional[TableDescription]:
        """Table metadata matched by exact name, or None if absent."""

    @abstractmethod
    def close(self):
        ...

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class MetadataSource(ABC):

    @abstractmethod
    def connect(self, contact_point, port=None) -> MetadataSession:
        """Open a session; raise ConnectionFailure if the cluster is unreachable."""


# =========================
# CASSANDRA DRIVER ADAPTER
# =========================
class DriverMetadataSource(MetadataSource):
    """
    Metadata over ``cassandra.cluster.Cluster``.

    Keyword arguments go straight to ``Cluster`` (``connect_timeout``,
    ``protocol_version``, ...). ``port`` is only passed when set, so the
    driver default applies otherwise.
    """

    def __init__(self, **cluster_kwargs):
        self.cluster_kwargs = cluster_kwargs

    def connect(self, contact_point, port=None):
        from cassandra import DriverException, OperationTimedOut
        from cassandra.cluster import Cluster, NoHostAvailable

        kwargs = dict(self.cluster_kwargs)
        if port is not None:
            kwargs["port"] = port

        logger.debug("connecting to %s (port %s)", contact_point, port or "default")
        try:
            # contact points are resolved here; an unknown host fails before connect()
            cluster = Cluster([contact_point], **kwargs)
        except DriverException as e:
            raise ConnectionFailure(contact_point, port, e) from e

        try:
            cluster.connect()
        except (NoHostAvailable, OperationTimedOut, DriverException) as e:
            cluster.shutdown()
            raise ConnectionFailure(contact_point, port, e) from e
        return DriverMetadataSession(cluster)


class DriverMetadataSession(MetadataSession):

    def __init__(self, cluster):
        self._cluster = cluster

    def partitioner_class_name(self):
        return self._cluster.metadata.partitioner

    def known_host_count(self):
        return len(self._cluster.metadata.all_hosts())

    def keyspace_exists(self, keyspace):
        # Python driver keys metadata by the stored identifier: no quoting, no case folding.
        return keyspace in self._cluster.metadata.keyspaces

    def table(self, keyspace, table):
        ks_meta = self._cluster.metadata.keyspaces.get(keyspace)
        if ks_meta is None:
            return None
        t_meta = ks_meta.tables.get(table)
        if t_meta is None:
            return None
        return describe_table(t_meta)

    def close(self):
        self._cluster.shutdown()


def describe_table(t_meta) -> TableDescription:
    """Convert a driver ``TableMetadata`` into a ``TableDescription``."""
    pk_names = [c.name for c in t_meta.partition_key]
    ck_names = [c.name for c in t_meta.clustering_key]

    columns = []
    for col in t_meta.columns.values():
        if col.name in pk_names:
            kind = PARTITION_KEY
        elif col.name in ck_names:
            kind = CLUSTERING
        elif col.is_static:
            kind = STATIC
        else:
            kind = REGULAR
        columns.append(ColumnDescriptor(col.name, col.cql_type, kind))

    partition_key = tuple(
        ColumnDescriptor(c.name, c.cql_type, PARTITION_KEY) for c in t_meta.partition_key
    )
    return TableDescription(
        keyspace=t_meta.keyspace_name,
        name=t_meta.name,
        columns=tuple(columns),
        partition_key=partition_key,
        cql_schema=t_meta.as_cql_query(),
    )
