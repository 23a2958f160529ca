"""The resolved, read-only view of one table on one cluster."""

from dataclasses import dataclass
from functools import cached_property
from typing import List, Sequence, Tuple

from .metadata import ColumnDescriptor
from .partitioners import Partitioner, resolve_partitioner
from .statements import build_insert_statement


@dataclass(frozen=True)
class ClusterSchemaSnapshot:
    """
    Everything a bulk writer needs about the target table, fetched once.

    ``columns`` keeps the cluster's order. Entry ``i`` of
    ``partition_key_indexes`` is the position in ``columns`` of the i-th
    partition key component, in declared key order.

    Instances are immutable and can be shared between threads, or pickled
    and shipped to worker processes.
    """
    keyspace: str
    table: str
    partitioner_class_name: str
    node_count: int
    cql_schema: str
    columns: Tuple[ColumnDescriptor, ...]
    partition_key_indexes: Tuple[int, ...]

    def __post_init__(self):
        if self.node_count < 1:
            raise ValueError(f"node_count must be positive, got {self.node_count}")
        if not self.partition_key_indexes:
            raise ValueError(f"{self.keyspace}.{self.table} has no partition key columns")
        for idx in self.partition_key_indexes:
            if not 0 <= idx < len(self.columns):
                raise ValueError(f"Partition key index {idx} out of range for {len(self.columns)} columns")

    @cached_property
    def partitioner(self) -> Partitioner:
        """Resolved once per snapshot; hold on to it for per-row token work."""
        return resolve_partitioner(self.partitioner_class_name)

    def all_column_names(self) -> List[str]:
        """All column names, in the order the cluster reports them."""
        return [col.name for col in self.columns]

    def partition_key_names(self) -> List[str]:
        return [self.columns[i].name for i in self.partition_key_indexes]

    def partition_key_of(self, row: Sequence) -> tuple:
        """Partition key values of a row laid out like ``columns``."""
        return tuple(row[i] for i in self.partition_key_indexes)

    def build_insert_statement(self, column_names) -> str:
        return build_insert_statement(self.keyspace, self.table, column_names)
