#!/usr/bin/env python3
"""
Print what a bulk load into a table would use: partitioner, node count,
partition key, insert statement and CQL schema.

Usage: cass-inspect-schema "<host[;port]>" <keyspace> <table> [col1,col2,...]
"""
import logging
import sys

from .config import ClusterHandle
from .errors import ClusterInfoError
from .resolver import resolve

USAGE = 'Usage: cass-inspect-schema "<host[;port]>" <keyspace> <table> [col1,col2,...]'


def inspect(cass_args, keyspace, table, columns=None, source=None):
    handle = ClusterHandle.parse(cass_args)
    snapshot = resolve(handle, keyspace, table, source=source)

    if columns is None:
        columns = snapshot.all_column_names()

    print(f"Table: {snapshot.keyspace}.{snapshot.table}")
    print(f"Partitioner: {snapshot.partitioner_class_name}")
    print(f"Nodes: {snapshot.node_count}")
    print("Partition Key:", ", ".join(
        f"{name} (index {idx})"
        for name, idx in zip(snapshot.partition_key_names(), snapshot.partition_key_indexes)
    ))
    print("Columns:", [c.name for c in snapshot.columns])
    print(f"Insert: {snapshot.build_insert_statement(columns)}")
    print()
    print(snapshot.cql_schema)
    return snapshot


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) not in (3, 4):
        print(USAGE)
        return 1

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    columns = None
    if len(argv) == 4:
        columns = [c.strip() for c in argv[3].split(",") if c.strip()]

    try:
        inspect(argv[0], argv[1], argv[2], columns)
    except (ClusterInfoError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
