"""Insert statement text for the bulk writers."""

INSERT_TEMPLATE = "INSERT INTO {keyspace}.{table} ({columns}) VALUES ({values}) USING TIMESTAMP ? AND TTL ?;"


def build_insert_statement(keyspace, table, column_names) -> str:
    """
    Prepared insert with the columns in the order given, e.g.
    ``INSERT INTO ks.table (a, b) VALUES (?, ?) USING TIMESTAMP ? AND TTL ?;``

    Column names are not checked against the table.
    """
    column_names = list(column_names)
    if not column_names:
        raise ValueError("At least one column is required for an insert statement")

    return INSERT_TEMPLATE.format(
        keyspace=keyspace,
        table=table,
        columns=", ".join(column_names),
        values=", ".join("?" for _ in column_names),
    )
