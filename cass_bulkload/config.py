"""Connection coordinates for the metadata lookup."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .metadata import MetadataSource
    from .snapshot import ClusterSchemaSnapshot


@dataclass(frozen=True)
class ClusterHandle:
    """
    Where to ask for cluster metadata. Holds nothing but the coordinates;
    the connection is only opened by ``resolve``.

    ``port=None`` leaves the port to the driver default (9042).
    """
    host: str
    port: Optional[int] = None

    @classmethod
    def parse(cls, args: str) -> "ClusterHandle":
        # args = host;9042  (port optional)
        c = args.split(";")
        if len(c) > 2:
            raise ValueError(f"Expected '<host>[;<port>]', got {args!r}")

        host = c[0].strip()
        if not host:
            raise ValueError(f"Missing host in {args!r}")

        port = None
        if len(c) == 2 and c[1].strip():
            try:
                port = int(c[1])
            except ValueError:
                raise ValueError(f"Invalid port in {args!r}") from None
            if port <= 0:
                raise ValueError(f"Invalid port in {args!r}")
        return cls(host, port)

    def resolve(self, keyspace: str, table: str,
                source: Optional["MetadataSource"] = None) -> "ClusterSchemaSnapshot":
        """Fetch the snapshot for ``keyspace.table`` from this coordinator."""
        from .resolver import resolve
        return resolve(self, keyspace, table, source=source)

    def __str__(self):
        return self.host if self.port is None else f"{self.host}:{self.port}"
