"""Partitioner lookup and token ring splitting."""

from dataclasses import dataclass
from typing import List, NamedTuple, Optional

from .errors import UnknownPartitioner

# =========================
# CONSTANTS
# =========================
MURMUR3_MIN_TOKEN = -9223372036854775808
MURMUR3_MAX_TOKEN = 9223372036854775807

RANDOM_MIN_TOKEN = -1
RANDOM_MAX_TOKEN = 2 ** 127

DHT_PACKAGE = "org.apache.cassandra.dht"

DEFAULT_SPLIT_COUNT = 256


@dataclass(frozen=True)
class Partitioner:
    class_name: str
    token_class: type
    min_token: Optional[int] = None
    max_token: Optional[int] = None

    @property
    def short_name(self):
        return self.class_name.rsplit(".", 1)[-1]

    @property
    def is_numeric(self):
        return self.min_token is not None

    def token_for(self, key: bytes):
        """Token of a serialized partition key, as the cluster computes it."""
        return self.token_class.from_key(key)


class TokenRange(NamedTuple):
    """Tokens in ``(range_start, range_end]``."""
    range_start: int
    range_end: int


def _token_classes():
    from cassandra.metadata import BytesToken, MD5Token, Murmur3Token
    return {
        "Murmur3Partitioner": (Murmur3Token, MURMUR3_MIN_TOKEN, MURMUR3_MAX_TOKEN),
        "RandomPartitioner": (MD5Token, RANDOM_MIN_TOKEN, RANDOM_MAX_TOKEN),
        "ByteOrderedPartitioner": (BytesToken, None, None),
    }


def resolve_partitioner(class_name) -> Partitioner:
    """
    Look up the partitioner the cluster reports, e.g.
    ``org.apache.cassandra.dht.Murmur3Partitioner``. The short class name is
    accepted too. Anything the driver has no token type for is rejected.
    """
    if not class_name:
        raise UnknownPartitioner(class_name)

    package, _, short = class_name.rpartition(".")
    if package and package != DHT_PACKAGE:
        raise UnknownPartitioner(class_name)

    known = _token_classes()
    if short not in known:
        raise UnknownPartitioner(class_name)

    token_class, min_token, max_token = known[short]
    return Partitioner(f"{DHT_PACKAGE}.{short}", token_class, min_token, max_token)


def split_token_ring(partitioner: Partitioner, split_count=DEFAULT_SPLIT_COUNT) -> List[TokenRange]:
    """
    Pure mathematical split of the token ring into ``split_count`` ranges.
    Ranges are contiguous and the last one ends on the max token, so the
    whole ring is covered with no gaps.
    """
    if not partitioner.is_numeric:
        raise ValueError(f"{partitioner.short_name} has no numeric token ring to split")
    if split_count < 1:
        raise ValueError(f"split_count must be positive, got {split_count}")

    min_token, max_token = partitioner.min_token, partitioner.max_token
    step = (max_token - min_token) // split_count

    ranges = []
    current = min_token
    for i in range(split_count):
        start = current
        if i == split_count - 1:
            end = max_token
        else:
            end = min(start + step, max_token)
        ranges.append(TokenRange(start, end))
        current = end
    return ranges
