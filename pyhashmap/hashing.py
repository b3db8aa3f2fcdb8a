import zlib


def hash_string(key: str) -> int:
    return zlib.crc32(key.encode("utf-8")) & 0xFFFFFFFF


def reduce_hash(hash: int, bucket_count: int) -> int:
    return hash % bucket_count
