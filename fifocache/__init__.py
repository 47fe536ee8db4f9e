"""Thread-safe in-memory key/value cache with S3-FIFO eviction."""

__version__ = "0.1.0"
__all__ = ["cache", "hash_set", "node", "node_queue", "queues"]