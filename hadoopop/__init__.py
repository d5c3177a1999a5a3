"""HadoopCluster resource model, admission defaulting and validation, listers and an in-memory client."""

__version__ = "0.1.0"

__all__ = ["config", "types", "webhook", "listers", "fake_client"]