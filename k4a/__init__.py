"""k4a - terminal dashboard for Kafka resources managed with kafkactl."""

__version__ = "0.1.0"
