"""Screen mixins."""

from k4a.screens.mixins.worker_mixin import (
    ConnectorActionDone,
    ConsumerGroupsLoaded,
    ConsumerGroupsLoadFailed,
    DescribeReady,
    ResourcesLoaded,
    ResourcesLoadFailed,
    WorkerMixin,
)

__all__ = [
    "ConnectorActionDone",
    "ConsumerGroupsLoadFailed",
    "ConsumerGroupsLoaded",
    "DescribeReady",
    "ResourcesLoadFailed",
    "ResourcesLoaded",
    "WorkerMixin",
]
