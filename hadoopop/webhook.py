"""Defaulting and validation of HadoopCluster objects on admission."""

import logging

from .types import (
    HadoopCluster,
    HadoopNodeSpec,
    HDFSNameNodeSpecTemplate,
    ReplicaType,
)

DEFAULT_IMAGE = "apache/hadoop:3"
DEFAULT_LOG_AGGREGATION_RETAIN_SECONDS = 604800
DEFAULT_IMAGE_PULL_POLICY = "IfNotPresent"

_log = logging.getLogger("hadoopcluster-resource")


class ValidationError(ValueError):
    """Raised when a cluster is rejected on admission."""


def _set_node_defaults(node: HadoopNodeSpec) -> None:
    if node.replicas is None:
        node.replicas = 1
    if not node.image:
        node.image = DEFAULT_IMAGE
    if not node.image_pull_policy:
        node.image_pull_policy = DEFAULT_IMAGE_PULL_POLICY


def _set_name_node_defaults(node: HDFSNameNodeSpecTemplate) -> None:
    _set_node_defaults(node)
    if node.log_aggregation_enable and node.log_aggregation_retain_seconds <= 0:
        node.log_aggregation_retain_seconds = DEFAULT_LOG_AGGREGATION_RETAIN_SECONDS


def set_defaults(cluster: HadoopCluster) -> None:
    """Fill in defaults for every component of the cluster, in place."""
    _log.info("default name=%s", cluster.name)
    _set_node_defaults(cluster.spec.hdfs.data_node)
    _set_name_node_defaults(cluster.spec.hdfs.name_node)
    _set_node_defaults(cluster.spec.yarn.node_manager)
    _set_node_defaults(cluster.spec.yarn.resource_manager)


def validate_create(cluster: HadoopCluster) -> list[str]:
    """Check a cluster about to be created and return admission warnings.

    Raises ValidationError when a singleton component asks for more than
    one replica.
    """
    _log.info("validate create name=%s", cluster.name)
    name_node = cluster.spec.hdfs.name_node
    if name_node.replicas is not None and name_node.replicas > 1:
        raise ValidationError(f"NameNode replicas must set to 1, current {name_node.replicas}")
    resource_manager = cluster.spec.yarn.resource_manager
    if resource_manager.replicas is not None and resource_manager.replicas > 1:
        raise ValidationError(
            f"ResourceManager replicas must set to 1, current {resource_manager.replicas}"
        )

    components = (
        (ReplicaType.RESOURCE_MANAGER, cluster.spec.yarn.resource_manager),
        (ReplicaType.NODE_MANAGER, cluster.spec.yarn.node_manager),
        (ReplicaType.NAME_NODE, cluster.spec.hdfs.name_node),
        (ReplicaType.DATA_NODE, cluster.spec.hdfs.data_node),
    )
    return [
        f"{replica_type.value}'s image should install hadoop dependency, run may fail"
        for replica_type, node in components
        if node.image != DEFAULT_IMAGE
    ]


def validate_update(cluster: HadoopCluster, old: HadoopCluster | None) -> list[str]:
    """Accept every update; return no warnings."""
    _log.info("validate update name=%s", cluster.name)
    return []


def validate_delete(cluster: HadoopCluster) -> list[str]:
    """Accept every deletion; return no warnings."""
    _log.info("validate delete name=%s", cluster.name)
    return []