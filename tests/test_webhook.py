import pytest

from hadoopop.types import HadoopCluster
from hadoopop.webhook import (
    DEFAULT_IMAGE,
    DEFAULT_LOG_AGGREGATION_RETAIN_SECONDS,
    ValidationError,
    set_defaults,
    validate_create,
    validate_delete,
    validate_update,
)


def _nodes(cluster):
    return [
        cluster.spec.hdfs.data_node,
        cluster.spec.hdfs.name_node,
        cluster.spec.yarn.node_manager,
        cluster.spec.yarn.resource_manager,
    ]


def test_hadoop_cluster_default():
    cluster = HadoopCluster()
    set_defaults(cluster)
    assert cluster.spec.hdfs.data_node.image == DEFAULT_IMAGE
    assert cluster.spec.hdfs.name_node.image == DEFAULT_IMAGE
    assert cluster.spec.yarn.node_manager.image == DEFAULT_IMAGE
    assert cluster.spec.yarn.resource_manager.image == DEFAULT_IMAGE


def test_default_replicas_and_pull_policy():
    cluster = HadoopCluster()
    set_defaults(cluster)
    for node in _nodes(cluster):
        assert node.replicas == 1
        assert node.image_pull_policy == "IfNotPresent"


def test_defaults_keep_explicit_values():
    cluster = HadoopCluster()
    cluster.spec.hdfs.data_node.replicas = 0
    cluster.spec.hdfs.data_node.image = "custom/hadoop"
    cluster.spec.yarn.node_manager.image_pull_policy = "Always"
    set_defaults(cluster)
    assert cluster.spec.hdfs.data_node.replicas == 0
    assert cluster.spec.hdfs.data_node.image == "custom/hadoop"
    assert cluster.spec.yarn.node_manager.image_pull_policy == "Always"


def test_log_aggregation_retain_seconds_default():
    cluster = HadoopCluster()
    cluster.spec.hdfs.name_node.log_aggregation_enable = True
    set_defaults(cluster)
    assert cluster.spec.hdfs.name_node.log_aggregation_retain_seconds == 604800
    assert DEFAULT_LOG_AGGREGATION_RETAIN_SECONDS == 604800


def test_log_aggregation_retain_seconds_untouched_when_disabled_or_set():
    disabled = HadoopCluster()
    set_defaults(disabled)
    assert disabled.spec.hdfs.name_node.log_aggregation_retain_seconds == 0

    explicit = HadoopCluster()
    explicit.spec.hdfs.name_node.log_aggregation_enable = True
    explicit.spec.hdfs.name_node.log_aggregation_retain_seconds = 60
    set_defaults(explicit)
    assert explicit.spec.hdfs.name_node.log_aggregation_retain_seconds == 60


def test_hadoop_cluster_validate_create():
    cluster = HadoopCluster()
    set_defaults(cluster)
    cluster.spec.yarn.resource_manager.replicas = 2
    cluster.spec.hdfs.name_node.replicas = 2
    with pytest.raises(ValidationError):
        validate_create(cluster)

    cluster.spec.hdfs.name_node.replicas = 1
    cluster.spec.yarn.resource_manager.replicas = 1
    assert validate_create(cluster) == []


def test_validate_create_name_node_message():
    cluster = HadoopCluster()
    set_defaults(cluster)
    cluster.spec.hdfs.name_node.replicas = 2
    with pytest.raises(ValidationError, match="NameNode replicas must set to 1, current 2"):
        validate_create(cluster)


def test_validate_create_resource_manager_message():
    cluster = HadoopCluster()
    set_defaults(cluster)
    cluster.spec.yarn.resource_manager.replicas = 3
    with pytest.raises(ValidationError, match="ResourceManager replicas must set to 1, current 3"):
        validate_create(cluster)


def test_validate_create_warns_about_custom_images():
    cluster = HadoopCluster()
    set_defaults(cluster)
    cluster.spec.yarn.node_manager.image = "custom/image"
    cluster.spec.hdfs.data_node.image = "custom/image"
    warnings = validate_create(cluster)
    assert warnings == [
        "nodemanager's image should install hadoop dependency, run may fail",
        "datanode's image should install hadoop dependency, run may fail",
    ]


def test_validate_create_without_defaults_warns_for_every_component():
    warnings = validate_create(HadoopCluster())
    assert len(warnings) == 4


def test_hadoop_cluster_validate_update():
    assert validate_update(HadoopCluster(), None) == []


def test_hadoop_cluster_validate_delete():
    assert validate_delete(HadoopCluster()) == []