import pytest

from hadoopop.listers import HadoopClusterLister, Indexer
from hadoopop.types import GroupResource, HadoopCluster, NotFoundError, ObjectMeta


def make(name, namespace="default", **labels):
    return HadoopCluster(metadata=ObjectMeta(name=name, namespace=namespace, labels=labels))


@pytest.fixture
def indexer():
    return Indexer(
        [
            make("a", "default", app="hdfs"),
            make("b", "default", app="yarn"),
            make("c", "other", app="hdfs"),
        ]
    )


def test_get_by_key_uses_namespace_and_name(indexer):
    cluster = indexer.get_by_key("default/a")
    assert cluster.name == "a"
    assert cluster.namespace == "default"


def test_get_by_key_missing_returns_none(indexer):
    assert indexer.get_by_key("default/zzz") is None


def test_add_replaces_same_key(indexer):
    replacement = make("a", "default", app="new")
    indexer.add(replacement)
    assert len(indexer) == 3
    assert indexer.get_by_key("default/a") is replacement


def test_delete_removes_and_ignores_missing(indexer):
    indexer.delete(make("a"))
    indexer.delete(make("absent"))
    assert indexer.get_by_key("default/a") is None
    assert len(indexer) == 2


def test_list_is_ordered_by_key(indexer):
    keys = [f"{c.namespace}/{c.name}" for c in indexer.list()]
    assert keys == sorted(keys)
    assert len(keys) == 3


def test_lister_lists_everything_without_selector(indexer):
    names = {c.name for c in HadoopClusterLister(indexer).list(None)}
    assert names == {"a", "b", "c"}


def test_lister_mapping_selector(indexer):
    names = {c.name for c in HadoopClusterLister(indexer).list({"app": "hdfs"})}
    assert names == {"a", "c"}


def test_lister_callable_selector(indexer):
    lister = HadoopClusterLister(indexer)
    names = {c.name for c in lister.list(lambda labels: labels.get("app") == "yarn")}
    assert names == {"b"}


def test_namespace_lister_filters_namespace(indexer):
    lister = HadoopClusterLister(indexer).hadoop_clusters("default")
    assert {c.name for c in lister.list(None)} == {"a", "b"}
    assert {c.name for c in lister.list({"app": "hdfs"})} == {"a"}


def test_namespace_lister_empty_namespace_means_all(indexer):
    lister = HadoopClusterLister(indexer).hadoop_clusters("")
    assert len(lister.list()) == 3


def test_namespace_lister_get(indexer):
    cluster = HadoopClusterLister(indexer).hadoop_clusters("other").get("c")
    assert cluster.namespace == "other"
    assert cluster.labels == {"app": "hdfs"}


def test_namespace_lister_get_missing_raises(indexer):
    lister = HadoopClusterLister(indexer).hadoop_clusters("other")
    with pytest.raises(NotFoundError) as info:
        lister.get("a")
    assert info.value.name == "a"
    assert info.value.group_resource == GroupResource("kubecluster.org", "hadoopcluster")