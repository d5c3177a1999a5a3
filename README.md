# hadoopop

A Python model of the `HadoopCluster` resource (API group `kubecluster.org`,
version `v1alpha1`), together with admission defaulting and validation, a
label-selecting lister over a local index, and an in-memory client that
records every call. It has no dependencies beyond the standard library.

## Modules

- `hadoopop.config`: `OperatorConfig`, a dataclass holding the image
  (`alpine:3.10` by default) and template file
  (`/etc/config/initContainer.yaml` by default) for the Hadoop init container.
  `reset()` restores both defaults. A process-wide instance is available as
  `hadoopop.config.config`.
- `hadoopop.types`: the resource and its parts.
  - `HadoopCluster` with `metadata` (`ObjectMeta`), `spec`
    (`HadoopClusterSpec`) and `status` (`HadoopClusterStatus`). The spec holds
    `hdfs` (`HDFSSpec`: `name_node`, `data_node`) and `yarn` (`YarnSpec`:
    `node_manager`, `resource_manager`); every component is a
    `HadoopNodeSpec` subclass with replicas, image, pull policy, volumes and so on.
  - `HadoopCluster.to_dict()` and `HadoopCluster.from_dict(data)` convert to
    and from the camelCase wire form; `copy()` returns a deep copy.
    `HadoopClusterList.to_dict()` does the same for lists.
  - `ReplicaType` and `ClusterConditionType` enumerations, `ClusterCondition`,
    `ReplicaStatus`.
  - `GroupVersion` (`with_resource`, `with_kind`), `GroupVersionResource`
    (`group_resource`), `GroupResource`, and `resource(name)`, which qualifies
    a resource name with the `kubecluster.org` group.
  - `NotFoundError` and `AlreadyExistsError`.
  - Label constants such as `CLUSTER_NAME_LABEL` and `REPLICA_TYPE_LABEL`.
- `hadoopop.webhook`: admission logic.
  - `set_defaults(cluster)` fills in, for every component, one replica, the
    image `apache/hadoop:3` and the pull policy `IfNotPresent` where unset;
    on the NameNode, when log aggregation is enabled and the retention is not
    positive, the retention becomes 604800 seconds.
  - `validate_create(cluster)` raises `ValidationError` when the NameNode or
    the ResourceManager asks for more than one replica, and otherwise returns
    a list of warnings, one for each component whose image is not the default.
  - `validate_update(cluster, old)` and `validate_delete(cluster)` accept
    everything and return an empty list.
- `hadoopop.listers`: `Indexer`, a store keyed by `namespace/name`
  (`add`, `delete`, `get_by_key`, `list`), and `HadoopClusterLister`, whose
  `list(selector)` returns matching clusters and whose
  `hadoop_clusters(namespace)` gives a `HadoopClusterNamespaceLister` with
  `list(selector)` and `get(name)`; `get` raises `NotFoundError` when the
  cluster is absent. A selector is `None` (everything), a mapping of labels
  that must all match, or a callable given the labels.
- `hadoopop.fake_client`: `FakeKubeclusterV1alpha1`, an in-memory store.
  `hadoop_clusters(namespace)` returns a `FakeHadoopClusters` with `get`,
  `list`, `create`, `update`, `update_status`, `delete`, `delete_collection`
  and `patch` (a JSON merge patch given as text, bytes or a dict). Every call
  is appended to `actions` as an `Action`; `clear_actions()` empties it.
  Stored objects are copies, so callers never share state with the store.

## Install

```
pip install .
```

## Example

```python
from hadoopop.types import HadoopCluster, ObjectMeta
from hadoopop.webhook import ValidationError, set_defaults, validate_create

cluster = HadoopCluster(metadata=ObjectMeta(name="demo", namespace="default"))
set_defaults(cluster)
print(cluster.spec.hdfs.name_node.image)   # apache/hadoop:3
print(validate_create(cluster))            # []

cluster.spec.hdfs.name_node.replicas = 2
try:
    validate_create(cluster)
except ValidationError as exc:
    print(exc)  # NameNode replicas must set to 1, current 2
```

Using the in-memory client:

```python
from hadoopop.fake_client import FakeKubeclusterV1alpha1

client = FakeKubeclusterV1alpha1()
clusters = client.hadoop_clusters("default")
clusters.create(cluster)
print(clusters.get("demo").metadata.name)        # demo
print([action.verb for action in client.actions])  # ['create', 'get']
```

Listing from an index:

```python
from hadoopop.listers import HadoopClusterLister, Indexer

lister = HadoopClusterLister(Indexer([cluster]))
print(lister.hadoop_clusters("default").get("demo").name)  # demo
```

## What it does not do

The package holds the resource model and the logic around it. It has no
command to run, does not reconcile clusters into pods, services or config
maps, does not serve admission requests over HTTP, and does not talk to a
real API server: the only client is the in-memory one.

## Tests

```
pip install ".[test]"
pytest
```