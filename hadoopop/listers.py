"""Read-only listing and lookup of HadoopCluster objects held in a local index."""

from collections.abc import Callable, Iterable, Mapping
from typing import Union

from .types import HadoopCluster, NotFoundError, resource

Selector = Union[Mapping[str, str], Callable[[Mapping[str, str]], bool], None]
"""A label selector.

None selects everything, a mapping selects objects carrying every given
label with the given value, and a callable decides from the labels.
"""


def _matches(selector: Selector, labels: Mapping[str, str]) -> bool:
    if selector is None:
        return True
    if callable(selector):
        return bool(selector(labels))
    return all(labels.get(key) == value for key, value in selector.items())


def _key(cluster: HadoopCluster) -> str:
    if cluster.namespace:
        return f"{cluster.namespace}/{cluster.name}"
    return cluster.name


class Indexer:
    """A store of clusters keyed by ``namespace/name``."""

    def __init__(self, clusters: Iterable[HadoopCluster] = ()) -> None:
        self._items: dict[str, HadoopCluster] = {}
        for cluster in clusters:
            self.add(cluster)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, cluster: HadoopCluster) -> None:
        """Store a cluster, replacing any with the same key."""
        self._items[_key(cluster)] = cluster

    def delete(self, cluster: HadoopCluster) -> None:
        """Remove a cluster; removing an absent one does nothing."""
        self._items.pop(_key(cluster), None)

    def get_by_key(self, key: str) -> HadoopCluster | None:
        """Return the cluster stored under key, or None."""
        return self._items.get(key)

    def list(self) -> list[HadoopCluster]:
        """Return every stored cluster, ordered by key."""
        return [self._items[key] for key in sorted(self._items)]


class HadoopClusterLister:
    """Lists clusters across all namespaces of an indexer.

    Returned objects are the stored ones and must be treated as read-only.
    """

    def __init__(self, indexer: Indexer) -> None:
        self._indexer = indexer

    def list(self, selector: Selector = None) -> list[HadoopCluster]:
        """Return every cluster whose labels match the selector."""
        return [c for c in self._indexer.list() if _matches(selector, c.labels)]

    def hadoop_clusters(self, namespace: str) -> "HadoopClusterNamespaceLister":
        """Return a lister restricted to one namespace."""
        return HadoopClusterNamespaceLister(self._indexer, namespace)


class HadoopClusterNamespaceLister:
    """Lists and gets clusters within one namespace of an indexer."""

    def __init__(self, indexer: Indexer, namespace: str) -> None:
        self._indexer = indexer
        self.namespace = namespace

    def list(self, selector: Selector = None) -> list[HadoopCluster]:
        """Return the namespace's clusters whose labels match the selector.

        An empty namespace means all namespaces.
        """
        return [
            cluster
            for cluster in self._indexer.list()
            if (not self.namespace or cluster.namespace == self.namespace)
            and _matches(selector, cluster.labels)
        ]

    def get(self, name: str) -> HadoopCluster:
        """Return the named cluster; raise NotFoundError if it is absent."""
        cluster = self._indexer.get_by_key(f"{self.namespace}/{name}")
        if cluster is None:
            raise NotFoundError(resource("hadoopcluster"), name)
        return cluster