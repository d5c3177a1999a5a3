"""In-memory client for HadoopCluster objects that records every call made to it."""

import copy
import json
from dataclasses import dataclass
from typing import Any

from .listers import Selector, _matches
from .types import (
    SCHEME_GROUP_VERSION,
    AlreadyExistsError,
    GroupVersionResource,
    HadoopCluster,
    HadoopClusterList,
    NotFoundError,
)

HADOOP_CLUSTERS_RESOURCE = SCHEME_GROUP_VERSION.with_resource("hadoopclusters")
HADOOP_CLUSTERS_KIND = SCHEME_GROUP_VERSION.with_kind("HadoopCluster")


@dataclass(frozen=True)
class Action:
    """One call recorded by the fake client."""

    verb: str
    resource: GroupVersionResource
    namespace: str
    name: str = ""
    subresource: str = ""
    obj: HadoopCluster | None = None
    selector: Any = None
    patch: dict[str, Any] | None = None


def _merge_patch(target: Any, patch: Any) -> Any:
    if not isinstance(patch, dict):
        return copy.deepcopy(patch)
    result = dict(target) if isinstance(target, dict) else {}
    for key, value in patch.items():
        if value is None:
            result.pop(key, None)
        else:
            result[key] = _merge_patch(result.get(key), value)
    return result


class FakeKubeclusterV1alpha1:
    """Fake group client holding clusters in memory.

    Every call is appended to ``actions``; stored objects are copies, so
    callers never share state with the store.
    """

    def __init__(self, *objects: HadoopCluster) -> None:
        self.actions: list[Action] = []
        self._objects: dict[tuple[str, str], HadoopCluster] = {}
        for obj in objects:
            self._store_new(obj, obj.namespace)

    def hadoop_clusters(self, namespace: str = "") -> "FakeHadoopClusters":
        """Return a client for clusters in one namespace."""
        return FakeHadoopClusters(self, namespace)

    def clear_actions(self) -> None:
        """Forget every recorded action."""
        self.actions.clear()

    def _record(self, action: Action) -> None:
        self.actions.append(action)

    def _lookup(self, namespace: str, name: str) -> HadoopCluster:
        try:
            return self._objects[(namespace, name)]
        except KeyError:
            raise NotFoundError(HADOOP_CLUSTERS_RESOURCE.group_resource(), name) from None

    def _prepared(self, cluster: HadoopCluster, namespace: str) -> HadoopCluster:
        if not isinstance(cluster, HadoopCluster):
            raise TypeError(f"expected a HadoopCluster, got {type(cluster).__name__}")
        stored = cluster.copy()
        if not stored.metadata.namespace:
            stored.metadata.namespace = namespace
        elif stored.metadata.namespace != namespace:
            raise ValueError(
                f"request namespace {namespace!r} does not match object namespace "
                f"{stored.metadata.namespace!r}"
            )
        return stored

    def _store_new(self, cluster: HadoopCluster, namespace: str) -> HadoopCluster:
        stored = self._prepared(cluster, namespace)
        key = (stored.namespace, stored.name)
        if key in self._objects:
            raise AlreadyExistsError(HADOOP_CLUSTERS_RESOURCE.group_resource(), stored.name)
        self._objects[key] = stored
        return stored.copy()

    def _store_existing(self, cluster: HadoopCluster, namespace: str) -> HadoopCluster:
        stored = self._prepared(cluster, namespace)
        self._lookup(stored.namespace, stored.name)
        self._objects[(stored.namespace, stored.name)] = stored
        return stored.copy()

    def _select(self, namespace: str, selector: Selector) -> list[HadoopCluster]:
        return [
            self._objects[key]
            for key in sorted(self._objects)
            if (not namespace or key[0] == namespace)
            and _matches(selector, self._objects[key].labels)
        ]


class FakeHadoopClusters:
    """Fake client for the HadoopClusters of one namespace."""

    def __init__(self, fake: FakeKubeclusterV1alpha1, namespace: str) -> None:
        self.fake = fake
        self.namespace = namespace

    def _action(self, verb: str, **details: Any) -> None:
        self.fake._record(
            Action(verb=verb, resource=HADOOP_CLUSTERS_RESOURCE, namespace=self.namespace, **details)
        )

    def get(self, name: str) -> HadoopCluster:
        """Return a copy of the named cluster; raise NotFoundError if absent."""
        self._action("get", name=name)
        return self.fake._lookup(self.namespace, name).copy()

    def list(self, selector: Selector = None) -> HadoopClusterList:
        """Return the clusters whose labels match the selector."""
        self._action("list", selector=selector)
        items = [c.copy() for c in self.fake._select(self.namespace, selector)]
        return HadoopClusterList(items=items)

    def create(self, cluster: HadoopCluster) -> HadoopCluster:
        """Store a new cluster; raise AlreadyExistsError if its name is taken."""
        self._action("create", name=cluster.name, obj=cluster.copy())
        return self.fake._store_new(cluster, self.namespace)

    def update(self, cluster: HadoopCluster) -> HadoopCluster:
        """Replace a stored cluster; raise NotFoundError if it is absent."""
        self._action("update", name=cluster.name, obj=cluster.copy())
        return self.fake._store_existing(cluster, self.namespace)

    def update_status(self, cluster: HadoopCluster) -> HadoopCluster:
        """Replace a stored cluster through the status subresource."""
        self._action("update", name=cluster.name, subresource="status", obj=cluster.copy())
        return self.fake._store_existing(cluster, self.namespace)

    def delete(self, name: str) -> None:
        """Remove the named cluster; raise NotFoundError if it is absent."""
        self._action("delete", name=name)
        self.fake._lookup(self.namespace, name)
        del self.fake._objects[(self.namespace, name)]

    def delete_collection(self, selector: Selector = None) -> None:
        """Remove every cluster whose labels match the selector."""
        self._action("delete-collection", selector=selector)
        for cluster in self.fake._select(self.namespace, selector):
            del self.fake._objects[(cluster.namespace, cluster.name)]

    def patch(self, name: str, data: Any, *args: str) -> HadoopCluster:
        """Apply a JSON merge patch to the named cluster and return the result.

        ``data`` is JSON text (bytes or str) or an already decoded mapping;
        further arguments name the subresource the patch is aimed at.
        """
        if isinstance(data, (bytes, bytearray, str)):
            data = json.loads(data)
        if not isinstance(data, dict):
            raise ValueError("merge patch must be a JSON object")
        self._action("patch", name=name, subresource="/".join(args), patch=copy.deepcopy(data))
        current = self.fake._lookup(self.namespace, name)
        patched = HadoopCluster.from_dict(_merge_patch(current.to_dict(), data))
        patched.metadata.name = current.name
        patched.metadata.namespace = current.namespace
        self.fake._objects[(current.namespace, current.name)] = patched
        return patched.copy()