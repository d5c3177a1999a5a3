"""Data model of the HadoopCluster resource in the kubecluster.org API group."""

import copy as _copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar


class ReplicaType(str, Enum):
    """Kind of component a replica runs."""

    NAME_NODE = "namenode"
    DATA_NODE = "datanode"
    RESOURCE_MANAGER = "resourcemanager"
    NODE_MANAGER = "nodemanager"
    CONFIG_MAP = "configmap"

    def __str__(self) -> str:
        return self.value


class ClusterConditionType(str, Enum):
    """Lifecycle condition of a cluster."""

    CREATED = "Created"
    RUNNING = "Running"
    RESTARTING = "Restarting"

    def __str__(self) -> str:
        return self.value


HADOOP_CLUSTER_KIND = "HadoopCluster"
HADOOP_CLUSTER_PLURAL = "HadoopClusters"
HADOOP_CLUSTER_SINGULAR = "HadoopCluster"

CONTROLLER_NAME_LABEL = "kubeclusetr.org/controller-name"
CLUSTER_NAME_LABEL = "kubeclusetr.org/clusetr-name"
REPLICA_TYPE_LABEL = "kubeclusetr.org/relica-type"
DELETION_LABEL = "kubeclusetr.org/deletion"


@dataclass(frozen=True)
class GroupResource:
    """A resource qualified by its API group."""

    group: str
    resource: str

    def __str__(self) -> str:
        if not self.group:
            return self.resource
        return f"{self.resource}.{self.group}"


@dataclass(frozen=True)
class GroupVersionResource:
    """A resource qualified by API group and version."""

    group: str
    version: str
    resource: str

    def group_resource(self) -> GroupResource:
        """Drop the version."""
        return GroupResource(self.group, self.resource)


@dataclass(frozen=True)
class _GroupVersionKind:
    group: str
    version: str
    kind: str


@dataclass(frozen=True)
class GroupVersion:
    """An API group together with one of its versions."""

    group: str
    version: str

    def __str__(self) -> str:
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"

    def with_resource(self, resource: str) -> GroupVersionResource:
        return GroupVersionResource(self.group, self.version, resource)

    def with_kind(self, kind: str) -> _GroupVersionKind:
        return _GroupVersionKind(self.group, self.version, kind)


GROUP_VERSION = GroupVersion(group="kubecluster.org", version="v1alpha1")
SCHEME_GROUP_VERSION = GROUP_VERSION


def resource(name: str) -> GroupResource:
    """Qualify an unqualified resource name with this API group."""
    return GROUP_VERSION.with_resource(name).group_resource()


class NotFoundError(LookupError):
    """Raised when a named object does not exist."""

    def __init__(self, group_resource: GroupResource, name: str) -> None:
        self.group_resource = group_resource
        self.name = name
        super().__init__(f'{group_resource} "{name}" not found')


class AlreadyExistsError(Exception):
    """Raised when creating an object whose name is taken."""

    def __init__(self, group_resource: GroupResource, name: str) -> None:
        self.group_resource = group_resource
        self.name = name
        super().__init__(f'{group_resource} "{name}" already exists')


def _format_time(value: datetime | None) -> str | None:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _parse_time(value: str | None) -> datetime | None:
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value).astimezone(timezone.utc)


_Fields = tuple[tuple[str, str, bool], ...]


def _dump_fields(obj: Any, fields: _Fields) -> dict[str, Any]:
    """Dump attributes under their wire keys, leaving out empty values.

    A field marked as optional is left out only when it is None, so an
    explicit zero survives.
    """
    out: dict[str, Any] = {}
    for attr, key, optional in fields:
        value = getattr(obj, attr)
        if value is None or (not optional and not value):
            continue
        out[key] = _copy.deepcopy(value)
    return out


def _load_fields(data: dict[str, Any], fields: _Fields) -> dict[str, Any]:
    return {attr: _copy.deepcopy(data[key]) for attr, key, _ in fields if key in data}


@dataclass
class ObjectMeta:
    """Standard object metadata."""

    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    resource_version: str = ""
    uid: str = ""
    generation: int = 0
    creation_timestamp: datetime | None = None

    _FIELDS: ClassVar[_Fields] = (
        ("name", "name", False),
        ("namespace", "namespace", False),
        ("labels", "labels", False),
        ("annotations", "annotations", False),
        ("resource_version", "resourceVersion", False),
        ("uid", "uid", False),
        ("generation", "generation", False),
    )

    def _to_dict(self) -> dict[str, Any]:
        out = _dump_fields(self, self._FIELDS)
        if self.creation_timestamp is not None:
            out["creationTimestamp"] = _format_time(self.creation_timestamp)
        return out

    @classmethod
    def _from_dict(cls, data: dict[str, Any] | None) -> "ObjectMeta":
        data = data or {}
        return cls(
            **_load_fields(data, cls._FIELDS),
            creation_timestamp=_parse_time(data.get("creationTimestamp")),
        )


_NODE_FIELDS: _Fields = (
    ("replicas", "replicas", True),
    ("image", "image", False),
    ("volume_mounts", "volumeMounts", False),
    ("resources", "resources", False),
    ("image_pull_policy", "imagePullPolicy", False),
    ("security_context", "securityContext", True),
    ("host_network", "hostNetwork", False),
    ("image_pull_secrets", "imagePullSecrets", False),
    ("volumes", "volumes", False),
)


@dataclass
class HadoopNodeSpec:
    """Pod settings shared by every Hadoop component."""

    replicas: int | None = None
    image: str = ""
    volume_mounts: list[dict[str, Any]] = field(default_factory=list)
    resources: dict[str, Any] = field(default_factory=dict)
    image_pull_policy: str = ""
    security_context: dict[str, Any] | None = None
    host_network: bool = False
    image_pull_secrets: list[dict[str, Any]] = field(default_factory=list)
    volumes: list[dict[str, Any]] = field(default_factory=list)

    _EXTRA: ClassVar[_Fields] = ()

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"nodeSpec": _dump_fields(self, _NODE_FIELDS)}
        out.update(_dump_fields(self, self._EXTRA))
        return out

    @classmethod
    def _from_dict(cls, data: dict[str, Any] | None):
        data = data or {}
        return cls(
            **_load_fields(data.get("nodeSpec") or {}, _NODE_FIELDS),
            **_load_fields(data, cls._EXTRA),
        )


@dataclass
class HDFSNameNodeSpecTemplate(HadoopNodeSpec):
    """HDFS NameNode settings."""

    service_type: str = ""
    format: bool = False
    name_dir: str = ""
    log_aggregation_enable: bool = False
    log_aggregation_retain_seconds: int = 0
    block_size: int = 0

    _EXTRA: ClassVar[_Fields] = (
        ("service_type", "serviceType", False),
        ("format", "format", False),
        ("name_dir", "nameDir", False),
        ("log_aggregation_enable", "logAggregationEnable", False),
        ("log_aggregation_retain_seconds", "logAggregationRetainSeconds", False),
        ("block_size", "blockSize", False),
    )


@dataclass
class HDFSDataNodeSpecTemplate(HadoopNodeSpec):
    """HDFS DataNode settings."""

    data_dir: str = ""

    _EXTRA: ClassVar[_Fields] = (("data_dir", "dataDir", False),)


@dataclass
class YarnNodeManagerSpecTemplate(HadoopNodeSpec):
    """YARN NodeManager settings."""

    service_type: str = ""

    _EXTRA: ClassVar[_Fields] = (("service_type", "serviceType", False),)


@dataclass
class YarnResourceManagerSpecTemplate(HadoopNodeSpec):
    """YARN ResourceManager settings."""

    service_type: str = ""

    _EXTRA: ClassVar[_Fields] = (("service_type", "serviceType", False),)


@dataclass
class HDFSSpec:
    """HDFS part of a cluster."""

    name_node: HDFSNameNodeSpecTemplate = field(default_factory=HDFSNameNodeSpecTemplate)
    data_node: HDFSDataNodeSpecTemplate = field(default_factory=HDFSDataNodeSpecTemplate)

    def _to_dict(self) -> dict[str, Any]:
        return {"nameNode": self.name_node._to_dict(), "dataNode": self.data_node._to_dict()}

    @classmethod
    def _from_dict(cls, data: dict[str, Any] | None) -> "HDFSSpec":
        data = data or {}
        return cls(
            name_node=HDFSNameNodeSpecTemplate._from_dict(data.get("nameNode")),
            data_node=HDFSDataNodeSpecTemplate._from_dict(data.get("dataNode")),
        )


@dataclass
class YarnSpec:
    """YARN part of a cluster."""

    node_manager: YarnNodeManagerSpecTemplate = field(default_factory=YarnNodeManagerSpecTemplate)
    resource_manager: YarnResourceManagerSpecTemplate = field(
        default_factory=YarnResourceManagerSpecTemplate
    )

    def _to_dict(self) -> dict[str, Any]:
        return {
            "nodeManager": self.node_manager._to_dict(),
            "resourceManager": self.resource_manager._to_dict(),
        }

    @classmethod
    def _from_dict(cls, data: dict[str, Any] | None) -> "YarnSpec":
        data = data or {}
        return cls(
            node_manager=YarnNodeManagerSpecTemplate._from_dict(data.get("nodeManager")),
            resource_manager=YarnResourceManagerSpecTemplate._from_dict(
                data.get("resourceManager")
            ),
        )


@dataclass
class HadoopClusterSpec:
    """Desired state of a HadoopCluster."""

    hdfs: HDFSSpec = field(default_factory=HDFSSpec)
    yarn: YarnSpec = field(default_factory=YarnSpec)

    def _to_dict(self) -> dict[str, Any]:
        return {"hdfs": self.hdfs._to_dict(), "yarn": self.yarn._to_dict()}

    @classmethod
    def _from_dict(cls, data: dict[str, Any] | None) -> "HadoopClusterSpec":
        data = data or {}
        return cls(
            hdfs=HDFSSpec._from_dict(data.get("hdfs")),
            yarn=YarnSpec._from_dict(data.get("yarn")),
        )


@dataclass
class ClusterCondition:
    """One observed condition of a cluster."""

    type: ClusterConditionType
    status: str
    reason: str = ""
    message: str = ""
    last_update_time: datetime | None = None
    last_transition_time: datetime | None = None

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.type.value, "status": self.status}
        if self.reason:
            out["reason"] = self.reason
        if self.message:
            out["message"] = self.message
        if self.last_update_time is not None:
            out["lastUpdateTime"] = _format_time(self.last_update_time)
        if self.last_transition_time is not None:
            out["lastTransitionTime"] = _format_time(self.last_transition_time)
        return out

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "ClusterCondition":
        return cls(
            type=ClusterConditionType(data["type"]),
            status=data["status"],
            reason=data.get("reason", ""),
            message=data.get("message", ""),
            last_update_time=_parse_time(data.get("lastUpdateTime")),
            last_transition_time=_parse_time(data.get("lastTransitionTime")),
        )


@dataclass
class ReplicaStatus:
    """Observed state of one replica type."""

    active: int = 0
    expect: int | None = None

    _FIELDS: ClassVar[_Fields] = (("active", "active", False), ("expect", "expect", True))

    def _to_dict(self) -> dict[str, Any]:
        return _dump_fields(self, self._FIELDS)

    @classmethod
    def _from_dict(cls, data: dict[str, Any] | None) -> "ReplicaStatus":
        return cls(**_load_fields(data or {}, cls._FIELDS))


@dataclass
class HadoopClusterStatus:
    """Observed state of a HadoopCluster."""

    conditions: list[ClusterCondition] = field(default_factory=list)
    replica_statuses: dict[ReplicaType, ReplicaStatus] = field(default_factory=dict)
    start_time: datetime | None = None

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "conditions": [condition._to_dict() for condition in self.conditions],
            "replicaStatuses": {
                ReplicaType(key).value: value._to_dict()
                for key, value in self.replica_statuses.items()
            },
        }
        if self.start_time is not None:
            out["startTime"] = _format_time(self.start_time)
        return out

    @classmethod
    def _from_dict(cls, data: dict[str, Any] | None) -> "HadoopClusterStatus":
        data = data or {}
        return cls(
            conditions=[ClusterCondition._from_dict(c) for c in data.get("conditions") or []],
            replica_statuses={
                ReplicaType(key): ReplicaStatus._from_dict(value)
                for key, value in (data.get("replicaStatuses") or {}).items()
            },
            start_time=_parse_time(data.get("startTime")),
        )


@dataclass
class HadoopCluster:
    """A HadoopCluster object."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: HadoopClusterSpec = field(default_factory=HadoopClusterSpec)
    status: HadoopClusterStatus = field(default_factory=HadoopClusterStatus)
    api_version: str = field(default_factory=lambda: str(GROUP_VERSION))
    kind: str = HADOOP_CLUSTER_KIND

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    @property
    def labels(self) -> dict[str, str]:
        return self.metadata.labels

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the wire form used by the API server."""
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": self.metadata._to_dict(),
            "spec": self.spec._to_dict(),
            "status": self.status._to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HadoopCluster":
        """Build a cluster from its wire form."""
        return cls(
            metadata=ObjectMeta._from_dict(data.get("metadata")),
            spec=HadoopClusterSpec._from_dict(data.get("spec")),
            status=HadoopClusterStatus._from_dict(data.get("status")),
            api_version=data.get("apiVersion") or str(GROUP_VERSION),
            kind=data.get("kind") or HADOOP_CLUSTER_KIND,
        )

    def copy(self) -> "HadoopCluster":
        """Return an independent deep copy."""
        return _copy.deepcopy(self)


@dataclass
class HadoopClusterList:
    """A list of HadoopCluster objects."""

    items: list[HadoopCluster] = field(default_factory=list)
    resource_version: str = ""
    api_version: str = field(default_factory=lambda: str(GROUP_VERSION))
    kind: str = "HadoopClusterList"

    def to_dict(self) -> dict[str, Any]:
        metadata = {"resourceVersion": self.resource_version} if self.resource_version else {}
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": metadata,
            "items": [item.to_dict() for item in self.items],
        }