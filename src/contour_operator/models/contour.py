"""
Pydantic models for Contour resources.

This module defines type-safe data models for the Contour custom resource,
its specification and status, plus the configuration record used to build
new Contour objects with the operator's fixed defaults.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

from contour_operator.constants import (
    CONTOUR_API_GROUP,
    CONTOUR_API_VERSION,
    CONTOUR_KIND,
    DEFAULT_CONTOUR_REPLICAS,
    DEFAULT_ENVOY_HTTP_PORT,
    DEFAULT_ENVOY_HTTPS_PORT,
    DEFAULT_SPEC_NAMESPACE,
    ENVOY_HTTP_PORT_NAME,
    ENVOY_HTTPS_PORT_NAME,
    NETWORK_TYPE_LOAD_BALANCER,
)

NetworkPublishingType = Literal[
    "LoadBalancerService", "NodePortService", "ClusterIPService"
]


class ContainerPort(BaseModel):
    """A named Envoy container port."""

    model_config = {"populate_by_name": True}

    name: str = Field(..., description="Name of the container port", min_length=1)
    port_number: int = Field(
        ...,
        alias="portNumber",
        description="Container port number",
        ge=1,
        le=65535,
    )


def default_container_ports() -> list[ContainerPort]:
    """Envoy ports every Contour starts out with: http/8080 and https/8443."""
    return [
        ContainerPort(name=ENVOY_HTTP_PORT_NAME, port_number=DEFAULT_ENVOY_HTTP_PORT),
        ContainerPort(
            name=ENVOY_HTTPS_PORT_NAME, port_number=DEFAULT_ENVOY_HTTPS_PORT
        ),
    ]


class EnvoyNetworkPublishing(BaseModel):
    """How the Envoy proxy is exposed outside the cluster."""

    model_config = {"populate_by_name": True}

    type: NetworkPublishingType = Field(
        NETWORK_TYPE_LOAD_BALANCER, description="Network publishing type for Envoy"
    )
    container_ports: list[ContainerPort] = Field(
        default_factory=default_container_ports,
        alias="containerPorts",
        description="Ports exposed by the Envoy container",
    )


class NetworkPublishing(BaseModel):
    """Network publishing configuration."""

    envoy: EnvoyNetworkPublishing = Field(
        default_factory=EnvoyNetworkPublishing,
        description="Envoy network publishing configuration",
    )


class NamespaceSpec(BaseModel):
    """The namespace a Contour governs."""

    model_config = {"populate_by_name": True}

    name: str = Field(
        DEFAULT_SPEC_NAMESPACE,
        description="Name of the namespace to run Contour and Envoy in",
    )
    remove_on_deletion: bool = Field(
        False,
        alias="removeOnDeletion",
        description="Remove the namespace when the Contour is deleted",
    )


class ContourSpec(BaseModel):
    """
    Specification for a Contour.

    The governed namespace (namespace.name) is intended to be unique across
    all Contours in the cluster. That is detected, not enforced, by this model.
    """

    model_config = {"populate_by_name": True}

    replicas: int = Field(
        DEFAULT_CONTOUR_REPLICAS, description="Number of Contour replicas", ge=0
    )
    namespace: NamespaceSpec = Field(
        default_factory=NamespaceSpec, description="Governed namespace"
    )
    network_publishing: NetworkPublishing = Field(
        default_factory=NetworkPublishing,
        alias="networkPublishing",
        description="Network publishing configuration",
    )
    gateway_class_ref: str | None = Field(
        None,
        alias="gatewayClassRef",
        description="Name of the GatewayClass this Contour implements",
    )


class ContourCondition(BaseModel):
    """Status condition for a Contour."""

    model_config = {"populate_by_name": True}

    type: str = Field(..., description="Condition type")
    status: str = Field(..., description="Condition status (True/False/Unknown)")
    reason: str | None = Field(None, description="Reason for the condition")
    message: str | None = Field(None, description="Human-readable message")
    last_transition_time: str | None = Field(
        None,
        alias="lastTransitionTime",
        description="Last time the condition transitioned",
    )


class ContourStatus(BaseModel):
    """Observed state of a Contour (written by reconciliation, read-only here)."""

    model_config = {"populate_by_name": True}

    available_contours: int = Field(
        0, alias="availableContours", description="Number of available Contour pods"
    )
    available_envoys: int = Field(
        0, alias="availableEnvoys", description="Number of available Envoy pods"
    )
    conditions: list[ContourCondition] = Field(
        default_factory=list, description="Detailed status conditions"
    )


class ObjectMeta(BaseModel):
    """Subset of Kubernetes object metadata used by the operator."""

    model_config = {"populate_by_name": True, "extra": "allow"}

    name: str = Field(..., description="Object name")
    namespace: str = Field(..., description="Object namespace")
    labels: dict[str, str] | None = Field(None, description="Object labels")


class Contour(BaseModel):
    """
    Complete Contour custom resource model.

    The (namespace, name) pair in metadata is the Contour's identity.
    """

    model_config = {"populate_by_name": True}

    api_version: str = Field(
        f"{CONTOUR_API_GROUP}/{CONTOUR_API_VERSION}", alias="apiVersion"
    )
    kind: str = Field(CONTOUR_KIND)
    metadata: ObjectMeta = Field(..., description="Kubernetes metadata")
    spec: ContourSpec = Field(
        default_factory=ContourSpec, description="Contour specification"
    )
    status: ContourStatus | None = Field(
        None, description="Contour status (managed by operator)"
    )

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    def to_manifest(self) -> dict[str, Any]:
        """Render as a Kubernetes manifest dict suitable for the API server."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ContourConfig(BaseModel):
    """Configuration of a Contour to be created by new_contour()."""

    name: str = Field(..., description="Name of the Contour")
    namespace: str = Field(..., description="Namespace of the Contour")
    spec_ns: str = Field(
        DEFAULT_SPEC_NAMESPACE, description="Namespace the Contour governs"
    )
    remove_ns: bool = Field(
        False, description="Remove the governed namespace on deletion"
    )
    network_type: NetworkPublishingType = Field(
        NETWORK_TYPE_LOAD_BALANCER, description="Envoy network publishing type"
    )
    gateway_class: str | None = Field(
        None, description="Name of a GatewayClass to reference, if any"
    )


def new_contour(cfg: ContourConfig) -> Contour:
    """
    Make a Contour object from cfg.

    The Envoy container ports are always http/8080 and https/8443. The
    gatewayClassRef is only set when cfg.gateway_class is not None, so an
    empty string is carried over as a present value.

    Args:
        cfg: Contour configuration

    Returns:
        New Contour object (not persisted)
    """
    spec = ContourSpec(
        namespace=NamespaceSpec(name=cfg.spec_ns, remove_on_deletion=cfg.remove_ns),
        network_publishing=NetworkPublishing(
            envoy=EnvoyNetworkPublishing(
                type=cfg.network_type,
                container_ports=default_container_ports(),
            )
        ),
    )
    if cfg.gateway_class is not None:
        spec.gateway_class_ref = cfg.gateway_class

    return Contour(
        metadata=ObjectMeta(name=cfg.name, namespace=cfg.namespace),
        spec=spec,
    )
