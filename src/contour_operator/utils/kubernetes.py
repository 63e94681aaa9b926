"""
Kubernetes utilities for the Contour operator.

This module provides the store that reads Contour resources from the
Kubernetes API, and the store-backed versions of the registry queries.

Key functionality:
- Kubernetes client management and configuration
- Contour get/list through the CustomObjectsApi
- Uniqueness and GatewayClass reference checks against a fresh list
- Listing child objects by owning labels
"""

import logging
from collections.abc import Callable
from typing import Any, Protocol

from kubernetes import client, config
from pydantic import ValidationError as PydanticValidationError

from contour_operator.constants import (
    CONTOUR_PLURAL,
    ERROR_INVALID_STORED_CONTOUR,
    ERROR_LIST_CONTOURS,
)
from contour_operator.errors import (
    ConfigurationError,
    KubernetesAPIError,
    OperatorError,
    PermanentError,
)
from contour_operator.models.contour import Contour
from contour_operator.settings import settings
from contour_operator.utils.ownership import owning_label_selector
from contour_operator.utils.registry import (
    gateway_class_refs_exist,
    other_contours_exist,
    other_contours_exist_in_spec_ns,
)

logger = logging.getLogger(__name__)


def get_kubernetes_client() -> client.ApiClient:
    """
    Get configured Kubernetes API client.

    Tries in-cluster configuration first and falls back to the local
    kubeconfig for development.

    Returns:
        Configured Kubernetes API client

    Raises:
        ConfigurationError: If neither configuration can be loaded
    """
    try:
        # Try in-cluster config first (when running in a pod)
        config.load_incluster_config()
        logger.debug("Loaded in-cluster Kubernetes configuration")
    except config.ConfigException:
        try:
            # Fall back to local kubeconfig (for development)
            config.load_kube_config()
            logger.debug("Loaded kubeconfig from local environment")
        except config.ConfigException as e:
            logger.error(f"Failed to load Kubernetes configuration: {e}")
            raise ConfigurationError(
                f"Failed to load Kubernetes configuration: {e}",
                user_action="Run in-cluster or provide a valid kubeconfig",
            ) from e

    return client.ApiClient()


class ContourStore(Protocol):
    """Read access to Contour resources."""

    def get_contour(self, namespace: str, name: str) -> Contour: ...

    def list_contours(self) -> list[Contour]: ...


class KubernetesContourStore:
    """
    ContourStore backed by the Kubernetes CustomObjectsApi.

    API errors are not translated: a missing Contour surfaces as an
    ApiException with status 404.
    """

    def __init__(self, api_client: client.ApiClient | None = None):
        """
        Initialize the store.

        Args:
            api_client: Kubernetes API client (configured lazily if omitted)
        """
        self._api_client = api_client
        self._custom_api: client.CustomObjectsApi | None = None

    @property
    def custom_api(self) -> client.CustomObjectsApi:
        if self._custom_api is None:
            if self._api_client is None:
                self._api_client = get_kubernetes_client()
            self._custom_api = client.CustomObjectsApi(self._api_client)
        return self._custom_api

    def get_contour(self, namespace: str, name: str) -> Contour:
        """Get the Contour namespace/name."""
        obj = self.custom_api.get_namespaced_custom_object(
            group=settings.contour_api_group,
            version=settings.contour_api_version,
            namespace=namespace,
            plural=CONTOUR_PLURAL,
            name=name,
        )
        return Contour.model_validate(obj)

    def list_contours(self) -> list[Contour]:
        """List Contours in all namespaces."""
        response = self.custom_api.list_cluster_custom_object(
            group=settings.contour_api_group,
            version=settings.contour_api_version,
            plural=CONTOUR_PLURAL,
        )
        items = response.get("items", [])
        logger.debug(f"Found {len(items)} Contours")
        return [Contour.model_validate(item) for item in items]


def current_contour(store: ContourStore, namespace: str, name: str) -> Contour:
    """
    Return the current Contour for namespace/name.

    Errors from the store, including not-found, propagate unchanged.
    """
    return store.get_contour(namespace, name)


def find_other_contours(
    store: ContourStore, contour: Contour
) -> tuple[bool, list[Contour] | None]:
    """
    List Contours in all namespaces and check whether any exist besides contour.

    Args:
        store: Contour store
        contour: The Contour doing the asking

    Returns:
        Same result as registry.other_contours_exist

    Raises:
        KubernetesAPIError: If the Contours cannot be listed
        PermanentError: If a stored Contour does not parse
    """
    try:
        contours = store.list_contours()
    except PydanticValidationError as e:
        logger.error(f"Stored Contour failed validation: {e}")
        raise PermanentError(
            ERROR_INVALID_STORED_CONTOUR.format(e),
            user_action="Fix or delete the malformed Contour resource",
            cause=e,
        ) from e
    except OperatorError:
        raise
    except Exception as e:
        logger.error(
            f"Failed to list Contours for {contour.namespace}/{contour.name}: {e}"
        )
        raise KubernetesAPIError(ERROR_LIST_CONTOURS.format(e), cause=e) from e

    return other_contours_exist(contour, contours)


def find_other_contours_in_spec_ns(store: ContourStore, contour: Contour) -> bool:
    """
    Check whether another Contour governs the same spec namespace as contour.

    Raises:
        KubernetesAPIError: If the Contours cannot be listed
    """
    exist, contours = find_other_contours(store, contour)
    if not exist:
        return False
    return other_contours_exist_in_spec_ns(contour, contours)


def find_gateway_class_refs(store: ContourStore, name: str) -> list[Contour]:
    """
    Return the Contours that reference the GatewayClass named name.

    Errors from the store propagate unchanged.
    """
    return gateway_class_refs_exist(store.list_contours(), name)


def list_owned_objects(
    list_fn: Callable[..., Any], contour: Contour, **kwargs: Any
) -> list[Any]:
    """
    List the objects owned by contour using a kubernetes client list call.

    Args:
        list_fn: Kubernetes list function, e.g. CoreV1Api.list_namespaced_service
        contour: Owning Contour
        **kwargs: Extra arguments for list_fn (namespace, ...)

    Returns:
        Items of the list response

    Example:
        >>> core_api = client.CoreV1Api(get_kubernetes_client())
        >>> services = list_owned_objects(
        ...     core_api.list_namespaced_service,
        ...     contour,
        ...     namespace=contour.spec.namespace.name,
        ... )
    """
    response = list_fn(label_selector=owning_label_selector(contour), **kwargs)
    if isinstance(response, dict):
        return response.get("items", [])
    return response.items or []
