"""
Validating admission webhook for Contour resources.

This webhook validates Contour configurations before they are accepted by
Kubernetes, enforcing:
- Valid specification (pydantic model)
- Envoy container ports with unique names and numbers, including http/https
- One Contour per spec namespace

Handlers register with kopf on import. Load the module when starting the
operator, and configure kopf's webhook server there:

    kopf run -m contour_operator.webhooks.contour

The startup handler below applies the logging settings.
"""

import asyncio
import logging

import kopf
from pydantic import ValidationError as PydanticValidationError

from contour_operator.constants import CONTOUR_PLURAL
from contour_operator.errors import ValidationError
from contour_operator.models.contour import Contour
from contour_operator.observability.logging import OperatorLogger, configure_logging
from contour_operator.settings import settings
from contour_operator.utils.handler_logging import log_handler_entry
from contour_operator.utils.kubernetes import KubernetesContourStore
from contour_operator.utils.validation import validate_contour

logger = logging.getLogger(__name__)
operator_logger = OperatorLogger(__name__)

_store: KubernetesContourStore | None = None


def get_contour_store() -> KubernetesContourStore:
    """Return the shared Contour store, creating it on first use."""
    global _store
    if _store is None:
        _store = KubernetesContourStore()
    return _store


@kopf.on.startup()
async def startup_handler(**_) -> None:
    """Apply the logging settings before any webhook runs."""
    configure_logging()
    logger.info(
        f"Contour webhook loaded (enabled={settings.enable_webhooks}, "
        f"group={settings.contour_api_group}/{settings.contour_api_version})"
    )


async def list_contours_snapshot() -> list[Contour]:
    """
    List all Contours in the cluster.

    The list runs in a worker thread since the Kubernetes client is blocking.
    If the list fails the webhook fails open: an empty snapshot is returned and
    the spec namespace conflict is left for reconciliation to detect.
    """
    try:
        return await asyncio.to_thread(get_contour_store().list_contours)
    except Exception as e:
        logger.warning(f"Failed to list Contours, skipping spec namespace check: {e}")
        return []


@kopf.on.validate(
    settings.contour_api_group,
    settings.contour_api_version,
    CONTOUR_PLURAL,
    id="validate-contour",
)
async def validate_contour_admission(
    spec: dict,
    namespace: str,
    name: str,
    operation: str,
    dryrun: bool,
    **kwargs,
) -> dict:
    """
    Validate Contour resource before admission.

    Args:
        spec: Resource specification
        namespace: Resource namespace
        name: Resource name
        operation: CREATE, UPDATE or DELETE
        dryrun: Whether this is a dry-run request

    Returns:
        Empty dict when the request is allowed

    Raises:
        kopf.AdmissionError: If validation fails
    """
    log_handler_entry("validate", "contour", name, namespace, extra={"dryrun": dryrun})

    if not settings.enable_webhooks or operation == "DELETE":
        return {}

    try:
        contour = Contour.model_validate(
            {
                "metadata": {"name": name or "", "namespace": namespace},
                "spec": spec or {},
            }
        )
    except PydanticValidationError as e:
        error_msg = f"Invalid Contour specification: {e}"
        operator_logger.log_admission_decision(
            name, namespace, operation, allowed=False, reason=error_msg
        )
        raise kopf.AdmissionError(error_msg) from e

    contours = await list_contours_snapshot()

    try:
        validate_contour(contour, contours)
    except ValidationError as e:
        operator_logger.log_admission_decision(
            name, namespace, operation, allowed=False, reason=e.message
        )
        raise kopf.AdmissionError(str(e)) from e

    operator_logger.log_admission_decision(name, namespace, operation, allowed=True)
    return {}
