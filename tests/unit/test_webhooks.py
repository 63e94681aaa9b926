"""
Unit tests for the Contour admission webhook.

Tests validate webhook validation logic without requiring a Kubernetes cluster.
The Contour list is mocked to test validation logic in isolation.
"""

from unittest.mock import MagicMock, patch

import kopf
import pytest

from tests.fixtures.contour_resources import make_contour

SNAPSHOT_PATH = "contour_operator.webhooks.contour.list_contours_snapshot"


class TestContourWebhook:
    """Unit tests for the Contour admission webhook."""

    @pytest.mark.asyncio
    async def test_valid_contour_passes(self):
        """A Contour with its own spec namespace is allowed."""
        from contour_operator.webhooks.contour import validate_contour_admission

        with patch(
            SNAPSHOT_PATH, return_value=[make_contour("other", spec_ns="teamB")]
        ):
            result = await validate_contour_admission(
                spec={"namespace": {"name": "teamA"}},
                namespace="contour-operator",
                name="contour-sample",
                operation="CREATE",
                dryrun=False,
            )
        assert result == {}

    @pytest.mark.asyncio
    async def test_spec_namespace_conflict_fails(self):
        """A second Contour governing the same namespace is rejected."""
        from contour_operator.webhooks.contour import validate_contour_admission

        with patch(
            SNAPSHOT_PATH, return_value=[make_contour("other", spec_ns="teamA")]
        ):
            with pytest.raises(kopf.AdmissionError) as exc_info:
                await validate_contour_admission(
                    spec={"namespace": {"name": "teamA"}},
                    namespace="contour-operator",
                    name="contour-sample",
                    operation="CREATE",
                    dryrun=False,
                )

        assert "other contours exist in namespace 'teamA'" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_update_of_self_passes(self):
        """On UPDATE the stored version of the same Contour is not a conflict."""
        from contour_operator.webhooks.contour import validate_contour_admission

        stored = make_contour("contour-sample", spec_ns="teamA")
        with patch(SNAPSHOT_PATH, return_value=[stored]):
            result = await validate_contour_admission(
                spec={"namespace": {"name": "teamA"}, "replicas": 3},
                namespace="contour-operator",
                name="contour-sample",
                operation="UPDATE",
                dryrun=False,
            )
        assert result == {}

    @pytest.mark.asyncio
    async def test_invalid_spec_fails(self):
        """Specs that do not parse are rejected before listing."""
        from contour_operator.webhooks.contour import validate_contour_admission

        with patch(SNAPSHOT_PATH) as mock_snapshot:
            with pytest.raises(kopf.AdmissionError) as exc_info:
                await validate_contour_admission(
                    spec={"networkPublishing": {"envoy": {"type": "Ingress"}}},
                    namespace="contour-operator",
                    name="contour-sample",
                    operation="CREATE",
                    dryrun=False,
                )

        assert "Invalid Contour specification" in str(exc_info.value)
        mock_snapshot.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_ports_fail(self):
        from contour_operator.webhooks.contour import validate_contour_admission

        spec = {
            "networkPublishing": {
                "envoy": {
                    "containerPorts": [
                        {"name": "http", "portNumber": 8080},
                        {"name": "https", "portNumber": 8080},
                    ]
                }
            }
        }
        with patch(SNAPSHOT_PATH, return_value=[]):
            with pytest.raises(kopf.AdmissionError) as exc_info:
                await validate_contour_admission(
                    spec=spec,
                    namespace="contour-operator",
                    name="contour-sample",
                    operation="CREATE",
                    dryrun=False,
                )

        assert "duplicate container port number 8080" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_delete_is_allowed(self):
        from contour_operator.webhooks.contour import validate_contour_admission

        with patch(SNAPSHOT_PATH) as mock_snapshot:
            result = await validate_contour_admission(
                spec={},
                namespace="contour-operator",
                name="contour-sample",
                operation="DELETE",
                dryrun=False,
            )

        assert result == {}
        mock_snapshot.assert_not_called()

    @pytest.mark.asyncio
    async def test_webhooks_disabled(self):
        from contour_operator.webhooks.contour import validate_contour_admission

        with (
            patch("contour_operator.webhooks.contour.settings") as mock_settings,
            patch(SNAPSHOT_PATH) as mock_snapshot,
        ):
            mock_settings.enable_webhooks = False
            result = await validate_contour_admission(
                spec={"namespace": {"name": "teamA"}},
                namespace="contour-operator",
                name="contour-sample",
                operation="CREATE",
                dryrun=False,
            )

        assert result == {}
        mock_snapshot.assert_not_called()


class TestListContoursSnapshot:
    """Tests for the webhook's Contour listing."""

    @pytest.mark.asyncio
    async def test_returns_store_list(self):
        from contour_operator.webhooks.contour import list_contours_snapshot

        contours = [make_contour("a")]
        store = MagicMock()
        store.list_contours.return_value = contours

        with patch(
            "contour_operator.webhooks.contour.get_contour_store", return_value=store
        ):
            assert await list_contours_snapshot() == contours

    @pytest.mark.asyncio
    async def test_fails_open(self):
        """A failed list yields an empty snapshot instead of blocking admission."""
        from contour_operator.webhooks.contour import list_contours_snapshot

        store = MagicMock()
        store.list_contours.side_effect = RuntimeError("connection refused")

        with patch(
            "contour_operator.webhooks.contour.get_contour_store", return_value=store
        ):
            assert await list_contours_snapshot() == []

    def test_store_is_shared(self):
        from contour_operator.webhooks import contour as webhook_module

        with patch.object(webhook_module, "_store", None):
            first = webhook_module.get_contour_store()
            assert webhook_module.get_contour_store() is first

    @pytest.mark.asyncio
    async def test_startup_configures_logging(self):
        from contour_operator.webhooks.contour import startup_handler

        with patch(
            "contour_operator.webhooks.contour.configure_logging"
        ) as mock_configure:
            await startup_handler(logger=MagicMock())

        mock_configure.assert_called_once_with()
