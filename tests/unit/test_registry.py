"""
Unit tests for Contour uniqueness queries over snapshots.
"""

from contour_operator.utils.registry import (
    gateway_class_refs_exist,
    other_contours_exist,
    other_contours_exist_in_spec_ns,
)
from tests.fixtures.contour_resources import make_contour


class TestOtherContoursExist:
    """Test global uniqueness checks."""

    def test_empty_snapshot(self):
        contour = make_contour("a")
        assert other_contours_exist(contour, []) == (False, None)

    def test_only_self(self):
        contour = make_contour("a")
        assert other_contours_exist(contour, [make_contour("a")]) == (False, None)

    def test_single_other(self):
        contour = make_contour("a")
        other = make_contour("b")

        exist, contours = other_contours_exist(contour, [other])

        assert exist is True
        assert contours == [other]

    def test_self_and_other(self):
        contour = make_contour("a")
        other = make_contour("b")

        exist, contours = other_contours_exist(contour, [contour, other])

        assert exist is True
        assert contours == [contour, other]

    def test_returns_copy_of_snapshot(self):
        contour = make_contour("a")
        snapshot = (contour, make_contour("b"))

        _, contours = other_contours_exist(contour, snapshot)

        assert isinstance(contours, list)
        assert contours == list(snapshot)


class TestOtherContoursExistInSpecNs:
    """Test per spec namespace uniqueness checks."""

    def test_shared_spec_namespace(self):
        a = make_contour("a", namespace="x", spec_ns="teamA")
        b = make_contour("b", namespace="x", spec_ns="teamA")

        assert other_contours_exist_in_spec_ns(a, [a, b]) is True

    def test_distinct_spec_namespaces(self):
        a = make_contour("a", namespace="x", spec_ns="teamA")
        b = make_contour("b", namespace="x", spec_ns="teamB")

        assert other_contours_exist_in_spec_ns(a, [a, b]) is False

    def test_empty_snapshot(self):
        a = make_contour("a", spec_ns="teamA")
        assert other_contours_exist_in_spec_ns(a, []) is False

    def test_only_self(self):
        a = make_contour("a", spec_ns="teamA")
        assert other_contours_exist_in_spec_ns(a, [a]) is False

    def test_single_other_sharing_namespace(self):
        """The snapshot may not contain the asking Contour yet (before create)."""
        a = make_contour("a", spec_ns="teamA")
        b = make_contour("b", spec_ns="teamA")

        assert other_contours_exist_in_spec_ns(a, [b]) is True

    def test_same_name_in_other_namespace_conflicts(self):
        a = make_contour("contour", namespace="x", spec_ns="teamA")
        twin = make_contour("contour", namespace="y", spec_ns="teamA")

        assert other_contours_exist_in_spec_ns(a, [a, twin]) is True

    def test_many_contours_no_conflict(self):
        a = make_contour("a", spec_ns="teamA")
        snapshot = [
            make_contour("b", spec_ns="teamB"),
            a,
            make_contour("c", spec_ns="teamC"),
        ]

        assert other_contours_exist_in_spec_ns(a, snapshot) is False

    def test_many_contours_conflict_last(self):
        a = make_contour("a", spec_ns="teamA")
        snapshot = [
            a,
            make_contour("b", spec_ns="teamB"),
            make_contour("c", spec_ns="teamA"),
        ]

        assert other_contours_exist_in_spec_ns(a, snapshot) is True


class TestGatewayClassRefsExist:
    """Test GatewayClass reference lookups."""

    def test_matches_preserve_order(self):
        c1 = make_contour("c1", gateway_class="foo")
        c2 = make_contour("c2", gateway_class="bar")
        c3 = make_contour("c3")
        c4 = make_contour("c4", gateway_class="foo")

        assert gateway_class_refs_exist([c1, c2, c3, c4], "foo") == [c1, c4]

    def test_no_matches(self):
        contours = [make_contour("c1", gateway_class="bar"), make_contour("c2")]
        assert gateway_class_refs_exist(contours, "foo") == []

    def test_empty_snapshot(self):
        assert gateway_class_refs_exist([], "foo") == []

    def test_unset_ref_never_matches_empty_name(self):
        unset = make_contour("c1")
        empty = make_contour("c2", gateway_class="")

        assert gateway_class_refs_exist([unset, empty], "") == [empty]
