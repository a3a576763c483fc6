"""Tests for ObservationContext."""

from shared_kernel.observability_context import ObservationContext


class TestObservationContext:
    def test_as_dict_omits_unset_values(self):
        assert ObservationContext().as_dict() == {}
        assert ObservationContext(client="hash").as_dict() == {"client": "hash"}

    def test_with_request_preserves_other_fields(self):
        context = ObservationContext(client="hash", release="R1", extra={"a": 1})
        updated = context.with_request("req-9")

        assert updated.as_dict() == {
            "request_id": "req-9",
            "client": "hash",
            "release": "R1",
            "a": 1,
        }
        assert context.request_id is None

    def test_with_extra_merges_metadata(self):
        context = ObservationContext(extra={"a": 1}).with_extra(b=2)
        assert context.extra == {"a": 1, "b": 2}
