"""Tests for deterministic identifier derivation.

Derived identifiers are keyed off long-term by downstream systems, so the
golden values below must never change.
"""

import uuid

import pytest

from identifiers.domain.derivation import (
    OBJECT_ID_NAMESPACE,
    HashIdGenerator,
    ObjectIdGenerator,
    derive_digest,
)
from identifiers.domain.exceptions import PreconditionError
from identifiers.domain.value_objects import IdentifierFamily


class TestDeriveDigest:
    """Tests for derive_digest."""

    def test_is_deterministic(self):
        """Same keys in the same order should produce the same digest."""
        assert derive_digest(["D1", "P1"]) == derive_digest(["D1", "P1"])

    def test_matches_legacy_digest(self):
        """Digest is MD5 over the UTF-16LE encoding of the ':'-joined keys."""
        assert derive_digest(["D1", "P1"]) == "239d82c3bd61fd11a0135bc910588105"
        assert derive_digest(["FILE1"]) == "1bf86679c6ee222d76ca0c0bafbf03ca"

    def test_is_order_sensitive(self):
        """Swapping keys should change the digest."""
        assert derive_digest(["a", "b"]) != derive_digest(["b", "a"])

    def test_different_keys_give_different_digests(self):
        assert derive_digest(["D1", "P1"]) != derive_digest(["D2", "P1"])
        assert derive_digest(["D1", "P1"]) != derive_digest(["D1", "P2"])

    def test_digest_is_32_lowercase_hex_chars(self):
        digest = derive_digest(["D1", "P1"])
        assert len(digest) == 32
        assert all(c in "0123456789abcdef" for c in digest)

    def test_accepts_generators(self):
        assert derive_digest(k for k in ("D1", "P1")) == derive_digest(["D1", "P1"])

    def test_handles_unicode_keys(self):
        digest = derive_digest(["donor-müller", "PRJ-ü"])
        assert len(digest) == 32
        assert digest != derive_digest(["donor-muller", "PRJ-u"])

    def test_rejects_empty_key_tuple(self):
        with pytest.raises(PreconditionError, match="at least one key"):
            derive_digest([])

    @pytest.mark.parametrize("bad", ["", None, 42])
    def test_rejects_invalid_key(self, bad):
        with pytest.raises(PreconditionError, match=r"keys\[1\]"):
            derive_digest(["D1", bad])

    def test_precondition_error_is_value_error(self):
        with pytest.raises(ValueError):
            derive_digest([""])


class TestHashIdGenerator:
    """Tests for prefixed hash identifiers."""

    def test_prefixes_donor_id(self):
        donor_id = HashIdGenerator.generate(IdentifierFamily.DONOR, "D1", "P1")
        assert donor_id == "DO239d82c3bd61fd11a0135bc910588105"

    @pytest.mark.parametrize(
        "family,prefix",
        [
            (IdentifierFamily.DONOR, "DO"),
            (IdentifierFamily.SPECIMEN, "SP"),
            (IdentifierFamily.SAMPLE, "SA"),
            (IdentifierFamily.MUTATION, "MU"),
            (IdentifierFamily.FILE, "FI"),
        ],
    )
    def test_suffix_is_digest_of_keys(self, family, prefix):
        identifier = HashIdGenerator.generate(family, "K1", "P1")
        assert identifier == prefix + derive_digest(["K1", "P1"])

    def test_same_keys_different_families_differ_only_by_prefix(self):
        donor_id = HashIdGenerator.generate(IdentifierFamily.DONOR, "X", "P1")
        sample_id = HashIdGenerator.generate(IdentifierFamily.SAMPLE, "X", "P1")
        assert donor_id != sample_id
        assert donor_id[2:] == sample_id[2:]


class TestObjectIdGenerator:
    """Tests for name-based object identifiers."""

    def test_is_valid_uuid5(self):
        object_id = ObjectIdGenerator.generate("A1", "f.txt")
        parsed = uuid.UUID(object_id)
        assert str(parsed) == object_id
        assert parsed.version == 5

    def test_matches_golden_value(self):
        assert (
            ObjectIdGenerator.generate("A1", "f.txt")
            == "85be9d26-776b-5307-a6cc-8efca1f5ec15"
        )

    def test_uses_fixed_namespace_and_slash_separator(self):
        expected = str(uuid.uuid5(OBJECT_ID_NAMESPACE, "A1/f.txt"))
        assert ObjectIdGenerator.generate("A1", "f.txt") == expected

    def test_is_deterministic(self):
        assert ObjectIdGenerator.generate("A1", "f.txt") == ObjectIdGenerator.generate(
            "A1", "f.txt"
        )

    def test_differs_by_file_name(self):
        assert ObjectIdGenerator.generate("A1", "f.txt") != ObjectIdGenerator.generate(
            "A1", "g.txt"
        )

    @pytest.mark.parametrize("analysis_id,file_name", [("", "f.txt"), ("A1", None)])
    def test_rejects_missing_parts(self, analysis_id, file_name):
        with pytest.raises(PreconditionError):
            ObjectIdGenerator.generate(analysis_id, file_name)
