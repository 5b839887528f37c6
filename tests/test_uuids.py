"""Tests for the compact/canonical identifier codec."""

import uuid

import pytest

from mcprofiles.core.domain.uuids import coerce_uuid, to_canonical, to_compact
from mcprofiles.core.errors import FormatError


class TestToCompact:
    def test_strips_hyphens(self):
        """The compact form is the canonical text without hyphens."""
        value = uuid.UUID("f8cdb683-9e90-43ee-a819-39f85d9c5d69")

        assert to_compact(value) == "f8cdb6839e9043eea81939f85d9c5d69"

    @pytest.mark.parametrize("value", [uuid.uuid4() for _ in range(5)] + [uuid.UUID(int=0)])
    def test_always_32_chars_without_hyphens(self, value):
        """Output is always 32 characters and never contains a hyphen."""
        compact = to_compact(value)

        assert len(compact) == 32
        assert "-" not in compact

    @pytest.mark.parametrize("value", [uuid.uuid4() for _ in range(5)] + [uuid.UUID(int=2**128 - 1)])
    def test_round_trip(self, value):
        """to_canonical undoes to_compact."""
        assert to_canonical(to_compact(value)) == value


class TestToCanonical:
    def test_inserts_hyphens_8_4_4_4_12(self):
        """Hyphens go back at offsets 8, 12, 16 and 20."""
        assert str(to_canonical("f8cdb6839e9043eea81939f85d9c5d69")) == "f8cdb683-9e90-43ee-a819-39f85d9c5d69"

    def test_accepts_uppercase_hex(self):
        """Hex digits are case-insensitive."""
        assert to_canonical("F8CDB6839E9043EEA81939F85D9C5D69") == uuid.UUID("f8cdb683-9e90-43ee-a819-39f85d9c5d69")

    @pytest.mark.parametrize(
        "bad",
        [
            "",
            "f8cdb6839e9043eea81939f85d9c5d6",  # 31 chars
            "f8cdb6839e9043eea81939f85d9c5d699",  # 33 chars
            "f8cdb683-9e90-43ee-a819-39f85d9c5d69",  # canonical, not compact
            "g8cdb6839e9043eea81939f85d9c5d69",  # non-hex
            "f8cdb6839e9043eea81939f85d9c5d6 ",
        ],
    )
    def test_rejects_malformed_input(self, bad):
        """Anything but exactly 32 hex characters is a FormatError."""
        with pytest.raises(FormatError):
            to_canonical(bad)

    def test_rejects_non_string(self):
        """Non-string input is a FormatError, not a TypeError."""
        with pytest.raises(FormatError):
            to_canonical(1234)


class TestCoerceUuid:
    def test_passes_uuid_through(self):
        value = uuid.uuid4()

        assert coerce_uuid(value) is value

    def test_parses_canonical_and_compact_text(self):
        """Both textual forms resolve to the same identifier."""
        expected = uuid.UUID("c35a67c9-b797-469f-a893-cf81b4104898")

        assert coerce_uuid("c35a67c9-b797-469f-a893-cf81b4104898") == expected
        assert coerce_uuid("c35a67c9b797469fa893cf81b4104898") == expected

    def test_rejects_garbage(self):
        with pytest.raises(FormatError):
            coerce_uuid("not-a-uuid")
