"""Tests for task id generation."""

import re
import uuid

from papilio.domain.ids import fallback_id, generate_id

_FALLBACK = re.compile(r"^[0-9a-z]+-[0-9a-f]{8}$")


class TestGenerateId:
    def test_uuid_by_default(self) -> None:
        value = generate_id()
        assert str(uuid.UUID(value)) == value

    def test_unique(self) -> None:
        assert len({generate_id() for _ in range(200)}) == 200

    def test_custom_factory(self) -> None:
        fixed = uuid.UUID("12345678-1234-5678-1234-567812345678")
        assert generate_id(lambda: fixed) == str(fixed)

    def test_falls_back_without_randomness(self) -> None:
        def no_entropy() -> uuid.UUID:
            raise NotImplementedError("no randomness source")

        assert _FALLBACK.match(generate_id(no_entropy))

    def test_falls_back_on_os_error(self) -> None:
        def broken() -> uuid.UUID:
            raise OSError("urandom failed")

        assert _FALLBACK.match(generate_id(broken))


class TestFallbackId:
    def test_format(self) -> None:
        assert _FALLBACK.match(fallback_id())

    def test_distinct(self) -> None:
        assert len({fallback_id() for _ in range(50)}) == 50
