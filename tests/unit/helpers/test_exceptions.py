"""Unit tests for mixdeck.helpers.exceptions."""

import pytest

from mixdeck.helpers.exceptions import ConfigFormatError, ConfigIOError, MixdeckError, ResolutionError


class TestExceptionHierarchy:
    """All reported failures share one base so callers can catch them together."""

    @pytest.mark.unit
    @pytest.mark.parametrize("exc_type", [ResolutionError, ConfigIOError, ConfigFormatError])
    def test_subclasses_base(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, MixdeckError)

    @pytest.mark.unit
    def test_message_preserved(self) -> None:
        with pytest.raises(MixdeckError, match="no pid"):
            raise ResolutionError("no pid")
