"""Tests for request, result and configuration models."""

import pytest
from pydantic import ValidationError

from pagepull.models import (
    Cardinality,
    ConnectConfig,
    ExtractionMode,
    ExtractionOptions,
    ExtractionResult,
    FormatOptions,
    LaunchConfig,
    OutputFormat,
    SelectorKind,
    Viewport,
)


class TestExtractionOptions:
    """Tests for ExtractionOptions."""

    def test_defaults(self):
        """Test default values."""
        options = ExtractionOptions(selector="h1")

        assert options.selector_kind == SelectorKind.CSS
        assert options.mode == ExtractionMode.TEXT
        assert options.attribute_name is None
        assert options.cardinality == Cardinality.SINGLE
        assert options.wait is True
        assert options.timeout_ms == 10000
        assert options.multiple is False

    def test_accepts_string_values(self):
        """Test that enum fields accept their string values."""
        options = ExtractionOptions(selector="//a", selector_kind="xpath", mode="html", cardinality="multiple")

        assert options.selector_kind == SelectorKind.XPATH
        assert options.mode == ExtractionMode.HTML
        assert options.multiple is True

    def test_empty_selector_rejected(self):
        """Test that the selector is required and non-empty."""
        with pytest.raises(ValidationError):
            ExtractionOptions(selector="")

    @pytest.mark.parametrize("timeout", [0, -5])
    def test_timeout_must_be_positive(self, timeout):
        """Test timeout validation."""
        with pytest.raises(ValidationError):
            ExtractionOptions(selector="h1", timeout_ms=timeout)

    def test_attribute_name_checked_late(self):
        """Test that attribute mode without a name can still be constructed."""
        options = ExtractionOptions(selector="img", mode="attribute")
        assert options.attribute_name is None

    def test_is_immutable(self):
        """Test that options cannot be changed after creation."""
        options = ExtractionOptions(selector="h1")
        with pytest.raises(ValidationError):
            options.selector = "h2"

    def test_rejects_unknown_fields(self):
        """Test that typos are not silently ignored."""
        with pytest.raises(ValidationError):
            ExtractionOptions(selector="h1", multipl=True)


class TestFormatOptions:
    """Tests for FormatOptions."""

    def test_defaults(self):
        """Test default values."""
        options = FormatOptions()

        assert options.format == OutputFormat.TEXT
        assert options.pretty is True
        assert options.base_url is None

    def test_unknown_format_rejected(self):
        """Test format validation."""
        with pytest.raises(ValidationError):
            FormatOptions(format="yaml")


class TestExtractionResult:
    """Tests for ExtractionResult."""

    def test_failure(self):
        """Test the failure constructor."""
        result = ExtractionResult.failure("boom")

        assert result.success is False
        assert result.data is None
        assert result.count == 0
        assert result.error == "boom"

    def test_to_dict(self):
        """Test dict conversion with and without an error."""
        assert ExtractionResult(success=True, data=["a"], count=1).to_dict() == {
            "success": True,
            "data": ["a"],
            "count": 1,
        }
        assert ExtractionResult.failure("boom").to_dict()["error"] == "boom"


class TestBrowserConfig:
    """Tests for browser session configuration."""

    def test_viewport_parse(self):
        """Test parsing WIDTHxHEIGHT strings."""
        viewport = Viewport.parse("1920x1080")

        assert viewport.width == 1920
        assert viewport.height == 1080

    @pytest.mark.parametrize("value", ["1920", "axb", "1920x", "0x100", "10x20x30"])
    def test_viewport_parse_invalid(self, value):
        """Test malformed viewport strings."""
        with pytest.raises(ValueError):
            Viewport.parse(value)

    def test_launch_defaults(self):
        """Test LaunchConfig defaults."""
        config = LaunchConfig()

        assert config.headless is True
        assert config.viewport is None
        assert config.wait_until == "domcontentloaded"

    def test_invalid_wait_until(self):
        """Test navigation wait condition validation."""
        with pytest.raises(ValidationError):
            LaunchConfig(wait_until="idle")

    def test_connect_requires_debug_url(self):
        """Test that the CDP endpoint is required."""
        with pytest.raises(ValidationError):
            ConnectConfig()
