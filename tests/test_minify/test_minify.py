"""Tests for the minify adapter."""

import pytest

from cssvg.config import MinifyOptions
from cssvg.errors import OptimizeError
from cssvg.minify import MinifyOutcome, minify_svg
from cssvg.optimizer import OptimizeResult


class RecordingOptimizer:
    """Optimizer stub that records its calls and echoes (or replaces) the markup."""

    def __init__(self, data=None, error=None):
        self.data = data
        self.error = error
        self.calls = []

    def __call__(self, markup, options):
        self.calls.append((markup, dict(options)))
        if self.error is not None:
            return OptimizeResult(error=self.error)
        return OptimizeResult(data=markup if self.data is None else self.data)


# ---------------------------------------------------------------------------
# Encoding detection
# ---------------------------------------------------------------------------


class TestEncodingDetection:
    def test_encoded_payload_is_decoded(self):
        optimizer = RecordingOptimizer()
        outcome = minify_svg("%3Csvg%3E%3C/svg%3E", optimizer=optimizer)
        assert optimizer.calls[0][0] == "<svg></svg>"
        assert outcome == MinifyOutcome(markup="<svg></svg>", uri_encoded=True)

    def test_literal_payload(self):
        optimizer = RecordingOptimizer()
        outcome = minify_svg("<svg></svg>", optimizer=optimizer)
        assert optimizer.calls[0][0] == "<svg></svg>"
        assert outcome.uri_encoded is False

    def test_stray_percent_means_not_encoded(self):
        optimizer = RecordingOptimizer()
        outcome = minify_svg("<rect width='100%'/>", optimizer=optimizer)
        assert optimizer.calls[0][0] == "<rect width='100%'/>"
        assert outcome.uri_encoded is False


# ---------------------------------------------------------------------------
# encode override
# ---------------------------------------------------------------------------


class TestEncodeOverride:
    def test_force_encode_on_literal(self):
        optimizer = RecordingOptimizer()
        outcome = minify_svg("<svg/>", MinifyOptions(encode=True), optimizer)
        assert optimizer.calls[0][0] == "<svg/>"
        assert outcome.uri_encoded is True

    def test_force_literal_on_encoded(self):
        optimizer = RecordingOptimizer()
        outcome = minify_svg("%3Csvg/%3E", MinifyOptions(encode=False), optimizer)
        # still optimizes the decoded text
        assert optimizer.calls[0][0] == "<svg/>"
        assert outcome.uri_encoded is False


# ---------------------------------------------------------------------------
# Optimizer interaction
# ---------------------------------------------------------------------------


class TestOptimizerCall:
    def test_escaped_quotes_normalized_first(self):
        optimizer = RecordingOptimizer()
        minify_svg('<svg xmlns=\\"http://www.w3.org/2000/svg\\"></svg>', optimizer=optimizer)
        markup = optimizer.calls[0][0]
        assert "\\" not in markup
        assert markup == '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    def test_passthrough_options_without_encode(self):
        optimizer = RecordingOptimizer()
        options = MinifyOptions.from_mapping({"encode": True, "set_precision": 3})
        minify_svg("<svg/>", options, optimizer)
        assert optimizer.calls[0][1] == {"set_precision": 3}

    def test_optimized_markup_returned(self):
        optimizer = RecordingOptimizer(data="<svg/>")
        outcome = minify_svg("<svg>  </svg>", optimizer=optimizer)
        assert outcome.markup == "<svg/>"

    def test_error_raises(self):
        optimizer = RecordingOptimizer(error="parse error")
        with pytest.raises(OptimizeError, match="parse error"):
            minify_svg("<svg", optimizer=optimizer)

    def test_missing_data_raises(self):
        def optimizer(markup, options):
            return OptimizeResult()

        with pytest.raises(OptimizeError):
            minify_svg("<svg/>", optimizer=optimizer)


class TestMinifyOptions:
    def test_defaults(self):
        options = MinifyOptions()
        assert options.encode is None
        assert options.optimizer == {}

    def test_from_mapping_none(self):
        assert MinifyOptions.from_mapping(None) == MinifyOptions()

    def test_from_mapping_splits_encode(self):
        options = MinifyOptions.from_mapping({"encode": False, "shorten_ids": True})
        assert options.encode is False
        assert options.optimizer == {"shorten_ids": True}

    def test_frozen(self):
        with pytest.raises(AttributeError):
            MinifyOptions().encode = True  # type: ignore[misc]
