"""Tests for the feature extractor stage."""

import pytest

from roadforge.models.analysis import ComplexityTier
from roadforge.pipeline.stages.features import (
    AUTHENTICATION,
    FEATURE_CATALOGUE,
    PAYMENTS,
    REAL_TIME,
    FeatureDetector,
    extract_features,
)


class TestExtractFeatures:
    """Test extract_features function."""

    def test_no_keywords_returns_empty(self):
        """Keyword-free text yields no signals."""
        assert extract_features("A quiet place to jot down daily thoughts") == []

    def test_empty_description(self):
        """Empty text yields no signals."""
        assert extract_features("") == []

    def test_login_and_payment(self):
        """Login and payment phrases trigger their detectors."""
        signals = extract_features("Users can log in, add products to a cart, and pay with a card")
        names = [s.feature for s in signals]
        assert names == [AUTHENTICATION, PAYMENTS]

    def test_signal_carries_detector_constants(self):
        """Signals copy confidence, tier and hours from the detector."""
        [signal] = extract_features("a realtime board")
        assert signal.feature == REAL_TIME
        assert signal.confidence == 0.85
        assert signal.complexity == ComplexityTier.HIGH
        assert signal.estimated_hours == 12

    def test_order_is_catalogue_order(self):
        """Output follows catalogue order, not text order."""
        signals = extract_features("search first, then upload, then log in")
        catalogue_order = [d.feature for d in FEATURE_CATALOGUE]
        names = [s.feature for s in signals]
        assert names == sorted(names, key=catalogue_order.index)

    def test_unique_by_name(self):
        """Several keywords of one detector produce one signal."""
        signals = extract_features("login, signup, account, user")
        assert [s.feature for s in signals] == [AUTHENTICATION]

    def test_duplicate_detectors_are_deduplicated(self):
        """A catalogue with a repeated feature still emits it once."""
        detector = FEATURE_CATALOGUE[0]
        signals = extract_features("login", (detector, detector))
        assert len(signals) == 1

    def test_detectors_independent(self):
        """Adding text for one feature never removes another."""
        base = {s.feature for s in extract_features("upload photos")}
        more = {s.feature for s in extract_features("upload photos and search")}
        assert base <= more

    def test_all_detectors_can_fire(self):
        """Every detector fires on its own first keyword."""
        text = " ".join(d.keywords[0] for d in FEATURE_CATALOGUE)
        signals = extract_features(text)
        assert [s.feature for s in signals] == [d.feature for d in FEATURE_CATALOGUE]

    def test_custom_catalogue(self):
        """Detectors are data; a new one is a table entry."""
        detector = FeatureDetector(
            feature="Offline Mode",
            keywords=("offline",),
            confidence=0.7,
            reasoning="Offline needs sync",
            complexity=ComplexityTier.HIGH,
            estimated_hours=14,
        )
        [signal] = extract_features("works offline", (detector,))
        assert signal.feature == "Offline Mode"


class TestFeatureCatalogue:
    """Test the detector table."""

    def test_names_unique(self):
        """Feature names are unique across the catalogue."""
        names = [d.feature for d in FEATURE_CATALOGUE]
        assert len(names) == len(set(names))

    @pytest.mark.parametrize("detector", FEATURE_CATALOGUE, ids=lambda d: d.feature)
    def test_positive_hours(self, detector):
        """Every detector has positive effort."""
        assert detector.estimated_hours > 0
        assert 0 <= detector.confidence <= 1

    def test_four_high_tier_detectors(self):
        """Real-time, payments, AI and media are the high-tier detectors."""
        high = [d.feature for d in FEATURE_CATALOGUE if d.complexity == ComplexityTier.HIGH]
        assert len(high) == 4
