"""Feature extractor stage.

Each detector owns its keywords and output constants. Detectors are
independent and non-exclusive: any subset may fire, in catalogue order.
"""

from dataclasses import dataclass

from roadforge.models.analysis import ComplexityTier, FeatureSignal

AUTHENTICATION = "User Authentication"
REAL_TIME = "Real-time Updates"
PAYMENTS = "Payment Processing"
FILE_UPLOAD = "File Upload"
SEARCH = "Search & Filtering"


@dataclass(frozen=True)
class FeatureDetector:
    """Keywords for one feature and the signal emitted when any matches."""

    feature: str
    keywords: tuple[str, ...]
    confidence: float
    reasoning: str
    complexity: ComplexityTier
    estimated_hours: float

    def detect(self, text: str) -> FeatureSignal | None:
        if not any(keyword in text for keyword in self.keywords):
            return None
        return FeatureSignal(
            feature=self.feature,
            confidence=self.confidence,
            reasoning=self.reasoning,
            complexity=self.complexity,
            estimated_hours=self.estimated_hours,
        )


FEATURE_CATALOGUE: tuple[FeatureDetector, ...] = (
    FeatureDetector(
        feature=AUTHENTICATION,
        keywords=("login", "log in", "sign in", "signup", "sign up", "user", "account"),
        confidence=0.9,
        reasoning="Mentions of users, login, or accounts indicate need for authentication system",
        complexity=ComplexityTier.MEDIUM,
        estimated_hours=8,
    ),
    FeatureDetector(
        feature=REAL_TIME,
        keywords=("real-time", "realtime", "live", "instant", "notification", "chat", "websocket"),
        confidence=0.85,
        reasoning=(
            "Real-time functionality requires WebSocket connections and live data "
            "synchronization"
        ),
        complexity=ComplexityTier.HIGH,
        estimated_hours=12,
    ),
    FeatureDetector(
        feature=PAYMENTS,
        keywords=(
            "payment",
            "pay with",
            "pay by",
            "stripe",
            "checkout",
            "purchase",
            "subscription",
            "credit card",
        ),
        confidence=0.9,
        reasoning=(
            "Payment functionality requires secure integration with payment providers "
            "like Stripe"
        ),
        complexity=ComplexityTier.HIGH,
        estimated_hours=16,
    ),
    FeatureDetector(
        feature=FILE_UPLOAD,
        keywords=("upload", "image", "file", "photo"),
        confidence=0.8,
        reasoning="File upload functionality requires storage solution and file management",
        complexity=ComplexityTier.MEDIUM,
        estimated_hours=6,
    ),
    FeatureDetector(
        feature="API Integration",
        keywords=("api", "integration", "third-party", "external"),
        confidence=0.75,
        reasoning="External API integration requires data synchronization and error handling",
        complexity=ComplexityTier.MEDIUM,
        estimated_hours=10,
    ),
    FeatureDetector(
        feature=SEARCH,
        keywords=("search", "filter", "find"),
        confidence=0.8,
        reasoning="Search functionality requires indexing and query optimization",
        complexity=ComplexityTier.MEDIUM,
        estimated_hours=8,
    ),
    FeatureDetector(
        feature="Admin Panel",
        keywords=("admin", "manage", "control panel"),
        confidence=0.85,
        reasoning="Administrative features require role-based access and management interfaces",
        complexity=ComplexityTier.MEDIUM,
        estimated_hours=12,
    ),
    FeatureDetector(
        feature="Mobile Responsive Design",
        keywords=("mobile", "responsive", "phone", "tablet"),
        confidence=0.9,
        reasoning="Mobile support requires responsive design and touch-friendly interfaces",
        complexity=ComplexityTier.LOW,
        estimated_hours=6,
    ),
    FeatureDetector(
        feature="Analytics & Reporting",
        keywords=("dashboard", "analytics", "chart", "report", "metrics"),
        confidence=0.8,
        reasoning="Reporting requires data aggregation and chart components",
        complexity=ComplexityTier.MEDIUM,
        estimated_hours=10,
    ),
    FeatureDetector(
        feature="Email Notifications",
        keywords=("email", "newsletter", "reminder"),
        confidence=0.75,
        reasoning="Outbound email requires a delivery provider and message templates",
        complexity=ComplexityTier.LOW,
        estimated_hours=4,
    ),
    FeatureDetector(
        feature="AI Features",
        keywords=("ai-powered", "machine learning", "recommendation", "chatbot", "llm", "gpt"),
        confidence=0.8,
        reasoning="AI features require model integration, prompt design, and cost controls",
        complexity=ComplexityTier.HIGH,
        estimated_hours=20,
    ),
    FeatureDetector(
        feature="Media Streaming",
        keywords=("video", "stream", "audio", "podcast"),
        confidence=0.8,
        reasoning="Media streaming requires transcoding, CDN delivery, and bandwidth planning",
        complexity=ComplexityTier.HIGH,
        estimated_hours=18,
    ),
    FeatureDetector(
        feature="Maps & Geolocation",
        keywords=("maps", "location", "gps", "geolocation", "nearby"),
        confidence=0.75,
        reasoning="Location features require a maps provider and geospatial queries",
        complexity=ComplexityTier.MEDIUM,
        estimated_hours=8,
    ),
    FeatureDetector(
        feature="Multi-language Support",
        keywords=("multi-language", "multilingual", "translation", "i18n", "localization"),
        confidence=0.7,
        reasoning="Internationalization requires externalized strings and locale handling",
        complexity=ComplexityTier.LOW,
        estimated_hours=5,
    ),
)


def extract_features(
    description: str,
    catalogue: tuple[FeatureDetector, ...] = FEATURE_CATALOGUE,
) -> list[FeatureSignal]:
    """Detect features mentioned in the description.

    Args:
        description: Free-text project description.
        catalogue: Detectors in evaluation order.

    Returns:
        One FeatureSignal per firing detector, in catalogue order.
    """
    text = description.lower()
    signals = []
    seen: set[str] = set()
    for detector in catalogue:
        if detector.feature in seen:
            continue
        signal = detector.detect(text)
        if signal is not None:
            signals.append(signal)
            seen.add(signal.feature)
    return signals
