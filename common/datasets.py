"""
Static lookup tables for both debuggers.
Pure data: loaded once at import time and exposed through read-only views.
"""

from types import MappingProxyType

# Base product -> co-purchased item -> number of shared transactions.
# Insertion order is meaningful: it breaks ties when ranking.
CO_PURCHASES = MappingProxyType(
    {
        "Laptop": MappingProxyType(
            {"Mouse": 45, "Keyboard": 37, "USB Cable": 28, "Monitor": 22, "Phone Case": 5}
        ),
        "Smartphone": MappingProxyType(
            {"Phone Case": 62, "Screen Protector": 54, "Charger": 41, "Headphones": 18}
        ),
        "Headphones": MappingProxyType(
            {"Charger": 24, "Smartphone": 24, "Phone Case": 11, "USB Cable": 9}
        ),
        "Monitor": MappingProxyType(
            {"HDMI Cable": 33, "Keyboard": 19, "Mouse": 19, "Laptop": 12}
        ),
        "Gift Card": MappingProxyType({}),
    }
)

# Denominator for similarity: every buyer of the base product,
# not only those who bought a co-purchased item.
TOTAL_PURCHASES = MappingProxyType(
    {
        "Laptop": 165,
        "Smartphone": 210,
        "Headphones": 96,
        "Monitor": 88,
        "Gift Card": 40,
    }
)

STOPWORDS = frozenset(
    {
        "a", "an", "the", "and", "or", "but", "if", "then",
        "is", "are", "was", "were", "be", "been", "being", "am",
        "have", "has", "had", "do", "does", "did",
        "i", "me", "my", "we", "our", "you", "your", "he", "she", "it", "its", "they", "them",
        "this", "that", "these", "those",
        "to", "of", "in", "on", "at", "for", "with", "by", "from", "as",
    }
)

SENTIMENT_LEXICON = MappingProxyType(
    {
        "positive": frozenset(
            {
                "excellent", "great", "good", "amazing", "fantastic", "love",
                "perfect", "wonderful", "best", "fast", "happy", "recommend",
                "awesome", "outstanding", "reliable", "satisfied", "quick", "sturdy",
            }
        ),
        "negative": frozenset(
            {
                "bad", "poor", "terrible", "awful", "worst", "hate",
                "slow", "broken", "disappointed", "defective", "cheap", "useless",
                "horrible", "late", "damaged", "expensive", "waste", "rude",
            }
        ),
    }
)

# Keyword order within an aspect is the order matches are reported in.
ASPECT_KEYWORDS = MappingProxyType(
    {
        "Quality": ("quality", "build", "material", "durable", "sturdy", "broken", "defective"),
        "Delivery": ("delivery", "shipping", "fast", "slow", "late", "arrived", "package", "damaged"),
        "Price": ("price", "cost", "value", "expensive", "cheap", "money", "worth"),
        "Service": ("service", "support", "customer", "staff", "refund", "response", "rude"),
    }
)
