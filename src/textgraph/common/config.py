"""
Shared configuration for the text graph tools.

Values are the defaults used by the command line; every one of them can be
overridden per call or per invocation.
"""

# === THAM SỐ THUẬT TOÁN ===

DEFAULT_DAMPING = 0.85
DEFAULT_ITERATIONS = 50

# Floor added to every TF-IDF prior so no node starts with zero mass.
TFIDF_EPSILON = 1e-4


# === EXPORT ===

EXPORT_FORMATS = ("png", "svg", "pdf")
DOT_BINARY = "dot"
