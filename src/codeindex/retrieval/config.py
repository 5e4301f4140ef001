"""
Configuration for hybrid retrieval.
"""

HYBRID_SEARCH_CONFIG = {
    "keyword_weight": 0.4,  # Weight of the keyword ranking in fusion
    "semantic_weight": 0.6,  # Weight of the embedding ranking in fusion
    "default_limit": 5,  # Results returned when no limit is given
    "candidate_multiplier": 2,  # Fetch limit * N from each method before fusion
    "max_highlights": 3,  # Matching lines attached to each result
}
