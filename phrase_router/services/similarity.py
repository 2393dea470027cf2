"""
Similarity scoring between user input and catalog phrases.

The combined score is hand-tuned, not learned:
    base    = similarity(input, candidate) * 0.6
    bonus   = min(0.3, len(input) / len(candidate) * 0.5) if candidate contains input
              0.1 if they share a contiguous substring of length >= 2
              0 otherwise
    penalty = min(0.2, |len(input) - len(candidate)| / max_len * 0.2)
    score   = clamp(base + bonus - penalty, 0, 1)
"""

BASE_WEIGHT = 0.6
CONTAINMENT_BONUS_CAP = 0.3
CONTAINMENT_RATIO_WEIGHT = 0.5
COMMON_SUBSTRING_BONUS = 0.1
LENGTH_PENALTY_CAP = 0.2
LENGTH_PENALTY_WEIGHT = 0.2


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance over code points (insert, delete, substitute; unit cost).

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning a into b
    """
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i-1] == b[j-1]:
                dp[i][j] = dp[i-1][j-1]
            else:
                dp[i][j] = 1 + min(
                    dp[i-1][j],      # deletion
                    dp[i][j-1],      # insertion
                    dp[i-1][j-1]     # substitution
                )

    return dp[m][n]


def similarity(a: str, b: str) -> float:
    """Normalized edit similarity in [0, 1]."""
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0

    distance = edit_distance(a, b)
    return max(0.0, 1.0 - distance / max(len(a), len(b)))


def contains_substring(text: str, search: str) -> bool:
    """Case-insensitive containment; an empty search never matches."""
    if not search:
        return False
    return search.lower() in text.lower()


def has_common_substring(a: str, b: str, min_length: int = 2) -> bool:
    """Check whether a and b share any contiguous substring of at least min_length."""
    if len(a) < min_length or len(b) < min_length:
        return False

    # any longer common substring contains one of exactly min_length
    for i in range(len(a) - min_length + 1):
        if a[i:i + min_length] in b:
            return True
    return False


def match_score(input_text: str, candidate: str) -> float:
    """
    Combined match score of input_text against a catalog candidate.

    Args:
        input_text: Trimmed user input
        candidate: Catalog phrase in the same language

    Returns:
        Score clamped to [0, 1]
    """
    base = similarity(input_text, candidate) * BASE_WEIGHT

    bonus = 0.0
    if contains_substring(candidate, input_text):
        ratio = len(input_text) / len(candidate)
        bonus = min(CONTAINMENT_BONUS_CAP, ratio * CONTAINMENT_RATIO_WEIGHT)
    elif has_common_substring(input_text, candidate, 2):
        bonus = COMMON_SUBSTRING_BONUS

    max_len = max(len(input_text), len(candidate))
    penalty = 0.0
    if max_len:
        length_diff = abs(len(input_text) - len(candidate))
        penalty = min(LENGTH_PENALTY_CAP, length_diff / max_len * LENGTH_PENALTY_WEIGHT)

    score = base + bonus - penalty
    return max(0.0, min(1.0, score))
