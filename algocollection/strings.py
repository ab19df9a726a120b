"""K-palindrome check."""


def _deletion_distance(first: str, second: str) -> int:
    """Fewest insertions and deletions turning ``first`` into ``second``."""
    previous = list(range(len(second) + 1))
    for i, char in enumerate(first, 1):
        current = [i]
        for j, other in enumerate(second, 1):
            if char == other:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[-1]))
        previous = current
    return previous[-1]


def is_k_palindrome(text: str, k: int) -> bool:
    """Return True if removing at most ``k`` characters makes ``text`` a palindrome."""
    return _deletion_distance(text, text[::-1]) <= 2 * k