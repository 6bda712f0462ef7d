"""Edit-distance alignment and word error rate between token sequences."""
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Tuple


@dataclass(frozen=True)
class AlignedWord:
    """One step of the alignment path.

    Attributes:
        ref_word: Reference token (None for an insertion)
        hyp_word: Hypothesis token (None for a deletion)
        op: "match", "sub", "del" or "ins"
    """
    ref_word: Optional[str]
    hyp_word: Optional[str]
    op: str


@dataclass(frozen=True)
class AlignmentResult:
    wer: float
    distance: int
    path: Tuple[AlignedWord, ...] = ()
    missing: Tuple[str, ...] = ()

    def count(self, op: str) -> int:
        return sum(1 for step in self.path if step.op == op)

    @property
    def substitutions(self) -> int:
        return self.count("sub")

    @property
    def deletions(self) -> int:
        return self.count("del")

    @property
    def insertions(self) -> int:
        return self.count("ins")


def align_sequences(ref: Sequence[str], hyp: Sequence[str]) -> Tuple[int, List[AlignedWord]]:
    """Minimum edit distance with unit costs, plus one optimal alignment path.

    When several operations reach the same cost the diagonal step (match or
    substitution) wins over deletion, and deletion over insertion, so the
    path is deterministic.

    Returns:
        (distance, path) where path is ordered left to right
    """
    n, m = len(ref), len(hyp)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        dp[i][0] = i
    for j in range(1, m + 1):
        dp[0][j] = j

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost_sub = 0 if ref[i - 1] == hyp[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j - 1] + cost_sub,
                dp[i - 1][j] + 1,
                dp[i][j - 1] + 1,
            )

    path: List[AlignedWord] = []
    i, j = n, m
    while i > 0 or j > 0:
        if i > 0 and j > 0:
            cost_sub = 0 if ref[i - 1] == hyp[j - 1] else 1
            if dp[i][j] == dp[i - 1][j - 1] + cost_sub:
                op = "match" if cost_sub == 0 else "sub"
                path.append(AlignedWord(ref[i - 1], hyp[j - 1], op))
                i -= 1
                j -= 1
                continue
        if i > 0 and dp[i][j] == dp[i - 1][j] + 1:
            path.append(AlignedWord(ref[i - 1], None, "del"))
            i -= 1
        else:
            path.append(AlignedWord(None, hyp[j - 1], "ins"))
            j -= 1
    path.reverse()
    return dp[n][m], path


def error_rate(distance: int, reference_length: int) -> float:
    """Edit distance per reference token, clamped to [0, 1]."""
    return min(1.0, distance / max(1, reference_length))


def word_error_rate(ref: Sequence[str], hyp: Sequence[str]) -> float:
    """Edit distance normalised by reference length, clamped to [0, 1].

    Both empty gives 0.0; an empty reference against any speech gives 1.0.
    """
    distance, _ = align_sequences(ref, hyp)
    return error_rate(distance, len(ref))


def missing_tokens(keywords: Sequence[str], hyp: Sequence[str]) -> List[str]:
    """Keywords that never occur in the hypothesis, in order, with repeats."""
    present: Set[str] = set(hyp)
    return [word for word in keywords if word not in present]


def preview(words: Sequence[str], limit: int) -> List[str]:
    seen: Set[str] = set()
    out: List[str] = []
    for word in words:
        if word in seen:
            continue
        seen.add(word)
        out.append(word)
        if len(out) >= limit:
            break
    return out


def align_tokens(ref: Sequence[str], hyp: Sequence[str], preview_count: int = 5) -> AlignmentResult:
    distance, path = align_sequences(ref, hyp)
    return AlignmentResult(
        wer=error_rate(distance, len(ref)),
        distance=distance,
        path=tuple(path),
        missing=tuple(preview(missing_tokens(ref, hyp), preview_count)),
    )
