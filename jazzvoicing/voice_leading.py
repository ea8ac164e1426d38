"""
Voice-leading optimizer: pick one inversion per chord so the whole line is
as smooth and as playable as possible.

Path score = sum of per-chord playability + sum of finger-position scores
between neighbours, maximised by dynamic programming over the candidate
lists. Sorted pitch order is the finger assignment (index 0 = lowest note).
"""
import numpy as np

# Hand-span penalty: free up to an octave, -0.5/semitone to 18, -2/semitone beyond.
_COMFORT_SPAN = 12
_STRETCH_SPAN = 18
_STRETCH_SLOPE = 0.5
_REACH_SLOPE = 2.0

_SAME_FINGER_BONUS = 3
_MOVED_FINGER_BONUS = 1


def playability_score(candidate) -> float:
    """0 for a span ≤ 12 semitones, negative and non-increasing beyond."""
    span = max(candidate) - min(candidate)
    stretch = np.clip(span - _COMFORT_SPAN, 0, _STRETCH_SPAN - _COMFORT_SPAN)
    reach = max(span - _STRETCH_SPAN, 0)
    return float(-_STRETCH_SLOPE * stretch - _REACH_SLOPE * reach)


def finger_position_score(a, b) -> int:
    """
    +3 for every finger that stays on the same key (same pitch at the same
    sorted index), +1 for every shared pitch that sits at a different index.
    """
    sa = np.sort(np.asarray(a))
    sb = np.sort(np.asarray(b))
    same = np.equal.outer(sa, sb)
    n = min(len(sa), len(sb))
    kept = int(np.trace(same[:n, :n]))
    moved = int(same.sum()) - kept
    return _SAME_FINGER_BONUS * kept + _MOVED_FINGER_BONUS * moved


def optimize_line(candidate_lists):
    """
    Choose one candidate per chord maximising the path score.

    Args:
        candidate_lists: one non-empty list of candidates (pitch sequences)
            per chord, in line order.

    Returns:
        list of the chosen candidates, one per chord. Ties go to the lowest
        candidate index, both inside the recurrence and for the final chord.
    """
    if not candidate_lists:
        return []
    for i, cands in enumerate(candidate_lists):
        if not cands:
            raise ValueError(f"chord {i} has no voicing candidates")
    if len(candidate_lists) == 1:
        return [candidate_lists[0][0]]

    first = candidate_lists[0]
    scores = np.array([playability_score(c) for c in first], dtype=np.float64)
    parents = []

    for prev, cur in zip(candidate_lists, candidate_lists[1:]):
        step = np.empty(len(cur), dtype=np.float64)
        parent = np.empty(len(cur), dtype=np.int64)
        for j, cand in enumerate(cur):
            totals = scores + np.array(
                [finger_position_score(p, cand) for p in prev], dtype=np.float64
            )
            k = int(np.argmax(totals))  # first maximum
            parent[j] = k
            step[j] = playability_score(cand) + totals[k]
        scores = step
        parents.append(parent)

    j = int(np.argmax(scores))
    path = [j]
    for parent in reversed(parents):
        j = int(parent[j])
        path.append(j)
    path.reverse()
    return [cands[idx] for cands, idx in zip(candidate_lists, path)]


def changed_positions(previous, current) -> list[int]:
    """
    Indices (in ascending pitch order) of `current` whose pitch differs from
    `previous` at the same index, or that `previous` does not have. Pass
    None for the first chord of a line: every position counts as changed.
    """
    cur = sorted(current)
    if previous is None:
        return list(range(len(cur)))
    prev = sorted(previous)
    return [i for i, p in enumerate(cur) if i >= len(prev) or prev[i] != p]
