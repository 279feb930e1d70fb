"""Pass/fail decision on a scan result."""


def should_fail(sast, threshold, fail_on_score=True):
    """Return True when the run must exit non-zero because of the score.

    A run with no vulnerabilities always passes. Otherwise it fails when
    fail_on_score is set and the score is above the threshold.
    """
    if not fail_on_score:
        return False
    if not sast.vulnerabilities:
        return False
    return sast.score > threshold
