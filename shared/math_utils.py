"""
Scytale Mathematical Utilities
===============================

Statistics used by the frequency analyzer: Pearson's chi-squared
statistic and its p-value, Shannon entropy of a symbol stream, the
index of coincidence, and relative-frequency tables.

All vector arithmetic is done with NumPy; the chi-squared p-value uses
the regularised incomplete gamma function so SciPy is not required.

References:
    [1] Pearson, K. (1900). On the Criterion that a Given System of
        Deviations ... Philosophical Magazine, 50(302), 157-175.
    [2] Shannon, C. E. (1948). A Mathematical Theory of Communication.
        Bell System Technical Journal, 27(3), 379-423.
    [3] Friedman, W. F. (1922). The Index of Coincidence and its
        Applications in Cryptography. Riverbank Publication No. 22.
    [4] Press, W. H. et al. (2007). Numerical Recipes (3rd ed.).
        Cambridge University Press, Section 6.2.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Iterable, Mapping

import numpy as np
from numpy.typing import NDArray

FloatArray = NDArray[np.floating]


# ========================== Frequency tables ===============================


def percentage_table(symbols: Iterable[str]) -> dict[str, float]:
    """Count *symbols* and express each count as a percentage of the total.

    Keys appear in first-seen order. An empty iterable gives ``{}``.
    """
    counts = Counter(symbols)
    total = sum(counts.values())
    if total == 0:
        return {}
    keys = list(counts)
    values = np.fromiter((counts[k] for k in keys), dtype=np.float64)
    percents = values / total * 100.0
    return {k: float(p) for k, p in zip(keys, percents)}


def align_frequencies(
    observed: Mapping[str, float], expected: Mapping[str, float]
) -> tuple[list[str], FloatArray, FloatArray]:
    """Align two frequency tables on the keys of *expected*.

    Missing observed symbols count as 0.

    Returns:
        ``(keys, observed_array, expected_array)``.
    """
    keys = list(expected)
    obs = np.array([observed.get(k, 0.0) for k in keys], dtype=np.float64)
    exp = np.array([expected[k] for k in keys], dtype=np.float64)
    return keys, obs, exp


# ======================== Statistical Tests ================================


def chi_squared_statistic(observed: FloatArray, expected: FloatArray) -> float:
    """Pearson's chi-squared statistic.

    .. math::

        \\chi^2 = \\sum_i \\frac{(O_i - E_i)^2}{E_i}

    Terms whose expected value is not positive are skipped, since the
    quotient is undefined there.

    Raises:
        ValueError: If the arrays differ in shape.
    """
    observed = np.asarray(observed, dtype=np.float64)
    expected = np.asarray(expected, dtype=np.float64)

    if observed.shape != expected.shape:
        raise ValueError("Array shapes must match")

    mask = expected > 0
    if not np.any(mask):
        return 0.0
    diff = observed[mask] - expected[mask]
    return float(np.sum(diff * diff / expected[mask]))


def chi_squared_test(
    observed: FloatArray, expected: FloatArray
) -> tuple[float, float]:
    """Perform Pearson's chi-squared goodness-of-fit test.

    Degrees of freedom are the number of categories with positive
    expected value, minus one.

    Args:
        observed: Observed values (1-D array of length *k*).
        expected: Expected values (1-D array of length *k*).

    Returns:
        Tuple of ``(chi2_statistic, p_value)``.
    """
    chi2 = chi_squared_statistic(observed, expected)
    dof = int(np.count_nonzero(np.asarray(expected, dtype=np.float64) > 0)) - 1

    if dof <= 0:
        return chi2, 1.0

    # Q(dof/2, chi2/2) is the chi-squared survival function
    p_value = _upper_inc_gamma_reg(dof / 2.0, chi2 / 2.0)
    return chi2, p_value


# --------------- Incomplete gamma helpers (Numerical Recipes, Ch. 6) ------


def _upper_inc_gamma_reg(a: float, x: float) -> float:
    """Regularised upper incomplete gamma Q(a, x) = 1 - P(a, x).

    Series expansion below ``a + 1``, Lentz continued fraction above.
    """
    if x <= 0.0 or a <= 0.0:
        return 1.0
    if x < a + 1.0:
        return max(0.0, 1.0 - _gamma_p_series(a, x))
    return _gamma_q_cf(a, x)


def _gamma_p_series(a: float, x: float) -> float:
    ap = a
    delta = 1.0 / a
    total = delta
    for _ in range(300):
        ap += 1.0
        delta *= x / ap
        total += delta
        if abs(delta) < abs(total) * 1e-15:
            break
    return total * math.exp(-x + a * math.log(x) - math.lgamma(a))


def _gamma_q_cf(a: float, x: float) -> float:
    tiny = 1e-30
    b = x + 1.0 - a
    c = 1.0 / tiny
    d = 1.0 / b
    f = d
    for i in range(1, 300):
        an = -i * (i - a)
        b += 2.0
        d = an * d + b
        if abs(d) < tiny:
            d = tiny
        c = b + an / c
        if abs(c) < tiny:
            c = tiny
        d = 1.0 / d
        delta = d * c
        f *= delta
        if abs(delta - 1.0) < 1e-15:
            break
    return f * math.exp(-x + a * math.log(x) - math.lgamma(a))


# ========================== Text statistics ================================


def shannon_entropy(symbols: Iterable[str]) -> float:
    """Shannon entropy of a symbol stream in bits per symbol.

    .. math::

        H = -\\sum_i p_i \\log_2 p_i

    Returns 0.0 for an empty stream.
    """
    counts = Counter(symbols)
    total = sum(counts.values())
    if total == 0:
        return 0.0
    p = np.fromiter(counts.values(), dtype=np.float64) / total
    return float(-np.sum(p * np.log2(p)))


def index_of_coincidence(symbols: Iterable[str]) -> float:
    """Friedman's index of coincidence.

    .. math::

        IC = \\frac{\\sum_i n_i (n_i - 1)}{N (N - 1)}

    The probability that two symbols drawn without replacement are equal.
    English text sits near 0.066, uniformly random letters near 0.038.
    Fewer than two symbols gives 0.0.
    """
    counts = np.fromiter(Counter(symbols).values(), dtype=np.float64)
    total = float(np.sum(counts)) if counts.size else 0.0
    if total < 2:
        return 0.0
    return float(np.sum(counts * (counts - 1)) / (total * (total - 1)))
