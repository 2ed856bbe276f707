"""
Tolerance tiers for numerical comparison.

- EXACT: closed-form quantities (PIE, pooled sums, rarefaction at full effort)
- LOG_SPACE: quantities computed through log-gamma (rarefaction below full effort)
- MONTE_CARLO: absolute tolerance for p-values from independent permutation runs

Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance pair for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='exact',
    description='Closed-form arithmetic in double precision',
)

LOG_SPACE = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='log_space',
    description='Ratios of binomial coefficients evaluated via gammaln',
)

MONTE_CARLO = ToleranceTier(
    rtol=0.0,
    atol=0.02,
    name='monte_carlo',
    description='Empirical p-values from two independent runs, nperm=10000',
)
