"""
Special functions implemented from first principles.

Public API:
    log_gamma(z)                          - ln G(z), Lanczos g=7
    beta_continued_fraction(a, b, x)      - Lentz continued fraction
    regularized_incomplete_beta(x, a, b)  - I_x(a, b)
    student_t_cdf(t, df)                  - Student's t CDF
"""

from pairstats.special._gamma import log_gamma, LANCZOS_G
from pairstats.special._beta import (
    beta_continued_fraction,
    regularized_incomplete_beta,
    MAX_ITERATIONS,
    EPS,
    FPMIN,
)
from pairstats.special._student_t import student_t_cdf

__all__ = [
    "log_gamma",
    "beta_continued_fraction",
    "regularized_incomplete_beta",
    "student_t_cdf",
    "LANCZOS_G",
    "MAX_ITERATIONS",
    "EPS",
    "FPMIN",
]
