"""
CPU backend for paired-sample analysis.

Runs every paired statistic over one design and records, as warnings,
why any of them came out undefined.
"""

from __future__ import annotations

import math

from pairstats.core.result import Result
from pairstats.core.compute.timing import Timer
from pairstats.correlation._common import PairedAnalysisParams
from pairstats.correlation._interpretation import correlation_interpretation
from pairstats.correlation._pearson import centered_sums, pearson_correlation
from pairstats.correlation._regression import simple_regression
from pairstats.correlation._significance import pearson_correlation_significance
from pairstats.correlation.design import PairedDesign
from pairstats.descriptive import mean


class CPUCorrelationBackend:
    """CPU reference backend for paired-sample analysis."""

    @property
    def name(self) -> str:
        return 'cpu_pairs'

    def solve(self, design: PairedDesign) -> Result[PairedAnalysisParams]:
        timer = Timer()
        timer.start()

        with timer.section('descriptive'):
            mean_x = mean(design.x)
            mean_y = mean(design.y)

        with timer.section('correlation'):
            r = pearson_correlation(design)

        with timer.section('significance'):
            significance = pearson_correlation_significance(design)

        with timer.section('regression'):
            regression = simple_regression(design)

        timer.stop()

        params = PairedAnalysisParams(
            n=design.n,
            mean_x=mean_x,
            mean_y=mean_y,
            correlation=r,
            significance=significance,
            regression=regression,
            interpretation=correlation_interpretation(r),
        )

        return Result(
            params=params,
            info={
                'method': "Pearson's product-moment correlation",
                'n': design.n,
                'df': significance.df if significance is not None else None,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(_diagnose(design, params)),
        )


def _diagnose(design: PairedDesign, params: PairedAnalysisParams) -> list[str]:
    """Explain each undefined or degenerate statistic."""
    n = design.n
    x_name, y_name = design.columns
    warnings_list: list[str] = []

    if params.mean_x is None and n > 0:
        warnings_list.append(f"mean of {x_name} overflowed: mean undefined")
    if params.mean_y is None and n > 0:
        warnings_list.append(f"mean of {y_name} overflowed: mean undefined")

    if n < 2:
        warnings_list.append(
            f"fewer than 2 pairs (n={n}): correlation and regression undefined"
        )
    else:
        sums = centered_sums(design)
        if not sums.finite:
            undefined = ["correlation"]
            if params.regression is None:
                undefined.append("regression")
            warnings_list.append(
                f"centered sums overflowed: {' and '.join(undefined)} undefined"
            )
        if sums.sxx == 0.0:
            warnings_list.append(
                f"{x_name} is constant (zero variance): correlation and regression undefined"
            )
        if sums.syy == 0.0:
            warnings_list.append(
                f"{y_name} is constant (zero variance): correlation undefined"
            )

    if n < 3:
        warnings_list.append(f"fewer than 3 pairs (n={n}): significance undefined")
    elif params.correlation is not None and params.significance is None:
        warnings_list.append("t distribution CDF was not finite: significance undefined")

    significance = params.significance
    if significance is not None and math.isinf(significance.t_statistic):
        warnings_list.append("perfect linear relationship: t-statistic is infinite")

    return warnings_list
