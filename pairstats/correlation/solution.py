"""
Paired analysis solution type.

PairedAnalysisSolution wraps Result[PairedAnalysisParams] and renders a
plain-text report via summary().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pairstats.core.result import Result
from pairstats.correlation._common import (
    PairedAnalysisParams,
    RegressionResult,
    SignificanceResult,
)
from pairstats.correlation._format import NOT_AVAILABLE, format_p_value, format_value

if TYPE_CHECKING:
    from pairstats.correlation.design import PairedDesign


@dataclass
class PairedAnalysisSolution:
    """
    User-facing results of analyze().

    Undefined statistics are None; check before formatting.
    """
    _result: Result[PairedAnalysisParams]
    _design: 'PairedDesign'

    @property
    def params(self) -> PairedAnalysisParams:
        return self._result.params

    @property
    def n(self) -> int:
        """Number of pairs."""
        return self._result.params.n

    @property
    def mean_x(self) -> float | None:
        return self._result.params.mean_x

    @property
    def mean_y(self) -> float | None:
        return self._result.params.mean_y

    @property
    def correlation(self) -> float | None:
        """Pearson r."""
        return self._result.params.correlation

    @property
    def significance(self) -> SignificanceResult | None:
        return self._result.params.significance

    @property
    def t_statistic(self) -> float | None:
        s = self._result.params.significance
        return s.t_statistic if s is not None else None

    @property
    def p_value(self) -> float | None:
        """Two-tailed p-value."""
        s = self._result.params.significance
        return s.p_value if s is not None else None

    @property
    def df(self) -> int | None:
        s = self._result.params.significance
        return s.df if s is not None else None

    @property
    def regression(self) -> RegressionResult | None:
        return self._result.params.regression

    @property
    def slope(self) -> float | None:
        reg = self._result.params.regression
        return reg.slope if reg is not None else None

    @property
    def intercept(self) -> float | None:
        reg = self._result.params.regression
        return reg.intercept if reg is not None else None

    @property
    def interpretation(self) -> str:
        return self._result.params.interpretation

    # --- Metadata ---

    @property
    def columns(self) -> tuple[str, str]:
        return self._design.columns

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def summary(self) -> str:
        """Plain-text report of every statistic."""
        x_name, y_name = self.columns
        reg = self.regression
        if reg is not None:
            regression_text = f"a={reg.slope:.3f}, b={reg.intercept:.3f}"
        else:
            regression_text = NOT_AVAILABLE

        rows = [
            (f"Mean {x_name}", format_value(self.mean_x, digits=2)),
            (f"Mean {y_name}", format_value(self.mean_y, digits=2)),
            ("Correlation (r)", format_value(self.correlation)),
            ("t-statistic", format_value(self.t_statistic)),
            ("df", str(self.df) if self.df is not None else NOT_AVAILABLE),
            ("p-value", format_p_value(self.p_value)),
            ("Regression (y = a*x + b)", regression_text),
        ]
        width = max(len(label) for label, _ in rows) + 2

        lines = [
            "",
            f"\t{self.info['method']}",
            "",
            f"data:  {x_name} and {y_name} (n = {self.n})",
        ]
        lines.extend(f"{label + ':':<{width}}{value}" for label, value in rows)
        lines.append(f"Interpretation: {self.interpretation}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PairedAnalysisSolution(n={self.n}, "
            f"r={format_value(self.correlation)}, "
            f"p={format_p_value(self.p_value)})"
        )
