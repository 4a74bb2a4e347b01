"""Grades a trained regression model and explains its metrics in plain words."""

from ml_playground.analysis.formatting import format_target_name
from ml_playground.metrics.numeric import EPSILON, round_half_up, safe_divide, to_fixed
from ml_playground.predictions.training.results.results import (AnalysisResult, MetricBreakdownEntry, RawMetrics,
                                                                TargetStats)

EXCELLENT = "Excellent"
GOOD = "Good"
FAIR = "Fair"
NEEDS_IMPROVEMENT = "Needs Improvement"

R_SQUARED_WEIGHT = 0.5
RMSE_WEIGHT = 0.3
MAE_WEIGHT = 0.2

GRADE_THRESHOLDS = (
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)
FAILING_GRADE = "F"

BLURB_TEMPLATES = {
    "A": "This model demonstrates an excellent ability to predict {target}. "
         "It effectively captures the underlying patterns in the data.",
    "B": "This model shows a good ability to predict {target}. While there's room for improvement, "
         "it captures a significant portion of the data's patterns.",
    "C": "This model has a fair ability to predict {target}. It captures some patterns but struggles with others. "
         "Consider reviewing features or model complexity.",
    "D": "This model's ability to predict {target} is limited. It likely misses key patterns in the data. "
         "Significant improvements are needed.",
    "F": "This model struggles significantly to predict {target}. It does not appear to capture meaningful "
         "patterns in the data. Revisit feature selection and model choice.",
}

MSE_INTERPRETATION = "Used to calculate RMSE; penalizes larger errors more. Lower is generally better."


def r_squared_tier(r_squared: float) -> str:
    # Strict bound for the top tier, inclusive bounds below it.
    if r_squared > 0.8:
        return EXCELLENT
    if r_squared >= 0.6:
        return GOOD
    if r_squared >= 0.4:
        return FAIR
    return NEEDS_IMPROVEMENT


def percentage_error_tier(percentage_of_mean: float) -> str:
    """ Tier for an error expressed as a percentage of the target mean (RMSE and MAE). """
    if percentage_of_mean < 10:
        return EXCELLENT
    if percentage_of_mean < 20:
        return GOOD
    if percentage_of_mean < 35:
        return FAIR
    return NEEDS_IMPROVEMENT


def grade_for_score(score: float) -> str:
    for lower_bound, grade in GRADE_THRESHOLDS:
        if score >= lower_bound:
            return grade
    return FAILING_GRADE


def _range_sentence(error: float, target_range: float, target_name: str) -> str:
    # A range of EPSILON is a zero range that was guarded for division.
    if target_range == 0 or target_range == EPSILON:
        return f" The total range of {target_name} is 0."

    percentage_of_range = error / target_range * 100
    return (f" It's also {to_fixed(percentage_of_range, 1)}% of the total range of {target_name} "
            f"({to_fixed(target_range, 2)}).")


def _error_interpretation(tier: str, description: str, error: float, percentage_of_mean: float,
                          target_stats: TargetStats, target_name: str) -> str:
    return (f"{tier}: {description} is {to_fixed(error, 2)} units. "
            f"This is {to_fixed(percentage_of_mean, 1)}% of the average {target_name} value "
            f"({to_fixed(target_stats.target_mean, 2)})."
            + _range_sentence(error, target_stats.target_range, target_name))


def analyze_performance(raw_metrics: RawMetrics, target_stats: TargetStats, target_column_name: str) -> AnalysisResult:
    """
    Maps the raw metrics of a trained model to a weighted 0-100 score, a letter
    grade and an interpretation of every metric.

    RMSE and MAE are judged relative to the target mean; R-squared on its
    absolute scale. The overall score weighs R-squared 50%, RMSE 30% and
    MAE 20%. The function is pure: the same inputs always give an equal,
    freshly built result.

    A negative target mean makes both error percentages negative. The RMSE
    and MAE scores then exceed 100, and so can the overall score.
    """
    target_name = format_target_name(target_column_name)

    rmse_pct = safe_divide(raw_metrics.rmse, target_stats.target_mean) * 100
    mae_pct = safe_divide(raw_metrics.mae, target_stats.target_mean) * 100

    r_squared_score = max(0.0, raw_metrics.r_squared) * 100
    rmse_score = max(0.0, 100 - rmse_pct)
    mae_score = max(0.0, 100 - mae_pct)

    overall_score = (R_SQUARED_WEIGHT * r_squared_score
                     + RMSE_WEIGHT * rmse_score
                     + MAE_WEIGHT * mae_score)
    overall_grade = grade_for_score(overall_score)

    metric_breakdown = (
        MetricBreakdownEntry(
            metric_name="R-squared",
            value=to_fixed(raw_metrics.r_squared, 2),
            interpretation=f"{r_squared_tier(raw_metrics.r_squared)}: Explains "
                           f"{to_fixed(raw_metrics.r_squared * 100, 0)}% of the variance in {target_name}.",
            score_contribution=to_fixed(r_squared_score, 0),
        ),
        MetricBreakdownEntry(
            metric_name="Root Mean Squared Error (RMSE)",
            value=to_fixed(raw_metrics.rmse, 2),
            interpretation=_error_interpretation(percentage_error_tier(rmse_pct), "Average prediction error",
                                                 raw_metrics.rmse, rmse_pct, target_stats, target_name),
            score_contribution=to_fixed(rmse_score, 0),
        ),
        MetricBreakdownEntry(
            metric_name="Mean Absolute Error (MAE)",
            value=to_fixed(raw_metrics.mae, 2),
            interpretation=_error_interpretation(percentage_error_tier(mae_pct), "Average absolute prediction error",
                                                 raw_metrics.mae, mae_pct, target_stats, target_name),
            score_contribution=to_fixed(mae_score, 0),
        ),
        MetricBreakdownEntry(
            metric_name="Mean Squared Error (MSE)",
            value=to_fixed(raw_metrics.mse, 2),
            interpretation=MSE_INTERPRETATION,
        ),
    )

    return AnalysisResult(
        overall_score=round_half_up(overall_score),
        overall_grade=overall_grade,
        interpretive_blurb=BLURB_TEMPLATES[overall_grade].format(target=target_name),
        metric_breakdown=metric_breakdown,
    )
