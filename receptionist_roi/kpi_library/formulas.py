"""Formula implementations for the AI receptionist ROI model.

Each function is a pure calculation with no side effects. Percentages are
passed as plain numbers (47 means 47%). Formulas never raise: a division
with no positive denominator degenerates to ``math.inf`` or ``0.0``.
"""

import math

from receptionist_roi.kpi_library.registry import register_metric
from receptionist_roi.models.enums import (
    AFTER_HOURS_DAYS_PER_MONTH,
    DAYS_PER_MONTH,
    AnalysisMode,
    DaysOpenMode,
)

REPLACE = (AnalysisMode.REPLACE,)
ENHANCE = (AnalysisMode.ENHANCE,)

WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12


# --- Call volume ---------------------------------------------------------


@register_metric(
    metric_id="days_per_month",
    label="Business Days per Month",
    description="Fixed working-month table: weekdays 22, six days 26, all days 30.",
    unit="days",
    section="calls",
)
def calc_days_per_month(days_open: DaysOpenMode) -> int:
    return DAYS_PER_MONTH[days_open]


@register_metric(
    metric_id="total_calls",
    label="Total Calls Handled (Est.)",
    description="Business-hour calls x business days + after-hours calls x 30.",
    unit="count",
    section="calls",
)
def calc_total_monthly_calls(
    business_hour_calls: float,
    after_hour_calls: float,
    days_per_month: int,
) -> float:
    """Total_Calls = business_calls x days + after_hours_calls x 30"""
    return (
        business_hour_calls * days_per_month
        + after_hour_calls * AFTER_HOURS_DAYS_PER_MONTH
    )


@register_metric(
    metric_id="missed_calls",
    label="Currently Missed Calls (Est.)",
    description="Missed business-hour calls plus every after-hours call.",
    unit="count",
    section="calls",
)
def calc_missed_calls(
    missed_business_hour_calls: float,
    after_hour_calls: float,
    days_per_month: int,
) -> float:
    """Missed = missed_business_calls x days + after_hours_calls x 30

    Nobody answers after hours, so all of those calls count as missed.
    """
    return (
        missed_business_hour_calls * days_per_month
        + after_hour_calls * AFTER_HOURS_DAYS_PER_MONTH
    )


@register_metric(
    metric_id="sales_missed_calls",
    label="Missed Sales Opportunities (Est.)",
    description="Missed calls x share of calls that are sales calls.",
    unit="count",
    section="calls",
)
def calc_sales_missed_calls(missed_calls: float, sales_call_percentage: float) -> float:
    return missed_calls * (sales_call_percentage / 100)


@register_metric(
    metric_id="total_minutes",
    label="Total Call Minutes",
    description="Total monthly calls x average call duration.",
    unit="minutes",
    section="calls",
)
def calc_total_minutes(total_calls: float, avg_call_duration: float) -> float:
    return total_calls * avg_call_duration


# --- AI service cost -----------------------------------------------------


@register_metric(
    metric_id="ai_setup_fee",
    label="One-time Setup Fee",
    description="Setup fee of the selected pricing tier or manual override.",
    section="ai_cost",
)
def calc_setup_fee(setup_fee: float) -> float:
    return float(setup_fee)


@register_metric(
    metric_id="ai_base_cost",
    label="Monthly Subscription",
    description="Fixed monthly subscription of the AI service.",
    section="ai_cost",
)
def calc_ai_base_cost(monthly_cost: float) -> float:
    return float(monthly_cost)


@register_metric(
    metric_id="ai_minute_cost",
    label="Est. Monthly Usage Cost",
    description="Total call minutes x per-minute rate.",
    section="ai_cost",
)
def calc_ai_usage_cost(total_minutes: float, per_minute_cost: float) -> float:
    return total_minutes * per_minute_cost


@register_metric(
    metric_id="ai_total_monthly_cost",
    label="Total Monthly Recurring Cost",
    description="Subscription + usage.",
    section="ai_cost",
)
def calc_ai_monthly_cost(base_cost: float, usage_cost: float) -> float:
    """AI_Monthly = subscription + minutes x per_minute_cost"""
    return base_cost + usage_cost


@register_metric(
    metric_id="ai_setup_fee_monthly",
    label="Setup Fee Spread Over Year 1",
    description="Setup fee / 12.",
    section="ai_cost",
    modes=REPLACE,
)
def calc_amortized_setup_fee(setup_fee: float) -> float:
    return setup_fee / MONTHS_PER_YEAR


@register_metric(
    metric_id="ai_total_cost_with_setup",
    label="Effective Monthly Cost (Yr 1)",
    description="Monthly recurring + setup fee / 12.",
    section="ai_cost",
    modes=REPLACE,
)
def calc_effective_ai_cost(ai_monthly_cost: float, setup_fee_monthly: float) -> float:
    return ai_monthly_cost + setup_fee_monthly


# --- Human receptionist cost ---------------------------------------------


@register_metric(
    metric_id="human_monthly_cost",
    label="Est. Monthly Cost (Wages + Overhead)",
    description="wage x hours/week x 52 / 12 x (1 + overhead%).",
    section="human_cost",
    modes=REPLACE,
)
def calc_human_monthly_cost(
    hourly_wage: float,
    hours_per_week: float,
    overhead_percentage: float,
) -> float:
    """Human_Monthly = wage x hours x 52 / 12 x (1 + overhead / 100)"""
    monthly_wage_cost = hourly_wage * hours_per_week * WEEKS_PER_YEAR / MONTHS_PER_YEAR
    return monthly_wage_cost * (1 + overhead_percentage / 100)


@register_metric(
    metric_id="yearly_net_benefit",
    label="Potential Annual Total Gain",
    description="Annual labor savings + annual added revenue.",
    section="annual",
    modes=REPLACE,
)
@register_metric(
    metric_id="yearly_potential_revenue",
    label="Annual Added Revenue",
    description="Monthly potential revenue x 12.",
    section="annual",
)
@register_metric(
    metric_id="yearly_cost_savings",
    label="Annual Recurring Cost Savings",
    description="(Human monthly cost - AI recurring monthly cost) x 12.",
    section="annual",
    modes=REPLACE,
)
@register_metric(
    metric_id="human_annual_cost",
    label="Est. Annual Cost",
    description="Human monthly cost x 12.",
    section="human_cost",
    modes=REPLACE,
)
def calc_annualize(monthly_value: float) -> float:
    """Recurring monthly figure x 12. Never applied to setup-inclusive costs."""
    return monthly_value * MONTHS_PER_YEAR


# --- Revenue and impact --------------------------------------------------


@register_metric(
    metric_id="value_per_call",
    label="Expected Value per Sales Call",
    description="Average lead value x conversion rate.",
    section="impact",
)
def calc_value_per_call(avg_lead_value: float, conversion_rate: float) -> float:
    return avg_lead_value * (conversion_rate / 100)


@register_metric(
    metric_id="potential_revenue",
    label="Potential Added Revenue",
    description="Missed sales calls x lead value x conversion rate.",
    section="impact",
)
def calc_potential_revenue(sales_missed_calls: float, value_per_call: float) -> float:
    return sales_missed_calls * value_per_call


@register_metric(
    metric_id="cost_savings",
    label="Direct Cost Savings (vs. Human)",
    description="Calculated human cost - effective monthly AI cost.",
    section="impact",
    modes=REPLACE,
)
def calc_cost_savings(human_monthly_cost: float, effective_ai_cost: float) -> float:
    return human_monthly_cost - effective_ai_cost


@register_metric(
    metric_id="net_benefit",
    label="Total Monthly Benefit",
    description="Cost savings + added revenue.",
    section="impact",
    modes=REPLACE,
)
def calc_net_benefit(cost_savings: float, potential_revenue: float) -> float:
    return cost_savings + potential_revenue


@register_metric(
    metric_id="enhance_monthly_net_gain",
    label="Net Monthly Gain",
    description="Added revenue - AI recurring cost; staff is retained.",
    section="impact",
    modes=ENHANCE,
)
def calc_enhance_net_gain(potential_revenue: float, ai_monthly_cost: float) -> float:
    return potential_revenue - ai_monthly_cost


@register_metric(
    metric_id="enhance_payback_period_months",
    label="Payback Period",
    description="Setup fee / net monthly gain.",
    unit="months",
    section="impact",
    modes=ENHANCE,
)
@register_metric(
    metric_id="payback_period_months",
    label="Overall Payback Period",
    description="Setup fee / total monthly benefit.",
    unit="months",
    section="impact",
    modes=REPLACE,
)
def calc_payback_period(setup_fee: float, monthly_gain: float) -> float:
    """Payback = setup_fee / monthly_gain, or inf when the gain is not positive."""
    if monthly_gain <= 0:
        return math.inf
    return setup_fee / monthly_gain


# --- Annual ROI ----------------------------------------------------------


@register_metric(
    metric_id="annual_roi_percent",
    label="Estimated Annual ROI",
    description="Annual net benefit / (AI recurring cost x 12 + setup fee).",
    unit="percent",
    section="annual",
    modes=REPLACE,
)
def calc_annual_roi(
    yearly_net_benefit: float,
    ai_monthly_cost: float,
    setup_fee: float,
) -> float:
    """ROI% = yearly_net / (ai_monthly x 12 + setup_fee) x 100

    With nothing invested the ROI is inf for a positive benefit, else 0.
    """
    investment = ai_monthly_cost * MONTHS_PER_YEAR + setup_fee
    if investment > 0:
        return yearly_net_benefit / investment * 100
    return math.inf if yearly_net_benefit > 0 else 0.0


@register_metric(
    metric_id="first_year_net_return",
    label="First-Year Net Return",
    description="Annual operational gain - setup fee.",
    section="annual",
    modes=REPLACE,
)
def calc_first_year_net_return(yearly_net_benefit: float, setup_fee: float) -> float:
    return yearly_net_benefit - setup_fee


@register_metric(
    metric_id="first_year_revenue_vs_ai_cost",
    label="First-Year Revenue vs. AI Cost",
    description="Annual added revenue - (AI recurring cost x 12 + setup fee).",
    section="annual",
    modes=ENHANCE,
)
def calc_first_year_revenue_vs_ai_cost(
    yearly_potential_revenue: float,
    ai_monthly_cost: float,
    setup_fee: float,
) -> float:
    return yearly_potential_revenue - (ai_monthly_cost * MONTHS_PER_YEAR + setup_fee)
