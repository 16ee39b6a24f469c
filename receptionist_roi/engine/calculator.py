"""Core calculation engine.

Takes a CalculatorInputs set -> produces a CalculationResult. The engine
holds no state; the hosting layer re-invokes it on every committed change.
"""

from __future__ import annotations

import logging

from receptionist_roi.engine.result import CalculationResult
from receptionist_roi.kpi_library import formulas as f
from receptionist_roi.models.inputs import CalculatorInputs

logger = logging.getLogger(__name__)


class CalculationEngine:
    """Stateless engine that runs the ROI model."""

    def calculate(self, inputs: CalculatorInputs) -> CalculationResult:
        """Run the full model in evaluation order. Total over valid inputs."""
        human_monthly_cost = f.calc_human_monthly_cost(
            hourly_wage=inputs.human_hourly_wage,
            hours_per_week=inputs.human_hours_per_week,
            overhead_percentage=inputs.human_overhead_percentage,
        )

        days_per_month = f.calc_days_per_month(inputs.days_open)
        total_calls = f.calc_total_monthly_calls(
            business_hour_calls=inputs.business_hour_calls,
            after_hour_calls=inputs.after_hour_calls,
            days_per_month=days_per_month,
        )
        missed_calls = f.calc_missed_calls(
            missed_business_hour_calls=inputs.missed_business_hour_calls,
            after_hour_calls=inputs.after_hour_calls,
            days_per_month=days_per_month,
        )
        total_minutes = f.calc_total_minutes(total_calls, inputs.avg_call_duration)

        # Revenue from missed sales calls
        sales_missed_calls = f.calc_sales_missed_calls(
            missed_calls, inputs.sales_call_percentage
        )
        value_per_call = f.calc_value_per_call(
            inputs.avg_lead_value, inputs.conversion_rate
        )
        potential_revenue = f.calc_potential_revenue(sales_missed_calls, value_per_call)

        # AI cost
        setup_fee = f.calc_setup_fee(inputs.ai_setup_fee)
        ai_base_cost = f.calc_ai_base_cost(inputs.ai_monthly_cost)
        ai_minute_cost = f.calc_ai_usage_cost(total_minutes, inputs.ai_per_minute_cost)
        ai_monthly_cost = f.calc_ai_monthly_cost(ai_base_cost, ai_minute_cost)
        setup_fee_monthly = f.calc_amortized_setup_fee(setup_fee)
        effective_ai_cost = f.calc_effective_ai_cost(ai_monthly_cost, setup_fee_monthly)

        # Replace scenario (year 1, setup fee spread over 12 months)
        cost_savings = f.calc_cost_savings(human_monthly_cost, effective_ai_cost)
        net_benefit = f.calc_net_benefit(cost_savings, potential_revenue)
        payback = f.calc_payback_period(setup_fee, net_benefit)

        # Annual figures use the recurring AI cost so the setup fee is
        # counted once, in the ROI denominator.
        yearly_cost_savings = f.calc_annualize(human_monthly_cost - ai_monthly_cost)
        yearly_potential_revenue = f.calc_annualize(potential_revenue)
        yearly_net_benefit = yearly_cost_savings + yearly_potential_revenue
        annual_roi = f.calc_annual_roi(yearly_net_benefit, ai_monthly_cost, setup_fee)

        # Enhance scenario: staff retained, no human-cost offset
        enhance_net_gain = f.calc_enhance_net_gain(potential_revenue, ai_monthly_cost)
        enhance_payback = f.calc_payback_period(setup_fee, enhance_net_gain)

        result = CalculationResult(
            days_per_month=days_per_month,
            total_calls=total_calls,
            missed_calls=missed_calls,
            sales_missed_calls=sales_missed_calls,
            total_minutes=total_minutes,
            ai_setup_fee=setup_fee,
            ai_base_cost=ai_base_cost,
            ai_minute_cost=ai_minute_cost,
            ai_total_monthly_cost=ai_monthly_cost,
            ai_setup_fee_monthly=setup_fee_monthly,
            ai_total_cost_with_setup=effective_ai_cost,
            human_monthly_cost=human_monthly_cost,
            human_annual_cost=f.calc_annualize(human_monthly_cost),
            value_per_call=value_per_call,
            potential_revenue=potential_revenue,
            cost_savings=cost_savings,
            net_benefit=net_benefit,
            payback_period_months=payback,
            yearly_cost_savings=yearly_cost_savings,
            yearly_potential_revenue=yearly_potential_revenue,
            yearly_net_benefit=yearly_net_benefit,
            annual_roi_percent=annual_roi,
            first_year_net_return=f.calc_first_year_net_return(
                yearly_net_benefit, setup_fee
            ),
            first_year_revenue_vs_ai_cost=f.calc_first_year_revenue_vs_ai_cost(
                yearly_potential_revenue, ai_monthly_cost, setup_fee
            ),
            enhance_monthly_net_gain=enhance_net_gain,
            enhance_payback_period_months=enhance_payback,
        )
        logger.debug(
            "Calculated ROI: net_benefit=%.2f enhance_gain=%.2f",
            net_benefit,
            enhance_net_gain,
        )
        return result


_engine = CalculationEngine()


def compute(inputs: CalculatorInputs) -> CalculationResult:
    """Module-level shortcut for ``CalculationEngine().calculate``."""
    return _engine.calculate(inputs)
