"""Display payloads: metric cards, headline figures and bar-chart series.

The browser renders these; nothing here touches the calculation.
"""

from __future__ import annotations

from typing import Any, Optional

# Ensure all metrics are registered on import
import receptionist_roi.kpi_library.formulas  # noqa: F401
from receptionist_roi.display.formatting import (
    format_currency,
    format_metric,
    format_payback,
    format_percent,
)
from receptionist_roi.engine.result import CalculationResult, finite_or_none
from receptionist_roi.kpi_library.registry import get_metrics_for_mode
from receptionist_roi.models.enums import AnalysisMode

CALL_TO_ACTION_LABEL = "Let's Discuss Your Results"

_SECTION_ORDER = ("impact", "annual", "calls", "ai_cost", "human_cost")

_SECTION_TITLES = {
    AnalysisMode.REPLACE: {
        "impact": "Monthly Financial Impact (AI Replacing Staff)",
        "annual": "Annual Outlook",
        "calls": "Monthly Call Analysis",
        "ai_cost": "AI Receptionist Cost",
        "human_cost": "Calculated Human Receptionist Cost",
    },
    AnalysisMode.ENHANCE: {
        "impact": "Monthly Revenue Impact (AI Enhancing Staff)",
        "annual": "Annual Outlook",
        "calls": "Missed Call Opportunity",
        "ai_cost": "AI Receptionist Cost",
    },
}


def build_sections(result: CalculationResult, mode: AnalysisMode) -> list[dict[str, Any]]:
    """Group the metrics registered for ``mode`` into titled card sections."""
    cards_by_section: dict[str, list[dict[str, Any]]] = {}
    for metric in get_metrics_for_mode(mode):
        value = result.get(metric.id)
        cards_by_section.setdefault(metric.section, []).append({
            "id": metric.id,
            "label": metric.label,
            "description": metric.description,
            "unit": metric.unit,
            "value": finite_or_none(value),
            "display": format_metric(metric.unit, value),
        })

    titles = _SECTION_TITLES[mode]
    return [
        {"id": section, "title": titles.get(section, section), "cards": cards_by_section[section]}
        for section in _SECTION_ORDER
        if section in cards_by_section
    ]


def build_chart(result: CalculationResult, mode: AnalysisMode) -> dict[str, Any]:
    """Monthly comparison bar chart. Negative gains are drawn as zero."""
    if mode == AnalysisMode.REPLACE:
        title = "Monthly Cost & Benefit Comparison (Replace Scenario)"
        bars = [
            ("human_cost", "Human Cost (Calculated)", result.human_monthly_cost, "#F87171"),
            ("ai_cost", "AI Cost (Incl. Setup/12)", result.ai_total_cost_with_setup, "#84cc16"),
            ("net_benefit", "Net Monthly Benefit", max(result.net_benefit, 0.0), "#65a30d"),
        ]
    else:
        title = "Monthly Revenue vs. AI Cost (Enhance Scenario)"
        bars = [
            ("added_revenue", "Potential Added Revenue", result.potential_revenue, "#a3e635"),
            ("ai_recurring_cost", "AI Recurring Cost", result.ai_total_monthly_cost, "#FBBF24"),
            ("net_gain", "Net Monthly Gain", max(result.enhance_monthly_net_gain, 0.0), "#65a30d"),
        ]

    return {
        "title": title,
        "category": "Monthly",
        "series": [
            {
                "key": key,
                "label": label,
                "value": finite_or_none(round(value, 2)),
                "display": format_currency(value),
                "color": color,
            }
            for key, label, value, color in bars
        ],
    }


def build_headline(result: CalculationResult, mode: AnalysisMode) -> dict[str, Any]:
    if mode == AnalysisMode.REPLACE:
        return {
            "title": "Estimated Impact: AI Replacing Staff",
            "primary_label": "Potential Annual Total Gain",
            "primary": format_currency(result.yearly_net_benefit, decimals=0),
            "roi": format_percent(result.annual_roi_percent),
            "payback": format_payback(result.payback_period_months),
            "summary": (
                f"Driven by: {format_currency(result.yearly_cost_savings, decimals=0)} "
                "in annual cost savings and "
                f"{format_currency(result.yearly_potential_revenue, decimals=0)} "
                "in potential added revenue."
            ),
        }
    return {
        "title": "Estimated Impact: AI Enhancing Staff",
        "primary_label": "Potential Annual Added Revenue",
        "primary": format_currency(result.yearly_potential_revenue, decimals=0),
        "net_gain": format_currency(result.enhance_monthly_net_gain),
        "payback": format_payback(result.enhance_payback_period_months),
        "summary": (
            f"Focuses only on the value generated by capturing "
            f"{result.missed_calls:,.0f} missed calls/month vs. the AI cost."
        ),
    }


def build_report(
    result: CalculationResult,
    mode: AnalysisMode,
    *,
    booking_url: Optional[str] = None,
    tier_name: Optional[str] = None,
    print_mode: bool = False,
) -> dict[str, Any]:
    """Assemble everything the display layer renders for one result.

    In print mode the interactive call-to-action is dropped and the
    renderer is told to hide controls and force background colors.
    """
    report: dict[str, Any] = {
        "analysis_mode": mode.value,
        "tier_name": tier_name,
        "headline": build_headline(result, mode),
        "sections": build_sections(result, mode),
        "chart": build_chart(result, mode),
        "print_mode": print_mode,
    }

    if print_mode:
        report["call_to_action"] = None
        report["print"] = {"hide_controls": True, "force_backgrounds": True}
    elif booking_url:
        report["call_to_action"] = {
            "label": CALL_TO_ACTION_LABEL,
            "url": booking_url,
            "target": "_blank",
            "rel": "noopener noreferrer",
        }
    else:
        report["call_to_action"] = None
    return report
