"""
frontend/charts.py

pandas shaping for the admin dashboard charts. Kept free of Streamlit
calls so the frames can be built and checked without a running app.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

# teamStats key -> chart label
ACTIVITY_LABELS: dict[str, str] = {
    "total_calls": "Calls",
    "total_emails": "Emails",
    "total_whatsapp": "WhatsApp",
    "total_social": "Social",
}


def activity_distribution(team_stats: dict[str, Any]) -> pd.Series:
    """
    Team activity counts for the month, one bar per channel.
    """
    return pd.Series(
        {label: int(team_stats.get(key) or 0) for key, label in ACTIVITY_LABELS.items()},
        name="Activities",
    )


def revenue_vs_target(performance: list[dict[str, Any]]) -> pd.DataFrame:
    """
    Achieved and target revenue per employee, indexed by name.
    """
    frame = pd.DataFrame(performance, columns=["name", "achieved_revenue", "target_revenue"])
    return frame.set_index("name").rename(
        columns={"achieved_revenue": "Achieved", "target_revenue": "Target"}
    )
