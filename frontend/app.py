"""Streamlit frontend for ScholarCRM.

Replaceable UI layer: all display logic lives here.
Data comes from the CRM API through CRMApiClient only.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

import pandas as pd
import streamlit as st

from app.services.performance_service import progress_percent
from db.repositories.types import MAX_YEAR
from frontend.api_client import CRMApiClient, CRMApiError
from frontend.charts import activity_distribution, revenue_vs_target

# ── Page config (must be first Streamlit call) ─────────────────────────────
st.set_page_config(
    page_title="ScholarCRM",
    page_icon="📚",
    layout="wide",
    initial_sidebar_state="expanded",
)


@st.cache_resource(show_spinner=False)
def _client() -> CRMApiClient:
    return CRMApiClient()


# ── Session state defaults ─────────────────────────────────────────────────
_STATE_DEFAULTS: dict = {
    "user": None,
}

for _key, _val in _STATE_DEFAULTS.items():
    if _key not in st.session_state:
        st.session_state[_key] = _val


def _call(fn, *args: Any, **kwargs: Any) -> Any:
    """Run one API call; show the error and return None on failure."""
    try:
        return fn(*args, **kwargs)
    except CRMApiError as exc:
        st.error(str(exc))
        return None


def _money(value: float) -> str:
    return f"₹{value:,.0f}"


# ── Login ──────────────────────────────────────────────────────────────────
def _render_login() -> None:
    st.title("ScholarCRM")
    st.caption("Internal sales CRM")
    with st.form("login"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign in", type="primary")

    if submitted:
        user = _call(_client().login, email.strip(), password)
        if user:
            st.session_state.user = user
            st.rerun()


# ── Admin ──────────────────────────────────────────────────────────────────
def _render_admin_overview() -> None:
    stats: Optional[dict] = _call(_client().admin_stats)
    if not stats:
        return

    team = stats["teamStats"]
    targets = stats["teamTargets"]
    st.subheader(f"Team performance, {stats['year']}-{stats['month']:02d}")

    cols = st.columns(4)
    cols[0].metric(
        "Revenue",
        _money(team["total_revenue"]),
        help=f"Target {_money(targets['total_sales_target'])}",
    )
    cols[1].metric("Calls", f"{team['total_calls']:,}", help=f"Target {targets['total_call_target']:,}")
    cols[2].metric("Emails", f"{team['total_emails']:,}")
    cols[3].metric("WhatsApp + Social", f"{team['total_whatsapp'] + team['total_social']:,}")

    st.progress(
        max(0.0, progress_percent(team["total_revenue"], targets["total_sales_target"])) / 100,
        text="Team revenue vs target",
    )

    performance = stats["individualPerformance"]
    revenue_col, activity_col = st.columns([3, 2])
    with activity_col:
        st.subheader("Activity distribution")
        st.bar_chart(activity_distribution(team), use_container_width=True)
    with revenue_col:
        st.subheader("Revenue vs target")
        if performance:
            st.bar_chart(revenue_vs_target(performance), use_container_width=True)
        else:
            st.info("No employees yet.")

    if not performance:
        return

    df = pd.DataFrame(performance)

    st.subheader("Individual performance")
    st.dataframe(
        df[["name", "designation", "achieved_revenue", "target_revenue", "achieved_calls", "target_calls", "revenue_progress"]],
        use_container_width=True,
        hide_index=True,
        column_config={
            "revenue_progress": st.column_config.ProgressColumn(
                "Progress", format="%.0f%%", min_value=0, max_value=100
            ),
        },
    )


def _render_team_management(users: list[dict]) -> None:
    st.subheader("Team")
    with st.form("add_user", clear_on_submit=True):
        cols = st.columns(3)
        name = cols[0].text_input("Name")
        email = cols[1].text_input("Email")
        password = cols[2].text_input("Password", type="password")
        cols = st.columns(2)
        designation = cols[0].text_input("Designation")
        role = cols[1].selectbox("Role", ["employee", "admin"])
        if st.form_submit_button("Add member"):
            created = _call(
                _client().create_user,
                name=name,
                email=email,
                password=password,
                role=role,
                designation=designation or None,
            )
            if created:
                st.success(f"Added {created['name']}")
                st.rerun()

    for user in users:
        cols = st.columns([3, 3, 2, 1])
        cols[0].markdown(f"**{user['name']}**  \n{user.get('designation') or ''}")
        cols[1].write(user["email"])
        cols[2].write(user["role"])
        if user["id"] != st.session_state.user["id"] and cols[3].button("Delete", key=f"del_{user['id']}"):
            if _call(_client().delete_user, user["id"]):
                st.rerun()


def _render_target_management(employees: list[dict]) -> None:
    st.subheader("Targets")
    if not employees:
        st.info("Add an employee first.")
        return

    labels = {f"{e['name']} ({e['email']})": e["id"] for e in employees}
    user_id = labels[st.selectbox("Employee", list(labels))]
    current: dict = _call(_client().get_target, user_id) or {}
    today = date.today()

    with st.form(f"target_{user_id}"):
        cols = st.columns(2)
        year = cols[0].number_input("Year", min_value=2000, max_value=MAX_YEAR, value=today.year)
        month = cols[1].number_input("Month", min_value=1, max_value=12, value=today.month)
        cols = st.columns(3)
        yearly = cols[0].number_input("Yearly sales target", value=float(current.get("sales_target_yearly", 0)))
        monthly = cols[1].number_input("Monthly sales target", value=float(current.get("sales_target_monthly", 0)))
        calls = cols[2].number_input("Monthly calls", value=int(current.get("call_target_monthly", 0)), step=1)
        cols = st.columns(3)
        emails = cols[0].number_input("Monthly emails", value=int(current.get("email_target_monthly", 0)), step=1)
        whatsapp = cols[1].number_input("Monthly WhatsApp", value=int(current.get("whatsapp_target_monthly", 0)), step=1)
        social = cols[2].number_input("Monthly social", value=int(current.get("social_target_monthly", 0)), step=1)

        if st.form_submit_button("Save target", type="primary"):
            saved = _call(
                _client().save_target,
                user_id,
                year=int(year),
                month=int(month),
                sales_target_yearly=yearly,
                sales_target_monthly=monthly,
                call_target_monthly=int(calls),
                email_target_monthly=int(emails),
                whatsapp_target_monthly=int(whatsapp),
                social_target_monthly=int(social),
            )
            if saved:
                st.success("Target saved")


def _render_kpi_management() -> None:
    st.subheader("KPIs")
    with st.form("add_kpi", clear_on_submit=True):
        name = st.text_input("KPI name")
        description = st.text_area("Description")
        if st.form_submit_button("Add KPI") and name.strip():
            if _call(_client().create_kpi, name.strip(), description.strip() or None):
                st.rerun()

    for kpi in _call(_client().list_kpis) or []:
        cols = st.columns([4, 1])
        cols[0].markdown(f"**{kpi['name']}**  \n{kpi.get('description') or ''}")
        if cols[1].button("Deactivate", key=f"kpi_{kpi['id']}"):
            if _call(_client().deactivate_kpi, kpi["id"]):
                st.rerun()


def _render_admin() -> None:
    users: list[dict] = _call(_client().list_users) or []
    overview, team, targets, kpis = st.tabs(["Overview", "Team", "Targets", "KPIs"])
    with overview:
        _render_admin_overview()
    with team:
        _render_team_management(users)
    with targets:
        _render_target_management([u for u in users if u["role"] == "employee"])
    with kpis:
        _render_kpi_management()


# ── Employee ───────────────────────────────────────────────────────────────
_CARD_TITLES = {
    "revenue": "Monthly Revenue",
    "calls": "Calls Target",
    "emails": "Email Target",
    "social": "Social Activity",
}


def _render_target_cards(user_id: int) -> None:
    summary: Optional[dict] = _call(_client().monthly_summary, user_id)
    if not summary:
        return
    metrics = {item["metric"]: item for item in summary["metrics"]}
    cols = st.columns(len(_CARD_TITLES))
    for col, (metric, title) in zip(cols, _CARD_TITLES.items()):
        item = metrics[metric]
        achieved = _money(item["achieved"]) if metric == "revenue" else f"{item['achieved']:,.0f}"
        target = _money(item["target"]) if metric == "revenue" else f"{item['target']:,.0f}"
        with col:
            st.metric(title, achieved, help=f"Target {target}")
            st.progress(max(0.0, item["progress"]) / 100, text=f"{item['progress']:.0f}% Achieved")


def _render_report_form(user_id: int) -> None:
    kpis: list[dict] = _call(_client().list_kpis) or []
    with st.expander("Submit daily report"):
        with st.form("daily_report", clear_on_submit=True):
            cols = st.columns(4)
            calls = cols[0].number_input("Calls", min_value=0, step=1)
            emails = cols[1].number_input("Emails", min_value=0, step=1)
            whatsapp = cols[2].number_input("WhatsApp", min_value=0, step=1)
            social = cols[3].number_input("Social", min_value=0, step=1)
            cols = st.columns(3)
            revenue = cols[0].number_input("Revenue (₹)", min_value=0.0, step=1000.0)
            leads = cols[1].number_input("Leads", min_value=0, step=1)
            followups = cols[2].number_input("Follow-ups", min_value=0, step=1)
            kpi_data = {kpi["name"]: st.text_input(kpi["name"], help=kpi.get("description")) for kpi in kpis}
            remarks = st.text_area("Remarks")

            if st.form_submit_button("Submit report", type="primary"):
                created = _call(
                    _client().submit_report,
                    user_id,
                    date=date.today().isoformat(),
                    calls=int(calls),
                    emails=int(emails),
                    whatsapp=int(whatsapp),
                    social=int(social),
                    revenue=revenue,
                    leads=int(leads),
                    followups=int(followups),
                    remarks=remarks or None,
                    kpi_data={k: v for k, v in kpi_data.items() if v},
                )
                if created:
                    st.success("Report submitted")
                    st.rerun()


def _render_recent_activity(user_id: int) -> None:
    reports: list[dict] = _call(_client().list_reports, user_id) or []
    st.subheader("Recent activity")
    if not reports:
        st.info("No reports submitted yet. Start your daily reporting!")
        return
    df = pd.DataFrame(reports[:10])
    st.dataframe(
        df[["date", "calls", "emails", "leads", "followups", "revenue", "remarks"]],
        use_container_width=True,
        hide_index=True,
    )


def _render_employee(user: dict) -> None:
    st.subheader(f"Welcome back, {user['name']}")
    _render_target_cards(user["id"])
    _render_report_form(user["id"])
    _render_recent_activity(user["id"])


# ── Layout ─────────────────────────────────────────────────────────────────
current_user: Optional[dict] = st.session_state.user

if current_user is None:
    _render_login()
else:
    with st.sidebar:
        st.title("ScholarCRM")
        st.markdown(f"**{current_user['name']}**  \n{current_user.get('designation') or ''}")
        st.divider()
        if st.button("Logout", use_container_width=True):
            st.session_state.user = None
            st.rerun()

    if current_user["role"] == "admin":
        _render_admin()
    else:
        _render_employee(current_user)
