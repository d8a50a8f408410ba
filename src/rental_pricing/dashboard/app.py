"""Partner dashboard — deposits, commission tier and revenue path in one page.

Layout: sidebar host deposit settings → main area with three tabs
(Deposits | Commission | Revenue).  Every number on the page comes from
the same engine functions the API and the guest checkout use.

Run with:
    streamlit run src/rental_pricing/dashboard/app.py
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from rental_pricing.config import (
    DEFAULT_TIERS,
    HostDepositSettings,
    VehicleDepositConfig,
)
from rental_pricing.engine.commission import commission_split, resolve_tier
from rental_pricing.engine.deposit import summarize_fleet_deposits
from rental_pricing.engine.earnings import estimate_earnings
from rental_pricing.engine.normalization import (
    move_to_global,
    move_to_individual,
    normalize_host_settings,
    normalize_vehicle_deposit,
)
from rental_pricing.engine.revenue import RevenuePathEditor, SelectionSaveError
from rental_pricing.api.narrative import generate_tier_narrative

# ---------------------------------------------------------------------------
# Sample fleet — replaced by the host's vehicles when embedded in the app
# ---------------------------------------------------------------------------
_SAMPLE_FLEET = [
    VehicleDepositConfig(id="v1", make="Tesla", model="Model 3", year=2023, daily_rate=300),
    VehicleDepositConfig(id="v2", make="Toyota", model="Camry", year=2022, daily_rate=85),
    VehicleDepositConfig(id="v3", make="Lamborghini", model="Huracan", year=2021, daily_rate=1495,
                         vehicle_deposit_mode="individual", require_deposit=True, deposit_amount=2500),
    VehicleDepositConfig(id="v4", make="BMW", model="M4", year=2024, daily_rate=220,
                         vehicle_deposit_mode="individual", require_deposit=False),
]

_COLUMNS = ["id", "make", "model", "year", "daily_rate", "vehicle_deposit_mode", "require_deposit", "deposit_amount"]

st.set_page_config(page_title="Partner Pricing", page_icon="🚗", layout="wide")

if "vehicles" not in st.session_state:
    st.session_state.vehicles = [v.model_dump() for v in _SAMPLE_FLEET]
if "editor" not in st.session_state:
    st.session_state.editor = RevenuePathEditor()

# ---------------------------------------------------------------------------
# Sidebar — host global deposit settings
# ---------------------------------------------------------------------------
st.sidebar.header("Global deposit settings")
require = st.sidebar.toggle("Require deposit", value=True)
default_amount = st.sidebar.number_input("Default amount ($)", min_value=0, value=500, step=25)
make_df = st.sidebar.data_editor(
    pd.DataFrame([{"make": "Tesla", "amount": 800}]),
    num_rows="dynamic",
    key="make_deposits",
)
make_deposits = {
    str(row["make"]): float(row["amount"])
    for _, row in make_df.dropna().iterrows()
    if float(row["amount"]) > 0
}
host = normalize_host_settings(HostDepositSettings(
    require_deposit=require,
    default_amount=float(default_amount),
    make_deposits=make_deposits,
))
st.sidebar.caption("Amounts are rounded to multiples of $25 (minimum $25) when saved.")

vehicles = [VehicleDepositConfig(**v) for v in st.session_state.vehicles]

tab_dep, tab_com, tab_rev = st.tabs(["Deposits", "Commission", "Revenue"])

# ---------------------------------------------------------------------------
# Deposits
# ---------------------------------------------------------------------------
with tab_dep:
    if st.session_state.get("disabled_ids"):
        st.warning(
            f"Deposit turned off for {', '.join(st.session_state.pop('disabled_ids'))}: "
            f"no valid amount entered."
        )

    summary = summarize_fleet_deposits(vehicles, host)
    c1, c2, c3 = st.columns(3)
    c1.metric("Global mode", summary.global_count)
    c2.metric("Individual mode", summary.individual_count)
    c3.metric("No deposit", summary.no_deposit_count)

    rows = []
    for v, r in zip(vehicles, summary.vehicles):
        rows.append({
            "Vehicle": f"{v.year or ''} {v.make} {v.model}".strip(),
            "Daily rate": v.daily_rate,
            "Class": r.car_class,
            "Mode": r.mode,
            "Deposit": r.amount,
            "Rule": r.source,
        })
    st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)

    st.subheader("Move vehicles")
    ids = st.multiselect("Vehicles", [v.id for v in vehicles])
    m1, m2 = st.columns(2)
    if m1.button("Move to global", disabled=not ids):
        moved = move_to_global(vehicles, set(ids))
        st.session_state.vehicles = [v.model_dump() for v in moved]
        st.rerun()
    if m2.button("Move to individual", disabled=not ids):
        moved = move_to_individual(vehicles, set(ids), host)
        st.session_state.vehicles = [v.model_dump() for v in moved]
        st.rerun()

    with st.expander("Edit individual vehicle settings"):
        edited = st.data_editor(
            pd.DataFrame(st.session_state.vehicles, columns=_COLUMNS),
            hide_index=True,
            disabled=["id", "make", "model", "year", "vehicle_deposit_mode"],
            key="vehicle_editor",
        )
        if st.button("Save vehicle settings"):
            saved: list[dict] = []
            disabled: list[str] = []
            for rec in edited.to_dict("records"):
                amount = rec.get("deposit_amount")
                rec["deposit_amount"] = None if pd.isna(amount) else float(amount)
                v = VehicleDepositConfig(**rec)
                n = normalize_vehicle_deposit(v)
                if v.require_deposit and not n.require_deposit:
                    disabled.append(v.id)
                saved.append(n.model_dump())
            st.session_state.vehicles = saved
            # Shown on the next run; st.rerun() discards this run's output.
            st.session_state.disabled_ids = disabled
            st.rerun()

# ---------------------------------------------------------------------------
# Commission
# ---------------------------------------------------------------------------
with tab_com:
    fleet_size = st.number_input("Active fleet size", min_value=0, value=len(vehicles), step=1)
    progress = resolve_tier(int(fleet_size), DEFAULT_TIERS)

    c1, c2, c3 = st.columns(3)
    c1.metric("Current tier", progress.current.name)
    c2.metric("Commission", f"{progress.current.commission_percent}%")
    c3.metric("To next tier", progress.units_to_next if progress.next else "—")

    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=progress.progress_percent,
        number={"suffix": "%"},
        title={"text": f"Progress to {progress.next.name}" if progress.next else "Top tier"},
        gauge={"axis": {"range": [0, 100]}},
    ))
    fig.update_layout(height=260, margin=dict(l=20, r=20, t=50, b=10))
    st.plotly_chart(fig, use_container_width=True)
    st.text(generate_tier_narrative(progress))

    gross = st.number_input("Gross booking revenue ($)", min_value=0.0, value=10_000.0, step=500.0)
    split = commission_split(gross, progress.current)
    st.dataframe(
        pd.DataFrame([
            {"": "Platform commission", "$": split.platform_commission},
            {"": "Partner payout", "$": split.partner_payout},
        ]),
        hide_index=True,
    )

# ---------------------------------------------------------------------------
# Revenue path
# ---------------------------------------------------------------------------
with tab_rev:
    editor: RevenuePathEditor = st.session_state.editor

    path = st.radio(
        "Revenue path",
        ["insurance", "tiers"],
        index=None if editor.draft.path is None else ["insurance", "tiers"].index(editor.draft.path),
        format_func=lambda p: "Platform insurance (40%)" if p == "insurance" else "Bring your own insurance",
    )
    if path is not None and path != editor.draft.path:
        editor.select_path(path)

    if editor.draft.path == "tiers":
        tier = st.radio(
            "Insurance type",
            ["p2p", "commercial", "self_manage"],
            index=None if editor.draft.tier is None
            else ["p2p", "commercial", "self_manage"].index(editor.draft.tier),
        )
        if tier is not None and tier != editor.draft.tier:
            editor.select_tier(tier)

    status = editor.status
    st.metric("Payout", f"{status.payout_percent}%" if status.payout_percent is not None else "--")

    if st.button("Save", disabled=not status.can_save or editor.in_flight):
        try:
            editor.save()
            st.success("Revenue path saved.")
        except SelectionSaveError as e:
            st.error(str(e))

    if status.payout_percent is not None:
        st.subheader("Earnings estimate")
        e1, e2 = st.columns(2)
        rate = e1.number_input("Daily rate ($)", min_value=0.0, value=150.0, step=5.0)
        bookings = e2.slider("Bookings per month", 1, 30, 15)
        est = estimate_earnings(rate, bookings, status.payout_percent)
        r1, r2, r3 = st.columns(3)
        r1.metric("Monthly earnings", f"${est.host_earnings:,}")
        r2.metric("Annual earnings", f"${est.annual_earnings:,}")
        r3.metric("vs. typical platform", f"${est.monthly_savings:,}/mo")

