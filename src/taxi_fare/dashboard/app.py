"""Tunisia Taxi Calculator — Streamlit form.

Run with:
    streamlit run src/taxi_fare/dashboard/app.py

Layout: one card with the trip inputs, a night-rate toggle, a calculate
button, and the receipt underneath once a valid fare has been computed.
"""

from __future__ import annotations

import streamlit as st

from taxi_fare.api.receipt import build_receipt
from taxi_fare.config.settings import get_settings
from taxi_fare.config.tariff import BAGGAGE_UNIT_COST, CURRENCY
from taxi_fare.engine.fare import calculate
from taxi_fare.engine.parsing import parse_trip_form
from taxi_fare.logging_setup import setup_logging
from taxi_fare.models.results import InvalidInput

_settings = get_settings()
setup_logging(_settings.log_level, _settings.log_json)

st.set_page_config(page_title="Tunisia Taxi Calculator", page_icon="🚕", layout="centered")

st.markdown("""
<style>
    .fare-total { font-size: 2.4rem; font-weight: 700; margin: 0; }
    .fare-caption { font-size: 0.85rem; opacity: 0.7; margin-bottom: 0.2rem; }
    .fare-line { display: flex; justify-content: space-between; font-size: 0.9rem; opacity: 0.8; }
    .fare-line.highlight { font-weight: 600; opacity: 1; }
</style>
""", unsafe_allow_html=True)

st.title("🚕 Tunisia Taxi Calculator")
st.caption("Calculate your estimated taxi fare")


# ═══════════════════════════════════════════════════════════════════════════
# Inputs
# ═══════════════════════════════════════════════════════════════════════════

with st.form("fare_form"):
    st.subheader("Fare Calculator")
    distance = st.text_input("Distance (km)", placeholder="0.0")
    waiting = st.text_input(
        "Waiting Time (minutes)", placeholder="0",
        help="Optional - leave blank if no waiting time",
    )
    baggage = st.text_input(
        "Big Packages Count", placeholder="0",
        help=f"{BAGGAGE_UNIT_COST:.2f} {CURRENCY} per big package",
    )
    night_rate = st.toggle("Night Rate (9PM - 5AM)", help="+50% surcharge")
    submitted = st.form_submit_button("Calculate Fare", use_container_width=True)

if submitted:
    trip = parse_trip_form(distance, waiting, baggage, night_rate)
    st.session_state["fare"] = (trip, calculate(trip))


# ═══════════════════════════════════════════════════════════════════════════
# Result
# ═══════════════════════════════════════════════════════════════════════════

if "fare" in st.session_state:
    trip, result = st.session_state["fare"]
    if isinstance(result, InvalidInput):
        st.error(result.message)
    else:
        receipt = build_receipt(trip, result)
        rows = "".join(
            f'<div class="fare-line{" highlight" if line.highlight else ""}">'
            f"<span>{line.label}:</span><span>{line.display}</span></div>"
            for line in receipt.lines
        )
        with st.container(border=True):
            st.markdown(
                f'<p class="fare-caption">{receipt.headline}</p>'
                f'<p class="fare-total">{receipt.total_display}</p><hr/>{rows}',
                unsafe_allow_html=True,
            )

st.caption("Rates based on official Tunisian Ministry of Transportation pricing")
