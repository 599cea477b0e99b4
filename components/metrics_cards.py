"""Reusable KPI metric card widgets."""

import streamlit as st


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
            )


def render_validation_messages(result, success_message: str = ""):
    """Show a ValidationResult's errors and warnings; success message when clean."""
    for e in result.errors:
        st.error(e, icon="🔴")
    for w in result.warnings:
        st.warning(w, icon="🟡")
    if result.is_valid and not result.warnings and success_message:
        st.success(success_message)
