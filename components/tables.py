"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd


def render_stock_table(df: pd.DataFrame, stock_column: str = "Stock"):
    """Render the room-type summary with empty types highlighted."""
    def color_stock(val):
        try:
            if int(val) == 0:
                return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
        except (ValueError, TypeError):
            pass
        return ""

    if stock_column in df.columns:
        styled = df.style.map(color_stock, subset=[stock_column])
        st.dataframe(styled, use_container_width=True)
    else:
        st.dataframe(df, use_container_width=True)
