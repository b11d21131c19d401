"""Chart rendering for the dashboard and report tabs."""
from typing import Sequence

import matplotlib.pyplot as plt
import streamlit as st

from insight_stream.models import DataRecord
from insight_stream.report import records_frame, window
from style_utils import COLORS


def _style_axes(ax):
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.grid(axis="y", linestyle="--", alpha=0.3)
    ax.tick_params(labelsize=8, colors=COLORS["secondary"])


def render_revenue_trend(records: Sequence[DataRecord]):
    """Area chart of sales over the first records of the batch."""
    df = records_frame(window(records, "revenue_trend"))
    if df.empty:
        st.info("No records loaded yet.")
        return
    fig, ax = plt.subplots(figsize=(8, 4))
    ax.plot(df["date"], df["sales"], color=COLORS["primary"], linewidth=2)
    ax.fill_between(df["date"], df["sales"], color=COLORS["primary"], alpha=0.1)
    ax.set_ylabel("Sales")
    _style_axes(ax)
    fig.autofmt_xdate()
    plt.tight_layout()
    st.pyplot(fig)
    plt.close(fig)


def render_inventory_by_region(records: Sequence[DataRecord]):
    """Bar per record, labelled by region, as in the mirrored Access view."""
    df = records_frame(window(records, "inventory_by_region"))
    if df.empty:
        st.info("No records loaded yet.")
        return
    fig, ax = plt.subplots(figsize=(8, 4))
    labels = [f"{region}\n#{rid}" for region, rid in zip(df["region"], df["id"])]
    ax.bar(labels, df["inventory"], color=COLORS["primary"], alpha=0.85)
    ax.set_ylabel("Inventory")
    _style_axes(ax)
    plt.tight_layout()
    st.pyplot(fig)
    plt.close(fig)


def render_sales_vs_profit(records: Sequence[DataRecord]):
    df = records_frame(window(records, "report_lines"))
    if df.empty:
        st.info("No records loaded yet.")
        return
    fig, ax = plt.subplots(figsize=(6, 3.5))
    ax.plot(df["date"], df["sales"], color=COLORS["primary"], linewidth=3, label="Sales")
    ax.plot(df["date"], df["profit"], color=COLORS["success"], linewidth=3, label="Profit")
    ax.legend(frameon=False, fontsize=8)
    ax.set_xticks([])
    _style_axes(ax)
    plt.tight_layout()
    st.pyplot(fig)
    plt.close(fig)


def render_live_buffer(records: Sequence[DataRecord]):
    """Most recent rows of the polling buffer."""
    df = records_frame(window(records, "live_buffer"))
    if df.empty:
        st.info("Polling buffer is empty.")
        return
    display_df = df[["id", "date", "product", "region", "sales"]].copy()
    display_df["id"] = display_df["id"].apply(lambda x: f"#SQL-{x}")
    display_df["date"] = display_df["date"].dt.strftime("%Y-%m-%d")
    display_df["sales"] = display_df["sales"].apply(lambda x: f"${x:,}")
    display_df["status"] = "Synced"
    display_df.columns = ["Source ID", "Timestamp", "Product", "Region", "Value", "Status"]
    st.dataframe(display_df, hide_index=True, width="stretch")
