"""Source descriptor cards."""
from typing import Sequence

import streamlit as st

from insight_stream.models import DatabaseType, DataSource
from style_utils import STATUS_ICONS

DB_ICONS = {
    DatabaseType.SQL_SERVER: "🗄️",
    DatabaseType.MS_ACCESS: "💾",
}


def render_source_cards(sources: Sequence[DataSource]):
    if not sources:
        st.info("No data sources configured.")
        return

    cols = st.columns(2)
    for i, source in enumerate(sources):
        with cols[i % 2]:
            with st.container(border=True):
                icon = DB_ICONS.get(source.type, "🗄️")
                status_icon = STATUS_ICONS.get(source.status.value, "⚪")
                st.markdown(f"### {icon} {source.name}")
                st.markdown(f"{status_icon} **{source.status.value}**")
                st.markdown(f"Database Type: `{source.type.value}`")
                st.markdown(f"- **Last Sync:** {source.last_sync}")
                st.markdown(f"- **Record Count:** {source.record_count:,} items")
