# client/components.py
import streamlit as st
import pandas as pd

def show_table(rows, caption: str | None = None):
    """Render a list[dict] as a dataframe; otherwise show JSON."""
    if caption:
        st.caption(caption)
    if isinstance(rows, list):
        if rows and isinstance(rows[0], dict):
            st.dataframe(pd.json_normalize(rows))
        else:
            st.write(rows)
    else:
        st.write(rows)

def show_json(obj, caption: str | None = None):
    if caption:
        st.caption(caption)
    st.json(obj)

def show_error(e: Exception):
    """Show the API's {"error", "detail"} body when there is one."""
    resp = getattr(e, "response", None)
    if resp is not None:
        try:
            body = resp.json()
            st.error(f"{resp.status_code} {body.get('error')}: {body.get('detail')}")
            return
        except ValueError:
            pass
    st.error(e)
