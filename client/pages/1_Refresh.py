import streamlit as st
import api as API
from components import show_error

st.title("🔄 Refresh")

st.caption("Each refresh calls the upstream API once and overwrites the stored snapshot.")

LABELS = {
    "people_in_space": "People in space (open-notify)",
    "near_earth_objects": "Near-earth objects (NASA NeoWs, today)",
    "upcoming_launches": "Upcoming launches (rocketlaunch.live)",
    "astronauts": "Astronaut roster (nasa.gov)",
}

for dataset, label in LABELS.items():
    c1, c2 = st.columns([3, 1])
    with c1:
        st.write(f"**{label}**")
    with c2:
        if st.button("Refresh", key=f"btn_refresh_{dataset}"):
            try:
                API.refresh(dataset)
                st.success("Stored.")
            except Exception as e:
                show_error(e)
