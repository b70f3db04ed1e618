# client/pages/2_📚_Browse.py
import streamlit as st
import api as API
from components import show_table, show_json, show_error

st.title("📚 Browse")

tab1, tab2, tab3, tab4 = st.tabs(["People in space", "Near-earth objects", "Upcoming launches", "Astronauts"])

with tab1:
    st.subheader("People in space")
    if st.button("Fetch people", key="btn_fetch_people"):
        try:
            snap = API.people_in_space()
            st.metric("In orbit", len(snap["people"]))
            show_table(snap["people"], caption=f"captured {snap['update_time']}")
        except Exception as e:
            show_error(e)

with tab2:
    st.subheader("Near-earth objects")
    hazardous_only = st.checkbox("potentially hazardous only", key="neo_hazardous")
    if st.button("Fetch near-earth objects", key="btn_fetch_neo"):
        try:
            res = API.near_earth_objects()
            objs = res["data"]["near_earth_objects"]
            if hazardous_only:
                objs = [o for o in objs if o["is_potentially_hazardous_asteroid"]]
            rows = [
                {
                    "name": o["name"],
                    "hazardous": o["is_potentially_hazardous_asteroid"],
                    "magnitude_h": o["absolute_magnitude_h"],
                    "diameter_km_max": o["estimated_diameter"]["kilometers"]["estimated_diameter_max"],
                    # keep the upstream strings; they carry more digits than a float shows
                    "miss_distance_km": (o["close_approach_data"] or [{}])[0].get("miss_distance", {}).get("kilometers"),
                    "velocity_km_s": (o["close_approach_data"] or [{}])[0].get("relative_velocity", {}).get("kilometers_per_second"),
                }
                for o in objs
            ]
            show_table(rows, caption=f"captured {res['updated_date_time']} · {res['data']['element_count']} objects")
        except Exception as e:
            show_error(e)

with tab3:
    st.subheader("Upcoming launches")
    if st.button("Fetch launches", key="btn_fetch_launches"):
        try:
            res = API.upcoming_launches()
            rows = [
                {
                    "name": l["name"],
                    "provider": l["provider"]["name"],
                    "vehicle": l["vehicle"]["name"],
                    "pad": (l.get("pad") or {}).get("name"),
                    "window_opens": l["window"]["opens"],
                    "date": l.get("date_str"),
                    "weather": l["weather"]["summary"],
                }
                for l in res["launches"]["launches"]
            ]
            show_table(rows, caption=f"captured {res['date']}")
        except Exception as e:
            show_error(e)

with tab4:
    st.subheader("Astronaut roster")
    if st.button("Fetch roster", key="btn_fetch_roster"):
        try:
            snap = API.astronauts()
            show_table(snap["astronauts"], caption=f"from {snap['source_url']} · captured {snap['updated_date_time']}")
        except Exception as e:
            show_error(e)
    with st.expander("Raw JSON"):
        if st.button("Show roster JSON", key="btn_roster_json"):
            try:
                show_json(API.astronauts())
            except Exception as e:
                show_error(e)
