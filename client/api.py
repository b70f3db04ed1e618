import os, requests
from dotenv import load_dotenv
load_dotenv()
API = os.getenv("API_BASE_URL", "http://localhost:8000")
S = requests.Session(); S.headers.update({"Accept":"application/json"})

DATASETS = {
    "people_in_space": "/people-in-space",
    "near_earth_objects": "/near-earth-objects",
    "upcoming_launches": "/upcoming-launches",
    "astronauts": "/astronauts",
}

def healthz():           r=S.get(f"{API}/healthz",timeout=10); r.raise_for_status(); return r.json()
def people_in_space():   r=S.get(f"{API}/people-in-space",timeout=30); r.raise_for_status(); return r.json()
def near_earth_objects():r=S.get(f"{API}/near-earth-objects",timeout=30); r.raise_for_status(); return r.json()
def upcoming_launches(): r=S.get(f"{API}/upcoming-launches",timeout=30); r.raise_for_status(); return r.json()
def astronauts():        r=S.get(f"{API}/astronauts",timeout=30); r.raise_for_status(); return r.json()

def refresh(dataset: str):
    """Trigger the write path for one dataset. Returns the HTTP status code."""
    path = DATASETS[dataset]
    r = S.post(f"{API}{path}/refresh", timeout=90)
    r.raise_for_status()
    return r.status_code
