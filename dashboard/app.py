"""Streamlit page: How Fast Will AI Take Your Job?"""

import asyncio
import logging
import sys
from pathlib import Path

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pandas as pd
import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from analyzer.analyze import domain_summary, generate_summary, jobs_to_dataframe
from analyzer.explorer import filter_jobs, job_skill_profile, list_domains, profile_to_radar_rows
from analyzer.risk import explanation, key_factors, recommendation, risk_color, risk_label
from charts.layout import compute_geometry
from charts.radar import radar_rows_from_skills
from csvdata.loader import load_all
from dashboard import page_data
from dashboard.figures import build_figure

log = logging.getLogger(__name__)

CONTAINER_WIDTH = 900

st.set_page_config(
    page_title="How Fast Will AI Take Your Job?",
    page_icon="🤖",
    layout="wide",
)


@st.cache_data(ttl=300)
def load_data() -> dict[str, list]:
    """Fetch and transform every CSV resource once per cache window."""
    return asyncio.run(load_all())


def chart(kind: str, data, title: str | None = None, **options):
    geometry = compute_geometry(kind, data, CONTAINER_WIDTH, **options)
    st.plotly_chart(build_figure(kind, geometry, title), use_container_width=True)


# ══════════════════════════════════════════════════════════════════════════════
# Data
# ══════════════════════════════════════════════════════════════════════════════

data = load_data()
jobs = data["jobs"]

st.title("How Fast Will AI Take Your Job?")
st.caption("Explore how artificial intelligence might reshape work across domains.")

if not jobs:
    st.warning("No job data could be loaded. Check the source root setting and the logs.")

# ══════════════════════════════════════════════════════════════════════════════
# Job Explorer
# ══════════════════════════════════════════════════════════════════════════════

st.header("Interactive Job Explorer")

use_augmented = st.toggle("Use extended job dataset", value=False)
explorer_jobs = data["augmented_jobs"] if use_augmented else jobs

col1, col2, col3, col4 = st.columns([3, 2, 2, 2])
with col1:
    term = st.text_input("Search job titles", "")
with col2:
    domain = st.selectbox("Domain", ["All"] + list_domains(explorer_jobs))
with col3:
    tier = st.selectbox("Risk", ["all", "low", "medium", "high"], format_func=str.title)
with col4:
    sort_by = st.selectbox("Sort by", ["impact", "title", "aiWorkloadRatio"])
    ascending = st.checkbox("Ascending", value=False)

results = filter_jobs(
    explorer_jobs,
    term=term,
    domain=None if domain == "All" else domain,
    tier=tier,
    sort_by=sort_by,
    direction="asc" if ascending else "desc",
)

if results:
    table = pd.DataFrame(
        [
            {
                "Job": j["title"],
                "Domain": j["domain"],
                "AI Impact (%)": j["impact"],
                "Risk": risk_label(j["impact"]),
                "AI Workload Ratio": j["aiWorkloadRatio"],
                "Time to Disruption": j["timeToDisruption"],
            }
            for j in results
        ]
    )
    st.dataframe(table, use_container_width=True, hide_index=True)

    selected_title = st.selectbox("Job details", [j["title"] for j in results])
    job = next(j for j in results if j["title"] == selected_title)
    impact = job["impact"]

    left, right = st.columns([1, 2])
    with left:
        chart("gauge", impact, width=220)
    with right:
        st.markdown(
            f"<span style='color:{risk_color(impact)};font-weight:600'>{risk_label(impact)}</span>",
            unsafe_allow_html=True,
        )
        st.write(explanation(impact))
        st.markdown("**Key factors**")
        for factor in key_factors(impact):
            st.markdown(f"- {factor}")
        st.markdown("**Recommendation**")
        st.write(recommendation(impact))
        if job["keySkillsToKeep"]:
            st.markdown("**Skills to keep:** " + ", ".join(job["keySkillsToKeep"]))
        if job.get("howToBeAIProof"):
            st.markdown(f"**How to be AI-proof:** {job['howToBeAIProof']}")

    rows = profile_to_radar_rows(job_skill_profile(job))
    chart("radar", rows, "Human Skills vs AI Capabilities",
          keys=["Human Skills", "AI Capabilities"], index_by="skill")
else:
    st.info("No jobs match the current filters.")

# ══════════════════════════════════════════════════════════════════════════════
# Domain & Skill Impact
# ══════════════════════════════════════════════════════════════════════════════

st.header("Domain & Skill Impact Analysis")

heights = page_data.PAGE_HEIGHTS
if data["sectors"]:
    chart("bar", data["sectors"], "Percentage of tasks that could be automated by 2030", height=heights["bar"])

chart("heatmap", page_data.DOMAIN_SKILLS_HEATMAP, "Automation Risk of Skill Types by Domain",
      height=heights["heatmap"], color_scheme=page_data.HEATMAP_COLOR_SCHEME)
chart("bubble", page_data.BUBBLE_DATA, "Job Automation Risk Landscape", height=heights["bubble"])

if data["skills"]:
    chart("radar", radar_rows_from_skills(data["skills"]), "Skills Comparison",
          keys=[c["category"] for c in data["skills"]], index_by="skill")

if jobs:
    df = jobs_to_dataframe(jobs)
    summary = generate_summary(df)
    m1, m2, m3 = st.columns(3)
    m1.metric("Jobs", summary["total_jobs"])
    m2.metric("Domains", summary["unique_domains"])
    m3.metric("Mean AI Impact", f"{summary['mean_impact']:.0f}%")
    st.dataframe(domain_summary(df), use_container_width=True, hide_index=True)

# ══════════════════════════════════════════════════════════════════════════════
# Future
# ══════════════════════════════════════════════════════════════════════════════

st.header("The Future of Work")

chart("trend", page_data.FUTURE_PROJECTIONS, height=heights["trend"])

if data["timeline"]:
    chart("timeline", data["timeline"], "AI Adoption Timeline")

g_col, r_col, i_col = st.columns(3)
with g_col:
    st.subheader("Generative AI Impact")
    chart("gauge", page_data.GENERATIVE_AI_IMPACT, width=page_data.GAUGE_SIZE)
    st.caption("65-70% of knowledge work tasks could be automated or augmented by generative AI by 2030.")
with r_col:
    st.subheader("Emerging AI Roles")
    for i, (role, desc) in enumerate(page_data.EMERGING_ROLES, 1):
        st.markdown(f"{i}. **{role}** - {desc}")
with i_col:
    st.subheader("Reskilling Need")
    chart("isotype", page_data.RESKILLING_NEED, icon=page_data.RESKILLING_ICON)
    st.caption("Half of all workers will need significant reskilling by 2030")
