"""Generate a static HTML report with Plotly charts from the loaded resources."""

import logging
from datetime import datetime
from html import escape
from pathlib import Path

import pandas as pd

import config
from analyzer.analyze import domain_summary, generate_summary, jobs_to_dataframe
from analyzer.explorer import sort_jobs
from analyzer.risk import risk_color, risk_label
from charts.layout import compute_geometry
from charts.radar import radar_rows_from_skills
from dashboard import page_data
from dashboard.figures import build_figure

log = logging.getLogger(__name__)

REPORT_WIDTH = 1000


def _chart_html(fig) -> str:
    return fig.to_html(full_html=False, include_plotlyjs=False)


def build_charts(data: dict[str, list], container_width: float = REPORT_WIDTH) -> list[tuple[str, str]]:
    """Section title and embedded figure HTML for every chart on the page."""
    charts = []
    heights = page_data.PAGE_HEIGHTS

    # 1. Sector automation potential
    if data.get("sectors"):
        geometry = compute_geometry("bar", data["sectors"], container_width, height=heights["bar"])
        fig = build_figure("bar", geometry, "Percentage of tasks that could be automated by 2030")
        charts.append(("Automation by Sector", _chart_html(fig)))

    # 2. Domain x skill type heatmap
    geometry = compute_geometry(
        "heatmap", page_data.DOMAIN_SKILLS_HEATMAP, container_width,
        height=heights["heatmap"], color_scheme=page_data.HEATMAP_COLOR_SCHEME,
    )
    fig = build_figure("heatmap", geometry, "Automation Risk of Skill Types by Domain")
    charts.append(("Domain & Skill Impact", _chart_html(fig)))

    # 3. Bubble landscape
    geometry = compute_geometry("bubble", page_data.BUBBLE_DATA, container_width, height=heights["bubble"])
    charts.append(("Job Automation Risk Landscape", _chart_html(build_figure("bubble", geometry))))

    # 4. Human skills vs AI capabilities
    if data.get("skills"):
        keys = [c["category"] for c in data["skills"]]
        rows = radar_rows_from_skills(data["skills"])
        geometry = compute_geometry("radar", rows, container_width, keys=keys, index_by="skill")
        charts.append(("Human Skills vs AI Capabilities", _chart_html(build_figure("radar", geometry))))

    # 5. Future projections
    geometry = compute_geometry("trend", page_data.FUTURE_PROJECTIONS, container_width, height=heights["trend"])
    charts.append(("Future Projections", _chart_html(build_figure("trend", geometry))))

    # 6. Timeline
    if data.get("timeline"):
        geometry = compute_geometry("timeline", data["timeline"], container_width)
        charts.append(("AI Adoption Timeline", _chart_html(build_figure("timeline", geometry))))

    # 7. Headline gauge and pictogram
    geometry = compute_geometry("gauge", page_data.GENERATIVE_AI_IMPACT, container_width,
                                width=page_data.GAUGE_SIZE)
    charts.append(("Generative AI Impact", _chart_html(build_figure("gauge", geometry))))

    geometry = compute_geometry("isotype", page_data.RESKILLING_NEED, container_width,
                                icon=page_data.RESKILLING_ICON)
    fig = build_figure("isotype", geometry, "Half of all workers will need significant reskilling by 2030")
    charts.append(("Reskilling Need", _chart_html(fig)))

    return charts


def generate_report(data: dict[str, list], title: str = "How Fast Will AI Take Your Job?",
                    output: Path | None = None) -> Path | None:
    """Generate a full HTML report and return the file path."""
    df = jobs_to_dataframe(data.get("jobs", []))
    if df.empty:
        log.warning("No job data to report on")
        return None

    summary = generate_summary(df)
    tiers = {row["risk_tier"]: row["count"] for row in summary["tier_dist"]}

    charts_html = ""
    for section_title, chart_html in build_charts(data):
        charts_html += f'<div class="chart-section"><h3>{section_title}</h3>{chart_html}</div>\n'

    top_jobs = sort_jobs(data["jobs"], "impact", "desc")[:20]
    domains_html = _domain_table(domain_summary(df))
    roles_html = "".join(
        f"<li><strong>{role}</strong> <small>{desc}</small></li>" for role, desc in page_data.EMERGING_ROLES
    )

    html = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{title}</title>
    <script src="https://cdn.plot.ly/plotly-latest.min.js"></script>
    <style>
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif; background: #f5f3ff; color: #333; }}
        .container {{ max-width: 1100px; margin: 0 auto; padding: 20px; }}
        h1 {{ margin-bottom: 10px; }}
        .meta {{ color: #666; margin-bottom: 30px; }}
        .stats-grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 15px; margin-bottom: 30px; }}
        .stat-card {{ background: white; padding: 20px; border-radius: 8px; box-shadow: 0 1px 3px rgba(0,0,0,0.1); }}
        .stat-card .value {{ font-size: 28px; font-weight: bold; color: #9381FF; }}
        .stat-card .label {{ color: #666; font-size: 14px; }}
        .chart-section {{ background: white; padding: 20px; border-radius: 8px; margin-bottom: 20px; box-shadow: 0 1px 3px rgba(0,0,0,0.1); }}
        .chart-section h3 {{ margin-bottom: 15px; }}
        .chart-section ul {{ list-style: none; }}
        .chart-section li {{ padding: 6px 0; }}
        table {{ width: 100%; border-collapse: collapse; font-size: 13px; }}
        th, td {{ padding: 8px 12px; text-align: left; border-bottom: 1px solid #eee; }}
        th {{ background: #f8f8f8; font-weight: 600; }}
        tr:hover {{ background: #f5f3ff; }}
        .tag {{ display: inline-block; background: #eef2ff; color: #4338ca; padding: 2px 8px; border-radius: 12px; font-size: 11px; margin: 1px; }}
        .risk {{ display: inline-block; color: white; padding: 2px 8px; border-radius: 12px; font-size: 11px; }}
    </style>
</head>
<body>
<div class="container">
    <h1>{title}</h1>
    <p class="meta">Generated: {datetime.now().strftime("%Y-%m-%d %H:%M")} | Total jobs: {summary['total_jobs']}</p>

    <div class="stats-grid">
        <div class="stat-card">
            <div class="value">{summary['total_jobs']:,}</div>
            <div class="label">Jobs Analysed</div>
        </div>
        <div class="stat-card">
            <div class="value">{summary['unique_domains']}</div>
            <div class="label">Domains</div>
        </div>
        <div class="stat-card">
            <div class="value">{summary['mean_impact']:.0f}%</div>
            <div class="label">Mean AI Impact</div>
        </div>
        <div class="stat-card">
            <div class="value">{tiers.get('high', 0)}</div>
            <div class="label">High Risk Jobs</div>
        </div>
        <div class="stat-card">
            <div class="value">{tiers.get('medium', 0)}</div>
            <div class="label">Medium Risk Jobs</div>
        </div>
        <div class="stat-card">
            <div class="value">{tiers.get('low', 0)}</div>
            <div class="label">Low Risk Jobs</div>
        </div>
    </div>

    {charts_html}

    <div class="chart-section">
        <h3>Emerging AI Roles</h3>
        <ul>{roles_html}</ul>
    </div>

    <div class="chart-section">
        <h3>Impact by Domain</h3>
        {domains_html}
    </div>

    <div class="chart-section">
        <h3>Most Exposed Jobs</h3>
        {_jobs_table(top_jobs)}
    </div>
</div>
</body>
</html>"""

    if output is None:
        config.REPORTS_DIR.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output = config.REPORTS_DIR / f"report_{timestamp}.html"
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    log.info("Report written to %s", output)
    return output


def _domain_table(df: pd.DataFrame) -> str:
    """Render the per-domain summary as an HTML table."""
    rows = ""
    for _, row in df.iterrows():
        rows += f"""<tr>
            <td>{escape(str(row['domain']))}</td>
            <td>{row['jobs']}</td>
            <td>{row['mean_impact']:.1f}%</td>
            <td>{row['mean_workload_ratio']:.2f}</td>
        </tr>"""

    return f"""<table>
        <thead><tr><th>Domain</th><th>Jobs</th><th>Mean Impact</th><th>Mean AI Workload Ratio</th></tr></thead>
        <tbody>{rows}</tbody>
    </table>"""


def _jobs_table(jobs: list[dict]) -> str:
    """Render job records as an HTML table."""
    rows = ""
    for job in jobs:
        impact = job.get("impact")
        tags = " ".join(f'<span class="tag">{escape(s)}</span>' for s in job.get("keySkillsToKeep", [])[:5])
        rows += f"""<tr>
            <td><strong>{escape(job.get('title', ''))}</strong></td>
            <td>{escape(job.get('domain', ''))}</td>
            <td>{impact}% <span class="risk" style="background:{risk_color(impact)}">{risk_label(impact)}</span></td>
            <td>{escape(job.get('timeToDisruption', ''))}</td>
            <td>{tags}</td>
        </tr>"""

    return f"""<table>
        <thead><tr><th>Job</th><th>Domain</th><th>AI Impact</th><th>Time to Disruption</th><th>Skills to Keep</th></tr></thead>
        <tbody>{rows}</tbody>
    </table>"""
