"""Summaries of loaded job records."""

import pandas as pd

from analyzer.risk import TIERS, risk_tier


def jobs_to_dataframe(jobs: list[dict]) -> pd.DataFrame:
    """Convert job records to a DataFrame with a derived risk tier column."""
    df = pd.DataFrame(jobs)
    if df.empty:
        return df

    df["impact"] = pd.to_numeric(df["impact"], errors="coerce")
    df["aiWorkloadRatio"] = pd.to_numeric(df["aiWorkloadRatio"], errors="coerce")
    df["risk_tier"] = df["impact"].apply(risk_tier)
    df["skill_count"] = df["keySkillsToKeep"].apply(lambda x: len(x or []))
    return df


def domain_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Job count, mean impact and mean AI workload ratio per domain, highest impact first."""
    if df.empty:
        return pd.DataFrame(columns=["domain", "jobs", "mean_impact", "mean_workload_ratio"])

    summary = (
        df.groupby("domain", sort=False)
        .agg(
            jobs=("title", "size"),
            mean_impact=("impact", "mean"),
            mean_workload_ratio=("aiWorkloadRatio", "mean"),
        )
        .reset_index()
    )
    return summary.sort_values("mean_impact", ascending=False, kind="stable").reset_index(drop=True)


def tier_distribution(df: pd.DataFrame) -> pd.DataFrame:
    """Number of jobs per risk tier, always listing low, medium and high."""
    counts = df["risk_tier"].value_counts() if not df.empty else pd.Series(dtype=int)
    return pd.DataFrame(
        {"risk_tier": list(TIERS), "count": [int(counts.get(t, 0)) for t in TIERS]}
    )


def generate_summary(df: pd.DataFrame) -> dict:
    """Generate a complete summary of the job records."""
    return {
        "total_jobs": len(df),
        "unique_domains": df["domain"].nunique() if not df.empty else 0,
        "mean_impact": float(df["impact"].mean()) if not df.empty else 0.0,
        "tier_dist": tier_distribution(df).to_dict("records"),
        "domains": domain_summary(df).to_dict("records"),
    }
