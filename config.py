"""Configuration for the AI job impact charts."""

import logging
import os
from pathlib import Path

import yaml

log = logging.getLogger(__name__)

# ── Paths ──────────────────────────────────────────────────────────────────────
BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / "data"
CONFIG_DIR = BASE_DIR / "config"
LOG_DIR = BASE_DIR / "logs"
REPORTS_DIR = BASE_DIR / "reports"


# ── YAML Config Loader ────────────────────────────────────────────────────────

def _load_app_config() -> dict:
    """Load app settings from config/app.yaml, falling back to hardcoded defaults."""
    yaml_path = CONFIG_DIR / "app.yaml"
    try:
        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}
        return data.get("app", {})
    except (FileNotFoundError, yaml.YAMLError) as e:
        log.debug(f"app.yaml not loaded ({e}), using hardcoded defaults")
        return {}


_app_cfg = _load_app_config()

# ── Data Sources ───────────────────────────────────────────────────────────────

# Root that resource paths such as "/data/job_data.csv" are resolved against.
# Either a local directory or an http(s) base URL serving the same layout.
SOURCE_ROOT = os.environ.get("JOBVIZ_SOURCE_ROOT") or _app_cfg.get("source_root") or str(BASE_DIR)

_resources = _app_cfg.get("resources", {})

JOB_DATA_PATH = _resources.get("job_data", "/data/job_data.csv")
AUGMENTED_JOB_DATA_PATH = _resources.get("augmented_job_data", "/data/augmented_final_data.csv")
SECTOR_DATA_PATH = _resources.get("sector_data", "/data/sector_data.csv")
SKILLS_DATA_PATH = _resources.get("skills_data", "/data/skills_data.csv")
TIMELINE_EVENTS_PATH = _resources.get("timeline_events", "/data/timeline_events.csv")

HTTP_TIMEOUT_SECONDS = _app_cfg.get("http_timeout_seconds", 30)

# ── Logging ────────────────────────────────────────────────────────────────────
LOG_FILE = LOG_DIR / _app_cfg.get("log_file", "jobviz.log")
LOG_LEVEL = os.environ.get("JOBVIZ_LOG_LEVEL", _app_cfg.get("log_level", "INFO")).upper()
