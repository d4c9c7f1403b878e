"""
Centralized configuration for the step debuggers.
Defines paths, step tables and server settings used across components.
"""

from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.absolute()
LOGS_DIR = PROJECT_ROOT / "logs"
APP_LOGS_DIR = PROJECT_ROOT / "logs" / "app_logs"

date_str = datetime.now().strftime("%m%d%Y")
APP_LOG_FILE = str(APP_LOGS_DIR / f"{date_str}_1.log")

REPEATS = 60

RECOMMEND = {
    "max_steps": 6,
    "top_k": 2,
    "step_titles": [
        "Capture selected product",
        "Retrieve co-purchase data",
        "Compute similarity",
        "Similarity scores",
        "Rank by similarity",
        "Top recommendations",
    ],
}

REVIEW = {
    "max_steps": 8,
    "step_titles": [
        "Capture raw text",
        "Lowercase",
        "Remove punctuation",
        "Remove stopwords",
        "Tokenize",
        "Sentiment score",
        "Aspect detection",
        "Generate insight",
    ],
}

SERVER = {
    "host": "0.0.0.0",
    "port": 8000,
    "cors_origins": ["http://localhost:5173"],
    "default_session": "default",
    "session_ttl_minutes": 30,
    "max_sessions": 1000,
}

PATHS = {
    "app_log_file": APP_LOG_FILE,
}
