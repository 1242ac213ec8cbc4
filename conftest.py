"""Global pytest configuration."""

import os

# Force the deterministic stub generator before any settings are loaded
os.environ["OPENAI_API_KEY"] = ""
