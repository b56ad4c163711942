"""Pytest configuration and shared fixtures."""

# Load environment variables from .env file at test startup
# (e.g. STEPWISE_SAMPLE_API_URL to run workflows against a live server)
from dotenv import load_dotenv
load_dotenv()

pytest_plugins = [
    "tests.fixtures.api",
]
