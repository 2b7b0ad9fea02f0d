"""Vercel serverless entry point for Buttonsmith."""
import sys
import os

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from buttonsmith.config import ExportSettings
from buttonsmith.web.app import create_app

app = create_app(settings=ExportSettings())
