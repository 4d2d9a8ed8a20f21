"""
Configuration settings for the storage class orchestrator.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# API Configuration
ORCHESTRATOR_API_VERSION = os.getenv('ORCHESTRATOR_API_VERSION', '1')

# Logging Configuration
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# Metrics Configuration
METRICS_ENABLED = os.getenv('METRICS_ENABLED', 'True').lower() == 'true'

# Matching Configuration
SKIP_INVALID_POOLS = os.getenv('SKIP_INVALID_POOLS', 'False').lower() == 'true'
