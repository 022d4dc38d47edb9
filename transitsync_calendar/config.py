import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

class Config:
    """
    Configuration class for TransitSync Calendar.
    This class loads configuration values from environment variables or uses default values.
    """
    # General configuration
    DEBUG = os.environ.get('DEBUG', 'False') == 'True'

    # Service day timezone, used when a timezone-aware datetime has to be
    # reduced to the agency's local service date.
    TIMEZONE = os.environ.get('TIMEZONE', 'Pacific/Auckland')
