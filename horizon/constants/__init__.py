"""
Constants module for the application.
Centralizes all hardcoded values for better maintainability.
"""

# Re-export all constants for easy access
from .api import *
from .auth import *
from .payments import *
from .plaid import *
