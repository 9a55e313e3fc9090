"""
Horizon API

Personal finance backend: Appwrite sign-in, Plaid bank linking, Dwolla
transfers and a generated Checkbook client.
"""

__version__ = "1.0.0"
