"""
RetailMetrics Mock API

Synthetic retail analytics data for the FashionForward dashboard:
- Store, sales, inventory and store-detail generation at startup
- Read-only JSON endpoints served by FastAPI
"""

__version__ = "1.0.0"
__author__ = "RetailMetrics"
