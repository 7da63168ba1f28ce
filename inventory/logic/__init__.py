"""Core derivation logic over product snapshots.

Subpackages:
- expiry: DD/MM/YYYY parsing and expiration classification
- view: sort/filter pipeline for the product list
- alerts: expiring-soon and low-stock subsets
- shopping: low-stock shopping list
- reporting: inventory valuation and summary
"""
__all__ = ["expiry", "view", "alerts", "shopping", "reporting"]
