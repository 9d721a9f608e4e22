"""Kudos Gateway: recognition delivery and visibility engine."""
