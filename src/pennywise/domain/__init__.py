"""Pennywise domain layer.

Plain records, repository ports and result types. Nothing in here knows
about HTTP or SQL.
"""
