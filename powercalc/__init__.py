"""
Power Needs Calculator
======================

Off-grid power system sizing from a list of household appliances:
- Appliance ledger with catalog quick add
- Solar array, battery bank and inverter sizing
- Historical record of every calculation

Architecture:
- sizing/: models, ledger, calculator and CLI
- storage/: SQLAlchemy persistence of calculation records
- ui/: Streamlit calculator page
"""

__version__ = "1.0.0"
