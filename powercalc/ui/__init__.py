"""
UI Module
=========

Streamlit calculator page:
- Quick add and custom appliance entry
- Appliance list with daily energy
- System parameters and sizing recommendation

Run with ``streamlit run powercalc/ui/app.py``.
"""
