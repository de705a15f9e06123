"""Invoice Period Engine package.

Organized by feature modules (periods, work_hours, invoices, analytics)
with a thin Flask controller layer over pure calculators and services.
"""
