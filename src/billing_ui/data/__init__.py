"""
Static demo data for the billing UI.

Modules:
- demo_invoices: Wire-format invoice records served by DemoInvoiceService
"""
