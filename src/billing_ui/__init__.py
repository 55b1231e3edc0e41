"""
Jewelry billing UI: a Reflex application for managing invoices.

Invoices are created, listed, searched, edited, deleted and printed, with
persistence delegated to a remote invoice REST API.

Subpackages:
- components: Reflex UI components
- models: Invoice domain models and view state
- services: Invoice access layer (HTTP and demo implementations)
- data: Static demo fixtures

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
