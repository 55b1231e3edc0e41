"""
Local support modules for the billing UI.

Modules:
    logs: Logger factory with a shared format
"""

from billing_ui.lib import logs

__all__ = ["logs"]
