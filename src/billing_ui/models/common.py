"""
View state for the billing UI.

The page is always in exactly one of three modes:

- listing: the searchable invoice list
- editing: the form, either blank (new invoice) or holding an invoice
- previewing: the printable rendering of one invoice

ViewState is immutable; every navigation returns a new instance from one
of the transition methods so the Reflex state never pokes at tab names or
selected invoices directly.
"""

from dataclasses import dataclass, replace
from enum import Enum

from billing_ui.models.invoice import Invoice


class ViewMode(str, Enum):
    """The screens the page can show."""

    LISTING = "listing"
    EDITING = "editing"
    PREVIEWING = "previewing"


@dataclass(frozen=True, slots=True)
class ViewState:
    """
    Current screen plus the invoice it is about, if any.

    Attributes:
        mode: Which screen is active.
        invoice: The invoice being edited or previewed. None while listing
            and while editing a new invoice.
        last_viewed: The most recently previewed invoice, kept across tab
            switches so the preview tab can reopen it.
    """

    mode: ViewMode = ViewMode.LISTING
    invoice: Invoice | None = None
    last_viewed: Invoice | None = None

    def __post_init__(self) -> None:
        if self.mode is ViewMode.PREVIEWING and self.invoice is None:
            raise ValueError("previewing requires an invoice")
        if self.mode is ViewMode.LISTING and self.invoice is not None:
            raise ValueError("listing does not carry an invoice")

    @property
    def is_new(self) -> bool:
        """True while the form is open for an invoice that is not saved yet."""
        return self.mode is ViewMode.EDITING and self.invoice is None

    @property
    def editing_id(self) -> str | None:
        """Backend id of the invoice being edited, if any."""
        if self.mode is ViewMode.EDITING and self.invoice is not None:
            return self.invoice.id
        return None

    @property
    def preview_target(self) -> Invoice | None:
        """Invoice the preview tab opens: the current one, else the last viewed."""
        return self.invoice if self.invoice is not None else self.last_viewed

    def listing(self) -> "ViewState":
        return ViewState(ViewMode.LISTING, last_viewed=self.last_viewed)

    def create_new(self) -> "ViewState":
        return ViewState(ViewMode.EDITING, last_viewed=self.last_viewed)

    def edit(self, invoice: Invoice) -> "ViewState":
        return ViewState(ViewMode.EDITING, invoice, self.last_viewed)

    def preview(self, invoice: Invoice) -> "ViewState":
        return ViewState(ViewMode.PREVIEWING, invoice, invoice)

    def after_save(self) -> "ViewState":
        """Return to the list once the form has been saved, clearing last_viewed."""
        return ViewState(ViewMode.LISTING)

    def forget(self, invoice_id: str) -> "ViewState":
        """Drop every reference to a deleted invoice."""
        last_viewed = self.last_viewed
        if last_viewed is not None and last_viewed.id == invoice_id:
            last_viewed = None
        if self.invoice is not None and self.invoice.id == invoice_id:
            return ViewState(ViewMode.LISTING, last_viewed=last_viewed)
        return replace(self, last_viewed=last_viewed)
