from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import InvoiceFolder, InvoiceRecord


class InvoiceRepository(Protocol):
    def get_folder(self, folder_id: str) -> Optional[InvoiceFolder]:
        raise NotImplementedError

    def list_folders_for_user(self, user_id: str) -> Sequence[InvoiceFolder]:
        raise NotImplementedError

    def list_for_user(self, user_id: str) -> Sequence[InvoiceRecord]:
        raise NotImplementedError

    def list_for_folder(self, folder_id: Optional[str]) -> Sequence[InvoiceRecord]:
        """Invoices filed under ``folder_id``; ``None`` selects unfiled invoices of every user."""

        raise NotImplementedError
