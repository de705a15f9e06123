from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..common.datetime_utils import to_date, to_iso
from ..common.validators import require_bool, require_enum, require_int, require_number
from ..core.enums import InvoiceStatus
from ..core.exceptions import ValidationError
from .model import InvoiceFolder, InvoiceRecord
from .repository import InvoiceRepository

logger = logging.getLogger(__name__)


class InMemoryInvoiceRepository(InvoiceRepository):
    """Invoice store kept in process memory, optionally seeded from JSON."""

    def __init__(self):
        self._folders: Dict[str, InvoiceFolder] = {}
        self._invoices: Dict[str, InvoiceRecord] = {}

    def add_folder(self, folder: InvoiceFolder) -> None:
        self._folders[folder.folder_id] = folder

    def add_invoice(self, invoice: InvoiceRecord) -> None:
        self._invoices[invoice.invoice_id] = invoice

    def get_folder(self, folder_id: str) -> Optional[InvoiceFolder]:
        return self._folders.get(folder_id)

    def list_folders_for_user(self, user_id: str) -> Sequence[InvoiceFolder]:
        return [f for f in self._folders.values() if f.user_id == user_id]

    def list_for_user(self, user_id: str) -> Sequence[InvoiceRecord]:
        return [i for i in self._invoices.values() if i.user_id == user_id]

    def list_for_folder(self, folder_id: Optional[str]) -> Sequence[InvoiceRecord]:
        return [i for i in self._invoices.values() if i.folder_id == folder_id]

    def user_ids(self) -> List[str]:
        owners = {f.user_id for f in self._folders.values()} | {i.user_id for i in self._invoices.values()}
        return sorted(owners)

    def load_seed(self, seed_path: Path) -> int:
        """Load ``{"folders": [...], "invoices": [...]}`` in the camelCase document shape.

        Returns the number of invoices loaded.
        """
        data = json.loads(Path(seed_path).read_text(encoding="utf-8"))
        for raw in data.get("folders", []):
            self.add_folder(
                InvoiceFolder(
                    folder_id=str(raw["id"]),
                    user_id=str(raw["userId"]),
                    name=str(raw.get("name") or ""),
                    deleted_at=raw.get("deletedAt"),
                )
            )

        invoices: List[InvoiceRecord] = []
        for raw in data.get("invoices", []):
            try:
                invoices.append(_invoice_from_dict(raw))
            except (KeyError, ValidationError) as e:
                raise ValidationError(f"Invalid seed invoice {raw.get('id')!r}: {e}") from e
        for invoice in invoices:
            self.add_invoice(invoice)

        logger.info("Loaded %d folders and %d invoices from %s", len(self._folders), len(invoices), seed_path)
        return len(invoices)


def _invoice_from_dict(raw: dict) -> InvoiceRecord:
    return InvoiceRecord(
        invoice_id=str(raw["id"]),
        user_id=str(raw["userId"]),
        status=require_enum(raw.get("status", InvoiceStatus.DRAFT.value), InvoiceStatus, "status"),
        issue_date=to_iso(to_date(raw["issueDate"])),
        total_amount=require_number(raw.get("totalAmount"), "totalAmount"),
        total_hours=require_number(raw.get("totalHours"), "totalHours"),
        total_days=require_int(raw.get("totalDays"), "totalDays"),
        currency=str(raw.get("currency") or "USD"),
        client_name=str((raw.get("to") or {}).get("name") or ""),
        folder_id=raw.get("folderId"),
        is_archived=require_bool(raw.get("isArchived"), "isArchived"),
        deleted_at=raw.get("deletedAt"),
    )
