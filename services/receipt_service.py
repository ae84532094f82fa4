# services/receipt_service.py
"""
Receipt delivery - emails each resident their liquidación for a period.

One HTML email per resident with an email address and something due,
holding an expense section and, for tenants, a rent section. A failed
delivery is logged and reported; the remaining recipients are still sent.
"""
import logging
from decimal import Decimal
from html import escape
from typing import Any, Callable, Dict, List, Optional

import requests
from sqlalchemy.orm import Session

from models import Property
from services.liquidacion_service import build_liquidaciones
from utils.email import EmailDeliveryError, EmailNotConfiguredError, email_configured, send_receipt_email


logger = logging.getLogger(__name__)

MONTH_NAMES = (
     "enero", "febrero", "marzo", "abril", "mayo", "junio",
     "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)


def month_name(month: int) -> str:
     return MONTH_NAMES[month - 1]


def format_amount(amount) -> str:
     """Argentine style: thousands with '.', decimals with ','."""
     text = f"{Decimal(str(amount)):,.2f}"
     return text.replace(",", "_").replace(".", ",").replace("_", ".")


def receipt_subject(unit_number: str, year: int, month: int) -> str:
     return f"Recibos {month_name(month)} {year} - Unidad {unit_number}"


def render_receipt(property_name: str, row: Dict[str, Any], year: int, month: int) -> str:
     """HTML body with one section per amount due."""
     period = f"{month_name(month).capitalize()} {year}"
     sections = []
     if row.get("expense_due"):
          sections.append(f"""
               <h3>Recibo de expensas</h3>
               <p>Porcentaje de la unidad: {format_amount(row["expense_percentage"])}%</p>
               <p>Importe: <strong>$ {format_amount(row["expense_due"])}</strong></p>
          """)
     if row.get("rent_due"):
          sections.append(f"""
               <h3>Recibo de alquiler</h3>
               <p>Importe: <strong>$ {format_amount(row["rent_due"])}</strong></p>
          """)

     return f"""
          <h2>{escape(property_name)} - Unidad {escape(row["unit_number"])}</h2>
          <p>{escape(row.get("resident_name") or "")}</p>
          <p>Período: {period}</p>
          {"".join(sections)}
     """


def send_receipts(
     db: Session,
     prop: Property,
     year: int,
     month: int,
     sender: Optional[Callable[..., None]] = None,
) -> Dict[str, Any]:
     """
     Send the period's receipts of every unit in a property.

     Args:
          db: SQLAlchemy database session
          prop: Property (ownership already checked)
          year: Period year
          month: Period month
          sender: Delivery function (defaults to the Brevo sender)

     Returns:
          {"success": bool, "sent": int, "failed": [{email, unit_number, error}]}

     Raises:
          EmailNotConfiguredError: No sender given and BREVO_API_KEY is unset
     """
     if sender is None and not email_configured():
          raise EmailNotConfiguredError("BREVO_API_KEY not configured")
     deliver = sender or send_receipt_email
     rows = build_liquidaciones(db, prop.id, year, month)

     sent = 0
     failed: List[Dict[str, str]] = []
     for row in rows:
          email = row.get("resident_email")
          if not email or not (row.get("expense_due") or row.get("rent_due")):
               continue
          try:
               deliver(
                    email,
                    receipt_subject(row["unit_number"], year, month),
                    render_receipt(prop.name, row, year, month),
                    to_name=row.get("resident_name"),
               )
               sent += 1
          except (EmailDeliveryError, requests.RequestException) as e:
               logger.warning("Receipt for unit %s to %s failed: %s", row["unit_number"], email, e)
               failed.append({"email": email, "unit_number": row["unit_number"], "error": str(e)})

     logger.info(
          "Receipts for property %s (%s-%02d): %d sent, %d failed",
          prop.id, year, month, sent, len(failed)
     )
     return {"success": not failed, "sent": sent, "failed": failed}
