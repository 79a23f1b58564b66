# eos_benefits/utils/report_renderer.py

import calendar
from html import escape
from typing import Any, Dict

from eos_benefits.config import DEFAULT_CURRENCY
import logging

logger = logging.getLogger(__name__)

_STYLE = """
body { font-family: sans-serif; font-size: 10pt; }
h2 { margin-bottom: 4px; }
table { width: 100%; border-collapse: collapse; margin-top: 12px; }
th, td { border: 1px solid #999; padding: 4px 6px; }
th { background: #eee; }
td.amount { text-align: right; font-variant-numeric: tabular-nums; }
tr.total td { font-weight: bold; background: #f5f5f5; }
"""


def _amount(value: Any) -> str:
    return f"{value:,.2f}"


def render_provision_report_html(report_data: Dict[str, Any], currency: str = DEFAULT_CURRENCY) -> str:
    """Renders ReportManager.monthly_provision_report output as a standalone HTML page."""
    period = f"{calendar.month_name[report_data['month']]} {report_data['year']}"
    html = f"<html><head><meta charset='utf-8'><style>{_STYLE}</style></head><body>"
    html += f"<h2>ESB Monthly Provision Report</h2><div>Period: {escape(period)} ({escape(currency)})</div>"
    html += ("<table><thead><tr><th>No.</th><th>Name</th><th>Standard Accrual</th>"
             "<th>Salary Adjustment</th><th>Total Provision</th><th>Closing Balance</th></tr></thead><tbody>")

    if report_data["rows"]:
        for row in report_data["rows"]:
            html += (f"<tr><td>{escape(row.get('employee_number') or '-')}</td>"
                     f"<td>{escape(row.get('name') or '')}</td>"
                     f"<td class='amount'>{_amount(row['standard_accrual'])}</td>"
                     f"<td class='amount'>{_amount(row['adjustment_accrual'])}</td>"
                     f"<td class='amount'>{_amount(row['total_accrual'])}</td>"
                     f"<td class='amount'>{_amount(row['closing_balance'])}</td></tr>")
    else:
        html += "<tr><td colspan='6'>No employees in this report.</td></tr>"

    html += (f"<tr class='total'><td colspan='2'>Total</td>"
             f"<td class='amount'>{_amount(report_data['total_standard_accrual'])}</td>"
             f"<td class='amount'>{_amount(report_data['total_adjustment_accrual'])}</td>"
             f"<td class='amount'>{_amount(report_data['total_accrual'])}</td>"
             f"<td class='amount'>{_amount(report_data['total_closing_balance'])}</td></tr>")
    html += "</tbody></table></body></html>"
    return html


def export_provision_report_pdf(report_data: Dict[str, Any], file_path: str, currency: str = DEFAULT_CURRENCY) -> str:
    """Writes the provision report to a PDF file with WeasyPrint and returns the path."""
    from weasyprint import HTML

    html_content = render_provision_report_html(report_data, currency=currency)
    try:
        HTML(string=html_content).write_pdf(file_path)
    except Exception as e:
        logger.error(f"Failed to export provision report to PDF at {file_path}: {e}", exc_info=True)
        raise
    logger.info(f"Provision report for {report_data['year']}-{report_data['month']:02d} exported to {file_path}")
    return file_path
