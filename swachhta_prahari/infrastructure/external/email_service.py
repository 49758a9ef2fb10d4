"""
Email delivery (async).
=======================

Sends one-time codes, manager credentials and generated reports over SMTP
with aiosmtplib. Every public method returns True on success and False on
failure; failures are logged and never raised to the caller.
"""
import logging
import os
from email.mime.application import MIMEApplication
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import List, Optional

import aiosmtplib

from ...core.config import get_settings

logger = logging.getLogger(__name__)


def _wrap_html(title: str, body_html: str) -> str:
    return f"""
<!DOCTYPE html>
<html>
<body style="font-family:Arial,sans-serif;background:#f9fafb;margin:0;padding:24px;">
  <div style="max-width:600px;margin:0 auto;background:#fff;border-radius:8px;overflow:hidden;">
    <div style="background:#1f2937;color:#fff;padding:20px;text-align:center;">
      <h1 style="margin:0;font-size:20px;">{title}</h1>
      <p style="margin:6px 0 0;opacity:0.8;">Environmental Monitoring System</p>
    </div>
    <div style="padding:20px;color:#333;">{body_html}</div>
    <div style="background:#374151;color:#fff;padding:12px;text-align:center;font-size:12px;">
      This is an automated message from Swachhta Prahari. Do not reply to this email.
    </div>
  </div>
</body>
</html>
"""


class EmailService:
    """SMTP mailer used by the auth, manager and report use cases"""

    async def send_otp(self, email: str, otp: str, purpose: str) -> bool:
        settings = get_settings()
        minutes = max(1, settings.otp_ttl_seconds // 60)
        body = (
            f"<p>Your one-time code for <strong>{purpose}</strong> is:</p>"
            f"<p style=\"font-size:28px;font-weight:bold;letter-spacing:4px;\">{otp}</p>"
            f"<p>The code expires in {minutes} minutes.</p>"
        )
        return await self._send(
            [email], "Swachhta Prahari verification code", _wrap_html("Verification Code", body)
        )

    async def send_credentials(self, email: str, name: str, username: str, password: str, role: str) -> bool:
        body = (
            f"<p>Hello {name},</p>"
            f"<p>An administrator created a <strong>{role}</strong> account for you.</p>"
            f"<p><strong>Username:</strong> {username}<br><strong>Password:</strong> {password}</p>"
            "<p>Please sign in and change your password.</p>"
        )
        return await self._send(
            [email], "Your Swachhta Prahari account", _wrap_html("Welcome to Swachhta Prahari", body)
        )

    async def send_report(
        self,
        recipients: List[str],
        report_type: str,
        period_label: str,
        summary: dict,
        attachment_path: Optional[str] = None,
    ) -> bool:
        cleanliness = summary.get("cleanlinessIndex") or {}
        body = (
            f"<h2>Report Summary</h2>"
            f"<p><strong>Period:</strong> {period_label}<br>"
            f"<strong>Report Type:</strong> {report_type.upper()}</p>"
            f"<ul>"
            f"<li>Total incidents: {summary.get('totalIncidents', 0)}</li>"
            f"<li>Resolved: {summary.get('resolvedIncidents', 0)}</li>"
            f"<li>Average response time: {summary.get('averageResponseTime', 0)} min</li>"
            f"<li>Cleanliness index: {round(cleanliness.get('overall', 0))}%</li>"
            f"</ul>"
            "<p>The detailed report is attached.</p>"
        )
        subject = f"Swachhta Prahari {report_type.upper()} Report - {period_label}"
        return await self._send(
            recipients, subject, _wrap_html("Swachhta Prahari Report", body), attachment_path
        )

    async def _send(
        self,
        recipients: List[str],
        subject: str,
        html: str,
        attachment_path: Optional[str] = None,
    ) -> bool:
        if not recipients:
            logger.warning("[email_service] No recipients, skip send")
            return False

        settings = get_settings()
        if not settings.smtp_host or not settings.smtp_user or not settings.smtp_password:
            logger.warning("[email_service] SMTP not configured")
            return False

        try:
            msg = MIMEMultipart("mixed")
            msg["Subject"] = subject
            msg["From"] = f"{settings.email_from_name} <{settings.email_from}>"
            msg["To"] = ", ".join(recipients)
            msg.attach(MIMEText(html, "html", "utf-8"))

            if attachment_path and os.path.exists(attachment_path):
                with open(attachment_path, "rb") as fh:
                    part = MIMEApplication(fh.read())
                part.add_header(
                    "Content-Disposition", "attachment", filename=os.path.basename(attachment_path)
                )
                msg.attach(part)

            await aiosmtplib.send(
                msg,
                sender=settings.email_from,
                recipients=recipients,
                hostname=settings.smtp_host,
                port=settings.smtp_port,
                username=settings.smtp_user,
                password=settings.smtp_password,
                use_tls=settings.smtp_use_tls,
            )
            logger.info("[email_service] Email '%s' sent to %s", subject, recipients)
            return True
        except Exception as e:
            logger.exception("[email_service] Failed to send email '%s': %s", subject, e)
            return False
