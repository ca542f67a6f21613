"""HTML email bodies. Every interpolated value is HTML-escaped."""

from datetime import datetime
from html import escape
from typing import Optional


def _page(heading: str, body: str, signature: str = "HireHub Team") -> str:
    return f"""
    <html>
    <body style="font-family: Arial, sans-serif; color:#222;">
      <h2 style="color:#1b6ec2;">{escape(heading)}</h2>
      {body}
      <p>Best regards,<br/>{escape(signature)}</p>
    </body>
    </html>"""


def shortlisted(candidate_name: str, job_title: str, company_name: str,
                details_url: Optional[str] = None) -> str:
    link = ""
    if details_url:
        link = (
            f'<p><a href="{escape(details_url)}" style="background:#1b6ec2;color:#fff;'
            f'padding:8px 12px;border-radius:6px;text-decoration:none;">View application</a></p>'
        )
    body = (
        f"<p>Hi {escape(candidate_name)},</p>"
        f"<p>Congratulations, you have been shortlisted for <strong>{escape(job_title)}</strong> "
        f"at <strong>{escape(company_name)}</strong>.</p>"
        f"<p>Please check your application dashboard for next steps.</p>"
        f"{link}"
    )
    return _page(f"You are shortlisted for {job_title}", body)


def interview_scheduled(candidate_name: str, job_title: str, company_name: str,
                        interview_at: Optional[datetime] = None,
                        location_or_link: Optional[str] = None) -> str:
    when = format_datetime(interview_at) if interview_at else "to be confirmed"
    place = f"<p><strong>Details:</strong> {escape(location_or_link)}</p>" if location_or_link else ""
    body = (
        f"<p>Hi {escape(candidate_name)},</p>"
        f"<p>Your interview for <strong>{escape(job_title)}</strong> at "
        f"<strong>{escape(company_name)}</strong> has been scheduled.</p>"
        f"<p><strong>Date &amp; time:</strong> {escape(when)}</p>"
        f"{place}"
        f"<p>Please reply if you need to reschedule.</p>"
    )
    return _page(f"Interview scheduled for {job_title}", body, signature=f"{company_name} / HireHub")


def password_reset(full_name: str, reset_link: str, expire_hours: int) -> str:
    body = (
        f"<p>Hi {escape(full_name)},</p>"
        f"<p>We received a request to reset your HireHub password. "
        f"Click the link below to choose a new one. The link expires in {expire_hours} hours.</p>"
        f'<p><a href="{escape(reset_link)}">Reset your password</a></p>'
        f"<p>If you did not request this, you can ignore this email.</p>"
    )
    return _page("Reset your password", body)


def plain_message(message: str) -> str:
    """Escaped free text with newlines kept as <br/>."""
    return f"<p>{escape(message or '').replace(chr(10), '<br/>')}</p>"


def format_datetime(value: datetime) -> str:
    return value.strftime("%A, %d %B %Y %H:%M")
