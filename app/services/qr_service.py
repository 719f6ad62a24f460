"""
QR code generation service
"""

import io
from urllib.parse import urlencode

import qrcode

from app.core.config import settings

class QRService:
    """Service for generating invite QR codes"""

    @staticmethod
    def get_invite_url(invite_code: str) -> str:
        """Link that pre-fills the invite code on the site's entry page"""
        return f"{settings.BASE_URL.rstrip('/')}/?{urlencode({'code': invite_code})}"

    @staticmethod
    def generate_invite_qr(invite_code: str, format: str = 'PNG') -> bytes:
        """Generate a QR code pointing at the invite link"""
        qr = qrcode.QRCode(
            version=1,
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=10,
            border=4,
        )
        qr.add_data(QRService.get_invite_url(invite_code))
        qr.make(fit=True)

        # Create QR code image
        img = qr.make_image(fill_color="black", back_color="white")

        # Convert to bytes
        buffer = io.BytesIO()
        img.save(buffer, format=format)

        return buffer.getvalue()
