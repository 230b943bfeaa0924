"""
PAY by square Encoder

Produces PAY by square payloads (the Slovak banking QR standard) through the
`pay-by-square` library.

See https://bysquare.com/pay-by-square/
"""
import logging

import pay_by_square

from payme.core.errors import QRPayloadError
from payme.integration.bysquare.base import BySquarePayment, QRPayloadEncoder

logger = logging.getLogger(__name__)


class PayBySquareEncoder(QRPayloadEncoder):
    """
    QR payload encoder backed by `pay_by_square.generate`.

    Usage:
        encoder = PayBySquareEncoder()
        payload = encoder.encode(payment)
    """

    def encode(self, payment: BySquarePayment) -> str:
        logger.debug(f"Encoding PAY by square payload for {payment.iban}")
        try:
            return pay_by_square.generate(
                amount=payment.amount,
                iban=payment.iban,
                currency=payment.currency_code,
                variable_symbol=payment.variable_symbol,
                specific_symbol=payment.specific_symbol,
                constant_symbol=payment.constant_symbol,
                note=payment.payment_note,
            )
        except Exception as e:
            logger.warning(f"PAY by square encoding failed: {e}")
            raise QRPayloadError(f"PAY by square encoding failed: {e}") from e
