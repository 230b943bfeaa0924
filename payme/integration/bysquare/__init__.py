"""QR Payload Encoder Package."""
from payme.integration.bysquare.base import BySquarePayment, QRPayloadEncoder
from payme.integration.bysquare.mock_encoder import MockQRPayloadEncoder
from payme.integration.bysquare.pay_by_square_encoder import PayBySquareEncoder

__all__ = ["BySquarePayment", "QRPayloadEncoder", "MockQRPayloadEncoder", "PayBySquareEncoder"]
