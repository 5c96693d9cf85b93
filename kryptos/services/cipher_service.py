import logging

from kryptos.core.config import Settings, get_settings
from kryptos.core.exceptions import TextTooLongError
from kryptos.models.schemas import CipherRequest, CipherResponse, Direction
from kryptos.services.engines.registry import CipherRegistry

logger = logging.getLogger(__name__)


class CipherService:
    """
    Runs cipher requests through the registered ciphers.

    Validates the request against the configured limits, builds the
    requested cipher from its key and applies it in the requested
    direction. Errors from key validation or the cipher itself propagate
    unchanged as KryptosError subclasses.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def process(self, request: CipherRequest) -> CipherResponse:
        """
        Encipher or decipher a request's text, as its direction says.

        Args:
            request: The cipher request

        Returns:
            CipherResponse with the transformed text

        Raises:
            TextTooLongError: If the text exceeds max_text_length
            CipherNotFoundError: If the cipher type is not registered
            InvalidKeyError: If the key is rejected
            KeyTooLargeError: If the key does not fit the text (Scytale)
        """
        if len(request.text) > self.settings.max_text_length:
            raise TextTooLongError(len(request.text), self.settings.max_text_length)

        cipher = CipherRegistry.create(request.cipher_type, request.key)

        if request.direction == Direction.DECIPHER:
            text = cipher.decipher(request.text)
        else:
            text = cipher.encipher(request.text)

        logger.debug(
            f"{request.direction.value} with {request.cipher_type.value}: "
            f"{len(request.text)} -> {len(text)} characters"
        )

        return CipherResponse(
            text=text,
            cipher_type=request.cipher_type,
            direction=request.direction,
            key_used=cipher.key,
        )

    def encipher(self, request: CipherRequest) -> CipherResponse:
        """Encipher the request's text, ignoring its direction."""
        return self.process(request.model_copy(update={"direction": Direction.ENCIPHER}))

    def decipher(self, request: CipherRequest) -> CipherResponse:
        """Decipher the request's text, ignoring its direction."""
        return self.process(request.model_copy(update={"direction": Direction.DECIPHER}))
