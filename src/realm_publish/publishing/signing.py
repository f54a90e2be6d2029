"""In-memory PGP signing configuration for publications."""

from __future__ import annotations

from realm_publish.core.constants import KEY_RING_LINE_SEPARATOR
from realm_publish.core.exceptions import SigningError
from realm_publish.core.logging import get_logger
from realm_publish.core.models import Publication, SigningMaterial
from realm_publish.project import PublicationContainer

LOGGER = get_logger(__name__)


def decode_key_ring(value: str) -> str:
    """Turn the single-line property form of an armored key back into lines."""
    return value.replace(KEY_RING_LINE_SEPARATOR, "\n")


def encode_key_ring(armored: str) -> str:
    """Collapse an armored key into the single-line form accepted by :func:`decode_key_ring`."""
    if KEY_RING_LINE_SEPARATOR in armored:
        raise SigningError(
            f"Armored key contains '{KEY_RING_LINE_SEPARATOR}' and cannot be encoded losslessly"
        )
    return armored.replace("\r\n", "\n").replace("\n", KEY_RING_LINE_SEPARATOR)


class SigningExtension:
    """Signing state of one project.

    ``required`` decides whether missing key material is fatal. Publications
    are signed whenever key material is present, required or not.
    """

    def __init__(self, *, required: bool = False) -> None:
        self.required = required
        self.material: SigningMaterial | None = None
        self._signed: list[str] = []

    def use_in_memory_pgp_keys(self, key_id: str, key_ring: str, password: str) -> None:
        self.material = SigningMaterial(key_id=key_id, key_ring=key_ring, password=password)

    @property
    def signatory(self) -> str | None:
        if self.material is None or not self.material.has_key:
            return None
        return self.material.key_id

    @property
    def signed_publications(self) -> list[str]:
        return list(self._signed)

    def sign(self, publications: PublicationContainer) -> None:
        """Sign every publication in the container, including later additions."""
        if self.required and self.signatory is None:
            raise SigningError("Signing is required but no secret key ring was supplied")
        publications.all(self._sign_publication)

    def _sign_publication(self, publication: Publication) -> None:
        signatory = self.signatory
        if signatory is None:
            LOGGER.debug("publish.signing_skipped", publication=publication.name)
            return
        publication.signatory = signatory
        self._signed.append(publication.name)

    def as_dict(self) -> dict[str, object]:
        return {
            "required": self.required,
            "key_id": self.material.key_id if self.material else None,
            "has_key": bool(self.material and self.material.has_key),
            "signed_publications": self.signed_publications,
        }
