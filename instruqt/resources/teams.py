"""Team public key and PII encryption for third-party-gated (TPG) tracks."""

import base64
import binascii
from urllib.parse import urlencode

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from pydantic import Field

from instruqt.exceptions import InstruqtError, PIIEncryptionError
from instruqt.graphql import Operation
from instruqt.models import InstruqtModel
from instruqt.resources.base import Resource

# The team key is a DER SubjectPublicKeyInfo wrapped in this PEM label
PEM_TYPE = "RSA PUBLIC KEY"


class Team(InstruqtModel):
    tpg_public_key: str = Field(default="", alias="tpgPublicKey")


class TeamResponse(InstruqtModel):
    team: Team = Field(default_factory=Team)


TEAM_QUERY = Operation(
    "GetTPGPublicKey",
    """
query GetTPGPublicKey($teamSlug: String!) {
  team(teamSlug: $teamSlug) {
    tpgPublicKey
  }
}
""",
    TeamResponse,
)


def _decode_pem(pem: str) -> bytes:
    """Extract the DER bytes of the first `RSA PUBLIC KEY` PEM block."""
    header = f"-----BEGIN {PEM_TYPE}-----"
    footer = f"-----END {PEM_TYPE}-----"
    start = pem.find(header)
    end = pem.find(footer, start)
    if start == -1 or end == -1:
        raise PIIEncryptionError("failed to decode PEM block containing public key")

    body = "".join(pem[start + len(header) : end].split())
    try:
        return base64.b64decode(body, validate=True)
    except binascii.Error as e:
        raise PIIEncryptionError("failed to decode PEM block containing public key") from e


def load_public_key(pem: str) -> rsa.RSAPublicKey:
    try:
        public_key = serialization.load_der_public_key(_decode_pem(pem))
    except ValueError as e:
        raise PIIEncryptionError(f"failed to parse DER encoded public key: {e}") from e

    if not isinstance(public_key, rsa.RSAPublicKey):
        raise PIIEncryptionError("not an RSA public key")
    return public_key


def encrypt_with_public_key(pem: str, data: str) -> str:
    """RSA-OAEP (SHA-256) encrypt `data` and return it base64 encoded."""
    public_key = load_public_key(pem)
    try:
        encrypted = public_key.encrypt(
            data.encode(),
            padding.OAEP(
                mgf=padding.MGF1(algorithm=hashes.SHA256()),
                algorithm=hashes.SHA256(),
                label=None,
            ),
        )
    except ValueError as e:
        raise PIIEncryptionError(f"failed to encrypt PII: {e}") from e
    return base64.b64encode(encrypted).decode()


class TeamsMixin(Resource):
    def get_tpg_public_key(self) -> str:
        """Get the PEM public key of the client's team."""
        try:
            q = self._query(TEAM_QUERY, {"teamSlug": self.team_slug})
        except InstruqtError as e:
            raise InstruqtError(f"failed to retrieve TPG Public Key: {e}") from e
        return q.team.tpg_public_key

    def encrypt_pii(self, encoded_pii: str) -> str:
        """Encrypt already form-encoded PII with the team public key."""
        public_key_pem = self.get_tpg_public_key()
        return encrypt_with_public_key(public_key_pem, encoded_pii)

    def encrypt_user_pii(self, first_name: str, last_name: str, email: str) -> str:
        pii = urlencode(sorted({"fn": first_name, "ln": last_name, "e": email}.items()))
        return self.encrypt_pii(pii)
