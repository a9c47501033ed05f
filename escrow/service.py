import logging
import time

from custodians.keyring import CustodianKeyring
from escrow.models import SealedSecret, seal_aad
from sss.config import load_settings
from sss.errors import InsufficientShares
from sss.models import SecretShare, ThresholdConfig
from sss.shamir import verify_shares
from sss.threshold_cipher import create_threshold_encryption, decrypt_with_threshold

logger = logging.getLogger(__name__)


class EscrowService:
    """Key share i goes to the i-th custodian, wrapped under that custodian's key."""

    def __init__(self, keyring: CustodianKeyring, config: ThresholdConfig | None = None):
        if config is None:
            config = load_settings().threshold_config
        config.validate()
        if len(keyring.custodian_ids) != config.total_shares:
            raise ValueError(
                f"{len(keyring.custodian_ids)} custodians configured for {config.total_shares} shares"
            )
        self.keyring = keyring
        self.config = config

    def seal(
        self,
        label: str,
        secret: bytes,
        config: ThresholdConfig | None = None,
        version: int = 1,
    ) -> SealedSecret:
        config = (config or self.config).validate()
        if config.total_shares != len(self.keyring.custodian_ids):
            raise ValueError("total_shares must match the number of custodians")

        enc = create_threshold_encryption(secret, config.threshold, config.total_shares)
        aad = seal_aad(label, version)
        wrapped: dict[str, str] = {}
        for custodian_id, share in zip(self.keyring.custodian_ids, enc.key_shares, strict=True):
            wrapped[custodian_id] = self.keyring.wrap_share(custodian_id, share, aad=aad)

        sealed = SealedSecret(
            label=label,
            version=version,
            threshold=config.threshold,
            total_shares=config.total_shares,
            encrypted_secret=enc.encrypted_secret,
            wrapped_shares=wrapped,
            created_at=time.time(),
        )

        logger.info("sealed %r v%d as %d-of-%d", label, version, config.threshold, config.total_shares)
        return sealed

    def _collect(self, sealed: SealedSecret, custodian_ids: list[str]) -> list[SecretShare]:
        ids = list(dict.fromkeys(custodian_ids))
        for cid in ids:
            if cid not in sealed.wrapped_shares:
                raise KeyError(f"custodian {cid!r} holds no share of {sealed.label!r}")
        if len(ids) < sealed.threshold:
            raise InsufficientShares(f"{sealed.label!r} needs {sealed.threshold} custodians, got {len(ids)}")
        return [self.keyring.unwrap_share(cid, sealed.wrapped_shares[cid], aad=sealed.aad) for cid in ids]

    def open(self, sealed: SealedSecret, custodian_ids: list[str]) -> bytes:
        shares = self._collect(sealed, custodian_ids)
        if not verify_shares(shares, sealed.threshold):
            raise ValueError("key shares are inconsistent")
        logger.info("opened %r with custodians %s", sealed.label, ", ".join(custodian_ids))
        return decrypt_with_threshold(sealed.encrypted_secret, shares)

    def reshare(
        self,
        sealed: SealedSecret,
        custodian_ids: list[str],
        config: ThresholdConfig | None = None,
    ) -> SealedSecret:
        """Re-seal under a fresh key; shares of the old seal cannot open the new one."""
        secret = self.open(sealed, custodian_ids)
        if config is None:
            config = ThresholdConfig(threshold=sealed.threshold, total_shares=sealed.total_shares)
        return self.seal(sealed.label, secret, config=config, version=sealed.version + 1)
