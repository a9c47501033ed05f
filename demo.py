import dataclasses
import logging

from custodians.keyring import CustodianKeyring
from escrow.service import EscrowService
from sss.config import configure_logging, load_settings
from sss.shamir import combine_shares, split_secret, verify_shares
from sss.wire import RecoveredSecret, ShareBundle

logger = logging.getLogger("demo")


def main() -> None:
    settings = load_settings()
    configure_logging(settings)
    config = settings.threshold_config

    print("--- Split / combine ---")
    secret = bytes(range(1, 17)) + bytes(16)
    shares = split_secret(secret, config.threshold, config.total_shares)
    bundle = ShareBundle.from_shares(config.threshold, shares)
    print(bundle.to_json())

    restored = ShareBundle.from_json(bundle.to_json()).to_shares()
    subset = restored[-config.threshold :]
    print({"indices": [s.index for s in subset], "secret": RecoveredSecret.from_bytes(combine_shares(subset)).hex})
    print({"verified": verify_shares(restored, config.threshold)})

    print("--- Escrow ---")
    keyring = CustodianKeyring(settings.custodian_ids)
    escrow = EscrowService(keyring, config)
    sealed = escrow.seal("db-password", b"correct horse battery staple")
    quorum = settings.custodian_ids[-config.threshold :]
    print(escrow.open(sealed, quorum).decode("utf-8"))

    print("--- Reshare: old shares fail to open the NEW seal ---")
    resealed = escrow.reshare(sealed, quorum)
    stale = dict(resealed.wrapped_shares)
    first = settings.custodian_ids[0]
    stale[first] = sealed.wrapped_shares[first]
    try:
        escrow.open(
            dataclasses.replace(resealed, wrapped_shares=stale),
            settings.custodian_ids[: config.threshold],
        )
        print("UNEXPECTED: old share opened the new seal")
    except ValueError as e:
        logger.debug("stale share rejected: %s", e)
        print("OK: old share rejected")

    print(escrow.open(resealed, settings.custodian_ids[: config.threshold]).decode("utf-8"))


if __name__ == "__main__":
    main()
