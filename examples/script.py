import argparse
import logging
from pathlib import Path

import tomllib

from zkpairing.bilinear_pairings.model.model_definition import PairingModel
from zkpairing.bilinear_pairings.toy_47 import parameters
from zkpairing.elliptic_curves.ec_operations import EllipticCurve
from zkpairing.elliptic_curves.util import embedding_degree
from zkpairing.fields.prime_field import PrimeField
from zkpairing.fields.prime_field_extension import ExtensionField

logger = logging.getLogger(__name__)


def default_config() -> dict:
    """Configuration of the toy pairing over F_47."""
    return {
        "p": parameters.q,
        "modulus": parameters.MODULUS_FQ4,
        "a": parameters.a,
        "b": parameters.b,
        "r": parameters.r,
        "P": list(parameters.G1),
        "Q": list(parameters.G2),
    }


def load_config(config_path: Path | None) -> dict:
    config = default_config()
    if config_path is not None:
        with Path.open(config_path, "rb") as f:
            config.update(tomllib.load(f))
    return config


def model_setup(config: dict):
    """Build the field tower, the curve, the points and the pairing model described by `config`."""
    Fp = PrimeField(config["p"])  # noqa: N806
    Fq = ExtensionField(Fp, config["modulus"])  # noqa: N806
    curve = EllipticCurve(Fq, Fq.from_int(config["a"]), Fq.from_int(config["b"]))

    P_x, P_y = config["P"]  # noqa: N806
    Q_x, Q_y = config["Q"]  # noqa: N806
    P = curve.point(Fq.embed(P_x), Fq.embed(P_y))  # noqa: N806
    Q = curve.point(Q_x, Q_y)  # noqa: N806

    return Fp, Fq, curve, P, Q, PairingModel(field=Fq, curve=curve, r=config["r"])


parser = argparse.ArgumentParser(
    description="Compute the reduced Tate pairing of two points and check its bilinearity. \
        Without a configuration file, the toy pairing over F_47 is used."
)
parser.add_argument(
    "--config", type=str, help="TOML file describing p, modulus, a, b, r, P, Q (and optionally expected)"
)
parser.add_argument("--verbose", action="store_true", help="Print debug logs", default=False)

if __name__ == "__main__":
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    config = load_config(Path(args.config) if args.config is not None else None)
    Fp, Fq, curve, P, Q, model = model_setup(config)
    r = config["r"]

    k = embedding_degree(Fp, r)
    assert Fq.extension_degree == k, f"The field has degree {Fq.extension_degree}, the embedding degree is {k}"
    assert curve.is_zero(curve.scalar_mul(P, r)), "P is not in the r-torsion subgroup"
    assert curve.is_zero(curve.scalar_mul(Q, r)), "Q is not in the r-torsion subgroup"

    e = model.tate_pairing(P, Q)
    logger.info("Tate(P, Q) = %s", e)
    if "expected" in config:
        assert Fq.eq(e, config["expected"]), "Tate(P, Q) is not correctly computed"
    assert Fq.neq(e, Fq.one), "The pairing is degenerate"

    # Bilinearity
    P2, P12 = curve.scalar_mul(P, 2), curve.scalar_mul(P, 12)  # noqa: N816
    Q2, Q12 = curve.scalar_mul(Q, 2), curve.scalar_mul(Q, 12)  # noqa: N816
    e1 = model.tate_pairing(P2, Q12)
    e2 = Fq.exp(model.tate_pairing(P, Q12), 2)
    e3 = Fq.exp(model.tate_pairing(P2, Q), 12)
    e4 = Fq.exp(e, 24)
    e5 = model.tate_pairing(P12, Q2)
    assert Fq.eq(e1, e2) and Fq.eq(e1, e3) and Fq.eq(e1, e4) and Fq.eq(e1, e5), "The pairing is not bilinear"

    # Trivial evaluations
    assert Fq.eq(model.tate_pairing(curve.zero, Q), Fq.one), "Tate(0, Q) != 1"
    assert Fq.eq(model.tate_pairing(P, curve.zero), Fq.one), "Tate(P, 0) != 1"

    logger.info("All checks passed")
