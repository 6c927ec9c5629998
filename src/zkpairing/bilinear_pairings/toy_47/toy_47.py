# Build pairing model for the toy curve over F_47

from zkpairing.bilinear_pairings.model.model_definition import PairingModel
from zkpairing.bilinear_pairings.toy_47.parameters import G1, G2, MODULUS_FQ4, a, b, q, r
from zkpairing.elliptic_curves.ec_operations import EllipticCurve
from zkpairing.fields.prime_field import PrimeField
from zkpairing.fields.prime_field_extension import ExtensionField

Fq = PrimeField(q)
Fq4 = ExtensionField(Fq, MODULUS_FQ4)

# The curve over F_q, where the first argument of the pairing lives
curve = EllipticCurve(Fq, a, b)
# The same curve over F_q^4, where the pairing is computed
curve_fq4 = EllipticCurve(Fq4, Fq4.from_int(a), Fq4.from_int(b))

g1 = curve.point(*G1)
g2 = curve_fq4.point(*G2)
# g1 seen as a point over F_q^4
g1_fq4 = curve_fq4.point(Fq4.embed(G1[0]), Fq4.embed(G1[1]))

toy_47 = PairingModel(field=Fq4, curve=curve_fq4, r=r)
